"""
Configuration loader for the DummyJSON products facade
"""

import os
import yaml
from pathlib import Path
from typing import Any, Dict, Optional
from pydantic import BaseModel, Field, ValidationError, field_validator
import logging

logger = logging.getLogger(__name__)

BASE_URL_ENV = "DUMMYJSON_API_BASE_URL"
TIMEOUT_ENV = "DUMMYJSON_API_TIMEOUT_SECONDS"


class DummyJSONConfig(BaseModel):
    """Upstream catalogue configuration"""

    model_config = {"frozen": True}

    base_url: str
    timeout_seconds: float = Field(default=10.0, gt=0.0, le=300.0)

    @field_validator("base_url")
    @classmethod
    def _strip_base_url(cls, value: str) -> str:
        value = (value or "").strip().rstrip("/")
        if not value:
            raise ValueError("base_url must not be empty")
        return value


def _env_overrides() -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    base_url = os.getenv(BASE_URL_ENV, "").strip()
    if base_url:
        overrides["base_url"] = base_url
    timeout = os.getenv(TIMEOUT_ENV, "").strip()
    if timeout:
        overrides["timeout_seconds"] = timeout
    return overrides


def load_dummyjson_config(config_path: Optional[Path] = None) -> DummyJSONConfig:
    """
    Load and validate the upstream configuration from YAML, then apply env overrides

    Args:
        config_path: Path to config file. Defaults to config/dummyjson_config.yml

    Returns:
        Validated DummyJSONConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    if config_path is None:
        config_path = Path(__file__).parent.parent.parent / "config" / "dummyjson_config.yml"

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        config_data = yaml.safe_load(f) or {}

    section = dict(config_data.get("dummyjson") or {})
    section.update(_env_overrides())

    try:
        config = DummyJSONConfig(**section)
        logger.info(f"Successfully loaded config from {config_path} (base_url={config.base_url})")
        return config
    except ValidationError as e:
        logger.error(f"Config validation failed: {e}")
        raise
