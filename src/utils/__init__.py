"""
Utility modules for the products facade
"""
from .config_loader import DummyJSONConfig, load_dummyjson_config

__all__ = [
    'DummyJSONConfig',
    'load_dummyjson_config',
]
