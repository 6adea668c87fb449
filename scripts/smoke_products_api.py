#!/usr/bin/env python3
"""
Smoke test for a running products facade: list, lookup by id, unknown id, bad id.

Start the API first (in another terminal):
  uvicorn src.api.main:app --host 127.0.0.1 --port 8000

Then run this script:
  python scripts/smoke_products_api.py
  python scripts/smoke_products_api.py --base-url http://127.0.0.1:8000 --product-id 2

If you see "Connection refused", the API is not running — start uvicorn as above.
"""

from __future__ import annotations

import argparse
import sys

import requests


def check(label: str, url: str, expected_status: int, timeout: int = 30) -> bool:
    print(f"{label}: GET {url}")
    try:
        r = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        print(f"   FAIL: {e}")
        if "Connection refused" in str(e) or "Failed to establish" in str(e):
            print("   → Start the API first: uvicorn src.api.main:app --host 127.0.0.1 --port 8000")
        return False

    ok = r.status_code == expected_status
    print(f"   status={r.status_code} expected={expected_status} {'OK' if ok else 'FAIL'}")
    if r.content:
        print(f"   body: {r.text[:300]}")
    print()
    return ok


def main() -> int:
    parser = argparse.ArgumentParser(description="Smoke test the products facade")
    parser.add_argument("--base-url", default="http://localhost:8000", help="API base URL")
    parser.add_argument("--product-id", type=int, default=1, help="Existing product id")
    parser.add_argument("--missing-id", type=int, default=999999, help="Product id that does not exist upstream")
    args = parser.parse_args()
    base = args.base_url.rstrip("/")

    print("=== Products facade smoke test ===\n")
    results = [
        check("1) list products", f"{base}/products", 200),
        check("2) product by id", f"{base}/products/{args.product_id}", 200),
        check("3) unknown product", f"{base}/products/{args.missing_id}", 404),
        check("4) invalid id", f"{base}/products/invalid", 400),
    ]

    passed = sum(results)
    print(f"=== {passed}/{len(results)} checks passed ===")
    return 0 if all(results) else 1


if __name__ == "__main__":
    sys.exit(main())
