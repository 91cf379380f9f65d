#!/usr/bin/env python3
"""
Add a bookable resource to the configured store.

Usage:
  python scripts/add_resource.py --name "Lab 3" --type "Computer Lab" --building "Block C" \
      [--capacity 40] [--facility Wi-Fi --facility Projector] [--unavailable]
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Make the campus package importable when run directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from campus.core.config import get_settings  # noqa: E402
from campus.repositories import build_store  # noqa: E402
from campus.services.resource_service import ResourceService  # noqa: E402


def main() -> None:
    ap = argparse.ArgumentParser(description="Add a campus resource")
    ap.add_argument("--name", required=True, help="Display name (e.g. 'Study Room 204')")
    ap.add_argument("--type", required=True, help="Category label (e.g. 'Study Room')")
    ap.add_argument("--building", default="", help="Building name")
    ap.add_argument("--capacity", type=int, default=0, help="Number of people")
    ap.add_argument("--facility", action="append", default=[], help="Capability tag (repeatable)")
    ap.add_argument("--unavailable", action="store_true", help="Mark as not available")
    args = ap.parse_args()

    name = (args.name or "").strip()
    if not name:
        raise SystemExit("Name must not be empty")

    service = ResourceService(build_store(get_settings()))
    resource = service.create(
        {
            "name": name,
            "type": (args.type or "").strip(),
            "building": (args.building or "").strip(),
            "capacity": args.capacity,
            "facilities": [f.strip() for f in args.facility if f.strip()],
            "available": not args.unavailable,
        }
    )
    print("OK: resource added")
    print(f"  ID: {resource['id']}")
    print(f"  Name: {resource['name']}")
    print(f"  Type: {resource['type']}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
