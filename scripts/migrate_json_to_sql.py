"""One-off migration script: JSON document (data.json) -> SQL tables."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Make the campus package importable when run directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from campus.core.config import get_settings  # noqa: E402
from campus.repositories.json_storage import JsonDocumentStore  # noqa: E402
from campus.repositories.sql_storage import SQLDocumentStore  # noqa: E402


def migrate(source: Path, database_url: str) -> dict:
    """Copy every record as-is; duplicate or missing ids are carried over unchanged."""
    if not source.exists():
        raise SystemExit(f"File not found: {source}")
    db = JsonDocumentStore(source).load()
    target = SQLDocumentStore(database_url)
    try:
        with target.locked():
            if not target.save(db):
                raise SystemExit("Failed to write the SQL store")
    finally:
        target.dispose()
    return {name: len(items) for name, items in db.items()}


if __name__ == "__main__":
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Copy the JSON document into a SQL database")
    ap.add_argument("--source", type=Path, default=settings.data_file, help="JSON document path")
    ap.add_argument("--database-url", default=settings.database_url, help="SQLAlchemy URL (default: DATABASE_URL)")
    args = ap.parse_args()
    counts = migrate(args.source, args.database_url)
    print("JSON data migrated to SQL successfully.")
    for name, count in counts.items():
        print(f"  {name}: {count}")
