"""
Create the application tables in the primary database.
Safe to run repeatedly: existing tables are left untouched.

Usage:
    python -m reel_scraper.migrate_database              # APP_ENV environment
    python -m reel_scraper.migrate_database production   # Explicit environment
"""

import sys
from typing import List, Optional

from sqlalchemy import inspect
from sqlalchemy.engine import Engine

from .database import create_db_engine
from .db_models import Base


def migrate(engine: Engine) -> List[str]:
    """
    Create any missing tables.

    Args:
        engine: Engine for the primary database

    Returns:
        Names of the tables that were created
    """
    existing = set(inspect(engine).get_table_names())
    Base.metadata.create_all(engine)
    created = [name for name in Base.metadata.tables if name not in existing]

    for name in Base.metadata.tables:
        status = "Created" if name in created else "Skipped (exists)"
        print(f"  {status}: {name}")
    return created


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    env = argv[0] if argv else None

    print("=" * 50)
    print(f"Database Migration ({env or 'APP_ENV'})")
    print("=" * 50)

    try:
        engine = create_db_engine(env)
    except KeyError as e:
        print(f"Error: {e.args[0]}")
        return 1

    created = migrate(engine)
    engine.dispose()
    print(f"\nMigration complete: {len(created)} table(s) created")
    return 0


if __name__ == "__main__":
    sys.exit(main())
