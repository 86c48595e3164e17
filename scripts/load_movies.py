#!/usr/bin/env python3
"""Load the movie CSV into the database and print award intervals.

Usage:
    python scripts/load_movies.py path/to/movielist.csv [--db data/razzie.db]

This script:
1. Initializes the database
2. Replaces stored movies with the CSV contents
3. Prints the min/max producer award intervals as JSON
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from razzie.aggregation.intervals import summarize_award_intervals  # noqa: E402
from razzie.config import DEFAULT_DB_PATH, configure_logging  # noqa: E402
from razzie.db.session import get_db_session, init_db  # noqa: E402
from razzie.errors import RazzieError  # noqa: E402
from razzie.ingestion.csv_loader import load_csv_into_db  # noqa: E402


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("csv_path", type=Path, help="Semicolon-delimited movie CSV")
    parser.add_argument("--db", type=Path, default=DEFAULT_DB_PATH, help="SQLite database path")
    args = parser.parse_args()

    configure_logging()
    init_db(args.db)

    try:
        with get_db_session(args.db) as session:
            load_csv_into_db(session, args.csv_path)
    except RazzieError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    with get_db_session(args.db) as session:
        result = summarize_award_intervals(session)

    print(json.dumps(result.model_dump(by_alias=True), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
