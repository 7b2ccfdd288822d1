#!/usr/bin/env python3
"""
Standalone database initialization script.
Creates the recipe, meal_plan and meal_plan_entry tables in the configured database.
"""

import sys
import logging
from pathlib import Path

# Add parent directory to path to import app modules
sys.path.insert(0, str(Path(__file__).parent.parent))

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("init_db")


def main() -> int:
    from sqlalchemy import inspect
    from domain.models.database import engine, init_database

    try:
        init_database()
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        logger.exception("Database initialization error")
        return 1

    tables = inspect(engine).get_table_names()
    logger.info(f"Database ready with {len(tables)} tables: {', '.join(tables)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
