import argparse
import asyncio

from mentormatch.common.database import Database
from mentormatch.common.logger import get_logger
from mentormatch.common.schema import create_schema

logger = get_logger("init_db")


async def init_database(reset: bool):
    """
    Create the schema in the database named by DATABASE_URL.

    The engine is created through the Database wrapper and disposed
    afterwards to release its connections.
    """
    db = Database(echo=False)
    try:
        await create_schema(db.get_engine(), reset=reset)
    finally:
        await db.close()

    logger.info("Database initialization complete.")


def main():
    """
    Main entrypoint for creating the database schema.

    The async work runs through asyncio.run(), which creates and closes a
    dedicated event loop.
    """
    parser = argparse.ArgumentParser(description="Create the MentorMatch schema.")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Drop existing tables before creating them.",
    )
    args = parser.parse_args()

    logger.info("Initializing database tables...")
    asyncio.run(init_database(reset=args.reset))


if __name__ == "__main__":
    main()
