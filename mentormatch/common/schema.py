import importlib
import pkgutil

import mentormatch.entity
from mentormatch.common.base import Base
from mentormatch.common.logger import get_logger

logger = get_logger("schema")


def load_all_entities():
    """
    Import every module under mentormatch.entity.

    Importing these modules registers all SQLAlchemy model classes and their
    Table objects into Base.metadata, which create_all() relies on.
    """
    package = mentormatch.entity
    prefix = package.__name__ + "."

    for _, name, _ in pkgutil.iter_modules(package.__path__, prefix):
        logger.debug("Auto importing model: %s", name)
        importlib.import_module(name)


async def create_schema(engine, reset: bool = False):
    """
    Create all tables defined in Base.metadata.

    Args:
        engine (AsyncEngine): Engine to create the tables with.
        reset (bool): Drop every known table first.
    """
    load_all_entities()

    async with engine.begin() as conn:
        if reset:
            logger.info("Dropping all tables from Base.metadata...")
            await conn.run_sync(Base.metadata.drop_all)

        logger.info("Creating all tables from Base.metadata...")
        await conn.run_sync(Base.metadata.create_all)
