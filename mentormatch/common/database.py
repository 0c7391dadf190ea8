import contextlib
import os
from typing import AsyncIterator

from sqlalchemy import event
from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from mentormatch.common.environment_constants import DATABASE_URL
from mentormatch.common.errors import TransientError


class Database:
    def __init__(self, database_url: str | None = None, echo=False):
        """
        Initialize a Database instance.

        Args:
            database_url (str | None): SQLAlchemy async URL. Falls back to the
                DATABASE_URL environment variable when omitted.
            echo (bool): If True, SQLAlchemy will output executed SQL statements.
        """
        self.database_url = database_url or os.getenv(DATABASE_URL)
        if not self.database_url:
            raise ValueError("DATABASE_URL must be set")

        engine_kwargs = {"echo": echo}
        is_sqlite = self.database_url.startswith("sqlite")
        if is_sqlite and (
            ":memory:" in self.database_url or self.database_url.endswith("://")
        ):
            # Every connection must see the same in-memory database.
            engine_kwargs["poolclass"] = StaticPool

        self._engine = create_async_engine(self.database_url, **engine_kwargs)
        if is_sqlite:
            self._enable_sqlite_savepoints()

        self._session_factory = async_sessionmaker(
            bind=self._engine,
            autoflush=False,
            expire_on_commit=False,
        )

    def _enable_sqlite_savepoints(self):
        """
        Let SQLAlchemy own BEGIN on SQLite so SAVEPOINT works.

        The sqlite3 driver otherwise starts and ends transactions on its own,
        which breaks nested transactions and the per-request savepoints.
        """
        sync_engine = self._engine.sync_engine

        @event.listens_for(sync_engine, "connect")
        def _on_connect(dbapi_connection, connection_record):
            dbapi_connection.isolation_level = None
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        @event.listens_for(sync_engine, "begin")
        def _on_begin(conn):
            conn.exec_driver_sql("BEGIN")

    def get_engine(self):
        """
        Expose the underlying SQLAlchemy async engine.

        This is usually needed only for schema creation and test fixtures.
        """
        return self._engine

    async def close(self):
        """
        Dispose the database engine.

        Typically called on application shutdown to cleanly close connection pools.
        """
        await self._engine.dispose()

    @contextlib.asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Provide a transactional session context manager.

        This handles session lifecycle automatically:
        - create session
        - yield it to the caller
        - rollback on error
        - close session at the end

        Connection-level failures are re-raised as TransientError so the
        boundary can tell them apart from domain errors. Services commit
        explicitly; nothing is committed here.
        """
        session: AsyncSession = self._session_factory()
        try:
            yield session
        except (OperationalError, InterfaceError) as e:
            await session.rollback()
            raise TransientError("The datastore is temporarily unavailable.") from e
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
