"""
Relational Store - MySQL or PostgreSQL through SQLAlchemy Core.

Holds notices, applicants and inquiries. One engine (with its connection
pool) per process, kept alive by a ConnectionSupervisor. Queries are raw
parameterized SQL; rows come back as plain dicts.

Every query fails fast with ConnectivityError while the supervisor is not
CONNECTED. There is no queueing during a reconnect.
"""
import asyncio
from contextlib import contextmanager
from typing import Callable, Optional

from loguru import logger
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import (
    DataError,
    DBAPIError,
    IntegrityError,
    InterfaceError,
    OperationalError,
    SQLAlchemyError,
)

from app.core.config import Settings
from app.core.exceptions import ConnectivityError, ConstraintError, StoreError
from app.db.supervisor import ConnectionSupervisor, RetryPolicy


def is_retryable_connect_error(exc: Exception) -> bool:
    """
    Errors worth another connect attempt: server down, refused, dropped,
    timed out. Anything else (bad URL, missing driver) is fatal.
    """
    if isinstance(exc, DBAPIError):
        return exc.connection_invalidated or isinstance(exc, (OperationalError, InterfaceError))
    return isinstance(exc, (ConnectionError, TimeoutError))


class RelationalStore:

    def __init__(
        self,
        url: str,
        policy: Optional[RetryPolicy] = None,
        on_fatal: Optional[Callable[[Exception], None]] = None,
        sleep=asyncio.sleep,
        **engine_kwargs,
    ):
        self.url = url
        self._engine_kwargs = engine_kwargs
        self.engine: Optional[Engine] = None
        self.supervisor = ConnectionSupervisor(
            connect=self._open,
            disconnect=self._close,
            is_retryable=is_retryable_connect_error,
            policy=policy,
            on_fatal=on_fatal,
            sleep=sleep,
            name="관리자 DB",
        )

    def _open(self) -> None:
        if self.engine is None:
            self.engine = create_engine(self.url, **self._engine_kwargs)
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    def _close(self) -> None:
        # dispose() drops pooled connections; the engine itself stays usable
        if self.engine is not None:
            self.engine.dispose()

    @contextmanager
    def connection(self):
        """
        Connection inside a transaction, committed on exit.
        Usage:
            with store.connection() as conn:
                conn.execute(text("DELETE FROM notices WHERE id = :id"), {"id": 1})
        """
        if not self.supervisor.is_connected:
            raise ConnectivityError()
        try:
            conn: Connection = self.engine.connect()
        except SQLAlchemyError as exc:
            logger.error(f"Could not get a database connection: {exc}")
            self.supervisor.notify_disconnect(exc)
            raise ConnectivityError() from exc
        try:
            with conn.begin():
                yield conn
        except SQLAlchemyError as exc:
            raise self._translate(exc) from exc
        finally:
            conn.close()

    def _translate(self, exc: SQLAlchemyError) -> StoreError:
        logger.error(f"Query failed: {exc}")
        if isinstance(exc, DBAPIError) and exc.connection_invalidated:
            self.supervisor.notify_disconnect(exc)
            return ConnectivityError()
        if isinstance(exc, (IntegrityError, DataError)):
            return ConstraintError()
        return StoreError()

    def fetch_all(self, sql: str, params: dict = None) -> list:
        """Run a SELECT and return every row as a dict."""
        with self.connection() as conn:
            result = conn.execute(text(sql), params or {})
            return [dict(row._mapping) for row in result]

    def fetch_one(self, sql: str, params: dict = None) -> Optional[dict]:
        with self.connection() as conn:
            row = conn.execute(text(sql), params or {}).fetchone()
            return dict(row._mapping) if row is not None else None

    def execute(self, sql: str, params: dict = None) -> int:
        """Run an INSERT/UPDATE/DELETE and return the affected row count."""
        with self.connection() as conn:
            return conn.execute(text(sql), params or {}).rowcount

    def ping(self) -> bool:
        """True if the database answers SELECT 1."""
        try:
            return self.fetch_one("SELECT 1 AS ok") is not None
        except StoreError:
            return False


def create_relational_store(settings: Settings, on_fatal=None) -> RelationalStore:
    """Build the process-wide store from settings."""
    return RelationalStore(
        settings.database_url,
        policy=RetryPolicy(delay=settings.db_reconnect_delay),
        on_fatal=on_fatal,
        # pool_size=5: keep 5 connections ready, max_overflow=10 under load
        pool_size=5,
        max_overflow=10,
        pool_pre_ping=True,
        connect_args=settings.connect_args,
        echo=settings.debug,  # Log SQL queries in debug mode
    )
