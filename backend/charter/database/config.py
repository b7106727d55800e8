"""
Record store connection management for the charter backend.

The store is a SQLite file next to the backend package unless DATABASE_URL
(or DB_TYPE with the DB_* server variables) points at MySQL or PostgreSQL.
Every service call runs in one session from ``get_session_context``, which
commits on success and rolls back on any error.

File-backed and server stores check a separate connection out of the pool
for each session, so one request's rollback never touches another request's
transaction and concurrent writers are serialized by the database itself.
An in-memory SQLite database lives on a single connection and is therefore
shared; it is meant for tests and one-off CLI runs.
"""

import logging
import os
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from .models import create_all_tables

logger = logging.getLogger(__name__)

DEFAULT_SQLITE_FILE = Path(__file__).resolve().parent.parent.parent / "charter.db"

# DB_TYPE -> (URL scheme, default port, default user, URL suffix)
SERVER_STORES = {
    'mysql': ('mysql+pymysql', '3306', 'root', '?charset=utf8mb4'),
    'mariadb': ('mysql+pymysql', '3306', 'root', '?charset=utf8mb4'),
    'postgresql': ('postgresql', '5432', 'postgres', ''),
}


def database_url_from_env() -> str:
    """
    Resolve the store URL from the environment.

    Environment variables:
    - DATABASE_URL: Complete database URL (takes precedence)
    - DB_TYPE: sqlite (default), mysql, mariadb or postgresql
    - DB_NAME: SQLite file name, or the server database name (default: charter)
    - DB_HOST, DB_PORT, DB_USER, DB_PASSWORD: Server connection settings

    Raises:
        ValueError: If DB_TYPE names an unsupported store
    """
    url = os.getenv('DATABASE_URL')
    if url:
        return url

    store = os.getenv('DB_TYPE', 'sqlite').lower()
    if store == 'sqlite':
        name = os.getenv('DB_NAME')
        path = DEFAULT_SQLITE_FILE.with_name(name) if name else DEFAULT_SQLITE_FILE
        return f"sqlite:///{path}"

    if store not in SERVER_STORES:
        raise ValueError(f"Unsupported database type: {store}")

    scheme, port, user, suffix = SERVER_STORES[store]
    credentials = f"{os.getenv('DB_USER', user)}:{os.getenv('DB_PASSWORD', '')}"
    location = f"{os.getenv('DB_HOST', 'localhost')}:{os.getenv('DB_PORT', port)}"
    return f"{scheme}://{credentials}@{location}/{os.getenv('DB_NAME', 'charter')}{suffix}"


def is_in_memory_sqlite(url: str) -> bool:
    return url in ('sqlite://', 'sqlite:///:memory:') or 'mode=memory' in url


class DatabaseConfig:
    """
    Engine and session factory for the charter record store.

    Built once at startup and injected into every record service. The engine
    is created lazily on first use.

    Args:
        database_url: Store URL; resolved from the environment when omitted
        echo: Log every SQL statement
    """

    def __init__(self, database_url: Optional[str] = None, echo: bool = False):
        self.database_url = database_url or database_url_from_env()
        self.echo = echo
        self.db_type = self._detect_database_type()
        self.engine_kwargs = self._get_engine_kwargs()
        self.engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None

        logger.info(f"Record store configured for {self.db_type}")

    @property
    def in_memory(self) -> bool:
        return self.db_type == 'sqlite' and is_in_memory_sqlite(self.database_url)

    @property
    def is_initialized(self) -> bool:
        return self.engine is not None

    def _detect_database_type(self) -> str:
        for prefix in ('sqlite', 'mysql', 'postgresql'):
            if self.database_url.startswith(prefix):
                return prefix
        return 'unknown'

    def _get_engine_kwargs(self) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {'echo': self.echo}

        if self.db_type == 'sqlite':
            # Pooled connections are handed between API worker threads
            kwargs['connect_args'] = {'check_same_thread': False, 'timeout': 30}
            if self.in_memory:
                # The database exists only on its one connection
                kwargs['poolclass'] = StaticPool
        elif self.db_type in ('mysql', 'postgresql'):
            kwargs.update({
                'pool_size': int(os.getenv('DB_POOL_SIZE', '10')),
                'max_overflow': int(os.getenv('DB_MAX_OVERFLOW', '20')),
                'pool_recycle': int(os.getenv('DB_POOL_RECYCLE', '3600')),
                'pool_pre_ping': True,
            })

        return kwargs

    def initialize(self) -> None:
        """
        Create the engine, check connectivity and build the session factory.

        Raises:
            SQLAlchemyError: If the store cannot be reached
        """
        if self.is_initialized:
            return

        engine = create_engine(self.database_url, **self.engine_kwargs)
        if self.db_type == 'sqlite':
            event.listen(engine, 'connect', _enable_sqlite_foreign_keys)

        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except Exception as e:
            engine.dispose()
            logger.error(f"Failed to open record store {self.db_type}: {e}")
            raise SQLAlchemyError(f"Database initialization failed: {e}")

        self.engine = engine
        self._session_factory = sessionmaker(
            bind=engine,
            autoflush=False,
            expire_on_commit=False,  # services return models built after commit
        )
        logger.info(f"Record store ready ({self.db_type})")

    def create_tables(self) -> None:
        """Create any missing charter tables."""
        self.initialize()
        create_all_tables(self.engine)
        logger.info("Charter tables created")

    @contextmanager
    def get_session_context(self) -> Iterator[Session]:
        """
        One unit of work: commit when the block succeeds, roll back otherwise.

        Constraint violations are logged at debug level only; the services
        turn them into validation errors for the caller.
        """
        self.initialize()
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except IntegrityError as e:
            session.rollback()
            logger.debug(f"Constraint violation rolled back: {e.orig}")
            raise
        except SQLAlchemyError as e:
            session.rollback()
            logger.error(f"Database session error: {e}")
            raise
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def close(self) -> None:
        """Dispose of pooled connections."""
        if self.engine is not None:
            self.engine.dispose()
            self.engine = None
            self._session_factory = None
            logger.info("Record store connections closed")


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def initialize_database(
    database_url: Optional[str] = None, echo: bool = False, create_tables: bool = True
) -> DatabaseConfig:
    """Build and initialize a DatabaseConfig, creating tables by default."""
    db_config = DatabaseConfig(database_url=database_url, echo=echo)
    db_config.initialize()

    if create_tables:
        db_config.create_tables()

    return db_config


__all__ = [
    'DatabaseConfig',
    'database_url_from_env',
    'initialize_database',
]
