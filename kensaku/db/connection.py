"""
Database connection management for Kensaku.

One SQLAlchemy engine and session factory are kept per database file.
Every new DBAPI connection gets the ``similarity_distance`` SQL function
registered, so ranking queries can order by it.
"""

import logging
import threading
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from kensaku.settings import DB_PATH, DEBUG
from kensaku.similarity import SQL_FUNCTION_NAME, distance

logger = logging.getLogger(__name__)

_engines: Dict[str, Engine] = {}
_session_factories: Dict[str, sessionmaker] = {}
_lock = threading.Lock()

MEMORY_URL = "sqlite://"


def register_functions(dbapi_connection, connection_record=None):
    """Register Kensaku's SQL functions on a raw sqlite3 connection."""
    dbapi_connection.create_function(
        SQL_FUNCTION_NAME, 2, distance, deterministic=True
    )


def create_db_engine(url: str, echo: bool = DEBUG) -> Engine:
    """
    Create an engine with Kensaku's SQL functions installed.

    Args:
        url: SQLAlchemy database URL. ``sqlite://`` gives an in-memory
            database shared by all sessions of the engine.
        echo: Log emitted SQL.

    Returns:
        SQLAlchemy engine.
    """
    if url == MEMORY_URL:
        engine = create_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(url, echo=echo)
    event.listen(engine, "connect", register_functions)
    return engine


def get_db_path() -> Optional[str]:
    """Get the configured database path, or None if the file does not exist."""
    if DB_PATH.exists():
        return str(DB_PATH)
    return None


def get_engine(db_path: Optional[Union[str, Path]] = None) -> Engine:
    """
    Get the shared engine for a database file.

    Args:
        db_path: Path to the SQLite database file. Defaults to settings.DB_PATH.
    """
    return _get_bound(db_path)[0]


def get_session_factory(db_path: Optional[Union[str, Path]] = None) -> sessionmaker:
    """Get the shared session factory bound to a database file's engine."""
    return _get_bound(db_path)[1]


def _get_bound(db_path: Optional[Union[str, Path]]) -> Tuple[Engine, sessionmaker]:
    if db_path is None:
        db_path = DB_PATH
    key = str(Path(db_path).resolve())

    with _lock:
        engine = _engines.get(key)
        if engine is None:
            logger.debug(f"Opening database {key}")
            engine = create_db_engine(f"sqlite:///{key}")
            _engines[key] = engine
            _session_factories[key] = sessionmaker(bind=engine)
        return engine, _session_factories[key]


def get_session(db_path: Optional[Union[str, Path]] = None) -> Session:
    """
    Open a new session on a database file.

    Args:
        db_path: Path to the SQLite database file. Defaults to settings.DB_PATH.

    Returns:
        SQLAlchemy session. The caller closes it.
    """
    path = Path(db_path) if db_path is not None else DB_PATH
    if not path.exists():
        raise FileNotFoundError(f"Database not found: {path}")
    return get_session_factory(path)()


def dispose_all():
    """Dispose every cached engine and its pooled connections."""
    with _lock:
        for engine in _engines.values():
            engine.dispose()
        _engines.clear()
        _session_factories.clear()
