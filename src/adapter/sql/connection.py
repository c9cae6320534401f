import os
import logging

from sqlalchemy import Engine, create_engine
from sqlalchemy.exc import ArgumentError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

# SQL echo goes through the 'sqlalchemy.engine' logger; keep it quiet unless asked
logging.getLogger('sqlalchemy.engine').setLevel(logging.WARNING)

DATABASE_URL = os.getenv('DATABASE_URL', 'sqlite:///./syntaxwear.db')
DATABASE_ECHO = os.getenv('DATABASE_ECHO', 'false').lower() in ('1', 'true', 'yes')

_engine_cache: Engine | None = None
_session_factory_cache: sessionmaker[Session] | None = None
_connection_failed = False


def reset_engine():
    global _engine_cache, _session_factory_cache, _connection_failed
    if _engine_cache is not None:
        _engine_cache.dispose()
    _engine_cache = None
    _session_factory_cache = None
    _connection_failed = False


def _engine_options(url: str) -> dict:
    """Driver-specific engine arguments."""
    if not url.startswith('sqlite'):
        return {
            'pool_pre_ping': True,  # Drop connections the server closed while idle
            'pool_size': 10,
            'max_overflow': 5,
            'pool_recycle': 1800,
        }

    # Repositories are called from worker threads (asyncio.to_thread)
    options: dict = {'connect_args': {'check_same_thread': False}}
    if url in ('sqlite://', 'sqlite:///:memory:'):
        # One shared connection, otherwise every session sees an empty database
        options['poolclass'] = StaticPool
    return options


def get_engine() -> Engine | None:
    """Get the SQLAlchemy engine, created once and cached.

    Engine creation does not open a connection; a bad URL or missing
    driver is treated as a configuration issue and not retried.

    Returns:
        Engine or None if the database URL cannot be used
    """
    global _engine_cache, _connection_failed

    if _engine_cache is not None:
        return _engine_cache

    if _connection_failed:
        return None

    if not DATABASE_URL:
        logger.error("[DATABASE] DATABASE_URL not configured.")
        _connection_failed = True
        return None

    try:
        _engine_cache = create_engine(
            DATABASE_URL,
            echo=DATABASE_ECHO,
            **_engine_options(DATABASE_URL),
        )
        logger.info("[DATABASE] Engine created", extra={"dialect": _engine_cache.dialect.name})
        return _engine_cache
    except (ArgumentError, ImportError, SQLAlchemyError) as e:
        logger.error(f"[DATABASE] Engine creation failed: {str(e)[:200]}")
        _connection_failed = True
        return None


def get_session_factory() -> sessionmaker[Session] | None:
    """Get the cached session factory bound to the engine, or None if unavailable."""
    global _session_factory_cache

    if _session_factory_cache is not None:
        return _session_factory_cache

    engine = get_engine()
    if engine is None:
        return None

    _session_factory_cache = sessionmaker(bind=engine, expire_on_commit=False)
    return _session_factory_cache
