"""
Environment-keyed database configuration.

development and test use a single PostgreSQL database on RDS. production is
split into several logical SQLite databases (primary, cache, queue, cable).
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, Engine
from sqlalchemy.orm import sessionmaker

from .config import Settings


POOL_SIZE = 5
CONNECT_TIMEOUT = 5  # seconds


@dataclass(frozen=True)
class DatabaseConfig:
    """Connection details for one logical database."""
    adapter: str
    database: str


DATABASES: Dict[str, Dict[str, DatabaseConfig]] = {
    'development': {
        'primary': DatabaseConfig('postgresql', 'recipe_db_dev'),
    },
    'test': {
        'primary': DatabaseConfig('postgresql', 'recipe_db_test'),
    },
    'production': {
        'primary': DatabaseConfig('sqlite', 'production.sqlite3'),
        'cache': DatabaseConfig('sqlite', 'production_cache.sqlite3'),
        'queue': DatabaseConfig('sqlite', 'production_queue.sqlite3'),
        'cable': DatabaseConfig('sqlite', 'production_cable.sqlite3'),
    },
}


def database_config(env: str, name: str = 'primary') -> DatabaseConfig:
    """
    Look up the configuration of a logical database.

    Raises:
        KeyError: If the environment or logical database is not configured
    """
    if env not in DATABASES:
        raise KeyError(f"Unknown environment {env!r} (expected one of {sorted(DATABASES)})")
    databases = DATABASES[env]
    if name not in databases:
        raise KeyError(f"No {name!r} database configured for {env!r} (have {sorted(databases)})")
    return databases[name]


def database_url(config: DatabaseConfig, settings: Optional[Settings] = None):
    """Build the SQLAlchemy URL for a database config."""
    settings = settings or Settings()
    if config.adapter == 'sqlite':
        return f"sqlite:///{Path(settings.storage_dir) / config.database}"
    return URL.create(
        'postgresql',
        username=settings.rds_username or None,
        password=settings.rds_password or None,
        host=settings.rds_hostname,
        port=settings.rds_port,
        database=config.database,
    )


def enable_sqlite_foreign_keys(dbapi_conn, connection_record):
    """Enable foreign key support for SQLite."""
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(
    env: Optional[str] = None,
    name: str = 'primary',
    url: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> Engine:
    """
    Create an engine for a logical database.

    Args:
        env: Environment name, defaults to APP_ENV
        name: Logical database name
        url: Explicit connection string, bypasses the environment lookup
        settings: Settings instance, read from the environment if None

    Returns:
        SQLAlchemy engine
    """
    settings = settings or Settings()
    if url is None:
        config = database_config(env or settings.app_env, name)
        url = database_url(config, settings)
        if config.adapter == 'sqlite':
            Path(settings.storage_dir).mkdir(parents=True, exist_ok=True)

    if str(url).startswith('sqlite'):
        engine = create_engine(url, echo=False)
        event.listen(engine, "connect", enable_sqlite_foreign_keys)
    else:
        engine = create_engine(
            url,
            echo=False,
            pool_size=POOL_SIZE,
            pool_pre_ping=True,
            connect_args={'connect_timeout': CONNECT_TIMEOUT},
        )
    return engine


def session_factory(engine: Engine) -> sessionmaker:
    """Create a session factory bound to ``engine``."""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)
