"""Help article table definition and pooled engine construction."""

import logging

from sqlalchemy import (
    Column,
    DateTime,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    create_engine,
)
from sqlalchemy.engine import URL, Engine

from helpchat.config import Settings

logger = logging.getLogger(__name__)

TABLE_NAME = "help_articles"

metadata = MetaData()

help_articles = Table(
    TABLE_NAME,
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(255), nullable=False),
    Column("content", Text, nullable=False),
    Column("keywords", String(512), nullable=True),
    Column("last_updated", DateTime, nullable=False),
)


def build_database_url(settings: Settings) -> URL:
    return URL.create(
        "mysql+pymysql",
        username=settings.db_user,
        password=settings.db_password or None,
        host=settings.db_host,
        port=settings.db_port,
        database=settings.db_database,
    )


def pool_options(settings: Settings) -> dict:
    """Bounded pool: checkout waits, without a deadline, once all `db_pool_size` connections are in use."""
    return {
        "pool_size": settings.db_pool_size,
        "max_overflow": 0,
        "pool_timeout": None,
        "pool_pre_ping": True,
    }


def create_db_engine(settings: Settings) -> Engine:
    url = build_database_url(settings)
    logger.info(
        f"Creating database pool | host={settings.db_host} | port={settings.db_port} "
        f"| database={settings.db_database} | pool_size={settings.db_pool_size}"
    )
    return create_engine(url, **pool_options(settings))
