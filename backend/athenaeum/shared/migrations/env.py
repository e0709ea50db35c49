# pylint: skip-file
# ruff: noqa
"""
Alembic Environment Configuration

Configures Alembic for async SQLAlchemy. Supports online (connected) and
offline (SQL generation) modes.

Note: alembic.context and alembic.op are runtime proxies populated while a
migration runs; they cannot be statically analyzed.
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config

from alembic import context

from athenaeum.config.settings import settings
from athenaeum.shared.models.base import Base

# Importing the models registers their tables on Base.metadata,
# which autogenerate compares against the database.
from athenaeum.shared.models import (
    BiographyEntry,
    BiographyAnnex,
    Article,
    ResearchNote,
    GlossaryTerm,
    DialogueTranscript,
    CatalogItem,
)

REGISTERED_MODELS = (
    BiographyEntry,
    BiographyAnnex,
    Article,
    ResearchNote,
    GlossaryTerm,
    DialogueTranscript,
    CatalogItem,
)

# Alembic Config object - provides access to .ini file values
config = context.config

# Database URL comes from settings, not alembic.ini
config.set_main_option("sqlalchemy.url", settings.DATABASE_URL)

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    """
    Run migrations in 'offline' mode (emit SQL without a connection).

    Usage:
        alembic upgrade head --sql > migration.sql
    """
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    """Run migrations on an open connection."""
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        compare_type=True,
        compare_server_default=True,
        # SQLite needs batch mode for ALTER TABLE
        render_as_batch=connection.dialect.name == "sqlite",
    )

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    """Create an async engine and run migrations through it."""
    connectable = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


def run_migrations_online() -> None:
    """Run migrations in 'online' mode."""
    asyncio.run(run_async_migrations())


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
