"""Alembic environment: targets the Voyago schema on the configured database."""

import sys
from logging.config import fileConfig
from pathlib import Path

from sqlalchemy import create_engine, pool
from sqlalchemy.engine import URL

from alembic import context

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.config import get_config  # noqa: E402
from core.db import Base  # noqa: E402
from core.services.migration import DATABASE_URL_ATTRIBUTE, database_url  # noqa: E402

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)

target_metadata = Base.metadata


def _target_url() -> URL:
    # run_migrations() passes a freshly resolved URL; the alembic CLI falls back to config
    url = config.attributes.get(DATABASE_URL_ATTRIBUTE)
    return url if url is not None else database_url(get_config())


def run_migrations_offline() -> None:
    context.configure(
        url=_target_url().render_as_string(hide_password=False),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable = create_engine(_target_url(), poolclass=pool.NullPool)
    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
