"""Apply Alembic migrations from inside the deployed Lambda package."""

import io
import logging
from contextlib import contextmanager
from typing import Iterator

from alembic.config import Config as AlembicConfig
from sqlalchemy.engine import URL

from alembic import command
from core.config import Config, get_config
from core.db.postgres import database_credentials

logger = logging.getLogger(__name__)

DATABASE_URL_ATTRIBUTE = "database_url"


def database_url(config: Config) -> URL:
    """SQLAlchemy URL for the same database the PostgresStore connects to."""
    creds = database_credentials(config)
    return URL.create(
        "postgresql+psycopg",
        username=creds["user"],
        password=creds["password"],
        host=creds["host"],
        port=int(creds["port"]),
        database=creds["dbname"],
    )


@contextmanager
def _captured_alembic_log() -> Iterator[io.StringIO]:
    buffer = io.StringIO()
    handler = logging.StreamHandler(buffer)
    alembic_logger = logging.getLogger("alembic")
    alembic_logger.addHandler(handler)
    try:
        yield buffer
    finally:
        alembic_logger.removeHandler(handler)


def run_migrations(
    config: Config | None = None,
    ini_path: str = "/var/task/alembic.ini",
    script_location: str = "/var/task/alembic",
) -> dict[str, str]:
    """Upgrade to head. Credentials are resolved here and handed to env.py,
    so a warm process picks up a rotated secret."""
    url = database_url(config or get_config())

    alembic_cfg = AlembicConfig(ini_path)
    alembic_cfg.set_main_option("script_location", script_location)
    alembic_cfg.attributes[DATABASE_URL_ATTRIBUTE] = url

    with _captured_alembic_log() as output:
        try:
            command.upgrade(alembic_cfg, "head")
        except Exception:
            logger.exception("Migration to head failed on %s/%s", url.host, url.database)
            raise

    logger.info("Migrated %s/%s to head", url.host, url.database)
    return {"status": "success", "output": output.getvalue()}
