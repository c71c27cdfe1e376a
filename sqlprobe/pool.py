"""Optional pooled access through DATABASE_URL.

Not used by any route. ``create_pool`` builds a SQLAlchemy engine (which owns
the connection pool) and ``test_connection`` runs a ``SELECT 1`` liveness
check against it.
"""
import logging
import os
from typing import Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from .errors import DatabaseConnectError, PoolConfigError

logger = logging.getLogger(__name__)

MASK = "***"


def mask_password(url: str) -> str:
    """Hide the password segment of a connection URL for logging."""
    at_pos = url.find("@")
    if at_pos == -1:
        return url
    colon_pos = url.rfind(":", 0, at_pos)
    if colon_pos == -1 or url.startswith("//", colon_pos + 1):
        # scheme separator, no password present
        return url

    end = at_pos
    slash_pos = url.find("/", colon_pos + 1, at_pos)
    if slash_pos != -1:
        end = slash_pos
    return url[: colon_pos + 1] + MASK + url[end:]


def create_pool(database_url: Optional[str] = None) -> Engine:
    url = database_url or os.environ.get("DATABASE_URL")
    if not url:
        raise PoolConfigError("DATABASE_URL not set")

    logger.info("opening database pool: %s", mask_password(url))
    try:
        engine = create_engine(url, pool_pre_ping=True)
        with engine.connect():
            pass
    except SQLAlchemyError as e:
        raise DatabaseConnectError(str(e)) from e

    logger.info("database pool ready")
    return engine


def test_connection(engine: Engine) -> None:
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        raise DatabaseConnectError(str(e)) from e
    logger.info("database liveness check passed")
