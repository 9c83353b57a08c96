import logging

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from core.database import Base
from core import models  # noqa: F401

logger = logging.getLogger(__name__)


def init_db(engine: Engine) -> None:
    """Verify the store is reachable and create missing tables.

    There is no retry: a store that is down at boot is fatal, the process
    exits instead of serving traffic it cannot persist.
    """
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError:
        logger.exception("Database connection failed, shutting down")
        raise SystemExit(1)

    logger.info("Connected to database")
