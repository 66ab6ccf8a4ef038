"""Database initialization script."""

import logging

from sqlalchemy.engine import Engine

from stock_tracker.database import Base, engine
from stock_tracker.models import Transaction, User  # noqa: F401 - register tables

logger = logging.getLogger(__name__)


def create_tables(bind: Engine = engine) -> None:
    """Create all database tables (tables that already exist are left alone)."""
    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=bind)
    logger.info("Tables created successfully")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    create_tables()
