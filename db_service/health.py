"""
Database health check.

Runs a trivial query against an engine to report whether it is reachable.
"""
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
import logging

logger = logging.getLogger(__name__)


def check_database_health(engine: Engine) -> tuple[bool, str]:
    """
    Check that the database behind ``engine`` answers queries.

    Returns:
        tuple[bool, str]: (is_healthy, message)
    """
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1")).fetchone()

        return True, "Database connection successful"

    except SQLAlchemyError as e:
        logger.error(f"Database connection failed: {str(e)}")
        return False, "Database connection failed"
