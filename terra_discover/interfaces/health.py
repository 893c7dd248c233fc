"""
Health check router.

Liveness/readiness probe. Reports the application version and whether
the database answers a trivial query.
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from terra_discover.core.config import settings
from terra_discover.infrastructure.database import get_session_factory
from terra_discover.interfaces.schemas import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


def _database_status(session_factory: sessionmaker[Session]) -> str:
    try:
        with session_factory() as session:
            session.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.warning("Database health probe failed: %s", type(exc).__name__)
        return "unavailable"
    return "ok"


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application status, version and database reachability.",
)
def health_check(
    session_factory: sessionmaker[Session] = Depends(get_session_factory),
) -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(
        status="ok",
        version=settings.version,
        database=_database_status(session_factory),
    )
