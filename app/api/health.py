"""Health check endpoint with database connectivity check."""

from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.config import Settings, get_settings
from app.core.database import check_db_connected, get_db
from app.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> HealthResponse:
    """
    Liveness probe; no authentication.
    Always 200, reporting whether the database answered.
    """
    mode = "HTTPS mode" if settings.USE_HTTPS else "HTTP mode"
    return HealthResponse(
        message=f"Bank Portal API running ({mode})",
        timestamp=datetime.now(UTC),
        environment=settings.APP_ENV,
        database="connected" if check_db_connected(db) else "disconnected",
    )
