from typing import Annotated

from fastapi import APIRouter, Depends

from studyledger.config import Settings, get_settings
from studyledger.infrastructure.common.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health")
def health(settings: Annotated[Settings, Depends(get_settings)]) -> HealthResponse:
    """
    Liveness check.

    Does not touch the database.
    """
    return HealthResponse(status="ok", version=settings.VERSION)
