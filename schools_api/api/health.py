# schools_api/api/health.py

from datetime import datetime, timezone

from fastapi import APIRouter

from schools_api.models.health import HealthOut

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthOut)
def health_check() -> HealthOut:
    """
    Liveness probe. Does not read the dataset.
    """
    return HealthOut(status="ok", timestamp=datetime.now(timezone.utc))
