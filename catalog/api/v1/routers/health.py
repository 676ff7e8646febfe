# catalog/api/v1/routers/health.py
from fastapi import APIRouter
from catalog.api.v1.schemas.catalog import HealthOut

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthOut)
async def health():
    """
    Liveness only: fixed payload, no store round trip, never fails.
    """
    return {"status": "ok"}
