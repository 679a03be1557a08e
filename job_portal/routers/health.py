from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from job_portal.config import settings
from job_portal.routers.dependencies import get_store
from job_portal.services.record_store import PortalStore


router = APIRouter(prefix="/health", tags=["health"])


class HealthStatus(BaseModel):
    status: str
    version: str
    timestamp: datetime


class StoreStats(BaseModel):
    profiles: int
    jobs: int
    timestamp: datetime


@router.get("/", response_model=HealthStatus, summary="API heartbeat")
def health_check() -> HealthStatus:
    return HealthStatus(status="ok", version=settings.version, timestamp=datetime.now(timezone.utc))


@router.get("/stats", response_model=StoreStats, summary="In-memory collection sizes")
def store_stats(store: PortalStore = Depends(get_store)) -> StoreStats:
    return StoreStats(profiles=len(store.profiles), jobs=len(store.jobs), timestamp=datetime.now(timezone.utc))
