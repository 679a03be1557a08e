# dependencies.py
from fastapi import HTTPException, Request, status
from job_portal.registry import PortalRegistry
from job_portal.services.record_store import PortalStore


def get_store(request: Request) -> PortalStore:
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Store not initialized")
    return store


def get_registry(request: Request) -> PortalRegistry:
    registry = getattr(request.app.state, "registry", None)
    if registry is None:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Registry not initialized")
    return registry
