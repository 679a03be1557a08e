# tools.py
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status

from job_portal.errors import UnknownResourceError
from job_portal.registry import PortalRegistry
from job_portal.routers.dependencies import get_registry
from job_portal.schemas.resources import ResourceInfo, ResourceList, ToolInfo


router = APIRouter(tags=["tools"])


@router.get("/tools", response_model=list[ToolInfo], summary="Registered tools")
def list_tools(registry: PortalRegistry = Depends(get_registry)) -> list[ToolInfo]:
    return [tool.info() for tool in registry.tools()]


@router.post("/tools/{name}", summary="Invoke a tool; the body is its JSON payload")
def call_tool(
    name: str,
    payload: Any = Body(default=None),
    registry: PortalRegistry = Depends(get_registry),
) -> dict[str, Any]:
    if registry.get_tool(name) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown tool: {name}")
    # Failures are part of the envelope, so the HTTP status stays 200.
    return registry.call_tool(name, payload).model_dump(mode="json")


@router.get("/resources", response_model=list[ResourceInfo], summary="Registered resources and templates")
def list_resources(registry: PortalRegistry = Depends(get_registry)) -> list[ResourceInfo]:
    return [resource.info() for resource in registry.resources()]


@router.get("/resources/read", response_model=ResourceList, summary="Read a resource by URI")
def read_resource(
    uri: str = Query(min_length=1, description="Resource URI, e.g. jobs://filter?location=remote"),
    registry: PortalRegistry = Depends(get_registry),
) -> ResourceList:
    try:
        return registry.read_resource(uri)
    except UnknownResourceError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
