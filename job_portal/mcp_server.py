"""MCP adapter for the job portal registry.

Exposes every registered tool and resource over the Model Context Protocol.
Tool results go out twice, as JSON text content and as ``structuredContent``.
Resource reads return the ``{"items": [...]}`` listing as JSON text.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from starlette.responses import JSONResponse

from job_portal.registry import PortalRegistry


logger = logging.getLogger(__name__)


class PortalMCPServer:
    def __init__(self, registry: PortalRegistry, *, name: str, version: str) -> None:
        self.registry = registry
        self.server: Server = Server(name, version=version)
        self._install_handlers()

    def _install_handlers(self) -> None:
        self.server.list_tools()(self.list_tools)
        # Payload validation happens in the registry so failures come back as envelopes.
        self.server.call_tool(validate_input=False)(self.call_tool)
        self.server.list_resources()(self.list_resources)
        self.server.list_resource_templates()(self.list_resource_templates)
        self.server.read_resource()(self.read_resource)

    async def list_tools(self) -> list[types.Tool]:
        return [
            types.Tool(
                name=tool.name,
                title=tool.title,
                description=tool.description,
                inputSchema=tool.input_schema(),
                outputSchema=tool.output_schema(),
            )
            for tool in self.registry.tools()
        ]

    async def call_tool(self, name: str, arguments: dict[str, Any] | None) -> tuple[list[types.TextContent], dict[str, Any]]:
        response = self.registry.call_tool(name, arguments or {})
        payload = response.model_dump(mode="json")
        return [types.TextContent(type="text", text=json.dumps(payload))], payload

    async def list_resources(self) -> list[types.Resource]:
        return [
            types.Resource(
                uri=resource.uri,
                name=resource.name,
                title=resource.title,
                description=resource.description,
                mimeType=resource.mime_type,
            )
            for resource in self.registry.resources()
            if not resource.is_template
        ]

    async def list_resource_templates(self) -> list[types.ResourceTemplate]:
        return [
            types.ResourceTemplate(
                uriTemplate=resource.uri,
                name=resource.name,
                title=resource.title,
                description=resource.description,
                mimeType=resource.mime_type,
            )
            for resource in self.registry.resources()
            if resource.is_template
        ]

    async def read_resource(self, uri: Any) -> list[ReadResourceContents]:
        listing = self.registry.read_resource(str(uri))
        return [ReadResourceContents(content=listing.model_dump_json(), mime_type="application/json")]

    def session_manager(self) -> StreamableHTTPSessionManager:
        # Stateless + JSON responses: every POST is served on its own transport.
        return StreamableHTTPSessionManager(app=self.server, json_response=True, stateless=True)


class MCPEndpoint:
    """ASGI endpoint that forwards to the session manager stored on ``app.state``."""

    async def __call__(self, scope: Any, receive: Any, send: Any) -> None:
        app = scope.get("app")
        manager = getattr(getattr(app, "state", None), "mcp_session_manager", None)
        if manager is None:
            resp = JSONResponse({"error": "MCP session manager not initialized"}, status_code=503)
            await resp(scope, receive, send)
            return
        try:
            await manager.handle_request(scope, receive, send)
        except RuntimeError:
            # Session manager task group not running (lifespan not entered).
            logger.warning("MCP request received before session manager started")
            resp = JSONResponse({"error": "MCP session manager not initialized"}, status_code=503)
            await resp(scope, receive, send)
