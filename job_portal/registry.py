# registry.py
from __future__ import annotations

import logging
import random
import re
from dataclasses import dataclass
from typing import Any, Callable
from urllib.parse import urlsplit

from pydantic import BaseModel

from job_portal.config import Settings
from job_portal.errors import UnknownResourceError
from job_portal.schemas.envelope import TOOL_RESPONSE_JSON_SCHEMA, ToolResponse, make_error
from job_portal.schemas.job import JobCreate
from job_portal.schemas.profile import ProfileCreate
from job_portal.schemas.requests import DeleteRecordRequest, MatchJobsForProfileRequest, MatchProfilesForJobRequest
from job_portal.schemas.resources import ResourceInfo, ResourceList, ToolInfo
from job_portal.services.filter_engine import JOB_FILTERS, PROFILE_FILTERS, filter_records, parse_predicates
from job_portal.services.portal_tools import PortalTools
from job_portal.services.record_store import PortalStore


logger = logging.getLogger(__name__)

# scheme://host/path optionally followed by an RFC 6570 query expansion: {?a,b,c}
_URI_TEMPLATE_RE = re.compile(r"^(?P<base>[^{}]+)(?:\{\?(?P<fields>\w+(?:,\w+)*)\})?$")


@dataclass(frozen=True)
class ToolDefinition:
    name: str
    title: str
    description: str
    input_model: type[BaseModel]
    handler: Callable[[Any], ToolResponse]

    def input_schema(self) -> dict[str, Any]:
        return self.input_model.model_json_schema(by_alias=True)

    def output_schema(self) -> dict[str, Any]:
        return TOOL_RESPONSE_JSON_SCHEMA

    def info(self) -> ToolInfo:
        return ToolInfo(name=self.name, title=self.title, description=self.description, input_schema=self.input_schema())


@dataclass(frozen=True)
class ResourceDefinition:
    """A read-only query endpoint addressed by URI.

    ``uri`` is either a plain URI (``list://jobs``) or a template whose query
    expansion names the accepted predicate keys
    (``jobs://filter{?title,location}``). ``handler`` receives the predicate map.
    """

    name: str
    uri: str
    title: str
    description: str
    handler: Callable[[dict[str, str]], list[dict[str, Any]]]
    mime_type: str = "application/json"

    def __post_init__(self) -> None:
        if not _URI_TEMPLATE_RE.match(self.uri):
            raise ValueError(f"Unsupported resource URI template: {self.uri!r}")

    @property
    def base_uri(self) -> str:
        return _URI_TEMPLATE_RE.match(self.uri).group("base")

    @property
    def query_fields(self) -> tuple[str, ...]:
        fields = _URI_TEMPLATE_RE.match(self.uri).group("fields")
        return tuple(fields.split(",")) if fields else ()

    @property
    def is_template(self) -> bool:
        return "{" in self.uri

    def match(self, uri: str) -> dict[str, str] | None:
        """Predicate map for ``uri`` if it addresses this resource, else None."""
        requested = urlsplit(uri)
        base = urlsplit(self.base_uri)
        if requested.scheme != base.scheme or requested.netloc.lower() != base.netloc.lower():
            return None
        if requested.path.rstrip("/") != base.path.rstrip("/"):
            return None
        declared = set(self.query_fields)
        return {key: value for key, value in parse_predicates(requested.query).items() if key in declared}

    def info(self) -> ResourceInfo:
        return ResourceInfo(
            name=self.name,
            uri=self.uri,
            title=self.title,
            description=self.description,
            mime_type=self.mime_type,
            template=self.is_template,
        )


class PortalRegistry:
    """Named tools and URI-addressed resources exposed to the transports."""

    def __init__(self) -> None:
        self._tools: dict[str, ToolDefinition] = {}
        self._resources: dict[str, ResourceDefinition] = {}

    def register_tool(self, tool: ToolDefinition) -> None:
        if not tool.name:
            raise ValueError("Tool name must be a non-empty string")
        if tool.name in self._tools:
            raise ValueError(f"Tool already registered: {tool.name}")
        self._tools[tool.name] = tool

    def register_resource(self, resource: ResourceDefinition) -> None:
        if resource.name in self._resources:
            raise ValueError(f"Resource already registered: {resource.name}")
        self._resources[resource.name] = resource

    def get_tool(self, name: str) -> ToolDefinition | None:
        return self._tools.get(name)

    def tools(self) -> list[ToolDefinition]:
        return list(self._tools.values())

    def resources(self) -> list[ResourceDefinition]:
        return list(self._resources.values())

    def call_tool(self, name: str, arguments: Any) -> ToolResponse:
        tool = self._tools.get(name)
        if tool is None:
            logger.warning("unknown tool requested name=%s", name)
            return make_error("UNKNOWN_TOOL", f"Unknown tool: {name}")
        return tool.handler(arguments)

    def read_resource(self, uri: str) -> ResourceList:
        for resource in self._resources.values():
            predicates = resource.match(uri)
            if predicates is None:
                continue
            items = resource.handler(predicates)
            logger.debug("resource=%s predicates=%s items=%d", resource.name, predicates, len(items))
            return ResourceList(items=items)
        raise UnknownResourceError(f"Unknown resource: {uri}")


def build_portal_registry(
    store: PortalStore,
    settings: Settings,
    rng: random.Random | None = None,
) -> PortalRegistry:
    tools = PortalTools(store, settings, rng=rng)
    registry = PortalRegistry()

    registry.register_tool(
        ToolDefinition(
            name="create_profile",
            title="Create Profile Tool",
            description="Create a candidate profile with name, email, phone, skills, and optional work experience.",
            input_model=ProfileCreate,
            handler=tools.create_profile,
        )
    )
    registry.register_tool(
        ToolDefinition(
            name="create_job",
            title="Create Job Tool",
            description="Create a job posting with title, company, location, description, and required skills.",
            input_model=JobCreate,
            handler=tools.create_job,
        )
    )
    registry.register_tool(
        ToolDefinition(
            name="delete_profile",
            title="Delete Profile Tool",
            description="Delete a candidate profile by ID.",
            input_model=DeleteRecordRequest,
            handler=tools.delete_profile,
        )
    )
    registry.register_tool(
        ToolDefinition(
            name="delete_job",
            title="Delete Job Tool",
            description="Delete a job posting by ID.",
            input_model=DeleteRecordRequest,
            handler=tools.delete_job,
        )
    )
    registry.register_tool(
        ToolDefinition(
            name="match_jobs_for_profile",
            title="Match Jobs for Profile Tool",
            description=(
                "Return up to options.limit job postings for a profile. Selection is a random sample "
                "of the (optionally filtered) postings; no scoring is applied."
            ),
            input_model=MatchJobsForProfileRequest,
            handler=tools.match_jobs_for_profile,
        )
    )
    registry.register_tool(
        ToolDefinition(
            name="match_profiles_for_job",
            title="Match Profiles for Job Tool",
            description=(
                "Return up to options.limit candidate profiles for a job posting. Selection is a random "
                "sample of the (optionally filtered) profiles; no scoring is applied."
            ),
            input_model=MatchProfilesForJobRequest,
            handler=tools.match_profiles_for_job,
        )
    )

    registry.register_resource(
        ResourceDefinition(
            name="filter_profiles",
            uri="profiles://filter{?" + ",".join(PROFILE_FILTERS) + "}",
            title="Filter Candidate Profiles",
            description=(
                "Filter candidate profiles. name, email, phone: case-insensitive partial match. "
                "skills: matches any skill exactly (case-insensitive). company, role: partial match "
                "against any experience entry."
            ),
            handler=lambda predicates: filter_records(store.profiles.list(), predicates, PROFILE_FILTERS),
        )
    )
    registry.register_resource(
        ResourceDefinition(
            name="filter_jobs",
            uri="jobs://filter{?" + ",".join(JOB_FILTERS) + "}",
            title="Filter Job Postings",
            description=(
                "Filter job postings. title, company, location, experience, description: case-insensitive "
                "partial match. skillsRequired: matches any required skill exactly (case-insensitive). "
                "salary: numeric equality."
            ),
            handler=lambda predicates: filter_records(store.jobs.list(), predicates, JOB_FILTERS),
        )
    )
    registry.register_resource(
        ResourceDefinition(
            name="list_profiles",
            uri="list://profiles",
            title="List All Profiles",
            description="Returns all candidate profiles held in memory.",
            handler=lambda predicates: store.profiles.list(),
        )
    )
    registry.register_resource(
        ResourceDefinition(
            name="list_jobs",
            uri="list://jobs",
            title="List All Jobs",
            description="Returns all job postings held in memory.",
            handler=lambda predicates: store.jobs.list(),
        )
    )
    return registry
