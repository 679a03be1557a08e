# __init__.py
from job_portal.schemas.envelope import (
    TOOL_RESPONSE_JSON_SCHEMA,
    ErrorObject,
    FailureResponse,
    SuccessResponse,
    ToolResponse,
    make_error,
    make_success,
)
from job_portal.schemas.job import JobCreate
from job_portal.schemas.profile import ExperienceEntry, ProfileCreate
from job_portal.schemas.requests import (
    DeleteRecordRequest,
    MatchJobsForProfileRequest,
    MatchOptions,
    MatchProfilesForJobRequest,
)
from job_portal.schemas.resources import ResourceInfo, ResourceList, ToolInfo

__all__ = [
	"TOOL_RESPONSE_JSON_SCHEMA",
	"ErrorObject",
	"FailureResponse",
	"SuccessResponse",
	"ToolResponse",
	"make_error",
	"make_success",
	"JobCreate",
	"ExperienceEntry",
	"ProfileCreate",
	"DeleteRecordRequest",
	"MatchJobsForProfileRequest",
	"MatchOptions",
	"MatchProfilesForJobRequest",
	"ResourceInfo",
	"ResourceList",
	"ToolInfo",
]
