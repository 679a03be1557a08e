# requests.py
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from job_portal.schemas.common import reject_null


class DeleteRecordRequest(BaseModel):
    id: int = Field(ge=1, strict=True, description="ID of the record to delete")


class MatchOptions(BaseModel):
    limit: int | None = Field(default=None, ge=1, strict=True, description="Maximum number of matches to return")
    filters: dict[str, str] | None = Field(
        default=None,
        description="Field filters applied to the candidates before sampling (same semantics as the filter resources)",
    )

    @field_validator("limit", "filters", mode="before")
    @classmethod
    def _optional_not_null(cls, v):
        return reject_null(v)


class MatchJobsForProfileRequest(BaseModel):
    profile_id: int = Field(alias="profileId", ge=1, strict=True, description="ID of the candidate profile (e.g., 1)")
    options: MatchOptions | None = None

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("options", mode="before")
    @classmethod
    def _options_not_null(cls, v):
        return reject_null(v)


class MatchProfilesForJobRequest(BaseModel):
    job_id: int = Field(alias="jobId", ge=1, strict=True, description="ID of the job posting (e.g., 1)")
    options: MatchOptions | None = None

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("options", mode="before")
    @classmethod
    def _options_not_null(cls, v):
        return reject_null(v)
