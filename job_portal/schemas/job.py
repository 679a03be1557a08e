# job.py
from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from job_portal.schemas.common import reject_null, validate_non_negative_number


class JobCreate(BaseModel):
    """Payload for the create_job tool.

    ``skillsRequired`` is optional: a posting created without it simply never
    matches a ``skillsRequired`` filter.
    """

    title: str = Field(min_length=1, description="Job title (e.g., Software Backend Developer)")
    company: str = Field(min_length=1, description="Hiring company (e.g., AppSquadz)")
    location: str = Field(min_length=1, description="Job location (e.g., Remote or Noida Sector 90)")
    experience: str | None = Field(default=None, min_length=1, description="Experience requirement (e.g., 3+ years)")
    # Integers stay integers; the range check lives in the validator below.
    salary: Union[int, float, None] = Field(
        default=None,
        description="Salary offered (e.g., 100000)",
        json_schema_extra={"minimum": 0},
    )
    description: str = Field(min_length=10, description="Job description, at least 10 characters")
    skills_required: list[str] | None = Field(
        default=None,
        alias="skillsRequired",
        description="Skills required for the job (e.g., Node.js, Express)",
    )

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("experience", "skills_required", mode="before")
    @classmethod
    def _optional_not_null(cls, v):
        return reject_null(v)

    @field_validator("salary", mode="before")
    @classmethod
    def _salary_is_number(cls, v):
        return validate_non_negative_number(v)
