# profile.py
from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from job_portal.schemas.common import reject_null, validate_email_form


class ExperienceEntry(BaseModel):
    company: str = Field(min_length=1, description="Company name (e.g., AppSquadz)")
    role: str = Field(min_length=1, description="Role held (e.g., Software Developer)")
    duration: str = Field(min_length=1, description="Time in the role (e.g., 1 year)")


class ProfileCreate(BaseModel):
    """Payload for the create_profile tool."""

    name: str = Field(min_length=1, description="Full name of the candidate (e.g., Shrey Singhal)")
    email: str = Field(description="Email address of the candidate (e.g., shrey@example.com)")
    phone: str = Field(min_length=10, description="Contact phone number, at least 10 characters")
    skills: list[str] = Field(description="Skills the candidate has (e.g., JavaScript, React)")
    experience: list[ExperienceEntry] | None = Field(
        default=None,
        description="Work history entries; omit when not provided",
    )

    @field_validator("email")
    @classmethod
    def _validate_email(cls, v: str) -> str:
        return validate_email_form(v)

    @field_validator("experience", mode="before")
    @classmethod
    def _experience_not_null(cls, v):
        return reject_null(v)
