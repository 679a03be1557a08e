# portal_tools.py
from __future__ import annotations

import functools
import logging
import random
from typing import Any, Callable, Mapping

from job_portal.config import Settings
from job_portal.errors import InputValidationError, NotFoundError, OperationFailedError, PortalError
from job_portal.schemas.envelope import ToolResponse, make_error, make_success
from job_portal.schemas.job import JobCreate
from job_portal.schemas.profile import ProfileCreate
from job_portal.schemas.requests import (
    DeleteRecordRequest,
    MatchJobsForProfileRequest,
    MatchOptions,
    MatchProfilesForJobRequest,
)
from job_portal.services.filter_engine import JOB_FILTERS, PROFILE_FILTERS, FieldMatcher, filter_records
from job_portal.services.matching import sample_matches
from job_portal.services.record_store import PortalStore, RecordStore
from job_portal.services.validation import record_fields, validate_payload


logger = logging.getLogger(__name__)


def enveloped(failure_code: str, failure_message: str) -> Callable:
    """Wrap a tool handler so every outcome, including faults, leaves as an envelope.

    Validation and not-found errors keep their own codes. Store faults and any
    other exception become ``failure_code`` with the cause in ``details``.
    """

    def decorator(func: Callable[..., ToolResponse]) -> Callable[..., ToolResponse]:
        @functools.wraps(func)
        def wrapper(self: "PortalTools", payload: Any) -> ToolResponse:
            tool = func.__name__
            try:
                return func(self, payload)
            except (InputValidationError, NotFoundError) as exc:
                logger.warning("tool=%s failed code=%s message=%s", tool, exc.code, exc.message)
                return make_error(exc.code, exc.message, exc.details)
            except OperationFailedError as exc:
                logger.error("tool=%s store fault code=%s message=%s details=%s", tool, exc.code, exc.message, exc.details)
                return make_error(
                    failure_code,
                    failure_message,
                    {"cause_code": exc.code, "cause": exc.message if exc.details is None else f"{exc.message}: {exc.details}"},
                )
            except PortalError as exc:
                logger.warning("tool=%s failed code=%s message=%s", tool, exc.code, exc.message)
                return make_error(exc.code, exc.message, exc.details)
            except Exception as exc:  # noqa: BLE001 - nothing may escape the tool boundary
                logger.exception("tool=%s unexpected fault", tool)
                return make_error(failure_code, failure_message, {"cause": f"{type(exc).__name__}: {exc}"})

        return wrapper

    return decorator


class PortalTools:
    """Handlers behind the six tools. Each takes the raw payload and returns an envelope."""

    def __init__(self, store: PortalStore, settings: Settings, rng: random.Random | None = None) -> None:
        self.store = store
        self.settings = settings
        self.rng = rng

    @enveloped("CREATE_PROFILE_FAILED", "Failed to create profile")
    def create_profile(self, payload: Any) -> ToolResponse:
        profile = validate_payload(ProfileCreate, payload)
        return make_success(self.store.profiles.create(record_fields(profile)))

    @enveloped("CREATE_JOB_FAILED", "Failed to create job posting")
    def create_job(self, payload: Any) -> ToolResponse:
        job = validate_payload(JobCreate, payload)
        return make_success(self.store.jobs.create(record_fields(job)))

    @enveloped("DELETE_PROFILE_FAILED", "Failed to delete profile")
    def delete_profile(self, payload: Any) -> ToolResponse:
        request = validate_payload(DeleteRecordRequest, payload)
        if not self.store.profiles.delete(request.id):
            raise NotFoundError("Profile not found", code="PROFILE_NOT_FOUND", details={"id": request.id})
        return make_success({"message": "Profile deleted successfully", "id": request.id})

    @enveloped("DELETE_JOB_FAILED", "Failed to delete job posting")
    def delete_job(self, payload: Any) -> ToolResponse:
        request = validate_payload(DeleteRecordRequest, payload)
        if not self.store.jobs.delete(request.id):
            raise NotFoundError("Job not found", code="JOB_NOT_FOUND", details={"id": request.id})
        return make_success({"message": "Job deleted successfully", "id": request.id})

    @enveloped("MATCH_JOBS_FAILED", "Failed to match jobs")
    def match_jobs_for_profile(self, payload: Any) -> ToolResponse:
        request = validate_payload(MatchJobsForProfileRequest, payload)
        if self.store.profiles.get(request.profile_id) is None:
            raise NotFoundError("Profile not found", code="PROFILE_NOT_FOUND", details={"profileId": request.profile_id})
        jobs = self._pick(self.store.jobs, JOB_FILTERS, request.options)
        return make_success({"message": "Matching jobs found", "jobs": jobs})

    @enveloped("MATCH_PROFILES_FAILED", "Failed to match profiles")
    def match_profiles_for_job(self, payload: Any) -> ToolResponse:
        request = validate_payload(MatchProfilesForJobRequest, payload)
        if self.store.jobs.get(request.job_id) is None:
            raise NotFoundError("Job not found", code="JOB_NOT_FOUND", details={"jobId": request.job_id})
        profiles = self._pick(self.store.profiles, PROFILE_FILTERS, request.options)
        return make_success({"message": "Matching profiles found", "profiles": profiles})

    def _pick(
        self,
        collection: RecordStore,
        matchers: Mapping[str, FieldMatcher],
        options: MatchOptions | None,
    ) -> list[dict[str, Any]]:
        limit = self.settings.match_default_limit
        candidates = collection.list()
        if options is not None:
            if options.limit is not None:
                limit = options.limit
            if options.filters:
                candidates = filter_records(candidates, options.filters, matchers)
        limit = min(limit, self.settings.match_max_limit)
        return sample_matches(candidates, limit, self.rng)
