from __future__ import annotations

from typing import Any


class PortalError(Exception):
    """Base class for failures that are reported to callers as failure envelopes."""

    code = "PORTAL_ERROR"

    def __init__(self, message: str, *, code: str | None = None, details: Any = None) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        self.details = details


class InputValidationError(PortalError):
    """Payload failed its declared shape. ``details`` holds ``{"violations": [...]}``."""

    code = "VALIDATION_ERROR"

    def __init__(self, violations: list[dict[str, Any]], message: str = "Invalid input") -> None:
        super().__init__(message, details={"violations": violations})
        self.violations = violations


class NotFoundError(PortalError):
    code = "NOT_FOUND"


class OperationFailedError(PortalError):
    """A store operation failed despite valid input."""

    code = "DATABASE_ERROR"


class UnknownResourceError(LookupError):
    """No registered resource matches the requested URI.

    Not a PortalError: resources do not use the envelope, so this surfaces as a
    protocol error (MCP) or a 404 (REST bridge).
    """
