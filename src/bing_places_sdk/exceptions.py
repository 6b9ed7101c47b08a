from __future__ import annotations

from dataclasses import dataclass


class BingPlacesError(Exception):
    """Base class for every error raised by the SDK."""


class InvalidIdentityError(BingPlacesError, ValueError):
    pass


class InvalidEmailError(InvalidIdentityError):
    pass


@dataclass(frozen=True)
class ValidationIssue:
    row_index: int | None
    field: str
    reason: str


class InvalidArgumentError(BingPlacesError, ValueError):
    def __init__(self, issues: list[ValidationIssue]) -> None:
        self.issues = issues
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if not self.issues:
            return "Validation failed"
        issue = self.issues[0]
        location = f"row {issue.row_index}" if issue.row_index is not None else "argument"
        return f"{location} {issue.field}: {issue.reason}"


@dataclass
class RemoteOperationFailed(BingPlacesError):
    operation: str
    message: str
    status_code: int | None = None
    error_code: str | None = None
    tracking_id: str | None = None
    raw_payload: object | None = None

    def __str__(self) -> str:
        status = f"[{self.status_code}] " if self.status_code else ""
        tracking = f" tracking_id={self.tracking_id}" if self.tracking_id else ""
        return f"{status}{self.message}{tracking}"
