"""Exception types raised by the Balikobot client."""

from __future__ import annotations

from enum import Enum
from typing import Any

from .definitions import STATUS_OK, coerce_status, describe_status, package_index


class FailureReason(str, Enum):
    TRANSPORT_STATUS = "transport_status"
    MISSING_STATUS = "missing_status"
    BAD_STATUS = "bad_status"
    WRONG_PACKAGE_COUNT = "wrong_package_count"
    MISSING_PACKAGE_DATA = "missing_package_data"
    PACKAGE_STATUS = "package_status"


class BalikobotError(RuntimeError):
    """Base error for everything raised by this package."""


class RequesterError(BalikobotError):
    """Raised when the HTTP request cannot be completed at all."""


class BadRequestError(BalikobotError):
    """Raised when the API rejects a request or returns a malformed response.

    Every cause shares this type; ``reason`` tells them apart without parsing
    the message. ``errors`` holds per-package details for entries whose own
    status was not OK, keyed by package index.
    """

    def __init__(
        self,
        reason: FailureReason,
        *,
        status_code: int | None = None,
        response: dict[str, Any] | None = None,
        detail: str = "",
    ) -> None:
        self.reason = reason
        self.status_code = status_code
        self.response = response if response is not None else {}
        self.errors = _collect_package_errors(self.response)

        message = f"{describe_status(status_code)} [{reason.value}]"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


def _collect_package_errors(response: dict[str, Any]) -> dict[int, dict[str, Any]]:
    errors: dict[int, dict[str, Any]] = {}
    for key, entry in response.items():
        index = package_index(key)
        if index is None or not isinstance(entry, dict):
            continue
        status = entry.get("status")
        if coerce_status(status) == STATUS_OK:
            continue
        errors[index] = {"status": status, "errors": entry.get("errors", {})}
    return errors
