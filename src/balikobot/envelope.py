"""Parsing and validation of the add-packages response envelope.

The API answers a batch with one object: an aggregate ``status``, one entry
per submitted package under the keys ``0..n-1`` and, for some carriers, a
``labels_url`` pointing at a combined label archive.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .definitions import STATUS_OK, coerce_status, package_index
from .exceptions import BadRequestError, FailureReason


@dataclass(slots=True, frozen=True)
class ResponseEnvelope:
    """Typed view of a decoded response body."""

    status: int | None
    has_status: bool
    packages: dict[int, Any]
    labels_url: str | None
    raw: dict[str, Any]

    @classmethod
    def from_body(cls, body: Any) -> ResponseEnvelope:
        if not isinstance(body, Mapping):
            body = {}
        raw = dict(body)

        has_status = "status" in raw
        status = coerce_status(raw["status"]) if has_status else None

        packages: dict[int, Any] = {}
        for key, value in raw.items():
            index = package_index(key)
            if index is not None:
                packages[index] = value

        labels_url = raw.get("labels_url")
        if labels_url is not None:
            labels_url = str(labels_url)

        return cls(
            status=status,
            has_status=has_status,
            packages=packages,
            labels_url=labels_url,
            raw=raw,
        )

    def validate(self, expected_count: int) -> None:
        """Raise BadRequestError unless the envelope holds a full successful batch."""
        if not self.has_status:
            raise BadRequestError(
                FailureReason.MISSING_STATUS,
                response=self.raw,
                detail="response has no status",
            )

        if self.status != STATUS_OK:
            raise BadRequestError(
                FailureReason.BAD_STATUS,
                status_code=self.status,
                response=self.raw,
                detail=f"batch was not accepted (status {self.raw['status']!r})",
            )

        if len(self.packages) != expected_count:
            raise BadRequestError(
                FailureReason.WRONG_PACKAGE_COUNT,
                status_code=self.status,
                response=self.raw,
                detail=(
                    f"wrong number of packages returned "
                    f"(expected {expected_count}, got {len(self.packages)})"
                ),
            )

        for index in range(expected_count):
            self._validate_package(index, self.packages.get(index))

    def _validate_package(self, index: int, entry: Any) -> None:
        if not isinstance(entry, Mapping) or "status" not in entry:
            raise BadRequestError(
                FailureReason.MISSING_PACKAGE_DATA,
                status_code=self.status,
                response=self.raw,
                detail=f"missing package result data for package {index}",
            )

        status = coerce_status(entry["status"])
        if status != STATUS_OK:
            raise BadRequestError(
                FailureReason.PACKAGE_STATUS,
                status_code=status,
                response=self.raw,
                detail=f"package {index} was rejected (status {entry['status']!r})",
            )

        # A successful entry must identify the package it created.
        if "package_id" not in entry:
            raise BadRequestError(
                FailureReason.MISSING_PACKAGE_DATA,
                status_code=self.status,
                response=self.raw,
                detail=f"missing package_id for package {index}",
            )

    def package_results(self) -> list[Any]:
        """Return the per-package entries in submission order."""
        return [self.packages[index] for index in sorted(self.packages)]

