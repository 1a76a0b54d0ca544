"""Balikobot API client: add packages and validate the carrier's answer."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from .config import Settings
from .definitions import ADD, API_URL, API_V1, STATUS_OK, VERSIONED_PATHS
from .envelope import ResponseEnvelope
from .exceptions import BadRequestError, FailureReason
from .requester import HttpRequester, Requester

logger = logging.getLogger(__name__)


def build_url(
    carrier: str,
    action: str = ADD,
    version: str | None = None,
    api_url: str = API_URL,
) -> str:
    """Compose the endpoint URL for ``action`` on ``carrier``.

    Only versions listed in VERSIONED_PATHS get a path prefix. Any other value
    falls back to the unversioned endpoint without raising.
    """
    if not carrier:
        raise ValueError("Carrier code must be non-empty")

    prefix = VERSIONED_PATHS.get(version) if version else None
    if version and version != API_V1 and prefix is None:
        logger.warning("Unsupported API version %r, using the default endpoint", version)

    parts = [api_url.rstrip("/")]
    if prefix:
        parts.append(prefix)
    parts.extend([carrier, action])
    return "/".join(parts)


class Client:
    def __init__(self, requester: Requester, api_url: str = API_URL) -> None:
        self.requester = requester
        self.api_url = api_url

    @classmethod
    def from_settings(cls, settings: Settings) -> Client:
        return cls(HttpRequester.from_settings(settings), api_url=settings.api_url)

    def add_packages(
        self,
        carrier: str,
        packages: Sequence[Mapping[str, Any]],
        version: str | None = None,
    ) -> list[Any]:
        """Submit ``packages`` to ``carrier`` and return one result per package."""
        results, _ = self.add_packages_with_labels_url(carrier, packages, version)
        return results

    def add_packages_with_labels_url(
        self,
        carrier: str,
        packages: Sequence[Mapping[str, Any]],
        version: str | None = None,
    ) -> tuple[list[Any], str | None]:
        """Submit ``packages`` and also return the combined label archive URL.

        Returns ``(results, labels_url)``; ``labels_url`` is None when the
        carrier does not provide one.

        Raises:
            BadRequestError: If the transport status or the response envelope
                is not a fully successful batch. ``reason`` names the check
                that failed.
        """
        url = build_url(carrier, ADD, version, api_url=self.api_url)
        payload = list(packages)

        logger.debug("Adding %d package(s) via %s", len(payload), url)
        status_code, body = self.requester.request(url, payload)

        if status_code != STATUS_OK:
            raise BadRequestError(
                FailureReason.TRANSPORT_STATUS,
                status_code=status_code,
                response=body if isinstance(body, dict) else {},
                detail=f"HTTP status {status_code} from {url}",
            )

        envelope = ResponseEnvelope.from_body(body)
        envelope.validate(len(payload))

        results = envelope.package_results()
        logger.info("Carrier %s accepted %d package(s)", carrier, len(results))
        return results, envelope.labels_url
