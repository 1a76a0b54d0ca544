"""Transport layer: submit a payload to an API URL and decode the answer."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol

import requests
from requests import Response
from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_fixed

from .exceptions import RequesterError

if TYPE_CHECKING:
    from .config import Settings

logger = logging.getLogger(__name__)

USER_AGENT = "balikobot-python-client"

# Only failures where the request never got an answer are retried.
RETRYABLE_ERRORS = (requests.ConnectionError, requests.Timeout)


class Requester(Protocol):
    """Anything able to POST a JSON payload and return (status code, body)."""

    def request(self, url: str, payload: Any) -> tuple[int, dict[str, Any]]:
        ...


class HttpRequester:
    """Requester backed by a ``requests.Session`` with HTTP basic auth."""

    def __init__(
        self,
        api_user: str,
        api_key: str,
        *,
        timeout: float = 30.0,
        attempts: int = 3,
        retry_wait: float = 2.0,
        session: requests.Session | None = None,
    ) -> None:
        self.api_user = api_user
        self.api_key = api_key
        self.timeout = timeout
        self.attempts = attempts
        self.retry_wait = retry_wait
        self.session = session or requests.Session()

    @classmethod
    def from_settings(
        cls, settings: Settings, session: requests.Session | None = None
    ) -> HttpRequester:
        return cls(
            settings.api_user,
            settings.api_key,
            timeout=settings.timeout,
            session=session,
        )

    def __enter__(self) -> HttpRequester:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def request(self, url: str, payload: Any) -> tuple[int, dict[str, Any]]:
        """POST ``payload`` as JSON and return the status code with the decoded body.

        An empty or undecodable body comes back as ``{}`` so that response
        validation reports it as missing data instead of crashing.
        """
        logger.debug("POST %s", url)
        try:
            response = self._retrying()(self._post, url, payload)
        except requests.RequestException as exc:
            raise RequesterError(f"Failed to call {url}: {exc}") from exc

        return response.status_code, _decode_body(response)

    def _retrying(self) -> Retrying:
        return Retrying(
            reraise=True,
            stop=stop_after_attempt(self.attempts),
            wait=wait_fixed(self.retry_wait),
            retry=retry_if_exception_type(RETRYABLE_ERRORS),
        )

    def _post(self, url: str, payload: Any) -> Response:
        return self.session.post(
            url,
            json=payload,
            auth=(self.api_user, self.api_key),
            headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
            timeout=self.timeout,
        )


def _decode_body(response: Response) -> dict[str, Any]:
    if not response.content:
        logger.warning("Empty response body (HTTP %s)", response.status_code)
        return {}

    try:
        data = response.json()
    except ValueError:
        logger.warning("Response body is not valid JSON (HTTP %s)", response.status_code)
        return {}

    if not isinstance(data, dict):
        logger.warning("Response body is not a JSON object (HTTP %s)", response.status_code)
        return {}

    return data
