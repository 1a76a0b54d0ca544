"""Constants shared by the client, requester and error reporting."""

from __future__ import annotations

API_URL = "https://apiv2.balikobot.cz"

API_V1 = "v1"
API_V2 = "v2"

# Versions with their own path prefix; anything else uses the unversioned path.
VERSIONED_PATHS = {API_V2: "v2"}

ADD = "add"

STATUS_OK = 200

STATUS_MESSAGES: dict[int, str] = {
    200: "OK, operation succeeded",
    208: "Item already exists",
    400: "Operation failed, check the submitted data",
    401: "Unauthorized, check the API credentials",
    403: "Access denied for this carrier",
    404: "Requested item was not found",
    406: "Invalid or unsupported carrier code",
    409: "Conflict with an item already submitted",
    413: "Request payload is too large",
    423: "Function is not available for this carrier",
    500: "Internal server error",
    503: "Service is temporarily unavailable",
}


def describe_status(status_code: int | None) -> str:
    """Return a human readable description of an API status code."""
    if status_code is None:
        return "Missing status code"
    return STATUS_MESSAGES.get(status_code, f"Unexpected status code {status_code}")


def package_index(key: object) -> int | None:
    """Return the package index encoded by an envelope key, or None.

    Decoded JSON objects carry indices as decimal strings, other callers may
    use plain ints.
    """
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key if key >= 0 else None
    if isinstance(key, str) and key.isascii() and key.isdecimal():
        return int(key)
    return None


def coerce_status(value: object) -> int | None:
    """Return an integer status code, or None when ``value`` is not one.

    Accepts ints, integral floats and decimal strings such as ``"200"``.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        value = value.strip()
        return int(value) if value.isascii() and value.isdecimal() else None
    if isinstance(value, int):
        return value
    return None
