"""Balikobot API client package.

Only the add-packages request/response contract is implemented: building the
endpoint URL, dispatching a batch of packages and validating the response.
"""

from .client import Client
from .config import ConfigError, Settings, load_settings
from .exceptions import BadRequestError, BalikobotError, FailureReason, RequesterError
from .requester import HttpRequester, Requester

__all__ = [
    "BadRequestError",
    "BalikobotError",
    "Client",
    "ConfigError",
    "FailureReason",
    "HttpRequester",
    "Requester",
    "RequesterError",
    "Settings",
    "load_settings",
]
