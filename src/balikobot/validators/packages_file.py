"""Validation of package batch files passed to the command line tool."""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator

PACKAGES_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "Package batch",
    "type": "array",
    "minItems": 1,
    "items": {"type": "object", "minProperties": 1},
}


def _format_errors(errors: Iterable) -> str:
    messages = []
    for error in errors:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"- {pointer or '<root>'}: {error.message}")
    return "\n".join(messages)


def validate_packages(document: Any) -> list[dict[str, Any]]:
    """Return ``document`` as a package list or raise ValueError listing every problem."""
    validator = Draft202012Validator(PACKAGES_SCHEMA)
    errors = sorted(validator.iter_errors(document), key=lambda e: list(e.path))
    if errors:
        raise ValueError("\n" + _format_errors(errors))
    return document


def load_packages(path: Path) -> list[dict[str, Any]]:
    """Read and validate a JSON package batch file."""
    document = json.loads(path.read_text(encoding="utf-8"))
    return validate_packages(document)
