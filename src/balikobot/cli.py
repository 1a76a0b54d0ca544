"""Command line entrypoint for submitting a package batch.

Usage:
  balikobot-add CARRIER packages.json [--version v2] [--config settings.json] [--summary]

Exit codes: 0 on success, 1 for invalid input or configuration, 2 when the
API rejects the batch or cannot be reached.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .client import Client
from .config import ConfigError, load_settings
from .exceptions import BadRequestError, RequesterError
from .summary import render_summary
from .validators.packages_file import load_packages


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Add packages to a Balikobot carrier")
    parser.add_argument("carrier", help="Carrier code, e.g. cp or ups")
    parser.add_argument("packages", type=Path, help="JSON file with an array of packages")
    parser.add_argument("--version", dest="api_version", default=None)
    parser.add_argument("--config", type=Path, default=None, help="JSON settings file")
    parser.add_argument("--summary", action="store_true", help="Print a Markdown table")
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None, client: Client | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        packages = load_packages(args.packages)
    except FileNotFoundError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    except json.JSONDecodeError as exc:
        print(f"ERROR: Failed to read JSON: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"ERROR: Package file failed validation:{exc}", file=sys.stderr)
        return 1

    if client is None:
        try:
            client = Client.from_settings(load_settings(args.config))
        except ConfigError as exc:
            print(f"ERROR: {exc}", file=sys.stderr)
            return 1

    try:
        results, labels_url = client.add_packages_with_labels_url(
            args.carrier, packages, args.api_version
        )
    except BadRequestError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        for index, detail in sorted(exc.errors.items()):
            print(f"  package {index}: {json.dumps(detail)}", file=sys.stderr)
        return 2
    except RequesterError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2

    if args.summary:
        print(render_summary(args.carrier, results, labels_url), end="")
    else:
        print(json.dumps({"packages": results, "labels_url": labels_url}, indent=2))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
