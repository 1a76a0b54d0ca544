#!/usr/bin/env python3
"""Local entrypoint to submit a package batch without installing the console script.

Usage:
  python scripts/add_packages.py cp packages.json [--version v2] [--summary]

This calls the same balikobot.cli.main used by the ``balikobot-add`` command.
"""

from __future__ import annotations

from balikobot.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
