"""Markdown rendering of added packages."""

from __future__ import annotations

from typing import Any


def render_summary(carrier: str, packages: list[Any], labels_url: str | None = None) -> str:
    """Return a Markdown string with a table of the packages accepted by the carrier."""
    lines = []
    lines.append(f"# Packages added ({carrier})")
    lines.append("")
    lines.append(f"Total packages: {len(packages)}")
    if labels_url:
        lines.append(f"Labels: {labels_url}")
    lines.append("")
    lines.append("| # | Package ID | Carrier ID | Label |")
    lines.append("| --- | --- | --- | --- |")

    for index, package in enumerate(packages):
        package = package if isinstance(package, dict) else {}
        package_id = package.get("package_id", "")
        carrier_id = package.get("carrier_id", "")
        label_url = package.get("label_url", "")
        lines.append(f"| {index} | {package_id} | {carrier_id} | {label_url} |")

    if not packages:
        lines.append("| - | (no packages) | n/a | n/a |")

    return "\n".join(lines) + "\n"
