"""
Version bumping and descriptor updates.

plugin.json and marketplace.json are treated as opaque documents: the
updaters deep-copy the original and override only version and
description, so fields this tool doesn't know about survive untouched.
"""

import copy
import re
from typing import Any, Dict, Tuple

from skillbook.errors import InvalidInput


BUMP_KINDS = ("patch", "minor", "major")

_VERSION_PART = re.compile(r"[0-9]+")


def parse_version(version: str) -> Tuple[int, int, int]:
    """Split "X.Y.Z" into three non-negative integers.

    Raises:
        InvalidInput: If the string isn't exactly three integers
    """
    parts = str(version).split(".")
    if len(parts) != 3 or not all(_VERSION_PART.fullmatch(p) for p in parts):
        raise InvalidInput(f"Invalid semver: {version}", value=str(version))
    major, minor, patch = (int(p) for p in parts)
    return major, minor, patch


def bump_version(version: str, kind: str) -> str:
    """Bump a semver version string by patch, minor, or major.

    Examples:
        bump_version("1.2.3", "patch")  # "1.2.4"
        bump_version("1.2.3", "minor")  # "1.3.0"
        bump_version("0.9.9", "major")  # "1.0.0"

    Raises:
        InvalidInput: On a malformed version or an unknown kind
    """
    if kind not in BUMP_KINDS:
        raise InvalidInput(
            f'Invalid bump type: "{kind}". Must be one of: patch, minor, major',
            value=str(kind),
        )

    major, minor, patch = parse_version(version)

    if kind == "patch":
        patch += 1
    elif kind == "minor":
        minor += 1
        patch = 0
    else:
        major += 1
        minor = 0
        patch = 0

    return f"{major}.{minor}.{patch}"


def build_description(total: int, workflow: int, domain: int, short: bool = False) -> str:
    """Description sentence used in plugin.json and marketplace.json.

    The short form goes into marketplace plugins[0]; the long form is used
    at the document root.
    """
    if short:
        return (
            f"{total} skills: {workflow} workflow (behavioral rules that change Claude's actions) "
            f"+ {domain} deep domain (specialized knowledge with 2026 best practices)."
        )
    return (
        f"{total} expert skills for Claude Code — {workflow} workflow skills (behavioral rules) "
        f"+ {domain} deep domain skills (specialized knowledge with 2026 best practices)"
    )


def update_plugin_json(
    original: Dict[str, Any],
    new_version: str,
    total: int,
    workflow: int,
    domain: int,
) -> Dict[str, Any]:
    """Return an updated copy of plugin.json. The original is not modified."""
    updated = copy.deepcopy(original)
    updated["version"] = new_version
    updated["description"] = build_description(total, workflow, domain)
    return updated


def update_marketplace_json(
    original: Dict[str, Any],
    new_version: str,
    total: int,
    workflow: int,
    domain: int,
) -> Dict[str, Any]:
    """Return an updated copy of marketplace.json.

    Root version/description are replaced, and plugins[0] gets the same
    version with the short description. Other plugins pass through as-is.
    The original is not modified.
    """
    updated = copy.deepcopy(original)
    updated["version"] = new_version
    updated["description"] = build_description(total, workflow, domain)

    plugins = updated.get("plugins")
    if isinstance(plugins, list) and plugins and isinstance(plugins[0], dict):
        plugins[0]["version"] = new_version
        plugins[0]["description"] = build_description(total, workflow, domain, short=True)

    return updated
