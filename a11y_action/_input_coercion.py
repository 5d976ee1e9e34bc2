"""Coercion helpers that turn raw action input strings into typed values.

Every helper is a pure function: no filesystem access and no environment
lookups happen here. Callers pass the base directory for path resolution.
"""

from __future__ import annotations

import math
import os
import re
from collections.abc import Callable
from typing import TypeAlias

PathResolver: TypeAlias = Callable[[str, str], str]

_LEADING_INTEGER = re.compile(r"[+-]?[0-9]+")
_SEPARATOR_RUN = re.compile(r"[\\/]+")


def is_blank(value: str | None) -> bool:
    """Return ``True`` when ``value`` is missing, empty, or whitespace only."""
    return value is None or not value.strip()


def parse_int(value: str | None) -> int | float:
    """Parse the leading base-10 integer of ``value``.

    Parameters
    ----------
    value
        Raw string value to parse.

    Returns
    -------
    int | float
        The parsed integer, or ``math.nan`` when ``value`` does not start
        with an integer after leading whitespace.

    Examples
    --------
    >>> parse_int("42")
    42
    >>> parse_int(" -7px")
    -7
    >>> parse_int("many")
    nan
    """
    if value is None:
        return math.nan
    match = _LEADING_INTEGER.match(value.lstrip())
    if match is None:
        return math.nan
    return int(match.group())


def parse_flag(value: str | None) -> bool:
    """Parse a flag that is on unless explicitly set to ``false``.

    Parameters
    ----------
    value
        Raw string value to parse.

    Returns
    -------
    bool
        ``False`` only when ``value`` trims and lower-cases to ``"false"``.

    Examples
    --------
    >>> parse_flag(None)
    True
    >>> parse_flag(" False ")
    False
    >>> parse_flag("no")
    True
    """
    if value is None or is_blank(value):
        return True
    return value.strip().lower() != "false"


def normalize_path(value: str, *, strip_trailing: bool = True) -> str:
    """Collapse path separators to single forward slashes.

    Windows long-path prefixes (``\\\\?\\`` and ``\\\\.\\``) are preserved as
    a leading ``//``.

    Examples
    --------
    >>> normalize_path("reports\\\\axe//")
    'reports/axe'
    >>> normalize_path("\\\\")
    '/'
    """
    if value in ("\\", "/"):
        return "/"
    if len(value) <= 1:
        return value

    prefix = ""
    if len(value) > 4 and value[3] == "\\" and value[:2] == "\\\\":
        if value[2] in ("?", "."):
            value = value[2:]
            prefix = "//"

    segments = _SEPARATOR_RUN.split(value)
    if strip_trailing and len(segments) > 1 and segments[-1] == "":
        segments.pop()
    return prefix + "/".join(segments)


def join_absolute(base: str, path: str) -> str:
    """Anchor ``path`` at ``base`` and return an absolute, normalised path."""
    return os.path.abspath(os.path.join(base, path))


def resolve_absolute_path(
    raw: str | None,
    base: str,
    resolve_path: PathResolver = join_absolute,
) -> str | None:
    """Resolve a raw path input to an absolute forward-slash path.

    Parameters
    ----------
    raw
        Raw path string supplied by the runner.
    base
        Directory that relative paths are anchored to.
    resolve_path
        Callable joining ``base`` and the normalised path into an absolute
        path (default: :func:`join_absolute`).

    Returns
    -------
    str | None
        The absolute path, or ``None`` when ``raw`` is blank.

    Examples
    --------
    >>> resolve_absolute_path("reports", "/home/runner/work/repo")
    '/home/runner/work/repo/reports'
    >>> resolve_absolute_path("", "/home/runner/work/repo") is None
    True
    """
    if raw is None or is_blank(raw):
        return None
    return normalize_path(resolve_path(base, normalize_path(raw)))
