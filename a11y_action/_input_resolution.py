"""Resolve command-line overrides against runner environment variables."""

from __future__ import annotations

import os
from collections import abc as cabc
from dataclasses import dataclass
from pathlib import Path

from a11y_action._input_coercion import is_blank


@dataclass(frozen=True, slots=True)
class InputResolution:
    """Environment variable consulted when no command-line value is given."""

    env_key: str
    as_path: bool = False


def resolve_input(
    param_value: str | Path | None,
    resolution: InputResolution,
    env: cabc.Mapping[str, str] | None = None,
) -> str | Path | None:
    """Return the CLI value, else a non-blank environment value, else ``None``.

    Examples
    --------
    >>> resolve_input(None, InputResolution("GITHUB_OUTPUT", as_path=True),
    ...               {"GITHUB_OUTPUT": "/tmp/out"})
    PosixPath('/tmp/out')
    """
    if param_value is not None:
        return param_value

    env_value = (os.environ if env is None else env).get(resolution.env_key)
    if env_value is None or is_blank(env_value):
        return None
    return Path(env_value) if resolution.as_path else env_value
