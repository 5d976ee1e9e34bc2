"""GitHub Actions runner helpers for the accessibility scan action.

This module is the boundary with the runner: it reads ``INPUT_*`` variables,
appends to the job summary file, masks secrets, and publishes step outputs.
The task configuration depends only on the ``ActionCore`` protocol, so tests
can substitute an in-memory provider.
"""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Protocol, Self, TextIO

from a11y_action._task_config_errors import (
    InputRequiredError,
    JobSummaryUnavailableError,
)

logger = logging.getLogger(__name__)

SUMMARY_ENV_VAR = "GITHUB_STEP_SUMMARY"


class Summary(Protocol):
    """Job summary surface exposed by the runner."""

    def add_raw(self, text: str, add_eol: bool = False) -> Summary: ...

    async def write(self, *, overwrite: bool = False) -> Summary: ...


class ActionCore(Protocol):
    """Raw input provider and summary writer used by ``TaskConfig``."""

    @property
    def summary(self) -> Summary: ...

    def get_input(self, name: str) -> str: ...


class JobSummary:
    """Buffered writer for the ``GITHUB_STEP_SUMMARY`` file.

    Text is collected with :meth:`add_raw` and flushed by awaiting
    :meth:`write`. The buffer is cleared after every successful write.
    """

    def __init__(self, env: Mapping[str, str] | None = None) -> None:
        self._env = os.environ if env is None else env
        self._buffer = ""

    def add_raw(self, text: str, add_eol: bool = False) -> Self:
        """Append ``text`` to the buffer and return the summary for chaining."""
        self._buffer += text
        return self.add_eol() if add_eol else self

    def add_eol(self) -> Self:
        self._buffer += os.linesep
        return self

    def stringify(self) -> str:
        return self._buffer

    def is_empty_buffer(self) -> bool:
        return not self._buffer

    def empty_buffer(self) -> Self:
        self._buffer = ""
        return self

    def _file_path(self) -> Path:
        raw_path = self._env.get(SUMMARY_ENV_VAR)
        if not raw_path:
            msg = (
                f"Unable to find environment variable for ${SUMMARY_ENV_VAR}. "
                "Check if your runtime environment supports job summaries."
            )
            raise JobSummaryUnavailableError(msg)
        path = Path(raw_path)
        if not path.is_file() or not os.access(path, os.R_OK | os.W_OK):
            msg = (
                f"Unable to access summary file: '{path}'. "
                "Check if the file has correct read/write permissions."
            )
            raise JobSummaryUnavailableError(msg)
        return path

    def _flush(self, content: str, overwrite: bool) -> Path:
        path = self._file_path()
        mode = "w" if overwrite else "a"
        with path.open(mode, encoding="utf-8") as handle:
            handle.write(content)
        return path

    async def write(self, *, overwrite: bool = False) -> Self:
        """Write the buffer to the summary file.

        Parameters
        ----------
        overwrite
            Replace the file contents instead of appending (default: False).

        Returns
        -------
        JobSummary
            The summary, with an empty buffer.

        Raises
        ------
        JobSummaryUnavailableError
            If ``GITHUB_STEP_SUMMARY`` is unset or the file is not writable.
        """
        content = self._buffer
        path = await asyncio.to_thread(self._flush, content, overwrite)
        logger.debug("Wrote %d characters to job summary %s", len(content), path)
        return self.empty_buffer()


class GitHubActionsCore:
    """``ActionCore`` backed by the GitHub Actions runner environment."""

    def __init__(self, env: Mapping[str, str] | None = None) -> None:
        self._env = os.environ if env is None else env
        self._summary = JobSummary(self._env)

    @property
    def summary(self) -> JobSummary:
        return self._summary

    def get_input(
        self,
        name: str,
        *,
        required: bool = False,
        trim_whitespace: bool = True,
    ) -> str:
        """Return the value of an action input.

        Parameters
        ----------
        name
            Input name as declared in ``action.yml``.
        required
            Raise when the input is missing or empty (default: False).
        trim_whitespace
            Strip surrounding whitespace from the value (default: True).

        Returns
        -------
        str
            The input value, or ``""`` when it was not supplied.

        Raises
        ------
        InputRequiredError
            If ``required`` is set and no value was supplied.

        Examples
        --------
        >>> GitHubActionsCore({"INPUT_MAX-URLS": "10"}).get_input("max-urls")
        '10'
        """
        value = self._env.get(input_env_key(name), "")
        if required and not value:
            msg = f"Input required and not supplied: {name}"
            raise InputRequiredError(msg)
        return value.strip() if trim_whitespace else value


def input_env_key(name: str) -> str:
    """Return the environment variable the runner uses for input ``name``.

    Examples
    --------
    >>> input_env_key("fail-on-accessibility-error")
    'INPUT_FAIL-ON-ACCESSIBILITY-ERROR'
    """
    return f"INPUT_{name.replace(' ', '_').upper()}"


def mask_secret(value: str, stream: Callable[[str], object] = print) -> None:
    """Emit the GitHub Actions secret masking command.

    Parameters
    ----------
    value
        Secret value to mask.
    stream
        Output stream for the masking command (defaults to ``print``).

    Examples
    --------
    >>> mask_secret("hunter2")
    ::add-mask::hunter2
    """
    if not value:
        return
    for line in value.splitlines():
        if line:
            stream(f"::add-mask::{line}")


def _choose_multiline_delimiter(value: str, base: str = "EOF") -> str:
    """Choose a heredoc delimiter that is not present in the value."""
    delimiter = base
    counter = 0
    while delimiter in value:
        counter += 1
        delimiter = f"{base}_{counter}"
    return delimiter


def _write_output_entry(handle: TextIO, key: str, value: str) -> None:
    if "\n" not in value and "\r" not in value:
        handle.write(f"{key}={value}\n")
        return
    delimiter = _choose_multiline_delimiter(value)
    handle.write(f"{key}<<{delimiter}\n{value}\n{delimiter}\n")


def append_github_output(output_file: Path, outputs: Mapping[str, str]) -> None:
    """Append step outputs to the ``GITHUB_OUTPUT`` file.

    Multiline values are written with heredoc syntax.

    Examples
    --------
    >>> append_github_output(Path("/tmp/out"), {"max-urls": "100"})
    """
    output_file.parent.mkdir(parents=True, exist_ok=True)
    with output_file.open("a", encoding="utf-8") as handle:
        for key, value in outputs.items():
            _write_output_entry(handle, key, value)
