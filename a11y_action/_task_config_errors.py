"""Exception hierarchy for the accessibility scan action configuration.

These exceptions are raised by the GitHub runner collaborator. The task
configuration resolver never catches them, so callers see the original
failure.

Exceptions
----------
TaskConfigError
InputRequiredError
JobSummaryUnavailableError

Examples
--------
>>> raise InputRequiredError("Input required and not supplied: url")
"""

from __future__ import annotations


class TaskConfigError(Exception):
    """Base error for task configuration and runner helpers."""


class InputRequiredError(TaskConfigError):
    """Raised when a required action input was not supplied.

    Parameters
    ----------
    message
        Human-readable error message naming the missing input.

    Examples
    --------
    >>> raise InputRequiredError("Input required and not supplied: url")
    """


class JobSummaryUnavailableError(TaskConfigError):
    """Raised when the job summary file cannot be located or written."""
