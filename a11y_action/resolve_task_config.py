#!/usr/bin/env -S uv run python
# /// script
# requires-python = ">=3.13"
# dependencies = ["cyclopts>=2.9"]
# ///
"""Resolve accessibility scan action inputs and publish them as step outputs.

The script:

- resolves every ``action.yml`` input to its typed value;
- masks the service account password in logs;
- writes resolved values to ``$GITHUB_OUTPUT`` (or prints them as JSON);
- optionally appends a markdown file to the job summary.
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import Annotated, TypeAlias

from cyclopts import App, Parameter

from a11y_action._action_core import append_github_output, mask_secret
from a11y_action._input_resolution import InputResolution, resolve_input
from a11y_action._task_config import TaskConfig
from a11y_action._task_config_models import ResolvedTaskConfig, snapshot_task_config

Mask: TypeAlias = Callable[[str], None]
Echo: TypeAlias = Callable[[str], object]

logger = logging.getLogger(__name__)

app = App(help="Resolve accessibility scan action inputs.")


def publish_task_config(
    config: TaskConfig,
    github_output: Path | None,
    mask: Mask = print,
    echo: Echo = print,
) -> ResolvedTaskConfig:
    """Mask secrets, resolve settings, and publish them.

    Parameters
    ----------
    config : TaskConfig
        Configuration to resolve.
    github_output : Path | None
        ``GITHUB_OUTPUT`` file; when ``None`` the outputs are echoed as JSON.
    mask : Mask
        Function to emit masking commands (default: print).
    echo : Echo
        Function receiving the JSON document (default: print).

    Returns
    -------
    ResolvedTaskConfig
        The published snapshot.
    """
    password = config.get_service_account_password()
    if password:
        mask_secret(password, mask)

    resolved = snapshot_task_config(config)
    outputs = resolved.as_outputs()
    if github_output is None:
        echo(json.dumps(outputs, indent=2, sort_keys=True))
    else:
        append_github_output(github_output, outputs)
        logger.info("Published %d outputs to %s", len(outputs), github_output)
    return resolved


@app.default
def main(
    github_output: Annotated[
        Path | None, Parameter(help="GITHUB_OUTPUT path override.")
    ] = None,
    summary_file: Annotated[
        Path | None, Parameter(help="Markdown file to append to the job summary.")
    ] = None,
) -> int:
    """Resolve action inputs and publish them for later steps.

    Parameters
    ----------
    github_output : Path | None
        Output file override for ``GITHUB_OUTPUT``.
    summary_file : Path | None
        Markdown appended to ``GITHUB_STEP_SUMMARY`` after publishing.

    Returns
    -------
    int
        Exit code (0 for success).

    Examples
    --------
    >>> python -m a11y_action.resolve_task_config --summary-file summary.md
    """
    # RUNNER_DEBUG is set when a workflow is re-run with debug logging.
    debug = os.environ.get("RUNNER_DEBUG") == "1"
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    github_output_raw = resolve_input(
        github_output,
        InputResolution(env_key="GITHUB_OUTPUT", as_path=True),
    )
    github_output_path = (
        None if github_output_raw is None else Path(github_output_raw)
    )

    config = TaskConfig()
    publish_task_config(config, github_output_path)

    if summary_file is not None:
        markdown = summary_file.read_text(encoding="utf-8")
        asyncio.run(config.write_job_summary(markdown))
        logger.info("Appended %s to the job summary", summary_file)

    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entrypoint
    raise SystemExit(app())
