"""Typed configuration surface for the accessibility scan action.

``TaskConfig`` translates the loosely typed ``action.yml`` inputs into the
values the scanner and reporter consume. Every accessor re-reads its raw
input, so results always reflect the current runner environment.

Every input is treated as optional, including those ``action.yml`` marks as
required, because composite actions do not enforce ``required``. Defaults
are declared in ``action.yml``; accessors return ``None`` when nothing was
supplied and leave validation to the scanner.

Examples
--------
>>> config = TaskConfig(
...     GitHubActionsCore({"INPUT_OUTPUT-DIR": "reports"}),
...     {"GITHUB_WORKSPACE": "/home/runner/work/repo"},
... )
>>> config.get_report_out_dir()
'/home/runner/work/repo/reports'
>>> config.get_single_worker()
True
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from a11y_action._action_core import ActionCore, GitHubActionsCore
from a11y_action._input_coercion import (
    PathResolver,
    is_blank,
    join_absolute,
    parse_flag,
    parse_int,
    resolve_absolute_path,
)
from a11y_action._task_input_keys import ActionInput, TaskInputKey, input_name_for

logger = logging.getLogger(__name__)

USAGE_DOCS_URL = (
    "https://github.com/microsoft/accessibility-insights-action/blob/main/"
    "docs/gh-action-usage.md"
)
WORKSPACE_ENV_VAR = "GITHUB_WORKSPACE"
RUN_ID_ENV_VAR = "GITHUB_RUN_ID"
CHROME_BIN_ENV_VAR = "CHROME_BIN"

_DEFAULT_FALLBACK_ROOT = str(Path(__file__).resolve().parent)


class TaskConfig:
    """Resolve action inputs to typed settings.

    Parameters
    ----------
    core
        Raw input provider and job summary writer (default: a
        ``GitHubActionsCore`` reading ``env``).
    env
        Process environment mapping (default: ``os.environ``).
    resolve_path
        Callable anchoring a relative path at a base directory.
    fallback_root
        Base directory for relative paths when ``GITHUB_WORKSPACE`` is unset
        (default: the directory containing this module).
    """

    def __init__(
        self,
        core: ActionCore | None = None,
        env: Mapping[str, str] | None = None,
        *,
        resolve_path: PathResolver = join_absolute,
        fallback_root: str | None = None,
    ) -> None:
        self._env = os.environ if env is None else env
        self._core = GitHubActionsCore(self._env) if core is None else core
        self._resolve_path = resolve_path
        self._fallback_root = (
            _DEFAULT_FALLBACK_ROOT if fallback_root is None else fallback_root
        )

    def get_report_out_dir(self) -> str | None:
        return self._get_optional_path_input(ActionInput.OUTPUT_DIR)

    def get_static_site_dir(self) -> str | None:
        return self._get_optional_path_input(ActionInput.STATIC_SITE_DIR)

    def get_static_site_url_relative_path(self) -> str | None:
        return self._get_optional_string_input(
            ActionInput.STATIC_SITE_URL_RELATIVE_PATH
        )

    def get_chrome_path(self) -> str | None:
        """Return the browser binary, falling back to ``CHROME_BIN``."""
        chrome_path = self._get_optional_path_input(ActionInput.CHROME_PATH)
        if chrome_path is not None:
            return chrome_path
        logger.debug(
            "Input %s not supplied; using %s",
            ActionInput.CHROME_PATH,
            CHROME_BIN_ENV_VAR,
        )
        return self._env.get(CHROME_BIN_ENV_VAR)

    def get_url(self) -> str | None:
        return self._get_optional_string_input(ActionInput.URL)

    def get_max_urls(self) -> int | float | None:
        return self._get_optional_int_input(ActionInput.MAX_URLS)

    def get_discovery_patterns(self) -> str | None:
        return self._get_optional_string_input(ActionInput.DISCOVERY_PATTERNS)

    def get_input_file(self) -> str | None:
        return self._get_optional_path_input(ActionInput.INPUT_FILE)

    def get_input_urls(self) -> str | None:
        return self._get_optional_string_input(ActionInput.INPUT_URLS)

    def get_scan_timeout(self) -> int | float | None:
        return self._get_optional_int_input(ActionInput.SCAN_TIMEOUT)

    def get_static_site_port(self) -> int | float | None:
        return self._get_optional_int_input(ActionInput.STATIC_SITE_PORT)

    def get_run_id(self) -> int | float:
        """Return ``GITHUB_RUN_ID`` as an integer (``nan`` when unset)."""
        return parse_int(self._env.get(RUN_ID_ENV_VAR))

    def get_single_worker(self) -> bool:
        return parse_flag(self._core.get_input(ActionInput.SINGLE_WORKER))

    def get_baseline_file(self) -> str | None:
        return self._get_optional_path_input(ActionInput.BASELINE_FILE)

    def get_hosting_mode(self) -> str | None:
        return self._get_optional_string_input(ActionInput.HOSTING_MODE)

    def get_fail_on_accessibility_error(self) -> bool:
        return parse_flag(
            self._core.get_input(ActionInput.FAIL_ON_ACCESSIBILITY_ERROR)
        )

    def get_service_account_name(self) -> str | None:
        return self._get_optional_string_input(ActionInput.SERVICE_ACCOUNT_NAME)

    def get_service_account_password(self) -> str | None:
        return self._get_optional_string_input(
            ActionInput.SERVICE_ACCOUNT_PASSWORD
        )

    def get_auth_type(self) -> str | None:
        return self._get_optional_string_input(ActionInput.AUTH_TYPE)

    def get_usage_docs_url(self) -> str:
        return USAGE_DOCS_URL

    def get_input_name(self, key: TaskInputKey | str) -> str:
        """Return the input name a user should change for ``key``.

        Examples
        --------
        >>> TaskConfig(env={}).get_input_name("Url")
        'url'
        """
        return input_name_for(key)

    async def write_job_summary(self, job_summary_markdown: str) -> None:
        """Append pre-rendered markdown to the job summary and flush it.

        Runner failures propagate unchanged; nothing is retried.
        """
        await self._core.summary.add_raw(job_summary_markdown).write()

    def _workspace_root(self) -> str:
        workspace = self._env.get(WORKSPACE_ENV_VAR)
        return self._fallback_root if workspace is None else workspace

    def _get_optional_path_input(self, input_name: str) -> str | None:
        raw_value = self._core.get_input(input_name)
        resolved = resolve_absolute_path(
            raw_value, self._workspace_root(), self._resolve_path
        )
        if resolved is None:
            logger.debug("Input %s not supplied", input_name)
        return resolved

    def _get_optional_string_input(self, input_name: str) -> str | None:
        raw_value = self._core.get_input(input_name)
        if is_blank(raw_value):
            logger.debug("Input %s not supplied", input_name)
            return None
        return raw_value

    def _get_optional_int_input(self, input_name: str) -> int | float | None:
        raw_value = self._core.get_input(input_name)
        if is_blank(raw_value):
            logger.debug("Input %s not supplied", input_name)
            return None
        return parse_int(raw_value)
