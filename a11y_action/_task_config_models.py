"""Snapshot of every resolved task configuration setting."""

from __future__ import annotations

import math
from dataclasses import dataclass

from a11y_action._task_config import TaskConfig
from a11y_action._task_input_keys import ActionInput


@dataclass(frozen=True, slots=True)
class ResolvedTaskConfig:
    """Resolved settings captured from one pass over ``TaskConfig``.

    Attributes
    ----------
    report_out_dir, static_site_dir, input_file, baseline_file : str | None
        Absolute forward-slash paths, or ``None`` when not supplied.
    chrome_path : str | None
        Browser binary from ``chrome-path`` or ``CHROME_BIN``.
    static_site_url_relative_path, url, discovery_patterns : str | None
        Free-form string inputs.
    input_urls, hosting_mode, auth_type : str | None
        Free-form string inputs.
    service_account_name, service_account_password : str | None
        Service account credentials.
    max_urls, scan_timeout, static_site_port : int | float | None
        Integer inputs; ``nan`` when the value is not numeric.
    run_id : int | float
        ``GITHUB_RUN_ID`` as an integer.
    single_worker, fail_on_accessibility_error : bool
        Flags that are on unless set to ``false``.
    """

    report_out_dir: str | None
    static_site_dir: str | None
    static_site_url_relative_path: str | None
    chrome_path: str | None
    url: str | None
    max_urls: int | float | None
    discovery_patterns: str | None
    input_file: str | None
    input_urls: str | None
    scan_timeout: int | float | None
    static_site_port: int | float | None
    run_id: int | float
    single_worker: bool
    baseline_file: str | None
    hosting_mode: str | None
    fail_on_accessibility_error: bool
    service_account_name: str | None
    service_account_password: str | None
    auth_type: str | None

    def as_outputs(self) -> dict[str, str]:
        """Render settings as step outputs keyed by input name.

        Absent settings and the service account password are omitted.
        """
        values: dict[str, str | int | float | bool | None] = {
            ActionInput.OUTPUT_DIR: self.report_out_dir,
            ActionInput.STATIC_SITE_DIR: self.static_site_dir,
            ActionInput.STATIC_SITE_URL_RELATIVE_PATH: (
                self.static_site_url_relative_path
            ),
            ActionInput.CHROME_PATH: self.chrome_path,
            ActionInput.URL: self.url,
            ActionInput.MAX_URLS: self.max_urls,
            ActionInput.DISCOVERY_PATTERNS: self.discovery_patterns,
            ActionInput.INPUT_FILE: self.input_file,
            ActionInput.INPUT_URLS: self.input_urls,
            ActionInput.SCAN_TIMEOUT: self.scan_timeout,
            ActionInput.STATIC_SITE_PORT: self.static_site_port,
            "run-id": self.run_id,
            ActionInput.SINGLE_WORKER: self.single_worker,
            ActionInput.BASELINE_FILE: self.baseline_file,
            ActionInput.HOSTING_MODE: self.hosting_mode,
            ActionInput.FAIL_ON_ACCESSIBILITY_ERROR: (
                self.fail_on_accessibility_error
            ),
            ActionInput.SERVICE_ACCOUNT_NAME: self.service_account_name,
            ActionInput.AUTH_TYPE: self.auth_type,
        }
        return {
            key: _format_output(value)
            for key, value in values.items()
            if value is not None
        }


def _format_output(value: str | int | float | bool) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float) and math.isnan(value):
        return "NaN"
    return str(value)


def snapshot_task_config(config: TaskConfig) -> ResolvedTaskConfig:
    """Call every accessor once and capture the results."""
    return ResolvedTaskConfig(
        report_out_dir=config.get_report_out_dir(),
        static_site_dir=config.get_static_site_dir(),
        static_site_url_relative_path=config.get_static_site_url_relative_path(),
        chrome_path=config.get_chrome_path(),
        url=config.get_url(),
        max_urls=config.get_max_urls(),
        discovery_patterns=config.get_discovery_patterns(),
        input_file=config.get_input_file(),
        input_urls=config.get_input_urls(),
        scan_timeout=config.get_scan_timeout(),
        static_site_port=config.get_static_site_port(),
        run_id=config.get_run_id(),
        single_worker=config.get_single_worker(),
        baseline_file=config.get_baseline_file(),
        hosting_mode=config.get_hosting_mode(),
        fail_on_accessibility_error=config.get_fail_on_accessibility_error(),
        service_account_name=config.get_service_account_name(),
        service_account_password=config.get_service_account_password(),
        auth_type=config.get_auth_type(),
    )
