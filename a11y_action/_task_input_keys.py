"""Named inputs of the accessibility scan action and their symbolic keys.

``TaskInputKey`` identifies the settings that downstream validation reports
back to users. ``INPUT_NAMES`` maps each key to the ``action.yml`` input a
user should change.
"""

from __future__ import annotations

import enum
from types import MappingProxyType


class ActionInput:
    """Input names declared in ``action.yml``."""

    OUTPUT_DIR = "output-dir"
    STATIC_SITE_DIR = "static-site-dir"
    STATIC_SITE_URL_RELATIVE_PATH = "static-site-url-relative-path"
    CHROME_PATH = "chrome-path"
    URL = "url"
    MAX_URLS = "max-urls"
    DISCOVERY_PATTERNS = "discovery-patterns"
    INPUT_FILE = "input-file"
    INPUT_URLS = "input-urls"
    SCAN_TIMEOUT = "scan-timeout"
    STATIC_SITE_PORT = "static-site-port"
    SINGLE_WORKER = "single-worker"
    BASELINE_FILE = "baseline-file"
    HOSTING_MODE = "hosting-mode"
    FAIL_ON_ACCESSIBILITY_ERROR = "fail-on-accessibility-error"
    SERVICE_ACCOUNT_NAME = "service-account-name"
    SERVICE_ACCOUNT_PASSWORD = "service-account-password"
    AUTH_TYPE = "auth-type"


ACTION_INPUT_NAMES: tuple[str, ...] = (
    ActionInput.OUTPUT_DIR,
    ActionInput.STATIC_SITE_DIR,
    ActionInput.STATIC_SITE_URL_RELATIVE_PATH,
    ActionInput.CHROME_PATH,
    ActionInput.URL,
    ActionInput.MAX_URLS,
    ActionInput.DISCOVERY_PATTERNS,
    ActionInput.INPUT_FILE,
    ActionInput.INPUT_URLS,
    ActionInput.SCAN_TIMEOUT,
    ActionInput.STATIC_SITE_PORT,
    ActionInput.SINGLE_WORKER,
    ActionInput.BASELINE_FILE,
    ActionInput.HOSTING_MODE,
    ActionInput.FAIL_ON_ACCESSIBILITY_ERROR,
    ActionInput.SERVICE_ACCOUNT_NAME,
    ActionInput.SERVICE_ACCOUNT_PASSWORD,
    ActionInput.AUTH_TYPE,
)


class TaskInputKey(enum.Enum):
    """Symbolic keys for settings named in user-facing error messages."""

    HostingMode = "HostingMode"
    StaticSiteDir = "StaticSiteDir"
    StaticSiteUrlRelativePath = "StaticSiteUrlRelativePath"
    Url = "Url"
    StaticSitePort = "StaticSitePort"


INPUT_NAMES: MappingProxyType[TaskInputKey, str] = MappingProxyType(
    {
        TaskInputKey.HostingMode: ActionInput.HOSTING_MODE,
        TaskInputKey.StaticSiteDir: ActionInput.STATIC_SITE_DIR,
        TaskInputKey.StaticSiteUrlRelativePath: (
            ActionInput.STATIC_SITE_URL_RELATIVE_PATH
        ),
        TaskInputKey.Url: ActionInput.URL,
        TaskInputKey.StaticSitePort: ActionInput.STATIC_SITE_PORT,
    }
)


def input_name_for(key: TaskInputKey | str) -> str:
    """Return the action input name backing ``key``.

    Parameters
    ----------
    key
        A ``TaskInputKey`` member or its symbolic name, such as ``"Url"``.

    Returns
    -------
    str
        The ``action.yml`` input name.

    Raises
    ------
    ValueError
        If ``key`` is not one of the symbolic keys.

    Examples
    --------
    >>> input_name_for("Url")
    'url'
    >>> input_name_for(TaskInputKey.StaticSitePort)
    'static-site-port'
    """
    return INPUT_NAMES[TaskInputKey(key)]
