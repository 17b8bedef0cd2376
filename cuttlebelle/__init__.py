"""Cuttlebelle - console output and process lifecycle helpers for the static site builder"""

from .config import (
    CONFIG_FILE,
    CUTTLEBELLE_DIR,
    DEFAULT_CONFIG,
    SILENT,
    VERBOSE,
    get_bool_setting,
    get_setting,
    load_config,
)
from .console import console, err_console
from .exit import ExitContext, ExitHandler, install_exit_handlers, run_guarded
from .log import Log
from .main import Helpers, create_helpers
from .notify import ICON, TITLE, Notify, send_notification
from .state import HelperContext, LogState, NotifyConfig, WatchSignal, create_context
from .style import CODES, RESET, Style, StyleCode
from .utils import convert_elapsed, get_version, slug

__all__ = [
    # Config
    "CONFIG_FILE",
    "CUTTLEBELLE_DIR",
    "DEFAULT_CONFIG",
    "SILENT",
    "VERBOSE",
    "get_bool_setting",
    "get_setting",
    "load_config",
    # Console
    "console",
    "err_console",
    # State
    "HelperContext",
    "LogState",
    "NotifyConfig",
    "WatchSignal",
    "create_context",
    # Style
    "CODES",
    "RESET",
    "Style",
    "StyleCode",
    # Log
    "Log",
    # Notify
    "ICON",
    "TITLE",
    "Notify",
    "send_notification",
    # Exit
    "ExitContext",
    "ExitHandler",
    "install_exit_handlers",
    "run_guarded",
    # Wiring
    "Helpers",
    "create_helpers",
    # Utils
    "convert_elapsed",
    "get_version",
    "slug",
]
