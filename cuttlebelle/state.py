"""
Process-wide state shared by the console helpers.

Instead of module-level globals, the state lives in a single HelperContext
created once at startup (see ``create_context``) and handed by reference to
Log, Notify and ExitHandler. Execution is single-threaded, so no locking is
involved.
"""

from dataclasses import dataclass, field

from .config import SILENT, VERBOSE


@dataclass
class LogState:
    verbose_mode: bool = False  # set once at startup
    output: bool = False  # have we printed anything yet?
    has_error: bool = False  # let's assume the best


@dataclass
class NotifyConfig:
    silent: bool = False


@dataclass
class WatchSignal:
    """Running flag owned by the file watcher. Notify only ever reads it."""

    running: bool = False


@dataclass
class HelperContext:
    log_state: LogState = field(default_factory=LogState)
    notify_config: NotifyConfig = field(default_factory=NotifyConfig)
    watch: WatchSignal = field(default_factory=WatchSignal)


def create_context(verbose: bool | None = None, silent: bool | None = None) -> HelperContext:
    """Build the shared context, falling back to the configured settings.

    Explicit arguments (usually CLI flags) take precedence over
    CUTTLEBELLE_VERBOSE and CUTTLEBELLE_SILENT.
    """
    return HelperContext(
        log_state=LogState(verbose_mode=VERBOSE if verbose is None else verbose),
        notify_config=NotifyConfig(silent=SILENT if silent is None else silent),
    )
