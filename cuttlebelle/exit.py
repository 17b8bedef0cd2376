"""
Uniform process termination.

ExitHandler is the single place the build tool exits through, whether the
build finished, the user pressed Ctrl+C or something blew up. It reports the
error (if any) through Log, adds a trailing spacer unless asked not to, and
exits with status 0.

The integer ``1`` passed as the error is a sentinel meaning "exit, nothing
went wrong" and is never reported.
"""

import signal
import sys
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, NoReturn

from .log import Log


@dataclass(frozen=True)
class ExitContext:
    without_space: bool = False


def _is_sentinel(error: object) -> bool:
    """The number 1 (``1`` or ``1.0``, but not ``True``) means "just exit"."""
    return not isinstance(error, bool) and isinstance(error, (int, float)) and error == 1


class ExitHandler:
    def __init__(self, log: Log, terminate: Callable[[int], NoReturn] = sys.exit):
        self.log = log
        self.terminate = terminate
        self.exiting = False

    def __call__(self, context: ExitContext, error: object = None) -> None:
        if self.exiting:  # a second signal while we are already on our way out
            self.terminate(0)
            return

        self.exiting = True

        try:
            if error and not _is_sentinel(error):
                try:  # try using our pretty output
                    self.log.error(error)
                except Exception:  # the logger is broken too, print it old school
                    try:
                        print(error, file=sys.stderr)
                    except OSError:  # stderr is gone as well
                        pass

            if not context.without_space:
                self.log.space()  # adding some space
        finally:
            self.terminate(0)  # terminate whatever happened above


def install_exit_handlers(exit_handler: ExitHandler) -> dict[int, Any]:
    """Route SIGINT and SIGTERM through the exit handler.

    Returns the previously installed handlers keyed by signal number so they
    can be restored with ``signal.signal``.
    """

    def on_signal(signum, frame):
        exit_handler(ExitContext(without_space=True))

    previous = {}
    for signum in (signal.SIGINT, signal.SIGTERM):
        previous[signum] = signal.signal(signum, on_signal)
    return previous


def run_guarded(exit_handler: ExitHandler, entry: Callable[..., Any], *args: Any, **kwargs: Any) -> None:
    """Run a build entry point and leave through the exit handler.

    An uncaught exception is reported as the exit error. A normal return
    exits without an error.
    """
    try:
        entry(*args, **kwargs)
    except Exception as e:
        exit_handler(ExitContext(without_space=False), e)
        return
    exit_handler(ExitContext(without_space=False))
