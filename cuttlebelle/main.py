"""
Wiring for the console helpers.

``create_helpers`` builds one HelperContext and hands it to Notify, Log and
ExitHandler, so every part of the build tool shares the same state:

    helpers = create_helpers(verbose=args.verbose, silent=args.silent)
    install_exit_handlers(helpers.exit_handler)
    helpers.log.welcome("Cuttlebelle v1.0.0")
    ...
    helpers.context.watch.running = True  # the watcher flips this on start
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import NoReturn

from rich.console import Console

from .exit import ExitHandler
from .log import Log
from .notify import Notify, send_notification
from .state import HelperContext, create_context


@dataclass
class Helpers:
    context: HelperContext
    notify: Notify
    log: Log
    exit_handler: ExitHandler


def create_helpers(
    verbose: bool | None = None,
    silent: bool | None = None,
    context: HelperContext | None = None,
    out: Console | None = None,
    err: Console | None = None,
    send: Callable[[str, str, str], None] = send_notification,
    terminate: Callable[[int], NoReturn] | None = None,
) -> Helpers:
    """Build Notify, Log and ExitHandler around one shared context.

    Args:
        verbose: Overrides CUTTLEBELLE_VERBOSE when given.
        silent: Overrides CUTTLEBELLE_SILENT when given.
        context: An existing context to share instead of creating one.
        out: Console for standard output lines.
        err: Console for error lines.
        send: Notification dispatcher.
        terminate: Process exit function, ``sys.exit`` by default.
    """
    ctx = context or create_context(verbose=verbose, silent=silent)
    notify = Notify(ctx.notify_config, lambda: ctx.watch.running, send=send)
    log = Log(ctx.log_state, notify, out=out, err=err)
    exit_handler = ExitHandler(log) if terminate is None else ExitHandler(log, terminate)
    return Helpers(context=ctx, notify=notify, log=log, exit_handler=exit_handler)
