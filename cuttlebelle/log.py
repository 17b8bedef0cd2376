"""
Leveled console output for the build.

Every user-facing line goes through Log. The first line of a run, whatever
its level, is preceded by one spacer. Errors are remembered until the next
``done`` so the "Build done" notification is held back for a build that
reported a problem.

Line formats (icon, label and column alignment are fixed):

     🐙           <bold welcome>
     🔥  ERROR:   <message>            (red, stderr)
     🔔  INFO:    <message>
     ✔  OK:      <message>            (green)
     🚀           <bold done>          (green)
     😬  VERBOSE: <message>            (gray, only in verbose mode)
"""

from rich.console import Console
from rich.text import Text

from .console import console, err_console
from .notify import Notify
from .state import LogState
from .style import Style


class Log:
    def __init__(
        self,
        state: LogState,
        notify: Notify,
        out: Console | None = None,
        err: Console | None = None,
    ):
        self.state = state
        self.notify = notify
        self.out = out or console
        self.err = err or err_console

    def _start(self) -> None:
        if not self.state.output:  # if we haven't printed anything yet
            self.space()  # only then we add an empty line on the top
        self.state.output = True

    @staticmethod
    def _emit(target: Console, line: str) -> None:
        target.print(Text.from_ansi(line), soft_wrap=True)

    def welcome(self, text: object) -> None:
        """Log a welcome message"""
        self._start()
        self._emit(self.err, f" 🐙           {Style.bold(str(text))}")

    def error(self, text: object) -> None:
        """Log an error and notify about it"""
        self._start()
        self._emit(self.err, f" 🔥  {Style.red(f'ERROR:   {text}')}")
        self.notify.info(text)
        self.state.has_error = True

    def info(self, text: object) -> None:
        """Log a message"""
        self._start()
        self._emit(self.out, f" 🔔  INFO:    {text}")

    def ok(self, text: object) -> None:
        """Log success"""
        self._start()
        self._emit(self.out, f" ✔  {Style.green('OK:')}      {Style.green(text)}")

    def done(self, text: object) -> None:
        """Log the final message of a build.

        Notifies "Build done" unless an error was logged since the last
        ``done``, then clears the error flag for the next build.
        """
        self._start()
        self._emit(self.out, f" 🚀           {Style.green(Style.bold(text))}")
        if not self.state.has_error:
            self.notify.info("Build done")
        self.state.has_error = False

    def verbose(self, text: object) -> None:
        """Log a verbose message, only in verbose mode"""
        if not self.state.verbose_mode:
            return
        self._start()
        self._emit(self.out, f" 😬  {Style.gray(f'VERBOSE: {text}')}")

    def space(self) -> None:
        """Add some space to the output"""
        self.out.print("\n", soft_wrap=True, highlight=False)
