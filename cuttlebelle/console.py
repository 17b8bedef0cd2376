"""
Shared Rich Console singletons for terminal output.

Cuttlebelle writes to two streams: informational and success lines go to
stdout, errors and the welcome banner go to stderr. Each stream gets exactly
one Rich Console, created here and imported everywhere else.

Rich decides per stream whether colors are supported. When output is piped
into a file or captured by a test, the same lines come out as plain text.

Usage:
    from .console import console, err_console
    err_console.print("[yellow]Warning: something odd happened[/yellow]")
"""

from rich.console import Console

# Standard output: info, ok, done, verbose and blank spacer lines.
console = Console()

# Standard error: welcome, error and internal warnings.
err_console = Console(stderr=True)
