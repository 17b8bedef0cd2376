"""
ANSI escape styling for terminal text.

Every style wraps its text in a start and an end sequence. Styles can be
nested: when a styled string is wrapped again, any end sequence inside it is
rewritten to the outer start sequence, so closing the inner style re-asserts
the outer one instead of dropping back to the terminal default.

    >>> Style.green(f"built {Style.bold('index.html')} in 2s")

Colors share the generic foreground reset (39m). Bold is a separate SGR
attribute and closes with 22m, which leaves the current color untouched.
"""

from dataclasses import dataclass

ESCAPE = "\u001b["

# Generic foreground color reset
RESET = "39m"


@dataclass(frozen=True)
class StyleCode:
    """An opening SGR code and the code that closes it."""

    start: str
    end: str = RESET


CODES: dict[str, StyleCode] = {
    "black": StyleCode("30m"),
    "red": StyleCode("31m"),
    "green": StyleCode("32m"),
    "yellow": StyleCode("33m"),
    "blue": StyleCode("34m"),
    "magenta": StyleCode("35m"),
    "cyan": StyleCode("36m"),
    "white": StyleCode("37m"),
    "gray": StyleCode("90m"),
    "bold": StyleCode("1m", "22m"),
}


class Style:
    """Namespace of styling functions returning ANSI-escaped strings."""

    @staticmethod
    def parse(text: object, start: str, end: str = RESET) -> str:
        """Wrap text in an escape sequence while keeping nested styles intact.

        Args:
            text: Anything with a string form. ``None`` yields an empty string.
            start: The opening SGR code, e.g. ``"32m"``.
            end: The closing SGR code, the color reset by default.

        Returns:
            The escaped text.
        """
        if text is None:
            return ""

        opening = f"{ESCAPE}{start}"
        closing = f"{ESCAPE}{end}"
        return f"{opening}{str(text).replace(closing, opening)}{closing}"

    @classmethod
    def _apply(cls, name: str, text: object) -> str:
        code = CODES[name]
        return cls.parse(text, code.start, code.end)

    @classmethod
    def black(cls, text: object) -> str:
        return cls._apply("black", text)

    @classmethod
    def red(cls, text: object) -> str:
        return cls._apply("red", text)

    @classmethod
    def green(cls, text: object) -> str:
        return cls._apply("green", text)

    @classmethod
    def yellow(cls, text: object) -> str:
        return cls._apply("yellow", text)

    @classmethod
    def blue(cls, text: object) -> str:
        return cls._apply("blue", text)

    @classmethod
    def magenta(cls, text: object) -> str:
        return cls._apply("magenta", text)

    @classmethod
    def cyan(cls, text: object) -> str:
        return cls._apply("cyan", text)

    @classmethod
    def white(cls, text: object) -> str:
        return cls._apply("white", text)

    @classmethod
    def gray(cls, text: object) -> str:
        return cls._apply("gray", text)

    @classmethod
    def bold(cls, text: object) -> str:
        return cls._apply("bold", text)
