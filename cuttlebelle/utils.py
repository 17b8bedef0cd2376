"""
Small helpers shared by the build steps: slugs for page ids, elapsed build
time and the installed package version.
"""

import re
from importlib.metadata import PackageNotFoundError, version


def get_version() -> str:
    """Get the installed package version, or "dev" when running from source."""
    try:
        return version("cuttlebelle")
    except PackageNotFoundError:
        return "dev"


def slug(text: str) -> str:
    """Slugify a string.

    Dots become dashes like every other run of non-alphanumeric characters,
    so ``"about.me page"`` turns into ``"about-me-page"``.
    """
    value = re.sub(r"[^a-z0-9]+", "-", text.lower())
    return value.strip("-")


def convert_elapsed(elapsed: float | tuple[int, int]) -> str:
    """Format elapsed time as seconds with three decimals.

    Accepts either plain seconds or a ``(seconds, nanoseconds)`` pair.
    """
    if isinstance(elapsed, tuple):
        seconds, nanoseconds = elapsed
        elapsed = seconds + nanoseconds / 1e9
    return f"{elapsed:.3f}"
