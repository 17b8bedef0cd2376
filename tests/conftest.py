import io

import pytest
from rich.console import Console


def _memory_console() -> Console:
    """A plain-text console writing into memory, read back with ``.file.getvalue()``."""
    return Console(file=io.StringIO(), width=200, force_terminal=False, color_system=None)


@pytest.fixture
def out():
    return _memory_console()


@pytest.fixture
def err():
    return _memory_console()
