import io
from pathlib import Path

import pytest

from bf_runner import run_bf

PROGRAMS = Path(__file__).parent / 'programs'


@pytest.fixture
def program():
    """Load a bundled sample program by name."""
    def load(name):
        return (PROGRAMS / name).read_text()
    return load


@pytest.fixture
def run():
    """Run code with the given stdin text and return what it printed."""
    def _run(code, stdin=''):
        out = io.StringIO()
        run_bf(code, io.StringIO(stdin), out)
        return out.getvalue()
    return _run
