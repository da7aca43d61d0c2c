from __future__ import annotations

import io
import sys
from pathlib import Path

# Allow importing the package when running plain `pytest` without an editable install.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if SRC.exists():
    sys.path.insert(0, str(SRC))

import pytest

from esplang import Console, Interpreter


@pytest.fixture
def run_program():
    def _run(source, *, stdin: str = "", variables=None):
        stdout = io.StringIO()
        interpreter = Interpreter(Console(stdin=io.StringIO(stdin), stdout=stdout))
        result = interpreter.run(source, variables=variables)
        return result, stdout.getvalue().splitlines()

    return _run


@pytest.fixture
def fixtures_dir() -> Path:
    return Path(__file__).parent / "fixtures"
