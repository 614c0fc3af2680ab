"""
tests/conftest.py

"""

import pytest

from sudokugen.sudoku import DEMO_SUDOKU_1


@pytest.fixture
def demo_file(tmp_path) -> str:
    path = tmp_path / "demo.txt"
    path.write_text(DEMO_SUDOKU_1)
    return str(path)
