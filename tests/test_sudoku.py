"""
tests/test_sudoku.py

"""

import argparse
import io
import sys

import pytest

from sudokugen.boards import count_givens, format_board
from sudokugen.common import BoardValidationError, EXIT_FAILURE, EXIT_SUCCESS
from sudokugen.sudoku import (
    DEMO_SUDOKU_1,
    difficulty_type,
    main,
    read_puzzle,
    STDIN_FILENAME,
    Sudoku,
)

from sample_boards import check_solution, GRID1, GRID2, SOLUTION1


# =============================================================================
# Sudoku
# =============================================================================

def test_sudoku_solve():
    s = Sudoku(GRID1)
    assert not s.solved
    assert str(s) == format_board(GRID1)
    assert s.solve()
    assert s.solved
    assert s.solution_data == SOLUTION1
    assert str(s) == format_board(SOLUTION1)
    assert s.working == ["Solved via constraint propagation alone"]
    assert s.solve()  # already solved


def test_sudoku_solve_with_working():
    s = Sudoku(GRID2)
    assert s.solve(show_working=True)
    check_solution(GRID2, s.solution_data)
    assert len(s.working) > 1
    assert s.working[-1].startswith(
        "Solved via constraint propagation, guessing to depth")


def test_sudoku_demo():
    s = Sudoku(DEMO_SUDOKU_1)
    assert s.solve()
    check_solution(s.problem_data, s.solution_data)


def test_sudoku_solve_ip():
    s = Sudoku(GRID1)
    assert s.solve_ip()
    assert s.solution_data == SOLUTION1
    assert s.working == ["Solved via integer programming method"]


def test_sudoku_unsolvable():
    s = Sudoku("1" * 81)
    assert not s.solve()
    assert not s.solved
    assert "Contradiction" in s.candidates_str()


def test_sudoku_rejects_bad_text():
    with pytest.raises(BoardValidationError):
        Sudoku("123\n456\n")


def test_sudoku_unique():
    assert Sudoku(GRID1).has_unique_solution()


# =============================================================================
# Command line
# =============================================================================

def run_main(argv) -> int:
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    return excinfo.value.code


def test_difficulty_type():
    assert difficulty_type("insane") == "insane"
    assert difficulty_type("30") == 30
    with pytest.raises(argparse.ArgumentTypeError):
        difficulty_type("tricky")


def test_cli_no_command():
    assert run_main([]) == EXIT_FAILURE


def test_cli_demo():
    assert run_main(["demo"]) == EXIT_SUCCESS


def test_cli_solve(demo_file):
    assert run_main(["solve", demo_file]) == EXIT_SUCCESS
    assert run_main(["solve", demo_file, "--reverse", "--working",
                     "--unique"]) == EXIT_SUCCESS
    assert run_main(["solve", demo_file, "--method", "ip"]) == EXIT_SUCCESS


def test_cli_solve_failure(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("1" * 81)
    assert run_main(["solve", str(path)]) == EXIT_FAILURE


def test_cli_solve_invalid_file(tmp_path):
    path = tmp_path / "invalid.txt"
    path.write_text("not a sudoku")
    with pytest.raises(BoardValidationError):
        main(["solve", str(path)])


def test_cli_candidates(demo_file):
    assert run_main(["candidates", demo_file]) == EXIT_SUCCESS


def test_cli_generate(capsys):
    assert run_main(["generate", "--difficulty", "30",
                     "--seed", "3"]) == EXIT_SUCCESS
    board = capsys.readouterr().out.strip().splitlines()[-1]
    assert len(board) == 81
    assert count_givens(board) == 30


def test_cli_generate_named_difficulty(capsys):
    assert run_main(["generate", "--difficulty", "hard",
                     "--seed", "3", "--max-attempts", "1000"]) == EXIT_SUCCESS
    board = capsys.readouterr().out.strip().splitlines()[-1]
    assert count_givens(board) == 44


def test_cli_generate_bad_max_attempts():
    with pytest.raises(ValueError):
        main(["generate", "--max-attempts", "0"])


def test_cli_solve_from_stdin(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO(DEMO_SUDOKU_1))
    assert run_main(["solve", STDIN_FILENAME]) == EXIT_SUCCESS


def test_read_puzzle_from_stdin(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO(GRID1))
    assert read_puzzle(STDIN_FILENAME) == GRID1
