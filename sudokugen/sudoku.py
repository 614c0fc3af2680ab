#!/usr/bin/env python

"""
sudokugen/sudoku.py

===============================================================================

    Copyright (C) 2019-2019 Rudolf Cardinal (rudolf@pobox.com).

    This is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This software is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
    GNU General Public License for more details.

    You should have received a copy of the GNU General Public License
    along with this software. If not, see <http://www.gnu.org/licenses/>.

===============================================================================

**Generates and solves Sudoku puzzles.**

It can solve in two ways:

- Constraint propagation and search (the default). Eliminate digits that a
  cell's peers already have ("Naked Singles"), place digits that have only
  one possible home in a row, column or box ("Hidden Singles"), and guess when
  that runs out, most constrained cell first.

- Integer programming, as a cross-check.

"""

import argparse
import logging
import random
import sys
from typing import List, Optional, Union

from cardinal_pythonlib.argparse_func import RawDescriptionArgumentDefaultsHelpFormatter  # noqa
from cardinal_pythonlib.logs import main_only_quicksetup_rootlogger

from sudokugen.boards import (
    count_distinct_digits,
    format_board,
    parse_board_text,
)
from sudokugen.candidates import CandidateMap
from sudokugen.common import (
    Contradiction,
    EXIT_FAILURE,
    EXIT_SUCCESS,
    MIN_DISTINCT_GIVEN_DIGITS,
    run_guard,
)
from sudokugen.generator import DIFFICULTY, DIFFICULTY_EASY, generate
from sudokugen.ipsolver import solve_ip
from sudokugen.solver import has_unique_solution, solve_candidates

log = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

DEMO_SUDOKU_1 = """
# Coton 54, Coton Community News Dec 2019-Jan 2020

... ... ...
..2 3.1 45.
.1. ... .6.

.47 .5. 38.
... 7.3 ...
.36 ... 14.

.7. ... .9.
.91 4.5 6..
... ..9 ...
"""

METHOD_LOGIC = "logic"
METHOD_IP = "ip"
STDIN_FILENAME = "-"


# =============================================================================
# Sudoku
# =============================================================================

class Sudoku(object):
    """
    Represents and solves Sudoku puzzles.
    """

    def __init__(self, string_version: str) -> None:
        """
        Args:
            string_version:
                String representation of the puzzle. Rules as below.

        - Lines starting with ``#`` are comments.
        - Use numbers 1-9 for known cells.
        - ``.`` represents an unknown cell.
        - Whitespace is ignored, so lay it out as you like (e.g. a space
          between boxes and a blank line between bands of boxes), or give all
          81 cells on one line.
        """
        self.problem_data = parse_board_text(string_version)
        self.solution_data = None  # type: Optional[str]
        self.working = []  # type: List[str]

    # -------------------------------------------------------------------------
    # String representations
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return self.solution_str() if self.solved else self.problem_str()

    @property
    def solved(self) -> bool:
        return self.solution_data is not None

    def problem_str(self) -> str:
        """
        Creates the string representation of the problem.
        """
        return format_board(self.problem_data)

    def solution_str(self) -> str:
        """
        Creates the string representation of the solution.
        """
        return format_board(self.solution_data)

    def candidates_str(self) -> str:
        """
        Shows the candidates for each cell, after propagating from the
        givens.
        """
        try:
            return str(CandidateMap.from_board(self.problem_data))
        except Contradiction as e:
            return f"Contradiction: {e}"

    # -------------------------------------------------------------------------
    # Checks
    # -------------------------------------------------------------------------

    def warn_if_not_well_formed(self) -> None:
        n_distinct = count_distinct_digits(self.problem_data)
        if n_distinct < MIN_DISTINCT_GIVEN_DIGITS:
            log.warning(
                f"Not a well-formed Sudoku: {n_distinct} distinct initial "
                f"values given, but need {MIN_DISTINCT_GIVEN_DIGITS} to be "
                f"well-formed.")

    def has_unique_solution(self) -> bool:
        return has_unique_solution(self.problem_data)

    # -------------------------------------------------------------------------
    # Solve via puzzle logic and show working
    # -------------------------------------------------------------------------

    def solve(self, reverse: bool = False,
              show_working: bool = False) -> bool:
        """
        Solves via constraint propagation and search, writing to
        :attr:`solution_data` and :attr:`working`.

        Returns: solved?
        """
        if self.solved:
            log.info("Already solved")
            return True
        self.warn_if_not_well_formed()
        result = solve_candidates(self.problem_data, reverse=reverse,
                                  record_working=show_working)
        if result is None:
            log.error("Unable to solve!")
            return False
        self.solution_data = result.to_board()
        self.working = result.working
        if result.guess_level:
            self.working.append(
                f"Solved via constraint propagation, guessing to depth "
                f"{result.guess_level}")
        else:
            self.working.append("Solved via constraint propagation alone")
        return True

    # -------------------------------------------------------------------------
    # Solve via integer programming
    # -------------------------------------------------------------------------

    def solve_ip(self) -> bool:
        """
        Solves via integer programming, writing to :attr:`solution_data`.

        Returns: solved?
        """
        if self.solved:
            log.info("Already solved")
            return True
        self.warn_if_not_well_formed()
        solution = solve_ip(self.problem_data)
        if solution is None:
            log.error("Unable to solve!")
            return False
        self.solution_data = solution
        self.working.append("Solved via integer programming method")
        return True


# =============================================================================
# Command-line helpers
# =============================================================================

def difficulty_type(value: str) -> Union[str, int]:
    """
    ``argparse`` type for a difficulty: a name or a number of givens.
    """
    if value in DIFFICULTY:
        return value
    try:
        return int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Difficulty must be one of {list(DIFFICULTY)} or an integer; "
            f"got {value!r}")


def read_puzzle(filename: str) -> str:
    """
    Reads puzzle text from a file, or from stdin if the filename is ``-``.
    """
    if filename == STDIN_FILENAME:
        log.info("Reading from stdin")
        return sys.stdin.read()
    log.info(f"Reading {filename}")
    with open(filename, "rt") as f:
        return f.read()


# =============================================================================
# main
# =============================================================================

def main(argv: List[str] = None) -> None:
    """
    Command-line entry point.
    """
    cmd_candidates = "candidates"
    cmd_demo = "demo"
    cmd_generate = "generate"
    cmd_solve = "solve"

    help_filename = (
        f"Puzzle filename to read ({STDIN_FILENAME!r} for stdin). "
        f"Must contain text in format as above.")

    parser = argparse.ArgumentParser(
        formatter_class=RawDescriptionArgumentDefaultsHelpFormatter,
        description=(
            f"Generate and solve Sudoku puzzles. Format is:\n\n"
            f"{DEMO_SUDOKU_1}\n"
            f"or all 81 cells on a single line."
        )
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Be verbose")
    subparsers = parser.add_subparsers(
        dest="command",
        help="Append --help for more help")

    parser_solve = subparsers.add_parser(cmd_solve, help="Solve from a file")
    parser_solve.add_argument(
        "filename", type=str, help=help_filename)
    parser_solve.add_argument(
        "--method", choices=[METHOD_LOGIC, METHOD_IP], default=METHOD_LOGIC,
        help="Solve by constraint propagation and search, or by integer "
             "programming")
    parser_solve.add_argument(
        "--reverse", action="store_true",
        help="Search candidates in reverse order (logic method)")
    parser_solve.add_argument(
        "--working", action="store_true",
        help="Show working (logic method)")
    parser_solve.add_argument(
        "--unique", action="store_true",
        help="Also check whether the solution is unique")

    parser_candidates = subparsers.add_parser(
        cmd_candidates,
        help="Show the candidates for each cell, from a file")
    parser_candidates.add_argument(
        "filename", type=str, help=help_filename)

    parser_generate = subparsers.add_parser(
        cmd_generate, help="Generate a new puzzle")
    parser_generate.add_argument(
        "--difficulty", type=difficulty_type, default=DIFFICULTY_EASY,
        help=f"Difficulty: one of {list(DIFFICULTY)}, or the number of "
             f"givens (17-81)")
    parser_generate.add_argument(
        "--seed", type=int, default=None,
        help="Random number seed, for a reproducible puzzle")
    parser_generate.add_argument(
        "--max-attempts", type=int, default=None,
        help="Give up after this many attempts (default: never give up)")

    _parser_demo = subparsers.add_parser(cmd_demo, help="Run demo")

    args = parser.parse_args(argv)
    main_only_quicksetup_rootlogger(level=logging.DEBUG if args.verbose
                                    else logging.INFO)

    if not args.command:
        print("Must specify command")
        sys.exit(EXIT_FAILURE)

    if args.command == cmd_generate:
        if args.max_attempts is not None and args.max_attempts < 1:
            raise ValueError("--max-attempts must be at least 1")
        board = generate(args.difficulty,
                         rng=random.Random(args.seed),
                         max_attempts=args.max_attempts)
        log.info(f"Generated:\n{format_board(board)}")
        print(board)
        sys.exit(EXIT_SUCCESS)

    if args.command == cmd_demo:
        problem = Sudoku(DEMO_SUDOKU_1)
    else:
        problem = Sudoku(read_puzzle(args.filename))

    if args.command == cmd_candidates:
        log.info(f"Candidates:\n{problem.candidates_str()}")
        sys.exit(EXIT_SUCCESS)

    log.info(f"Solving:\n{problem}")
    if args.command == cmd_solve and args.method == METHOD_IP:
        success = problem.solve_ip()
    elif args.command == cmd_solve:
        success = problem.solve(reverse=args.reverse,
                                show_working=args.working)
    else:
        success = problem.solve()
    if not success:
        sys.exit(EXIT_FAILURE)
    if args.command == cmd_solve and args.working:
        log.info("Working:\n" + "\n".join(problem.working))
    log.info(f"Answer:\n{problem}")
    if args.command == cmd_solve and args.unique:
        log.info(f"Unique solution: {problem.has_unique_solution()}")
    sys.exit(EXIT_SUCCESS)


def guarded_main() -> None:
    run_guard(main)


# =============================================================================
# Command-line entry point
# =============================================================================

if __name__ == "__main__":
    guarded_main()
