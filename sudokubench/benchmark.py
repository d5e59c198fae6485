#!/usr/bin/env python

"""
sudokubench/benchmark.py

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

**Times the solver over a file of puzzles.**

The input is a CSV file. Column 1 is the puzzle; column 2 is the expected
solution, used only to check the answer. By default the first row is a header.

After each puzzle, the cumulative rate is printed, e.g.

.. code-block:: none

    10382 boards/s (1000 boards, 0 failed)

"""

import argparse
import csv
import logging
import sys
import time
from typing import (
    Callable, Generator, Iterable, List, Optional, Sequence, Tuple,
)

from cardinal_pythonlib.argparse_func import RawDescriptionArgumentDefaultsHelpFormatter  # noqa
from cardinal_pythonlib.logs import main_only_quicksetup_rootlogger

from sudokubench.codec import parse_board, serialize_board
from sudokubench.common import (
    EXIT_SUCCESS,
    MalformedRecord,
    PuzzleError,
    run_guard,
)
from sudokubench.peers import PEERS, PeerTable
from sudokubench.solver import solve

log = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

DEMO_CSV = """
quizzes,solutions
530070000600195000098000060800060003400803001700020006060000280000419005000080079,534678912672195348198342567859761423426853791713924856961537284287419635345286179
"""


# =============================================================================
# BenchmarkStats
# =============================================================================

class BenchmarkStats(object):
    """
    Running totals for a benchmark.
    """
    def __init__(self) -> None:
        self.num_boards = 0
        self.num_failed = 0
        self.total_time = 0.0  # seconds spent solving

    def record(self, elapsed: float, ok: bool) -> None:
        """
        Adds one board.

        Args:
            elapsed: seconds spent solving it
            ok: was it solved correctly?
        """
        self.num_boards += 1
        self.total_time += elapsed
        if not ok:
            self.num_failed += 1

    @property
    def rate(self) -> Optional[float]:
        """
        Boards per second, or ``None`` if no time has been recorded yet.
        """
        if self.total_time <= 0:
            return None
        return self.num_boards / self.total_time

    def summary(self) -> str:
        rate = self.rate
        rate_str = "?" if rate is None else f"{rate:.0f}"
        return (f"{rate_str} boards/s ({self.num_boards} boards, "
                f"{self.num_failed} failed)")

    def __str__(self) -> str:
        return self.summary()


# =============================================================================
# Running
# =============================================================================

def check_record(row: Sequence[str],
                 peers: PeerTable = PEERS) -> Tuple[bool, float]:
    """
    Solves one puzzle and checks the answer.

    Args:
        row: CSV row; ``row[0]`` is the puzzle, ``row[1]`` the solution
        peers: peer table

    Returns:
        tuple: ``ok, elapsed``, where ``elapsed`` is the time spent solving,
        in seconds (parsing and checking are not timed)

    Raises:
        :exc:`MalformedRecord`, :exc:`sudokubench.common.MalformedPuzzle`
    """
    if len(row) < 2:
        raise MalformedRecord(f"Need puzzle and solution columns; got {row!r}")
    puzzle, expected = row[0], row[1]
    board = parse_board(puzzle)

    start = time.perf_counter()
    solved = solve(board, peers)
    elapsed = time.perf_counter() - start

    if solved is None:
        log.debug(f"No solution found for {puzzle}")
        return False, elapsed
    log.debug(f"Solved:\n{solved}")
    answer = serialize_board(solved)
    if answer != expected:
        log.debug(f"Wrong answer for {puzzle}: got {answer}, "
                  f"expected {expected}")
        return False, elapsed
    return True, elapsed


def run_benchmark(rows: Iterable[Sequence[str]],
                  out: Callable[[str], None] = print,
                  peers: PeerTable = PEERS) -> BenchmarkStats:
    """
    Solves every puzzle, reporting the running rate via ``out`` after each.

    Malformed rows are logged, counted as failures, and skipped.
    """
    stats = BenchmarkStats()
    for rownum, row in enumerate(rows, start=1):
        try:
            ok, elapsed = check_record(row, peers)
        except PuzzleError as e:
            log.error(f"Record {rownum}: {e}")
            stats.record(0.0, ok=False)
        else:
            stats.record(elapsed, ok)
        if stats.rate is not None:
            out(stats.summary())
    return stats


def read_rows(filename: str, header: bool = True) \
        -> Generator[List[str], None, None]:
    """
    Generates rows from a CSV file, skipping the header row if there is one.
    """
    with open(filename, "rt", newline="") as f:
        reader = csv.reader(f)
        if header:
            next(reader, None)
        for row in reader:
            yield row


# =============================================================================
# main
# =============================================================================

def main() -> None:
    """
    Command-line entry point.
    """
    parser = argparse.ArgumentParser(
        formatter_class=RawDescriptionArgumentDefaultsHelpFormatter,
        description=(
            f"Benchmark a Sudoku solver. Input is a CSV file like this:\n"
            f"{DEMO_CSV}\n"
            f"In puzzles, 0 or . is an unknown cell and other non-digit "
            f"characters are ignored."
        )
    )
    parser.add_argument(
        "filename", type=str, help="CSV file of puzzles and solutions")
    parser.add_argument(
        "--noheader", action="store_true",
        help="The file has no header row; treat the first row as a puzzle")
    parser.add_argument(
        "--verbose", action="store_true", help="Be verbose")

    args = parser.parse_args()
    main_only_quicksetup_rootlogger(level=logging.DEBUG if args.verbose
                                    else logging.INFO)

    log.info(f"Reading {args.filename}")
    stats = run_benchmark(read_rows(args.filename, header=not args.noheader))
    log.info(f"Finished: {stats}")
    sys.exit(EXIT_SUCCESS)


def command_line_entry() -> None:
    run_guard(main)


# =============================================================================
# Command-line entry point
# =============================================================================

if __name__ == "__main__":
    command_line_entry()
