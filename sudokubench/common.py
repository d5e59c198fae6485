#!/usr/bin/env python

"""
sudokubench/common.py

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

Common constants, exceptions and functions for the Sudoku solver.

"""

import logging
import sys
import traceback
from typing import Callable

log = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

RANK = 3  # size of a box
N = RANK ** 2  # digits, and cells per row/column/box
N_CELLS = N * N
N_PEERS = 2 * (N - 1) + (RANK - 1) ** 2  # 8 row + 8 column + 4 box

UNKNOWN_CHARS = "0."
DIGIT_CHARS = "123456789"

NEWLINE = "\n"
SPACE = " "

EXIT_FAILURE = 1
EXIT_SUCCESS = 0


# =============================================================================
# Exceptions
# =============================================================================

class PuzzleError(Exception):
    """
    Base class for everything the solver raises deliberately.
    """
    pass


class MalformedPuzzle(PuzzleError):
    """
    A puzzle string did not describe exactly 81 cells.
    """
    pass


class MalformedRecord(PuzzleError):
    """
    A benchmark record did not have the columns we need.
    """
    pass


class SolutionFailure(PuzzleError):
    """
    A contradiction was found: some cell has no possible digits left.
    """
    pass


class EmptyCandidateSet(PuzzleError):
    """
    Asked for a digit from a set that has none.
    """
    pass


class UnsolvedBoard(PuzzleError):
    """
    Asked for the solution of a board that is not solved.
    """
    pass


# =============================================================================
# Generic helper functions
# =============================================================================

def run_guard(function: Callable[[], None]) -> None:
    try:
        function()
    except Exception as e:
        log.critical(str(e))
        traceback.print_exc()
        sys.exit(EXIT_FAILURE)
