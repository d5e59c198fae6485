#!/usr/bin/env python

"""
sudokubench/codec.py

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

**Reading and writing boards as strings.**

Puzzle strings are row-major:

- ``0`` or ``.`` is an unknown cell;
- ``1`` to ``9`` is a given cell;
- anything else (spaces, separators, newlines) is ignored.

There must be exactly 81 cells.

Solutions are 81 digits with no separators.

"""

from sudokubench.board import Board
from sudokubench.candidates import CandidateSet
from sudokubench.common import (
    DIGIT_CHARS,
    MalformedPuzzle,
    N_CELLS,
    UNKNOWN_CHARS,
    UnsolvedBoard,
)


def parse_board(text: str) -> Board:
    """
    Creates a board from a puzzle string.

    Raises:
        :exc:`MalformedPuzzle` unless exactly 81 cells are found
    """
    cells = []
    for char in text:
        if char in UNKNOWN_CHARS:
            cells.append(CandidateSet.full())
        elif char in DIGIT_CHARS:
            cells.append(CandidateSet.single(int(char)))
    if len(cells) != N_CELLS:
        raise MalformedPuzzle(
            f"Puzzle must have {N_CELLS} cells; found {len(cells)} "
            f"in {text!r}")
    return Board(cells)


def serialize_board(board: Board) -> str:
    """
    The solution as 81 digits.

    Raises:
        :exc:`UnsolvedBoard` if any cell is not fixed to a single digit
    """
    digits = []
    for i, cell in enumerate(board):
        if cell.count() != 1:
            raise UnsolvedBoard(
                f"Cell {i} has {cell.count()} possible digits "
                f"({str(cell) or 'none'}); board is not solved")
        digits.append(str(cell.lowest_digit()))
    return "".join(digits)
