#!/usr/bin/env python

"""
sudokubench/solver.py

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

**Solves Sudoku puzzles by propagation and search.**

Strategy:

1.  Propagate. Where a cell's peer is known, eliminate that digit as a
    possibility from the cell. Sweep the whole board repeatedly until a sweep
    fixes no new cell.

2.  If that solves the board, stop. If some cell has no possibilities left,
    this board cannot be solved.

3.  Otherwise, guess. Pick the unknown cell with fewest possibilities; for
    each of them in turn, copy the board, assign that digit, and start again
    at (1). The first guess that leads to a solution wins.

"""

import logging
from typing import NamedTuple, Optional

from sudokubench.board import Board
from sudokubench.candidates import CandidateSet
from sudokubench.common import N, SolutionFailure
from sudokubench.peers import PEERS, PeerTable, row_col

log = logging.getLogger(__name__)


class PassResult(NamedTuple):
    progress: bool  # did any cell become fixed?
    solved: bool  # is every cell fixed?


# =============================================================================
# Propagation
# =============================================================================

def propagation_pass(board: Board, peers: PeerTable = PEERS) -> PassResult:
    """
    One sweep over the board, eliminating the digits of known peers from each
    unknown cell. Changes are made in place, and cells later in the sweep see
    the effects of changes earlier in the sweep.

    Raises:
        :exc:`SolutionFailure` if a cell is left with no possibilities
    """
    progress = False
    solved = True
    for i, cell in enumerate(board):
        if cell.count() == 1:
            continue
        peer_values = CandidateSet.empty()
        for p in peers[i]:
            peer = board[p]
            if peer.count() == 1:
                peer_values.insert(peer.lowest_digit())
        cell.subtract(peer_values)
        n = cell.count()
        if n == 0:
            row, col = row_col(i)
            raise SolutionFailure(
                f"No possibilities left for (row={row + 1}, col={col + 1})")
        if n == 1:
            progress = True
        else:
            solved = False
    return PassResult(progress=progress, solved=solved)


def propagate(board: Board, peers: PeerTable = PEERS) -> bool:
    """
    Sweeps until a sweep makes no progress.

    Returns: solved?

    Raises:
        :exc:`SolutionFailure` on a contradiction
    """
    while True:
        result = propagation_pass(board, peers)
        if not result.progress:
            return result.solved


# =============================================================================
# Search
# =============================================================================

def select_cell(board: Board) -> int:
    """
    The unknown cell with the fewest possibilities. Ties go to the first in
    row-major order.
    """
    best = -1
    best_count = N + 1
    for i, cell in enumerate(board):
        n = cell.count()
        if 1 < n < best_count:
            best = i
            best_count = n
    assert best >= 0, "No unknown cells to choose from"
    return best


def try_solve(board: Board, peers: PeerTable = PEERS,
              depth: int = 0) -> Optional[Board]:
    """
    Solves a board, modifying it in the process.

    Args:
        board: the board; this function owns it
        peers: peer table
        depth: guess level, for logging

    Returns:
        the solved board, or ``None`` if there is no solution
    """
    try:
        if propagate(board, peers):
            return board
    except SolutionFailure as e:
        log.debug(f"Guess level {depth}: {e}")
        return None

    cellnum = select_cell(board)
    row, col = row_col(cellnum)
    for digit in board[cellnum].digits():
        trial = board.clone()
        trial[cellnum].clear()
        trial[cellnum].insert(digit)
        log.debug(f"Guess level {depth + 1}: trying digit {digit} at "
                  f"(row={row + 1}, col={col + 1})")
        solved = try_solve(trial, peers, depth + 1)
        if solved is not None:
            return solved
    log.debug(f"Guess level {depth}: no digit works at "
              f"(row={row + 1}, col={col + 1})")
    return None


def solve(board: Board, peers: PeerTable = PEERS) -> Optional[Board]:
    """
    Solves a board. The board passed in is left untouched.

    Returns:
        a solved board, or ``None`` if there is no solution
    """
    conflicts = board.conflicts(peers)
    if conflicts:
        for i, p, digit in conflicts:
            log.debug(f"Given digit {digit} appears in peers {row_col(i)} and "
                      f"{row_col(p)}")
        return None
    log.debug(f"Solving; unknown cells: {board.n_unknown_cells()}; "
              f"possibilities: {board.n_possibilities_overall()}")
    return try_solve(board.clone(), peers)
