#!/usr/bin/env python

"""
sudokubench/board.py

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

**A Sudoku board: the possibilities for every cell.**

"""

from typing import Iterator, List, Sequence, Tuple

from sudokubench.candidates import CandidateSet
from sudokubench.common import N, N_CELLS, NEWLINE, RANK, SPACE
from sudokubench.peers import PeerTable


class Board(object):
    """
    81 candidate sets, one per cell, indexed row-major (``row * 9 + col``).
    """
    def __init__(self, cells: Sequence[CandidateSet] = None) -> None:
        """
        Args:
            cells:
                the cells; if omitted, every cell starts with everything
                possible. The board takes ownership of them.
        """
        if cells is None:
            self.cells = [
                CandidateSet.full() for _ in range(N_CELLS)
            ]  # type: List[CandidateSet]
        else:
            assert len(cells) == N_CELLS, (
                f"Board needs {N_CELLS} cells; was given {len(cells)}"
            )
            self.cells = list(cells)

    def clone(self) -> "Board":
        """
        Independent copy; changing one never affects the other.
        """
        return self.__class__([cell.copy() for cell in self.cells])

    def __getitem__(self, index: int) -> CandidateSet:
        return self.cells[index]

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[CandidateSet]:
        return iter(self.cells)

    # -------------------------------------------------------------------------
    # Calculation helpers
    # -------------------------------------------------------------------------

    def is_solved(self) -> bool:
        """
        Are we there yet?
        """
        return all(cell.count() == 1 for cell in self.cells)

    def n_unknown_cells(self) -> int:
        """
        Number of unsolved cells. Maximum is 81.
        """
        return sum(1 for cell in self.cells if cell.count() != 1)

    def n_possibilities_overall(self) -> int:
        """
        Number of cell/digit possibilities overall.
        Minimum is 81 (solved). Maximum is 729.
        """
        return sum(cell.count() for cell in self.cells)

    def conflicts(self, peers: PeerTable) -> List[Tuple[int, int, int]]:
        """
        Finds fixed cells that share a digit with a fixed peer.

        Returns:
            list of ``index, peer_index, digit`` tuples, each pair once, with
            ``index < peer_index``
        """
        found = []
        for i, cell in enumerate(self.cells):
            if cell.count() != 1:
                continue
            for p in peers[i]:
                if p > i and self.cells[p].count() == 1 and \
                        self.cells[p] == cell:
                    found.append((i, p, cell.lowest_digit()))
        return found

    # -------------------------------------------------------------------------
    # Visuals
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        """
        Shows the possibilities for each cell, in a grid.
        """
        width = max(cell.count() for cell in self.cells)
        rule = "-" * (RANK * width + RANK + 1)
        lines = []
        for r in range(N):
            line = ""
            for c in range(N):
                line += SPACE + str(self.cells[r * N + c]).center(width)
                if c % RANK == RANK - 1 and c < N - 1:
                    line += " |"
            lines.append(line)
            if r % RANK == RANK - 1 and r < N - 1:
                lines.append("+".join([rule] * RANK))
        return NEWLINE.join(lines)

    def __repr__(self) -> str:
        return f"<Board: {self.n_unknown_cells()} unknown cells>"
