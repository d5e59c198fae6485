#!/usr/bin/env python

"""
sudokubench/peers.py

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

**Which cells constrain which.**

A cell's peers are the cells in the same row, column, or 3x3 box. There are
81 cells, each with 20 peers. The table never changes, so we build it once and
share it.

"""

from typing import Generator, Tuple

from sudokubench.common import N, N_CELLS, N_PEERS, RANK


# =============================================================================
# Cell numbering
# =============================================================================

def cell_index(row_zb: int, col_zb: int) -> int:
    """
    Row-major index (0-80) of a cell, from zero-based row/column numbers.
    """
    assert 0 <= row_zb < N and 0 <= col_zb < N, (
        f"Bad cell (row={row_zb}, col={col_zb})"
    )
    return row_zb * N + col_zb


def row_col(index: int) -> Tuple[int, int]:
    """
    Zero-based ``row, col`` for a row-major cell index.
    """
    assert 0 <= index < N_CELLS, f"Bad cell index {index}"
    return divmod(index, N)


# =============================================================================
# Box
# =============================================================================

class Box(object):
    """
    Represents a 3x3 box within the Sudoku grid. Boxes are numbered 0-8,
    row-major.
    """
    def __init__(self, box_zb: int) -> None:
        assert 0 <= box_zb < N, (
            f"box_zb was {box_zb}; must be in range 0 to {N - 1} inclusive"
        )
        self.box_zb = box_zb

    @property
    def boxrow(self) -> int:
        """
        Zero-based row number of the box (not its cells).
        """
        return self.box_zb // RANK

    @property
    def boxcol(self) -> int:
        """
        Zero-based column number of the box (not its cells).
        """
        return self.box_zb % RANK

    def top_left_cell(self) -> Tuple[int, int]:
        """
        Returns ``row_zb, col_zb`` for the top-left cell in the box.
        """
        return self.boxrow * RANK, self.boxcol * RANK

    @classmethod
    def containing(cls, row_zb: int, col_zb: int) -> "Box":
        """
        Returns the box containing this cell.
        """
        assert 0 <= row_zb < N
        assert 0 <= col_zb < N
        return cls(box_zb=(row_zb // RANK) * RANK + col_zb // RANK)

    def gen_cells(self) -> Generator[Tuple[int, int], None, None]:
        """
        Generates ``(row_zb, col_zb)`` tuples for all the cells in this box.
        """
        row_min, col_min = self.top_left_cell()
        for r in range(row_min, row_min + RANK):
            for c in range(col_min, col_min + RANK):
                yield r, c


# =============================================================================
# PeerTable
# =============================================================================

class PeerTable(object):
    """
    For each of the 81 cells, the indices of its 20 peers.

    Built eagerly and read-only thereafter. For each cell the peers are listed
    as: the 8 others in the row, the 8 others in the column, then the 4 cells
    of the box not already covered by the row or column.
    """
    def __init__(self) -> None:
        self._peers = tuple(
            self._build_peers(r, c)
            for r in range(N)
            for c in range(N)
        )  # type: Tuple[Tuple[int, ...], ...]

    @staticmethod
    def _build_peers(row_zb: int, col_zb: int) -> Tuple[int, ...]:
        peers = []
        # Row
        for c in range(N):
            if c != col_zb:
                peers.append(cell_index(row_zb, c))
        # Column
        for r in range(N):
            if r != row_zb:
                peers.append(cell_index(r, col_zb))
        # Box, minus anything sharing our row or column
        for r, c in Box.containing(row_zb, col_zb).gen_cells():
            if r != row_zb and c != col_zb:
                peers.append(cell_index(r, c))
        assert len(peers) == N_PEERS
        return tuple(peers)

    def peers_of(self, index: int) -> Tuple[int, ...]:
        """
        The 20 peers of the cell at this row-major index.
        """
        assert 0 <= index < N_CELLS, f"Bad cell index {index}"
        return self._peers[index]

    def __getitem__(self, index: int) -> Tuple[int, ...]:
        return self.peers_of(index)

    def __len__(self) -> int:
        return len(self._peers)


PEERS = PeerTable()
