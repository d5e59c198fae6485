import pytest

from sudokubench.board import Board
from sudokubench.peers import PEERS

CLASSIC_PUZZLE = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

CLASSIC_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)


def assert_valid_solution(board: Board) -> None:
    """Every cell fixed, and no two peers share a digit."""
    for i, cell in enumerate(board):
        assert cell.count() == 1, f"cell {i} is {cell!r}"
    for i, cell in enumerate(board):
        for p in PEERS[i]:
            assert board[p] != cell, f"cells {i} and {p} clash"


@pytest.fixture
def classic_puzzle() -> str:
    return CLASSIC_PUZZLE


@pytest.fixture
def classic_solution() -> str:
    return CLASSIC_SOLUTION
