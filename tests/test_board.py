"""Tests for the board and the string codec."""

import pytest

from sudokubench.board import Board
from sudokubench.candidates import CandidateSet
from sudokubench.codec import parse_board, serialize_board
from sudokubench.common import MalformedPuzzle, UnsolvedBoard
from sudokubench.peers import PEERS

from conftest import CLASSIC_PUZZLE, CLASSIC_SOLUTION


def test_new_board_is_all_unknown():
    board = Board()
    assert len(board) == 81
    assert board.n_unknown_cells() == 81
    assert board.n_possibilities_overall() == 729
    assert not board.is_solved()


def test_board_needs_81_cells():
    with pytest.raises(AssertionError):
        Board([CandidateSet.full() for _ in range(80)])


def test_clone_does_not_alias():
    board = parse_board(CLASSIC_PUZZLE)
    copy = board.clone()
    copy[2].clear()
    copy[2].insert(4)
    assert board[2].count() == 9
    assert copy[2].count() == 1


def test_parse_givens_and_unknowns():
    board = parse_board(CLASSIC_PUZZLE)
    assert board[0] == CandidateSet.single(5)
    assert board[1] == CandidateSet.single(3)
    assert board[2] == CandidateSet.full()
    assert board.n_unknown_cells() == CLASSIC_PUZZLE.count("0")


def test_parse_dots_and_separators():
    dotted = CLASSIC_PUZZLE.replace("0", ".")
    spaced = "\n".join(
        " ".join(dotted[r * 9 + c * 3:r * 9 + c * 3 + 3] for c in range(3))
        for r in range(9)
    )
    a = parse_board(CLASSIC_PUZZLE)
    b = parse_board(spaced)
    assert [cell.bits for cell in a] == [cell.bits for cell in b]


def test_parse_too_few_cells():
    with pytest.raises(MalformedPuzzle):
        parse_board(CLASSIC_PUZZLE[:-1])
    with pytest.raises(MalformedPuzzle):
        parse_board("")


def test_parse_too_many_cells():
    with pytest.raises(MalformedPuzzle):
        parse_board(CLASSIC_PUZZLE + "0")


def test_serialize_round_trip():
    assert serialize_board(parse_board(CLASSIC_SOLUTION)) == CLASSIC_SOLUTION


def test_serialize_unsolved_board():
    with pytest.raises(UnsolvedBoard):
        serialize_board(parse_board(CLASSIC_PUZZLE))


def test_serialize_board_with_empty_cell():
    board = parse_board(CLASSIC_SOLUTION)
    board[40].clear()
    with pytest.raises(UnsolvedBoard):
        serialize_board(board)


def test_conflicts():
    assert parse_board(CLASSIC_SOLUTION).conflicts(PEERS) == []
    # Clashes with the 3 in its row and the 3 in its column
    bad = "3" + CLASSIC_SOLUTION[1:]
    assert parse_board(bad).conflicts(PEERS) == [(0, 1, 3), (0, 72, 3)]


def test_str_of_solved_board():
    lines = str(parse_board(CLASSIC_SOLUTION)).splitlines()
    assert len(lines) == 11
    assert lines[0] == " 5 3 4 | 6 7 8 | 9 1 2"
    assert lines[3] == "-------+-------+-------"
    assert lines[10] == " 3 4 5 | 2 8 6 | 1 7 9"


def test_str_shows_candidates():
    board = parse_board(CLASSIC_PUZZLE)
    lines = str(board).splitlines()
    # Widest cell has nine candidates
    assert lines[0].startswith("     5    ")
    assert "123456789" in lines[0]
    assert lines[3] == "+".join(["-" * 31] * 3)
