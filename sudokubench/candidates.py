#!/usr/bin/env python

"""
sudokubench/candidates.py

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

**The set of digits still possible for one cell.**

Stored as a 9-bit integer: bit ``d - 1`` is set if digit ``d`` is still
possible. So ``0b100101101`` means {1, 3, 4, 6, 9}.

"""

from typing import Generator

from sudokubench.common import EmptyCandidateSet, N

ALL_DIGITS_MASK = (1 << N) - 1


def _bit(digit: int) -> int:
    assert 1 <= digit <= N, f"Digit must be in range 1-{N}; was {digit!r}"
    return 1 << (digit - 1)


class CandidateSet(object):
    """
    Mutable set of possible digits (1-9) for a single cell.
    """
    __slots__ = ("bits", )

    def __init__(self, bits: int = 0) -> None:
        assert 0 <= bits <= ALL_DIGITS_MASK, f"Bad bit pattern: {bits!r}"
        self.bits = bits

    @classmethod
    def empty(cls) -> "CandidateSet":
        """
        Nothing possible.
        """
        return cls(0)

    @classmethod
    def full(cls) -> "CandidateSet":
        """
        Everything possible.
        """
        return cls(ALL_DIGITS_MASK)

    @classmethod
    def single(cls, digit: int) -> "CandidateSet":
        """
        Exactly one digit possible.
        """
        return cls(_bit(digit))

    def copy(self) -> "CandidateSet":
        return self.__class__(self.bits)

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def insert(self, digit: int) -> None:
        self.bits |= _bit(digit)

    def remove(self, digit: int) -> None:
        self.bits &= ~_bit(digit)

    def clear(self) -> None:
        self.bits = 0

    def subtract(self, other: "CandidateSet") -> None:
        """
        Removes every digit that is present in ``other``.
        """
        self.bits &= ~other.bits

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def contains(self, digit: int) -> bool:
        return bool(self.bits & _bit(digit))

    def count(self) -> int:
        """
        Number of possible digits.
        """
        return bin(self.bits).count("1")

    def lowest_digit(self) -> int:
        """
        Returns the smallest possible digit. For a cell that is fixed, that is
        its value.

        Raises:
            :exc:`EmptyCandidateSet` if nothing is possible
        """
        if not self.bits:
            raise EmptyCandidateSet("No candidate digits in an empty set")
        # Isolate the lowest set bit; its position is the digit.
        return (self.bits & -self.bits).bit_length()

    def digits(self) -> Generator[int, None, None]:
        """
        Generates the possible digits, in ascending order.
        """
        bits = self.bits
        digit = 0
        while bits:
            digit += 1
            if bits & 1:
                yield digit
            bits >>= 1

    # -------------------------------------------------------------------------
    # Python protocols
    # -------------------------------------------------------------------------

    def __contains__(self, digit: int) -> bool:
        return self.contains(digit)

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Generator[int, None, None]:
        return self.digits()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CandidateSet):
            return NotImplemented
        return self.bits == other.bits

    def __str__(self) -> str:
        return "".join(str(d) for d in self.digits())

    def __repr__(self) -> str:
        return f"CandidateSet({{{', '.join(str(d) for d in self.digits())}}})"
