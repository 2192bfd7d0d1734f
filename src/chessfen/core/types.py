"""Coordinate type alias and rank-axis helpers.

Board layout (rank axis inverted relative to chess numbering)::

    rank index 0 -> rank 8   (a8=(0, 0) ... h8=(7, 0))
    rank index 1 -> rank 7
    ...
    rank index 7 -> rank 1   (a1=(0, 7) ... h1=(7, 7))

Row 0 is the first row written in a FEN placement field, so the board rows
line up with the text. Standard rank digits only appear at the text
boundary, and every conversion between the two goes through
:func:`rank_index_from_digit` / :func:`rank_digit_from_index`.
"""

from __future__ import annotations

from typing import TypeAlias

Coord: TypeAlias = tuple[int, int]  # (file 0–7, rank index 0–7)

FILES = "abcdefgh"
RANKS = "12345678"


def rank_index_from_digit(digit: int) -> int:
    """Standard rank number to internal rank index, e.g. 8 → 0, 1 → 7."""
    if not (1 <= digit <= 8):
        raise ValueError(f"Rank number out of range: {digit!r}")
    return 8 - digit


def rank_digit_from_index(index: int) -> int:
    """Internal rank index to standard rank number, e.g. 0 → 8, 7 → 1."""
    if not (0 <= index <= 7):
        raise ValueError(f"Rank index out of range: {index!r}")
    return 8 - index


def is_on_board(file: int, rank: int) -> bool:
    return 0 <= file < 8 and 0 <= rank < 8


def coord_name(coord: Coord) -> str:
    """Algebraic name, e.g. (4, 4) → 'e4', (0, 0) → 'a8'."""
    file, rank = coord
    if not is_on_board(file, rank):
        raise ValueError(f"Coordinate off the board: {coord!r}")
    return FILES[file] + str(rank_digit_from_index(rank))


def parse_coord(name: str) -> Coord:
    """Parse an algebraic square name, e.g. 'e4' → (4, 4)."""
    if len(name) != 2 or name[0] not in FILES or name[1] not in RANKS:
        raise ValueError(f"Invalid square name: {name!r}")
    return FILES.index(name[0]), rank_index_from_digit(int(name[1]))
