"""En-passant field and the landing/pawn square translation.

Two separate flips meet here:

* the rank axis inversion (``'8'`` → index 0), handled by
  :mod:`chessfen.core.types`;
* the landing-vs-pawn offset. FEN names the empty square a capturing pawn
  would land on, while :class:`~chessfen.core.position.Position` stores the
  square of the pawn that just advanced. That pawn belongs to the side that
  is *not* to move and sits one step further along its own direction of
  travel.

With White to move the pawn is black and moved toward rank 1, i.e. toward
higher rank indices, so the pawn square is ``rank + 1``. With Black to move
it is ``rank - 1``.
"""

from __future__ import annotations

from chessfen.core.enums import Color
from chessfen.core.errors import UnknownCharacter, WrongLength
from chessfen.core.types import FILES, RANKS, Coord, coord_name, rank_index_from_digit


def _pawn_step(turn: Color) -> int:
    """Rank-index offset from landing square to pawn square."""
    return 1 if turn == Color.WHITE else -1


def pawn_square_from_target(target: Coord, turn: Color) -> Coord:
    """Landing square → square of the capturable pawn.

    The result may be off the board for a target on the first or last rank;
    callers validate it against the board.
    """
    file, rank = target
    return file, rank + _pawn_step(turn)


def target_from_pawn_square(pawn_square: Coord, turn: Color) -> Coord:
    """Inverse of :func:`pawn_square_from_target`."""
    file, rank = pawn_square
    return file, rank - _pawn_step(turn)


def parse_en_passant(field: str) -> Coord | None:
    """Parse ``-`` or an algebraic square into an internal coordinate."""
    if field == "-":
        return None
    if len(field) != 2:
        raise WrongLength(field)

    file_char, rank_char = field
    if file_char not in FILES:
        raise UnknownCharacter("en-passant", field, file_char)
    if rank_char not in RANKS:
        raise UnknownCharacter("en-passant", field, rank_char)
    return FILES.index(file_char), rank_index_from_digit(int(rank_char))


def en_passant_to_str(coord: Coord | None) -> str:
    return "-" if coord is None else coord_name(coord)
