"""Position - board plus the state carried by the other FEN fields."""

from __future__ import annotations

from dataclasses import dataclass

from chessfen.core.enums import CastlingRights, Color
from chessfen.core.interfaces import BoardLike
from chessfen.core.types import Coord


@dataclass(frozen=True, slots=True)
class Position:
    """Board + side to move + castling rights + en-passant pawn.

    ``en_passant`` is the square of the pawn that has just advanced two
    squares and may be captured, not the empty square the capturing pawn
    lands on. The FEN codec translates between the two.
    """

    board: BoardLike
    turn: Color = Color.WHITE
    castling: CastlingRights = CastlingRights.NONE
    en_passant: Coord | None = None

    @property
    def white_kingside(self) -> bool:
        return bool(self.castling & CastlingRights.WHITE_KINGSIDE)

    @property
    def white_queenside(self) -> bool:
        return bool(self.castling & CastlingRights.WHITE_QUEENSIDE)

    @property
    def black_kingside(self) -> bool:
        return bool(self.castling & CastlingRights.BLACK_KINGSIDE)

    @property
    def black_queenside(self) -> bool:
        return bool(self.castling & CastlingRights.BLACK_QUEENSIDE)
