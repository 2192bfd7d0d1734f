"""Core domain layer - pure chess data and FEN handling, no external dependencies.

Quick start::

    from chessfen.core import Position, position_from_fen, position_to_fen

    pos = position_from_fen("rnbqkbnr/pppppppp/8/8/2P5/8/PP1PPPPP/RNBQKBNR b KQkq c3")
    pos.en_passant        # (2, 4): the white pawn on c4
    position_to_fen(pos)  # the same text again
"""

from chessfen.core.board import Board
from chessfen.core.enums import CastlingRights, Color, PieceType
from chessfen.core.errors import (
    DuplicateCastlingChar,
    FenError,
    InvalidEnPassant,
    InvalidPlacement,
    PlacementError,
    TooLong,
    UnknownCharacter,
    UnknownTurn,
    WrongFieldCount,
    WrongLength,
)
from chessfen.core.interfaces import BoardLike, BoardParser
from chessfen.core.notation import (
    STARTING_FEN,
    castling_to_str,
    en_passant_to_str,
    parse_castling,
    parse_en_passant,
    pawn_square_from_target,
    position_from_fen,
    position_to_fen,
    target_from_pawn_square,
)
from chessfen.core.piece import Piece
from chessfen.core.position import Position
from chessfen.core.types import (
    Coord,
    coord_name,
    is_on_board,
    parse_coord,
    rank_digit_from_index,
    rank_index_from_digit,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "PieceType",
    # Types / helpers
    "Coord",
    "coord_name",
    "is_on_board",
    "parse_coord",
    "rank_digit_from_index",
    "rank_index_from_digit",
    # Domain objects
    "Board",
    "BoardLike",
    "BoardParser",
    "Piece",
    "Position",
    # Errors
    "FenError",
    "PlacementError",
    "WrongFieldCount",
    "InvalidPlacement",
    "UnknownTurn",
    "TooLong",
    "DuplicateCastlingChar",
    "UnknownCharacter",
    "WrongLength",
    "InvalidEnPassant",
    # Notation
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
    "parse_castling",
    "castling_to_str",
    "parse_en_passant",
    "en_passant_to_str",
    "pawn_square_from_target",
    "target_from_pawn_square",
]
