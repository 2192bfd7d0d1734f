"""chessfen - four-field FEN parsing and serialization for chess positions.

Quick start::

    from chessfen import STARTING_FEN, position_from_fen, position_to_fen

    pos = position_from_fen(STARTING_FEN)
    assert position_to_fen(pos) == STARTING_FEN
"""

from chessfen.core import (
    STARTING_FEN,
    Board,
    BoardLike,
    BoardParser,
    CastlingRights,
    Color,
    Coord,
    DuplicateCastlingChar,
    FenError,
    InvalidEnPassant,
    InvalidPlacement,
    Piece,
    PieceType,
    PlacementError,
    Position,
    TooLong,
    UnknownCharacter,
    UnknownTurn,
    WrongFieldCount,
    WrongLength,
    castling_to_str,
    en_passant_to_str,
    parse_castling,
    parse_en_passant,
    pawn_square_from_target,
    position_from_fen,
    position_to_fen,
    target_from_pawn_square,
)

__all__ = [
    "STARTING_FEN",
    "Board",
    "BoardLike",
    "BoardParser",
    "CastlingRights",
    "Color",
    "Coord",
    "DuplicateCastlingChar",
    "FenError",
    "InvalidEnPassant",
    "InvalidPlacement",
    "Piece",
    "PieceType",
    "PlacementError",
    "Position",
    "TooLong",
    "UnknownCharacter",
    "UnknownTurn",
    "WrongFieldCount",
    "WrongLength",
    "castling_to_str",
    "en_passant_to_str",
    "parse_castling",
    "parse_en_passant",
    "pawn_square_from_target",
    "position_from_fen",
    "position_to_fen",
    "target_from_pawn_square",
]
