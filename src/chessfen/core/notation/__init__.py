"""Notation package: FEN field codecs and the position codec."""

from chessfen.core.notation.castling import castling_to_str, parse_castling
from chessfen.core.notation.en_passant import (
    en_passant_to_str,
    parse_en_passant,
    pawn_square_from_target,
    target_from_pawn_square,
)
from chessfen.core.notation.fen import STARTING_FEN, position_from_fen, position_to_fen

__all__ = [
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
