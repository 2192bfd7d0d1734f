"""FEN parsing and serialization (four fields, no move clocks)."""

from __future__ import annotations

import logging

from chessfen.core.board import Board
from chessfen.core.enums import Color
from chessfen.core.errors import (
    FenError,
    InvalidEnPassant,
    InvalidPlacement,
    PlacementError,
    UnknownTurn,
    WrongFieldCount,
)
from chessfen.core.interfaces import BoardLike, BoardParser
from chessfen.core.notation.castling import castling_to_str, parse_castling
from chessfen.core.notation.en_passant import (
    en_passant_to_str,
    parse_en_passant,
    pawn_square_from_target,
    target_from_pawn_square,
)
from chessfen.core.position import Position
from chessfen.core.types import Coord, is_on_board

_LOGGER = logging.getLogger(__name__)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq -"

_TURNS: dict[str, Color] = {color.fen_letter: color for color in Color}


def position_from_fen(fen: str, board_parser: BoardParser = Board.from_fen) -> Position:
    """Parse a FEN string into a :class:`Position`.

    *board_parser* turns the placement field into a board; it must raise
    :class:`PlacementError` on bad input. Any failure raises a
    :class:`FenError` subclass and no position is built.
    """
    try:
        return _decode(fen, board_parser)
    except FenError as exc:
        _LOGGER.debug("Rejected FEN %r: %s", fen, exc)
        raise


def _decode(fen: str, board_parser: BoardParser) -> Position:
    parts = fen.split(" ")
    # Runs of spaces leave empty tokens, which are not fields.
    if len(parts) != 4 or not all(parts):
        raise WrongFieldCount(fen, len(parts))
    placement, turn_part, castling_part, ep_part = parts

    # 1. Piece placement
    try:
        board = board_parser(placement)
    except PlacementError as exc:
        raise InvalidPlacement(exc) from exc

    # 2. Side to move
    turn = _TURNS.get(turn_part)
    if turn is None:
        raise UnknownTurn(turn_part)

    # 3. Castling
    castling = parse_castling(castling_part)

    # 4. En passant
    en_passant: Coord | None = None
    target = parse_en_passant(ep_part)
    if target is not None:
        en_passant = pawn_square_from_target(target, turn)
        _check_en_passant_pawn(board, en_passant, turn, ep_part)

    return Position(board, turn, castling, en_passant)


def _check_en_passant_pawn(board: BoardLike, pawn_square: Coord, turn: Color, field: str) -> None:
    if not is_on_board(*pawn_square):
        raise InvalidEnPassant(field, "no pawn square behind a target on the edge rank")
    piece = board.tile_at(*pawn_square)
    if piece is None:
        raise InvalidEnPassant(field, "no pawn behind the target square")
    if not piece.is_pawn_of(turn.opposite):
        raise InvalidEnPassant(field, f"expected a {turn.opposite!s} pawn, found {piece!s}")


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to FEN."""
    board_str = pos.board.fen()
    side_str = pos.turn.fen_letter
    castling_str = castling_to_str(pos.castling)
    if pos.en_passant is None:
        ep_str = "-"
    else:
        ep_str = en_passant_to_str(target_from_pawn_square(pos.en_passant, pos.turn))
    return f"{board_str} {side_str} {castling_str} {ep_str}"
