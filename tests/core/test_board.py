"""Tests for Board and its placement field."""

import pytest

from chessfen.core.board import Board
from chessfen.core.enums import Color, PieceType
from chessfen.core.errors import PlacementError
from chessfen.core.piece import Piece
from chessfen.core.types import parse_coord

INITIAL_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        assert board[parse_coord("e1")] == Piece(Color.WHITE, PieceType.KING)

    def test_black_king_position(self) -> None:
        board = Board.initial()
        assert board[parse_coord("e8")] == Piece(Color.BLACK, PieceType.KING)

    def test_pawns_on_inverted_rows(self) -> None:
        board = Board.initial()
        for file in range(8):
            assert board.tile_at(file, 6) == Piece(Color.WHITE, PieceType.PAWN)  # rank 2
            assert board.tile_at(file, 1) == Piece(Color.BLACK, PieceType.PAWN)  # rank 7

    def test_matches_placement(self) -> None:
        assert Board.initial() == Board.from_fen(INITIAL_PLACEMENT)
        assert Board.initial().fen() == INITIAL_PLACEMENT


class TestBoardOperations:
    def test_set_and_get(self, empty_board: Board) -> None:
        piece = Piece(Color.WHITE, PieceType.PAWN)
        empty_board[4, 4] = piece
        assert empty_board[4, 4] == piece
        assert empty_board.tile_at(4, 4) == piece
        assert empty_board.tile_at(4, 6) is None

    def test_set_off_board_raises(self, empty_board: Board) -> None:
        with pytest.raises(IndexError):
            empty_board[8, 0] = Piece(Color.WHITE, PieceType.ROOK)

    def test_tile_at_off_board_is_none(self) -> None:
        board = Board.initial()
        assert board.tile_at(0, 8) is None
        assert board.tile_at(-1, 0) is None
        assert board.tile_at(8, 7) is None

    def test_get_off_board_raises(self) -> None:
        board = Board.initial()
        for coord in [(0, -1), (-1, 0), (0, 8), (8, 7)]:
            with pytest.raises(IndexError, match="off the board"):
                board[coord]

    def test_equality(self) -> None:
        board = Board.from_fen(INITIAL_PLACEMENT)
        assert board == Board.initial()
        board[4, 7] = None
        assert board != Board.initial()

    def test_repr_shows_rank_eight_first(self) -> None:
        lines = repr(Board.initial()).splitlines()
        assert lines[0] == "8 r n b q k b n r"
        assert lines[7] == "1 R N B Q K B N R"
        assert lines[8] == "  a b c d e f g h"


class TestPlacementField:
    def test_first_row_is_rank_eight(self) -> None:
        board = Board.from_fen("k7/8/8/8/8/8/8/7K")
        assert board.tile_at(0, 0) == Piece(Color.BLACK, PieceType.KING)
        assert board.tile_at(7, 7) == Piece(Color.WHITE, PieceType.KING)

    @pytest.mark.parametrize(
        "placement",
        [
            INITIAL_PLACEMENT,
            "8/8/8/8/8/8/8/8",
            "r3k2r/Pppp1ppp/1b3nbN/nP6/BBP1P3/q4N2/Pp1P2PP/R2Q1RK1",
            "8/8/4k3/8/8/4K3/8/8",
        ],
    )
    def test_roundtrip(self, placement: str) -> None:
        assert Board.from_fen(placement).fen() == placement

    @pytest.mark.parametrize(
        ("placement", "message"),
        [
            ("8/8/8/8/8/8/8", "8 ranks"),
            ("8/8/8/8/8/8/8/8/8", "8 ranks"),
            ("8/8/8//8/8/8/8", "Empty rank"),
            ("9/8/8/8/8/8/8/8", "digit"),
            ("0/8/8/8/8/8/8/8", "digit"),
            ("44/8/8/8/8/8/8/8", "Adjacent digits"),
            ("7/8/8/8/8/8/8/8", "rank width"),
            ("8p/8/8/8/8/8/8/8", "rank width"),
            ("ppppppppp/8/8/8/8/8/8/8", "rank width"),
            ("7x/8/8/8/8/8/8/8", "piece character"),
            ("", "8 ranks"),
        ],
    )
    def test_invalid_placement(self, placement: str, message: str) -> None:
        with pytest.raises(PlacementError, match=message):
            Board.from_fen(placement)

    def test_placement_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Board.from_fen("invalid")
