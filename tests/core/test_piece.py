"""Tests for Piece and the core enums."""

import pytest

from chessfen.core.enums import CastlingRights, Color, PieceType
from chessfen.core.piece import Piece


class TestPiece:
    @pytest.mark.parametrize("char", list("PNBRQKpnbrqk"))
    def test_letter_roundtrip(self, char: str) -> None:
        assert str(Piece.from_char(char)) == char

    def test_case_gives_color(self) -> None:
        assert Piece.from_char("N") == Piece(Color.WHITE, PieceType.KNIGHT)
        assert Piece.from_char("n") == Piece(Color.BLACK, PieceType.KNIGHT)

    @pytest.mark.parametrize("char", ["x", "1", "", "Kk"])
    def test_invalid_letter(self, char: str) -> None:
        with pytest.raises(ValueError, match="piece character"):
            Piece.from_char(char)

    def test_is_pawn_of(self) -> None:
        pawn = Piece(Color.BLACK, PieceType.PAWN)
        assert pawn.is_pawn_of(Color.BLACK)
        assert not pawn.is_pawn_of(Color.WHITE)
        assert not Piece(Color.BLACK, PieceType.ROOK).is_pawn_of(Color.BLACK)


class TestEnums:
    def test_color_opposite(self) -> None:
        assert Color.WHITE.opposite == Color.BLACK
        assert Color.BLACK.opposite == Color.WHITE

    def test_color_fen_letter(self) -> None:
        assert Color.WHITE.fen_letter == "w"
        assert Color.BLACK.fen_letter == "b"

    def test_color_str(self) -> None:
        assert str(Color.BLACK) == "black"

    def test_castling_composites(self) -> None:
        assert CastlingRights.ALL == CastlingRights.WHITE_BOTH | CastlingRights.BLACK_BOTH
        assert not CastlingRights.NONE
