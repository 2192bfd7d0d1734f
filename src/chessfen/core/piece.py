"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessfen.core.enums import Color, PieceType

# Placement letter → (Color, PieceType); uppercase is white.
_LETTERS: dict[str, tuple[Color, PieceType]] = {
    letter.upper() if color is Color.WHITE else letter: (color, ptype)
    for color in Color
    for letter, ptype in (
        ("p", PieceType.PAWN),
        ("n", PieceType.KNIGHT),
        ("b", PieceType.BISHOP),
        ("r", PieceType.ROOK),
        ("q", PieceType.QUEEN),
        ("k", PieceType.KING),
    )
}

_PIECE_LETTERS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _LETTERS.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """A colored piece standing on a tile."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """Placement letter (uppercase = white, lowercase = black)."""
        return _PIECE_LETTERS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from a placement letter, e.g. 'p' → black pawn."""
        try:
            color, ptype = _LETTERS[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype)

    def is_pawn_of(self, color: Color) -> bool:
        return self.piece_type == PieceType.PAWN and self.color == color
