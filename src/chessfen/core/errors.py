"""Errors raised while decoding FEN text.

Every class derives from :class:`ValueError`, so ``except ValueError``
keeps catching malformed input. :class:`FenError` is the common base of
everything :func:`~chessfen.core.notation.fen.position_from_fen` raises;
:class:`PlacementError` belongs to the board's own placement parser and only
reaches decoder callers wrapped in :class:`InvalidPlacement`.
"""

from __future__ import annotations


class PlacementError(ValueError):
    """The piece-placement field could not be turned into a board."""


class FenError(ValueError):
    """Base class for FEN decoding failures."""


class WrongFieldCount(FenError):
    """Input does not split into exactly four space-separated fields."""

    def __init__(self, fen: str, count: int) -> None:
        super().__init__(f"Invalid FEN (need exactly 4 fields, got {count} tokens): {fen!r}")
        self.fen = fen
        self.count = count


class InvalidPlacement(FenError):
    """The board parser rejected the placement field."""

    def __init__(self, inner: PlacementError) -> None:
        super().__init__(f"Invalid FEN placement field: {inner}")
        self.inner = inner


class UnknownTurn(FenError):
    def __init__(self, field: str) -> None:
        super().__init__(f"Invalid FEN side-to-move field: {field!r}")
        self.field = field


class TooLong(FenError):
    """Castling field longer than four characters."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Invalid FEN castling field (too long): {field!r}")
        self.field = field


class DuplicateCastlingChar(FenError):
    def __init__(self, field: str) -> None:
        super().__init__(f"Invalid FEN castling field (repeated letter): {field!r}")
        self.field = field


class WrongLength(FenError):
    """En-passant field that is neither ``-`` nor two characters."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Invalid FEN en-passant field (wrong length): {field!r}")
        self.field = field


class UnknownCharacter(FenError):
    """A castling or en-passant field contains a character it cannot hold.

    ``field_name`` is ``"castling"`` or ``"en-passant"``.
    """

    def __init__(self, field_name: str, field: str, char: str) -> None:
        super().__init__(f"Invalid FEN {field_name} field (unknown character {char!r}): {field!r}")
        self.field_name = field_name
        self.field = field
        self.char = char


class InvalidEnPassant(FenError):
    """Well-formed en-passant square with no capturable pawn behind it."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"Invalid FEN en-passant square {field!r}: {reason}")
        self.field = field
        self.reason = reason
