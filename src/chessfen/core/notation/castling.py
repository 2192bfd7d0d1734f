"""Castling-availability field (``-`` or a subset of ``KQkq``)."""

from __future__ import annotations

from chessfen.core.enums import CastlingRights
from chessfen.core.errors import DuplicateCastlingChar, TooLong, UnknownCharacter

# Serialisation order is fixed: K, Q, k, q.
_CASTLING_LETTERS: dict[str, CastlingRights] = {
    "K": CastlingRights.WHITE_KINGSIDE,
    "Q": CastlingRights.WHITE_QUEENSIDE,
    "k": CastlingRights.BLACK_KINGSIDE,
    "q": CastlingRights.BLACK_QUEENSIDE,
}


def parse_castling(field: str) -> CastlingRights:
    """Parse the castling field into a :class:`CastlingRights` mask.

    An empty string carries no rights; the FEN decoder never passes one.

    Checks run in order: length, repeats, alphabet. ``"KKQQ"`` is therefore
    a repeat error and ``"KQkqx"`` a length error.
    """
    if field == "-":
        return CastlingRights.NONE

    if len(field) > 4:
        raise TooLong(field)
    if len(set(field)) != len(field):
        raise DuplicateCastlingChar(field)

    rights = CastlingRights.NONE
    for ch in field:
        right = _CASTLING_LETTERS.get(ch)
        if right is None:
            raise UnknownCharacter("castling", field, ch)
        rights |= right
    return rights


def castling_to_str(rights: CastlingRights) -> str:
    text = "".join(letter for letter, right in _CASTLING_LETTERS.items() if rights & right)
    return text or "-"
