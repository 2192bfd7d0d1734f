"""Structural interfaces for the board collaborator.

The FEN codec depends on these protocols rather than on :class:`Board`, so
any board representation that answers tile queries on the inverted rank
axis and renders its own placement field can be decoded into and encoded
from.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol, TypeAlias

if TYPE_CHECKING:
    from chessfen.core.piece import Piece


class BoardLike(Protocol):
    """What the FEN codec needs from a board."""

    def tile_at(self, file: int, rank: int) -> Piece | None:
        """Piece on (*file*, *rank*) in internal coordinates, ``None`` if empty or off-board."""
        ...

    def fen(self) -> str:
        """Placement field text. Must not raise."""
        ...


# Parses a placement field; raises PlacementError on bad input.
BoardParser: TypeAlias = Callable[[str], BoardLike]
