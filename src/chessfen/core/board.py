"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from chessfen.core.enums import Color, PieceType
from chessfen.core.errors import PlacementError
from chessfen.core.piece import Piece
from chessfen.core.types import Coord, is_on_board, rank_digit_from_index

_BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 8x8 board addressed by ``(file, rank_index)``.

    Row 0 holds rank 8 and row 7 holds rank 1, the same order in which a FEN
    placement field lists its ranks.
    """

    __slots__ = ("_rows",)

    def __init__(self) -> None:
        self._rows: list[list[Piece | None]] = [[None] * 8 for _ in range(8)]

    # -- Element access -----------------------------------------------------

    @staticmethod
    def _checked(coord: Coord) -> Coord:
        if not is_on_board(*coord):
            raise IndexError(f"Coordinate off the board: {coord!r}")
        return coord

    def __getitem__(self, coord: Coord) -> Piece | None:
        file, rank = self._checked(coord)
        return self._rows[rank][file]

    def __setitem__(self, coord: Coord, piece: Piece | None) -> None:
        file, rank = self._checked(coord)
        self._rows[rank][file] = piece

    def tile_at(self, file: int, rank: int) -> Piece | None:
        """Piece on (*file*, *rank*), or ``None`` when empty or off the board."""
        if not is_on_board(file, rank):
            return None
        return self._rows[rank][file]

    # -- Placement field ----------------------------------------------------

    @classmethod
    def from_fen(cls, placement: str) -> Board:
        """Parse a FEN piece-placement field.

        Raises :class:`PlacementError` unless the field has exactly eight
        ``/``-separated ranks, each covering exactly eight files. Adjacent
        digits (``"44"``) are rejected because :meth:`fen` would write them
        back as ``"8"``.
        """
        ranks = placement.split("/")
        if len(ranks) != 8:
            raise PlacementError(f"Placement must contain 8 ranks, got {len(ranks)}: {placement!r}")

        board = cls()
        for rank, rank_text in enumerate(ranks):
            if not rank_text:
                raise PlacementError(f"Empty rank in placement: {placement!r}")
            file = 0
            previous_was_digit = False
            for ch in rank_text:
                if ch in "0123456789":
                    step = int(ch)
                    if not (1 <= step <= 8):
                        raise PlacementError(f"Invalid placement digit {ch!r}: {placement!r}")
                    if previous_was_digit:
                        raise PlacementError(f"Adjacent digits in placement: {placement!r}")
                    file += step
                    previous_was_digit = True
                else:
                    if file >= 8:
                        raise PlacementError(f"Invalid placement rank width: {placement!r}")
                    try:
                        board._rows[rank][file] = Piece.from_char(ch)
                    except ValueError as exc:
                        raise PlacementError(f"{exc} in placement {placement!r}") from exc
                    file += 1
                    previous_was_digit = False
                if file > 8:
                    raise PlacementError(f"Invalid placement rank width: {placement!r}")
            if file != 8:
                raise PlacementError(f"Invalid placement rank width: {placement!r}")
        return board

    def fen(self) -> str:
        """Canonical placement field, rank 8 first."""
        rows: list[str] = []
        for row in self._rows:
            empty = 0
            text = ""
            for piece in row:
                if piece is None:
                    empty += 1
                    continue
                if empty:
                    text += str(empty)
                    empty = 0
                text += str(piece)
            if empty:
                text += str(empty)
            rows.append(text)
        return "/".join(rows)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for file, piece_type in enumerate(_BACK_RANK):
            b[file, 0] = Piece(Color.BLACK, piece_type)
            b[file, 1] = Piece(Color.BLACK, PieceType.PAWN)
            b[file, 6] = Piece(Color.WHITE, PieceType.PAWN)
            b[file, 7] = Piece(Color.WHITE, piece_type)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        lines: list[str] = []
        for rank, row in enumerate(self._rows):
            cells = [str(p) if p else "." for p in row]
            lines.append(f"{rank_digit_from_index(rank)} {' '.join(cells)}")
        lines.append("  a b c d e f g h")
        return "\n".join(lines)
