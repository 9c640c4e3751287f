"""
Board Query Adapter

A narrow, read-only facade over python-chess for one fixed position. The
heuristics only ever talk to this adapter, so python-chess stays the single
source of truth for attacks and move legality.

The adapter copies the board it is given. Later moves on the caller's board
do not change the snapshot, and no query ever modifies the caller's board.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional

import chess

from king_safety.board.geometry import check_square
from king_safety.errors import AdapterQueryFailure, KingNotFound


@dataclass(frozen=True)
class PlacedPiece:
    """
    A piece standing on a square of the snapshot.

    Attributes:
        square: Square index (0-63)
        kind: python-chess piece type (chess.PAWN ... chess.KING)
        side: chess.WHITE or chess.BLACK
    """
    square: int
    kind: chess.PieceType
    side: chess.Color


class BoardQueryAdapter:
    """
    Read-only view of a single chess position.

    Attributes:
        board: Private copy of the position (do not mutate)
    """

    def __init__(self, board: chess.Board):
        if not isinstance(board, chess.Board):
            raise AdapterQueryFailure(
                f"Expected chess.Board, got {type(board).__name__}"
            )
        self.board = board.copy(stack=False)

    @classmethod
    def from_fen(cls, fen: str) -> "BoardQueryAdapter":
        """
        Build an adapter from a FEN string.

        Raises:
            AdapterQueryFailure: If python-chess rejects the FEN
        """
        try:
            board = chess.Board(fen)
        except ValueError as e:
            raise AdapterQueryFailure(f"Invalid FEN {fen!r}: {e}") from e
        return cls(board)

    def piece_at(self, square: int) -> Optional[PlacedPiece]:
        piece = self.board.piece_at(check_square(square))
        if piece is None:
            return None
        return PlacedPiece(square, piece.piece_type, piece.color)

    def pieces(self) -> Iterator[PlacedPiece]:
        """All pieces on the board, in square order."""
        for square, piece in sorted(self.board.piece_map().items()):
            yield PlacedPiece(square, piece.piece_type, piece.color)

    def attackers_of(self, attacking_side: chess.Color, square: int) -> List[chess.PieceType]:
        """
        Kinds of every piece of attacking_side that attacks the square.

        One entry per attacking piece, so two rooks give [ROOK, ROOK].
        Returns an empty list when nothing attacks the square.
        """
        attackers = self.board.attackers(attacking_side, check_square(square))
        return [self.board.piece_type_at(sq) for sq in attackers]

    def is_attacked(self, square: int, by_side: chess.Color) -> bool:
        return self.board.is_attacked_by(by_side, check_square(square))

    def legal_move_count(self, square: int, piece_kind: chess.PieceType) -> int:
        """
        Number of legal destinations for the piece of piece_kind on square.

        When that piece's side is not to move, the turn is passed with a
        null move on a throwaway copy before counting.

        Raises:
            AdapterQueryFailure: If the square does not hold a piece of that kind
        """
        piece = self.piece_at(square)
        if piece is None or piece.kind != piece_kind:
            raise AdapterQueryFailure(
                f"No {chess.piece_name(piece_kind)} on {chess.square_name(square)}"
            )

        board = self.board
        if piece.side != board.turn:
            board = board.copy(stack=False)
            board.push(chess.Move.null())

        return sum(1 for move in board.legal_moves if move.from_square == square)

    def side_to_move(self) -> chess.Color:
        return self.board.turn

    def king_square(self, side: chess.Color) -> int:
        """
        Square of the given side's king.

        Raises:
            KingNotFound: If that side has no king (edited boards only)
        """
        square = self.board.king(side)
        if square is None:
            raise KingNotFound(f"No {chess.COLOR_NAMES[side]} king on the board")
        return square

    @staticmethod
    def square_name(square: int) -> str:
        """Algebraic name of a square, e.g. 4 -> 'e1'."""
        return chess.square_name(check_square(square))

    @staticmethod
    def parse_square(name: str) -> int:
        """Square index of an algebraic name, e.g. 'e1' -> 4."""
        try:
            return chess.parse_square(name)
        except ValueError as e:
            raise AdapterQueryFailure(f"Invalid square name {name!r}") from e

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.board.fen()!r})"
