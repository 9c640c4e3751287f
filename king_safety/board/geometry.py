"""
Square Geometry

Pure coordinate math on the 64 board squares. Squares follow the
python-chess convention: index 0 = a1, 7 = h1, 56 = a8, 63 = h8.

    rank = square // 8      (0 = rank 1, 7 = rank 8)
    file = square % 8       (0 = a-file, 7 = h-file)

Table Orientation (for numpy lookups):
    - Row 0 = Rank 8 (Black's back rank)
    - Row 7 = Rank 1 (White's back rank)
    - Column 0 = A-file
    - Column 7 = H-file
"""

import chess
from typing import List, Tuple

from king_safety.errors import InvalidSquare

# (rank offset, file offset) of the eight surrounding squares
NEIGHBOR_OFFSETS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


def check_square(square: int) -> int:
    """Return the square unchanged, or raise InvalidSquare if it is not 0-63."""
    if not isinstance(square, int) or not 0 <= square < 64:
        raise InvalidSquare(f"Square index out of range: {square!r}")
    return square


def is_on_board(rank: int, file: int) -> bool:
    return 0 <= rank <= 7 and 0 <= file <= 7


def rank_of(square: int) -> int:
    """Rank index (0-7) of a square."""
    return check_square(square) // 8


def file_of(square: int) -> int:
    """File index (0-7) of a square."""
    return check_square(square) % 8


def square_at(rank: int, file: int) -> int:
    """
    Build a square index from rank and file.

    Raises:
        InvalidSquare: If either coordinate is outside 0-7
    """
    if not is_on_board(rank, file):
        raise InvalidSquare(f"Coordinates out of range: rank={rank}, file={file}")
    return rank * 8 + file


def neighbors(square: int) -> List[int]:
    """
    Squares adjacent to the given square (king-move distance 1).

    Corner squares have 3 neighbors, edge squares 5 and interior squares 8.
    The order always follows NEIGHBOR_OFFSETS.
    """
    rank = rank_of(square)
    file = file_of(square)
    return [
        square_at(rank + dr, file + df)
        for dr, df in NEIGHBOR_OFFSETS
        if is_on_board(rank + dr, file + df)
    ]


def forward(side: chess.Color) -> int:
    """Rank step toward the opponent: +1 for White, -1 for Black."""
    return 1 if side == chess.WHITE else -1


def square_to_coordinates(square: int) -> Tuple[int, int]:
    """
    Convert a square index to (row, column) table coordinates.

    Args:
        square: Square index (0-63) where 0=A1, 63=H8

    Returns:
        Tuple of (row, col) where row 0 = rank 8 and col 0 = A-file
    """
    return 7 - rank_of(square), file_of(square)


def coordinates_to_square(row: int, col: int) -> int:
    """
    Convert (row, column) table coordinates to a square index.

    Args:
        row: Row index (0-7) where 0 is rank 8
        col: Column index (0-7) where 0 is A-file

    Returns:
        Square index (0-63)
    """
    return square_at(7 - row, col)
