"""
Board Module

Coordinate math and the read-only board facade used by the king safety
heuristics.

Key Components:
    - geometry: rank/file decomposition, bounds-checked neighbor squares
    - BoardQueryAdapter: piece lookup, attackers, legal move counts,
      side to move and king location over one python-chess position
    - PlacedPiece: (square, kind, side) record

Data Flow:
    python-chess Board → BoardQueryAdapter(board) → heuristics
"""

from king_safety.board.adapter import BoardQueryAdapter, PlacedPiece
from king_safety.board.geometry import (
    file_of,
    forward,
    neighbors,
    rank_of,
    square_at,
)

__all__ = [
    'BoardQueryAdapter',
    'PlacedPiece',
    'file_of',
    'forward',
    'neighbors',
    'rank_of',
    'square_at',
]
