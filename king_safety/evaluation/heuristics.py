"""
King Safety Heuristics

Six independent, side-effect-free scoring functions. Each takes the board
adapter, the king's square and the evaluated side, and returns one number:

    pawn_shield       Friendly pawns on the three squares in front of the king
    exposed_king      Neighbor squares held or attacked by the opponent
    enemy_attacks     Value of enemy pieces attacking the king's neighbors
    king_positioning  Table penalty for a king standing outside its shelter
    mobility          Legal king moves
    open_files        Pawnless files on or next to the king's file

Sign convention: every function returns a magnitude. Whether it is a bonus
or a penalty is decided by the weight table, never here.

All rules questions (attacks, legality) go through BoardQueryAdapter.
"""

import chess
import numpy as np

from king_safety.board.adapter import BoardQueryAdapter
from king_safety.board.geometry import (
    file_of,
    forward,
    is_on_board,
    neighbors,
    rank_of,
    square_at,
    square_to_coordinates,
)
from king_safety.evaluation.base import Heuristic

#fmt: off
# ============================================================================
# Piece Values (pawn units)
# ============================================================================

PIECE_VALUES = {
    chess.PAWN: 1,
    chess.KNIGHT: 3,
    chess.BISHOP: 3,
    chess.ROOK: 5,
    chess.QUEEN: 9,
    chess.KING: 200,
}

# Centipawn values used only for game phase detection
PHASE_MATERIAL = {
    chess.KNIGHT: 320,
    chess.BISHOP: 330,
    chess.ROOK: 500,
    chess.QUEEN: 900,
}

# Endgame if non-pawn material on the board < queen + rook
ENDGAME_THRESHOLD = 1400


# ============================================================================
# King Exposure Tables
# ============================================================================
# Penalty for the king standing on each square, from White's perspective
# (row 0 = rank 8, row 7 = rank 1). Black flips the table vertically.
#
# Convention: Higher values = more exposed
# Range: 0 (sheltered) to 5 (fully exposed)
# ============================================================================

# Middlegame: stay behind the pawns, ideally on a castled square
KING_MIDDLEGAME_EXPOSURE = np.array([
    [5.0, 5.0, 5.0, 5.0, 5.0, 5.0, 5.0, 5.0],  # Rank 8
    [5.0, 5.0, 5.0, 5.0, 5.0, 5.0, 5.0, 5.0],  # Rank 7
    [4.0, 4.5, 4.5, 5.0, 5.0, 4.5, 4.5, 4.0],  # Rank 6
    [3.5, 4.0, 4.0, 4.5, 4.5, 4.0, 4.0, 3.5],  # Rank 5
    [3.0, 3.5, 3.5, 4.0, 4.0, 3.5, 3.5, 3.0],  # Rank 4
    [2.0, 2.5, 2.5, 3.0, 3.0, 2.5, 2.5, 2.0],  # Rank 3
    [0.5, 0.5, 1.5, 2.0, 2.0, 1.5, 0.5, 0.5],  # Rank 2
    [0.5, 0.0, 0.5, 1.0, 1.0, 0.5, 0.0, 0.5],  # Rank 1
], dtype=np.float32)

# Endgame: the king is an active piece, only edges and corners are bad
KING_ENDGAME_EXPOSURE = np.array([
    [3.0, 2.5, 2.0, 1.5, 1.5, 2.0, 2.5, 3.0],
    [2.5, 1.5, 1.0, 0.5, 0.5, 1.0, 1.5, 2.5],
    [2.0, 1.0, 0.0, 0.0, 0.0, 0.0, 1.0, 2.0],
    [1.5, 0.5, 0.0, 0.0, 0.0, 0.0, 0.5, 1.5],
    [1.5, 0.5, 0.0, 0.0, 0.0, 0.0, 0.5, 1.5],
    [2.0, 1.0, 0.0, 0.0, 0.0, 0.0, 1.0, 2.0],
    [2.5, 1.5, 1.0, 0.5, 0.5, 1.0, 1.5, 2.5],
    [3.0, 2.5, 2.0, 1.5, 1.5, 2.0, 2.5, 3.0],
], dtype=np.float32)
#fmt: on


def piece_value(kind: chess.PieceType) -> int:
    return PIECE_VALUES[kind]


def is_endgame(board: BoardQueryAdapter) -> bool:
    """
    Detect if the position is in the endgame phase.

    Simple heuristic: endgame if both sides together have less non-pawn
    material than a queen plus a rook (1400 centipawns).
    """
    material = sum(PHASE_MATERIAL.get(p.kind, 0) for p in board.pieces())
    return material < ENDGAME_THRESHOLD


def _adjacent_files(king_square: int):
    file = file_of(king_square)
    return [f for f in (file - 1, file, file + 1) if 0 <= f <= 7]


def pawn_shield(board: BoardQueryAdapter, king_square: int, side: chess.Color) -> int:
    """
    Count friendly pawns on the three squares one rank in front of the king.

    Returns:
        int: 0-3 (higher is safer)
    """
    shield_rank = rank_of(king_square) + forward(side)
    count = 0
    for file in _adjacent_files(king_square):
        if not is_on_board(shield_rank, file):
            continue
        piece = board.piece_at(square_at(shield_rank, file))
        if piece is not None and piece.kind == chess.PAWN and piece.side == side:
            count += 1
    return count


def exposed_king(board: BoardQueryAdapter, king_square: int, side: chess.Color) -> int:
    """
    Count neighbor squares occupied by an enemy piece or attacked by the enemy.

    A square that is both occupied and attacked counts once.

    Returns:
        int: 0-8 (higher is more exposed)
    """
    enemy = not side
    penalty = 0
    for square in neighbors(king_square):
        piece = board.piece_at(square)
        occupied_by_enemy = piece is not None and piece.side == enemy
        if occupied_by_enemy or board.is_attacked(square, enemy):
            penalty += 1
    return penalty


def enemy_attacks(board: BoardQueryAdapter, king_square: int, side: chess.Color) -> float:
    """
    Sum piece_value/10 over every enemy attacker of every neighbor square.

    Two rooks on one square contribute 0.5 + 0.5; a square attacked by
    nothing contributes 0.

    Returns:
        float: >= 0 (higher is more dangerous)
    """
    enemy = not side
    score = 0.0
    for square in neighbors(king_square):
        for kind in board.attackers_of(enemy, square):
            score += piece_value(kind) / 10
    return score


def mobility(board: BoardQueryAdapter, king_square: int, side: chess.Color) -> int:
    """Number of legal king moves from its current square."""
    return board.legal_move_count(king_square, chess.KING)


def king_positioning(board: BoardQueryAdapter, king_square: int, side: chess.Color) -> float:
    """
    Table penalty for where the king stands, depending on game phase.

    In the middlegame the king belongs on its back rank, preferably on a
    castled square. In the endgame it may centralise and only the rim is
    penalised.

    Returns:
        float: 0-5 (higher is more exposed)
    """
    table = KING_ENDGAME_EXPOSURE if is_endgame(board) else KING_MIDDLEGAME_EXPOSURE
    row, col = square_to_coordinates(king_square)
    if side == chess.BLACK:
        row = 7 - row
    return float(table[row, col])


def open_files(board: BoardQueryAdapter, king_square: int, side: chess.Color) -> int:
    """
    Count files on or next to the king's file with no pawns of either color.

    Returns:
        int: 0-3 (2 at most for a king on the a- or h-file)
    """
    pawn_files = {file_of(p.square) for p in board.pieces() if p.kind == chess.PAWN}
    return sum(1 for f in _adjacent_files(king_square) if f not in pawn_files)


# Order in which the aggregator runs and reports heuristics
HEURISTICS = (
    Heuristic('pawn_shield', pawn_shield),
    Heuristic('exposed_king', exposed_king),
    Heuristic('enemy_attacks', enemy_attacks),
    Heuristic('king_positioning', king_positioning),
    Heuristic('mobility', mobility),
    Heuristic('open_files', open_files),
)
