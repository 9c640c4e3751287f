"""
Evaluation Module

King safety heuristics and the weighted aggregator that combines them.

Key Components:
    - Evaluator (ABC): common interface shared with other evaluators
    - heuristics: pawn shield, exposed king, enemy attacks, king
      positioning, mobility and open files
    - WeightTable: one coefficient per heuristic
    - KingSafetyEvaluator / evaluate_king_safety: the weighted sum

Data Flow:
    chess.Board → BoardQueryAdapter → heuristics → weights → float
                                                    Higher = safer king
"""

from king_safety.evaluation.aggregator import (
    KingSafetyEvaluator,
    KingSafetyReport,
    evaluate_king_safety,
)
from king_safety.evaluation.base import Evaluator, Heuristic
from king_safety.evaluation.heuristics import HEURISTICS
from king_safety.evaluation.weights import DEFAULT_WEIGHTS, WeightTable

__all__ = [
    'DEFAULT_WEIGHTS',
    'Evaluator',
    'HEURISTICS',
    'Heuristic',
    'KingSafetyEvaluator',
    'KingSafetyReport',
    'WeightTable',
    'evaluate_king_safety',
]
