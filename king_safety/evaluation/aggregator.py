"""
King Safety Aggregator

Combines the heuristics of heuristics.HEURISTICS into one score:

    score = sum(weight[name] * heuristic(board, king_square, side))

Every call recomputes from the board; nothing is cached. Either all
heuristics succeed and a full score is returned, or the first error
propagates to the caller.

Example:
    >>> import chess
    >>> from king_safety import evaluate_king_safety
    >>> evaluate_king_safety(chess.Board(), chess.WHITE)
    2.2
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Union

import chess

from king_safety.board.adapter import BoardQueryAdapter
from king_safety.evaluation.base import Evaluator, Heuristic
from king_safety.evaluation.heuristics import HEURISTICS
from king_safety.evaluation.weights import DEFAULT_WEIGHTS, WeightTable

logger = logging.getLogger(__name__)

BoardLike = Union[chess.Board, BoardQueryAdapter]


@dataclass(frozen=True)
class KingSafetyReport:
    """
    Breakdown of one king safety evaluation.

    Attributes:
        side: Side whose king was evaluated
        king_square: Square of that king
        values: Raw heuristic values, by heuristic name
        contributions: weight * value, by heuristic name
        score: Sum of all contributions
    """
    side: chess.Color
    king_square: int
    values: Dict[str, float]
    contributions: Dict[str, float]
    score: float

    def to_markdown(self) -> str:
        """Render the breakdown as a markdown table."""
        lines = [
            f"## King Safety: {chess.COLOR_NAMES[self.side]} king on "
            f"{chess.square_name(self.king_square)}",
            "",
            "| Heuristic | Value | Contribution |",
            "|-----------|-------|--------------|",
        ]
        for name, value in self.values.items():
            lines.append(f"| {name} | {value:g} | {self.contributions[name]:+.2f} |")
        lines.extend(["", f"**Score**: {self.score:+.2f}"])
        return "\n".join(lines)


def _as_adapter(board: BoardLike) -> BoardQueryAdapter:
    if isinstance(board, BoardQueryAdapter):
        return board
    return BoardQueryAdapter(board)


class KingSafetyEvaluator(Evaluator):
    """
    Weighted king safety evaluator.

    Attributes:
        weights: Coefficient for each heuristic
        heuristics: Heuristics to run, in order
    """

    def __init__(
        self,
        weights: WeightTable = DEFAULT_WEIGHTS,
        heuristics: Sequence[Heuristic] = HEURISTICS,
    ):
        unweighted = [h.name for h in heuristics if h.name not in weights.as_dict()]
        if unweighted:
            raise ValueError(f"No weight for heuristic(s): {', '.join(unweighted)}")
        self.weights = weights
        self.heuristics = tuple(heuristics)

    def report(self, board: BoardLike, side: Optional[chess.Color] = None) -> KingSafetyReport:
        """
        Evaluate one side's king and return the full breakdown.

        Args:
            board: python-chess Board or an existing BoardQueryAdapter
            side: Side to evaluate (defaults to side to move)

        Raises:
            KingNotFound: If that side has no king
        """
        adapter = _as_adapter(board)
        if side is None:
            side = adapter.side_to_move()
        king_square = adapter.king_square(side)

        values = {}
        contributions = {}
        score = 0.0
        for heuristic in self.heuristics:
            value = heuristic(adapter, king_square, side)
            contribution = self.weights[heuristic.name] * value
            values[heuristic.name] = value
            contributions[heuristic.name] = contribution
            score += contribution
            logger.debug(
                f"{heuristic.name}: value={value} weight={self.weights[heuristic.name]} "
                f"contribution={contribution:+.3f}"
            )

        logger.debug(
            f"King safety for {chess.COLOR_NAMES[side]} "
            f"({chess.square_name(king_square)}): {score:+.3f}"
        )
        return KingSafetyReport(side, king_square, values, contributions, score)

    def score(self, board: BoardLike, side: Optional[chess.Color] = None) -> float:
        """King safety score for one side (higher is safer)."""
        return self.report(board, side).score

    def evaluate(self, board: chess.Board) -> float:
        """
        White king safety minus Black king safety.

        Returns:
            float: Positive if White's king is the safer one
        """
        adapter = _as_adapter(board)
        return self.score(adapter, chess.WHITE) - self.score(adapter, chess.BLACK)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(weights={self.weights!r})"


def evaluate_king_safety(
    board: BoardLike,
    side: Optional[chess.Color] = None,
    weights: WeightTable = DEFAULT_WEIGHTS,
) -> float:
    """
    Score how safe one side's king is.

    Args:
        board: python-chess Board or BoardQueryAdapter
        side: Side to evaluate (defaults to side to move)
        weights: Heuristic coefficients

    Returns:
        float: Weighted sum of the heuristics (higher is safer)

    Raises:
        KingNotFound: If that side has no king
    """
    return KingSafetyEvaluator(weights).score(board, side)
