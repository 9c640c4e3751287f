"""
Abstract Evaluator Interface

This module defines the abstract base class for position evaluators and the
heuristic registry entry type used by the king safety aggregator.

Key Principles:
    1. Evaluators are stateless (configuration only, fixed at construction)
    2. evaluate() always returns a score from White's perspective
    3. Positive = White advantage, Negative = Black advantage

Heuristics are plain functions with the signature

    heuristic(board: BoardQueryAdapter, king_square: int, side: chess.Color) -> float

They read the board through the adapter and never keep state between calls.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable

import chess

from king_safety.board.adapter import BoardQueryAdapter

HeuristicFn = Callable[[BoardQueryAdapter, int, chess.Color], float]


@dataclass(frozen=True)
class Heuristic:
    """
    A named king safety heuristic.

    Attributes:
        name: Key into the weight table (e.g. "pawn_shield")
        fn: The scoring function
    """
    name: str
    fn: HeuristicFn

    def __call__(self, board: BoardQueryAdapter, king_square: int, side: chess.Color) -> float:
        return self.fn(board, king_square, side)


class Evaluator(ABC):
    """
    Abstract base class for position evaluation.

    All evaluator implementations must inherit from this class and implement
    the evaluate() method, so they can be summed with other evaluators by
    an outer evaluation function.
    """

    @abstractmethod
    def evaluate(self, board: chess.Board) -> float:
        """
        Evaluate a chess position from White's perspective.

        Args:
            board: python-chess Board object to evaluate

        Returns:
            float: Evaluation (positive favours White)
        """
        pass

    def __repr__(self) -> str:
        """String representation of evaluator."""
        return f"{self.__class__.__name__}()"
