"""
King Safety Scoring Engine

Estimates how safe one side's king is in a chess position. The result is a
single sub-score meant to be combined with other terms by an outer
evaluation function; it does not pick moves or count material.

## Architecture

1. **board**: Coordinate math and the read-only board facade
   - Rank/file decomposition and neighbor squares
   - BoardQueryAdapter over python-chess (attackers, legal moves, king)

2. **evaluation**: Heuristics and aggregation
   - Six stateless heuristics
   - WeightTable configuration
   - KingSafetyEvaluator: weighted sum, with a per-heuristic report

3. **errors**: InvalidSquare, KingNotFound, AdapterQueryFailure

python-chess is the only source of rules knowledge (attacks, legality).

## Quick Start

```python
import chess
from king_safety import evaluate_king_safety, KingSafetyEvaluator

board = chess.Board()
print(evaluate_king_safety(board, chess.WHITE))

evaluator = KingSafetyEvaluator()
print(evaluator.report(board, chess.BLACK).to_markdown())
```

## Version

0.1.0
"""

__version__ = "0.1.0"
__license__ = "MIT"

from king_safety.board import BoardQueryAdapter, PlacedPiece
from king_safety.errors import (
    AdapterQueryFailure,
    InvalidSquare,
    KingNotFound,
    KingSafetyError,
)
from king_safety.evaluation import (
    DEFAULT_WEIGHTS,
    KingSafetyEvaluator,
    KingSafetyReport,
    WeightTable,
    evaluate_king_safety,
)

__all__ = [
    'AdapterQueryFailure',
    'BoardQueryAdapter',
    'DEFAULT_WEIGHTS',
    'InvalidSquare',
    'KingNotFound',
    'KingSafetyError',
    'KingSafetyEvaluator',
    'KingSafetyReport',
    'PlacedPiece',
    'WeightTable',
    'evaluate_king_safety',
]
