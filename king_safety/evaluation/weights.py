"""
Weight configuration for the king safety aggregator.
"""

import math
from dataclasses import dataclass, fields, replace
from typing import Dict, Mapping


@dataclass(frozen=True)
class WeightTable:
    """Coefficients applied to each king safety heuristic.

    Positive weights reward a heuristic's value, negative weights turn it
    into a penalty. The table is built once and shared read-only between
    evaluations.
    """

    pawn_shield: float = 1.0
    """Friendly pawns directly in front of the king (0-3)"""

    exposed_king: float = -0.5
    """Neighbor squares held or attacked by the opponent (0-8)"""

    enemy_attacks: float = -0.2
    """Summed value/10 of enemy pieces attacking the king's neighbors"""

    king_positioning: float = -0.8
    """Table penalty for a king standing outside its shelter (0-5)"""

    mobility: float = 0.1
    """Legal king moves. Kept small: many moves also means little cover"""

    open_files: float = -1.0
    """Pawnless files on or next to the king's file (0-3)"""

    def __post_init__(self):
        """Validate weights after initialization."""
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{f.name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise ValueError(f"{f.name} must be finite, got {value}")
            object.__setattr__(self, f.name, float(value))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, float]) -> "WeightTable":
        """Build a table from a name -> weight mapping.

        Names not present keep their default weight.

        Raises:
            ValueError: If the mapping names an unknown heuristic
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(mapping) - known)
        if unknown:
            raise ValueError(
                f"Unknown heuristic weight(s): {', '.join(unknown)}. "
                f"Expected one of: {', '.join(sorted(known))}"
            )
        return cls(**dict(mapping))

    def scaled(self, factor: float) -> "WeightTable":
        """Return a new table with every weight multiplied by factor."""
        return replace(self, **{name: w * factor for name, w in self.as_dict().items()})

    def as_dict(self) -> Dict[str, float]:
        """Heuristic name -> weight, in declaration order."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def __getitem__(self, name: str) -> float:
        if name not in self.as_dict():
            raise KeyError(name)
        return getattr(self, name)


DEFAULT_WEIGHTS = WeightTable()
