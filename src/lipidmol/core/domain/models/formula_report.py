"""Domain model for formula analysis results."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .counter import Counter
from .cu import Cu
from .saturation import Saturation


@dataclass
class FormulaReport:
    """Derived properties of one formula.

    unsaturation and saturation describe the whole molecule (degree of
    unsaturation, (2C + 2 - H) // 2). cu is the chain shorthand, u = C - H // 2,
    and classifies on its own: C18H36 has cu 18:0, a saturated chain, while the
    molecule is unsaturated. Use cu.saturation() for the chain's class.
    """

    formula: Counter
    weight: float
    unsaturation: int
    saturation: Saturation
    cu: Optional[Cu] = None

    @property
    def canonical(self) -> str:
        return self.formula.render()

    def to_dict(self) -> Dict[str, Any]:
        """Plain structure suitable for JSON output."""
        return {
            "formula": self.canonical,
            "atoms": self.formula.to_dict(),
            "weight": self.weight,
            "unsaturation": self.unsaturation,
            "saturation": self.saturation.value,
            "cu": self.cu.render() if self.cu is not None else None,
        }
