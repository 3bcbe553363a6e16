"""Saturation classification derived from an unsaturation count."""

from enum import Enum
from typing import Protocol, runtime_checkable


class Saturation(Enum):
    """Whether a chain or molecule carries any unsaturation."""

    SATURATED = "Saturated"
    UNSATURATED = "Unsaturated"

    @classmethod
    def from_value(cls, value: str) -> "Saturation":
        """Read either the word form or the single-letter form."""
        for member in cls:
            if value in (member.value, member.letter):
                return member
        raise ValueError(f"{value!r} is not a valid {cls.__name__}")

    @property
    def letter(self) -> str:
        return self.value[0]

    def render(self, verbose: bool = False) -> str:
        """Return "S"/"U", or the full word when verbose."""
        return self.value if verbose else self.letter

    def __str__(self) -> str:
        return self.render()

    def __format__(self, format_spec: str) -> str:
        # "#" selects the verbose form, like the alternate flag of int formats
        if format_spec == "#":
            return self.render(verbose=True)
        return format(self.render(), format_spec)


@runtime_checkable
class Saturable(Protocol):
    """Anything that can report its degree of unsaturation."""

    def unsaturated(self) -> int:
        ...


def is_saturated(item: Saturable) -> bool:
    """Whether the item has no unsaturation."""
    return item.unsaturated() == 0


def saturation_of(item: Saturable) -> Saturation:
    """Classify an item by its unsaturation count."""
    if is_saturated(item):
        return Saturation.SATURATED
    return Saturation.UNSATURATED
