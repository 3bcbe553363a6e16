"""Exceptions raised by formula parsing and chemistry value types."""

from typing import Optional


class ChemError(Exception):
    """Base exception for chemistry-related errors."""

    pass


class FormulaError(ChemError, ValueError):
    """Error while reading a chemical formula."""

    def __init__(
        self,
        message: str,
        formula: Optional[str] = None,
        position: Optional[int] = None,
    ):
        self.message = message
        self.formula = formula
        self.position = position

        if formula is not None and position is not None:
            super().__init__(f"{message}\n  {formula}\n  {' ' * position}^")
        elif formula is not None:
            super().__init__(f"{message} in: {formula}")
        else:
            super().__init__(message)


class UnknownSpeciesError(FormulaError):
    """Symbol absent from the species lookup table."""

    def __init__(
        self,
        symbol: str,
        formula: Optional[str] = None,
        position: Optional[int] = None,
    ):
        self.symbol = symbol
        super().__init__(f"Unknown species '{symbol}'", formula, position)


class MalformedCountError(FormulaError):
    """Digit run that is not a representable positive count."""

    def __init__(
        self,
        digits: str,
        formula: Optional[str] = None,
        position: Optional[int] = None,
    ):
        self.digits = digits
        super().__init__(f"Malformed atom count '{digits}'", formula, position)


class CuError(ChemError, ValueError):
    """Invalid carbon/unsaturation index."""

    pass
