"""Service layer."""

from .formula_service import FormulaService

__all__ = ["FormulaService"]
