"""Exception types raised by the conversion engine.

Every error subclasses :class:`ConversionError`, which is itself a
``ValueError`` so library callers can treat bad requests like any other
invalid argument.
"""

from __future__ import annotations

from typing import Iterable


class ConversionError(ValueError):
    """Base class for invalid conversion requests."""


class ParseError(ConversionError):
    """Raised when a numeric argument cannot be read as a finite float."""

    def __init__(self, text: object) -> None:
        self.text = text
        super().__init__(f"invalid numeric value: {text!r}")


class UnknownUnitError(ConversionError):
    """Raised when a unit name is not recognised for its category."""

    def __init__(self, category: str, unit: object, valid: Iterable[str]) -> None:
        self.category = category
        self.unit = unit
        self.valid = tuple(valid)
        super().__init__(
            f"unsupported unit {unit!r} for {category} "
            f"(choose from: {', '.join(self.valid)})"
        )


class UnknownCategoryError(ConversionError):
    """Raised when a category name has no converter."""

    def __init__(self, category: object, valid: Iterable[str]) -> None:
        self.category = category
        self.valid = tuple(valid)
        super().__init__(
            f"unsupported category {category!r} (choose from: {', '.join(self.valid)})"
        )


class MissingArgumentError(ConversionError):
    """Raised when a conversion lacks a required unit or output mode."""

    def __init__(
        self, category: str, flags: str, what: str = "unit specification"
    ) -> None:
        self.category = category
        self.flags = flags
        super().__init__(f"missing required {what} for {category}: {flags}")
