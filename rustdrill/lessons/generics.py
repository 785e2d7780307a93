"""Generics: a shopping list, a wrapper for any value and report cards with any grade."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Generic, TypeVar

T = TypeVar("T")


def shopping_list() -> list[str]:
    """A shopping list holding milk."""
    items: list[str] = []
    items.append("milk")
    return items


@dataclass(frozen=True)
class Wrapper(Generic[T]):
    """Holds a single value of any type."""

    value: T


def _display(value: object) -> str:
    """Render a value the way a plain display format would: 1.0 as '1', True as 'true'."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "inf" if value > 0 else "-inf"
        return format(Decimal(repr(value)).normalize(), "f")
    return str(value)


@dataclass
class ReportCard(Generic[T]):
    """A student's report card; the grade may be a number or a letter."""

    grade: T
    student_name: str
    student_age: int

    def render(self) -> str:
        """One-line summary of the card."""
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {_display(self.grade)}"
        )