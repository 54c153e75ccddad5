from __future__ import annotations

from dataclasses import dataclass


class PeriodError(Exception):
    """Base class for errors raised by the relative-date helpers."""


@dataclass(slots=True, eq=False)
class NegativeValueError(PeriodError, ValueError):
    unit: str
    suggestion: str
    value: int

    def __str__(self) -> str:
        return (
            f"{self.unit} must be positive. "
            f"Did you mean {self.suggestion}({self.value})?"
        )


__all__ = ["PeriodError", "NegativeValueError"]
