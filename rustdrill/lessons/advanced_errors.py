"""Error types that wrap lower-level errors: integers and climate records."""

from __future__ import annotations

from dataclasses import dataclass

from rustdrill.lessons.error_handling import (
    ParsePosNonzeroError,
    PositiveNonzeroInteger,
    _parse_int,
)

_I64 = (-(2**63), 2**63 - 1)
_U32 = (0, 2**32 - 1)


def parse_positive_nonzero(s: str) -> PositiveNonzeroInteger:
    """Read a positive non-zero integer, wrapping any failure in ParsePosNonzeroError."""
    try:
        return PositiveNonzeroInteger(_parse_int(s, *_I64))
    except ValueError as error:
        raise ParsePosNonzeroError(error) from error


def _parse_float(text: str) -> float:
    if not text:
        raise ValueError("cannot parse float from empty string")
    if "_" in text or text != text.strip():
        raise ValueError("invalid float literal")
    try:
        return float(text)
    except ValueError:
        raise ValueError("invalid float literal") from None


class ParseClimateError(ValueError):
    """A climate record could not be parsed; ``source`` holds any underlying error."""

    def __init__(self, message: str, source: ValueError | None = None):
        super().__init__(message)
        self.source = source


@dataclass(frozen=True)
class Climate:
    """A city's temperature in a given year."""

    city: str
    year: int
    temp: float

    @classmethod
    def from_str(cls, s: str) -> Climate:
        """Parse 'city,year,temp'; raise ParseClimateError on bad input."""
        if not s:
            raise ParseClimateError("empty input")
        fields = s.split(",")
        if len(fields) != 3:
            raise ParseClimateError("incorrect number of fields")
        city, year_text, temp_text = fields
        if not city:
            raise ParseClimateError("no city name")
        try:
            year = _parse_int(year_text, *_U32)
        except ValueError as error:
            raise ParseClimateError(f"error parsing year: {error}", error) from error
        try:
            temp = _parse_float(temp_text)
        except ValueError as error:
            raise ParseClimateError(f"error parsing temperature: {error}", error) from error
        return cls(city=city, year=year, temp=temp)