"""Error handling: name tags, token costs and positive non-zero integers."""

from __future__ import annotations

import re
from dataclasses import dataclass

_DIGITS = re.compile(r"[0-9]+")

_I32 = (-(2**31), 2**31 - 1)
_I64 = (-(2**63), 2**63 - 1)

PROCESSING_FEE = 1
COST_PER_ITEM = 5


def _parse_int(text: str, minimum: int, maximum: int) -> int:
    """Parse a plain decimal integer within [minimum, maximum].

    Only an optional sign followed by ASCII digits is accepted; a minus sign
    counts as an invalid digit when the range has no negative numbers.
    """
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits, sign = text, 1
    if text[0] == "+":
        digits = text[1:]
    elif text[0] == "-" and minimum < 0:
        digits, sign = text[1:], -1
    if not _DIGITS.fullmatch(digits):
        raise ValueError("invalid digit found in string")
    digits = digits.lstrip("0") or "0"
    if len(digits) > 40:
        value = sign * maximum * 2 if sign > 0 else minimum * 2
    else:
        value = sign * int(digits)
    if value > maximum:
        raise ValueError("number too large to fit in target type")
    if value < minimum:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Text for a name tag; raise ValueError when the name is empty."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed to buy the typed-in quantity of items, fee included."""
    quantity = _parse_int(item_quantity, *_I32)
    return quantity * COST_PER_ITEM + PROCESSING_FEE


def spend_tokens(tokens: int, item_quantity: str) -> int:
    """Buy items if the tokens cover them and return the tokens left."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        print("You can't afford that many!")
        return tokens
    tokens -= cost
    print(f"You now have {tokens} tokens.")
    return tokens


class CreationError(ValueError):
    """A value could not become a positive non-zero integer."""

    def __init__(self, value: int):
        self.value = value
        super().__init__("number is negative" if value < 0 else "number is zero")

    @property
    def negative(self) -> bool:
        return self.value < 0


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value <= 0:
            raise CreationError(self.value)


class ParsePosNonzeroError(ValueError):
    """Text could not be read as a positive non-zero integer.

    ``source`` holds the underlying error: a CreationError when the number was
    read but is not positive, a plain ValueError when it was not a number.
    """

    def __init__(self, source: ValueError):
        super().__init__(str(source))
        self.source = source


def parse_pos_nonzero(s: str) -> PositiveNonzeroInteger:
    """Read a positive non-zero integer from text."""
    try:
        value = _parse_int(s, *_I64)
    except ValueError as error:
        raise ParsePosNonzeroError(error) from error
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as error:
        raise ParsePosNonzeroError(error) from error