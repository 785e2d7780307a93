"""Structs: named colours, a unit type, order templates and parcels with fees."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


class NamedColor(NamedTuple):
    """A colour name and its hex code, reachable by field or by position."""

    name: str
    hex: str


class UnitStruct:
    """A type with no fields."""

    def __repr__(self) -> str:
        return "UnitStruct"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, UnitStruct)

    def __hash__(self) -> int:
        return hash(UnitStruct)


@dataclass(frozen=True)
class Order:
    """A customer order."""

    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template() -> Order:
    """An order to base new orders on."""
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )


@dataclass(frozen=True)
class Package:
    """A parcel sent between two countries."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams <= 0:
            raise ValueError("weight in grams must be greater than 0")

    def is_international(self) -> bool:
        return self.sender_country != self.recipient_country

    def fees(self, cents_per_gram: int) -> int:
        """Transport fee in cents."""
        return cents_per_gram * self.weight_in_grams