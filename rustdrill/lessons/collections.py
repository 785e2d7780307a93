"""Collections: fruit baskets as dictionaries, lists built and transformed."""

from __future__ import annotations

import enum


def fruit_basket() -> dict[str, int]:
    """A basket with at least three kinds of fruit and at least five fruits in all."""
    return {"banana": 2, "orange": 3, "cherry": 4, "kiwi": 5}


class Fruit(enum.Enum):
    """Kinds of fruit that may go into a basket."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add five of every kind of fruit not yet in the basket, leaving the others alone."""
    for fruit in Fruit:
        basket.setdefault(fruit, 5)


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """The same four numbers as a fixed tuple and as a list."""
    return (10, 20, 30, 40), [10, 20, 30, 40]


def vec_loop(v: list[int]) -> list[int]:
    """Every number multiplied by two."""
    return [i * 2 for i in v]