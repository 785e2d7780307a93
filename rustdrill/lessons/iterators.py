"""Iterators: walking lists, capitalising words, dividing, factorials and progress counts."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable, Iterator, Mapping


def favourite_fruits() -> Iterator[str]:
    """An iterator over a list of favourite fruits."""
    return iter(["banana", "custard apple", "avocado", "peach", "raspberry"])


def capitalize_first(text: str) -> str:
    """Upper-case the first character: 'hello' -> 'Hello'."""
    return text[:1].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalise each word: ['hello', 'world'] -> ['Hello', 'World']."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalise each word and join them: ['hello', ' ', 'world'] -> 'Hello World'."""
    return "".join(capitalize_first(word) for word in words)


class DivisionError(ArithmeticError):
    """A division could not produce a whole result; raised as-is for division by zero."""


class NotDivisibleError(DivisionError):
    """The dividend is not evenly divisible by the divisor."""

    def __init__(self, dividend: int, divisor: int):
        super().__init__(f"{dividend} is not evenly divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NotDivisibleError):
            return NotImplemented
        return (self.dividend, self.divisor) == (other.dividend, other.divisor)

    def __hash__(self) -> int:
        return hash((self.dividend, self.divisor))


def divide(a: int, b: int) -> int:
    """``a`` divided by ``b`` when it divides evenly; raise DivisionError otherwise."""
    if b == 0:
        raise DivisionError("divide by zero")
    if a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


_NUMBERS = (27, 297, 38502, 81)


def result_with_list() -> list[int]:
    """Divide each number by 27, raising on the first failure."""
    return [divide(n, 27) for n in _NUMBERS]


def list_of_results() -> list[int | DivisionError]:
    """Divide each number by 27, keeping any failure in place of its result."""
    outcomes: list[int | DivisionError] = []
    for n in _NUMBERS:
        try:
            outcomes.append(divide(n, 27))
        except DivisionError as error:
            outcomes.append(error)
    return outcomes


def factorial(num: int) -> int:
    """The product 1 * 2 * ... * num; 1 for zero."""
    if num < 0:
        raise ValueError(f"factorial is undefined for {num}")
    return math.prod(range(1, num + 1))


class Progress(enum.Enum):
    """How far an exercise has got."""

    NONE = "none"
    SOME = "some"
    COMPLETE = "complete"


def count_for(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress using an explicit loop."""
    count = 0
    for progress in progress_map.values():
        if progress is value:
            count += 1
    return count


def count_iterator(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress using a generator."""
    return sum(1 for progress in progress_map.values() if progress is value)


def count_collection_for(collection: Iterable[Mapping[str, Progress]], value: Progress) -> int:
    """Count entries with the given progress across maps using explicit loops."""
    count = 0
    for progress_map in collection:
        for progress in progress_map.values():
            if progress is value:
                count += 1
    return count


def count_collection_iterator(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries with the given progress across maps using a generator."""
    return sum(count_iterator(progress_map, value) for progress_map in collection)