"""Shared data across worker threads, and a recursive cons list."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass


def _offset_sum(numbers: Sequence[int], offset: int, step: int) -> int:
    return sum(numbers[offset::step])


def offset_sums(numbers: Sequence[int], workers: int = 8) -> list[int]:
    """Sum every ``workers``-th value, one thread per offset; result indexed by offset.

    The sequence is shared by all threads, never copied per thread.
    """
    if workers <= 0:
        raise ValueError(f"workers must be positive, got {workers}")
    shared = tuple(numbers)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [pool.submit(_offset_sum, shared, offset, workers) for offset in range(workers)]
        sums = [future.result() for future in futures]
    for offset, total in enumerate(sums):
        print(f"Sum of offset {offset} is {total}")
    return sums


@dataclass(frozen=True)
class Cons:
    """One cell of a cons list: a value and the rest of the list (None for the end)."""

    head: int
    tail: Cons | None = None

    def __iter__(self) -> Iterator[int]:
        cell: Cons | None = self
        while cell is not None:
            yield cell.head
            cell = cell.tail


def create_empty_list() -> Cons | None:
    """The empty cons list."""
    return None


def create_non_empty_list() -> Cons:
    """The cons list 1, 2, 3."""
    return Cons(1, Cons(2, Cons(3, None)))