"""Primitive types, optional values and ownership of lists."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def greet_time_of_day(is_morning: bool, is_evening: bool) -> list[str]:
    """Greetings for the flags that are set."""
    greetings = []
    if is_morning:
        greetings.append("Good morning!")
    if is_evening:
        greetings.append("Good evening!")
    for line in greetings:
        print(line)
    return greetings


def classify_char(ch: str) -> str:
    """Say whether a single character is alphabetic, numeric or neither."""
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    if ch.isalpha():
        return "Alphabetical!"
    if ch.isnumeric():
        return "Numerical!"
    return "Neither alphabetic nor numeric!"


def array_size_message(items: Sequence) -> str:
    """Comment on whether a sequence holds at least 100 elements."""
    if len(items) >= 100:
        return "Wow, that's a big array!"
    return "Meh, I eat arrays like that for breakfast."


def nice_slice(items: Sequence) -> Sequence:
    """Elements 1 to 3; raise IndexError when the sequence is too short."""
    if len(items) < 4:
        raise IndexError(f"range end index 4 out of range for length {len(items)}")
    return items[1:4]


def describe_cat(cat: tuple[str, float]) -> str:
    name, age = cat
    return f"{name} is {age} years old."


def second(numbers: Sequence):
    """The second element."""
    return numbers[1]


def print_number(maybe_number: int | None) -> str:
    """Print the number; raise ValueError when there is none."""
    if maybe_number is None:
        raise ValueError("called print_number with no number")
    line = f"printing: {maybe_number}"
    print(line)
    return line


def number_table() -> list[int]:
    """Five numbers computed from their positions."""
    return [(i * 1235 + 2) // (4 * 16) for i in range(5)]


def drain_optionals(values: Iterable[int | None]) -> list[int]:
    """Pop values from the end until the list is empty or a missing value is reached."""
    stack = list(values)
    drained = []
    while stack and (value := stack.pop()) is not None:
        print(f"current value: {value}")
        drained.append(value)
    return drained


def describe_point(point) -> str:
    """Describe a point with ``x`` and ``y``, or say there is none."""
    if point is None:
        return "no match"
    return f"Co-ordinates are {point.x},{point.y} "


def fill_vec(vec: Iterable[int] | None = None) -> list[int]:
    """A new list holding ``vec`` followed by 22, 44 and 66; ``vec`` is left untouched."""
    filled = [] if vec is None else list(vec)
    filled.extend((22, 44, 66))
    return filled


def add_through_references(x: int) -> int:
    """Add 100 and then 1000, one step after the other."""
    cell = [x]
    cell[0] += 100
    cell[0] += 1000
    return cell[0]