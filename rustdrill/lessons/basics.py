"""Basics: variables, functions, conditions, greetings, strings and small lint fixes."""

from __future__ import annotations

import math

NUMBER = 3

_WELCOME_LINES = (
    "Hello and",
    r"       welcome to...                      ",
    r"                 _   _ _                  ",
    r"  _ __ _   _ ___| |_| (_)_ __   __ _ ___  ",
    r" | '__| | | / __| __| | | '_ \ / _` / __| ",
    r" | |  | |_| \__ \ |_| | | | | | (_| \__ \ ",
    r" |_|   \__,_|___/\__|_|_|_| |_|\__, |___/ ",
    r"                               |___/      ",
    "",
    "This exercise compiles successfully. The remaining exercises contain a compiler",
    "or logic error. The central concept behind Rustlings is to fix these errors and",
    "solve the exercises. Good luck!",
)


def variables_output() -> list[str]:
    """The lines printed by the variable exercises, in order."""
    lines = []
    x = 5
    lines.append(f"x has the value {x}")

    x = 1
    lines.append("Ten!" if x == 10 else "Not ten!")

    x = 3
    lines.append(f"Number {x}")
    x = 5
    lines.append(f"Number {x}")

    x = 10
    lines.append(f"Number {x}")

    number: object = "T-H-R-E-E"
    lines.append(f"Spell a Number : {number}")
    number = 3
    lines.append(f"Number plus two is : {number + 2}")

    lines.append(f"Number {NUMBER}")
    for line in lines:
        print(line)
    return lines


def call_me(num: int) -> list[str]:
    """Ring ``num`` times, printing and returning each line."""
    lines = [f"Ring! Call number {i + 1}" for i in range(num)]
    for line in lines:
        print(line)
    return lines


def is_even(num: int) -> bool:
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Ten off an even price, three off an odd one."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    return num * num


def bigger(a: int, b: int) -> int:
    """The larger of two numbers."""
    return b if a < b else a


def fizz_if_foo(fizzish: str) -> str:
    """'foo' for 'fizz', 'bar' for 'fuzz', 'baz' for anything else."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def welcome_text() -> str:
    """The welcome banner and introduction."""
    return "\n".join(_WELCOME_LINES)


def greeting() -> str:
    return "Hello !"


def current_favorite_color() -> str:
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    return attempt in ("green", "blue", "red")


def circle_area(radius: float) -> float:
    """Area of a circle with the given radius."""
    return math.pi * radius**2


def add_optional(res: int, option: int | None) -> int:
    """Add the optional value to ``res`` when there is one."""
    if option is not None:
        res += option
    return res