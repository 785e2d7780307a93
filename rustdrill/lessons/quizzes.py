"""Quiz answers: apple pricing, string values, doubling and a greeting."""


def calculate_apple_price(apples_count: int) -> int:
    """Two per apple, or one per apple when more than 40 are bought at once."""
    return apples_count if apples_count > 40 else apples_count * 2


def string_slice(arg: str) -> None:
    """Print a borrowed piece of text."""
    print(arg)


def string(arg: str) -> None:
    """Print a freshly built piece of text."""
    print(arg)


def print_strings() -> None:
    """Print each of the quiz's values through the matching function."""
    string_slice("blue")
    string("red")
    string(str("hi"))
    string("rust is fun!")
    string("nice weather")
    string(f"Interpolation {'Station'}")
    string_slice("abc"[0:1])
    string_slice("  hello there ".strip())
    string("Happy Monday!".replace("Mon", "Tues"))
    string("mY sHiFt KeY iS sTiCkY".lower())


def times_two(num: int) -> int:
    """Double a number."""
    return num * 2


def my_macro(val) -> str:
    """Greet the given value."""
    return f"Hello {val}"