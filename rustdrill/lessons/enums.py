"""Messages as a sum type, and a state that processes them."""

from __future__ import annotations

from dataclasses import dataclass


def _check_byte(name: str, value: int) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"{name} must be between 0 and 255, got {value}")


@dataclass(frozen=True)
class Point:
    """A position with byte-sized coordinates."""

    x: int
    y: int

    def __post_init__(self) -> None:
        _check_byte("x", self.x)
        _check_byte("y", self.y)


class Message:
    """The messages a State understands."""

    @dataclass(frozen=True)
    class ChangeColor:
        color: tuple[int, int, int]

        def __post_init__(self) -> None:
            if len(self.color) != 3:
                raise ValueError("a colour has exactly three components")
            for name, component in zip(("red", "green", "blue"), self.color):
                _check_byte(name, component)

    @dataclass(frozen=True)
    class Echo:
        text: str

    @dataclass(frozen=True)
    class Move:
        point: Point

    @dataclass(frozen=True)
    class Quit:
        pass


@dataclass
class State:
    """Colour, position and quit flag changed by processing messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = Point(0, 0)
    quit_requested: bool = False

    def change_color(self, color: tuple[int, int, int]) -> None:
        self.color = color

    def quit(self) -> None:
        self.quit_requested = True

    def echo(self, s: str) -> None:
        print(s)

    def move_position(self, p: Point) -> None:
        self.position = p

    def process(self, message) -> None:
        """Apply one message to the state."""
        match message:
            case Message.ChangeColor(color):
                self.change_color(color)
            case Message.Echo(text):
                self.echo(text)
            case Message.Move(point):
                self.move_position(point)
            case Message.Quit():
                self.quit()
            case _:
                raise TypeError(f"not a message: {message!r}")