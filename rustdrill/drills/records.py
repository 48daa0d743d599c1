"""Worked answers to the struct, enum, test, report-card and trait drills."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import singledispatch

_U8_MAX = 255


@dataclass
class Order:
    """An order placed by a customer."""

    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template() -> Order:
    """Return the order that new orders are based on."""
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
    """A package sent between two countries."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams < 10:
            raise ValueError("Can not ship a package with weight below 10 grams.")

    def is_international(self) -> bool:
        """Return True when sender and recipient countries differ."""
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram: int) -> int:
        """Return the transport fee in cents."""
        return self.weight_in_grams * cents_per_gram


def _check_u8(*values: int) -> None:
    for value in values:
        if not 0 <= value <= _U8_MAX:
            raise ValueError(f"value out of range 0..255: {value}")


@dataclass(frozen=True)
class Point:
    """A position on a small grid."""

    x: int
    y: int

    def __post_init__(self) -> None:
        _check_u8(self.x, self.y)


@dataclass(frozen=True)
class ChangeColor:
    """Set the colour."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        _check_u8(self.red, self.green, self.blue)


@dataclass(frozen=True)
class Echo:
    """Replace the message."""

    text: str


@dataclass(frozen=True)
class Move:
    """Move to a new position."""

    point: Point


@dataclass(frozen=True)
class Quit:
    """Mark the state as quit."""


@dataclass
class State:
    """State changed by processing messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False
    message: str = ""

    def process(self, message: ChangeColor | Echo | Move | Quit) -> None:
        """Apply one message to the state."""
        match message:
            case ChangeColor(red, green, blue):
                self.color = (red, green, blue)
            case Echo(text):
                self.message = text
            case Move(point):
                self.position = point
            case Quit():
                self.quit = True
            case _:
                raise TypeError(f"unknown message: {message!r}")


@dataclass(frozen=True)
class Rectangle:
    """A rectangle with positive sides."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Rectangle width and height cannot be negative!")


def _format_grade(grade: object) -> str:
    if isinstance(grade, float) and grade.is_integer():
        return str(int(grade))
    return str(grade)


@dataclass
class ReportCard:
    """A student's report card with a numeric or alphabetical grade."""

    grade: float | str
    student_name: str
    student_age: int

    def render(self) -> str:
        """Return the printable line of the report card."""
        return (
            f"{self.student_name} ({self.student_age}) - achieved a grade of "
            f"{_format_grade(self.grade)}"
        )


@singledispatch
def append_bar(value):
    """Append "Bar" to a string, or a "Bar" element to a list."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]


class Licensed:
    """Software that reports its licensing information."""

    def licensing_info(self) -> str:
        """Return the licensing information."""
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    """Software with a numeric version."""

    version_number: int


@dataclass
class OtherSoftware(Licensed):
    """Software with a textual version."""

    version_number: str