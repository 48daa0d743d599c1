"""Worked answers to the variables, functions, if, vector, string and option drills."""

from __future__ import annotations

_HABITATS = {"crab": "Beach", "gopher": "Burrow", "snake": "Desert"}
_COLOR_WORDS = frozenset({"green", "blue", "red"})
_U32_MODULUS = 1 << 32


def calculate_price_of_apples(n: int) -> int:
    """Two per apple, or one per apple for orders of more than 40."""
    return 2 * n if n <= 40 else n


def bigger(a: int, b: int) -> int:
    """Return the larger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    """Map "fizz" to "foo", "fuzz" to "bar" and anything else to "baz"."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def animal_habitat(animal: str) -> str:
    """Return where the animal lives, or "Unknown"."""
    return _HABITATS.get(animal, "Unknown")


def is_even(num: int) -> bool:
    """Return True for even numbers."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Take 10 off even prices and 3 off odd ones, as an unsigned 32-bit value."""
    discounted = price - 10 if is_even(price) else price - 3
    return discounted % _U32_MODULUS


def square(num: int) -> int:
    """Return the square of a number."""
    return num * num


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """Return a fixed array and a growable list with the same elements."""
    return (10, 20, 30, 40), [10, 20, 30, 40]


def vec_loop(v: list[int]) -> list[int]:
    """Double every element in place and return the list."""
    v[:] = [element * 2 for element in v]
    return v


def vec_map(v: list[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [element * 2 for element in v]


def is_a_color_word(attempt: str) -> bool:
    """Return True for green, blue or red."""
    return attempt in _COLOR_WORDS


def trim_me(text: str) -> str:
    """Remove whitespace from both ends."""
    return text.strip()


def compose_me(text: str) -> str:
    """Append " world!"."""
    return f"{text} world!"


def replace_me(text: str) -> str:
    """Replace every "cars" with "balloons"."""
    return text.replace("cars", "balloons")


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of ice cream left at the given hour; None for hours past 23."""
    if time_of_day > 23:
        return None
    return 5 if time_of_day < 22 else 0