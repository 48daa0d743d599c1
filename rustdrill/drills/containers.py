"""Worked answers to the hash map, iterator, command-machine and cons-list drills."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Mapping, MutableMapping, Sequence

_U8_MAX = 255
_U64_MAX = (1 << 64) - 1


class Fruit(enum.Enum):
    """Kinds of fruit that can go into the basket."""

    APPLE = enum.auto()
    BANANA = enum.auto()
    MANGO = enum.auto()
    LYCHEE = enum.auto()
    PINEAPPLE = enum.auto()


def fruit_basket(basket: MutableMapping[Fruit, int]) -> None:
    """Add one of every kind of fruit that is not in the basket yet."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)


@dataclass
class Team:
    """Goals a team scored and conceded across all matches."""

    goals_scored: int = 0
    goals_conceded: int = 0

    def record(self, scored: int, conceded: int) -> None:
        """Add the result of one match, keeping both totals within 0..255."""
        scored_total = self.goals_scored + scored
        conceded_total = self.goals_conceded + conceded
        if scored_total > _U8_MAX or conceded_total > _U8_MAX:
            raise OverflowError("goal count exceeds 255")
        self.goals_scored = scored_total
        self.goals_conceded = conceded_total


def _parse_goals(text: str) -> int:
    value = int(text)
    if not 0 <= value <= _U8_MAX:
        raise ValueError(f"goal count out of range: {text!r}")
    return value


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of goals per team from "team1,team2,goals1,goals2" lines."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1, team_2 = fields[0], fields[1]
        score_1, score_2 = _parse_goals(fields[2]), _parse_goals(fields[3])
        scores.setdefault(team_1, Team()).record(score_1, score_2)
        scores.setdefault(team_2, Team()).record(score_2, score_1)
    return scores


def capitalize_first(text: str) -> str:
    """Upper-case the first character of the text."""
    return text[:1].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalize every word."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalize every word and join them without a separator."""
    return "".join(capitalize_first(word) for word in words)


class DivisionError(ArithmeticError):
    """A division that cannot give a whole result."""


class NotDivisibleError(DivisionError):
    """The dividend is not a multiple of the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NotDivisibleError):
            return NotImplemented
        return (self.dividend, self.divisor) == (other.dividend, other.divisor)

    def __hash__(self) -> int:
        return hash((self.dividend, self.divisor))


class DivideByZeroError(DivisionError):
    """The divisor is zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DivideByZeroError):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(DivideByZeroError)


def divide(a: int, b: int) -> int:
    """Divide a by b when a is a whole multiple of b."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


_NUMBERS = (27, 297, 38502, 81)


def result_with_list() -> list[int]:
    """Divide each sample number by 27; raise the first error met."""
    return [divide(n, 27) for n in _NUMBERS]


def list_of_results() -> list[int | DivisionError]:
    """Divide each sample number by 27, keeping errors in place of results."""

    def attempt(n: int) -> int | DivisionError:
        try:
            return divide(n, 27)
        except DivisionError as exc:
            return exc

    return [attempt(n) for n in _NUMBERS]


def factorial(num: int) -> int:
    """Return num! for a non-negative num, within the unsigned 64-bit range."""
    if num < 0:
        raise ValueError("factorial of a negative number")
    result = math.prod(range(1, num + 1))
    if result > _U64_MAX:
        raise OverflowError(f"{num}! does not fit in 64 bits")
    return result


class Progress(enum.Enum):
    """How far an exercise has come."""

    NONE = enum.auto()
    SOME = enum.auto()
    COMPLETE = enum.auto()


def count_for(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count the entries with the given progress using a plain loop."""
    count = 0
    for progress in progress_map.values():
        if progress is value:
            count += 1
    return count


def count_iterator(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count the entries with the given progress."""
    return sum(1 for progress in progress_map.values() if progress is value)


def count_collection_for(
    collection: Sequence[Mapping[str, Progress]], value: Progress
) -> int:
    """Count the entries with the given progress across maps using plain loops."""
    count = 0
    for progress_map in collection:
        for progress in progress_map.values():
            if progress is value:
                count += 1
    return count


def count_collection_iterator(
    collection: Sequence[Mapping[str, Progress]], value: Progress
) -> int:
    """Count the entries with the given progress across maps."""
    return sum(count_iterator(progress_map, value) for progress_map in collection)


class _Action(enum.Enum):
    UPPERCASE = enum.auto()
    TRIM = enum.auto()
    APPEND = enum.auto()


@dataclass(frozen=True)
class Command:
    """An operation to apply to a string: upper-case, trim, or append "bar"."""

    action: _Action
    times: int = 0

    def __post_init__(self) -> None:
        if self.times < 0:
            raise ValueError("append count must not be negative")

    @classmethod
    def uppercase(cls) -> "Command":
        """Upper-case the string."""
        return cls(_Action.UPPERCASE)

    @classmethod
    def trim(cls) -> "Command":
        """Strip whitespace from both ends."""
        return cls(_Action.TRIM)

    @classmethod
    def append(cls, times: int) -> "Command":
        """Append "bar" the given number of times."""
        return cls(_Action.APPEND, times)

    def apply(self, text: str) -> str:
        """Return the text with this command applied."""
        if self.action is _Action.UPPERCASE:
            return text.upper()
        if self.action is _Action.TRIM:
            return text.strip()
        return text + "bar" * self.times


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string."""
    return [command.apply(text) for text, command in items]


@dataclass(frozen=True)
class Cons:
    """A cons cell; the list ends where the tail is None."""

    value: int
    tail: "Cons | None" = None

    def __iter__(self) -> Iterator[int]:
        cell: Cons | None = self
        while cell is not None:
            yield cell.value
            cell = cell.tail


def create_empty_list() -> Cons | None:
    """Return the empty list."""
    return None


def create_non_empty_list() -> Cons | None:
    """Return a one-element list."""
    return Cons(1)