"""Worked answer to the clone-on-write drill."""

from __future__ import annotations

from typing import Iterator, Sequence


class Cow:
    """A sequence that is borrowed until it must be changed, then copied once."""

    def __init__(self, data: Sequence[int], owned: bool = False) -> None:
        self._data = data
        self.owned = owned

    @classmethod
    def borrowed(cls, data: Sequence[int]) -> "Cow":
        """Wrap data without copying it; it is copied on the first change."""
        return cls(data, owned=False)

    @classmethod
    def from_owned(cls, data: list[int]) -> "Cow":
        """Take over a list that may be changed directly."""
        return cls(data, owned=True)

    @property
    def data(self) -> Sequence[int]:
        """The current contents."""
        return self._data

    def to_mut(self) -> list[int]:
        """Return a mutable list, copying borrowed data first."""
        if not self.owned:
            self._data = list(self._data)
            self.owned = True
        return self._data  # type: ignore[return-value]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __getitem__(self, index: int) -> int:
        return self._data[index]

    def __repr__(self) -> str:
        kind = "Owned" if self.owned else "Borrowed"
        return f"Cow.{kind}({list(self._data)!r})"


def abs_all(cow: Cow) -> Cow:
    """Make every value non-negative, copying borrowed data only if needed."""
    for i, value in enumerate(list(cow)):
        if value < 0:
            cow.to_mut()[i] = -value
    return cow