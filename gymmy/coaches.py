"""Fixed-capacity roster of gym coaches."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List

DEFAULT_CAPACITY = 1000


@dataclass
class Coach:
    """A gym coach."""

    name: str
    phone: str
    age: int
    gender: str
    specialty: str


class CoachNotFoundError(LookupError):
    """Raised when no coach has the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__("Pelatih tidak ditemukan.")
        self.name = name


class RosterFullError(Exception):
    """Raised when the roster has reached its capacity."""

    def __init__(self) -> None:
        super().__init__("Data Penuh.")


class CoachRoster:
    """Coaches in insertion order, looked up by name."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = capacity
        self._coaches: List[Coach] = []

    @property
    def is_full(self) -> bool:
        return len(self._coaches) >= self.capacity

    def add(self, coach: Coach) -> None:
        """Append a coach, refusing once the roster is full."""
        if self.is_full:
            raise RosterFullError()
        self._coaches.append(coach)

    def _index(self, name: str) -> int:
        for position, coach in enumerate(self._coaches):
            if coach.name == name:
                return position
        raise CoachNotFoundError(name)

    def find(self, name: str) -> Coach:
        """Return the first coach with the given name."""
        return self._coaches[self._index(name)]

    def edit(self, name: str, coach: Coach) -> None:
        """Replace the first coach with the given name, keeping its place."""
        self._coaches[self._index(name)] = coach

    def remove(self, name: str) -> Coach:
        """Remove and return the first coach with the given name."""
        return self._coaches.pop(self._index(name))

    def __iter__(self) -> Iterator[Coach]:
        return iter(list(self._coaches))

    def __len__(self) -> int:
        return len(self._coaches)