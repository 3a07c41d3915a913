"""A small comparable record used as a container element."""

from __future__ import annotations

from typing import Any


class Animal:
    """An animal with a name and an age; ordering compares ages only."""

    __slots__ = ("_age", "_name")

    def __init__(self, age: int, name: str) -> None:
        if age < 0:
            raise ValueError("age must not be negative")
        self._age = age
        self._name = name

    @property
    def age(self) -> int:
        return self._age

    @property
    def name(self) -> str:
        return self._name

    def __str__(self) -> str:
        return f"Name: {self._name}. Age: {self._age}"

    def __repr__(self) -> str:
        return f"Animal({self._age!r}, {self._name!r})"

    def __hash__(self) -> int:
        return hash((self._age, self._name))

    def _same(self, other: Animal) -> bool:
        return self._age == other._age and self._name == other._name

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Animal):
            return NotImplemented
        return self._same(other)

    def __ne__(self, other: Any) -> bool:
        """Apply the same age-and-name match as ``==``."""
        if not isinstance(other, Animal):
            return NotImplemented
        return self._same(other)

    def __lt__(self, other: Animal) -> bool:
        if not isinstance(other, Animal):
            return NotImplemented
        return self._age < other._age

    def __le__(self, other: Animal) -> bool:
        if not isinstance(other, Animal):
            return NotImplemented
        return self._age <= other._age

    def __gt__(self, other: Animal) -> bool:
        if not isinstance(other, Animal):
            return NotImplemented
        return self._age > other._age

    def __ge__(self, other: Animal) -> bool:
        if not isinstance(other, Animal):
            return NotImplemented
        return self._age >= other._age