"""Prototype: duplicate a mutable person without sharing its hobbies.

Two copying disciplines, one observable contract:

- :class:`Person` copies field by field into a new instance
  (copy-constructor style).
- :class:`Employee` takes a shallow ``copy.copy`` and then replaces the
  hobby list with a fresh one.

After either copy, mutating scalars or hobbies on one side is invisible
to the other.
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Self


class PersonPrototype(ABC):
    """Anything that can produce an independent duplicate of itself."""

    @abstractmethod
    def copy(self) -> Self: ...


@dataclass
class Person(PersonPrototype):
    """Mutable person duplicated through an explicit copy constructor."""

    name: str
    age: int
    address: str
    hobbies: list[str] = field(default_factory=list)

    def set_name(self, name: str) -> None:
        self.name = name

    def set_age(self, age: int) -> None:
        self.age = age

    def set_address(self, address: str) -> None:
        self.address = address

    def set_hobbies(self, hobbies: list[str]) -> None:
        self.hobbies = hobbies

    def add_hobby(self, hobby: str) -> None:
        self.hobbies.append(hobby)

    def copy(self) -> Person:
        return Person(self.name, self.age, self.address, list(self.hobbies))


@dataclass
class Employee:
    """Mutable person duplicated by shallow clone plus a hobby-list fix-up."""

    name: str
    age: int
    address: str
    hobbies: list[str] = field(default_factory=list)

    def set_name(self, name: str) -> None:
        self.name = name

    def set_age(self, age: int) -> None:
        self.age = age

    def set_address(self, address: str) -> None:
        self.address = address

    def set_hobbies(self, hobbies: list[str]) -> None:
        self.hobbies = hobbies

    def add_hobby(self, hobby: str) -> None:
        self.hobbies.append(hobby)

    def clone(self) -> Employee:
        duplicate = copy.copy(self)
        duplicate.set_hobbies(list(self.hobbies))  # the only mutable field
        return duplicate
