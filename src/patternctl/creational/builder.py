"""Person builder: field-by-field accumulation, frozen result.

Unset fields keep their defaults: strings are ``None``, ``age`` is ``0``.
The builder is not consumed by :meth:`PersonBuilder.build`; calling it
again yields another equal but independent :class:`Person`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Self

from pydantic import BaseModel


class Person(BaseModel):
    """Immutable person value produced by a builder."""

    model_config = {"frozen": True}

    name: str | None = None
    age: int = 0
    gender: str | None = None
    address: str | None = None


class PersonBuilder(ABC):
    """Fluent builder contract for :class:`Person`."""

    @abstractmethod
    def set_name(self, name: str) -> Self: ...

    @abstractmethod
    def set_age(self, age: int) -> Self: ...

    @abstractmethod
    def set_gender(self, gender: str) -> Self: ...

    @abstractmethod
    def set_address(self, address: str) -> Self: ...

    @abstractmethod
    def build(self) -> Person: ...


class BasicPersonBuilder(PersonBuilder):
    """Accumulates fields in plain attributes until :meth:`build`."""

    def __init__(self) -> None:
        self._name: str | None = None
        self._age: int = 0
        self._gender: str | None = None
        self._address: str | None = None

    def set_name(self, name: str) -> Self:
        self._name = name
        return self

    def set_age(self, age: int) -> Self:
        self._age = age
        return self

    def set_gender(self, gender: str) -> Self:
        self._gender = gender
        return self

    def set_address(self, address: str) -> Self:
        self._address = address
        return self

    def build(self) -> Person:
        return Person(
            name=self._name,
            age=self._age,
            gender=self._gender,
            address=self._address,
        )
