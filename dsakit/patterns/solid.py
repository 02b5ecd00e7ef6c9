"""SOLID principle examples: dependency inversion, open-closed, single responsibility."""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class Relationship(Enum):
    PARENT = "parent"
    CHILD = "child"
    SIBLING = "sibling"


@dataclass(frozen=True)
class Person:
    name: str


class RelationshipBrowser(ABC):
    """The abstraction high-level code depends on."""

    @abstractmethod
    def find_all_children_of(self, name: str) -> list[Person]:
        """Every child of the person called ``name``."""


class Relationships(RelationshipBrowser):
    """Low-level store of relations as ``(first, relationship, second)``."""

    def __init__(self) -> None:
        self.relations: list[tuple[Person, Relationship, Person]] = []

    def add_parent_and_child(self, parent: Person, child: Person) -> None:
        self.relations.append((parent, Relationship.PARENT, child))
        self.relations.append((child, Relationship.CHILD, parent))

    def find_all_children_of(self, name: str) -> list[Person]:
        return [
            second
            for first, relation, second in self.relations
            if first.name == name and relation is Relationship.PARENT
        ]


def research(browser: RelationshipBrowser, name: str = "John") -> list[str]:
    """Describe the children of ``name`` using only the browser abstraction."""
    return [f"{name} has a child called {child.name}" for child in browser.find_all_children_of(name)]


class Color(Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"


class Size(Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


@dataclass
class Product:
    name: str
    color: Color
    size: Size


class Specification(ABC):
    """A predicate over products; combine with ``&``."""

    @abstractmethod
    def is_satisfied(self, item: Product) -> bool:
        """Whether ``item`` meets the specification."""

    def __and__(self, other: Specification) -> AndSpec:
        return AndSpec(self, other)


class ColorSpec(Specification):
    def __init__(self, color: Color) -> None:
        self.color = color

    def is_satisfied(self, item: Product) -> bool:
        return item.color == self.color


class SizeSpec(Specification):
    def __init__(self, size: Size) -> None:
        self.size = size

    def is_satisfied(self, item: Product) -> bool:
        return item.size == self.size


class AndSpec(Specification):
    def __init__(self, first: Specification, second: Specification) -> None:
        self.first = first
        self.second = second

    def is_satisfied(self, item: Product) -> bool:
        return self.first.is_satisfied(item) and self.second.is_satisfied(item)


class ProductFilter:
    def filter(self, items: Iterable[Product], spec: Specification) -> list[Product]:
        return [item for item in items if spec.is_satisfied(item)]


class Journal:
    """A titled list of entries, numbered by one counter shared by all journals."""

    _counter = itertools.count(1)

    def __init__(self, title: str) -> None:
        self.title = title
        self._entries: list[str] = []

    def add_entry(self, entry: str) -> None:
        self._entries.append(f"{next(Journal._counter)}: {entry}")

    @property
    def entries(self) -> list[str]:
        return list(self._entries)


class PersistenceManager:
    """Saving is kept apart from the journal itself."""

    @staticmethod
    def save(journal: Journal, path: str | Path) -> None:
        Path(path).write_text("".join(f"{entry}\n" for entry in journal.entries), encoding="utf-8")