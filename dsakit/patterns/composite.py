"""Composite pattern examples: ability sets, drawable groups and neuron layers."""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass
class Creature:
    """A creature whose abilities are treated together as a collection."""

    strength: int = 0
    agility: int = 0
    intelligence: int = 0

    def _abilities(self) -> tuple[int, int, int]:
        return self.strength, self.agility, self.intelligence

    def sum(self) -> int:
        return sum(self._abilities())

    def average(self) -> float:
        return self.sum() / len(self._abilities())

    def max(self) -> int:
        return max(self._abilities())


class GraphicObject(ABC):
    """Something that can be drawn, alone or as part of a group."""

    @abstractmethod
    def draw(self) -> list[str]:
        """Return the lines that drawing this object produces."""


class Circle(GraphicObject):
    def draw(self) -> list[str]:
        return ["Circle"]


class Group(GraphicObject):
    """A named collection of graphic objects, itself drawable."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.objects: list[GraphicObject] = []

    def draw(self) -> list[str]:
        lines = [f"Group {self.name} contains:"]
        for obj in self.objects:
            lines.extend(obj.draw())
        return lines

    def add_object(self, obj: GraphicObject) -> None:
        self.objects.append(obj)


def _connect(sources: Iterable[Neuron], targets: Iterable[Neuron]) -> None:
    targets = list(targets)
    for source in sources:
        for target in targets:
            source.outputs.append(target)
            target.inputs.append(source)


class Neuron:
    """A single neuron; iterating over it yields just itself."""

    _ids = itertools.count(1)

    def __init__(self) -> None:
        self.id = next(Neuron._ids)
        self.inputs: list[Neuron] = []
        self.outputs: list[Neuron] = []

    def connect_to(self, other: Iterable[Neuron]) -> None:
        """Connect to a neuron or to every neuron of a layer."""
        _connect(self, other)

    def __iter__(self) -> Iterator[Neuron]:
        yield self

    def __str__(self) -> str:
        lines = [f"{n.id}\t-->\t[{self.id}]\n" for n in self.inputs]
        lines += [f"[{self.id}]\t-->\t{n.id}\n" for n in self.outputs]
        return "".join(lines)


class NeuronLayer:
    """A layer of neurons that connects like a single neuron does."""

    def __init__(self, count: int) -> None:
        self._neurons = [Neuron() for _ in range(count)]

    def connect_to(self, other: Iterable[Neuron]) -> None:
        _connect(self, other)

    def __iter__(self) -> Iterator[Neuron]:
        return iter(self._neurons)

    def __len__(self) -> int:
        return len(self._neurons)

    def __str__(self) -> str:
        return "".join(str(neuron) for neuron in self._neurons)