"""Singleton pattern example with a replaceable population source."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from pathlib import Path

DEFAULT_CAPITALS_FILE = "capitals.txt"
_CONSTRUCT = object()


class PopulationSource(ABC):
    """Anything that can report the population of a named place."""

    @abstractmethod
    def get_population(self, name: str) -> int:
        """Population of ``name``; unknown names count as 0."""


def _read_capitals(path: str | Path) -> dict[str, int]:
    """Read alternating name and population lines; a missing file gives nothing."""
    try:
        lines = Path(path).read_text(encoding="utf-8").splitlines()
    except FileNotFoundError:
        return {}
    capitals: dict[str, int] = {}
    it = iter(lines)
    for name in it:
        capitals[name] = int(next(it, ""))
    return capitals


class SingletonDatabase(PopulationSource):
    """Capitals read once from a file; only one instance ever exists."""

    _instance: SingletonDatabase | None = None

    def __init__(self, capitals: Mapping[str, int], *, _key: object = None) -> None:
        if _key is not _CONSTRUCT:
            raise TypeError("use SingletonDatabase.get() to obtain the database")
        self._capitals = dict(capitals)

    @classmethod
    def get(cls, path: str | Path = DEFAULT_CAPITALS_FILE) -> SingletonDatabase:
        """The single instance, loaded from ``path`` on first use."""
        if cls._instance is None:
            cls._instance = cls(_read_capitals(path), _key=_CONSTRUCT)
        return cls._instance

    def get_population(self, name: str) -> int:
        return self._capitals.get(name, 0)


class DummyDatabase(PopulationSource):
    """A fixed stand-in source for testing code that needs populations."""

    _instance: DummyDatabase | None = None

    def __init__(self, *, _key: object = None) -> None:
        if _key is not _CONSTRUCT:
            raise TypeError("use DummyDatabase.get() to obtain the database")
        self._capitals = {"alpha": 1, "beta": 1, "gamma": 1}

    @classmethod
    def get(cls) -> DummyDatabase:
        if cls._instance is None:
            cls._instance = cls(_key=_CONSTRUCT)
        return cls._instance

    def get_population(self, name: str) -> int:
        return self._capitals.get(name, 0)


class RecordFinder:
    """Sums populations from an injected source."""

    def __init__(self, db: PopulationSource) -> None:
        self.db = db

    def total_population(self, names: Iterable[str]) -> int:
        return sum(self.db.get_population(name) for name in names)