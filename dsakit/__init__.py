"""Data structures, algorithms, design-pattern examples and an attendance register."""

__version__ = "0.1.0"