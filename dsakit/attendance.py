"""A small attendance register kept as a comma-separated list of names."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from enum import Enum
from pathlib import Path

DEFAULT_DATA_FILE = "data.txt"


class Status(Enum):
    """Attendance mark of a student."""

    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    NOT_MARKED = "ATTENDANCE NOT MARKED"


def format_students(names: Iterable[str]) -> str:
    """Every name followed by a comma."""
    return "".join(f"{name}," for name in names)


def parse_students(line: str) -> list[str]:
    """Names from a stored line, up to the first empty entry."""
    names: list[str] = []
    for name in line.rstrip("\r\n").split(","):
        if not name:
            break
        names.append(name)
    return names


def status_from_answer(answer: str) -> Status:
    """``p`` marks present, ``a`` absent, anything else leaves it unmarked."""
    if answer == "p":
        return Status.PRESENT
    if answer == "a":
        return Status.ABSENT
    return Status.NOT_MARKED


def report(names: Sequence[str], statuses: Sequence[Status]) -> list[str]:
    return [f"{name} is {status.value}" for name, status in zip(names, statuses)]


def save_students(names: Iterable[str], path: str | Path = DEFAULT_DATA_FILE) -> None:
    Path(path).write_text(format_students(names), encoding="utf-8")


def load_students(path: str | Path = DEFAULT_DATA_FILE) -> list[str]:
    with open(path, encoding="utf-8") as handle:
        return parse_students(handle.readline())


def _token(prompt: str) -> str:
    words = input(prompt).split()
    return words[0] if words else ""


def _register(path: Path) -> None:
    while True:
        try:
            int(_token("How many students there are: "))
            break
        except ValueError:
            print("Please enter a number")
    _token("Name of the class: ")

    names = [_token("Enter the name of the student: ")]
    while _token("Do you want to add more students? (y/n) ")[:1] in ("y", "Y"):
        print()
        names.append(_token("Enter the name of the student: "))
    save_students(names, path)


def _take_attendance(path: Path) -> int:
    try:
        names = load_students(path)
    except FileNotFoundError:
        print(f"No student data found in {path}", file=sys.stderr)
        return 1
    print()
    print("Here are the names of students")
    print("If they are present enter 'p', otherwise 'a'")
    statuses = [status_from_answer(_token(f"{name} (p/a)? ")[:1]) for name in names]
    print()
    for line in report(names, statuses):
        print(line)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="attendance", description="Take class attendance.")
    parser.add_argument("--data", default=DEFAULT_DATA_FILE, help="file holding the student names")
    args = parser.parse_args(argv)
    path = Path(args.data)

    answer = _token("Do you have the data? (y/n) ")[:1]
    if answer in ("n", "N"):
        _register(path)
        return 0
    return _take_attendance(path)


if __name__ == "__main__":
    sys.exit(main())