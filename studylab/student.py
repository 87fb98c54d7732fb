"""Student records and the plain text file format they are kept in."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Union

PathLike = Union[str, Path]


class RelationType(enum.Enum):
    """How two items compare."""

    LESS = enum.auto()
    GREATER = enum.auto()
    EQUAL = enum.auto()


@dataclass(eq=False)
class Student:
    """A student's id, one-word name and address; equal ids mean the same student."""

    id: int = -1
    name: str = ""
    address: str = ""

    @classmethod
    def from_line(cls, line: str) -> "Student":
        """Parse a ``"<id> <name> <address>"`` line."""
        parts = line.strip().split(maxsplit=2)
        if len(parts) < 2:
            raise ValueError(f"not a student record: {line!r}")
        try:
            student_id = int(parts[0])
        except ValueError:
            raise ValueError(f"not a student id: {parts[0]!r}") from None
        address = parts[2] if len(parts) == 3 else ""
        return cls(student_id, parts[1], address)

    def to_line(self) -> str:
        """Return the record as one line of the file format."""
        return f"{self.id} {self.name} {self.address}"

    def format_record(self) -> str:
        """Return the record laid out in right-aligned columns."""
        return f"{self.id:>20}{self.name:>20}{self.address:>30}"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return self.id == other.id

    __hash__ = None  # type: ignore[assignment]


def read_students(path: PathLike) -> list[Student]:
    """Read every record from a file, skipping blank lines."""
    with open(path, encoding="utf-8") as handle:
        return [Student.from_line(line) for line in handle if line.strip()]


def write_students(students: Iterable[Student], path: PathLike) -> None:
    """Write the records to a file, each on a line of its own after a newline."""
    with open(path, "w", encoding="utf-8") as handle:
        for student in students:
            handle.write("\n" + student.to_line())