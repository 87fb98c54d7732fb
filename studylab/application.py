"""An interactive menu for keeping a list of student records."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Optional, TextIO, Union

from studylab.array_list import ArrayList
from studylab.student import Student, read_students, write_students

PathLike = Union[str, Path]

_MENU = (
    "\n\n"
    "\t---ID -- Command ----- \n"
    "\t   1 : Add item\n"
    "\t   2 : Delete item\n"
    "\t   3 : Replace item\n"
    "\t   4 : Display item\n"
    "\t   5 : Print all on screen\n"
    "\t   6 : Make empty list\n"
    "\t   7 : Get from file\n"
    "\t   8 : Put to file \n"
    "\t   0 : Quit\n"
    "\n\t Choose a Command--> "
)


class Application:
    """Reads commands from a stream and manages a bounded list of students."""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._students: ArrayList[Student] = ArrayList()

    @property
    def students(self) -> ArrayList[Student]:
        return self._students

    def _write(self, text: str) -> None:
        self._out.write(text)

    def _prompt(self, text: str) -> str:
        self._write(text)
        line = self._in.readline()
        if not line:
            raise EOFError("no more input")
        return line.rstrip("\r\n")

    def _read_id(self) -> int:
        text = self._prompt("\tID: ").strip()
        try:
            return int(text)
        except ValueError:
            raise ValueError(f"not a student id: {text!r}") from None

    def _read_name(self) -> str:
        words = self._prompt("\tName: ").split()
        if not words:
            raise ValueError("a name is required")
        return words[0]

    def _read_address(self) -> str:
        return self._prompt("\tAddress: ").strip()

    def _read_record(self) -> Student:
        return Student(self._read_id(), self._read_name(), self._read_address())

    def run(self) -> None:
        """Serve commands until 0 is chosen or the input ends."""
        actions: dict[int, Callable[[], object]] = {
            1: self.add_item,
            2: self.delete_item,
            3: self.replace_item,
            4: self.display_item,
            5: self.display_all,
            6: self._students.make_empty,
            7: lambda: self.load(self._prompt("\n\tEnter input file name: ").strip()),
            8: lambda: self.save(self._prompt("\n\tEnter output file name: ").strip()),
        }
        while True:
            try:
                command: Optional[int] = self.get_command()
            except EOFError:
                return
            except ValueError:
                command = None
            if command == 0:
                return
            action = actions.get(command) if command is not None else None
            if action is None:
                self._write("\tIllegal selection...\n")
                continue
            try:
                action()
            except EOFError:
                return
            except (ValueError, OverflowError, IndexError, OSError) as error:
                self._write(f"\t{error}\n")

    def get_command(self) -> int:
        """Show the menu and read a command number."""
        text = self._prompt(_MENU).strip()
        self._write("\n")
        return int(text)

    def add_item(self) -> Student:
        """Read a record and add it to the list."""
        student = self._read_record()
        self._students.append(student)
        return student

    def delete_item(self) -> None:
        """Read an id and remove that student from the list."""
        self._students.remove(Student(self._read_id()))

    def replace_item(self) -> Student:
        """Read a record and put it in place of the student with the same id."""
        student = self._read_record()
        self._students.set_item(self._students.index(student), student)
        return student

    def display_item(self) -> Student:
        """Read an id and show that student's record."""
        student = self._students[self._students.index(Student(self._read_id()))]
        self._write(student.format_record() + "\n")
        return student

    def display_all(self) -> None:
        """Show every record in the list."""
        for student in self._students:
            self._write(student.format_record() + "\n")

    def load(self, path: PathLike) -> int:
        """Append every record in a file to the list, show the list, and return the count."""
        loaded = read_students(path)
        for student in loaded:
            self._students.append(student)
        self.display_all()
        return len(loaded)

    def save(self, path: PathLike) -> None:
        """Write every record in the list to a file."""
        write_students(self._students, path)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the menu on standard input and output."""
    Application().run()
    return 0


if __name__ == "__main__":
    sys.exit(main())