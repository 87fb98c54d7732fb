import pytest

from studylab.student import Student, read_students, write_students


def test_from_line_splits_fields():
    student = Student.from_line("7 Alice 12 Main Street")
    assert student.id == 7
    assert student.name == "Alice"
    assert student.address == "12 Main Street"


def test_line_round_trip():
    student = Student(42, "Bob", "Somewhere over there")
    parsed = Student.from_line(student.to_line())
    assert (parsed.id, parsed.name, parsed.address) == (42, "Bob", "Somewhere over there")


def test_missing_address_is_empty():
    assert Student.from_line("3 Carol").address == ""


@pytest.mark.parametrize("line", ["", "12", "abc Dan Street"])
def test_malformed_line_rejected(line):
    with pytest.raises(ValueError):
        Student.from_line(line)


def test_equality_uses_id_only():
    assert Student(1, "A", "x") == Student(1, "B", "y")
    assert not Student(1, "A", "x") == Student(2, "A", "x")


def test_default_student():
    student = Student()
    assert (student.id, student.name, student.address) == (-1, "", "")


def test_format_record_columns():
    record = Student(5, "Eve", "Town").format_record()
    assert len(record) == 70
    assert record[:20].strip() == "5"
    assert record[20:40].strip() == "Eve"
    assert record[40:].strip() == "Town"


def test_file_round_trip(tmp_path):
    path = tmp_path / "students.txt"
    students = [Student(1, "Ann", "First Road"), Student(2, "Ben", "Second Road")]
    write_students(students, path)
    loaded = read_students(path)
    assert [(s.id, s.name, s.address) for s in loaded] == [
        (1, "Ann", "First Road"),
        (2, "Ben", "Second Road"),
    ]


def test_written_file_starts_each_record_with_newline(tmp_path):
    path = tmp_path / "students.txt"
    write_students([Student(9, "Zed", "Home")], path)
    assert path.read_text(encoding="utf-8") == "\n9 Zed Home"