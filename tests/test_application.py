import io

import pytest

from studylab.application import Application
from studylab.student import Student, write_students


def make_app(script=""):
    out = io.StringIO()
    return Application(stdin=io.StringIO(script), stdout=out), out


def test_add_item_appends_record():
    app, _ = make_app("7\nAlice\n12 Main Street\n")
    app.add_item()
    assert len(app.students) == 1
    stored = app.students[0]
    assert (stored.id, stored.name, stored.address) == (7, "Alice", "12 Main Street")


def test_add_item_rejects_bad_id():
    app, _ = make_app("seven\nAlice\nStreet\n")
    with pytest.raises(ValueError):
        app.add_item()
    assert len(app.students) == 0


def test_delete_item_removes_by_id():
    app, _ = make_app("1\nAnn\nA\n2\nBen\nB\n1\n")
    app.add_item()
    app.add_item()
    app.delete_item()
    assert [s.id for s in app.students] == [2]


def test_delete_missing_raises():
    app, _ = make_app("5\n")
    with pytest.raises(ValueError):
        app.delete_item()


def test_replace_item_updates_fields():
    app, _ = make_app("1\nAnn\nOld Road\n1\nAnna\nNew Road\n")
    app.add_item()
    app.replace_item()
    stored = app.students[0]
    assert (stored.name, stored.address) == ("Anna", "New Road")
    assert len(app.students) == 1


def test_display_item_prints_record():
    app, out = make_app("3\nCid\nPlace\n3\n")
    app.add_item()
    shown = app.display_item()
    assert shown.name == "Cid"
    assert Student(3, "Cid", "Place").format_record() in out.getvalue()


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "out.txt"
    app, _ = make_app("1\nAnn\nFirst Road\n2\nBen\nSecond Road\n")
    app.add_item()
    app.add_item()
    app.save(path)
    other, out = make_app()
    assert other.load(path) == 2
    assert [(s.id, s.name, s.address) for s in other.students] == [
        (1, "Ann", "First Road"),
        (2, "Ben", "Second Road"),
    ]
    assert Student(2, "Ben", "Second Road").format_record() in out.getvalue()


def test_load_missing_file_raises(tmp_path):
    app, _ = make_app()
    with pytest.raises(FileNotFoundError):
        app.load(tmp_path / "absent.txt")


def test_list_capacity_overflow():
    script = "".join(f"{n}\nName{n}\nAddr\n" for n in range(21))
    app, _ = make_app(script)
    for _ in range(20):
        app.add_item()
    with pytest.raises(OverflowError):
        app.add_item()


def test_run_full_session(tmp_path):
    path = tmp_path / "data.txt"
    script = f"1\n4\nDee\nHill Lane\n8\n{path}\n6\n5\n7\n{path}\n0\n"
    app, out = make_app(script)
    app.run()
    assert [(s.id, s.name) for s in app.students] == [(4, "Dee")]
    assert "Choose a Command" in out.getvalue()
    assert path.read_text(encoding="utf-8") == "\n4 Dee Hill Lane"


def test_run_illegal_selection_then_quit():
    app, out = make_app("9\nxyz\n0\n")
    app.run()
    assert out.getvalue().count("Illegal selection...") == 2


def test_run_reports_error_and_continues(tmp_path):
    app, out = make_app(f"2\n99\n7\n{tmp_path / 'none.txt'}\n0\n")
    app.run()
    assert "99 is not in the list" in out.getvalue() or "is not in the list" in out.getvalue()
    assert len(app.students) == 0


def test_run_stops_at_end_of_input():
    app, _ = make_app("1\n5\nEve\n")
    app.run()
    assert len(app.students) == 0


def test_run_make_empty(tmp_path):
    path = tmp_path / "in.txt"
    write_students([Student(1, "Ann", "Road")], path)
    app, _ = make_app(f"7\n{path}\n6\n0\n")
    app.run()
    assert app.students.is_empty()


def test_get_command_parses_number():
    app, _ = make_app("3\n")
    assert app.get_command() == 3