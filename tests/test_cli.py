import pytest

from advent2021 import day01, day13, day16
from advent2021.cli import main, solve

DEPTHS = "199\n200\n208\n210\n200\n207\n240\n269\n260\n263\n"


def test_solve_dispatches_to_day_parts():
    assert solve(1, 1, DEPTHS) == day01.part_one(DEPTHS)
    assert solve(1, 2, DEPTHS) == day01.part_two(DEPTHS)


def test_solve_rejects_unknown_day():
    with pytest.raises(ValueError):
        solve(4, 1, DEPTHS)


def test_solve_rejects_unknown_part():
    with pytest.raises(ValueError):
        solve(1, 3, DEPTHS)


def test_main_without_file(capsys):
    assert main(["1", "1"]) == 1
    assert capsys.readouterr().out == "no file given\n"


def test_main_prints_answer(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(DEPTHS)
    assert main(["1", "1", str(path)]) == 0
    assert capsys.readouterr().out == f"{day01.part_one(DEPTHS)}\n"


def test_main_prints_one_line_per_transmission(tmp_path, capsys):
    text = "D2FE28\nC200B40A82\n"
    path = tmp_path / "input.txt"
    path.write_text(text)
    assert main(["16", "2", str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [str(value) for value in day16.part_two(text)]


def test_main_prints_rendered_paper(tmp_path, capsys):
    text = "0,0\n4,0\nfold along x=2\n"
    path = tmp_path / "input.txt"
    path.write_text(text)
    assert main(["13", "2", str(path)]) == 0
    assert capsys.readouterr().out == day13.part_two(text) + "\n"


def test_main_missing_file(tmp_path):
    assert main(["1", "1", str(tmp_path / "absent.txt")]) == 1


def test_main_reports_bad_input(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("not numbers\n")
    assert main(["1", "1", str(path)]) == 1


def test_main_rejects_unknown_day():
    with pytest.raises(SystemExit):
        main(["4", "1", "input.txt"])