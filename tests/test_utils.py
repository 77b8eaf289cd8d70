import os
import re

from eptolite import shell, utils


def test_isint():
    assert utils.isint("34")
    assert utils.isint("-9")
    assert utils.isint(" 12 ")
    assert utils.isint(7)
    assert not utils.isint("23f")
    assert not utils.isint("a")
    assert not utils.isint("&7")
    assert not utils.isint("")
    assert not utils.isint("--1")


def test_list_helpers():
    assert utils.first("a", "b", "c") == "a"
    assert utils.first() is None
    assert utils.rest("a", "b", "c") == ["b", "c"]
    assert utils.rest() == []
    assert utils.nth(2, "a", "b", "c") == "c"
    assert utils.nth(3, "a", "b", "c") is None
    assert utils.nth(-1, "a") is None


def test_datetime():
    assert re.fullmatch(
        r"\d{4}-\d{2}-\d{2}: \d{2}\.\d{2}\.\d{2}: [+-]\d{4}", utils.datetime()
    )


def test_grexist(tmp_path):
    path = tmp_path / "a.txt"
    path.write_text("first\nsecond blah\n")

    assert shell.grexist("blah", str(path))
    assert shell.grexist("^sec", str(tmp_path / "missing"), str(path))
    assert not shell.grexist("^blah", str(path))
    assert not shell.grexist("blah", str(tmp_path / "missing"))


def test_abspath(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert shell.abspath("/etc/passwd") == "/etc/passwd"
    assert shell.abspath("a.txt") == os.path.join(os.getcwd(), "a.txt")
