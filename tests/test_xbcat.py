import os

import pytest

from xzkit.xbcat import CAT_USAGE, PathFinder, main, render_go_file


def test_render_go_file_sorted():
    text = render_go_file("main", {"b": "y", "a": "x"})
    assert text == "package main\n\nconst a = `x`\nconst b = `y`\n"


def test_render_go_file_empty():
    assert render_go_file("pkg", {}) == "package pkg\n\n"


def test_find_absolute_with_id(tmp_path):
    f = tmp_path / "data.txt"
    f.write_text("hello")
    finder = PathFinder(gopath=[])
    assert finder.find(f"myid:{f}") == ("myid", os.path.normpath(str(f)))


def test_find_generated_ids(tmp_path):
    f = tmp_path / "data.txt"
    f.write_text("hello")
    finder = PathFinder(gopath=[])
    first = finder.find(str(f))
    second = finder.find(str(f))
    assert first[0] == "gocat1"
    assert second[0] == "gocat2"
    assert first[1] == second[1]


def test_find_in_gopath(tmp_path):
    src = tmp_path / "gp" / "src"
    src.mkdir(parents=True)
    (src / "foo.txt").write_text("x")
    finder = PathFinder(gopath=[str(tmp_path / "gp")])
    ident, path = finder.find("k:foo.txt")
    assert ident == "k"
    assert path == os.path.normpath(str(src / "foo.txt"))


def test_find_relative_to_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "rel.txt").write_text("x")
    finder = PathFinder(gopath=[])
    assert finder.find("rel.txt") == ("gocat1", "rel.txt")


def test_find_home_substitution(tmp_path):
    (tmp_path / "f.txt").write_text("x")
    finder = PathFinder(gopath=[], home=str(tmp_path))
    ident, path = finder.find("k:~/f.txt")
    assert path == os.path.normpath(str(tmp_path / "f.txt"))


def test_find_stdin():
    assert PathFinder(gopath=[]).find("id:-") == ("id", "-")


def test_find_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        PathFinder(gopath=[]).find(f"k:{tmp_path / 'missing.txt'}")


def test_find_directory(tmp_path):
    with pytest.raises(ValueError):
        PathFinder(gopath=[]).find(f"k:{tmp_path}")


def test_find_uses_gopath_env(tmp_path, monkeypatch):
    src = tmp_path / "src"
    src.mkdir()
    (src / "e.txt").write_text("x")
    monkeypatch.setenv("GOPATH", str(tmp_path))
    ident, path = PathFinder().find("e:e.txt")
    assert path == os.path.normpath(str(src / "e.txt"))


def test_main_writes_output(tmp_path):
    f = tmp_path / "in.txt"
    f.write_text("hello")
    out = tmp_path / "out.go"
    assert main(["-o", str(out), "-p", "pkg", f"id:{f}"]) == 0
    assert out.read_text() == render_go_file("pkg", {"id": "hello"})


def test_main_missing_file_is_logged(tmp_path, capsys):
    out = tmp_path / "out.go"
    assert main(["-o", str(out), f"id:{tmp_path / 'nope'}"]) == 0
    assert out.read_text() == render_go_file("main", {})
    assert "not found" in capsys.readouterr().err


def test_main_help(capsys):
    assert main(["-h"]) == 0
    assert capsys.readouterr().out == CAT_USAGE


def test_main_empty_package():
    with pytest.raises(SystemExit) as exc:
        main(["-p", ""])
    assert exc.value.code == 1


def test_main_unknown_option(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["-z"])
    assert exc.value.code == 1
    assert CAT_USAGE in capsys.readouterr().err