import pytest

from xzkit.xbversionfile import VF_USAGE, current_version, main, render_version_file


def test_render_version_file():
    assert render_version_file("v1.2.3") == 'package main\n\nconst version = "v1.2.3"\n'


def test_current_version_from_env(monkeypatch):
    monkeypatch.setenv("VERSION", "  v9 \n")
    assert current_version() == "v9"


def test_current_version_git_missing(monkeypatch, tmp_path):
    monkeypatch.delenv("VERSION", raising=False)
    monkeypatch.setenv("PATH", str(tmp_path))
    with pytest.raises(RuntimeError, match="git describe"):
        current_version()


def test_main_writes_file(monkeypatch, tmp_path):
    monkeypatch.setenv("VERSION", "v9")
    out = tmp_path / "version.go"
    assert main(["-o", str(out)]) == 0
    assert out.read_text() == render_version_file("v9")


def test_main_stdout(monkeypatch, capsys):
    monkeypatch.setenv("VERSION", "v2")
    assert main([]) == 0
    assert capsys.readouterr().out == render_version_file("v2")


def test_main_help(capsys):
    assert main(["-h"]) == 0
    assert capsys.readouterr().out == VF_USAGE


def test_main_empty_package():
    with pytest.raises(SystemExit) as exc:
        main(["-p", ""])
    assert exc.value.code == 1