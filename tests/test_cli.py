from pathlib import Path
from typing import Any
from unittest.mock import patch

from pytest import fixture, raises

from slidez.cli import main
from slidez.configuring import settings as settings_module

from .conftest import write_deck


@fixture
def working_dir(tmp_path: Path, monkeypatch: Any) -> Path:
    working_dir = write_deck(
        tmp_path / "talk",
        "intro.md before:tvon\noutro.md after:tvoff\n",
        {"intro.md": "# Intro", "outro.md": "# Outro"},
    )
    monkeypatch.chdir(working_dir)
    monkeypatch.setattr(settings_module, "_user_config_dir", tmp_path)
    return working_dir


def run_slidez(*args: str) -> None:
    with patch("sys.argv", ["slidez", *args]):
        try:
            main()
        except SystemExit as e:
            if e.code != 0:
                raise e


def test_check(working_dir: Path, capsys: Any) -> None:
    run_slidez("check")
    out = capsys.readouterr().out
    assert "intro.md" in out
    assert "tvoff" in out


def test_check_invalid_deck(working_dir: Path) -> None:
    (working_dir / "slides.txt").write_text("missing.md\n", encoding="utf8")
    with raises(SystemExit) as excinfo:
        run_slidez("check")
    assert excinfo.value.code == 1


def test_transitions(working_dir: Path, capsys: Any) -> None:
    run_slidez("transitions")
    out = capsys.readouterr().out
    for name in ("diagonal", "tvon", "tvoff", "bottomwipe"):
        assert name in out


def test_print_settings(working_dir: Path, capsys: Any) -> None:
    (working_dir / "slidez.yml").write_text("fps: 42\n", encoding="utf8")
    run_slidez("print-settings", str(working_dir))
    assert "42" in capsys.readouterr().out


def test_check_undecodable_slide(working_dir: Path) -> None:
    (working_dir / "outro.md").write_bytes(b"# b \xff\xfe")
    with raises(SystemExit) as excinfo:
        run_slidez("check")
    assert excinfo.value.code == 1
