import io
import sys
from pathlib import Path
import pytest
from livegrep.engine import Engine
from livegrep_frontend.__main__ import _split_extensions, build_parser, main


def test_split_extensions():
    assert _split_extensions(None) is None
    assert _split_extensions(["py,md", "txt"]) == ["py", "md", "txt"]


def test_parser_flags():
    args = build_parser().parse_args(["-i", "-e", "rs,toml", "--root", "src"])
    assert args.insensitive_to_case is True
    assert args.extensions == ["rs,toml"]
    assert args.root == "src"


def test_version_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--version"])
    assert exc.value.code == 0
    assert "livegrep" in capsys.readouterr().out


def test_missing_root_is_a_usage_error(tmp_path: Path):
    with pytest.raises(SystemExit) as exc:
        main(["--root", str(tmp_path / "missing")])
    assert exc.value.code == 2


def test_bad_cache_size_is_a_usage_error():
    with pytest.raises(SystemExit) as exc:
        main(["--cache-size", "0"])
    assert exc.value.code == 2


def test_needs_a_terminal(tmp_path: Path, monkeypatch, capsys):
    (tmp_path / "a.txt").write_text("x\n", encoding="utf-8")
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main(["--root", str(tmp_path)]) == 2
    assert "terminal" in capsys.readouterr().err


def test_verbose_flag_is_passed_to_engine_build(tmp_path: Path, monkeypatch):
    seen = {}

    def build(self, root=".", **kwargs):
        seen.update(kwargs, root=root)

    monkeypatch.setattr(Engine, "build", build)
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    argv = ["--root", str(tmp_path), "--verbose", "--log-file", str(tmp_path / "livegrep.log")]
    assert main(argv) == 2
    assert seen["root"] == str(tmp_path)
    assert seen["verbose"] is True
