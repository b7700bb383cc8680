import logging
import os
from pathlib import Path
from livegrep import loader
from livegrep.config import TEXT_EXTENSIONS
from livegrep.loader import is_text_file, list_candidate_files, normalize_extensions


def _seed(tmp: Path) -> Path:
    root = tmp / "Archive"; root.mkdir()
    (root / "a.txt").write_text("a\n", encoding="utf-8")
    (root / "b.md").write_text("b\n", encoding="utf-8")
    (root / "c.bin").write_bytes(b"\x00\x01")
    (root / "Makefile").write_text("all:\n", encoding="utf-8")
    (root / ".hidden.txt").write_text("h\n", encoding="utf-8")
    (root / ".git").mkdir()
    (root / ".git" / "x.txt").write_text("x\n", encoding="utf-8")
    (root / "sub").mkdir()
    (root / "sub" / "d.PY").write_text("d\n", encoding="utf-8")
    (root / "sub" / "e.txt").write_text("e\n", encoding="utf-8")
    return root


def test_default_extensions_skip_hidden_and_binary(tmp_path: Path):
    root = _seed(tmp_path)
    files = list_candidate_files(str(root))
    rel = [os.path.relpath(f, root) for f in files]
    assert rel == ["a.txt", "b.md", os.path.join("sub", "d.PY"), os.path.join("sub", "e.txt")]


def test_explicit_extensions_override_defaults(tmp_path: Path):
    root = _seed(tmp_path)
    assert [os.path.basename(f) for f in list_candidate_files(str(root), ["py"])] == ["d.PY"]
    assert [os.path.basename(f) for f in list_candidate_files(str(root), [".MD"])] == ["b.md"]
    assert [os.path.basename(f) for f in list_candidate_files(str(root), ["bin", "md"])] == ["b.md", "c.bin"]


def test_default_root_reports_dot_relative_paths(tmp_path: Path, monkeypatch):
    root = _seed(tmp_path)
    monkeypatch.chdir(root)
    files = list_candidate_files()
    assert files[0] == os.path.join(".", "a.txt")


def test_normalize_extensions():
    assert normalize_extensions(None) is TEXT_EXTENSIONS
    assert normalize_extensions([".Py", " md ", "", "."]) == frozenset({"py", "md"})


def test_is_text_file():
    exts = frozenset({"txt"})
    assert is_text_file("notes.TXT", exts)
    assert not is_text_file("notes.txt.bak", exts)
    assert not is_text_file("README", exts)


def test_progress_logging_reads_env_flag_when_called(tmp_path: Path, monkeypatch, caplog):
    root = _seed(tmp_path)
    monkeypatch.setattr(loader, "PROGRESS_EVERY_FILES", 1)
    caplog.set_level(logging.INFO, logger="livegrep.loader")

    monkeypatch.delenv("LIVEGREP_VERBOSE", raising=False)
    list_candidate_files(str(root))
    assert "[scanned]" not in caplog.text

    monkeypatch.setenv("LIVEGREP_VERBOSE", "1")
    list_candidate_files(str(root))
    assert "[scanned] files=4" in caplog.text
