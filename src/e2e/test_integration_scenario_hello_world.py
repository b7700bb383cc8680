import os
from pathlib import Path
import pytest
from livegrep.engine import Engine
from livegrep.models import ResultEntry

def _seed(tmp: Path) -> str:
    root = tmp / "Archive"; root.mkdir()
    (root / "a.txt").write_text("hello world\n", encoding="utf-8")
    (root / "b.txt").write_text("nothing here\n", encoding="utf-8")
    return str(root)

@pytest.mark.e2e
def test_single_hit_with_highlight(tmp_path: Path):
    root = _seed(tmp_path)
    eng = Engine()
    try:
        eng.build(root)
        rows = eng.search("wor", width=80)
        assert rows == (ResultEntry(os.path.join(root, "a.txt"), "hello world", ((6, 9),)),)
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_case_insensitive_flag(tmp_path: Path):
    root = _seed(tmp_path)
    eng = Engine()
    try:
        eng.build(root)
        assert eng.search("WOR", width=80) == ()
        rows = eng.search("WOR", case_insensitive=True, width=80)
        assert [r.ranges for r in rows] == [((6, 9),)]
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_results_follow_file_then_line_order(tmp_path: Path):
    root = tmp_path / "Archive"; root.mkdir()
    (root / "a.txt").write_text("x1\nno\nx2\n", encoding="utf-8")
    (root / "b.txt").write_text("x3\n", encoding="utf-8")
    eng = Engine()
    try:
        eng.build(str(root))
        rows = eng.search(r"x\d", width=80)
        assert [(os.path.basename(r.path), r.line) for r in rows] == [
            ("a.txt", "x1"), ("a.txt", "x2"), ("b.txt", "x3"),
        ]
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_recomputing_is_idempotent(tmp_path: Path):
    root = _seed(tmp_path)
    eng = Engine()
    try:
        eng.build(root)
        first = eng.search("o", width=60)
        second = eng.search("o", width=60)
        assert first == second
        assert eng.cache.misses == 2 and eng.cache.hits == 2
    finally:
        eng.shutdown()
