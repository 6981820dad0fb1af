# SPDX-License-Identifier: AGPL-3.0-or-later

import os
from pathlib import Path

from license_headers.walker import iter_files, walk


def _tree(root: Path) -> None:
    (root / "b").mkdir()
    (root / "a").mkdir()
    (root / "target" / "debug").mkdir(parents=True)
    (root / "a" / "x.rs").write_text("", encoding="utf-8")
    (root / "b" / "y.rs").write_text("", encoding="utf-8")
    (root / "target" / "debug" / "z.rs").write_text("", encoding="utf-8")
    (root / "top.rs").write_text("", encoding="utf-8")


def test_walk_yields_root_dirs_and_files_in_sorted_order(tmp_path: Path):
    _tree(tmp_path)
    got = [p.relative_to(tmp_path).as_posix() for p in walk(tmp_path)]
    assert got == [
        ".", "a", "b", "target", "top.rs",
        "a/x.rs", "b/y.rs", "target/debug", "target/debug/z.rs",
    ]


def test_skip_dirs_are_pruned(tmp_path: Path):
    _tree(tmp_path)
    got = {p.relative_to(tmp_path).as_posix() for p in iter_files(tmp_path, {"target"})}
    assert got == {"a/x.rs", "b/y.rs", "top.rs"}


def test_broken_symlink_is_skipped(tmp_path: Path):
    (tmp_path / "real.rs").write_text("", encoding="utf-8")
    os.symlink(tmp_path / "missing.rs", tmp_path / "dangling.rs")
    assert [p.name for p in iter_files(tmp_path)] == ["real.rs"]


def test_missing_root_yields_nothing_but_itself(tmp_path: Path):
    missing = tmp_path / "nope"
    assert list(walk(missing)) == [missing]
    assert list(iter_files(missing)) == []
