"""Shared test fixtures for lofreq_core tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from lofreq_core.config import UtilsConfig


@pytest.fixture
def default_config() -> UtilsConfig:
    """Create default utility config."""
    return UtilsConfig()


@pytest.fixture
def listing_dir(tmp_path: Path) -> Path:
    """Create a directory with a mix of matching and non-matching entries."""
    root = tmp_path / "listing"
    root.mkdir()
    for name in ("foo_b.txt", "bar.txt", "a_foo.txt", "zfoo", "other"):
        (root / name).write_text("x", encoding="utf-8")
    (root / "foodir").mkdir()
    return root


@pytest.fixture
def symlink_chain(tmp_path: Path) -> dict[str, Path]:
    """Create a chain of relative symlinks spread over sibling directories.

    Layout::

        data/target.txt
        data/hop1 -> target.txt
        links/hop2 -> ../data/hop1
        links/nested/hop3 -> ../hop2
    """
    data = tmp_path / "data"
    links = tmp_path / "links"
    nested = links / "nested"
    nested.mkdir(parents=True)
    data.mkdir()

    target = data / "target.txt"
    target.write_text("payload\n", encoding="utf-8")
    os.symlink("target.txt", data / "hop1")
    os.symlink(os.path.join("..", "data", "hop1"), links / "hop2")
    os.symlink(os.path.join("..", "hop2"), nested / "hop3")
    return {
        "target": target,
        "hop1": data / "hop1",
        "hop2": links / "hop2",
        "hop3": nested / "hop3",
    }
