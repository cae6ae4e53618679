"""Shared fixtures for bundle engine tests."""

from __future__ import annotations

import os
import tempfile
from typing import TYPE_CHECKING

import pytest
import yaml

if TYPE_CHECKING:
    from pathlib import Path


def _can_symlink() -> bool:
    with tempfile.TemporaryDirectory() as tmp:
        try:
            os.symlink(os.path.join(tmp, "target"), os.path.join(tmp, "link"))
        except (OSError, NotImplementedError):
            return False
    return True


requires_symlinks = pytest.mark.skipif(not _can_symlink(), reason="platform cannot create symlinks")


@pytest.fixture()
def bundle_tmp(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a temp directory and chdir into it."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


def write_tree(root: Path, files: dict[str, str]) -> None:
    """Write text files under root, creating parent directories."""
    for rel_path, content in files.items():
        full_path = root / rel_path
        full_path.parent.mkdir(parents=True, exist_ok=True)
        full_path.write_text(content, encoding="utf-8")


def write_manifest(directory: Path, resources: list[str], name: str = "resources.yaml") -> Path:
    """Write a YAML resource manifest and return its path."""
    manifest_path = directory / name
    manifest_path.write_text(yaml.safe_dump({"resources": resources}), encoding="utf-8")
    return manifest_path
