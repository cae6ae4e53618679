"""Bundle engine domain types."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel

EntryKind = Literal["directory", "file", "symlink"]


class FilesystemEntry(BaseModel):
    path: Path
    kind: EntryKind
    # Raw link target, never dereferenced. Only set for symlinks.
    link_target: str | None = None


class CopyDirResult(BaseModel):
    source: Path
    destination: Path
    directories: int = 0
    files: int = 0
    symlinks: int = 0


class ResourceManifest(BaseModel):
    resources: list[str]


class StageResult(BaseModel):
    resources_dir: Path
    staged: dict[str, str]
