"""Filesystem primitives for staging files into a bundle layout."""

from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import IO, TYPE_CHECKING, Protocol

from .config import TEXT_ENCODING
from .errors import (
    AlreadyExistsError,
    DecodeFailureError,
    IOFailureError,
    NotFoundError,
    WrongTypeError,
)
from .logger import logger
from .types import CopyDirResult, FilesystemEntry

if TYPE_CHECKING:
    from collections.abc import Iterator


class SymlinkCreator(Protocol):
    """Creates symlinks, split by referent type for platforms that care (Windows).

    ``target`` is the raw link text and is stored as given.
    """

    def create_file_link(self, target: str | os.PathLike[str], link: Path) -> None: ...

    def create_dir_link(self, target: str | os.PathLike[str], link: Path) -> None: ...


class PlatformSymlinks:
    """Symlink creation through os.symlink."""

    def create_file_link(self, target: str | os.PathLike[str], link: Path) -> None:
        os.symlink(target, link, target_is_directory=False)

    def create_dir_link(self, target: str | os.PathLike[str], link: Path) -> None:
        os.symlink(target, link, target_is_directory=True)


_default_links = PlatformSymlinks()


def symlink_file(target: str | os.PathLike[str], link: Path | str) -> None:
    _default_links.create_file_link(target, Path(link))


def symlink_dir(target: str | os.PathLike[str], link: Path | str) -> None:
    _default_links.create_dir_link(target, Path(link))


def _require_exists(path: Path, operation: str) -> None:
    if not path.exists():
        raise NotFoundError(f"{path} does not exist", path=path, operation=operation)


def _require_file(path: Path, operation: str) -> None:
    _require_exists(path, operation)
    if not path.is_file():
        raise WrongTypeError(f"{path} is not a file", path=path, operation=operation)


def _require_dir(path: Path, operation: str) -> None:
    _require_exists(path, operation)
    if not path.is_dir():
        raise WrongTypeError(f"{path} is not a directory", path=path, operation=operation)


def _make_dirs(path: Path, operation: str) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as err:
        raise IOFailureError(f"Failed to create {path}", path=path, operation=operation) from err


def _copy_contents(source: Path, destination: Path) -> None:
    # Contents and permission bits only, like the platform default copy
    shutil.copyfile(source, destination)
    shutil.copymode(source, destination)


def create_file(path: Path | str, encoding: str = TEXT_ENCODING) -> IO[str]:
    """Create a new text file for writing, creating parent directories as needed."""
    path = Path(path)
    _make_dirs(path.parent, "create file")
    try:
        return path.open("w", encoding=encoding)
    except OSError as err:
        raise IOFailureError(f"Failed to create file {path}", path=path, operation="create file") from err


def copy_file(source: Path | str, destination: Path | str) -> None:
    """Copy a regular file, creating parent directories of the destination.

    Fails if the source doesn't exist or is not a regular file. An existing
    destination file is overwritten.
    """
    source = Path(source)
    destination = Path(destination)
    _require_file(source, "copy file")
    _make_dirs(destination.parent, "copy file")
    try:
        _copy_contents(source, destination)
    except OSError as err:
        raise IOFailureError(
            f"Failed to copy {source} to {destination}",
            path=source,
            operation="copy file",
            details={"destination": str(destination)},
        ) from err


def read_file(path: Path | str, encoding: str = TEXT_ENCODING) -> str:
    """Read a regular file into memory as text."""
    path = Path(path)
    _require_file(path, "read file")
    try:
        data = path.read_bytes()
    except OSError as err:
        raise IOFailureError(f"Failed to read {path}", path=path, operation="read file") from err
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as err:
        raise DecodeFailureError(
            f"{path} is not valid {encoding} text",
            path=path,
            operation="read file",
            details={"encoding": encoding, "offset": err.start},
        ) from err


def walk_tree(root: Path) -> Iterator[FilesystemEntry]:
    """Yield root and everything below it, each directory before its children.

    Symlinks are reported as such and never descended into. Sibling order
    follows the directory listing. Depth is bounded only by path length.
    """
    pending = [root]
    while pending:
        directory = pending.pop()
        yield FilesystemEntry(path=directory, kind="directory")
        try:
            with os.scandir(directory) as it:
                children = list(it)
        except OSError as err:
            raise IOFailureError(f"Failed to list {directory}", path=directory, operation="walk directory") from err

        subdirs: list[Path] = []
        for child in children:
            child_path = Path(child.path)
            try:
                if child.is_symlink():
                    yield FilesystemEntry(path=child_path, kind="symlink", link_target=os.readlink(child.path))
                    continue
                is_dir = child.is_dir(follow_symlinks=False)
            except OSError as err:
                raise IOFailureError(
                    f"Failed to inspect {child_path}", path=child_path, operation="walk directory"
                ) from err
            if is_dir:
                subdirs.append(child_path)
            else:
                yield FilesystemEntry(path=child_path, kind="file")
        # Reversed so the stack pops subdirectories in listing order
        pending.extend(reversed(subdirs))


def _link_points_to_dir(link: Path) -> bool:
    """Whether the symlink's referent is a directory; dangling links count as files."""
    try:
        return link.is_dir()
    except OSError:
        return False


def _replicate_symlink(entry: FilesystemEntry, dest_path: Path, links: SymlinkCreator) -> None:
    target = entry.link_target
    assert target is not None
    if _link_points_to_dir(entry.path):
        links.create_dir_link(target, dest_path)
        return
    if not entry.path.exists():
        logger.debug("Dangling symlink recreated as file link", link=str(entry.path), target=target)
    links.create_file_link(target, dest_path)


def copy_dir(
    source: Path | str,
    destination: Path | str,
    *,
    links: SymlinkCreator | None = None,
) -> CopyDirResult:
    """Recursively copy a directory, recreating symlinks with their raw targets.

    Creates any parent directories of the destination. Fails if the source is
    not a directory or doesn't exist, or if the destination already exists.
    The first failing entry aborts the copy; whatever was written stays on disk.
    """
    source = Path(source)
    destination = Path(destination)
    links = links or _default_links
    _require_dir(source, "copy directory")
    if os.path.lexists(destination):
        raise AlreadyExistsError(f"{destination} already exists", path=destination, operation="copy directory")
    _make_dirs(destination.parent, "copy directory")

    logger.debug("Copying directory", source=str(source), destination=str(destination))
    result = CopyDirResult(source=source, destination=destination)
    for entry in walk_tree(source):
        rel_path = entry.path.relative_to(source)
        dest_path = destination / rel_path
        try:
            if entry.kind == "symlink":
                _replicate_symlink(entry, dest_path, links)
                result.symlinks += 1
            elif entry.kind == "directory":
                dest_path.mkdir()
                result.directories += 1
            else:
                _copy_contents(entry.path, dest_path)
                result.files += 1
        except OSError as err:
            raise IOFailureError(
                f"Failed to copy {entry.kind} {entry.path} to {dest_path}",
                path=entry.path,
                operation="copy directory",
                details={"destination": str(dest_path)},
            ) from err

    logger.debug(
        "Copied directory",
        source=str(source),
        destination=str(destination),
        directories=result.directories,
        files=result.files,
        symlinks=result.symlinks,
    )
    return result
