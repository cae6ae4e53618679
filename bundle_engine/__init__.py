"""Filesystem primitives for staging resources into application bundles."""

from __future__ import annotations

from .constants import MANIFEST_FILE, RETINA_SUFFIX, ROOT_MARKER, UP_MARKER
from .errors import (
    AlreadyExistsError,
    BundleFsError,
    DecodeFailureError,
    IOFailureError,
    NotFoundError,
    WrongTypeError,
    error_chain,
)
from .fs_utils import (
    PlatformSymlinks,
    SymlinkCreator,
    copy_dir,
    copy_file,
    create_file,
    read_file,
    symlink_dir,
    symlink_file,
    walk_tree,
)
from .paths import is_retina, resource_destination, resource_relpath
from .reporter import ConsoleReporter, Reporter
from .staging import read_manifest, stage_resources
from .types import CopyDirResult, EntryKind, FilesystemEntry, ResourceManifest, StageResult

__all__ = [
    # constants
    "MANIFEST_FILE",
    "RETINA_SUFFIX",
    "ROOT_MARKER",
    "UP_MARKER",
    # errors
    "AlreadyExistsError",
    "BundleFsError",
    "DecodeFailureError",
    "IOFailureError",
    "NotFoundError",
    "WrongTypeError",
    "error_chain",
    # fs_utils
    "PlatformSymlinks",
    "SymlinkCreator",
    "copy_dir",
    "copy_file",
    "create_file",
    "read_file",
    "symlink_dir",
    "symlink_file",
    "walk_tree",
    # paths
    "is_retina",
    "resource_destination",
    "resource_relpath",
    # reporter
    "ConsoleReporter",
    "Reporter",
    # staging
    "read_manifest",
    "stage_resources",
    # types
    "CopyDirResult",
    "EntryKind",
    "FilesystemEntry",
    "ResourceManifest",
    "StageResult",
]
