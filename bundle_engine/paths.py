"""Resource path normalization for the bundle resources directory."""

from __future__ import annotations

from pathlib import Path, PurePath

from .constants import RETINA_SUFFIX, ROOT_MARKER, UP_MARKER


def resource_relpath(path: str | PurePath) -> PurePath:
    """Return the path, relative to the resources directory, where a resource is stored.

    Drive/volume prefixes and ``.`` segments are dropped, a root anchor becomes
    ``_root_`` and every ``..`` becomes ``_up_``. The result is always relative and
    never contains ``..``, so joining it under a fixed root cannot escape that root.
    The path flavour of the input is preserved; ``str`` input uses the host flavour.
    """
    source = path if isinstance(path, PurePath) else PurePath(path)

    segments: list[str] = []
    if source.root:
        segments.append(ROOT_MARKER)
    # parts[0] is the anchor (drive and/or root) when one is present
    names = source.parts[1:] if source.anchor else source.parts
    for name in names:
        segments.append(UP_MARKER if name == ".." else name)

    return type(source)(*segments)


def resource_destination(resources_dir: Path | str, path: str | PurePath) -> Path:
    """Destination for a resource under the resources directory."""
    return Path(resources_dir).joinpath(*resource_relpath(path).parts)


def is_retina(path: str | PurePath) -> bool:
    """True if the file stem ends with ``@2x``, the high-density icon convention."""
    return PurePath(path).stem.endswith(RETINA_SUFFIX)
