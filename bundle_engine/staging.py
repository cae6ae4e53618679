"""Resource manifest reading and staging into a bundle resources directory."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from .errors import NotFoundError
from .fs_utils import copy_dir, copy_file
from .logger import logger
from .paths import resource_destination
from .types import ResourceManifest, StageResult


def read_manifest(manifest_path: Path | str) -> ResourceManifest:
    """Read and validate a resource manifest."""
    manifest_path = Path(manifest_path)
    if not manifest_path.is_file():
        raise NotFoundError(f"Manifest not found: {manifest_path}", path=manifest_path, operation="read manifest")

    try:
        raw = yaml.safe_load(manifest_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as err:
        raise ValueError(f"Invalid YAML in manifest {manifest_path}: {err}") from err

    if not isinstance(raw, dict) or raw.get("resources") is None:
        raise ValueError(f"Manifest missing required field: resources ({manifest_path})")

    try:
        return ResourceManifest.model_validate(raw)
    except ValidationError as err:
        raise ValueError(f"Invalid manifest {manifest_path}: {err}") from err


def stage_resources(resources: list[str], resources_dir: Path | str) -> StageResult:
    """Copy each resource (file or directory) to its normalized place under resources_dir.

    Relative resource paths are resolved against the current working directory.
    Stops at the first failure.
    """
    resources_dir = Path(resources_dir)
    result = StageResult(resources_dir=resources_dir, staged={})

    for resource in resources:
        source = Path(resource)
        dest = resource_destination(resources_dir, resource)
        if source.is_dir():
            copy_dir(source, dest)
        else:
            copy_file(source, dest)
        logger.debug("Staged resource", resource=resource, destination=str(dest))
        result.staged[resource] = str(dest)

    logger.info("Staged resources", count=len(result.staged), resources_dir=str(resources_dir))
    return result
