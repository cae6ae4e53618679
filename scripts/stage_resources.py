"""Stage the resources listed in a manifest into a bundle resources directory."""

from __future__ import annotations

import json
import sys
from pathlib import Path

from bundle_engine.constants import MANIFEST_FILE
from bundle_engine.errors import BundleFsError
from bundle_engine.logger import install_exception_hooks
from bundle_engine.reporter import ConsoleReporter
from bundle_engine.staging import read_manifest, stage_resources


def main() -> None:
    if len(sys.argv) < 3:
        print("Usage: python scripts/stage_resources.py <manifest.yaml|dir> <resources-dir>", file=sys.stderr)
        sys.exit(1)

    install_exception_hooks("stage_resources")
    reporter = ConsoleReporter()

    manifest_path = Path(sys.argv[1])
    if manifest_path.is_dir():
        manifest_path = manifest_path / MANIFEST_FILE
    resources_dir = Path(sys.argv[2])

    reporter.bundling(str(resources_dir))
    try:
        manifest = read_manifest(manifest_path)
        result = stage_resources(manifest.resources, resources_dir)
    except (BundleFsError, ValueError) as err:
        reporter.error(err)
        sys.exit(1)

    print(json.dumps(result.model_dump(mode="json"), indent=2))
    reporter.finished([resources_dir])


if __name__ == "__main__":
    main()
