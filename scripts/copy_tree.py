"""Replicate a directory tree, preserving symlinks as links."""

from __future__ import annotations

import json
import sys

from bundle_engine.errors import BundleFsError
from bundle_engine.fs_utils import copy_dir
from bundle_engine.logger import install_exception_hooks
from bundle_engine.reporter import ConsoleReporter


def main() -> None:
    if len(sys.argv) < 3:
        print("Usage: python scripts/copy_tree.py <source-dir> <dest-dir>", file=sys.stderr)
        sys.exit(1)

    install_exception_hooks("copy_tree")
    reporter = ConsoleReporter()

    try:
        result = copy_dir(sys.argv[1], sys.argv[2])
    except BundleFsError as err:
        reporter.error(err)
        sys.exit(1)

    print(json.dumps(result.model_dump(mode="json"), indent=2))


if __name__ == "__main__":
    main()
