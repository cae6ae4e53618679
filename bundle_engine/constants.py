"""Bundle engine constants."""

from __future__ import annotations

ROOT_MARKER = "_root_"
UP_MARKER = "_up_"
RETINA_SUFFIX = "@2x"
MANIFEST_FILE = "resources.yaml"
