"""Console reporting of bundling progress, warnings and errors."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Protocol, TextIO

from .errors import error_chain

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

BOLD = "\x1b[1m"
GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"
RED = "\x1b[31m"
RESET = "\x1b[0m"


class Reporter(Protocol):
    """Receives outcomes from bundling callers. Never consulted for control flow."""

    def bundling(self, name: str) -> None: ...

    def finished(self, output_paths: Sequence[Path]) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, err: BaseException) -> None: ...


class ConsoleReporter:
    """Writes cargo-style status lines to a stream (stderr by default)."""

    def __init__(self, stream: TextIO | None = None, colors: bool | None = None) -> None:
        self._stream = stream or sys.stderr
        if colors is None:
            isatty = getattr(self._stream, "isatty", None)
            colors = bool(isatty and isatty())
        self._colors = colors

    def _style(self, text: str, color: str) -> str:
        if not self._colors:
            return text
        return f"{BOLD}{color}{text}{RESET}"

    def _progress(self, step: str, message: str) -> None:
        self._stream.write(f"    {self._style(step, GREEN)} {message}\n")
        self._stream.flush()

    def bundling(self, name: str) -> None:
        self._progress("Bundling", name)

    def finished(self, output_paths: Sequence[Path]) -> None:
        noun = "bundle" if len(output_paths) == 1 else "bundles"
        self._progress("Finished", f"{len(output_paths)} {noun} at:")
        for path in output_paths:
            self._stream.write(f"        {path}\n")
        self._stream.flush()

    def warning(self, message: str) -> None:
        self._stream.write(f"{self._style('warning:', YELLOW)} {message}\n")
        self._stream.flush()

    def error(self, err: BaseException) -> None:
        head, *causes = list(error_chain(err))
        self._stream.write(f"{self._style('error:', RED)} {head}\n")
        for cause in causes:
            self._stream.write(f"  Caused by: {cause}\n")
        self._stream.flush()
