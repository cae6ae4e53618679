"""Error kinds raised by the bundle filesystem primitives."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterator


class BundleFsError(Exception):
    """Base error for bundle filesystem operations.

    Every error names the offending path and the operation that was attempted.
    Lower-level causes are attached with ``raise ... from err``.
    """

    kind = "error"

    def __init__(
        self,
        message: str,
        *,
        path: Path | str,
        operation: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(f"{operation}: {message}")
        self.path = Path(path)
        self.operation = operation
        self.details = details or {}


class NotFoundError(BundleFsError):
    """A required path does not exist."""

    kind = "not_found"


class WrongTypeError(BundleFsError):
    """A path exists but is not the expected file or directory."""

    kind = "wrong_type"


class AlreadyExistsError(BundleFsError):
    """A destination exists where create-only semantics apply."""

    kind = "already_exists"


class IOFailureError(BundleFsError):
    """An underlying read, write, link or mkdir call failed."""

    kind = "io_failure"


class DecodeFailureError(BundleFsError):
    """File content is not valid text."""

    kind = "decode_failure"


def error_chain(err: BaseException) -> Iterator[BaseException]:
    """Yield err followed by each chained cause, outermost first."""
    current: BaseException | None = err
    seen: set[int] = set()
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or (None if current.__suppress_context__ else current.__context__)
