"""Exceptions raised by the scaffolding engine.

Every error is surfaced to the calling entry point unchanged: the engine
performs no retry and no recovery.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .models import GenerationReport


class ScaffoldError(Exception):
    """Base class for every error raised while scaffolding a resource."""


class InvalidNameError(ScaffoldError, ValueError):
    """Raised when the leaf segment of a resource path is empty or malformed."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid resource name {name!r}: {reason}")


class InvalidPathError(ScaffoldError, ValueError):
    """Raised when the raw resource path is empty or its segment list is malformed."""

    def __init__(self, raw_input: str, reason: str) -> None:
        self.raw_input = raw_input
        self.reason = reason
        super().__init__(f"Invalid resource path {raw_input!r}: {reason}")


class FilesystemError(ScaffoldError):
    """Raised when a directory cannot be created or a file cannot be written.

    Attributes:
        path: The directory or file that could not be created.
        os_error: The underlying ``OSError`` (also chained as ``__cause__``).
        report: The partial ``GenerationReport`` listing every file written
            before the failure.  Those files are left on disk.
    """

    def __init__(
        self,
        path: Path,
        os_error: OSError,
        report: Optional["GenerationReport"] = None,
    ) -> None:
        self.path = path
        self.os_error = os_error
        self.report = report
        detail = os_error.strerror or str(os_error)
        super().__init__(f"Could not write {path}: {detail}")


class MissingTemplateError(ScaffoldError):
    """Raised when the template directory lacks a template the catalog renders."""

    def __init__(self, template_dir: Path, missing: list[str]) -> None:
        self.template_dir = template_dir
        self.missing = missing
        super().__init__(
            f"Template directory {template_dir} is missing: {', '.join(missing)}"
        )
