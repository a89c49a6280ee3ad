"""Exception hierarchy. Library code raises these; only the CLI turns them into exit codes."""
from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for every error raised by webext_scaffold."""


class InvalidProjectName(ScaffoldError, ValueError):
    """Raised when a project name does not match ``[A-Za-z0-9_-]+``."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Invalid project name {name!r}: only letters, numbers, "
            "underscores and hyphens are allowed"
        )
        self.name = name


class InvalidOption(ScaffoldError, ValueError):
    """Raised when an option value is outside its allowed set."""


class NonEmptyTargetDirectory(ScaffoldError):
    """
    The target directory already holds entries.

    Only raised under the ``abort`` policy; otherwise the emitter records an
    instance as a warning and keeps going.
    """

    def __init__(self, root: Path, entries: list[str]) -> None:
        preview = ", ".join(entries[:5]) + ("…" if len(entries) > 5 else "")
        super().__init__(
            f"The directory {root} is not empty ({preview}). Files might be overwritten."
        )
        self.root = root
        self.entries = entries


class FilesystemWriteFailure(ScaffoldError, OSError):
    """A single write failed; the run stops and nothing is rolled back."""

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"Failed to write {path}: {cause}")
        self.path = path
        self.cause = cause


class PlanValidationError(ScaffoldError, ValueError):
    """Raised when a generated JSON document fails its schema."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__("; ".join(errors))
        self.errors = errors
