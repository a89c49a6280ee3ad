"""
Emitter: writes a LayoutPlan to disk.

Usage:
    report = Emitter(on_existing="overwrite").emit(plan, Path("my-extension"))

Entries are performed strictly in plan order. A failed write stops the run with
FilesystemWriteFailure; files written before the failure stay on disk.

Existing-directory policy (``on_existing``):
    overwrite  warn, then write every planned file (default)
    skip       warn, then leave files that already exist untouched
    abort      raise NonEmptyTargetDirectory before writing anything
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .config import validate_on_existing
from .errors import FilesystemWriteFailure, NonEmptyTargetDirectory
from .models import ContentKind, LayoutPlan, PlanEntry

logger = logging.getLogger("webext_scaffold.emitter")


@dataclass
class EmitReport:
    """What an emit() call actually did."""
    root: Path
    written: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    warnings: list[NonEmptyTargetDirectory] = field(default_factory=list)


def serialize_json(document: dict) -> str:
    """Two-space indentation, insertion-ordered keys, trailing newline."""
    return json.dumps(document, indent=2, ensure_ascii=False) + "\n"


def render_entry(entry: PlanEntry) -> bytes:
    if entry.kind is ContentKind.JSON:
        return serialize_json(entry.content).encode("utf-8")
    return (entry.content or "").encode("utf-8")


class Emitter:
    """Performs the filesystem operations of a LayoutPlan under a root directory."""

    def __init__(self, on_existing: str = "overwrite") -> None:
        self.on_existing = validate_on_existing(on_existing)

    def check_target(self, root: Path) -> Optional[NonEmptyTargetDirectory]:
        """Return a warning record when ``root`` already has entries."""
        if not root.is_dir():
            return None
        entries = sorted(child.name for child in root.iterdir())
        if not entries:
            return None
        return NonEmptyTargetDirectory(root, entries)

    def emit(self, plan: LayoutPlan, root: str | Path) -> EmitReport:
        root = Path(root).resolve()
        report = EmitReport(root=root)

        existing = self.check_target(root)
        if existing is not None:
            if self.on_existing == "abort":
                raise existing
            logger.warning("%s", existing)
            report.warnings.append(existing)

        self._mkdir(root)
        for entry in plan:
            dest = root / entry.path
            if entry.kind is ContentKind.DIRECTORY:
                self._mkdir(dest)
                continue
            if self.on_existing == "skip" and dest.exists():
                logger.debug("Skipping existing file: %s", entry.path)
                report.skipped.append(entry.path)
                continue
            self._write(dest, render_entry(entry))
            logger.debug("Scaffolded: %s", entry.path)
            report.written.append(entry.path)

        logger.info(
            "Wrote %d files to %s (%d skipped)",
            len(report.written), root, len(report.skipped),
        )
        return report

    @staticmethod
    def _mkdir(path: Path) -> None:
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise FilesystemWriteFailure(path, exc) from exc

    @staticmethod
    def _write(dest: Path, data: bytes) -> None:
        try:
            dest.parent.mkdir(parents=True, exist_ok=True)
            dest.write_bytes(data)
        except OSError as exc:
            raise FilesystemWriteFailure(dest, exc) from exc
