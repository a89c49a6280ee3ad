"""Pipeline entry point: plan -> validate -> emit."""
from __future__ import annotations

import logging
from pathlib import Path

from .emitter import Emitter, EmitReport
from .models import Configuration
from .scaffold import plan_layout
from .validators import ensure_valid

logger = logging.getLogger(__name__)


def create_extension(
    config: Configuration,
    target_dir: str | Path,
    *,
    on_existing: str = "overwrite",
    validate: bool = True,
) -> EmitReport:
    """
    Generate a new extension project for ``config`` under ``target_dir``.

    Raises
    ------
    PlanValidationError      a generated JSON document failed its schema
    NonEmptyTargetDirectory  target has entries and on_existing == "abort"
    FilesystemWriteFailure   a write failed; earlier files are left in place
    """
    plan = plan_layout(config)
    if validate:
        ensure_valid(plan)
    logger.info("Creating a new web extension in %s", Path(target_dir).resolve())
    return Emitter(on_existing=on_existing).emit(plan, target_dir)
