"""
webext-scaffold
===============
Generates a ready-to-develop Chrome extension project: manifest, background
and content scripts, popup and options pages, icons, build configuration and
documentation.

Basic usage:
    from webext_scaffold import resolve_configuration, create_extension

    config = resolve_configuration("my-extension", typescript=True, react=True)
    report = create_extension(config, "my-extension")

Planning without I/O:
    from webext_scaffold import plan_layout

    for entry in plan_layout(config):
        print(entry.path, entry.kind.value)
"""

from .config import Settings, load_settings, resolve_configuration, validate_project_name
from .dry_run import DryRunRenderer, render_plan
from .emitter import Emitter, EmitReport
from .errors import (
    FilesystemWriteFailure,
    InvalidOption,
    InvalidProjectName,
    NonEmptyTargetDirectory,
    PlanValidationError,
    ScaffoldError,
)
from .generator import create_extension
from .models import (
    Configuration,
    ContentKind,
    LanguageVariant,
    LayoutPlan,
    ManifestVersion,
    PlanEntry,
    UIFramework,
)
from .scaffold import plan_layout
from .validators import ValidationResult, validate_plan

__version__ = "1.0.0"

__all__ = [
    "Configuration", "ContentKind", "LanguageVariant", "LayoutPlan",
    "ManifestVersion", "PlanEntry", "UIFramework",
    "Settings", "load_settings", "resolve_configuration", "validate_project_name",
    "plan_layout", "Emitter", "EmitReport", "create_extension",
    "DryRunRenderer", "render_plan", "ValidationResult", "validate_plan",
    "ScaffoldError", "InvalidProjectName", "InvalidOption",
    "NonEmptyTargetDirectory", "FilesystemWriteFailure", "PlanValidationError",
]
