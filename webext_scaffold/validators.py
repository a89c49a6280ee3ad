"""
Plan Validators
===============
Deterministic JSON Schema checks on the JSON documents of a LayoutPlan
(extension manifests and the package descriptor), run before anything is
written. A failure means a template bug, never a user error.
"""
from __future__ import annotations

import logging
from typing import Optional

import jsonschema

from .errors import PlanValidationError
from .models import ContentKind, LayoutPlan

logger = logging.getLogger("webext_scaffold.validators")


class ValidationResult:
    __slots__ = ("passed", "details", "validator_name")

    def __init__(self, passed: bool, details: str = "", validator_name: str = ""):
        self.passed = passed
        self.details = details
        self.validator_name = validator_name

    def __repr__(self) -> str:
        state = "ok" if self.passed else "FAIL"
        return f"<ValidationResult {self.validator_name} {state}: {self.details}>"


_ICONS_SCHEMA = {
    "type": "object",
    "required": ["16", "48", "128"],
    "additionalProperties": {"type": "string"},
}

_ACTION_SCHEMA = {
    "type": "object",
    "required": ["default_popup", "default_icon"],
    "properties": {
        "default_popup": {"type": "string"},
        "default_icon": _ICONS_SCHEMA,
    },
}

_MANIFEST_COMMON = {
    "name": {"type": "string", "pattern": "^[A-Za-z0-9_-]+$"},
    "description": {"type": "string"},
    "version": {"type": "string"},
    "permissions": {
        "type": "array",
        "items": {"type": "string", "minLength": 1},
        "minItems": 1,
        "uniqueItems": True,
    },
    "options_page": {"type": "string"},
    "icons": _ICONS_SCHEMA,
    "content_scripts": {
        "type": "array",
        "minItems": 1,
        "items": {
            "type": "object",
            "required": ["matches", "js"],
            "properties": {
                "matches": {"type": "array", "items": {"type": "string"}},
                "js": {"type": "array", "items": {"type": "string"}},
            },
        },
    },
}

_MANIFEST_REQUIRED = [
    "name", "description", "version", "manifest_version", "background",
    "permissions", "options_page", "icons", "content_scripts",
]

MANIFEST_V3_SCHEMA = {
    "type": "object",
    "required": _MANIFEST_REQUIRED + ["action"],
    "not": {"required": ["browser_action"]},
    "properties": {
        **_MANIFEST_COMMON,
        "manifest_version": {"const": 3},
        "action": _ACTION_SCHEMA,
        "background": {
            "type": "object",
            "required": ["service_worker"],
            "properties": {"service_worker": {"type": "string"}},
            "additionalProperties": False,
        },
    },
}

MANIFEST_V2_SCHEMA = {
    "type": "object",
    "required": _MANIFEST_REQUIRED + ["browser_action"],
    "not": {"required": ["action"]},
    "properties": {
        **_MANIFEST_COMMON,
        "manifest_version": {"const": 2},
        "browser_action": _ACTION_SCHEMA,
        "background": {
            "type": "object",
            "required": ["scripts", "persistent"],
            "properties": {
                "scripts": {"type": "array", "items": {"type": "string"}, "minItems": 1},
                "persistent": {"const": False},
            },
            "additionalProperties": False,
        },
    },
}

PACKAGE_JSON_SCHEMA = {
    "type": "object",
    "required": [
        "name", "version", "description", "scripts",
        "devDependencies", "dependencies",
    ],
    "properties": {
        "name": {"type": "string", "minLength": 1},
        "version": {"type": "string"},
        "description": {"type": "string"},
        "scripts": {
            "type": "object",
            "required": ["build", "dev", "lint"],
            "additionalProperties": {"type": "string"},
        },
        "devDependencies": {"type": "object", "additionalProperties": {"type": "string"}},
        "dependencies": {"type": "object", "additionalProperties": {"type": "string"}},
    },
}

_MANIFEST_SCHEMAS = {2: MANIFEST_V2_SCHEMA, 3: MANIFEST_V3_SCHEMA}


def validate_document(document: dict, schema: dict, name: str) -> ValidationResult:
    try:
        jsonschema.validate(instance=document, schema=schema)
        return ValidationResult(True, "Valid", name)
    except jsonschema.ValidationError as e:
        where = "/".join(str(p) for p in e.absolute_path) or "<root>"
        return ValidationResult(False, f"{where}: {e.message}", name)


def validate_manifest(document: dict) -> ValidationResult:
    schema: Optional[dict] = _MANIFEST_SCHEMAS.get(document.get("manifest_version"))
    if schema is None:
        return ValidationResult(
            False,
            f"Unsupported manifest_version {document.get('manifest_version')!r}",
            "manifest",
        )
    return validate_document(document, schema, "manifest")


def validate_package_json(document: dict) -> ValidationResult:
    return validate_document(document, PACKAGE_JSON_SCHEMA, "package_json")


_VALIDATORS = {
    "manifest.json": validate_manifest,
    "src/manifest.json": validate_manifest,
    "package.json": validate_package_json,
}


def validate_plan(plan: LayoutPlan) -> list[tuple[str, ValidationResult]]:
    """Run every applicable validator; returns (path, result) pairs in plan order."""
    results: list[tuple[str, ValidationResult]] = []
    for entry in plan:
        if entry.kind is not ContentKind.JSON:
            continue
        validator = _VALIDATORS.get(entry.path)
        if validator is None:
            continue
        results.append((entry.path, validator(entry.content)))
    return results


def ensure_valid(plan: LayoutPlan) -> None:
    """Raise PlanValidationError listing every failing document."""
    errors = [
        f"{path}: {result.details}"
        for path, result in validate_plan(plan)
        if not result.passed
    ]
    if errors:
        for err in errors:
            logger.error("Plan validation failed: %s", err)
        raise PlanValidationError(errors)
