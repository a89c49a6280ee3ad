"""
Options File Loader: read generation options from a YAML file
=============================================================
Lets a team keep its scaffold choices in version control and run the tool
non-interactively. Every field is optional; CLI flags win over file values.

    name: my-extension
    typescript: true
    react: false
    manifest_version: 3
    permissions: [storage, activeTab, tabs]
    on_existing: overwrite        # overwrite | skip | abort
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from .config import validate_on_existing, validate_project_name
from .errors import InvalidOption, InvalidProjectName

_KNOWN_KEYS = {"name", "typescript", "react", "manifest_version", "permissions", "on_existing"}


@dataclass
class OptionsFileResult:
    """Everything extracted from an options file; None means "not set"."""
    name: Optional[str] = None
    typescript: Optional[bool] = None
    react: Optional[bool] = None
    manifest_version: Optional[int] = None
    permissions: Optional[list[str]] = None
    on_existing: Optional[str] = None


def load_options_file(path: str | Path) -> OptionsFileResult:
    """
    Parse a YAML options file.

    Raises
    ------
    FileNotFoundError  file doesn't exist
    ValueError         not a mapping, unknown keys, or values of the wrong type
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Options file not found: {path}")

    with open(path, encoding="utf-8") as f:
        try:
            raw: Any = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"'{path}': invalid YAML: {exc}") from exc

    if not isinstance(raw, dict):
        raise ValueError(f"'{path}' must contain a YAML mapping at the top level")

    unknown = sorted(set(raw) - _KNOWN_KEYS)
    if unknown:
        raise ValueError(
            f"'{path}': unknown option(s) {unknown}. Valid keys: {sorted(_KNOWN_KEYS)}"
        )

    result = OptionsFileResult()

    if raw.get("name") is not None:
        try:
            result.name = validate_project_name(str(raw["name"]))
        except InvalidProjectName as exc:
            raise ValueError(f"'{path}': {exc}") from exc

    for key in ("typescript", "react"):
        value = raw.get(key)
        if value is None:
            continue
        if not isinstance(value, bool):
            raise ValueError(f"'{path}': '{key}' must be true or false, got {value!r}")
        setattr(result, key, value)

    if raw.get("manifest_version") is not None:
        version = raw["manifest_version"]
        if isinstance(version, bool) or version not in (2, 3):
            raise ValueError(f"'{path}': 'manifest_version' must be 2 or 3, got {version!r}")
        result.manifest_version = int(version)

    permissions = raw.get("permissions")
    if permissions is not None:
        if isinstance(permissions, str):
            permissions = [p.strip() for p in permissions.split(",")]
        if not isinstance(permissions, list) or not all(isinstance(p, str) for p in permissions):
            raise ValueError(f"'{path}': 'permissions' must be a list of strings")
        result.permissions = permissions

    if raw.get("on_existing") is not None:
        try:
            result.on_existing = validate_on_existing(str(raw["on_existing"]))
        except InvalidOption as exc:
            raise ValueError(f"'{path}': {exc}") from exc

    return result
