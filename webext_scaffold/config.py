"""
Configuration Resolver
======================
Normalises raw option values (CLI flags, prompt answers, options file) into a
single immutable Configuration. No I/O happens here.

Environment settings (read after the CLI has called ``load_dotenv()``):

    WEBEXT_SCAFFOLD_ON_EXISTING   overwrite | skip | abort   (default: overwrite)
    WEBEXT_SCAFFOLD_DEFAULT_NAME  project name for --skip-prompts without a name
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Union

from .errors import InvalidOption, InvalidProjectName
from .models import (
    DEFAULT_PERMISSIONS,
    DEFAULT_PROJECT_NAME,
    PROJECT_NAME_PATTERN,
    Configuration,
    LanguageVariant,
    ManifestVersion,
    UIFramework,
)

ON_EXISTING_POLICIES: tuple[str, ...] = ("overwrite", "skip", "abort")

_ENV_ON_EXISTING = "WEBEXT_SCAFFOLD_ON_EXISTING"
_ENV_DEFAULT_NAME = "WEBEXT_SCAFFOLD_DEFAULT_NAME"


def validate_project_name(name: str) -> str:
    """Return ``name`` unchanged, or raise InvalidProjectName."""
    if not isinstance(name, str) or not PROJECT_NAME_PATTERN.fullmatch(name):
        raise InvalidProjectName(str(name))
    return name


def resolve_permissions(permissions: Optional[Iterable[str]]) -> tuple[str, ...]:
    """
    Strip, drop blanks and duplicates (first occurrence wins).
    An empty result falls back to DEFAULT_PERMISSIONS, never to ().
    """
    if permissions is None:
        return DEFAULT_PERMISSIONS
    if isinstance(permissions, str):
        permissions = permissions.split(",")
    seen: dict[str, None] = {}
    for token in permissions:
        token = str(token).strip()
        if token:
            seen.setdefault(token, None)
    return tuple(seen) or DEFAULT_PERMISSIONS


def _resolve_manifest_version(value: Union[ManifestVersion, int, str, None]) -> ManifestVersion:
    if value is None:
        return ManifestVersion.V3
    try:
        return ManifestVersion(int(value))
    except (TypeError, ValueError):
        raise InvalidOption(
            f"Unsupported manifest version {value!r}. Valid values: "
            f"{[v.value for v in ManifestVersion]}"
        ) from None


def _resolve_language(typescript: Union[bool, LanguageVariant, str, None]) -> LanguageVariant:
    if typescript is None:
        return LanguageVariant.PLAIN
    if isinstance(typescript, bool):
        return LanguageVariant.TYPED if typescript else LanguageVariant.PLAIN
    try:
        return LanguageVariant(typescript)
    except ValueError:
        raise InvalidOption(
            f"Unknown language variant {typescript!r}. Valid values: "
            f"{[v.value for v in LanguageVariant]}"
        ) from None


def _resolve_framework(react: Union[bool, UIFramework, str, None]) -> UIFramework:
    if react is None:
        return UIFramework.VANILLA
    if isinstance(react, bool):
        return UIFramework.COMPONENT if react else UIFramework.VANILLA
    try:
        return UIFramework(react)
    except ValueError:
        raise InvalidOption(
            f"Unknown UI framework {react!r}. Valid values: "
            f"{[v.value for v in UIFramework]}"
        ) from None


def resolve_configuration(
    project_name: str,
    *,
    typescript: Union[bool, LanguageVariant, str, None] = None,
    react: Union[bool, UIFramework, str, None] = None,
    manifest_version: Union[ManifestVersion, int, str, None] = None,
    permissions: Optional[Iterable[str]] = None,
) -> Configuration:
    """
    Build the Configuration the planner consumes.

    ``typescript`` / ``react`` accept the CLI booleans or the enum values.
    Unset options resolve to plain / vanilla / manifest v3 / default permissions.

    Raises
    ------
    InvalidProjectName  name outside ``[A-Za-z0-9_-]+``
    InvalidOption       unknown enum value or manifest version
    """
    return Configuration(
        project_name=validate_project_name(project_name),
        language_variant=_resolve_language(typescript),
        ui_framework=_resolve_framework(react),
        manifest_schema_version=_resolve_manifest_version(manifest_version),
        permissions=resolve_permissions(permissions),
    )


# ─────────────────────────────────────────────────────────────────────────────
# Environment settings
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Settings:
    on_existing: str = "overwrite"
    default_project_name: str = DEFAULT_PROJECT_NAME


def validate_on_existing(policy: str) -> str:
    policy = policy.strip().lower()
    if policy not in ON_EXISTING_POLICIES:
        raise InvalidOption(
            f"Unknown existing-directory policy {policy!r}. "
            f"Valid values: {list(ON_EXISTING_POLICIES)}"
        )
    return policy


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if environ is None else environ
    on_existing = validate_on_existing(env.get(_ENV_ON_EXISTING) or "overwrite")
    default_name = env.get(_ENV_DEFAULT_NAME) or DEFAULT_PROJECT_NAME
    return Settings(
        on_existing=on_existing,
        default_project_name=validate_project_name(default_name),
    )
