"""
Core Models & Types
===================
Enums, the resolved Configuration record and the Layout Plan data structures
shared by the resolver, planner and emitter.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Iterator, Optional, Union


# ─────────────────────────────────────────────
# Enums
# ─────────────────────────────────────────────

class LanguageVariant(str, Enum):
    PLAIN = "plain"
    TYPED = "typed"


class UIFramework(str, Enum):
    VANILLA = "vanilla"
    COMPONENT = "component-framework"


class ManifestVersion(IntEnum):
    V2 = 2
    V3 = 3


class ContentKind(str, Enum):
    DIRECTORY = "directory"
    TEXT = "text"
    JSON = "json"


# ─────────────────────────────────────────────
# Constants
# ─────────────────────────────────────────────

PROJECT_NAME_PATTERN = re.compile(r"[A-Za-z0-9_-]+")
DEFAULT_PROJECT_NAME = "my-web-extension"

DEFAULT_PERMISSIONS: tuple[str, ...] = ("storage", "activeTab")
PERMISSION_CHOICES: tuple[str, ...] = (
    "storage", "tabs", "activeTab", "contextMenus", "notifications", "webRequest",
)

ICON_SIZES: tuple[int, ...] = (16, 48, 128)

EXTENSION_DESCRIPTION = "A Chrome extension created with webext-scaffold"
EXTENSION_VERSION = "1.0.0"


# ─────────────────────────────────────────────
# Configuration
# ─────────────────────────────────────────────

@dataclass(frozen=True)
class Configuration:
    """Fully resolved generation options. Built by config.resolve_configuration()."""
    project_name: str
    language_variant: LanguageVariant = LanguageVariant.PLAIN
    ui_framework: UIFramework = UIFramework.VANILLA
    manifest_schema_version: ManifestVersion = ManifestVersion.V3
    permissions: tuple[str, ...] = DEFAULT_PERMISSIONS

    @property
    def typed(self) -> bool:
        return self.language_variant is LanguageVariant.TYPED

    @property
    def uses_framework(self) -> bool:
        return self.ui_framework is UIFramework.COMPONENT

    @property
    def needs_bundler(self) -> bool:
        """A bundler config is only emitted when sources need compiling."""
        return self.typed or self.uses_framework


# ─────────────────────────────────────────────
# Layout plan
# ─────────────────────────────────────────────

PlanContent = Union[str, dict, None]


@dataclass(frozen=True)
class PlanEntry:
    """One filesystem operation. ``path`` is POSIX-style, relative to the project root."""
    path: str
    kind: ContentKind
    content: PlanContent = None


@dataclass
class LayoutPlan:
    """Ordered filesystem operations derived from a Configuration."""
    entries: list[PlanEntry] = field(default_factory=list)

    def __iter__(self) -> Iterator[PlanEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, path: object) -> bool:
        return any(e.path == path for e in self.entries)

    def add_directory(self, path: str) -> None:
        self.entries.append(PlanEntry(path, ContentKind.DIRECTORY))

    def add_text(self, path: str, content: str) -> None:
        self.entries.append(PlanEntry(path, ContentKind.TEXT, content))

    def add_json(self, path: str, document: dict) -> None:
        self.entries.append(PlanEntry(path, ContentKind.JSON, document))

    def paths(self) -> list[str]:
        return [e.path for e in self.entries]

    def get(self, path: str) -> Optional[PlanEntry]:
        return next((e for e in self.entries if e.path == path), None)

    def files(self) -> list[PlanEntry]:
        return [e for e in self.entries if e.kind is not ContentKind.DIRECTORY]

    def directories(self) -> list[PlanEntry]:
        return [e for e in self.entries if e.kind is ContentKind.DIRECTORY]
