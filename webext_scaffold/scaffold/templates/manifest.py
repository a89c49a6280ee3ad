"""Extension manifest and .gitignore templates.

The manifest shape is keyed by ManifestVersion: v3 uses the ``action`` key and
a service worker, v2 the legacy ``browser_action`` key and a non-persistent
background script list.
"""
from __future__ import annotations

from webext_scaffold.models import (
    EXTENSION_DESCRIPTION,
    EXTENSION_VERSION,
    ICON_SIZES,
    Configuration,
    ManifestVersion,
)

_ACTION_KEY: dict[ManifestVersion, str] = {
    ManifestVersion.V3: "action",
    ManifestVersion.V2: "browser_action",
}


def _background_v3() -> dict:
    return {"service_worker": "background.js"}


def _background_v2() -> dict:
    return {"scripts": ["background.js"], "persistent": False}


_BACKGROUND = {
    ManifestVersion.V3: _background_v3,
    ManifestVersion.V2: _background_v2,
}


def icon_map() -> dict[str, str]:
    return {str(size): f"assets/icons/icon{size}.png" for size in ICON_SIZES}


def build_manifest(config: Configuration) -> dict:
    version = config.manifest_schema_version
    return {
        "name": config.project_name,
        "description": EXTENSION_DESCRIPTION,
        "version": EXTENSION_VERSION,
        "manifest_version": int(version),
        _ACTION_KEY[version]: {
            "default_popup": "popup.html",
            "default_icon": icon_map(),
        },
        "background": _BACKGROUND[version](),
        "permissions": list(config.permissions),
        "options_page": "options.html",
        "icons": icon_map(),
        "content_scripts": [
            {
                "matches": ["<all_urls>"],
                "js": ["content.js"],
            }
        ],
    }


GITIGNORE = """\
# Dependency directories
node_modules/

# Build output
dist/

# Avoid duplicate manifest files
# The src/manifest.json is the source of truth
/manifest.json

# Environment files
.env
.env.local
.env.development.local
.env.test.local
.env.production.local

# Editor directories and files
.idea/
.vscode/
*.suo
*.ntvs*
*.njsproj
*.sln
*.sw?
.DS_Store
"""
