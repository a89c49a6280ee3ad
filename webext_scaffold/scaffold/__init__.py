"""
Layout Planner: decides every directory and file of a new extension project.

Usage:
    plan = plan_layout(config)
    for entry in plan:
        ...  # (path, kind, content), in emission order

plan_layout() is a pure function of the Configuration: no I/O, no prompts,
and equal configurations always give equal plans. Content variants are picked
by table lookup in the template modules.
"""
from __future__ import annotations

import logging

from webext_scaffold.models import Configuration, LanguageVariant, LayoutPlan

from .templates import assets, build, docs, html, manifest, scripts, ui

logger = logging.getLogger(__name__)

DIRECTORIES: tuple[str, ...] = (
    "src",
    "src/background",
    "src/popup",
    "src/options",
    "src/content",
    "src/assets",
    "src/assets/icons",
    "scripts",
    "assets",
    "assets/icons",
)

PAGES: tuple[str, ...] = ("popup", "options")


def _plan_directories(plan: LayoutPlan) -> None:
    for directory in DIRECTORIES:
        plan.add_directory(directory)


def _plan_manifest(plan: LayoutPlan, config: Configuration) -> None:
    # Separate dicts so the two documents never share mutable state.
    plan.add_json("src/manifest.json", manifest.build_manifest(config))
    plan.add_json("manifest.json", manifest.build_manifest(config))
    plan.add_text(".gitignore", manifest.GITIGNORE)


def _plan_source_stubs(plan: LayoutPlan, config: Configuration) -> None:
    suffix = ui.SCRIPT_SUFFIX[config.language_variant]
    version = config.manifest_schema_version
    plan.add_text(
        f"src/background/index.{suffix}",
        scripts.background_script(config.language_variant, version),
    )
    plan.add_text(
        f"src/content/index.{suffix}",
        scripts.content_script(config.language_variant),
    )
    plan.add_text("background.js", scripts.background_script(LanguageVariant.PLAIN, version))
    plan.add_text("content.js", scripts.content_script(LanguageVariant.PLAIN))


def _plan_pages(plan: LayoutPlan, config: Configuration) -> None:
    key = (config.ui_framework, config.language_variant)
    suffix = ui.UI_SUFFIX[key]
    sources = {"popup": ui.POPUP_SOURCE[key], "options": ui.OPTIONS_SOURCE[key]}
    direct = {"popup": ui.DIRECT_LOAD_POPUP, "options": ui.DIRECT_LOAD_OPTIONS}

    for page in PAGES:
        plan.add_text(
            f"src/{page}/index.html",
            html.source_html(page, config.ui_framework, config.needs_bundler),
        )
        plan.add_text(f"src/{page}/index.css", html.STYLES[page])
        plan.add_text(f"src/{page}/index.{suffix}", sources[page])

    for page in PAGES:
        plan.add_text(f"{page}.html", html.direct_load_html(page))
        plan.add_text(f"{page}.css", html.STYLES[page])
        plan.add_text(f"{page}.js", direct[page])

    for path, content in assets.icon_files():
        plan.add_text(path, content)


def _plan_build_config(plan: LayoutPlan, config: Configuration) -> None:
    plan.add_json("package.json", build.build_package_json(config))
    plan.add_text("scripts/setup-instructions.js", assets.SETUP_INSTRUCTIONS)
    if config.needs_bundler:
        plan.add_text("webpack.config.js", build.build_webpack_config(config))
    if config.typed:
        plan.add_json("tsconfig.json", build.build_tsconfig(config))


def _plan_docs(plan: LayoutPlan, config: Configuration) -> None:
    plan.add_text("STRUCTURE.md", docs.STRUCTURE_NOTE)
    plan.add_text("README.md", docs.build_readme(config))


def plan_layout(config: Configuration) -> LayoutPlan:
    """
    Build the complete, ordered layout plan for ``config``.

    Order: directories, manifest, source stubs, HTML/CSS + UI sources + icons,
    build configuration, documentation.
    """
    plan = LayoutPlan()
    _plan_directories(plan)
    _plan_manifest(plan, config)
    _plan_source_stubs(plan, config)
    _plan_pages(plan, config)
    _plan_build_config(plan, config)
    _plan_docs(plan, config)
    logger.debug(
        "Planned %d entries for %s (%s, %s, MV%d)",
        len(plan), config.project_name, config.language_variant.value,
        config.ui_framework.value, config.manifest_schema_version,
    )
    return plan


__all__ = ["DIRECTORIES", "PAGES", "plan_layout"]
