"""
Dry-run: show what would be generated without touching the filesystem.

CLI usage:
    webext-scaffold my-extension --typescript --skip-prompts --dry-run
"""
from __future__ import annotations

from .emitter import render_entry
from .models import Configuration, ContentKind, LayoutPlan


class DryRunRenderer:
    """Renders a LayoutPlan as human-readable text."""

    @staticmethod
    def render(plan: LayoutPlan, config: Configuration) -> str:
        files = plan.files()
        lines: list[str] = []
        lines.append("=" * 64)
        lines.append("DRY-RUN: Layout Plan")
        lines.append("=" * 64)
        lines.append(f"Project    : {config.project_name}")
        lines.append(f"Language   : {config.language_variant.value}")
        lines.append(f"UI         : {config.ui_framework.value}")
        lines.append(f"Manifest   : v{int(config.manifest_schema_version)}")
        lines.append(f"Permissions: {', '.join(config.permissions)}")
        lines.append(
            f"Entries    : {len(plan.directories())} director(ies), {len(files)} file(s)"
        )
        lines.append("")

        for entry in plan:
            if entry.kind is ContentKind.DIRECTORY:
                lines.append(f"  [dir ]  {entry.path}/")
            else:
                size = len(render_entry(entry))
                lines.append(f"  [{entry.kind.value:<4}]  {entry.path}  ({size} bytes)")

        lines.append("=" * 64)
        return "\n".join(lines)


def render_plan(plan: LayoutPlan, config: Configuration) -> str:
    return DryRunRenderer.render(plan, config)
