"""Template modules for the generated extension, one per concern."""
from . import assets, build, docs, html, manifest, scripts, ui

__all__ = ["assets", "build", "docs", "html", "manifest", "scripts", "ui"]
