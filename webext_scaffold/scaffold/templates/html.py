"""HTML and CSS templates for the popup and options pages.

Three HTML flavours per page:
- MOUNT: bundled React source; only the mount point, the bundler injects the chunk.
- MARKUP: bundled vanilla source; full markup, no script or stylesheet tags.
- LINKED: unbundled source or direct-load copy; full markup plus stylesheet
  and script tags pointing at ``<css>`` / ``<js>``.
"""
from __future__ import annotations

from webext_scaffold.models import UIFramework

_HEAD = """\
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{title}</title>
{stylesheet}</head>
<body>
"""

_TAIL = """\
{script}</body>
</html>
"""

_POPUP_BODY = """\
  <div id="popup-root">
    <h1>My Extension</h1>
    <p>You clicked <span id="count">0</span> times</p>
    <button id="increment">Click me</button>
  </div>
"""

_OPTIONS_BODY = """\
  <div id="options-root">
    <h1>Extension Options</h1>

    <div class="option">
      <label>
        <input type="checkbox" id="enabled">
        Enable extension
      </label>
    </div>

    <div class="option">
      <label>Theme:</label>
      <select id="theme">
        <option value="light">Light</option>
        <option value="dark">Dark</option>
      </select>
    </div>

    <button id="save">Save Settings</button>
    <div id="status"></div>
  </div>
"""

_PAGES: dict[str, tuple[str, str, str]] = {
    # page -> (title, mount id, body markup)
    "popup": ("Extension Popup", "popup-root", _POPUP_BODY),
    "options": ("Extension Options", "options-root", _OPTIONS_BODY),
}


def _page(title: str, body: str, css: str = "", js: str = "") -> str:
    stylesheet = f'  <link rel="stylesheet" href="{css}">\n' if css else ""
    script = f'  <script src="{js}"></script>\n' if js else ""
    return _HEAD.format(title=title, stylesheet=stylesheet) + body + _TAIL.format(script=script)


def mount_html(page: str) -> str:
    title, mount_id, _ = _PAGES[page]
    return _page(title, f'  <div id="{mount_id}"></div>\n')


def markup_html(page: str) -> str:
    title, _, body = _PAGES[page]
    return _page(title, body)


def linked_html(page: str, css: str, js: str) -> str:
    title, _, body = _PAGES[page]
    return _page(title, body, css=css, js=js)


def source_html(page: str, framework: UIFramework, bundled: bool) -> str:
    """HTML written under ``src/<page>/index.html``."""
    if not bundled:
        return linked_html(page, "index.css", "index.js")
    return _BUNDLED_SOURCE_HTML[framework](page)


_BUNDLED_SOURCE_HTML = {
    UIFramework.COMPONENT: mount_html,
    UIFramework.VANILLA: markup_html,
}


def direct_load_html(page: str) -> str:
    """HTML written at the project root, next to ``<page>.css`` and ``<page>.js``."""
    return linked_html(page, f"{page}.css", f"{page}.js")


STYLES: dict[str, str] = {
    "popup": """\
body {
  width: 300px;
  padding: 10px;
  font-family: Arial, sans-serif;
}

h1 {
  color: #4285f4;
  font-size: 18px;
}
""",
    "options": """\
body {
  width: 100%;
  max-width: 800px;
  margin: 0 auto;
  padding: 20px;
  font-family: Arial, sans-serif;
}

h1 {
  color: #4285f4;
}

.option {
  margin-bottom: 12px;
}
""",
}
