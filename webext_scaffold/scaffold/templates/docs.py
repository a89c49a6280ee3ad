"""README.md and STRUCTURE.md templates."""
from __future__ import annotations

from string import Template

from webext_scaffold.models import Configuration, LanguageVariant, UIFramework

LANGUAGE_NAMES: dict[LanguageVariant, str] = {
    LanguageVariant.PLAIN: "JavaScript",
    LanguageVariant.TYPED: "TypeScript",
}

UI_NAMES: dict[UIFramework, str] = {
    UIFramework.VANILLA: "Vanilla JS for UI",
    UIFramework.COMPONENT: "React for UI components",
}

# (entry, comment); entries after the fixed head are included per configuration
_TREE_HEAD: list[tuple[str, str]] = [
    ("dist/", "Built extension files (created after build)"),
    ("src/", "Source files"),
    ("│   ├── assets/", "Static assets like icons"),
    ("│   ├── background/", "Background script"),
    ("│   ├── content/", "Content scripts"),
    ("│   ├── options/", "Options page"),
    ("│   ├── popup/", "Popup UI"),
    ("│   └── manifest.json", "Extension manifest"),
    ("assets/", "Assets for direct loading"),
    ("scripts/", "Helper scripts"),
    ("manifest.json", "Manifest for direct loading"),
]
_TREE_BUNDLER = ("webpack.config.js", "Webpack configuration")
_TREE_PACKAGE = ("package.json", "Project dependencies and scripts")
_TREE_TSCONFIG = ("tsconfig.json", "TypeScript configuration")
_TREE_README = ("README.md", "This file")


def tree_entries(config: Configuration) -> list[tuple[str, str]]:
    entries = list(_TREE_HEAD)
    if config.needs_bundler:
        entries.append(_TREE_BUNDLER)
    entries.append(_TREE_PACKAGE)
    if config.typed:
        entries.append(_TREE_TSCONFIG)
    entries.append(_TREE_README)
    return entries


def render_tree(config: Configuration) -> str:
    entries = tree_entries(config)
    lines: list[str] = []
    for index, (entry, comment) in enumerate(entries):
        if entry.startswith("│"):
            label = entry
        else:
            branch = "└── " if index == len(entries) - 1 else "├── "
            label = branch + entry
        lines.append(f"{label:<24}# {comment}")
    return "\n".join(lines)


_README = Template("""\
# $name

A Chrome extension created with webext-scaffold.

## Features

- $language based extension
- $ui
- Manifest V$manifest_version
- Webpack for bundling

## Extension Structure

This extension has a dual structure:

1. **Development Structure** (in the `src/` directory):
   - Source files for development
   - Used by webpack to build the extension

2. **Direct Loading Structure** (in the root directory):
   - Basic files for direct loading in Chrome
   - Allows loading the extension without building

You can choose either approach:

### Option 1: Direct Loading (Quick Start)

You can immediately load the extension in Chrome without any build step:

1. Open Chrome and navigate to `chrome://extensions`
2. Enable "Developer mode" in the top right corner
3. Click "Load unpacked" and select **this directory** (the root of the project)
4. The extension should now be installed and visible in your browser

This is useful for quick testing, but doesn't include any advanced features that require building.

### Option 2: Development Workflow (Recommended)

For the full development experience with all features:

## Development

### Prerequisites

- Node.js (v14 or higher)
- npm or yarn

### Quick Start

```bash
# Install dependencies, build the extension, and show loading instructions
npm run setup
```

### Manual Installation

```bash
# Install dependencies
npm install
```

### Build the Extension

```bash
# Create a production build (REQUIRED before loading in Chrome)
npm run build
```

### Development Mode

```bash
# Start development build with watch mode
npm run dev
```

> **IMPORTANT**: You must run `npm run build` at least once before loading the extension in Chrome.
> The `npm run dev` command will watch for changes and rebuild automatically, but you'll need to refresh the extension in Chrome to see the changes.

## Loading the Built Extension in Chrome

1. Open Chrome and navigate to `chrome://extensions`
2. Enable "Developer mode" in the top right corner
3. Click "Load unpacked" and select the `dist` directory from this project
4. The extension should now be installed and visible in your browser

## Project Structure

```
$tree
```

## License

MIT
""")


def build_readme(config: Configuration) -> str:
    return _README.substitute(
        name=config.project_name,
        language=LANGUAGE_NAMES[config.language_variant],
        ui=UI_NAMES[config.ui_framework],
        manifest_version=int(config.manifest_schema_version),
        tree=render_tree(config),
    )


STRUCTURE_NOTE = """\
# Important Note

This extension has a dual structure:

1. **Development Structure** (in the `src/` directory):
   - Source files for development
   - Used by webpack to build the extension

2. **Direct Loading Structure** (in the root directory):
   - Basic files for direct loading in Chrome
   - Allows loading the extension without building

For the best development experience, we recommend:
1. Install dependencies: `npm install`
2. Build the extension: `npm run build`
3. Load the `dist/` directory in Chrome

However, you can also directly load the extension from the root directory for quick testing.
"""
