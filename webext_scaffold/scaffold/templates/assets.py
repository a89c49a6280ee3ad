"""Icon placeholders and the post-build setup instructions script."""
from __future__ import annotations

from webext_scaffold.models import ICON_SIZES

ICON_DIRS: tuple[str, ...] = ("src/assets/icons", "assets/icons")

SVG_ICON = """\
<svg xmlns="http://www.w3.org/2000/svg" width="128" height="128" viewBox="0 0 128 128">
  <rect width="128" height="128" rx="20" fill="#4285f4"/>
  <path d="M64 30 L98 80 L30 80 Z" fill="white"/>
  <circle cx="64" cy="60" r="10" fill="white"/>
</svg>
"""


def png_placeholder(size: int) -> str:
    # Text stand-in; replace with a real PNG before publishing.
    return f"This is a placeholder for a {size}x{size} icon.\n"


def icon_files() -> list[tuple[str, str]]:
    """(relative path, content) for every icon, PNG placeholders before SVGs."""
    files: list[tuple[str, str]] = []
    for directory in ICON_DIRS:
        for size in ICON_SIZES:
            files.append((f"{directory}/icon{size}.png", png_placeholder(size)))
    for directory in ICON_DIRS:
        for size in ICON_SIZES:
            files.append((f"{directory}/icon{size}.svg", SVG_ICON))
    return files


SETUP_INSTRUCTIONS = r"""// Setup instructions script
const path = require('path');

// ANSI color codes for terminal output
const colors = {
  blue: '\x1b[34m',
  green: '\x1b[32m',
  yellow: '\x1b[33m',
  red: '\x1b[31m',
  reset: '\x1b[0m',
  bold: '\x1b[1m'
};

// Get the absolute path to the dist directory
const distPath = path.resolve(__dirname, '..', 'dist');

console.log('\n' + colors.green + colors.bold + 'Extension built successfully!' + colors.reset);
console.log('\n' + colors.blue + colors.bold + 'To load the extension in Chrome:' + colors.reset);
console.log(colors.blue + '1. Open Chrome and navigate to ' + colors.bold + 'chrome://extensions' + colors.reset);
console.log(colors.blue + '2. Enable ' + colors.bold + 'Developer mode' + colors.blue + ' in the top right corner' + colors.reset);
console.log(colors.blue + '3. Click ' + colors.bold + 'Load unpacked' + colors.reset);
console.log(colors.blue + '4. Select the ' + colors.bold + 'dist' + colors.blue + ' directory from this project:' + colors.reset);
console.log(colors.yellow + colors.bold + '   ' + distPath + colors.reset);
console.log('\n' + colors.yellow + colors.bold + 'IMPORTANT:' + colors.yellow + ' Always select the dist directory, NOT the src directory!' + colors.reset);
console.log(colors.yellow + 'The extension must be built before it can be loaded in Chrome.' + colors.reset);
console.log('\n' + colors.blue + 'For development:' + colors.reset);
console.log(colors.blue + '- Run ' + colors.bold + 'npm run dev' + colors.blue + ' to rebuild on every change' + colors.reset);
console.log(colors.blue + '- After making changes, refresh the extension in Chrome to see the updates' + colors.reset);
console.log('\n' + colors.green + 'Happy coding!' + colors.reset + '\n');
"""
