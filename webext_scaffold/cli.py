#!/usr/bin/env python3
"""
CLI Entry Point: scaffold a Chrome extension from the terminal
==============================================================
Usage:
    webext-scaffold my-extension
    webext-scaffold my-extension --typescript --react --skip-prompts
    webext-scaffold --file extension.yaml --dry-run
    python -m webext_scaffold my-extension --manifest-version 2

Options not given as flags (or in --file) are asked interactively unless
--skip-prompts is set, in which case defaults are used.

Exit codes: 0 success, 1 fatal error, 130 interrupted.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Optional

from dotenv import load_dotenv

from .config import (
    ON_EXISTING_POLICIES,
    load_settings,
    resolve_configuration,
    validate_project_name,
)
from .dry_run import render_plan
from .errors import (
    FilesystemWriteFailure,
    InvalidProjectName,
    NonEmptyTargetDirectory,
    PlanValidationError,
)
from .generator import create_extension
from .models import Configuration
from .project_file import OptionsFileResult, load_options_file
from .prompts import prompt_for_missing_options
from .scaffold import plan_layout

logger = logging.getLogger("webext_scaffold.cli")


def setup_logging(verbose: bool = False):
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
        force=True,  # re-apply even if already configured
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="webext-scaffold",
        description="Create a new Chrome web extension with a modern setup",
    )
    parser.add_argument(
        "project_directory",
        nargs="?",
        default=None,
        help="Directory to create the extension in (also used as its name)",
    )
    parser.add_argument(
        "--typescript",
        action="store_true",
        default=None,
        help="Use TypeScript instead of JavaScript",
    )
    parser.add_argument(
        "--react",
        action="store_true",
        default=None,
        help="Include React for UI components",
    )
    parser.add_argument(
        "--manifest-version",
        dest="manifest_version",
        type=int,
        choices=[2, 3],
        default=None,
        help="Manifest schema version (default: 3)",
    )
    parser.add_argument(
        "--permissions",
        default=None,
        help="Comma-separated permissions (default: storage,activeTab)",
    )
    parser.add_argument(
        "--skip-prompts",
        dest="skip_prompts",
        action="store_true",
        default=False,
        help="Skip all prompts and use default values",
    )
    parser.add_argument(
        "--file", "-f",
        default=None,
        help="YAML file with generation options (flags override its values)",
    )
    parser.add_argument(
        "--on-existing",
        dest="on_existing",
        choices=list(ON_EXISTING_POLICIES),
        default=None,
        help="What to do when the target directory is not empty "
             "(default: $WEBEXT_SCAFFOLD_ON_EXISTING or 'overwrite')",
    )
    parser.add_argument(
        "--dry-run",
        dest="dry_run",
        action="store_true",
        default=False,
        help="Print the layout plan without writing anything",
    )
    parser.add_argument(
        "--no-validate",
        dest="validate",
        action="store_false",
        default=True,
        help="Skip JSON Schema validation of the generated manifest and package.json",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        default=False,
        help="Enable debug logging",
    )
    return parser


def _first_set(*values):
    """First value that is not None (CLI flag > options file > unset)."""
    return next((v for v in values if v is not None), None)


def _resolve(
    args: argparse.Namespace,
    file_opts: OptionsFileResult,
    default_name: str,
    _input_fn: Optional[Callable[[str], str]] = None,
) -> Configuration:
    name = _first_set(args.project_directory, file_opts.name)
    typescript = _first_set(args.typescript, file_opts.typescript)
    react = _first_set(args.react, file_opts.react)
    manifest_version = _first_set(args.manifest_version, file_opts.manifest_version)
    permissions = _first_set(
        args.permissions.split(",") if args.permissions is not None else None,
        file_opts.permissions,
    )

    if not args.skip_prompts:
        if name is not None:
            try:
                validate_project_name(name)
            except InvalidProjectName as exc:
                print(f"{exc}", file=sys.stderr)
                name = None
        answers = prompt_for_missing_options(
            name,
            typescript=typescript,
            react=react,
            manifest_version=manifest_version,
            permissions=permissions,
            _input_fn=_input_fn,
        )
        name = answers["project_name"]
        typescript = answers["typescript"]
        react = answers["react"]
        manifest_version = answers["manifest_version"]
        permissions = answers["permissions"]
    elif name is None:
        name = default_name

    return resolve_configuration(
        name,
        typescript=typescript,
        react=react,
        manifest_version=manifest_version,
        permissions=permissions,
    )


def _print_next_steps(target: str) -> None:
    print("\nExtension created successfully!")
    print("\nYour extension has a dual structure:")
    print("1. Files in the root directory for direct loading in Chrome")
    print("2. Source files in src/ directory for development with webpack")

    print("\nOption 1: Direct Loading (Quick Start)")
    print("You can immediately load the extension without building:")
    print("1. Open Chrome and navigate to chrome://extensions")
    print('2. Enable "Developer mode" in the top right corner')
    print('3. Click "Load unpacked"')
    print(f'4. Select the "{target}" directory (the root folder)')

    print("\nOption 2: Development Workflow (Recommended)")
    print("\nNext steps:")
    print(f"  cd {target}")
    print("  npm run setup")
    print("\nOr manually:")
    print("  npm install")
    print("  npm run build")
    print("  npm run dev")
    print("\nThen load the extension in Chrome:")
    print("  1. Open chrome://extensions")
    print('  2. Enable "Developer mode" in the top right corner')
    print('  3. Click "Load unpacked"')
    print(f'  4. Select the "{target}/dist" folder')
    print("\nSee README.md for more details.")


def main(
    argv: Optional[list[str]] = None,
    _input_fn: Optional[Callable[[str], str]] = None,
) -> int:
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    print("Create Web Extension")
    print("A tool to generate Chrome extension boilerplate\n")

    try:
        settings = load_settings()
        file_opts = load_options_file(args.file) if args.file else OptionsFileResult()
        config = _resolve(args, file_opts, settings.default_project_name, _input_fn)
    except (FileNotFoundError, ValueError) as exc:
        # InvalidProjectName / InvalidOption are ValueErrors too
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    except (KeyboardInterrupt, EOFError):
        print("\nAborted.", file=sys.stderr)
        return 130

    logger.debug("Resolved configuration: %s", config)

    if args.dry_run:
        print(render_plan(plan_layout(config), config))
        return 0

    on_existing = args.on_existing or file_opts.on_existing or settings.on_existing
    target = config.project_name
    try:
        report = create_extension(
            config,
            Path(target),
            on_existing=on_existing,
            validate=args.validate,
        )
    except NonEmptyTargetDirectory as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    except PlanValidationError as exc:
        print("ERROR: generated files failed validation:", file=sys.stderr)
        for err in exc.errors:
            print(f"  ! {err}", file=sys.stderr)
        return 1
    except FilesystemWriteFailure as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        return 130

    for warning in report.warnings:
        print(f"\nWarning: {warning}")
    print(f"\nCreated {len(report.written)} files in {report.root}")
    if report.skipped:
        print(f"Left {len(report.skipped)} existing files untouched")
    _print_next_steps(target)
    return 0


if __name__ == "__main__":
    sys.exit(main())
