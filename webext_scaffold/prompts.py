"""
Interactive prompts for options not given on the command line.

Every function takes an ``_input_fn`` (defaults to built-in ``input``) so the
prompt flow is testable without mocking builtins. Invalid answers re-prompt;
EOF or Ctrl-C propagate to the CLI.
"""
from __future__ import annotations

from typing import Any, Callable, Optional

from .config import validate_project_name
from .errors import InvalidProjectName
from .models import DEFAULT_PERMISSIONS, DEFAULT_PROJECT_NAME, PERMISSION_CHOICES

InputFn = Callable[[str], str]


def ask_project_name(default: str = DEFAULT_PROJECT_NAME, _input_fn: InputFn = input) -> str:
    while True:
        answer = _input_fn(f"What is the name of your extension project? [{default}]: ").strip()
        try:
            return validate_project_name(answer or default)
        except InvalidProjectName:
            print("Project name may only include letters, numbers, underscores and hyphens.")


def ask_confirm(question: str, default: bool = False, _input_fn: InputFn = input) -> bool:
    hint = "Y/n" if default else "y/N"
    while True:
        answer = _input_fn(f"{question} [{hint}]: ").strip().lower()
        if answer == "":
            return default
        if answer in ("y", "yes"):
            return True
        if answer in ("n", "no"):
            return False
        print("Please answer 'y' or 'n'.")


def ask_manifest_version(_input_fn: InputFn = input) -> int:
    print("Which manifest version would you like to use?")
    print("  3. Manifest V3 (recommended)")
    print("  2. Manifest V2 (legacy)")
    while True:
        answer = _input_fn("Manifest version [3]: ").strip()
        if answer == "":
            return 3
        if answer in ("2", "3"):
            return int(answer)
        print("Please enter 2 or 3.")


def ask_permissions(_input_fn: InputFn = input) -> list[str]:
    default = ",".join(DEFAULT_PERMISSIONS)
    print("Select permissions for your extension:")
    print("  " + ", ".join(PERMISSION_CHOICES))
    while True:
        answer = _input_fn(f"Permissions, comma separated [{default}]: ").strip()
        if answer == "":
            return list(DEFAULT_PERMISSIONS)
        chosen = [token.strip() for token in answer.split(",") if token.strip()]
        unknown = [token for token in chosen if token not in PERMISSION_CHOICES]
        if not unknown:
            return chosen
        print(f"Unknown permission(s): {', '.join(unknown)}")


def prompt_for_missing_options(
    project_name: Optional[str] = None,
    *,
    typescript: Optional[bool] = None,
    react: Optional[bool] = None,
    manifest_version: Optional[int] = None,
    permissions: Optional[list[str]] = None,
    _input_fn: Optional[InputFn] = None,
) -> dict[str, Any]:
    """
    Ask only for what is still unset and return the merged answers.

    Keys: project_name, typescript, react, manifest_version, permissions.
    """
    if _input_fn is None:
        _input_fn = input

    if project_name is None:
        project_name = ask_project_name(_input_fn=_input_fn)
    if typescript is None:
        typescript = ask_confirm("Would you like to use TypeScript?", _input_fn=_input_fn)
    if react is None:
        react = ask_confirm(
            "Would you like to use React for UI components?", _input_fn=_input_fn
        )
    if manifest_version is None:
        manifest_version = ask_manifest_version(_input_fn=_input_fn)
    if permissions is None:
        permissions = ask_permissions(_input_fn=_input_fn)

    return {
        "project_name": project_name,
        "typescript": typescript,
        "react": react,
        "manifest_version": manifest_version,
        "permissions": permissions,
    }
