"""
Tests for the webext-scaffold CLI.

Every test runs main() inside tmp_path (monkeypatch.chdir) so generated
projects land in a throwaway directory. Interactive answers are supplied via
the ``_input_fn`` hook.
"""
from __future__ import annotations

import json
import logging

import pytest

from webext_scaffold import cli
from webext_scaffold.cli import build_parser, main
from webext_scaffold.errors import FilesystemWriteFailure, PlanValidationError


# ─── helpers ─────────────────────────────────────────────────────────────────

@pytest.fixture(autouse=True)
def _isolated(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("WEBEXT_SCAFFOLD_ON_EXISTING", raising=False)
    monkeypatch.delenv("WEBEXT_SCAFFOLD_DEFAULT_NAME", raising=False)
    monkeypatch.setattr(cli, "load_dotenv", lambda *a, **kw: False)
    # main() reconfigures the root logger; put it back afterwards
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def _answers(*values):
    queue = list(values)

    def _input(prompt: str) -> str:
        if not queue:
            raise AssertionError(f"unexpected prompt: {prompt}")
        return queue.pop(0)

    return _input


def _manifest(tmp_path, name="demo"):
    return json.loads((tmp_path / name / "manifest.json").read_text(encoding="utf-8"))


# ─────────────────────────────────────────────────────────────────────────────
# Argument parsing
# ─────────────────────────────────────────────────────────────────────────────

def test_parser_defaults_leave_options_unset():
    args = build_parser().parse_args([])
    assert args.project_directory is None
    assert args.typescript is None
    assert args.react is None
    assert args.manifest_version is None
    assert args.permissions is None
    assert args.skip_prompts is False
    assert args.validate is True


def test_parser_rejects_manifest_version_4():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--manifest-version", "4"])


def test_setup_logging_verbose():
    cli.setup_logging(verbose=True)
    assert logging.getLogger().level == logging.DEBUG
    cli.setup_logging(verbose=False)
    assert logging.getLogger().level == logging.WARNING


# ─────────────────────────────────────────────────────────────────────────────
# Non-interactive runs
# ─────────────────────────────────────────────────────────────────────────────

def test_skip_prompts_defaults(tmp_path, capsys):
    assert main(["demo", "--skip-prompts"]) == 0
    manifest = _manifest(tmp_path)
    assert manifest["manifest_version"] == 3
    assert manifest["permissions"] == ["storage", "activeTab"]
    assert (tmp_path / "demo" / "src" / "popup" / "index.js").exists()
    assert not (tmp_path / "demo" / "webpack.config.js").exists()
    out = capsys.readouterr().out
    assert "Extension created successfully!" in out
    assert "cd demo" in out
    assert "npm run setup" in out


def test_flags_select_variants(tmp_path):
    rc = main([
        "demo", "--typescript", "--react", "--manifest-version", "2",
        "--permissions", "tabs,storage", "--skip-prompts",
    ])
    assert rc == 0
    manifest = _manifest(tmp_path)
    assert "browser_action" in manifest
    assert manifest["permissions"] == ["tabs", "storage"]
    root = tmp_path / "demo"
    assert (root / "src" / "popup" / "index.tsx").exists()
    assert (root / "tsconfig.json").exists()
    assert (root / "webpack.config.js").exists()
    package = json.loads((root / "package.json").read_text())
    assert "react" in package["dependencies"]


def test_skip_prompts_without_name_uses_default(tmp_path):
    assert main(["--skip-prompts"]) == 0
    assert (tmp_path / "my-web-extension" / "manifest.json").exists()


def test_default_name_from_env(tmp_path, monkeypatch):
    monkeypatch.setenv("WEBEXT_SCAFFOLD_DEFAULT_NAME", "team-ext")
    assert main(["--skip-prompts"]) == 0
    assert _manifest(tmp_path, "team-ext")["name"] == "team-ext"


def test_invalid_name_with_skip_prompts_is_fatal(tmp_path, capsys):
    assert main(["bad name", "--skip-prompts"]) == 1
    assert "ERROR: Invalid project name" in capsys.readouterr().err
    assert list(tmp_path.iterdir()) == []


def test_bad_env_policy_is_fatal(monkeypatch, capsys):
    monkeypatch.setenv("WEBEXT_SCAFFOLD_ON_EXISTING", "merge")
    assert main(["demo", "--skip-prompts"]) == 1
    assert "ERROR:" in capsys.readouterr().err


def test_dry_run_writes_nothing(tmp_path, capsys):
    assert main(["demo", "--react", "--skip-prompts", "--dry-run"]) == 0
    assert list(tmp_path.iterdir()) == []
    out = capsys.readouterr().out
    assert "DRY-RUN: Layout Plan" in out
    assert "src/popup/index.jsx" in out


# ─────────────────────────────────────────────────────────────────────────────
# Existing directory
# ─────────────────────────────────────────────────────────────────────────────

def test_non_empty_directory_warns_and_proceeds(tmp_path, capsys):
    (tmp_path / "demo").mkdir()
    (tmp_path / "demo" / "README.md").write_text("old")
    assert main(["demo", "--skip-prompts"]) == 0
    out = capsys.readouterr().out
    assert "Warning:" in out
    assert "is not empty" in out
    assert (tmp_path / "demo" / "README.md").read_text().startswith("# demo")


def test_non_empty_directory_abort(tmp_path, capsys):
    (tmp_path / "demo").mkdir()
    (tmp_path / "demo" / "keep.txt").write_text("x")
    assert main(["demo", "--skip-prompts", "--on-existing", "abort"]) == 1
    assert "is not empty" in capsys.readouterr().err
    assert not (tmp_path / "demo" / "manifest.json").exists()


def test_non_empty_directory_skip(tmp_path, capsys):
    (tmp_path / "demo").mkdir()
    (tmp_path / "demo" / "README.md").write_text("mine")
    assert main(["demo", "--skip-prompts", "--on-existing", "skip"]) == 0
    assert (tmp_path / "demo" / "README.md").read_text() == "mine"
    assert "Left 1 existing files untouched" in capsys.readouterr().out


def test_policy_from_env(tmp_path, monkeypatch):
    monkeypatch.setenv("WEBEXT_SCAFFOLD_ON_EXISTING", "abort")
    (tmp_path / "demo").mkdir()
    (tmp_path / "demo" / "keep.txt").write_text("x")
    assert main(["demo", "--skip-prompts"]) == 1
    assert main(["demo", "--skip-prompts", "--on-existing", "overwrite"]) == 0


# ─────────────────────────────────────────────────────────────────────────────
# Options file
# ─────────────────────────────────────────────────────────────────────────────

def test_options_file_values_used(tmp_path):
    (tmp_path / "ext.yaml").write_text(
        "name: from-file\ntypescript: true\nmanifest_version: 2\npermissions: [tabs]\n"
    )
    assert main(["--file", "ext.yaml", "--skip-prompts"]) == 0
    manifest = _manifest(tmp_path, "from-file")
    assert manifest["manifest_version"] == 2
    assert manifest["permissions"] == ["tabs"]
    assert (tmp_path / "from-file" / "tsconfig.json").exists()


def test_flags_override_options_file(tmp_path):
    (tmp_path / "ext.yaml").write_text("name: from-file\nmanifest_version: 2\n")
    assert main(["flagged", "--file", "ext.yaml", "--manifest-version", "3",
                 "--skip-prompts"]) == 0
    assert _manifest(tmp_path, "flagged")["manifest_version"] == 3
    assert not (tmp_path / "from-file").exists()


def test_missing_options_file(capsys):
    assert main(["demo", "--file", "nope.yaml", "--skip-prompts"]) == 1
    assert "Options file not found" in capsys.readouterr().err


def test_invalid_options_file(tmp_path, capsys):
    (tmp_path / "ext.yaml").write_text("colour: blue\n")
    assert main(["demo", "--file", "ext.yaml", "--skip-prompts"]) == 1
    assert "unknown option" in capsys.readouterr().err


# ─────────────────────────────────────────────────────────────────────────────
# Interactive runs
# ─────────────────────────────────────────────────────────────────────────────

def test_interactive_answers(tmp_path):
    fn = _answers("prompted", "y", "y", "2", "storage,tabs")
    assert main([], _input_fn=fn) == 0
    manifest = _manifest(tmp_path, "prompted")
    assert manifest["manifest_version"] == 2
    assert manifest["permissions"] == ["storage", "tabs"]
    assert (tmp_path / "prompted" / "src" / "popup" / "index.tsx").exists()


def test_interactive_only_asks_missing(tmp_path):
    fn = _answers("", "")  # manifest version, permissions
    assert main(["demo", "--typescript", "--react"], _input_fn=fn) == 0
    assert _manifest(tmp_path)["manifest_version"] == 3


def test_interactive_reprompts_invalid_positional_name(tmp_path, capsys):
    fn = _answers("fixed-name", "n", "n", "", "")
    assert main(["bad name"], _input_fn=fn) == 0
    assert (tmp_path / "fixed-name" / "manifest.json").exists()
    assert "Invalid project name" in capsys.readouterr().err


def test_interrupt_exits_130(capsys):
    def _interrupt(prompt: str) -> str:
        raise KeyboardInterrupt

    assert main(["demo"], _input_fn=_interrupt) == 130
    assert "Aborted." in capsys.readouterr().err


def test_eof_exits_130():
    def _eof(prompt: str) -> str:
        raise EOFError

    assert main([], _input_fn=_eof) == 130


# ─────────────────────────────────────────────────────────────────────────────
# Fatal generation errors
# ─────────────────────────────────────────────────────────────────────────────

def test_plan_validation_error_exits_1(monkeypatch, capsys):
    def _fail(plan):
        raise PlanValidationError(["manifest.json: <root>: broken"])

    monkeypatch.setattr("webext_scaffold.generator.ensure_valid", _fail)
    assert main(["demo", "--skip-prompts"]) == 1
    err = capsys.readouterr().err
    assert "failed validation" in err
    assert "manifest.json: <root>: broken" in err


def test_no_validate_skips_validation(tmp_path, monkeypatch):
    def _fail(plan):
        raise PlanValidationError(["never"])

    monkeypatch.setattr("webext_scaffold.generator.ensure_valid", _fail)
    assert main(["demo", "--skip-prompts", "--no-validate"]) == 0
    assert (tmp_path / "demo" / "manifest.json").exists()


def test_write_failure_exits_1(tmp_path, capsys):
    (tmp_path / "demo").write_text("a file where the directory should go")
    assert main(["demo", "--skip-prompts"]) == 1
    assert "ERROR: Failed to write" in capsys.readouterr().err


def test_write_failure_type_is_reported(monkeypatch, capsys, tmp_path):
    def _boom(self, plan, root):
        raise FilesystemWriteFailure(tmp_path / "demo" / "x", PermissionError("denied"))

    monkeypatch.setattr("webext_scaffold.generator.Emitter.emit", _boom)
    assert main(["demo", "--skip-prompts"]) == 1
    assert "denied" in capsys.readouterr().err
