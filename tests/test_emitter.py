"""
Tests for the Emitter: ordered writes, JSON formatting, the existing-directory
policies, and write-failure propagation. Uses the tmp_path fixture.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from webext_scaffold.config import resolve_configuration
from webext_scaffold.emitter import Emitter, EmitReport, render_entry, serialize_json
from webext_scaffold.errors import (
    FilesystemWriteFailure,
    InvalidOption,
    NonEmptyTargetDirectory,
)
from webext_scaffold.models import ContentKind, LayoutPlan, PlanEntry
from webext_scaffold.scaffold import plan_layout


# ─── helpers ─────────────────────────────────────────────────────────────────

def _small_plan() -> LayoutPlan:
    plan = LayoutPlan()
    plan.add_directory("src")
    plan.add_directory("src/popup")
    plan.add_json("manifest.json", {"name": "demo", "manifest_version": 3})
    plan.add_text("src/popup/index.js", "console.log('hi');\n")
    return plan


def _full_plan(**kwargs) -> LayoutPlan:
    return plan_layout(resolve_configuration("demo", **kwargs))


# ─────────────────────────────────────────────────────────────────────────────
# Serialisation
# ─────────────────────────────────────────────────────────────────────────────

def test_serialize_json_two_space_indent_and_newline():
    text = serialize_json({"b": 1, "a": [1, 2]})
    assert text == '{\n  "b": 1,\n  "a": [\n    1,\n    2\n  ]\n}\n'


def test_serialize_json_keeps_unicode():
    assert "é" in serialize_json({"name": "café"})


def test_render_entry_text_is_raw_utf8():
    entry = PlanEntry("a.txt", ContentKind.TEXT, "line1\r\nline2 ✓\n")
    assert render_entry(entry) == "line1\r\nline2 ✓\n".encode("utf-8")


# ─────────────────────────────────────────────────────────────────────────────
# Basic emission
# ─────────────────────────────────────────────────────────────────────────────

def test_emit_writes_entries(tmp_path):
    report = Emitter().emit(_small_plan(), tmp_path / "demo")
    root = tmp_path / "demo"
    assert isinstance(report, EmitReport)
    assert report.root == root.resolve()
    assert (root / "src" / "popup").is_dir()
    assert json.loads((root / "manifest.json").read_text()) == {
        "name": "demo", "manifest_version": 3,
    }
    assert (root / "src/popup/index.js").read_text() == "console.log('hi');\n"
    assert report.written == ["manifest.json", "src/popup/index.js"]
    assert report.skipped == []
    assert report.warnings == []


def test_emit_creates_nested_root(tmp_path):
    root = tmp_path / "a" / "b" / "demo"
    Emitter().emit(_small_plan(), root)
    assert (root / "manifest.json").is_file()


def test_emit_full_plan_writes_every_file(tmp_path):
    plan = _full_plan(typescript=True, react=True)
    report = Emitter().emit(plan, tmp_path)
    assert report.written == [e.path for e in plan.files()]
    for entry in plan:
        target = tmp_path / entry.path
        if entry.kind is ContentKind.DIRECTORY:
            assert target.is_dir()
        else:
            assert target.read_bytes() == render_entry(entry)


def test_emitted_manifest_is_two_space_json(tmp_path):
    Emitter().emit(_full_plan(), tmp_path)
    text = (tmp_path / "manifest.json").read_text(encoding="utf-8")
    assert text.startswith('{\n  "name": "demo",\n')
    assert text.endswith("}\n")


def test_unknown_policy_rejected():
    with pytest.raises(InvalidOption):
        Emitter(on_existing="merge")


# ─────────────────────────────────────────────────────────────────────────────
# Existing-directory policies
# ─────────────────────────────────────────────────────────────────────────────

def _prepopulate(root: Path) -> None:
    root.mkdir(parents=True, exist_ok=True)
    (root / "manifest.json").write_text("old manifest")
    (root / "notes.txt").write_text("keep me")


def test_check_target_empty_and_missing(tmp_path):
    emitter = Emitter()
    assert emitter.check_target(tmp_path / "missing") is None
    assert emitter.check_target(tmp_path) is None


def test_check_target_lists_entries(tmp_path):
    _prepopulate(tmp_path)
    warning = Emitter().check_target(tmp_path)
    assert isinstance(warning, NonEmptyTargetDirectory)
    assert warning.entries == ["manifest.json", "notes.txt"]
    assert "is not empty" in str(warning)


def test_overwrite_warns_and_writes_everything(tmp_path, caplog):
    _prepopulate(tmp_path)
    plan = _small_plan()
    with caplog.at_level(logging.WARNING, logger="webext_scaffold.emitter"):
        report = Emitter(on_existing="overwrite").emit(plan, tmp_path)
    assert len(report.warnings) == 1
    assert "is not empty" in caplog.text
    assert report.written == [e.path for e in plan.files()]
    assert json.loads((tmp_path / "manifest.json").read_text())["name"] == "demo"
    assert (tmp_path / "notes.txt").read_text() == "keep me"


def test_default_policy_is_overwrite(tmp_path):
    _prepopulate(tmp_path)
    report = Emitter().emit(_small_plan(), tmp_path)
    assert "manifest.json" in report.written
    assert report.skipped == []


def test_skip_leaves_existing_files(tmp_path):
    _prepopulate(tmp_path)
    report = Emitter(on_existing="skip").emit(_small_plan(), tmp_path)
    assert report.skipped == ["manifest.json"]
    assert report.written == ["src/popup/index.js"]
    assert len(report.warnings) == 1
    assert (tmp_path / "manifest.json").read_text() == "old manifest"


def test_abort_raises_before_writing(tmp_path):
    _prepopulate(tmp_path)
    with pytest.raises(NonEmptyTargetDirectory) as exc_info:
        Emitter(on_existing="abort").emit(_small_plan(), tmp_path)
    assert exc_info.value.root == tmp_path.resolve()
    assert not (tmp_path / "src").exists()
    assert (tmp_path / "manifest.json").read_text() == "old manifest"


def test_abort_on_empty_directory_proceeds(tmp_path):
    report = Emitter(on_existing="abort").emit(_small_plan(), tmp_path)
    assert report.warnings == []
    assert (tmp_path / "manifest.json").exists()


# ─────────────────────────────────────────────────────────────────────────────
# Write failures
# ─────────────────────────────────────────────────────────────────────────────

def test_write_failure_wrapped_and_stops(tmp_path, monkeypatch):
    original = Path.write_bytes

    def failing_write(self, data):
        if self.name == "index.js":
            raise PermissionError("denied")
        return original(self, data)

    monkeypatch.setattr(Path, "write_bytes", failing_write)
    plan = _small_plan()
    plan.add_text("after.txt", "never written")

    with pytest.raises(FilesystemWriteFailure) as exc_info:
        Emitter().emit(plan, tmp_path)

    err = exc_info.value
    assert isinstance(err, OSError)
    assert isinstance(err.cause, PermissionError)
    assert err.__cause__ is err.cause
    assert err.path == tmp_path.resolve() / "src/popup/index.js"
    assert "denied" in str(err)
    # no rollback, and nothing after the failing entry
    assert (tmp_path / "manifest.json").exists()
    assert not (tmp_path / "after.txt").exists()


def test_directory_blocked_by_file_is_write_failure(tmp_path):
    (tmp_path / "src").write_text("not a directory")
    with pytest.raises(FilesystemWriteFailure):
        Emitter().emit(_small_plan(), tmp_path)
