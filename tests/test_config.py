"""
Tests for the configuration resolver and environment settings.
"""
from __future__ import annotations

import pytest

from webext_scaffold.config import (
    Settings,
    load_settings,
    resolve_configuration,
    resolve_permissions,
    validate_on_existing,
    validate_project_name,
)
from webext_scaffold.errors import InvalidOption, InvalidProjectName
from webext_scaffold.models import (
    DEFAULT_PERMISSIONS,
    DEFAULT_PROJECT_NAME,
    Configuration,
    LanguageVariant,
    ManifestVersion,
    UIFramework,
)


# ─── project name ────────────────────────────────────────────────────────────

@pytest.mark.parametrize("name", ["my-ext", "ext_1", "A", "abc-DEF_123"])
def test_valid_project_names_pass(name):
    assert validate_project_name(name) == name


@pytest.mark.parametrize("name", ["", "my ext", "ext.1", "../up", "ext/sub", "ext\n", "naïve"])
def test_invalid_project_names_raise(name):
    with pytest.raises(InvalidProjectName) as exc_info:
        validate_project_name(name)
    assert exc_info.value.name == name


def test_invalid_project_name_is_a_value_error():
    with pytest.raises(ValueError):
        resolve_configuration("bad name")


# ─── resolve_configuration ───────────────────────────────────────────────────

def test_defaults():
    config = resolve_configuration("my-ext")
    assert config == Configuration(
        project_name="my-ext",
        language_variant=LanguageVariant.PLAIN,
        ui_framework=UIFramework.VANILLA,
        manifest_schema_version=ManifestVersion.V3,
        permissions=DEFAULT_PERMISSIONS,
    )


def test_boolean_flags_map_to_variants():
    config = resolve_configuration("my-ext", typescript=True, react=True)
    assert config.language_variant is LanguageVariant.TYPED
    assert config.ui_framework is UIFramework.COMPONENT
    assert config.typed and config.uses_framework and config.needs_bundler


def test_false_flags_mean_plain_vanilla():
    config = resolve_configuration("my-ext", typescript=False, react=False)
    assert config.language_variant is LanguageVariant.PLAIN
    assert config.ui_framework is UIFramework.VANILLA
    assert not config.needs_bundler


def test_enum_values_accepted():
    config = resolve_configuration(
        "my-ext", typescript="typed", react="component-framework", manifest_version="2",
    )
    assert config.typed
    assert config.uses_framework
    assert config.manifest_schema_version is ManifestVersion.V2


@pytest.mark.parametrize("version", [1, 4, "three", 0])
def test_unsupported_manifest_version_raises(version):
    with pytest.raises(InvalidOption):
        resolve_configuration("my-ext", manifest_version=version)


def test_unknown_language_raises():
    with pytest.raises(InvalidOption):
        resolve_configuration("my-ext", typescript="coffeescript")


def test_unknown_framework_raises():
    with pytest.raises(InvalidOption):
        resolve_configuration("my-ext", react="vue")


def test_configuration_is_frozen():
    config = resolve_configuration("my-ext")
    with pytest.raises(Exception):
        config.project_name = "other"  # type: ignore[misc]


# ─── permissions ─────────────────────────────────────────────────────────────

def test_permissions_none_gives_default():
    assert resolve_permissions(None) == DEFAULT_PERMISSIONS


def test_permissions_empty_gives_default():
    assert resolve_permissions([]) == DEFAULT_PERMISSIONS
    assert resolve_permissions(["", "  "]) == DEFAULT_PERMISSIONS


def test_permissions_strip_and_dedupe_keep_order():
    assert resolve_permissions([" tabs", "storage", "tabs ", ""]) == ("tabs", "storage")


def test_permissions_comma_string_split():
    assert resolve_permissions("storage, tabs,activeTab") == ("storage", "tabs", "activeTab")


def test_permissions_stored_as_tuple_on_configuration():
    config = resolve_configuration("my-ext", permissions=["tabs"])
    assert config.permissions == ("tabs",)


# ─── settings ────────────────────────────────────────────────────────────────

def test_settings_defaults_with_empty_env():
    assert load_settings({}) == Settings("overwrite", DEFAULT_PROJECT_NAME)


def test_settings_from_env():
    settings = load_settings({
        "WEBEXT_SCAFFOLD_ON_EXISTING": "Skip",
        "WEBEXT_SCAFFOLD_DEFAULT_NAME": "team-ext",
    })
    assert settings.on_existing == "skip"
    assert settings.default_project_name == "team-ext"


def test_settings_bad_policy_raises():
    with pytest.raises(InvalidOption):
        load_settings({"WEBEXT_SCAFFOLD_ON_EXISTING": "merge"})


def test_settings_bad_default_name_raises():
    with pytest.raises(InvalidProjectName):
        load_settings({"WEBEXT_SCAFFOLD_DEFAULT_NAME": "has space"})


def test_settings_reads_process_env(monkeypatch):
    monkeypatch.setenv("WEBEXT_SCAFFOLD_ON_EXISTING", "abort")
    monkeypatch.delenv("WEBEXT_SCAFFOLD_DEFAULT_NAME", raising=False)
    assert load_settings().on_existing == "abort"


@pytest.mark.parametrize("policy", ["overwrite", "skip", "abort", " ABORT "])
def test_validate_on_existing_normalises(policy):
    assert validate_on_existing(policy) == policy.strip().lower()
