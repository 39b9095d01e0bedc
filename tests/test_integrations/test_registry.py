"""Tests for IntegrationRegistry."""

import json

import pytest

from assetpush.core.errors import (
    AlreadyExistsError,
    ConfigError,
    InvalidNameError,
    InvalidPathError,
    NotFoundError,
)
from assetpush.integrations import IntegrationRegistry, MemoryIntegrationStore


class TestCreate:
    """Test registering integrations."""

    def test_create_then_list(self, memory_registry):
        record = memory_registry.create("json", "Plugins/Json")

        assert record.name == "json"
        assert record.target_path == "Plugins/Json"
        assert [r.name for r in memory_registry.list()] == ["json"]

    def test_create_duplicate_raises(self, memory_registry):
        memory_registry.create("json", "Plugins/Json")

        with pytest.raises(AlreadyExistsError, match="already exists"):
            memory_registry.create("json", "Other")

        assert [r.name for r in memory_registry.list()] == ["json"]
        assert memory_registry.load("json").target_path == "Plugins/Json"

    def test_target_path_is_normalized(self, memory_registry):
        record = memory_registry.create("json", "Plugins\\Json\\")

        assert record.target_path == "Plugins/Json"
        assert memory_registry.load("json").target_path == "Plugins/Json"

    @pytest.mark.parametrize(
        "name",
        ["", "  ", ".", "..", "a/b", "a\\b", "a:b", "a*b", "a?b", 'a"b', "a<b", "a|b"]
        + ["a\tb", " padded"],
    )
    def test_invalid_name_raises_before_mutation(self, memory_registry, name):
        with pytest.raises(InvalidNameError):
            memory_registry.create(name, "Plugins")

        assert memory_registry.list() == []

    @pytest.mark.parametrize(
        "target_path",
        ["", "   ", "/abs/path", "../outside", "Plugins/../../x", "a:b", "a*b"],
    )
    def test_invalid_path_raises_before_mutation(self, memory_registry, target_path):
        with pytest.raises(InvalidPathError):
            memory_registry.create("json", target_path)

        assert memory_registry.exists("json") is False

    def test_names_with_dots_and_dashes_are_valid(self, memory_registry):
        memory_registry.create("my-lib.v2", "Plugins")

        assert memory_registry.exists("my-lib.v2")


class TestDelete:
    """Test removing integrations."""

    def test_delete_existing(self, memory_registry):
        memory_registry.create("json", "Plugins")

        memory_registry.delete("json")

        assert memory_registry.exists("json") is False
        assert memory_registry.list() == []

    def test_delete_missing_raises(self, memory_registry):
        memory_registry.create("json", "Plugins")

        with pytest.raises(NotFoundError, match="Couldn't find integration"):
            memory_registry.delete("nonexistent")

        assert [r.name for r in memory_registry.list()] == ["json"]

    def test_delete_invalid_name_raises(self, memory_registry):
        with pytest.raises(InvalidNameError):
            memory_registry.delete("../etc")


class TestLoadAndList:
    """Test reading records back."""

    def test_load_missing_raises(self, memory_registry):
        with pytest.raises(NotFoundError):
            memory_registry.load("missing")

    def test_list_is_sorted_by_name(self, memory_registry):
        for name in ["zeta", "alpha", "mid"]:
            memory_registry.create(name, "Plugins")

        assert [r.name for r in memory_registry.list()] == ["alpha", "mid", "zeta"]

    def test_list_skips_unloadable_records(self, memory_registry):
        memory_registry.create("good", "Plugins")
        memory_registry.store.set("bad", {"targetPath": "../outside"})

        assert [r.name for r in memory_registry.list()] == ["good"]
        assert memory_registry.names() == ["bad", "good"]

    def test_load_rejects_invalid_stored_path(self, tmp_path):
        store = MemoryIntegrationStore({"bad": {"targetPath": "../outside"}})
        registry = IntegrationRegistry(tmp_path, store)

        with pytest.raises(ConfigError, match="Invalid config"):
            registry.load("bad")

    def test_load_rejects_missing_target_path(self, tmp_path):
        store = MemoryIntegrationStore({"bad": {"somethingElse": 1}})
        registry = IntegrationRegistry(tmp_path, store)

        with pytest.raises(ConfigError):
            registry.load("bad")

    def test_workspace_dir(self, memory_registry):
        record = memory_registry.create("json", "Plugins")

        assert memory_registry.workspace_dir(record) == (
            memory_registry.root / "integration.json"
        )


class TestDirectoryBackedRegistry:
    """Registry persisted as integration folders."""

    def test_create_writes_config_file(self, directory_registry):
        directory_registry.create("json", "Plugins/Json")

        config = (
            directory_registry.root / "integration.json" / "integration.json.config.json"
        )
        assert json.loads(config.read_text()) == {"targetPath": "Plugins/Json"}

    def test_records_survive_new_registry_instance(self, directory_registry):
        directory_registry.create("json", "Plugins/Json")

        reopened = IntegrationRegistry(directory_registry.root)

        assert reopened.load("json").target_path == "Plugins/Json"

    def test_delete_removes_folder_with_build_project(self, directory_registry):
        record = directory_registry.create("json", "Plugins")
        workspace = directory_registry.workspace_dir(record)
        (workspace / "obj").mkdir()
        (workspace / "integration.json.csproj").write_text("<Project />")

        directory_registry.delete("json")

        assert not workspace.exists()

    def test_folder_without_config(self, directory_registry):
        """Test a folder whose config was lost is named, removable, not loadable."""
        directory_registry.create("good", "Plugins")
        (directory_registry.root / "integration.orphan").mkdir()

        assert directory_registry.exists("orphan")
        assert directory_registry.names() == ["good", "orphan"]
        assert [r.name for r in directory_registry.list()] == ["good"]
        with pytest.raises(ConfigError, match="no config file"):
            directory_registry.load("orphan")

        directory_registry.delete("orphan")
        assert not directory_registry.exists("orphan")

    def test_unrelated_entries_are_ignored(self, directory_registry):
        directory_registry.create("json", "Plugins")
        (directory_registry.root / "notes").mkdir()
        (directory_registry.root / "integration.file").write_text("not a folder")

        assert [r.name for r in directory_registry.list()] == ["json"]

    def test_invalid_json_config_raises(self, directory_registry):
        directory_registry.create("json", "Plugins")
        config = (
            directory_registry.root / "integration.json" / "integration.json.config.json"
        )
        config.write_text("{not json")

        with pytest.raises(ConfigError, match="Cannot read config"):
            directory_registry.load("json")
