"""Tests for the publish pipeline."""

from unittest.mock import Mock

import pytest

from assetpush.adapters import create_file_adapter
from assetpush.core.errors import (
    CopyError,
    InvalidNameError,
    ManifestParseError,
    NotFoundError,
)
from assetpush.manifest import PreserveMode
from assetpush.publish import PublishPipeline, create_publish_pipeline


@pytest.fixture
def make_pipeline(memory_registry, manifest_service, asset_root):
    """Factory building a pipeline around a fake build invoker."""

    def _make(builder, **kwargs):
        return create_publish_pipeline(
            registry=memory_registry,
            build_invoker=builder,
            manifest_service=manifest_service,
            asset_root=asset_root,
            **kwargs,
        )

    return _make


class TestPublishOne:
    """Test publishing a single integration."""

    def test_copies_artifacts_and_returns_names(
        self, memory_registry, fake_builder_factory, make_pipeline, asset_root
    ):
        record = memory_registry.create("json", "Plugins/Json")
        builder = fake_builder_factory(
            outputs={
                "json": [
                    "Newtonsoft.Json.dll",
                    "Newtonsoft.Json.pdb",
                    "integration.json.dll",
                    "integration.json.deps.json",
                ]
            }
        )
        pipeline = make_pipeline(builder)

        names = pipeline.publish_one(record)

        assert names == ["Newtonsoft.Json"]
        target = asset_root / "Plugins" / "Json"
        assert sorted(p.name for p in target.iterdir()) == ["Newtonsoft.Json.dll"]

    def test_same_base_name_listed_once(
        self, memory_registry, fake_builder_factory, make_pipeline
    ):
        record = memory_registry.create("json", "Plugins")
        builder = fake_builder_factory(
            outputs={"json": ["Newtonsoft.Json.dll", "Newtonsoft.Json.xml"]}
        )

        names = make_pipeline(builder).publish_one(record)

        assert names == ["Newtonsoft.Json"]

    def test_existing_files_are_overwritten(
        self, memory_registry, fake_builder_factory, make_pipeline, asset_root
    ):
        record = memory_registry.create("json", "Plugins")
        stale = asset_root / "Plugins" / "Lib.dll"
        stale.parent.mkdir(parents=True)
        stale.write_text("stale")

        make_pipeline(fake_builder_factory(outputs={"json": ["Lib.dll"]})).publish_one(
            record
        )

        assert stale.read_text() == "json:Lib.dll"


class TestPublishAll:
    """Test publish_all across integrations."""

    def test_publishes_all_and_creates_manifest(
        self, memory_registry, fake_builder_factory, make_pipeline, manifest_service
    ):
        memory_registry.create("beta", "Plugins/Beta")
        memory_registry.create("alpha", "Plugins/Alpha")
        builder = fake_builder_factory(
            outputs={
                "alpha": ["A.dll", "Shared.dll"],
                "beta": ["B.dll", "Shared.dll"],
            }
        )

        result = make_pipeline(builder).publish_all()

        assert result.success is True
        assert result.published == ["alpha", "beta"]
        assert result.artifact_names == ["A", "Shared", "B"]
        assert result.manifest_written is True
        assert result.added_entries == 3
        assert manifest_service.load().names() == ["A", "Shared", "B"]
        assert builder.built == ["alpha", "beta"]

    def test_failed_build_contributes_no_names(
        self, memory_registry, fake_builder_factory, make_pipeline, manifest_service
    ):
        memory_registry.create("good", "Plugins/Good")
        memory_registry.create("bad", "Plugins/Bad")
        builder = fake_builder_factory(
            outputs={"good": ["Good.dll"], "bad": ["Bad.dll"]}, failing={"bad"}
        )

        result = make_pipeline(builder).publish_all()

        assert result.success is False
        assert result.published == ["good"]
        assert list(result.failed) == ["bad"]
        assert "exited with code 1" in result.failed["bad"]
        assert manifest_service.load().names() == ["Good"]

    def test_copy_failure_is_reported(
        self, memory_registry, fake_builder_factory, manifest_service, asset_root
    ):
        memory_registry.create("json", "Plugins")
        adapter = Mock(wraps=create_file_adapter())
        adapter.copy_file.side_effect = CopyError("disk full")
        pipeline = PublishPipeline(
            registry=memory_registry,
            build_invoker=fake_builder_factory(outputs={"json": ["Lib.dll"]}),
            manifest_service=manifest_service,
            asset_root=asset_root,
            file_adapter=adapter,
        )

        result = pipeline.publish_all()

        assert result.failed == {"json": "disk full"}
        assert result.manifest_written is False
        assert not manifest_service.exists()

    def test_existing_manifest_is_appended(
        self, memory_registry, fake_builder_factory, make_pipeline, manifest_service
    ):
        manifest_service.manifest_path.write_text(
            '<linker>\n\t<assembly fullname="Lib" preserve="all" />\n</linker>\n'
        )
        memory_registry.create("json", "Plugins")
        builder = fake_builder_factory(outputs={"json": ["Lib.dll", "New.dll"]})

        result = make_pipeline(builder).publish_all()

        assert result.added_entries == 1
        assert manifest_service.manifest_path.read_text() == (
            "<linker>\n"
            '\t<assembly fullname="Lib" preserve="all" />\n'
            '\t<assembly fullname="New" preserve="full" />\n'
            "</linker>\n"
        )

    def test_second_push_leaves_manifest_unchanged(
        self, memory_registry, fake_builder_factory, make_pipeline, manifest_service
    ):
        memory_registry.create("json", "Plugins")
        builder = fake_builder_factory(outputs={"json": ["Lib.dll"]})
        pipeline = make_pipeline(builder)

        pipeline.publish_all()
        first = manifest_service.manifest_path.read_bytes()
        result = pipeline.publish_all()

        assert result.added_entries == 0
        assert manifest_service.manifest_path.read_bytes() == first

    def test_manifest_saved_once_per_run(
        self, memory_registry, fake_builder_factory, manifest_service, asset_root
    ):
        for name in ["a", "b", "c"]:
            memory_registry.create(name, f"Plugins/{name}")
        service = Mock(wraps=manifest_service)
        service.manifest_path = manifest_service.manifest_path
        builder = fake_builder_factory(
            outputs={"a": ["A.dll"], "b": ["B.dll"], "c": ["C.dll"]}
        )

        create_publish_pipeline(
            memory_registry, builder, service, asset_root
        ).publish_all()

        service.save.assert_called_once()
        service.load.assert_called_once()

    def test_corrupt_manifest_aborts_before_building(
        self, memory_registry, fake_builder_factory, make_pipeline, manifest_service
    ):
        manifest_service.manifest_path.write_text("<linker><assembly")
        memory_registry.create("json", "Plugins")
        builder = fake_builder_factory(outputs={"json": ["Lib.dll"]})

        with pytest.raises(ManifestParseError):
            make_pipeline(builder).publish_all()

        assert builder.built == []
        assert manifest_service.manifest_path.read_text() == "<linker><assembly"

    def test_no_manifest_created_without_artifacts(
        self, memory_registry, fake_builder_factory, make_pipeline, manifest_service
    ):
        memory_registry.create("empty", "Plugins")

        result = make_pipeline(fake_builder_factory()).publish_all()

        assert result.success is True
        assert result.manifest_written is False
        assert not manifest_service.exists()

    def test_no_integrations(self, fake_builder_factory, make_pipeline):
        result = make_pipeline(fake_builder_factory()).publish_all()

        assert result.published == []
        assert result.manifest_written is False

    def test_named_integration_only(
        self, memory_registry, fake_builder_factory, make_pipeline, manifest_service
    ):
        memory_registry.create("one", "Plugins/One")
        memory_registry.create("two", "Plugins/Two")
        builder = fake_builder_factory(outputs={"one": ["One.dll"], "two": ["Two.dll"]})

        result = make_pipeline(builder).publish_all("two")

        assert builder.built == ["two"]
        assert result.published == ["two"]
        assert manifest_service.load().names() == ["Two"]

    def test_unknown_name_raises(self, fake_builder_factory, make_pipeline):
        with pytest.raises(NotFoundError):
            make_pipeline(fake_builder_factory()).publish_all("missing")

    def test_invalid_name_raises(self, fake_builder_factory, make_pipeline):
        with pytest.raises(InvalidNameError):
            make_pipeline(fake_builder_factory()).publish_all("../outside")

    def test_unloadable_record_fails_alone(
        self, memory_registry, fake_builder_factory, make_pipeline, manifest_service
    ):
        """Test a record with an unusable config does not block the others."""
        memory_registry.create("good", "Plugins/Good")
        memory_registry.store.set("broken", {"targetPath": "../outside"})
        builder = fake_builder_factory(outputs={"good": ["Good.dll"]})

        result = make_pipeline(builder).publish_all()

        assert result.success is False
        assert result.published == ["good"]
        assert list(result.failed) == ["broken"]
        assert "Invalid config" in result.failed["broken"]
        assert builder.built == ["good"]
        assert manifest_service.load().names() == ["Good"]

    def test_named_unloadable_record_is_reported(
        self, memory_registry, fake_builder_factory, make_pipeline, manifest_service
    ):
        memory_registry.store.set("broken", {"somethingElse": 1})
        builder = fake_builder_factory()

        result = make_pipeline(builder).publish_all("broken")

        assert result.success is False
        assert list(result.failed) == ["broken"]
        assert builder.built == []
        assert not manifest_service.exists()

    def test_preserve_mode_for_new_entries(
        self, memory_registry, fake_builder_factory, make_pipeline, manifest_service
    ):
        memory_registry.create("json", "Plugins")
        builder = fake_builder_factory(outputs={"json": ["Lib.dll"]})

        make_pipeline(builder, preserve_mode=PreserveMode.ALL).publish_all()

        assert manifest_service.load().get("Lib").preserve_mode == "all"

    def test_excluded_suffixes_are_configurable(
        self, memory_registry, fake_builder_factory, make_pipeline, asset_root
    ):
        memory_registry.create("json", "Plugins")
        builder = fake_builder_factory(outputs={"json": ["Lib.dll", "Lib.xml"]})

        result = make_pipeline(builder, excluded_suffixes=(".xml",)).publish_all()

        assert result.artifact_names == ["Lib"]
        assert sorted(p.name for p in (asset_root / "Plugins").iterdir()) == ["Lib.dll"]
