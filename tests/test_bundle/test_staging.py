"""Tests for resource manifest reading and staging."""

from __future__ import annotations

from pathlib import Path

import pytest

from bundle_engine.errors import AlreadyExistsError, NotFoundError
from bundle_engine.staging import read_manifest, stage_resources

from .conftest import write_manifest, write_tree


class TestReadManifest:
    @pytest.fixture(autouse=True)
    def _setup(self, bundle_tmp: Path) -> None:
        self.tmp_dir = bundle_tmp

    def test_reads_resource_list(self) -> None:
        path = write_manifest(self.tmp_dir, ["icons/app.png", "../shared/data"])
        manifest = read_manifest(path)
        assert manifest.resources == ["icons/app.png", "../shared/data"]

    def test_missing_manifest_raises_not_found(self) -> None:
        with pytest.raises(NotFoundError, match="Manifest not found"):
            read_manifest(self.tmp_dir / "resources.yaml")

    def test_missing_resources_field_raises_value_error(self) -> None:
        (self.tmp_dir / "resources.yaml").write_text("name: app\n")
        with pytest.raises(ValueError, match="resources"):
            read_manifest(self.tmp_dir / "resources.yaml")

    def test_invalid_yaml_raises_value_error(self) -> None:
        (self.tmp_dir / "resources.yaml").write_text("resources: [unclosed\n")
        with pytest.raises(ValueError, match="Invalid YAML"):
            read_manifest(self.tmp_dir / "resources.yaml")

    def test_non_string_entries_raise_value_error(self) -> None:
        (self.tmp_dir / "resources.yaml").write_text("resources:\n  - {nested: true}\n")
        with pytest.raises(ValueError, match="Invalid manifest"):
            read_manifest(self.tmp_dir / "resources.yaml")


class TestStageResources:
    @pytest.fixture(autouse=True)
    def _setup(self, bundle_tmp: Path) -> None:
        self.tmp_dir = bundle_tmp
        self.project = bundle_tmp / "project"
        write_tree(
            bundle_tmp,
            {
                "project/data/images/button.png": "button",
                "shared/icon.png": "icon",
                "project/assets/a.txt": "a",
                "project/assets/nested/b.txt": "b",
            },
        )

    def test_stages_files_and_directories_under_normalized_paths(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(self.project)
        resources_dir = self.tmp_dir / "App.app" / "Contents" / "Resources"

        result = stage_resources(["./data/images/button.png", "../shared/icon.png", "assets"], resources_dir)

        assert (resources_dir / "data" / "images" / "button.png").read_text() == "button"
        assert (resources_dir / "_up_" / "shared" / "icon.png").read_text() == "icon"
        assert (resources_dir / "assets" / "nested" / "b.txt").read_text() == "b"
        assert result.staged["../shared/icon.png"] == str(resources_dir / "_up_" / "shared" / "icon.png")
        assert len(result.staged) == 3

    def test_absolute_resource_goes_under_root_marker(self) -> None:
        resources_dir = self.tmp_dir / "Resources"
        source = self.tmp_dir / "shared" / "icon.png"

        stage_resources([str(source)], resources_dir)

        staged = resources_dir.joinpath("_root_", *source.parts[1:])
        assert staged.read_text() == "icon"

    def test_missing_resource_stops_staging(self) -> None:
        resources_dir = self.tmp_dir / "Resources"
        with pytest.raises(NotFoundError):
            stage_resources(["project/assets/a.txt", "missing.png", "shared/icon.png"], resources_dir)
        assert (resources_dir / "project" / "assets" / "a.txt").exists()
        assert not (resources_dir / "shared").exists()

    def test_directory_already_staged_raises(self) -> None:
        resources_dir = self.tmp_dir / "Resources"
        stage_resources(["project/assets"], resources_dir)
        with pytest.raises(AlreadyExistsError, match="already exists"):
            stage_resources(["project/assets"], resources_dir)
