"""Tests for the project generator (hwt.scaffolder.generator).

Covers:
- ProjectMetadata defaults and validation
- Generation with a small archive (tools mocked)
- The Drone CI descriptor and its narrower placeholder set
- Staging and promotion: corrupt archives, tool failures and existing targets
- Deterministic output
"""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from hwt.config import Config
from hwt.scaffolder.decoder import ArchiveDecodeError
from hwt.scaffolder.generator import ProjectGenerator, ProjectMetadata
from hwt.scaffolder.materializer import FilesystemError
from hwt.scaffolder.vcs import ExternalToolError

pytestmark = pytest.mark.unit

DAY = date(2023, 9, 25)


def _no_staging_left(parent: Path) -> bool:
    return not any(p.name.startswith(".hwt-staging-") for p in parent.iterdir())


# ---------------------------------------------------------------------------
# ProjectMetadata
# ---------------------------------------------------------------------------


class TestProjectMetadata:
    def test_defaults(self):
        meta = ProjectMetadata(name="demo", organization="acme", author="Jane")
        assert meta.docker_tag == "acme/demo"
        assert meta.path == "./demo"
        assert meta.drone_enabled is False

    def test_explicit_values(self):
        meta = ProjectMetadata(
            name="demo",
            organization="acme",
            author="Jane",
            docker_tag="registry.local/demo:1",
            path="/srv/demo",
            drone_enabled=True,
        )
        assert meta.docker_tag == "registry.local/demo:1"
        assert meta.path == "/srv/demo"

    def test_values_are_stripped(self):
        meta = ProjectMetadata(name="  demo ", organization=" acme", author="Jane ")
        assert (meta.name, meta.organization, meta.author) == ("demo", "acme", "Jane")
        assert meta.docker_tag == "acme/demo"

    @pytest.mark.parametrize("field", ["name", "organization", "author"])
    def test_required_fields_must_not_be_empty(self, field):
        values = {"name": "demo", "organization": "acme", "author": "Jane", field: "   "}
        with pytest.raises(ValidationError, match="empty project"):
            ProjectMetadata(**values)

    @pytest.mark.parametrize("name", ["###__TODAY__###", "###", "__PROJ_ORG", "PROJ"])
    def test_marker_text_rejected(self, name):
        with pytest.raises(ValidationError, match="placeholder markers"):
            ProjectMetadata(name=name, organization="acme", author="Jane")

    def test_frozen(self, metadata):
        with pytest.raises(ValidationError):
            metadata.name = "other"


# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------


class TestGenerate:
    def test_generates_project(self, tmp_path: Path, metadata, small_archive, mock_tools):
        gen = ProjectGenerator(metadata, archive=small_archive, today=DAY)
        root = gen.generate(base_dir=tmp_path)

        assert root == (tmp_path / "demo").resolve()
        assert (root / "app" / "main.go").read_text() == (
            "// demo by Jane\n// (c) acme 09/25/2023\npackage main\n"
        )
        assert (root / "demo.json").read_text() == "{}"
        assert not (root / ".drone.yml").exists()
        assert gen.files_written == ["app/main.go", "demo.json"]
        assert _no_staging_left(tmp_path)

    def test_tools_run_inside_staging(self, tmp_path: Path, metadata, small_archive, mock_tools):
        ProjectGenerator(metadata, archive=small_archive, today=DAY).generate(base_dir=tmp_path)

        git_root = mock_tools.init_repository.call_args.args[0]
        assert git_root.parent == tmp_path.resolve()
        assert git_root.name.startswith(".hwt-staging-")
        assert mock_tools.init_repository.call_args.kwargs["branch"] == "main"
        assert mock_tools.init_module.call_args.args[1] == "demo"

    def test_tools_can_be_skipped(self, tmp_path: Path, metadata, small_archive, mock_tools, no_tools_config):
        ProjectGenerator(metadata, no_tools_config, archive=small_archive, today=DAY).generate(base_dir=tmp_path)
        mock_tools.init_repository.assert_not_called()
        mock_tools.init_module.assert_not_called()

    def test_absolute_target_path(self, tmp_path: Path, small_archive, mock_tools):
        target = tmp_path / "nested" / "projects" / "svc"
        meta = ProjectMetadata(name="demo", organization="acme", author="Jane", path=str(target))
        root = ProjectGenerator(meta, archive=small_archive, today=DAY).generate()
        assert root == target.resolve()
        assert (target / "app" / "main.go").is_file()

    def test_existing_empty_target_is_used(self, tmp_path: Path, metadata, small_archive, mock_tools):
        (tmp_path / "demo").mkdir()
        root = ProjectGenerator(metadata, archive=small_archive, today=DAY).generate(base_dir=tmp_path)
        assert (root / "demo.json").is_file()

    def test_existing_non_empty_target_rejected(self, tmp_path: Path, metadata, small_archive, mock_tools):
        target = tmp_path / "demo"
        target.mkdir()
        (target / "keep.txt").write_text("mine")

        with pytest.raises(FilesystemError, match="already exists"):
            ProjectGenerator(metadata, archive=small_archive, today=DAY).generate(base_dir=tmp_path)

        assert sorted(p.name for p in target.iterdir()) == ["keep.txt"]
        mock_tools.init_repository.assert_not_called()

    def test_deterministic(self, tmp_path: Path, small_archive, mock_tools, read_tree):
        trees = []
        for target in ("one", "two"):
            meta = ProjectMetadata(
                name="demo", organization="acme", author="Jane",
                path=str(tmp_path / target), drone_enabled=True,
            )
            root = ProjectGenerator(meta, archive=small_archive, today=DAY).generate()
            trees.append(read_tree(root))
        assert trees[0] == trees[1]


# ---------------------------------------------------------------------------
# Drone CI descriptor
# ---------------------------------------------------------------------------


class TestDroneDescriptor:
    def test_descriptor_written(self, drone_metadata, small_archive, mock_tools):
        root = ProjectGenerator(drone_metadata, archive=small_archive, today=DAY).generate()
        text = (root / ".drone.yml").read_text()

        assert "acme" in text
        assert "demo" in text
        assert "###__PROJ_" not in text

    def test_descriptor_is_valid_yaml(self, drone_metadata, small_archive, mock_tools):
        root = ProjectGenerator(drone_metadata, archive=small_archive, today=DAY).generate()
        pipeline = yaml.safe_load((root / ".drone.yml").read_text())

        assert pipeline["kind"] == "pipeline"
        assert pipeline["name"] == "acme::demo"
        assert [step["name"] for step in pipeline["steps"]] == ["build", "docker", "deploy"]

    def test_only_org_and_name_are_substituted(self, drone_metadata, small_archive, mock_tools):
        import base64

        doc = "org: ###__PROJ_ORG__###\nname: ###__PROJ_NAME__###\nby: ###__PROJ_AUTHOR__###\n"
        blob = base64.b64encode(doc.encode()).decode()
        root = ProjectGenerator(
            drone_metadata, archive=small_archive, drone_descriptor=blob, today=DAY
        ).generate()

        assert (root / ".drone.yml").read_text() == (
            "org: acme\nname: demo\nby: ###__PROJ_AUTHOR__###\n"
        )

    def test_custom_filename(self, drone_metadata, small_archive, mock_tools):
        config = Config(drone_filename=".drone.yaml")
        root = ProjectGenerator(drone_metadata, config, archive=small_archive, today=DAY).generate()
        assert (root / ".drone.yaml").is_file()


# ---------------------------------------------------------------------------
# Failures leave nothing behind
# ---------------------------------------------------------------------------


class TestAtomicity:
    @pytest.mark.parametrize(
        "archive",
        ["this is not base64 !!", "aGVsbG8gd29ybGQ=", "QlpoOTFBWSZTWTwPUP4ACsL/0//9YBB///////////////5AUARA"],
    )
    def test_corrupt_archive_writes_nothing(self, tmp_path: Path, metadata, archive, mock_tools):
        with pytest.raises(ArchiveDecodeError):
            ProjectGenerator(metadata, archive=archive, today=DAY).generate(base_dir=tmp_path)

        assert not (tmp_path / "demo").exists()
        assert list(tmp_path.iterdir()) == []
        mock_tools.init_repository.assert_not_called()

    def test_corrupt_descriptor_writes_nothing(self, drone_metadata, small_archive, tmp_path: Path, mock_tools):
        with pytest.raises(ArchiveDecodeError):
            ProjectGenerator(
                drone_metadata, archive=small_archive, drone_descriptor="***", today=DAY
            ).generate()
        assert list(tmp_path.iterdir()) == []

    def test_malformed_tar_removes_staging(self, tmp_path: Path, metadata, mock_tools):
        from hwt.scaffolder.decoder import encode_archive

        archive = encode_archive(b"not a tar stream at all " * 40)
        with pytest.raises(ArchiveDecodeError) as exc_info:
            ProjectGenerator(metadata, archive=archive, today=DAY).generate(base_dir=tmp_path)

        assert exc_info.value.stage == "archive"
        assert list(tmp_path.iterdir()) == []

    def test_tool_failure_removes_staging(self, tmp_path: Path, metadata, small_archive, mock_tools):
        mock_tools.init_module.side_effect = ExternalToolError("go: command failed", command="go mod init demo")

        with pytest.raises(ExternalToolError):
            ProjectGenerator(metadata, archive=small_archive, today=DAY).generate(base_dir=tmp_path)

        assert list(tmp_path.iterdir()) == []

    def test_write_failure_removes_staging(self, tmp_path: Path, metadata, mock_tools):
        from hwt.scaffolder.decoder import encode_archive
        from hwt.scaffolder.walker import EntryKind, TemplateEntry, pack_entries

        entries = [
            TemplateEntry(path="main.go", kind=EntryKind.DIRECTORY, mode=0o755),
            TemplateEntry(path="main.go.tpl", kind=EntryKind.FILE, content=b"x"),
        ]
        archive = encode_archive(pack_entries(entries))

        with pytest.raises(FilesystemError):
            ProjectGenerator(metadata, archive=archive, today=DAY).generate(base_dir=tmp_path)

        assert list(tmp_path.iterdir()) == []

    def test_target_path_relative_to_base_dir(self, tmp_path: Path, metadata):
        gen = ProjectGenerator(metadata, today=DAY)
        assert gen.target_path(tmp_path) == (tmp_path / "demo").resolve()
