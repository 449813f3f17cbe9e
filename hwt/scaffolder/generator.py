"""Main scaffolding orchestrator.

Takes ``ProjectMetadata`` and generates a bare service project: the embedded
template tree with every placeholder resolved, a git repository, a Go module
manifest, an empty ``<name>.json`` and, on request, a Drone CI descriptor.

The project is assembled in a staging directory beside the target path and
moved into place with a single rename once every step has succeeded. A
failed run removes the staging directory and leaves the target untouched.
"""

from __future__ import annotations

import os
import shutil
import tempfile
from datetime import date
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from hwt.config import Config
from hwt.scaffolder.blobs import DRONE_DESCRIPTOR, TEMPLATE_ARCHIVE
from hwt.scaffolder.decoder import decode_archive, decode_document
from hwt.scaffolder.materializer import FilesystemError, Materializer
from hwt.scaffolder.placeholders import (
    PROJ_NAME,
    PROJ_ORG,
    PlaceholderSet,
    forms_marker,
    substitute,
)
from hwt.scaffolder.vcs import init_module, init_repository
from hwt.scaffolder.walker import walk_entries
from hwt.utils import is_empty_dir, print_ok, print_step


# ---------------------------------------------------------------------------
# Metadata model
# ---------------------------------------------------------------------------


class ProjectMetadata(BaseModel):
    """Pydantic model describing the project to generate."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Project name, also the Go module name")
    organization: str = Field(..., description="Owning organization")
    author: str = Field(..., description="Author written into file headers")
    docker_tag: str = Field(default="", description="Docker image tag, defaults to <org>/<name>")
    path: str = Field(default="", description="Target directory, defaults to ./<name>")
    drone_enabled: bool = Field(default=False, description="Also write a .drone.yml")

    @model_validator(mode="before")
    @classmethod
    def _fill_defaults(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        name = str(data.get("name") or "").strip()
        organization = str(data.get("organization") or "").strip()
        if not str(data.get("docker_tag") or "").strip():
            data["docker_tag"] = f"{organization}/{name}"
        if not str(data.get("path") or "").strip():
            data["path"] = f"./{name}"
        return data

    @field_validator("name", "organization", "author", "docker_tag", "path")
    @classmethod
    def _not_empty(cls, value: str, info: Any) -> str:
        value = value.strip()
        label = info.field_name.replace("_", " ")
        if not value:
            raise ValueError(f"empty project {label}")
        if forms_marker(value):
            raise ValueError(f"project {label} must not contain '#' or parts of placeholder markers")
        return value


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Generates one project from the embedded templates.

    ``TODAY`` is resolved when the generator is constructed, so every file of
    the run carries the same date.
    """

    def __init__(
        self,
        metadata: ProjectMetadata,
        config: Config | None = None,
        *,
        archive: str = TEMPLATE_ARCHIVE,
        drone_descriptor: str = DRONE_DESCRIPTOR,
        today: date | None = None,
    ) -> None:
        self.metadata = metadata
        self.config = config or Config()
        self.archive = archive
        self.drone_descriptor = drone_descriptor
        self.placeholders = PlaceholderSet.resolve(
            metadata, today=today, date_format=self.config.date_format
        )
        self.files_written: list[str] = []

    # -- Public API --------------------------------------------------------

    def target_path(self, base_dir: str | Path | None = None) -> Path:
        """Absolute target directory, relative paths taken from *base_dir*."""
        path = Path(self.metadata.path).expanduser()
        if not path.is_absolute():
            path = Path(base_dir or Path.cwd()) / path
        return path.resolve()

    def generate(self, base_dir: str | Path | None = None) -> Path:
        """Generate the project and return its absolute root.

        Raises:
            ArchiveDecodeError: If an embedded blob is corrupt.
            FilesystemError: If staging, writing or promotion fails, or the
                target already exists and is not empty.
            ExternalToolError: If ``git`` or ``go`` fails.
        """
        target = self.target_path(base_dir)
        self._check_target(target)

        # Decode up front: a corrupt blob must fail before anything is created.
        raw_archive = decode_archive(self.archive)
        document = decode_document(self.drone_descriptor) if self.metadata.drone_enabled else None

        staging = self._create_staging(target)
        try:
            self._init_tools(staging)
            self._unpack(staging, raw_archive)
            if document is not None:
                self._write_drone(staging, document)
            self._promote(staging, target)
        except BaseException:
            shutil.rmtree(staging, ignore_errors=True)
            raise

        return target

    # -- Steps -------------------------------------------------------------

    def _init_tools(self, root: Path) -> None:
        """Initialise the git repository and the Go module."""
        print_step("Making working directory")
        timeout = float(self.config.tool_timeout)
        if self.config.init_vcs:
            init_repository(root, branch=self.config.vcs_branch, timeout=timeout)
        if self.config.init_module:
            init_module(root, self.metadata.name, timeout=timeout)
        print_ok()

    def _unpack(self, root: Path, raw_archive: bytes) -> None:
        """Materialize the template tree and the ``<name>.json`` file."""
        print_step("Unpacking templates")
        materializer = Materializer(root, self.placeholders)
        written = materializer.materialize(walk_entries(raw_archive))
        written.append(materializer.write_metadata_file(self.metadata.name))
        self.files_written = sorted(p.relative_to(materializer.root).as_posix() for p in written)
        print_ok()

    def _write_drone(self, root: Path, document: str) -> None:
        """Write the CI descriptor with the organization and name resolved."""
        print_step(f"Generating {self.config.drone_filename}")
        narrowed = self.placeholders.subset(PROJ_ORG, PROJ_NAME)
        materializer = Materializer(root, narrowed)
        materializer.write_document(self.config.drone_filename, substitute(document, narrowed))
        print_ok()

    # -- Staging -----------------------------------------------------------

    def _check_target(self, target: Path) -> None:
        if target.exists() and not is_empty_dir(target):
            raise FilesystemError(
                f"Target path already exists and is not an empty directory: {target}",
                path=target,
            )

    def _create_staging(self, target: Path) -> Path:
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            return Path(tempfile.mkdtemp(prefix=self.config.staging_prefix, dir=target.parent))
        except OSError as exc:
            raise FilesystemError(
                f"Cannot create staging directory in {target.parent}: {exc}",
                path=target.parent,
            ) from exc

    def _promote(self, staging: Path, target: Path) -> None:
        """Move the finished staging directory to *target* in one rename."""
        try:
            if target.exists():
                target.rmdir()
            os.replace(staging, target)
            os.chmod(target, 0o755)
        except OSError as exc:
            raise FilesystemError(f"Cannot move project into {target}: {exc}", path=target) from exc
