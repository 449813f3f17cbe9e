"""Shared pytest fixtures for the hwt test suite.

Provides reusable fixtures for:
- Project metadata and a resolved placeholder set with a pinned date
- Small in-memory template archives
- A configuration that skips external tools
- Mocked ``git``/``go`` invocations
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from hwt.config import Config
from hwt.scaffolder.decoder import encode_archive
from hwt.scaffolder.generator import ProjectMetadata
from hwt.scaffolder.placeholders import PlaceholderSet
from hwt.scaffolder.walker import EntryKind, TemplateEntry, pack_entries

FIXED_DAY = date(2023, 9, 25)


# ---------------------------------------------------------------------------
# Metadata & placeholders
# ---------------------------------------------------------------------------

@pytest.fixture
def metadata() -> ProjectMetadata:
    """Metadata for a project called ``demo`` owned by ``acme``."""
    return ProjectMetadata(name="demo", organization="acme", author="Jane")


@pytest.fixture
def drone_metadata(tmp_path: Path) -> ProjectMetadata:
    """Same project with the Drone CI descriptor requested."""
    return ProjectMetadata(
        name="demo",
        organization="acme",
        author="Jane",
        drone_enabled=True,
        path=str(tmp_path / "demo"),
    )


@pytest.fixture
def placeholders(metadata: ProjectMetadata) -> PlaceholderSet:
    """Full placeholder set resolved on 09/25/2023."""
    return PlaceholderSet.resolve(metadata, today=FIXED_DAY)


# ---------------------------------------------------------------------------
# Template archives
# ---------------------------------------------------------------------------

@pytest.fixture
def small_entries() -> list[TemplateEntry]:
    """One directory followed by one nested template file."""
    return [
        TemplateEntry(path="app", kind=EntryKind.DIRECTORY, mode=0o755),
        TemplateEntry(
            path="app/main.go.tpl",
            kind=EntryKind.FILE,
            content=(
                b"// ###__PROJ_NAME__### by ###__PROJ_AUTHOR__###\n"
                b"// (c) ###__PROJ_ORG__### ###__TODAY__###\n"
                b"package main\n"
            ),
            mode=0o644,
        ),
    ]


@pytest.fixture
def small_archive(small_entries: list[TemplateEntry]) -> str:
    """Embeddable blob of ``small_entries``."""
    return encode_archive(pack_entries(small_entries))


# ---------------------------------------------------------------------------
# Configuration & external tools
# ---------------------------------------------------------------------------

@pytest.fixture
def no_tools_config() -> Config:
    """Config that skips ``git init`` and ``go mod init``."""
    return Config(init_vcs=False, init_module=False)


@pytest.fixture
def mock_tools():
    """Patch the external tool calls made by the generator."""
    with patch("hwt.scaffolder.generator.init_repository") as git_init, patch(
        "hwt.scaffolder.generator.init_module"
    ) as mod_init:
        tools = MagicMock()
        tools.init_repository = git_init
        tools.init_module = mod_init
        yield tools


@pytest.fixture
def read_tree():
    """Return a helper mapping every file under a root to its bytes."""

    def _read(root: Path) -> dict[str, bytes]:
        return {
            p.relative_to(root).as_posix(): p.read_bytes()
            for p in sorted(root.rglob("*"))
            if p.is_file()
        }

    return _read
