"""hwt scaffolder -- turns the embedded template archive into a project.

Quick usage::

    from hwt.scaffolder import ProjectGenerator, ProjectMetadata

    metadata = ProjectMetadata(name="demo", organization="acme", author="Jane")
    project_path = ProjectGenerator(metadata).generate()
"""

from hwt.scaffolder.decoder import ArchiveDecodeError, decode_archive, decode_document, encode_archive
from hwt.scaffolder.generator import ProjectGenerator, ProjectMetadata
from hwt.scaffolder.materializer import FilesystemError, Materializer
from hwt.scaffolder.placeholders import PlaceholderSet, substitute, substitute_bytes
from hwt.scaffolder.vcs import ExternalToolError
from hwt.scaffolder.walker import (
    EntryKind,
    TarHeader,
    TemplateEntry,
    collect_tree,
    pack_entries,
    walk_entries,
)

__all__ = [
    "ArchiveDecodeError",
    "EntryKind",
    "ExternalToolError",
    "FilesystemError",
    "Materializer",
    "PlaceholderSet",
    "ProjectGenerator",
    "ProjectMetadata",
    "TarHeader",
    "TemplateEntry",
    "collect_tree",
    "decode_archive",
    "decode_document",
    "encode_archive",
    "pack_entries",
    "substitute",
    "substitute_bytes",
    "walk_entries",
]
