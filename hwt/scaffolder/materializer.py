"""Writes template entries to disk under an explicit root directory.

Every path is resolved against the root handed to the :class:`Materializer`;
nothing depends on the process working directory. Each file write creates
its own parent directories, so the result does not depend on the archive
listing directories before their files.
"""

from __future__ import annotations

import json
import os
import stat
from collections.abc import Iterable
from pathlib import Path

from hwt.scaffolder.placeholders import PlaceholderSet, substitute, substitute_bytes
from hwt.scaffolder.walker import TemplateEntry

TEMPLATE_SUFFIX = ".tpl"


class FilesystemError(Exception):
    """Raised when a directory or file cannot be created or written."""

    def __init__(self, message: str, path: str | Path = "") -> None:
        self.path = str(path)
        super().__init__(message)


def output_name(path: str) -> str:
    """Strip one literal ``.tpl`` suffix from a relative path, if present."""
    return path[: -len(TEMPLATE_SUFFIX)] if path.endswith(TEMPLATE_SUFFIX) else path


class Materializer:
    """Materializes a template entry sequence under *root*.

    Directory entries are created idempotently. File entries have their path
    and content substituted, lose the ``.tpl`` suffix and overwrite whatever
    exists at the resolved location. The first failure aborts with
    :class:`FilesystemError`.
    """

    def __init__(self, root: str | Path, placeholders: PlaceholderSet) -> None:
        self.root = Path(root).resolve()
        self.placeholders = placeholders

    # -- Public API --------------------------------------------------------

    def materialize(self, entries: Iterable[TemplateEntry]) -> list[Path]:
        """Write every entry and return the paths of the files written."""
        written: list[Path] = []
        for entry in entries:
            if entry.is_dir:
                self.make_dir(self.resolve(entry.path))
            else:
                written.append(self.write_entry(entry))
        return written

    def write_entry(self, entry: TemplateEntry) -> Path:
        """Substitute and write a single file entry.

        The path is substituted first and loses its ``.tpl`` suffix after,
        so a resolved value ending in ``.tpl`` is stripped as well.
        """
        relative = output_name(substitute(entry.path, self.placeholders))
        target = self._under_root(relative, entry.path)
        content = substitute_bytes(entry.content, self.placeholders)
        self._write(target, content, entry.mode)
        return target

    def write_metadata_file(self, project_name: str) -> Path:
        """Write the ``<project_name>.json`` placeholder holding ``{}``."""
        target = self.resolve(f"{project_name}.json")
        self._write(target, json.dumps({}).encode("utf-8"))
        return target

    def write_document(self, filename: str, text: str) -> Path:
        """Write one text document at *filename* relative to the root."""
        target = self.resolve(filename)
        self._write(target, text.encode("utf-8"))
        return target

    def resolve(self, relative: str) -> Path:
        """Substitute *relative* and resolve it under the root.

        Raises:
            FilesystemError: If the result lands outside the root.
        """
        return self._under_root(substitute(relative, self.placeholders), relative)

    # -- Internals ---------------------------------------------------------

    def _under_root(self, resolved: str, template_path: str) -> Path:
        target = (self.root / resolved).resolve()
        if target != self.root and self.root not in target.parents:
            raise FilesystemError(
                f"Template path {template_path!r} resolves outside of {self.root}",
                path=target,
            )
        return target

    def make_dir(self, path: Path) -> None:
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise FilesystemError(f"Cannot create directory {path}: {exc}", path=path) from exc

    def _write(self, path: Path, content: bytes, mode: int | None = None) -> None:
        self.make_dir(path.parent)
        try:
            path.write_bytes(content)
            if mode:
                # The owner write bit is always kept.
                os.chmod(path, (mode & 0o777) | stat.S_IWUSR)
        except OSError as exc:
            raise FilesystemError(f"Cannot write {path}: {exc}", path=path) from exc
