"""Sequential walking of template tar streams.

:func:`walk_entries` turns a decoded tar stream into ``TemplateEntry``
records one member at a time, reading the stream forward only.
:func:`pack_entries` and :func:`collect_tree` go the other way and are used
to build the embedded archive from a template source directory.
"""

from __future__ import annotations

import enum
import io
import os
import tarfile
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import BinaryIO

from hwt.scaffolder.decoder import ArchiveDecodeError
from hwt.utils import print_warning

DEFAULT_DIR_MODE = 0o755
DEFAULT_FILE_MODE = 0o644


class EntryKind(str, enum.Enum):
    """Archive member kinds the generator knows how to materialize."""

    DIRECTORY = "directory"
    FILE = "file"


@dataclass(frozen=True)
class TarHeader:
    """Stored tar header fields of an archive member.

    Kept so that packing walked entries again writes the same headers.
    An empty ``name`` means the entry path is used.
    """

    name: str = ""
    mtime: int = 0
    uid: int = 0
    gid: int = 0
    uname: str = ""
    gname: str = ""

    @classmethod
    def from_member(cls, member: tarfile.TarInfo) -> "TarHeader":
        return cls(
            name=member.name,
            mtime=int(member.mtime),
            uid=member.uid,
            gid=member.gid,
            uname=member.uname,
            gname=member.gname,
        )


@dataclass(frozen=True)
class TemplateEntry:
    """One directory or file of a template tree."""

    path: str
    kind: EntryKind
    content: bytes = b""
    mode: int = DEFAULT_FILE_MODE
    header: TarHeader | None = field(default=None, compare=False, repr=False)

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


def normalize_entry_path(name: str) -> str:
    """Normalize an archive member name to a relative forward-slash path.

    ``"./handler/"`` becomes ``"handler"`` and the archive root (``"./"``)
    becomes ``"."``.

    Raises:
        ArchiveDecodeError: If the name is absolute or escapes the root.
    """
    posix = PurePosixPath(name.replace("\\", "/"))
    if posix.is_absolute():
        raise ArchiveDecodeError("archive", f"absolute member path: {name!r}")
    parts = [part for part in posix.parts if part != "."]
    if ".." in parts:
        raise ArchiveDecodeError("archive", f"member path escapes the root: {name!r}")
    return "/".join(parts) or "."


def walk_entries(stream: bytes | BinaryIO) -> Iterator[TemplateEntry]:
    """Yield the entries of a tar stream in physical order.

    The tar file is opened in stream mode, so only the current member's
    content is held in memory. Directories and regular files are yielded;
    any other member type is skipped with a warning.

    Raises:
        ArchiveDecodeError: ``stage="archive"`` on malformed tar data or an
            unsafe member path.
    """
    fileobj = io.BytesIO(stream) if isinstance(stream, (bytes, bytearray)) else stream
    try:
        with tarfile.open(fileobj=fileobj, mode="r|") as archive:
            for member in archive:
                if member.isdir():
                    yield TemplateEntry(
                        path=normalize_entry_path(member.name),
                        kind=EntryKind.DIRECTORY,
                        mode=member.mode or DEFAULT_DIR_MODE,
                        header=TarHeader.from_member(member),
                    )
                elif member.isreg():
                    path = normalize_entry_path(member.name)
                    handle = archive.extractfile(member)
                    content = handle.read() if handle is not None else b""
                    yield TemplateEntry(
                        path=path,
                        kind=EntryKind.FILE,
                        content=content,
                        mode=member.mode or DEFAULT_FILE_MODE,
                        header=TarHeader.from_member(member),
                    )
                else:
                    print_warning(
                        f"Skipping unsupported archive member {member.name!r} "
                        f"(type {member.type!r})"
                    )
    except tarfile.TarError as exc:
        raise ArchiveDecodeError("archive", f"malformed tar stream ({exc})") from exc


def pack_entries(entries: Iterable[TemplateEntry]) -> bytes:
    """Serialise entries into a deterministic GNU tar stream.

    Entries read by :func:`walk_entries` are written with their stored
    member name, modification time and ownership, so the embedded archive
    packs back to identical bytes. Other entries get a zeroed header.
    """
    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w", format=tarfile.GNU_FORMAT) as archive:
        for entry in entries:
            header = entry.header or TarHeader()
            info = tarfile.TarInfo(name=header.name or entry.path)
            info.mode = entry.mode
            info.mtime = header.mtime
            info.uid = header.uid
            info.gid = header.gid
            info.uname = header.uname
            info.gname = header.gname
            if entry.is_dir:
                info.type = tarfile.DIRTYPE
                archive.addfile(info)
            else:
                info.type = tarfile.REGTYPE
                info.size = len(entry.content)
                archive.addfile(info, io.BytesIO(entry.content))
    return buffer.getvalue()


def collect_tree(directory: str | Path) -> list[TemplateEntry]:
    """Read a template source directory into entries.

    Walks top-down in sorted order, so every directory precedes its files.
    Symlinks and other special files are not followed.
    """
    root = Path(directory)
    if not root.is_dir():
        raise NotADirectoryError(f"Template directory not found: {root}")

    entries: list[TemplateEntry] = []
    for current, dirnames, filenames in os.walk(root):
        dirnames.sort()
        base = Path(current)
        for dirname in dirnames:
            rel = (base / dirname).relative_to(root).as_posix()
            entries.append(TemplateEntry(path=rel, kind=EntryKind.DIRECTORY, mode=DEFAULT_DIR_MODE))
        for filename in sorted(filenames):
            file_path = base / filename
            if file_path.is_symlink() or not file_path.is_file():
                continue
            entries.append(
                TemplateEntry(
                    path=file_path.relative_to(root).as_posix(),
                    kind=EntryKind.FILE,
                    content=file_path.read_bytes(),
                    mode=file_path.stat().st_mode & 0o777,
                )
            )
    return entries
