"""Decoding of the embedded template blobs.

An archive blob is base64 text wrapping a bzip2 stream wrapping a tar
stream. A document blob is base64 text wrapping a UTF-8 document. Both are
decoded completely before anything touches the file system, so a corrupt
blob aborts the run with nothing written.
"""

from __future__ import annotations

import base64
import binascii
import bz2


class ArchiveDecodeError(Exception):
    """Raised when an embedded blob cannot be decoded.

    ``stage`` is one of ``"encoding"``, ``"compression"`` or ``"archive"``.
    """

    def __init__(self, stage: str, message: str) -> None:
        self.stage = stage
        super().__init__(f"Template {stage} error: {message}")


def _b64decode(blob: str) -> bytes:
    compact = "".join(blob.split())
    try:
        return base64.b64decode(compact, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ArchiveDecodeError("encoding", f"invalid base64 data ({exc})") from exc


def decode_archive(blob: str) -> bytes:
    """Decode an archive blob into the raw tar byte stream.

    Whitespace (line wrapping) is ignored; any other character outside the
    base64 alphabet is an error.

    Raises:
        ArchiveDecodeError: ``stage="encoding"`` for malformed base64,
            ``stage="compression"`` for a bad or truncated bzip2 stream.
    """
    compressed = _b64decode(blob)
    try:
        return bz2.decompress(compressed)
    except (OSError, EOFError, ValueError) as exc:
        raise ArchiveDecodeError("compression", f"invalid bzip2 stream ({exc})") from exc


def decode_document(blob: str) -> str:
    """Decode a single-document blob (base64 only, no archive framing)."""
    raw = _b64decode(blob)
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ArchiveDecodeError("encoding", f"document is not UTF-8 ({exc})") from exc


def encode_archive(raw: bytes) -> str:
    """Compress a tar stream and wrap it for embedding.

    The output uses bzip2 level 9 and 76-column base64 lines, the layout of
    the blobs in :mod:`hwt.scaffolder.blobs`.
    """
    return base64.encodebytes(bz2.compress(raw, compresslevel=9)).decode("ascii")
