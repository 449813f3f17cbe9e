"""Placeholder substitution for template paths and contents.

Templates carry markers of the form ``###__<NAME>__###`` where NAME is one
of a closed set of token names. A :class:`PlaceholderSet` resolves those
names once per run and :func:`substitute` rewrites every active marker in a
single pass. Markers that follow the grammar but are not in the active set
are left exactly as they are.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from datetime import date
from functools import cached_property
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hwt.scaffolder.generator import ProjectMetadata

PROJ_NAME = "PROJ_NAME"
PROJ_ORG = "PROJ_ORG"
PROJ_AUTHOR = "PROJ_AUTHOR"
TODAY = "TODAY"

TOKEN_NAMES: tuple[str, ...] = (PROJ_NAME, PROJ_ORG, PROJ_AUTHOR, TODAY)

MARKER_PREFIX = "###__"
MARKER_SUFFIX = "__###"

DEFAULT_DATE_FORMAT = "%m/%d/%Y"


def marker(name: str) -> str:
    """Return the literal marker text for token *name*."""
    return f"{MARKER_PREFIX}{name}{MARKER_SUFFIX}"


def forms_marker(value: str) -> bool:
    """Return ``True`` if *value* could complete a marker with adjacent text.

    Outside its ``#`` runs a marker is ``__<NAME>__``. A value holding no
    ``#`` that is not a substring of any ``__<NAME>__`` cannot be part of a
    marker in substituted output, so a second pass finds nothing to replace.
    The empty string is a substring of everything and is rejected too.
    """
    if "#" in value:
        return True
    return any(value in f"__{name}__" for name in TOKEN_NAMES)


class PlaceholderSet(Mapping[str, str]):
    """Immutable mapping of token name to resolved value.

    Only names from ``TOKEN_NAMES`` are accepted, and every value must pass
    :func:`forms_marker`, so one substitution pass can never produce a new
    marker and substitution is idempotent.
    """

    def __init__(self, values: Mapping[str, str]) -> None:
        for name, value in values.items():
            if name not in TOKEN_NAMES:
                raise ValueError(f"Unknown placeholder token: {name}")
            if forms_marker(value):
                raise ValueError(
                    f"Value for {name} must not contain '#' or parts of placeholder markers: {value!r}"
                )
        self._values: dict[str, str] = dict(values)

    @classmethod
    def resolve(
        cls,
        metadata: "ProjectMetadata",
        today: date | None = None,
        date_format: str = DEFAULT_DATE_FORMAT,
    ) -> "PlaceholderSet":
        """Build the full set for a run.

        ``TODAY`` is evaluated here, once, and reused for every file written
        with this set.
        """
        day = today or date.today()
        return cls(
            {
                PROJ_NAME: metadata.name,
                PROJ_ORG: metadata.organization,
                PROJ_AUTHOR: metadata.author,
                TODAY: day.strftime(date_format),
            }
        )

    def subset(self, *names: str) -> "PlaceholderSet":
        """Return a narrower set holding only *names*."""
        return PlaceholderSet({name: self._values[name] for name in names})

    @cached_property
    def pattern(self) -> re.Pattern[str] | None:
        # Longest marker first so a token can never match inside a longer one.
        markers = sorted((marker(name) for name in self._values), key=len, reverse=True)
        if not markers:
            return None
        return re.compile("|".join(re.escape(m) for m in markers))

    @cached_property
    def by_marker(self) -> dict[str, str]:
        return {marker(name): value for name, value in self._values.items()}

    def __getitem__(self, name: str) -> str:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"PlaceholderSet({self._values!r})"


def substitute(text: str, placeholders: PlaceholderSet) -> str:
    """Replace every active marker in *text* in one left-to-right pass.

    Replacement text is never rescanned.
    """
    pattern = placeholders.pattern
    if pattern is None:
        return text
    lookup = placeholders.by_marker
    return pattern.sub(lambda match: lookup[match.group(0)], text)


def substitute_bytes(content: bytes, placeholders: PlaceholderSet) -> bytes:
    """Substitute markers in raw file content.

    Bytes that are not valid UTF-8 round-trip unchanged through
    ``surrogateescape``.
    """
    text = content.decode("utf-8", errors="surrogateescape")
    return substitute(text, placeholders).encode("utf-8", errors="surrogateescape")
