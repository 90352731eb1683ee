"""Domain model dataclasses and enums for vocab-note-linker."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class SubjectType(str, Enum):
    """Kind of page a note belongs to; also the URL path segment."""

    VOCABULARY = "vocabulary"
    KANJI = "kanji"


class LinkKind(str, Enum):
    """What activating a rendered link does."""

    ENTRY = "entry"
    ALL = "all"
    COPY = "copy"
    EVERYTHING = "everything"


# ---------------------------------------------------------------------------
# Note side
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class NoteContext:
    """The subject of the page the note is displayed on."""

    current_slug: str | None = None
    subject_type: SubjectType = SubjectType.VOCABULARY


@dataclass(frozen=True, slots=True)
class Line:
    """One delimiter-separated segment of a note.

    ``raw`` is the segment exactly as it appeared, ``text`` the trimmed form
    used for parsing.
    """

    index: int
    raw: str
    text: str


@dataclass(frozen=True, slots=True)
class RenderedLink:
    """A navigation or bulk-action affordance, independent of markup."""

    kind: LinkKind
    label: str
    targets: tuple[str, ...] = ()
    payload: str | None = None
    lines: tuple[str, ...] = ()
    current: bool = False


@dataclass(frozen=True, slots=True)
class Entry:
    """A note line recognised as referencing a slug.

    Synthetic entries (All, Copy, Everything) carry only ``display_link``;
    their ``slug`` and ``line_index`` are ``None``.
    """

    slug: str | None
    metadata: str = ""
    meanings: str = ""
    not_included: bool = False
    override: bool = False
    line_index: int | None = None
    url: str | None = None
    display_link: RenderedLink | None = None

    @property
    def is_synthetic(self) -> bool:
        return self.slug is None


Group = list[Entry]


# ---------------------------------------------------------------------------
# Dataset side
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Meaning:
    """A meaning of a dataset record."""

    meaning: str
    primary: bool = False


@dataclass(frozen=True, slots=True)
class Reading:
    """A reading of a dataset record."""

    reading: str
    primary: bool = False


@dataclass(frozen=True, slots=True)
class VocabRecord:
    """A dataset row for one slug."""

    slug: str
    meanings: tuple[Meaning, ...] = ()
    readings: tuple[Reading, ...] = ()

    def ordered_meanings(self) -> list[str]:
        """Meanings with primaries first, dataset order kept within each."""
        primary = [m.meaning for m in self.meanings if m.primary]
        secondary = [m.meaning for m in self.meanings if not m.primary]
        return primary + secondary
