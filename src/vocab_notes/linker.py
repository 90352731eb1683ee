"""NoteLinker: main entry point for the vocab-note-linker library."""

from __future__ import annotations

import logging

from vocab_notes import links as _links
from vocab_notes import parser as _parser
from vocab_notes.config import DEFAULT_CONFIG, NoteConfig
from vocab_notes.lookup import Lookup
from vocab_notes.models import Group, NoteContext, SubjectType
from vocab_notes.regenerate import (
    format_entry_line,
    needs_update as _needs_update,
    record_meanings,
    record_readings,
    regenerate as _regenerate,
)
from vocab_notes.render import LinkFormatter, render

logger = logging.getLogger(__name__)


class NoteLinker:
    """Link section and update workflow for the notes of one subject page.

    Every call works from the note text it is given; nothing is cached
    between calls, so it is safe to call again on each note change.
    """

    def __init__(
        self,
        config: NoteConfig | None = None,
        context: NoteContext | None = None,
    ) -> None:
        self.config = config or DEFAULT_CONFIG
        self.context = context or NoteContext()

    def __repr__(self) -> str:
        return (
            f"NoteLinker(slug={self.context.current_slug!r}, "
            f"type={self.context.subject_type.value!r})"
        )

    # ------------------------------------------------------------------
    # Link section
    # ------------------------------------------------------------------

    def parse_groups(self, note: str) -> list[Group]:
        return _parser.parse_groups(note, config=self.config, context=self.context)

    def link_groups(self, note: str) -> list[Group]:
        """Parsed groups with All, Copy and Everything entries added."""
        return _links.build_link_groups(
            self.parse_groups(note), config=self.config, context=self.context,
        )

    def link_section(self, note: str, formatter: LinkFormatter | None = None) -> str:
        """Render the link section shown below a note."""
        return render(self.link_groups(note), config=self.config, formatter=formatter)

    # ------------------------------------------------------------------
    # Update workflow
    # ------------------------------------------------------------------

    def regenerate(self, note: str, lookup: Lookup) -> str:
        return _regenerate(note, lookup, config=self.config)

    def needs_update(self, note: str, lookup: Lookup) -> bool:
        """Whether an update affordance should be offered for ``note``."""
        changed = _needs_update(note, lookup, config=self.config)
        logger.debug("Update %s for %r", "available" if changed else "not needed", self)
        return changed

    def subject_line(self, lookup: Lookup) -> str | None:
        """Canonical note line for the page's own subject, for copying.

        Only vocabulary pages have one; None when the subject is unknown.
        """
        slug = self.context.current_slug
        if self.context.subject_type is not SubjectType.VOCABULARY or not slug:
            return None

        record = lookup.get(slug)
        if record is None:
            logger.debug("No record for current subject %s", slug)
            return None

        return format_entry_line(
            slug,
            record_readings(record, self.config),
            record_meanings(record, self.config),
            self.config,
        )
