"""Regeneration of note lines from a vocabulary dataset."""

from __future__ import annotations

import logging

from vocab_notes.config import DEFAULT_CONFIG, NoteConfig
from vocab_notes.lookup import Lookup
from vocab_notes.models import Entry, Line, VocabRecord
from vocab_notes.parser import group_lines, split_lines

logger = logging.getLogger(__name__)


def format_entry_line(
    slug: str,
    metadata: str,
    meanings: str,
    config: NoteConfig = DEFAULT_CONFIG,
) -> str:
    """Build a line in the canonical ``slug（metadata）meanings`` format."""
    return f"{slug}{config.open_bracket}{metadata}{config.close_bracket}{meanings}"


def _clean(text: str, *forbidden: str) -> str:
    """Replace separator strings in dataset text with a space."""
    for value in forbidden:
        text = text.replace(value, " ")
    return text.strip()


def record_meanings(record: VocabRecord, config: NoteConfig = DEFAULT_CONFIG) -> str:
    """Meanings for a line; the note delimiter never appears in them."""
    return config.meaning_separator.join(
        _clean(m, config.delimiter) for m in record.ordered_meanings()
    )


def record_readings(record: VocabRecord, config: NoteConfig = DEFAULT_CONFIG) -> str:
    """Readings for the metadata slot, which must not close early."""
    return config.reading_separator.join(
        _clean(r.reading, config.delimiter, config.close_bracket)
        for r in record.readings
    )


def regenerate_entry_line(
    entry: Entry,
    record: VocabRecord,
    config: NoteConfig = DEFAULT_CONFIG,
) -> str:
    """Rebuild an entry's line from its dataset record.

    Existing metadata is kept; empty metadata is filled from the readings.
    """
    metadata = entry.metadata or record_readings(record, config)
    return format_entry_line(
        entry.slug or "", metadata, record_meanings(record, config), config,
    )


def _with_padding(line: Line, text: str) -> str:
    """Replace the trimmed content of a raw segment, keeping its whitespace."""
    if not line.text:
        return text
    start = line.raw.find(line.text)
    return line.raw[:start] + text + line.raw[start + len(line.text):]


def regenerate(
    note: str,
    lookup: Lookup,
    *,
    config: NoteConfig = DEFAULT_CONFIG,
) -> str:
    """Return ``note`` with every dataset-backed entry line brought up to date.

    Only lines of entries that are neither marked as absent from the dataset
    nor as manual overrides, and whose slug the lookup knows, are rewritten.
    Every other segment, including its surrounding whitespace, is kept
    verbatim, so the number and order of lines never change.
    """
    lines = split_lines(note, config)
    segments = [line.raw for line in lines]

    for group in group_lines(lines, config=config):
        for entry in group:
            if entry.not_included or entry.override:
                logger.debug(
                    "Skipping line %d (%s): excluded by metadata",
                    entry.line_index, entry.slug,
                )
                continue

            record = lookup.get(entry.slug)
            if record is None:
                logger.debug(
                    "Skipping line %d (%s): no record", entry.line_index, entry.slug,
                )
                continue

            index = entry.line_index
            updated = regenerate_entry_line(entry, record, config).strip()
            segments[index] = _with_padding(lines[index], updated)
            if updated != lines[index].text:
                logger.debug("Regenerated line %d (%s)", index, entry.slug)

    return config.delimiter.join(segments)


def needs_update(
    note: str,
    lookup: Lookup,
    *,
    config: NoteConfig = DEFAULT_CONFIG,
) -> bool:
    """True when regeneration would change any character of the note."""
    return regenerate(note, lookup, config=config) != note
