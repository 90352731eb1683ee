"""Entry parsing and grouping of note lines."""

from __future__ import annotations

import logging

from vocab_notes.config import DEFAULT_CONFIG, NoteConfig
from vocab_notes.models import Entry, Group, Line, LinkKind, NoteContext, RenderedLink

logger = logging.getLogger(__name__)

_DEFAULT_CONTEXT = NoteContext()


def split_lines(note: str, config: NoteConfig = DEFAULT_CONFIG) -> list[Line]:
    """Split a note on the configured delimiter, keeping each raw segment."""
    return [
        Line(index=i, raw=raw, text=raw.strip())
        for i, raw in enumerate(note.split(config.delimiter))
    ]


def entry_url(
    slug: str,
    *,
    config: NoteConfig = DEFAULT_CONFIG,
    context: NoteContext = _DEFAULT_CONTEXT,
) -> str:
    """URL of the subject page for ``slug``."""
    return f"{config.base_url.rstrip('/')}/{context.subject_type.value}/{slug}"


def parse_entry(
    line: str,
    line_index: int,
    *,
    config: NoteConfig = DEFAULT_CONFIG,
    context: NoteContext = _DEFAULT_CONTEXT,
) -> Entry | None:
    """Parse one line into an Entry, or None when it has no opening bracket.

    The slug is the text before the first opening bracket. Metadata runs up to
    the first closing bracket after it and meanings are whatever follows.
    Without a closing bracket both are empty.
    """
    open_at = line.find(config.open_bracket)
    if open_at < 0:
        return None

    slug = line[:open_at]
    rest = line[open_at + len(config.open_bracket):]
    close_at = rest.find(config.close_bracket)
    if close_at < 0:
        metadata = ""
        meanings = ""
    else:
        metadata = rest[:close_at]
        meanings = rest[close_at + len(config.close_bracket):]

    not_included = any(m in metadata for m in config.not_included_markers)
    override = any(m in metadata for m in config.override_markers)

    url = None
    link = None
    if not not_included:
        url = entry_url(slug, config=config, context=context)
        link = RenderedLink(
            kind=LinkKind.ENTRY,
            label=slug,
            targets=(url,),
            current=slug == context.current_slug,
        )

    return Entry(
        slug=slug,
        metadata=metadata,
        meanings=meanings,
        not_included=not_included,
        override=override,
        line_index=line_index,
        url=url,
        display_link=link,
    )


def group_lines(
    lines: list[Line],
    *,
    config: NoteConfig = DEFAULT_CONFIG,
    context: NoteContext = _DEFAULT_CONTEXT,
) -> list[Group]:
    """Partition lines into runs of entries separated by non-entry lines."""
    groups: list[Group] = [[]]

    for line in lines:
        current = groups[-1]
        entry = parse_entry(line.text, line.index, config=config, context=context)

        if entry is None:
            if current:
                groups.append([])
            continue

        current.append(entry)

    # Trailing blank lines or remarks leave an empty group behind
    return [group for group in groups if group]


def parse_groups(
    note: str,
    *,
    config: NoteConfig = DEFAULT_CONFIG,
    context: NoteContext = _DEFAULT_CONTEXT,
) -> list[Group]:
    """Parse a whole note into groups of entries."""
    groups = group_lines(split_lines(note, config), config=config, context=context)
    logger.debug(
        "Parsed %d group(s) with %d entries",
        len(groups), sum(len(g) for g in groups),
    )
    return groups
