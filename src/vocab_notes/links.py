"""Synthetic link entries: All, Copy and Everything."""

from __future__ import annotations

import html
import logging

from vocab_notes.config import DEFAULT_CONFIG, NoteConfig
from vocab_notes.models import Entry, Group, LinkKind, NoteContext, RenderedLink
from vocab_notes.regenerate import format_entry_line

logger = logging.getLogger(__name__)

_DEFAULT_CONTEXT = NoteContext()


def _url_count(entries: list[Entry]) -> int:
    return sum(1 for entry in entries if entry.url)


def _real_entries(entries: list[Entry]) -> list[Entry]:
    return [entry for entry in entries if not entry.is_synthetic]


def escape_clipboard_payload(text: str) -> str:
    """Escape text for a single-quoted script string inside an HTML attribute."""
    escaped = (
        text.replace("\\", "\\\\")
        .replace("'", "\\'")
        .replace("\r", "\\r")
        .replace("\n", "\\n")
    )
    return html.escape(escaped, quote=True)


def create_all_entry(
    entries: list[Entry],
    *,
    context: NoteContext = _DEFAULT_CONTEXT,
    label: str = DEFAULT_CONFIG.all_label,
    kind: LinkKind = LinkKind.ALL,
) -> Entry:
    """Aggregate entry opening every distinct URL except the current subject's."""
    urls = [
        entry.url
        for entry in entries
        if entry.slug != context.current_slug and entry.url
    ]
    unique_urls = tuple(dict.fromkeys(urls))
    return Entry(
        slug=None,
        display_link=RenderedLink(kind=kind, label=label, targets=unique_urls),
    )


def add_all_links(
    groups: list[Group],
    *,
    config: NoteConfig = DEFAULT_CONFIG,
    context: NoteContext = _DEFAULT_CONTEXT,
) -> list[Group]:
    """Append an All entry to each group with more than one linked entry."""
    result: list[Group] = []
    for group in groups:
        if _url_count(group) < 2:
            result.append(list(group))
            continue

        all_entry = create_all_entry(group, context=context, label=config.all_label)
        if not all_entry.display_link.targets:
            # Only the current subject is linked
            result.append(list(group))
            continue
        result.append([*group, all_entry])
    return result


def create_copy_entry(
    entries: list[Entry],
    *,
    config: NoteConfig = DEFAULT_CONFIG,
) -> Entry:
    """Entry whose activation copies the group's lines in canonical format."""
    real = _real_entries(entries)
    lines = tuple(
        format_entry_line(e.slug, e.metadata, e.meanings, config) for e in real
    )
    unlinked = all(e.not_included for e in real)
    label = config.copy_unlinked_label if unlinked else config.copy_label
    return Entry(
        slug=None,
        display_link=RenderedLink(
            kind=LinkKind.COPY,
            label=label,
            payload=escape_clipboard_payload(config.delimiter.join(lines)),
            lines=lines,
        ),
    )


def add_copy_links(
    groups: list[Group],
    *,
    config: NoteConfig = DEFAULT_CONFIG,
) -> list[Group]:
    """Append a Copy entry to every group holding at least one real entry."""
    return [
        [*group, create_copy_entry(group, config=config)]
        if _real_entries(group) else list(group)
        for group in groups
    ]


def create_everything_entry(
    groups: list[Group],
    *,
    config: NoteConfig = DEFAULT_CONFIG,
    context: NoteContext = _DEFAULT_CONTEXT,
) -> Entry:
    flat = [entry for group in groups for entry in _real_entries(group)]
    return create_all_entry(
        flat,
        context=context,
        label=config.everything_label,
        kind=LinkKind.EVERYTHING,
    )


def add_everything_link(
    groups: list[Group],
    *,
    config: NoteConfig = DEFAULT_CONFIG,
    context: NoteContext = _DEFAULT_CONTEXT,
) -> list[Group]:
    """Append a trailing Everything group when two or more groups have links."""
    qualifying = sum(1 for group in groups if _url_count(group) > 0)
    if qualifying < 2:
        return [list(group) for group in groups]

    everything = create_everything_entry(groups, config=config, context=context)
    if not everything.display_link.targets:
        return [list(group) for group in groups]

    logger.debug(
        "Everything link spans %d group(s), %d URL(s)",
        qualifying, len(everything.display_link.targets),
    )
    return [*(list(group) for group in groups), [everything]]


def build_link_groups(
    groups: list[Group],
    *,
    config: NoteConfig = DEFAULT_CONFIG,
    context: NoteContext = _DEFAULT_CONTEXT,
) -> list[Group]:
    """Add All, Copy and Everything entries to parsed groups."""
    groups = add_all_links(groups, config=config, context=context)
    groups = add_copy_links(groups, config=config)
    return add_everything_link(groups, config=config, context=context)
