"""Rendering of link groups for display."""

from __future__ import annotations

import html
from typing import Protocol

from vocab_notes.config import DEFAULT_CONFIG, NoteConfig
from vocab_notes.models import Group, LinkKind, RenderedLink

_LINK_STYLE = "margin-right: 15px;"
_CURRENT_STYLE = "color: #666666;"


class LinkFormatter(Protocol):
    """Turns rendered links into text for one target surface."""

    link_separator: str
    group_separator: str | None

    def format_link(self, link: RenderedLink) -> str:
        ...


def _script_string(value: str) -> str:
    return value.replace("\\", "\\\\").replace("'", "\\'")


def _attr(value: str) -> str:
    return html.escape(value, quote=False).replace('"', "&quot;")


class HtmlFormatter:
    """Anchor elements, as shown below a note on the subject page."""

    link_separator = ""

    def __init__(self, group_separator: str | None = None) -> None:
        self.group_separator = group_separator

    def format_link(self, link: RenderedLink) -> str:
        if link.kind is LinkKind.ENTRY:
            return self._entry(link)
        if link.kind is LinkKind.COPY:
            # Payload is already escaped for the attribute
            onclick = f"navigator.clipboard.writeText('{link.payload or ''}');return false;"
            return self._action(link.label, onclick)
        onclick = "".join(
            f"window.open('{_script_string(url)}', '_blank');" for url in link.targets
        )
        return self._action(link.label, _attr(onclick + "return false;"))

    def _entry(self, link: RenderedLink) -> str:
        style = _LINK_STYLE + (_CURRENT_STYLE if link.current else "")
        href = _attr(link.targets[0] if link.targets else "#")
        return (
            f'<a href="{href}" style="{style}" target="_blank" '
            f'rel="noopener noreferrer">{html.escape(link.label)}</a>'
        )

    def _action(self, label: str, onclick: str) -> str:
        return (
            f'<a href="#" style="{_LINK_STYLE}" onclick="{onclick}">'
            f"{html.escape(label)}</a>"
        )


class TextFormatter:
    """One link per line, for terminals and plain-text exports."""

    link_separator = "\n"

    def __init__(self, group_separator: str | None = "\n\n") -> None:
        self.group_separator = group_separator

    def format_link(self, link: RenderedLink) -> str:
        if link.kind is LinkKind.ENTRY:
            marker = " *" if link.current else ""
            return f"{link.label}{marker} <{link.targets[0]}>"
        if link.kind is LinkKind.COPY:
            return "\n".join([f"[{link.label}]", *link.lines])
        return f"[{link.label}] " + " ".join(link.targets)


def render(
    groups: list[Group],
    *,
    config: NoteConfig = DEFAULT_CONFIG,
    formatter: LinkFormatter | None = None,
) -> str:
    """Render groups of entries, dropping groups without any link."""
    formatter = formatter or HtmlFormatter()
    rendered = []
    for group in groups:
        links = [e.display_link for e in group if e.display_link is not None]
        if not links:
            continue
        rendered.append(
            formatter.link_separator.join(formatter.format_link(link) for link in links)
        )

    separator = formatter.group_separator
    if separator is None:
        separator = config.delimiter
    return separator.join(rendered)
