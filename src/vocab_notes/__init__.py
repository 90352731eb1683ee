__version__ = "1.0.0"

from .config import (
    NoteConfig as NoteConfig,
    DEFAULT_CONFIG as DEFAULT_CONFIG,
    load_config as load_config,
)

from .exceptions import (
    VocabNotesError as VocabNotesError,
    ConfigError as ConfigError,
    LookupLoadError as LookupLoadError,
)

from .models import (
    Entry as Entry,
    Group as Group,
    Line as Line,
    LinkKind as LinkKind,
    Meaning as Meaning,
    NoteContext as NoteContext,
    Reading as Reading,
    RenderedLink as RenderedLink,
    SubjectType as SubjectType,
    VocabRecord as VocabRecord,
)

from .parser import (
    parse_entry as parse_entry,
    parse_groups as parse_groups,
    split_lines as split_lines,
)

from .links import (
    build_link_groups as build_link_groups,
    escape_clipboard_payload as escape_clipboard_payload,
)

from .render import (
    HtmlFormatter as HtmlFormatter,
    TextFormatter as TextFormatter,
    render as render,
)

from .regenerate import (
    format_entry_line as format_entry_line,
    needs_update as needs_update,
    regenerate as regenerate,
)

from .lookup import (
    Lookup as Lookup,
    VocabLookup as VocabLookup,
    load_lookup as load_lookup,
    load_lookup_or_empty as load_lookup_or_empty,
    lookup_from_data as lookup_from_data,
    record_from_dict as record_from_dict,
)

from .linker import (
    NoteLinker as NoteLinker,
)

__all__ = [
    # Facade
    "NoteLinker",
    # Configuration
    "NoteConfig",
    "DEFAULT_CONFIG",
    "load_config",
    # Models
    "Entry",
    "Group",
    "Line",
    "LinkKind",
    "Meaning",
    "NoteContext",
    "Reading",
    "RenderedLink",
    "SubjectType",
    "VocabRecord",
    # Parsing and links
    "parse_entry",
    "parse_groups",
    "split_lines",
    "build_link_groups",
    "escape_clipboard_payload",
    # Rendering
    "HtmlFormatter",
    "TextFormatter",
    "render",
    # Regeneration
    "format_entry_line",
    "needs_update",
    "regenerate",
    # Lookup
    "Lookup",
    "VocabLookup",
    "load_lookup",
    "load_lookup_or_empty",
    "lookup_from_data",
    "record_from_dict",
    # Exceptions
    "VocabNotesError",
    "ConfigError",
    "LookupLoadError",
]
