"""
Configuration for note parsing, linking and regeneration.
"""
from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from .exceptions import ConfigError


@dataclass(frozen=True)
class NoteConfig:
    """Values that define the note convention and link labels."""
    delimiter: str = "\n"
    open_bracket: str = "（"
    close_bracket: str = "）"
    not_included_markers: Tuple[str, ...] = ("not on WK", "not in WK")
    override_markers: Tuple[str, ...] = ("override",)
    meaning_separator: str = ", "
    reading_separator: str = "・"
    base_url: str = "https://www.wanikani.com"
    all_label: str = "All"
    everything_label: str = "Everything"
    copy_label: str = "Copy"
    copy_unlinked_label: str = "Copy (no links)"

    def with_delimiter(self, delimiter: str) -> "NoteConfig":
        """Return a copy using another note delimiter."""
        return replace(self, delimiter=delimiter)


DEFAULT_CONFIG = NoteConfig()

_MARKER_FIELDS = {"not_included_markers", "override_markers"}
_NON_EMPTY_FIELDS = {"delimiter", "open_bracket", "close_bracket"}


def load_config(
    source: Union[str, Path, Dict[str, Any], None] = None,
) -> NoteConfig:
    """Load a note configuration from a YAML file, YAML string or dictionary.

    Keys not present in the source keep their default value.

    Args:
        source: Path to YAML file, YAML string, parsed dictionary, or None
            for the defaults

    Returns:
        NoteConfig object

    Raises:
        ConfigError: If the source cannot be parsed or holds invalid values
        FileNotFoundError: If the file does not exist
    """
    if source is None:
        return DEFAULT_CONFIG

    if isinstance(source, dict):
        data = source
    elif isinstance(source, Path) or (isinstance(source, str) and _is_file_path(source)):
        path = Path(source)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        data = _load_yaml(path.read_text(encoding="utf-8"))
    else:
        data = _load_yaml(source)

    return _parse_config(data)


def _is_file_path(s: str) -> bool:
    """Check if a string looks like a file path."""
    if "\n" in s or ": " in s:
        return False
    if "/" in s or "\\" in s:
        return True
    return s.endswith((".yaml", ".yml"))


def _load_yaml(text: str) -> Dict[str, Any]:
    """Load a YAML mapping from text."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        line_num = mark.line + 1 if mark else None
        raise ConfigError(f"Invalid YAML: {e}", line=line_num) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("YAML root must be a mapping (dictionary)")
    return data


def _parse_config(data: Dict[str, Any]) -> NoteConfig:
    """Validate a dictionary and turn it into a NoteConfig."""
    known = {f.name for f in fields(NoteConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown configuration key(s): {', '.join(unknown)}")

    values: Dict[str, Any] = {}
    for key, value in data.items():
        if key in _MARKER_FIELDS:
            values[key] = _parse_markers(key, value)
            continue
        if not isinstance(value, str):
            raise ConfigError(f"Field '{key}' must be a string")
        if key in _NON_EMPTY_FIELDS and not value:
            raise ConfigError(f"Field '{key}' cannot be empty")
        values[key] = value

    return replace(DEFAULT_CONFIG, **values)


def _parse_markers(key: str, value: Any) -> Tuple[str, ...]:
    """Accept a single marker string or a list of marker strings."""
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list):
        raise ConfigError(f"Field '{key}' must be a string or a list of strings")

    markers = []
    for i, marker in enumerate(value):
        if not isinstance(marker, str) or not marker:
            raise ConfigError(f"Field '{key}' item #{i + 1} must be a non-empty string")
        markers.append(marker)
    return tuple(markers)


def decode_delimiter(value: Optional[str]) -> Optional[str]:
    """Turn a command-line delimiter such as ``\\n`` into the real string."""
    if value is None:
        return None
    try:
        decoded = value.encode("utf-8").decode("unicode_escape")
        return decoded.encode("latin-1").decode("utf-8")
    except (UnicodeDecodeError, UnicodeEncodeError) as e:
        raise ConfigError(f"Invalid delimiter {value!r}: {e}") from e
