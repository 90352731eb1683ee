"""
Slug lookup over a pre-built vocabulary dataset snapshot.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional, Protocol, Union

import yaml

from .exceptions import LookupLoadError
from .models import Meaning, Reading, VocabRecord

logger = logging.getLogger(__name__)


class Lookup(Protocol):
    """Anything that resolves a slug to a record, a plain dict included."""

    def get(self, slug: str) -> Optional[VocabRecord]:
        ...


class VocabLookup:
    """Immutable slug -> VocabRecord mapping."""

    def __init__(self, records: Iterable[VocabRecord] = ()):
        self._records: Dict[str, VocabRecord] = {}
        for record in records:
            # First record for a slug wins
            self._records.setdefault(record.slug, record)

    def get(self, slug: str) -> Optional[VocabRecord]:
        return self._records.get(slug)

    def __contains__(self, slug: object) -> bool:
        return slug in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __repr__(self) -> str:
        return f"VocabLookup({len(self._records)} records)"


def record_from_dict(data: Dict[str, Any], slug: Optional[str] = None) -> VocabRecord:
    """Build a VocabRecord from a dataset row.

    Args:
        data: Row with ``meanings`` and ``readings`` lists. Items are either
            ``{"meaning": ..., "primary": ...}`` / ``{"reading": ...}``
            dicts or bare strings.
        slug: Slug to use when the row has no ``slug`` or ``characters`` key

    Returns:
        VocabRecord object

    Raises:
        LookupLoadError: If the row is not shaped like a dataset record
    """
    if not isinstance(data, dict):
        raise LookupLoadError("Record must be a mapping (dictionary)")

    slug = data.get("slug") or data.get("characters") or slug
    if not slug or not isinstance(slug, str):
        raise LookupLoadError("Record is missing a 'slug' or 'characters' string")

    meanings = tuple(
        _parse_item(item, "meaning", i, slug, Meaning)
        for i, item in enumerate(_as_list(data.get("meanings"), "meanings", slug))
    )
    readings = tuple(
        _parse_item(item, "reading", i, slug, Reading)
        for i, item in enumerate(_as_list(data.get("readings"), "readings", slug))
    )
    return VocabRecord(slug=slug, meanings=meanings, readings=readings)


def _as_list(value: Any, name: str, slug: str) -> List[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise LookupLoadError(f"Record '{slug}': field '{name}' must be a list")
    return value


def _parse_item(item: Any, key: str, index: int, slug: str, cls: type) -> Any:
    """Parse one meaning or reading; bare strings are primary only when first."""
    if isinstance(item, str):
        return cls(item, primary=index == 0)
    if isinstance(item, dict) and isinstance(item.get(key), str):
        return cls(item[key], primary=bool(item.get("primary", False)))
    raise LookupLoadError(
        f"Record '{slug}': {key} #{index + 1} must be a string or have a '{key}' string"
    )


def lookup_from_data(data: Any) -> VocabLookup:
    """Build a VocabLookup from parsed YAML/JSON data.

    Accepts either a mapping of slug to record or a list of records. Rows of
    the WaniKani API shape (``{"data": {...}}``) are unwrapped.

    Raises:
        LookupLoadError: If the data is not shaped like a dataset
    """
    if data is None:
        return VocabLookup()
    if isinstance(data, dict):
        rows = [(slug, row) for slug, row in data.items()]
    elif isinstance(data, list):
        rows = [(None, row) for row in data]
    else:
        raise LookupLoadError("Dataset root must be a mapping or a list")

    records = []
    for slug, row in rows:
        if isinstance(row, dict) and isinstance(row.get("data"), dict):
            row = row["data"]
        records.append(record_from_dict(row, slug=slug))
    return VocabLookup(records)


def load_lookup(source: Union[str, Path]) -> VocabLookup:
    """Load a dataset snapshot from a YAML or JSON file.

    Raises:
        LookupLoadError: If the file cannot be read or parsed
    """
    path = Path(source)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise LookupLoadError(f"Cannot read dataset {path}: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise LookupLoadError(f"Invalid dataset {path}: {e}") from e

    lookup = lookup_from_data(data)
    logger.debug("Loaded %d record(s) from %s", len(lookup), path)
    return lookup


def load_lookup_or_empty(source: Optional[Union[str, Path]]) -> VocabLookup:
    """Load a dataset snapshot, falling back to an empty lookup on failure.

    An empty lookup leaves every note unchanged, so a missing or broken
    dataset never offers an update.
    """
    if source is None:
        return VocabLookup()
    try:
        return load_lookup(source)
    except LookupLoadError as e:
        logger.warning("Dataset unavailable, using an empty lookup: %s", e)
        return VocabLookup()
