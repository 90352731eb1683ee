"""Custom exception hierarchy for vocab-note-linker."""


class VocabNotesError(Exception):
    """Base exception for all vocab-note-linker errors."""


class ConfigError(VocabNotesError):
    """Invalid configuration (unknown key, wrong type, malformed YAML)."""

    def __init__(self, message: str, line: int | None = None):
        self.line = line
        super().__init__(message)


class LookupLoadError(VocabNotesError):
    """Dataset snapshot cannot be read or has the wrong shape."""
