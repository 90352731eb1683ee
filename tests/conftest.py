"""Shared test fixtures for vocab-note-linker."""

import pytest

from vocab_notes import (
    Meaning,
    NoteConfig,
    NoteContext,
    Reading,
    VocabLookup,
    VocabRecord,
)

SAMPLE_LINES = [
    "大変（たいへん）Serious, Terrible, Very, Difficult, Hard, Hectic",
    "深刻（しんこく）Serious, Grave",
    "真剣（しんけん）Serious",
    "本気（ほんき）Serious",
    "",
    "ほんき sounds silly/funny...but it means Serious haha.",
    "",
    "本気（ほんき）Serious",
    "根気（こんき）Patience, Perseverance, Persistence",
    "",
    "本気（ほんき）Serious",
    "基本（きほん）Foundation, Basics",
]


@pytest.fixture
def sample_note():
    """Newline-delimited note with three groups and a remark."""
    return "\n".join(SAMPLE_LINES)


@pytest.fixture
def br_config():
    """Config for notes delimited by a literal <br> marker."""
    return NoteConfig(delimiter="<br>")


@pytest.fixture
def context():
    """Context of the 大変 vocabulary page."""
    return NoteContext(current_slug="大変")


@pytest.fixture
def lookup():
    """Dataset snapshot with a few records."""
    return VocabLookup([
        VocabRecord(
            slug="大変",
            meanings=(
                Meaning("Terrible"),
                Meaning("Serious", primary=True),
                Meaning("Very"),
            ),
            readings=(Reading("たいへん", primary=True),),
        ),
        VocabRecord(
            slug="深刻",
            meanings=(Meaning("Serious", primary=True), Meaning("Grave")),
            readings=(Reading("しんこく", primary=True),),
        ),
        VocabRecord(
            slug="本気",
            meanings=(Meaning("Seriousness", primary=True), Meaning("Earnestness")),
            readings=(Reading("ほんき", primary=True),),
        ),
        VocabRecord(
            slug="生",
            meanings=(Meaning("Raw", primary=True),),
            readings=(Reading("なま", primary=True), Reading("せい")),
        ),
    ])
