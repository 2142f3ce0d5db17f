"""Shared test fixtures."""

import json

import pytest

from narration_sync.core import TranscribedWord


@pytest.fixture
def leah_text():
    return "Leah's toy was red"


@pytest.fixture
def leah_timestamps():
    """Recognizer output for the Leah narration, possessive dropped."""
    return [
        TranscribedWord("Leahs", 0.0, 0.4),
        TranscribedWord("toy", 0.4, 0.7),
        TranscribedWord("was", 0.7, 0.9),
        TranscribedWord("red", 0.9, 1.2),
    ]


@pytest.fixture
def leah_words(leah_text, leah_timestamps):
    from narration_sync.alignment import align

    words, _ = align(leah_text, leah_timestamps)
    return words


@pytest.fixture
def leah_payload(leah_timestamps):
    """Timestamps as the JSON text stored alongside a narration."""
    return json.dumps([
        {"word": t.word, "start": t.start, "end": t.end} for t in leah_timestamps
    ])


@pytest.fixture
def narration_files(tmp_path, leah_text, leah_payload):
    """Narration text and timestamp files on disk."""
    text_file = tmp_path / "story.txt"
    text_file.write_text(leah_text, encoding="utf-8")
    timestamps_file = tmp_path / "story.json"
    timestamps_file.write_text(leah_payload, encoding="utf-8")
    return text_file, timestamps_file


@pytest.fixture
def config_dir(tmp_path):
    """Empty config directory so tests never read the repo configs."""
    directory = tmp_path / "configs"
    directory.mkdir()
    return directory


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop config overrides from the developer's environment."""
    import os

    for key in list(os.environ):
        if key.startswith("NARRATION_SYNC__"):
            monkeypatch.delenv(key)
