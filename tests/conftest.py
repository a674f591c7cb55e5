"""Shared pytest fixtures for the Fayin tests."""

import json
import os

# Kivy darf weder sys.argv parsen noch auf die Konsole loggen
os.environ.setdefault("KIVY_NO_ARGS", "1")
os.environ.setdefault("KIVY_NO_CONSOLELOG", "1")

import pytest
from fayin.models.card import Card


@pytest.fixture
def card_a():
    return Card(phonetic="/a/", examples=("cat",), marked_letters=("a",), audio_filename="a.mp3")


@pytest.fixture
def card_b():
    return Card(phonetic="/b/", examples=("bob",), marked_letters=("b",), audio_filename="b.mp3")


@pytest.fixture
def card_c():
    return Card(phonetic="/c/", examples=("cab",), marked_letters=("c",), audio_filename="c.mp3")


@pytest.fixture
def abc(card_a, card_b, card_c):
    """Load order A, B, C: C is the top of the active stack."""
    return [card_a, card_b, card_c]


@pytest.fixture
def sample_records():
    return [
        {
            "phonetic": "/iː/",
            "examples": ["see the tree", "eat a peach"],
            "markedLetters": ["ee", "ea"],
            "audioFilename": "i_long.mp3",
        },
        {
            "phonetic": "/θ/",
            "examples": ["think"],
            "markedLetters": ["th"],
            "audioFilename": "theta.mp3",
            "note": "extra keys are ignored",
        },
    ]


@pytest.fixture
def write_asset(tmp_path):
    """Write a JSON (or raw text) asset into tmp_path and return the directory."""
    def _write(name, content):
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return tmp_path
    return _write
