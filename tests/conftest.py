"""Shared test fixtures."""
from __future__ import annotations

import json

import pytest

from wortly.models import DictionaryEntry, Question

GEHEN_CONJUGATIONS = {
    "ich": "gehe",
    "du": "gehst",
    "er_sie_es": "geht",
    "wir": "gehen",
    "ihr": "geht",
    "sie_Sie": "gehen",
}

MACHEN_CONJUGATIONS = {
    "ich": "mache",
    "du": "machst",
    "er_sie_es": "macht",
    "wir": "machen",
    "ihr": "macht",
    "sie_Sie": "machen",
}


@pytest.fixture
def gehen():
    return DictionaryEntry(
        id=1, word="gehen", word_type="verb", meaning="to go",
        example="Ich gehe nach Hause.",
        conjugations=dict(GEHEN_CONJUGATIONS), perfect="gegangen",
    )


@pytest.fixture
def haus():
    return DictionaryEntry(id=2, word="Haus", word_type="noun", meaning="house")


@pytest.fixture
def two_entries(gehen, haus):
    """The smallest interesting dictionary: one full verb, one noun."""
    return (gehen, haus)


@pytest.fixture
def sample_dictionary(gehen, haus):
    """A handful of verbs with varying capabilities plus some nouns."""
    return (
        gehen,
        haus,
        DictionaryEntry(
            id=3, word="machen", word_type="verb", meaning="to make",
            conjugations=dict(MACHEN_CONJUGATIONS), perfect="gemacht",
        ),
        DictionaryEntry(
            id=4, word="kommen", word_type="verb", meaning="to come",
            conjugations={
                "ich": "komme", "du": "kommst", "er_sie_es": "kommt",
                "wir": "kommen", "ihr": "kommt", "sie_Sie": "kommen",
            },
        ),
        DictionaryEntry(id=5, word="helfen", word_type="verb", meaning="to help", perfect="geholfen"),
        DictionaryEntry(id=6, word="wohnen", word_type="verb", meaning="to live"),
        DictionaryEntry(id=7, word="Buch", word_type="noun", meaning="book"),
        DictionaryEntry(id=8, word="Wasser", word_type="noun", meaning="water"),
        DictionaryEntry(id=9, word="Stadt", word_type="noun", meaning="city"),
    )


@pytest.fixture
def sample_question():
    """A valid Question object."""
    return Question(
        question_type="conjugation",
        prompt="ich _______ (gehen)",
        correct_answer="gehe",
        options=["machst", "gehe", "kommt", "macht"],
        instruction="Doğru çekimi seçin",
        verb="gehen",
    )


@pytest.fixture
def dictionary_json():
    """Raw word list in the app's JSON format."""
    return [
        {
            "id": 1, "kelime": "gehen", "tür": "verb", "anlam": "gitmek",
            "örnek": "Ich gehe nach Hause.",
            "çekimler": dict(GEHEN_CONJUGATIONS),
            "perfekt": "ist gegangen",
        },
        {"id": 2, "kelime": "Haus", "tür": "noun", "anlam": "ev", "örnek": "Das Haus ist groß."},
        {"id": 3, "kelime": "helfen", "tür": "verb", "anlam": "yardım etmek", "perfekt": "hat geholfen"},
    ]


@pytest.fixture
def dictionary_file(tmp_path, dictionary_json):
    path = tmp_path / "kelimeler.json"
    path.write_text(json.dumps(dictionary_json, ensure_ascii=False), encoding="utf-8")
    return path
