"""Parse the app's JSON word list into DictionaryEntry objects.

Each item of the top-level list looks like::

  {"id": 1, "kelime": "gehen", "tür": "verb", "anlam": "gitmek",
   "örnek": "Ich gehe nach Hause.",
   "çekimler": {"ich": "gehe", "du": "gehst", "er_sie_es": "geht",
                "wir": "gehen", "ihr": "geht", "sie_Sie": "gehen"},
   "perfekt": "ist gegangen"}

``çekimler`` and ``perfekt`` are optional and only kept for verbs.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from wortly.models import WORD_TYPES, DictionaryEntry

if TYPE_CHECKING:
    from wortly.config import Settings

_log = logging.getLogger("wortly.parser")


def _parse_entry(item: dict, position: int) -> DictionaryEntry | None:
    if not isinstance(item, dict):
        _log.warning("Entry %d: expected object, got %s", position, type(item).__name__)
        return None

    word = item.get("kelime")
    meaning = item.get("anlam")
    word_type = item.get("tür")
    if not word or not meaning:
        _log.warning("Entry %d: missing kelime/anlam, skipped", position)
        return None
    if word_type not in WORD_TYPES:
        _log.warning("Entry %d (%s): unknown type %r, skipped", position, word, word_type)
        return None

    conjugations = None
    perfect = None
    if word_type == "verb":
        raw = item.get("çekimler")
        if isinstance(raw, dict) and raw:
            conjugations = {}
            for person, form in raw.items():
                if not isinstance(form, str) or not form:
                    _log.warning("Entry %d (%s): bad form for %r skipped", position, word, person)
                    continue
                conjugations[str(person)] = form
            conjugations = conjugations or None
        perfect = item.get("perfekt")
        if perfect is not None and not isinstance(perfect, str):
            _log.warning("Entry %d (%s): bad perfekt %r skipped", position, word, perfect)
            perfect = None
        perfect = perfect or None
    elif item.get("çekimler") or item.get("perfekt"):
        _log.debug("Entry %d (%s): verb forms on a %s dropped", position, word, word_type)

    return DictionaryEntry(
        id=item["id"] if isinstance(item.get("id"), int) else position,
        word=str(word),
        word_type=word_type,
        meaning=str(meaning),
        example=str(item.get("örnek") or ""),
        conjugations=conjugations,
        perfect=perfect,
    )


def parse_dictionary(data) -> list[DictionaryEntry]:
    if not isinstance(data, list):
        raise ValueError(f"dictionary must be a list of entries, got {type(data).__name__}")
    entries: list[DictionaryEntry] = []
    for position, item in enumerate(data, 1):
        entry = _parse_entry(item, position)
        if entry is not None:
            entries.append(entry)
    return entries


def parse_dictionary_file(path: Path) -> list[DictionaryEntry]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"{path.name}: invalid JSON ({e})") from e
    entries = parse_dictionary(data)
    _log.info("Loaded %d entries from %s", len(entries), path.name)
    return entries


def load_dictionary(settings: Settings) -> tuple[DictionaryEntry, ...]:
    """Load the configured word list once; callers share it read-only."""
    return tuple(parse_dictionary_file(settings.dictionary_path))
