"""Sample wrong answer options (distractors) from the dictionary."""
from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from wortly.models import PERSONS, DictionaryEntry
from wortly.prompts import FILLER_OPTION, FILLER_OPTIONS, format_perfect_option

_log = logging.getLogger("wortly.distractors")

MAX_ATTEMPTS = 20
OPTION_COUNT = 4

MODE_MEANING = "meaning"
MODE_WORD = "word"
MODE_CONJUGATION = "conjugation"
MODE_PERFECT = "perfectTense"

MODES = (MODE_MEANING, MODE_WORD, MODE_CONJUGATION, MODE_PERFECT)


def _draw_meaning(dictionary, excluded_word, rng) -> str | None:
    if not dictionary:
        return None
    return rng.choice(dictionary).meaning


def _draw_word(dictionary, excluded_word, rng) -> str | None:
    if not dictionary:
        return None
    return rng.choice(dictionary).word


def _draw_conjugation(dictionary, excluded_word, rng) -> str | None:
    pool = [e for e in dictionary if e.can_conjugate and e.word != excluded_word]
    if not pool:
        return None
    verb = rng.choice(pool)
    return verb.conjugations.get(rng.choice(PERSONS))


def _draw_perfect(dictionary, excluded_word, rng) -> str | None:
    pool = [e for e in dictionary if e.has_perfect and e.word != excluded_word]
    if not pool:
        return None
    return format_perfect_option(rng.choice(pool).word)


_DRAWERS = {
    MODE_MEANING: _draw_meaning,
    MODE_WORD: _draw_word,
    MODE_CONJUGATION: _draw_conjugation,
    MODE_PERFECT: _draw_perfect,
}


def _pad_with_fillers(options: list[str]) -> None:
    """Fill *options* up to four entries with ``seçenek N`` placeholders in place.

    The filler for the next slot is ``seçenek <len(options)>``; when that text
    already appears among the options the suffix is bumped until it is unique.
    """
    while len(options) < OPTION_COUNT:
        filler = FILLER_OPTIONS[len(options) - 1]
        n = len(options)
        while filler in options:
            n += 1
            filler = FILLER_OPTION.format(n=n)
        options.append(filler)


def sample_options(
    dictionary: Sequence[DictionaryEntry],
    correct_answer: str,
    mode: str,
    excluded_word: str | None = None,
    rng: random.Random | None = None,
) -> list[str]:
    """Return the correct answer plus three distinct distractors, shuffled.

    Draws at most ``MAX_ATTEMPTS`` candidates according to *mode*; a candidate
    is kept only if it is non-empty and not already an option (exact,
    case-sensitive match). Slots the dictionary cannot fill are padded with
    filler text, so the result always holds four distinct strings.
    """
    try:
        draw = _DRAWERS[mode]
    except KeyError:
        raise ValueError(f"Unknown distractor mode: {mode!r}") from None
    rng = rng or random

    options = [correct_answer]
    attempts = 0
    while len(options) < OPTION_COUNT and attempts < MAX_ATTEMPTS:
        attempts += 1
        candidate = draw(dictionary, excluded_word, rng)
        if candidate and candidate not in options:
            options.append(candidate)

    if len(options) < OPTION_COUNT:
        _log.debug(
            "Distractor pool exhausted (%s): %d/%d options after %d attempts",
            mode, len(options), OPTION_COUNT, attempts,
        )
        _pad_with_fillers(options)

    rng.shuffle(options)
    return options
