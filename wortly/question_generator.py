"""Build quiz questions from a dictionary of German words."""
from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from wortly.distractors import (
    MODE_CONJUGATION,
    MODE_MEANING,
    MODE_WORD,
    sample_options,
)
from wortly.models import (
    CONJUGATION,
    MEANING_TO_WORD,
    PERFECT_TENSE,
    PERSONS,
    QUESTION_TYPES,
    WORD_TO_MEANING,
    DictionaryEntry,
    Question,
)
from wortly.prompts import (
    INSTRUCTIONS,
    PLACEHOLDER_OPTION,
    format_conjugation_prompt,
    format_perfect_prompt,
)

_log = logging.getLogger("wortly.qgen")


def eligible_question_types(entry: DictionaryEntry) -> list[str]:
    """Question types the entry can support, in ``QUESTION_TYPES`` order."""
    eligible = []
    for qtype in QUESTION_TYPES:
        if qtype == CONJUGATION and not entry.can_conjugate:
            continue
        if qtype == PERFECT_TENSE and not entry.has_perfect:
            continue
        eligible.append(qtype)
    return eligible


def _pick_question_type(entry: DictionaryEntry, rng) -> str:
    return rng.choice(eligible_question_types(entry) or [WORD_TO_MEANING])


def _word_to_meaning(dictionary, subject, rng) -> Question:
    return Question(
        question_type=WORD_TO_MEANING,
        prompt=subject.word,
        correct_answer=subject.meaning,
        options=sample_options(dictionary, subject.meaning, MODE_MEANING, rng=rng),
        instruction=INSTRUCTIONS[WORD_TO_MEANING],
    )


def _meaning_to_word(dictionary, subject, rng) -> Question:
    return Question(
        question_type=MEANING_TO_WORD,
        prompt=subject.meaning,
        correct_answer=subject.word,
        options=sample_options(dictionary, subject.word, MODE_WORD, rng=rng),
        instruction=INSTRUCTIONS[MEANING_TO_WORD],
    )


def _conjugation(dictionary, subject, rng, person=None) -> Question:
    if not subject.can_conjugate:
        return _word_to_meaning(dictionary, subject, rng)
    if person is None:
        person = rng.choice(PERSONS)
    answer = subject.conjugations[person]
    return Question(
        question_type=CONJUGATION,
        prompt=format_conjugation_prompt(person, subject.word),
        correct_answer=answer,
        options=sample_options(
            dictionary, answer, MODE_CONJUGATION, excluded_word=subject.word, rng=rng,
        ),
        instruction=INSTRUCTIONS[CONJUGATION],
        verb=subject.word,
    )


def _perfect_tense(dictionary, subject, rng) -> Question:
    if not subject.has_perfect:
        return _word_to_meaning(dictionary, subject, rng)
    # Wrong options are other bare words; the answer is the subject's bare word
    return Question(
        question_type=PERFECT_TENSE,
        prompt=format_perfect_prompt(subject.perfect),
        correct_answer=subject.word,
        options=sample_options(dictionary, subject.word, MODE_WORD, rng=rng),
        instruction=INSTRUCTIONS[PERFECT_TENSE],
        verb=subject.word,
    )


def _fallback_question(subject) -> Question:
    """Last-resort word-to-meaning question that never touches the sampler.

    Options are the meaning followed by ``yanlış 1..3``; a placeholder equal
    to the meaning is skipped for the next number.
    """
    word = str(getattr(subject, "word", "") or "")
    meaning = str(getattr(subject, "meaning", "") or "")
    options = [meaning]
    n = 0
    while len(options) < 4:
        n += 1
        placeholder = PLACEHOLDER_OPTION.format(n=n)
        if placeholder not in options:
            options.append(placeholder)
    return Question(
        question_type=WORD_TO_MEANING,
        prompt=word,
        correct_answer=meaning,
        options=options,
        instruction=INSTRUCTIONS[WORD_TO_MEANING],
    )


def build_question(
    dictionary: Sequence[DictionaryEntry],
    subject: DictionaryEntry | None = None,
    question_type: str | None = None,
    person: str | None = None,
    rng: random.Random | None = None,
) -> Question | None:
    """Build one question from *dictionary*.

    The subject and question type are drawn at random unless given; *person*
    pins the person-key of a conjugation question. Returns ``None`` for an
    empty dictionary. Any failure while constructing the question is logged
    and replaced by a word-to-meaning question with placeholder options.
    """
    if not dictionary:
        _log.debug("Empty dictionary, no question built")
        return None
    rng = rng or random

    try:
        if subject is None:
            subject = rng.choice(dictionary)
        if question_type is None:
            question_type = _pick_question_type(subject, rng)

        if question_type == WORD_TO_MEANING:
            return _word_to_meaning(dictionary, subject, rng)
        if question_type == MEANING_TO_WORD:
            return _meaning_to_word(dictionary, subject, rng)
        if question_type == CONJUGATION:
            return _conjugation(dictionary, subject, rng, person=person)
        if question_type == PERFECT_TENSE:
            return _perfect_tense(dictionary, subject, rng)
        raise ValueError(f"Unknown question type: {question_type!r}")
    except Exception as e:
        _log.warning(
            "Question construction failed for %r (%s): %s",
            getattr(subject, "word", None), question_type, e,
        )
        return _fallback_question(subject)
