"""Tests for question building (type eligibility, construction, fallback)."""
from __future__ import annotations

import random
from unittest.mock import patch

import pytest

from wortly.models import (
    CONJUGATION,
    MEANING_TO_WORD,
    PERFECT_TENSE,
    PERSONS,
    WORD_TO_MEANING,
    DictionaryEntry,
)
from wortly.question_generator import (
    _fallback_question,
    _pick_question_type,
    build_question,
    eligible_question_types,
)


def _assert_valid(q):
    assert len(q.options) == 4
    assert len(set(q.options)) == 4
    assert q.options.count(q.correct_answer) == 1


class TestEligibleTypes:
    def test_full_verb(self, gehen):
        assert eligible_question_types(gehen) == [
            WORD_TO_MEANING, MEANING_TO_WORD, CONJUGATION, PERFECT_TENSE,
        ]

    def test_noun(self, haus):
        assert eligible_question_types(haus) == [WORD_TO_MEANING, MEANING_TO_WORD]

    def test_verb_without_forms(self):
        e = DictionaryEntry(1, "wohnen", "verb", "to live")
        assert eligible_question_types(e) == [WORD_TO_MEANING, MEANING_TO_WORD]

    def test_verb_with_only_perfect(self):
        e = DictionaryEntry(1, "helfen", "verb", "to help", perfect="geholfen")
        assert CONJUGATION not in eligible_question_types(e)
        assert PERFECT_TENSE in eligible_question_types(e)

    def test_pick_falls_back_when_nothing_eligible(self, haus):
        with patch("wortly.question_generator.eligible_question_types", return_value=[]):
            assert _pick_question_type(haus, random.Random(0)) == WORD_TO_MEANING

    def test_pick_only_from_eligible(self, haus):
        rng = random.Random(0)
        picked = {_pick_question_type(haus, rng) for _ in range(100)}
        assert picked == {WORD_TO_MEANING, MEANING_TO_WORD}


class TestBuildQuestion:
    def test_empty_dictionary(self):
        assert build_question([]) is None
        assert build_question(()) is None

    def test_random_questions_always_valid(self, sample_dictionary):
        rng = random.Random(7)
        for _ in range(300):
            q = build_question(sample_dictionary, rng=rng)
            _assert_valid(q)

    def test_random_questions_on_tiny_dictionary(self, two_entries):
        rng = random.Random(11)
        for _ in range(100):
            _assert_valid(build_question(two_entries, rng=rng))

    def test_single_entry_dictionary(self, gehen):
        rng = random.Random(3)
        for _ in range(50):
            _assert_valid(build_question((gehen,), rng=rng))

    def test_capability_types_only_for_capable_subjects(self, sample_dictionary):
        by_word = {e.word: e for e in sample_dictionary}
        rng = random.Random(99)
        seen = set()
        for _ in range(400):
            q = build_question(sample_dictionary, rng=rng)
            seen.add(q.question_type)
            if q.question_type == CONJUGATION:
                assert by_word[q.verb].can_conjugate
            if q.question_type == PERFECT_TENSE:
                assert by_word[q.verb].has_perfect
        assert seen == {WORD_TO_MEANING, MEANING_TO_WORD, CONJUGATION, PERFECT_TENSE}

    def test_word_to_meaning(self, sample_dictionary, haus):
        q = build_question(sample_dictionary, subject=haus, question_type=WORD_TO_MEANING)
        assert q.prompt == "Haus"
        assert q.correct_answer == "house"
        assert q.instruction == "Bu kelimenin anlamı nedir?"
        assert q.verb is None
        _assert_valid(q)

    def test_meaning_to_word(self, sample_dictionary, haus):
        q = build_question(sample_dictionary, subject=haus, question_type=MEANING_TO_WORD)
        assert q.prompt == "house"
        assert q.correct_answer == "Haus"
        assert q.instruction == "Bu anlamın Almancası nedir?"
        _assert_valid(q)

    def test_conjugation_scenario(self, two_entries, gehen):
        q = build_question(two_entries, subject=gehen, question_type=CONJUGATION, person="ich")
        assert q.question_type == CONJUGATION
        assert q.correct_answer == "gehe"
        assert q.prompt == "ich _______ (gehen)"
        assert q.verb == "gehen"
        assert q.instruction == "Doğru çekimi seçin"
        assert "gehe" in q.options
        _assert_valid(q)

    def test_conjugation_prompt_uses_person_label(self, sample_dictionary, gehen):
        q = build_question(sample_dictionary, subject=gehen, question_type=CONJUGATION, person="er_sie_es")
        assert q.prompt == "er/sie/es _______ (gehen)"
        assert q.correct_answer == "geht"

    def test_conjugation_random_person(self, sample_dictionary, gehen):
        q = build_question(sample_dictionary, subject=gehen, question_type=CONJUGATION)
        assert q.correct_answer in gehen.conjugations.values()
        assert any(q.prompt.startswith(label) for label in ("ich", "du", "er/sie/es", "wir", "ihr", "sie/Sie"))

    def test_conjugation_distractors_from_other_verbs(self, sample_dictionary, gehen):
        q = build_question(sample_dictionary, subject=gehen, question_type=CONJUGATION, person="du")
        assert "gehe" not in q.options
        assert "geht" not in q.options

    def test_conjugation_without_table_falls_back(self, sample_dictionary, haus):
        q = build_question(sample_dictionary, subject=haus, question_type=CONJUGATION)
        assert q.question_type == WORD_TO_MEANING
        assert q.correct_answer == "house"
        _assert_valid(q)

    def test_perfect_tense(self, sample_dictionary, gehen):
        q = build_question(sample_dictionary, subject=gehen, question_type=PERFECT_TENSE)
        assert q.question_type == PERFECT_TENSE
        assert q.prompt == '"gegangen" hangi fiilin perfekt halidir?'
        assert q.correct_answer == "gehen"
        assert q.verb == "gehen"
        assert q.instruction == "Bu perfekt hali hangi fiildir?"
        words = {e.word for e in sample_dictionary}
        assert set(q.options) <= words
        _assert_valid(q)

    def test_perfect_without_form_falls_back(self, sample_dictionary):
        kommen = next(e for e in sample_dictionary if e.word == "kommen")
        q = build_question(sample_dictionary, subject=kommen, question_type=PERFECT_TENSE)
        assert q.question_type == WORD_TO_MEANING
        assert q.correct_answer == "to come"


class TestFallback:
    def test_missing_person_key_uses_placeholders(self, haus):
        broken = DictionaryEntry(1, "sein", "verb", "to be", conjugations={"ich": "bin"})
        q = build_question((broken, haus), subject=broken, question_type=CONJUGATION, person="du")
        assert q.question_type == WORD_TO_MEANING
        assert q.prompt == "sein"
        assert q.correct_answer == "to be"
        assert q.options == ["to be", "yanlış 1", "yanlış 2", "yanlış 3"]

    def test_sampler_failure_uses_placeholders(self, sample_dictionary, haus):
        with patch("wortly.question_generator.sample_options", side_effect=RuntimeError("boom")):
            q = build_question(sample_dictionary, subject=haus, question_type=WORD_TO_MEANING)
        assert q.options == ["house", "yanlış 1", "yanlış 2", "yanlış 3"]
        assert q.correct_answer == "house"

    def test_unknown_type_uses_placeholders(self, sample_dictionary, haus):
        q = build_question(sample_dictionary, subject=haus, question_type="synonym")
        assert q.question_type == WORD_TO_MEANING
        assert q.options[1:] == ["yanlış 1", "yanlış 2", "yanlış 3"]

    def test_malformed_entry_in_dictionary(self):
        q = build_question([object()])
        assert q is not None
        assert q.question_type == WORD_TO_MEANING
        assert len(q.options) == 4

    def test_failure_is_logged(self, sample_dictionary, haus, caplog):
        with patch("wortly.question_generator.sample_options", side_effect=RuntimeError("boom")):
            build_question(sample_dictionary, subject=haus, question_type=WORD_TO_MEANING)
        assert "boom" in caplog.text

    def test_fallback_never_fails(self):
        q = _fallback_question(None)
        assert q.options == ["", "yanlış 1", "yanlış 2", "yanlış 3"]
        assert q.correct_answer == ""

    def test_fallback_options_stay_distinct(self):
        odd = DictionaryEntry(1, "falsch", "noun", "yanlış 1")
        q = _fallback_question(odd)
        assert q.options == ["yanlış 1", "yanlış 2", "yanlış 3", "yanlış 4"]
        assert q.options.count(q.correct_answer) == 1


@pytest.mark.parametrize("person", PERSONS)
def test_every_person_builds(two_entries, gehen, person):
    q = build_question(two_entries, subject=gehen, question_type=CONJUGATION, person=person)
    assert q.correct_answer == gehen.conjugations[person]
    _assert_valid(q)
