"""Fixed label set for question text (Turkish UI, German vocabulary)."""
from __future__ import annotations

from wortly.models import (
    CONJUGATION,
    MEANING_TO_WORD,
    PERFECT_TENSE,
    PERSON_LABELS,
    WORD_TO_MEANING,
)

INSTRUCTIONS = {
    WORD_TO_MEANING: "Bu kelimenin anlamı nedir?",
    MEANING_TO_WORD: "Bu anlamın Almancası nedir?",
    CONJUGATION: "Doğru çekimi seçin",
    PERFECT_TENSE: "Bu perfekt hali hangi fiildir?",
}

CONJUGATION_PROMPT = "{person_label} _______ ({verb})"

PERFECT_PROMPT = '"{perfect}" hangi fiilin perfekt halidir?'

PERFECT_OPTION = "{word} (perfekt)"

# Padding for option lists the dictionary cannot fill
FILLER_OPTION = "seçenek {n}"
FILLER_OPTIONS = [FILLER_OPTION.format(n=n) for n in range(1, 5)]

# Wrong options of the last-resort question
PLACEHOLDER_OPTION = "yanlış {n}"
PLACEHOLDER_OPTIONS = [PLACEHOLDER_OPTION.format(n=n) for n in range(1, 4)]


def format_conjugation_prompt(person: str, verb: str) -> str:
    return CONJUGATION_PROMPT.format(person_label=PERSON_LABELS[person], verb=verb)


def format_perfect_prompt(perfect: str) -> str:
    return PERFECT_PROMPT.format(perfect=perfect)


def format_perfect_option(word: str) -> str:
    return PERFECT_OPTION.format(word=word)
