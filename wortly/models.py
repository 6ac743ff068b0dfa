from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

# Grammatical persons indexing a verb's conjugation table, in display order
PERSONS = ("ich", "du", "er_sie_es", "wir", "ihr", "sie_Sie")

PERSON_LABELS = {
    "ich": "ich",
    "du": "du",
    "er_sie_es": "er/sie/es",
    "wir": "wir",
    "ihr": "ihr",
    "sie_Sie": "sie/Sie",
}

WORD_TO_MEANING = "word-to-meaning"
MEANING_TO_WORD = "meaning-to-word"
CONJUGATION = "conjugation"
PERFECT_TENSE = "perfect-tense"

QUESTION_TYPES = (WORD_TO_MEANING, MEANING_TO_WORD, CONJUGATION, PERFECT_TENSE)

WORD_TYPES = ("verb", "noun")


@dataclass(frozen=True)
class DictionaryEntry:
    id: int
    word: str
    word_type: str  # verb | noun
    meaning: str
    example: str = ""
    conjugations: Mapping[str, str] | None = field(default=None, hash=False)
    perfect: str | None = None

    def __post_init__(self):
        if self.conjugations is not None:
            # Read-only copy
            object.__setattr__(self, "conjugations", MappingProxyType(dict(self.conjugations)))

    @property
    def is_verb(self) -> bool:
        return self.word_type == "verb"

    @property
    def can_conjugate(self) -> bool:
        return self.is_verb and bool(self.conjugations)

    @property
    def has_perfect(self) -> bool:
        return self.is_verb and bool(self.perfect)


@dataclass
class Question:
    question_type: str  # word-to-meaning | meaning-to-word | conjugation | perfect-tense
    prompt: str
    correct_answer: str
    options: list[str]
    instruction: str
    verb: str | None = None  # subject verb for conjugation / perfect-tense

    def to_dict(self, reveal: bool = False) -> dict:
        """Serialize for a presentation layer; the answer stays hidden unless *reveal*."""
        data = {
            "question_type": self.question_type,
            "prompt": self.prompt,
            "options": list(self.options),
            "instruction": self.instruction,
            "verb": self.verb,
        }
        if reveal:
            data["correct_answer"] = self.correct_answer
        return data
