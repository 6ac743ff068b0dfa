"""Quiz session: score counters and the per-question lifecycle."""
from __future__ import annotations

import logging
import math
import time
from collections.abc import Callable, Sequence

from wortly.models import DictionaryEntry, Question
from wortly.question_generator import build_question

_log = logging.getLogger("wortly.session")

STATE_NO_QUESTION = "no_question"
STATE_ACTIVE = "active"
STATE_ANSWERED = "answered"

# Delay used by the auto-advancing quiz screen
DEFAULT_AUTO_ADVANCE_SECONDS = 2.0


def success_rate(score: int, total_questions: int) -> int:
    """Percentage of correct answers, rounded half up; 0 before any answer."""
    if total_questions <= 0:
        return 0
    return math.floor(100 * score / total_questions + 0.5)


class QuizSession:
    """One learner's quiz run over a read-only dictionary.

    Only one question exists at a time. It moves ``no_question -> active``
    when built, ``active -> answered`` on the first answer, and back to
    ``active`` when the next question is built. Answers submitted while no
    question is active are ignored.

    With ``auto_advance_seconds`` set, an answered question is replaced by a
    new one once that many seconds have passed (checked by :meth:`tick`);
    ``None`` means the learner advances manually.
    """

    def __init__(
        self,
        dictionary: Sequence[DictionaryEntry],
        auto_advance_seconds: float | None = None,
        clock: Callable[[], float] = time.monotonic,
        rng=None,
    ):
        self.dictionary = dictionary
        self.auto_advance_seconds = auto_advance_seconds
        self._clock = clock
        self._rng = rng
        self._listeners: list[Callable[[Question], None]] = []

        self.question: Question | None = None
        self.state = STATE_NO_QUESTION
        self.selected_answer: str | None = None
        self.answered_at: float | None = None

        self.score = 0
        self.total_questions = 0
        self.streak = 0

    # ── Question lifecycle ─────────────────────────────────────────────

    def add_listener(self, callback: Callable[[Question], None]) -> None:
        """Call *callback* with every newly built question (e.g. to run a transition)."""
        self._listeners.append(callback)

    def next_question(self) -> Question | None:
        q = build_question(self.dictionary, rng=self._rng)
        if q is None:
            return None
        self.question = q
        self.state = STATE_ACTIVE
        self.selected_answer = None
        self.answered_at = None
        _log.debug("New %s question: %s", q.question_type, q.prompt)
        for callback in self._listeners:
            try:
                callback(q)
            except Exception as e:
                _log.warning("Question listener %r failed: %s", callback, e)
        return q

    def check_answer(self, answer: str) -> dict | None:
        """Score *answer* against the active question.

        Returns ``None`` without touching any counter when there is no
        active question (none built yet, or already answered).
        """
        if self.question is None or self.state != STATE_ACTIVE:
            return None

        correct = answer == self.question.correct_answer
        self.selected_answer = answer
        self.state = STATE_ANSWERED
        self.answered_at = self._clock()
        self.total_questions += 1
        if correct:
            self.score += 1
            self.streak += 1
        else:
            self.streak = 0

        return {
            "correct": correct,
            "selected": answer,
            "correct_answer": self.question.correct_answer,
            "stats": self.stats(),
        }

    def tick(self) -> bool:
        """Advance to a new question if the auto-advance delay has elapsed."""
        if self.auto_advance_seconds is None or self.state != STATE_ANSWERED:
            return False
        if self._clock() - self.answered_at < self.auto_advance_seconds:
            return False
        return self.next_question() is not None

    def current(self) -> Question | None:
        """The question to display, building the first one on demand."""
        self.tick()
        if self.question is None:
            self.next_question()
        return self.question

    def reset(self) -> Question | None:
        self.score = 0
        self.total_questions = 0
        self.streak = 0
        _log.info("Session counters reset")
        return self.next_question()

    # ── Stats ──────────────────────────────────────────────────────────

    @property
    def success_rate(self) -> int:
        return success_rate(self.score, self.total_questions)

    def stats(self) -> dict:
        return {
            "score": self.score,
            "total_questions": self.total_questions,
            "streak": self.streak,
            "success_rate": self.success_rate,
        }

    def to_dict(self) -> dict:
        answered = self.state == STATE_ANSWERED
        return {
            "state": self.state,
            "question": self.question.to_dict(reveal=answered) if self.question else None,
            "selected_answer": self.selected_answer,
            "auto_advance_seconds": self.auto_advance_seconds,
            "stats": self.stats(),
        }
