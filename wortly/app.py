"""FastAPI application exposing the quiz to a front-end."""
from __future__ import annotations

import logging

logging.basicConfig(level=logging.INFO, format="%(name)s | %(message)s")

from fastapi import FastAPI, HTTPException, Request

from wortly.config import Settings, load_settings, save_settings
from wortly.models import DictionaryEntry
from wortly.parsers.dictionary_parser import load_dictionary
from wortly.session import QuizSession

app = FastAPI(title="Wortly")

_log = logging.getLogger("wortly.app")

# Global state (initialized in startup)
_settings: Settings | None = None
_dictionary: tuple[DictionaryEntry, ...] = ()
_session: QuizSession | None = None


def get_settings() -> Settings:
    assert _settings is not None
    return _settings


def get_session() -> QuizSession:
    assert _session is not None
    return _session


def _log_question_change(question) -> None:
    _log.info("Question: [%s] %s", question.question_type, question.prompt)


@app.on_event("startup")
async def startup():
    global _settings, _dictionary, _session
    if _session is not None:
        return  # Already initialized (e.g. by tests)
    _settings = load_settings()
    logging.getLogger("wortly").setLevel(_settings.log_level.upper())
    _dictionary = load_dictionary(_settings)
    _session = QuizSession(_dictionary, auto_advance_seconds=_settings.auto_advance_seconds)
    _session.add_listener(_log_question_change)
    _log.info("Dictionary ready: %d entries", len(_dictionary))


# ── API: Question lifecycle ───────────────────────────────────────────────

@app.get("/api/question")
async def api_question():
    session = get_session()
    if session.current() is None:
        raise HTTPException(404, "Dictionary is empty")
    return session.to_dict()


@app.post("/api/answer")
async def api_answer(request: Request):
    body = await request.json() if await request.body() else {}
    if not isinstance(body, dict):
        raise HTTPException(400, "Expected a JSON object")
    answer = body.get("answer")
    if not isinstance(answer, str):
        raise HTTPException(400, "Missing 'answer'")

    result = get_session().check_answer(answer)
    if result is None:
        return {"ignored": True, "stats": get_session().stats()}
    result["ignored"] = False
    result["auto_advance_seconds"] = get_session().auto_advance_seconds
    return result


@app.post("/api/next")
async def api_next():
    session = get_session()
    if session.next_question() is None:
        raise HTTPException(404, "Dictionary is empty")
    return session.to_dict()


@app.post("/api/reset")
async def api_reset():
    session = get_session()
    session.reset()
    return session.to_dict()


# ── API: Stats ────────────────────────────────────────────────────────────

@app.get("/api/stats")
async def api_stats():
    return get_session().stats()


@app.get("/api/dictionary")
async def api_dictionary():
    entries = get_session().dictionary
    return {
        "total": len(entries),
        "verbs": sum(1 for e in entries if e.is_verb),
        "nouns": sum(1 for e in entries if not e.is_verb),
        "conjugable": sum(1 for e in entries if e.can_conjugate),
        "with_perfect": sum(1 for e in entries if e.has_perfect),
    }


# ── API: Settings ─────────────────────────────────────────────────────────

def _valid_delay(value) -> bool:
    if value is None:
        return True
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value >= 0


@app.get("/api/settings")
async def api_get_settings():
    return get_settings().to_dict()


@app.put("/api/settings")
async def api_update_settings(request: Request):
    body = await request.json()
    if not isinstance(body, dict):
        raise HTTPException(400, "Expected a JSON object")
    if "auto_advance_seconds" in body and not _valid_delay(body["auto_advance_seconds"]):
        raise HTTPException(400, "'auto_advance_seconds' must be null or a non-negative number")
    s = get_settings()
    known = {f.name for f in Settings.__dataclass_fields__.values()}
    for k, v in body.items():
        if k in known:
            setattr(s, k, v)
    save_settings(s)
    get_session().auto_advance_seconds = s.auto_advance_seconds
    return s.to_dict()
