"""FastAPI HTTP layer wrapping the quiz engine."""

from __future__ import annotations

import hmac
import logging
import os
from collections import OrderedDict

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from katakana_quiz.bank import QuestionBank
from katakana_quiz.difficulty import select_tier
from katakana_quiz.errors import InvalidArgumentError, InvalidModeError, QuizError
from katakana_quiz.katakana_data import DIFFICULTY_TIERS
from katakana_quiz.progress import ProgressStore, ProgressTracker
from katakana_quiz.quiz_engine import QuestionGenerator
from katakana_quiz.quiz_models import SessionState
from katakana_quiz.random_source import RandomSource
from katakana_quiz.session import QuizSession

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Katakana Quiz API",
    description="Katakana reference, quizzes and progress tracking",
    version="0.1.0",
)

API_KEY = os.getenv("API_KEY")
if not API_KEY:
    logger.warning("API_KEY not set. All requests will be allowed.")

# Fixed seed for reproducible quizzes (unset = fresh randomness)
QUIZ_SEED = os.getenv("QUIZ_SEED")

# Sessions kept in memory; the oldest finished ones are dropped first
MAX_SESSIONS = int(os.getenv("MAX_SESSIONS", "100"))


@app.middleware("http")
async def verify_api_key(request: Request, call_next):
    if API_KEY and request.url.path != "/health":
        key = request.headers.get("x-api-key", "")
        if not hmac.compare_digest(key, API_KEY):
            return JSONResponse(status_code=401, content={"detail": "Invalid API key"})
    return await call_next(request)


@app.get("/health")
def health():
    """Unauthenticated health check."""
    return {"status": "ok"}


bank = QuestionBank()
generator = QuestionGenerator(
    bank, RandomSource(int(QUIZ_SEED) if QUIZ_SEED else None)
)
tracker = ProgressTracker(ProgressStore())
tracker.register_visit()
sessions: OrderedDict[str, QuizSession] = OrderedDict()


# --- Request models ---


class StartSessionRequest(BaseModel):
    mode: str
    count: int | None = Field(default=None, ge=1)


class AnswerRequest(BaseModel):
    answer: str | list[str] | None = None


class MatchRequest(BaseModel):
    side: str
    value: str


def _get_session(session_id: str) -> QuizSession:
    session = sessions.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"Session not found: {session_id}")
    return session


def _register(session: QuizSession) -> None:
    sessions[session.id] = session
    while len(sessions) > MAX_SESSIONS:
        stale = next(
            (
                sid
                for sid, s in sessions.items()
                if sid != session.id and s.state != SessionState.active
            ),
            next(iter(sessions)),
        )
        logger.debug("Evicting session %s", stale)
        del sessions[stale]


def _http_error(e: QuizError) -> HTTPException:
    status = 400 if isinstance(e, (InvalidModeError, InvalidArgumentError)) else 409
    return HTTPException(status_code=status, detail=str(e))


def _require_character(glyph: str) -> None:
    if bank.get_character(glyph) is None:
        raise HTTPException(status_code=404, detail=f"Character not found: {glyph}")


# --- Reference endpoints ---


@app.get("/api/characters")
def list_characters(q: str = "", category: str | None = None):
    """List characters, optionally filtered by search text and category."""
    return [c.model_dump() for c in bank.search(q, category)]


@app.get("/api/characters/{glyph}")
def get_character(glyph: str):
    """Look up one character with its stroke segments."""
    char = bank.get_character(glyph)
    if char is None:
        raise HTTPException(status_code=404, detail=f"Character not found: {glyph}")
    return char.model_dump()


@app.get("/api/categories")
def list_categories():
    return [c.model_dump() for c in bank.list_categories()]


@app.get("/api/names")
def list_names():
    return [n.model_dump() for n in bank.list_names()]


@app.get("/api/words")
def list_words():
    return [w.model_dump() for w in bank.list_words()]


@app.get("/api/tiers")
def list_tiers():
    """List the progressive quiz difficulty tiers."""
    return [t.model_dump() for t in DIFFICULTY_TIERS]


@app.get("/api/tiers/select")
def select_difficulty(mastered: int | None = None):
    """Tier for a mastered-character count (default: the learner's own)."""
    if mastered is None:
        mastered = tracker.mastered_count()
    return select_tier(mastered).model_dump()


# --- Quiz session endpoints ---


@app.post("/api/sessions")
def start_session(req: StartSessionRequest):
    """Start a new quiz session."""
    session = QuizSession(
        generator, mastery_provider=tracker.mastered_count, listeners=[tracker]
    )
    try:
        session.start(req.mode, req.count)
    except QuizError as e:
        raise _http_error(e)
    _register(session)
    return session.snapshot()


@app.get("/api/sessions/{session_id}")
def get_session(session_id: str):
    return _get_session(session_id).snapshot()


@app.post("/api/sessions/{session_id}/answer")
def submit_answer(session_id: str, req: AnswerRequest):
    """Answer the current question."""
    session = _get_session(session_id)
    try:
        feedback = session.submit(req.answer)
    except QuizError as e:
        raise _http_error(e)
    return feedback.model_dump()


@app.post("/api/sessions/{session_id}/match")
def propose_match(session_id: str, req: MatchRequest):
    """Select an item on the matching board."""
    session = _get_session(session_id)
    try:
        outcome = session.propose_match(req.side, req.value)
    except QuizError as e:
        raise _http_error(e)
    return outcome.model_dump()


@app.post("/api/sessions/{session_id}/advance")
def advance(session_id: str):
    """Move to the next question; completes the session after the last one."""
    session = _get_session(session_id)
    try:
        session.advance()
    except QuizError as e:
        raise _http_error(e)
    return session.snapshot()


@app.post("/api/sessions/{session_id}/retake")
def retake(session_id: str):
    session = _get_session(session_id)
    try:
        session.retake()
    except QuizError as e:
        raise _http_error(e)
    return session.snapshot()


@app.get("/api/sessions/{session_id}/result")
def get_result(session_id: str):
    session = _get_session(session_id)
    try:
        return session.get_result().model_dump()
    except QuizError as e:
        raise _http_error(e)


@app.delete("/api/sessions/{session_id}")
def abandon_session(session_id: str):
    """Abandon and discard a session."""
    session = sessions.pop(session_id, None)
    if session is None:
        raise HTTPException(status_code=404, detail=f"Session not found: {session_id}")
    session.abandon()
    return {"status": "abandoned"}


# --- Progress endpoints ---


@app.get("/api/progress")
def get_progress():
    return tracker.state.summary()


@app.post("/api/progress/learned/{glyph}")
def mark_learned(glyph: str):
    _require_character(glyph)
    tracker.mark_learned(glyph)
    return {"learned": True, "mastered": tracker.mastered_count()}


@app.delete("/api/progress/learned/{glyph}")
def unmark_learned(glyph: str):
    _require_character(glyph)
    tracker.unmark_learned(glyph)
    return {"learned": False, "mastered": tracker.mastered_count()}


@app.post("/api/progress/bookmarks/{glyph}")
def add_bookmark(glyph: str):
    _require_character(glyph)
    tracker.set_bookmark(glyph, True)
    return {"bookmarked": True}


@app.delete("/api/progress/bookmarks/{glyph}")
def remove_bookmark(glyph: str):
    _require_character(glyph)
    tracker.set_bookmark(glyph, False)
    return {"bookmarked": False}


@app.delete("/api/progress")
def reset_progress():
    """Forget everything about the learner."""
    tracker.reset()
    return {"status": "reset"}


def main():
    """Run the API server."""
    import uvicorn

    port = int(os.environ.get("PORT", 8000))
    uvicorn.run(app, host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
