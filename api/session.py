"""
api/session.py — per-browser grading sessions held in memory

A GradingSession carries the loaded question bank, the open attempt and the
latest score report. The SessionStore hands one out per cookie and forgets
it after `ttl` seconds without a request.
"""

import logging
import threading
import time
import uuid
from dataclasses import dataclass, field
from typing import Optional

from assessment_grading.models.attempt_model import Assessment, Attempt, ScoreReport
from assessment_grading.models.question_model import Question

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class GradingSession:
    """State behind one session cookie."""

    session_id: str
    assessment: Optional[Assessment] = None
    questions: list[Question] = field(default_factory=list)
    attempt: Optional[Attempt] = None
    report: Optional[ScoreReport] = None
    last_seen: float = field(default_factory=time.time)

    def load(self, assessment: Assessment, questions: list[Question]) -> None:
        """Replace the question bank; any attempt on the old bank is dropped."""
        self.clear()
        self.assessment = assessment
        self.questions = list(questions)

    def clear(self) -> None:
        self.assessment = None
        self.questions = []
        self.attempt = None
        self.report = None

    def question_ids(self) -> list[str]:
        return [q.question_id for q in self.questions]


class SessionStore:
    """Thread-safe map of session ID to GradingSession with idle expiry."""

    def __init__(self, ttl: float) -> None:
        self.ttl = ttl
        self._lock = threading.Lock()
        self._sessions: dict[str, GradingSession] = {}

    def open(self, session_id: Optional[str]) -> GradingSession:
        """
        Return the live session for `session_id`, or a fresh one when the ID
        is missing, unknown or expired.
        """
        now = time.time()
        with self._lock:
            existing = self._sessions.get(session_id) if session_id else None
            if existing is not None and now - existing.last_seen <= self.ttl:
                existing.last_seen = now
                return existing

            grading = GradingSession(session_id=uuid.uuid4().hex, last_seen=now)
            self._sessions[grading.session_id] = grading
            if existing is not None:
                del self._sessions[existing.session_id]
            return grading

    def get(self, session_id: str) -> Optional[GradingSession]:
        with self._lock:
            return self._sessions.get(session_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def cleanup_expired(self) -> int:
        """Drop idle sessions. Returns how many were removed."""
        cutoff = time.time() - self.ttl
        with self._lock:
            expired = [sid for sid, s in self._sessions.items() if s.last_seen < cutoff]
            for sid in expired:
                del self._sessions[sid]
        return len(expired)

    def start_cleanup(self, interval: float) -> threading.Thread:
        """Run cleanup_expired() every `interval` seconds on a daemon thread."""

        def _loop():
            while True:
                time.sleep(interval)
                removed = self.cleanup_expired()
                if removed:
                    logger.info(f"Removed {removed} expired grading sessions")

        t = threading.Thread(target=_loop, name="session-cleanup", daemon=True)
        t.start()
        return t
