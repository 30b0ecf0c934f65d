"""
models/attempt_model.py

Records produced while a student sits an assessment: one Response per
question, grouped into an Attempt, plus the Assessment display record.
Pydantic BaseModel based, serialisable, no UI code.
"""

import time
import uuid
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from config import UNSCORED_GRADE


class AttemptStatus(str, Enum):
    """
    IN_PROGRESS → SUBMITTED → GRADED.

    submit() evaluates and closes an attempt in one step, so it only ever
    produces SUBMITTED. GRADED arrives on records loaded from elsewhere and
    counts as closed.
    """

    IN_PROGRESS = "IN_PROGRESS"
    SUBMITTED = "SUBMITTED"
    GRADED = "GRADED"


class Response(BaseModel):
    """
    A single answer for one question within an attempt.

    Attributes:
        question_id:   Question this response answers.
        response_text: Raw answer. LIST_BASED answers are comma-separated.
        is_correct:    Set by evaluation.
        marks_awarded: Set by evaluation, within [0, question.marks].
        feedback:      Optional grader note, the only field that may change
                       after evaluation.
    """

    question_id: str
    response_text: Optional[str] = None
    is_correct: bool = False
    marks_awarded: int = Field(default=0, ge=0)
    feedback: Optional[str] = None


class Attempt(BaseModel):
    """
    One student's engagement with an assessment.

    `score` is a cache of the summed marks. None means stale; use
    attempt_service.current_score() rather than reading it directly.
    """

    attempt_id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    student_id: str = ""
    assessment_id: str = ""
    start_time: float = Field(
        default_factory=time.time,
        description="Start of the attempt (Unix timestamp, time.time())"
    )
    end_time: Optional[float] = None
    status: AttemptStatus = AttemptStatus.IN_PROGRESS
    responses: Dict[str, Response] = Field(
        default_factory=dict,
        description="key: question_id, value: Response"
    )
    is_practice: bool = False
    score: Optional[int] = None

    @property
    def is_closed(self) -> bool:
        return self.status is not AttemptStatus.IN_PROGRESS


class Assessment(BaseModel):
    """
    Assessment metadata. score / percentage / grade are display values
    cached from the latest ScoreReport; grade stays "N/A" until scored.
    """

    assessment_id: str
    title: str = ""
    total_marks: int = Field(..., ge=0)
    question_ids: List[str] = Field(default_factory=list)
    is_practice: bool = False
    score: float = 0.0
    percentage: float = 0.0
    grade: str = UNSCORED_GRADE


class ScoreReport(BaseModel):
    """Scored outcome of one submitted attempt."""

    score: int
    total_marks: int
    percentage: float
    grade: str
    passed: bool
    correct_count: int = 0
    incorrect_count: int = 0
    unanswered_count: int = 0
