"""
services/attempt_service.py

Attempt lifecycle and score aggregation.
Plain functions: no UI code, no storage.

Responses are written through record_response() so the attempt's cached
score is invalidated on every change.
"""

import logging
import time
from collections import defaultdict
from typing import Dict, List, Mapping, Optional, Sequence

from assessment_grading.errors import AttemptStateError
from assessment_grading.models.attempt_model import Attempt, AttemptStatus, Response
from assessment_grading.models.question_model import Question
from assessment_grading.services.response_evaluator import (
    AnswerText, apply_evaluation, as_answer_text, grade_response,
)

logger = logging.getLogger(__name__)


def start_attempt(
    student_id: str = "",
    assessment_id: str = "",
    is_practice: bool = False,
) -> Attempt:
    """Open a new IN_PROGRESS attempt."""
    return Attempt(student_id=student_id, assessment_id=assessment_id, is_practice=is_practice)


def record_response(attempt: Attempt, question_id: str, response_text: AnswerText) -> Optional[Response]:
    """
    Store (or replace) the student's answer for one question.

    An empty answer clears the slot, so the question counts as unanswered.
    Returns the stored Response, or None if the slot was cleared.

    Raises:
        AttemptStateError: the attempt has already been submitted.
    """
    _require_open(attempt, "record a response")

    text = as_answer_text(response_text)
    attempt.score = None
    if not text:
        attempt.responses.pop(question_id, None)
        return None

    response = Response(question_id=question_id, response_text=text)
    attempt.responses[question_id] = response
    return response


def add_feedback(attempt: Attempt, question_id: str, feedback: str) -> Response:
    """
    Attach a grader's note to a response. Allowed after submission;
    marks and correctness are left alone.

    Raises:
        KeyError: no response exists for question_id.
    """
    response = attempt.responses[question_id]
    response.feedback = feedback or None
    return response


def total_score(responses: Mapping[str, Response]) -> int:
    """Sum of marks_awarded over all responses. Order does not matter."""
    return sum(r.marks_awarded for r in responses.values())


def current_score(attempt: Attempt) -> int:
    """Return the cached score, recomputing it if a response changed."""
    if attempt.score is None:
        attempt.score = total_score(attempt.responses)
    return attempt.score


def submit(
    attempt: Attempt,
    questions: Optional[Sequence[Question]] = None,
    now: Optional[float] = None,
) -> Attempt:
    """
    Close the attempt: evaluate responses, stamp end_time, set SUBMITTED and
    refresh the cached score.

    Args:
        attempt:   Attempt to close.
        questions: If given, every response with a matching question is
                   evaluated before aggregation. Without it, the stored
                   marks_awarded values are summed as they are.
        now:       End timestamp (defaults to time.time()).

    Raises:
        AttemptStateError: the attempt is already SUBMITTED or GRADED.
        ConfigurationError, UnsupportedQuestionTypeError: a question cannot
                           be graded.
        In every case nothing on the attempt changes: all responses are
        evaluated before any verdict is written.
    """
    _require_open(attempt, "submit")

    if questions is not None:
        by_id = {q.question_id: q for q in questions}
        verdicts = []
        for question_id, response in attempt.responses.items():
            question = by_id.get(question_id)
            if question is None:
                logger.warning(f"Attempt {attempt.attempt_id}: no question '{question_id}', response left ungraded")
                continue
            verdicts.append((response, grade_response(response, question)))

        for response, result in verdicts:
            apply_evaluation(response, result)

    attempt.end_time = time.time() if now is None else now
    attempt.status = AttemptStatus.SUBMITTED
    attempt.score = total_score(attempt.responses)

    logger.info(
        f"Attempt {attempt.attempt_id} submitted: score {attempt.score}, "
        f"{len(attempt.responses)} responses"
    )
    return attempt


def incorrect_questions(questions: Sequence[Question], attempt: Attempt) -> List[Question]:
    """
    Review list: questions answered wrongly or not at all, in original order.
    Questions without accepted answers cannot be graded and are skipped.
    """
    incorrect: List[Question] = []
    for q in questions:
        if not q.correct_answers:
            continue
        response = attempt.responses.get(q.question_id)
        if response is None or not response.is_correct:
            incorrect.append(q)
    return incorrect


def topic_breakdown(questions: Sequence[Question], attempt: Attempt) -> List[Dict[str, object]]:
    """
    Per-topic results.

    Returns:
        [{"topic": str, "total": int, "correct": int, "incorrect": int,
          "unanswered": int, "marks": int, "max_marks": int, "percentage": float}, ...]
        sorted by topic name.
    """
    buckets: Dict[str, Dict[str, int]] = defaultdict(
        lambda: {"total": 0, "correct": 0, "incorrect": 0, "unanswered": 0, "marks": 0, "max_marks": 0}
    )

    for q in questions:
        b = buckets[q.topic or "General"]
        b["total"] += 1
        b["max_marks"] += q.marks

        response = attempt.responses.get(q.question_id)
        if response is None:
            b["unanswered"] += 1
        elif response.is_correct:
            b["correct"] += 1
        else:
            b["incorrect"] += 1
        if response is not None:
            b["marks"] += response.marks_awarded

    result = []
    for topic in sorted(buckets):
        b = buckets[topic]
        pct = round(b["marks"] / b["max_marks"] * 100, 1) if b["max_marks"] else 0.0
        result.append({"topic": topic, **b, "percentage": pct})
    return result


def _require_open(attempt: Attempt, action: str) -> None:
    if attempt.is_closed:
        raise AttemptStateError(
            f"Cannot {action}: attempt {attempt.attempt_id} is already {attempt.status.value}"
        )
