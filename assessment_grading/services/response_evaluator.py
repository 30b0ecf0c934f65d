"""
services/response_evaluator.py

Grades one response against a question's accepted answers.
Pure functions. Logging is diagnostic only and never changes a verdict.

Public API:
  - evaluate(response_text, accepted_answers, question_type, max_marks) -> Evaluation
  - grade_response(response, question) -> Evaluation
  - evaluate_response(response, question) -> Response
"""

import logging
import math
from fractions import Fraction
from typing import NamedTuple, Optional, Sequence, Union

from assessment_grading.errors import ConfigurationError, UnsupportedQuestionTypeError
from assessment_grading.models.attempt_model import Response
from assessment_grading.models.question_model import Question, QuestionType
from assessment_grading.services.similarity import edit_distance
from assessment_grading.services.text_normalizer import normalize, split_list_items

logger = logging.getLogger(__name__)

AnswerText = Union[str, Sequence[str], None]

_LIST_SEPARATOR = ","


class Evaluation(NamedTuple):
    is_correct: bool
    marks_awarded: int


_INCORRECT = Evaluation(False, 0)


def evaluate(
    response_text: AnswerText,
    accepted_answers: AnswerText,
    question_type: Union[QuestionType, str],
    max_marks: int,
) -> Evaluation:
    """
    Grade one response.

    Args:
        response_text:    Student answer. A list of strings is treated as a
                          comma-separated answer. None means unanswered.
        accepted_answers: Accepted answers in order (or a single string).
        question_type:    QuestionType or its string value.
        max_marks:        Marks for a fully correct answer (>= 0).

    Returns:
        Evaluation(is_correct, marks_awarded) with marks in [0, max_marks].

    Raises:
        UnsupportedQuestionTypeError: question_type is not a QuestionType.
        ConfigurationError: max_marks is negative, or a LIST_BASED question
                            has no accepted items.
    """
    qtype = _coerce_type(question_type)
    if max_marks < 0:
        raise ConfigurationError(f"max_marks must be >= 0, got {max_marks}")

    if qtype in (QuestionType.MULTIPLE_CHOICE, QuestionType.SHORT_ANSWER, QuestionType.TRUE_FALSE):
        return _evaluate_exact(as_answer_text(response_text), _first(accepted_answers), max_marks)
    if qtype is QuestionType.LIST_BASED:
        return _evaluate_list(as_answer_text(response_text), accepted_answers, max_marks)

    # every QuestionType member is handled above
    raise UnsupportedQuestionTypeError(qtype)


def grade_response(response: Response, question: Question) -> Evaluation:
    """Evaluate `response` against `question` without touching the record."""
    result = evaluate(
        response.response_text,
        question.correct_answers,
        question.question_type,
        question.marks,
    )
    logger.debug(
        f"Question {question.question_id}: "
        f"{'CORRECT' if result.is_correct else 'INCORRECT'}, "
        f"{result.marks_awarded}/{question.marks} marks"
    )
    return result


def apply_evaluation(response: Response, result: Evaluation) -> Response:
    response.is_correct = result.is_correct
    response.marks_awarded = result.marks_awarded
    return response


def evaluate_response(response: Response, question: Question) -> Response:
    """
    Evaluate `response` against `question` and store the verdict on it.
    Returns the same Response for chaining.
    """
    return apply_evaluation(response, grade_response(response, question))


# ── Strategies ────────────────────────────────────────────────────────────────

def _evaluate_exact(response: Optional[str], answer: Optional[str], max_marks: int) -> Evaluation:
    """MULTIPLE_CHOICE, SHORT_ANSWER and TRUE_FALSE: normalized exact match."""
    if response is None or answer is None:
        return _INCORRECT

    normalized_response = normalize(response)
    normalized_answer = normalize(answer)
    is_correct = normalized_response == normalized_answer

    # near-miss diagnostics only; the verdict is exact equality
    logger.debug(
        f"Normalized response '{normalized_response}' vs answer '{normalized_answer}', "
        f"edit distance {edit_distance(normalized_response, normalized_answer)}"
    )
    return Evaluation(is_correct, max_marks if is_correct else 0)


def _evaluate_list(response: Optional[str], accepted_answers: AnswerText, max_marks: int) -> Evaluation:
    """
    LIST_BASED: partial credit for each response item found among the
    accepted items (trim + case-insensitive, no further normalization).

    A repeated correct item counts every time it appears; the result is
    clamped to max_marks.
    """
    accepted_items = split_list_items(as_answer_text(accepted_answers))
    if not accepted_items:
        raise ConfigurationError("LIST_BASED question has no accepted answer items")
    if response is None:
        return _INCORRECT

    accepted_keys = [item.casefold() for item in accepted_items]
    correct_count = 0
    for item in split_list_items(response):
        if item.casefold() in accepted_keys:
            correct_count += 1

    fraction = Fraction(correct_count, len(accepted_items))
    marks = min(_round_half_up(fraction * max_marks), max_marks)
    logger.debug(
        f"List answer: {correct_count}/{len(accepted_items)} items correct, "
        f"{marks}/{max_marks} marks"
    )
    return Evaluation(marks == max_marks, marks)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _coerce_type(question_type: Union[QuestionType, str]) -> QuestionType:
    if isinstance(question_type, QuestionType):
        return question_type
    try:
        return QuestionType(question_type)
    except ValueError:
        raise UnsupportedQuestionTypeError(question_type) from None


def as_answer_text(value: AnswerText) -> Optional[str]:
    """Join a list answer into its comma-separated form."""
    if value is None or isinstance(value, str):
        return value
    return _LIST_SEPARATOR.join(value)


def _first(value: AnswerText) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    return value[0] if len(value) else None


def _round_half_up(value: Fraction) -> int:
    return math.floor(value + Fraction(1, 2))
