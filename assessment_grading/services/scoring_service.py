"""
services/scoring_service.py

Percentage, letter grade and pass/fail for a submitted attempt.
Pure Python functions, no UI code and no global state changes.
"""

from typing import List, Optional, Sequence, Tuple

from pydantic import BaseModel, Field, field_validator

from config import GRADE_BOUNDARIES, PASS_PERCENTAGE, UNSCORED_GRADE
from assessment_grading.errors import ConfigurationError
from assessment_grading.models.attempt_model import Assessment, Attempt, ScoreReport
from assessment_grading.models.question_model import Question
from assessment_grading.services.attempt_service import current_score


class GradingPolicy(BaseModel):
    """
    Letter-grade boundaries as (minimum percentage, letter), highest first.
    A percentage below every minimum gets the last letter.
    """

    boundaries: List[Tuple[float, str]] = Field(default_factory=lambda: list(GRADE_BOUNDARIES))
    pass_percentage: float = PASS_PERCENTAGE

    @field_validator('boundaries')
    @classmethod
    def validate_boundaries(cls, v: List[Tuple[float, str]]) -> List[Tuple[float, str]]:
        if not v:
            raise ValueError("A grading policy needs at least one grade boundary.")
        if any(letter == UNSCORED_GRADE for _, letter in v):
            raise ValueError(f"'{UNSCORED_GRADE}' is reserved for unscored records.")
        return sorted(v, key=lambda b: b[0], reverse=True)


DEFAULT_POLICY = GradingPolicy()


def percentage(score: float, total_marks: float) -> float:
    """
    score / total_marks * 100.

    Raises:
        ConfigurationError: total_marks <= 0, the percentage is undefined.
    """
    if total_marks <= 0:
        raise ConfigurationError(f"total_marks must be > 0, got {total_marks}")
    return score / total_marks * 100


def grade(pct: float, policy: GradingPolicy = DEFAULT_POLICY) -> str:
    """Map a percentage to a letter. Never returns the unscored sentinel."""
    for minimum, letter in policy.boundaries:
        if pct >= minimum:
            return letter
    return policy.boundaries[-1][1]


def is_passed(pct: float, policy: GradingPolicy = DEFAULT_POLICY) -> bool:
    return pct >= policy.pass_percentage


def build_report(
    attempt: Attempt,
    total_marks: int,
    questions: Optional[Sequence[Question]] = None,
    policy: GradingPolicy = DEFAULT_POLICY,
) -> ScoreReport:
    """
    Score a submitted attempt against the assessment's total marks.

    Answer counts are filled in only when `questions` is given, since an
    unanswered question has no Response to count.
    """
    score = current_score(attempt)
    pct = percentage(score, total_marks)

    correct = incorrect = unanswered = 0
    if questions is not None:
        for q in questions:
            response = attempt.responses.get(q.question_id)
            if response is None:
                unanswered += 1
            elif response.is_correct:
                correct += 1
            else:
                incorrect += 1

    return ScoreReport(
        score=score,
        total_marks=total_marks,
        percentage=round(pct, 2),
        grade=grade(pct, policy),
        passed=is_passed(pct, policy),
        correct_count=correct,
        incorrect_count=incorrect,
        unanswered_count=unanswered,
    )


def apply_report(assessment: Assessment, report: ScoreReport) -> Assessment:
    """Copy a report's values into the assessment's display cache."""
    assessment.score = report.score
    assessment.percentage = report.percentage
    assessment.grade = report.grade
    return assessment
