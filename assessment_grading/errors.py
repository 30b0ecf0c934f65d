"""
errors.py

Exceptions raised by the grading engine.

A missing answer is never an error (it simply earns no marks); these classes
cover caller faults such as a misconfigured question or a closed attempt.
"""


class GradingError(Exception):
    """Base class for every grading engine error."""


class ConfigurationError(GradingError, ValueError):
    """
    The caller handed the engine data that can never be graded.

    Examples: a LIST_BASED question with no accepted items, an assessment
    with zero total marks, a negative mark allocation.
    """


class UnsupportedQuestionTypeError(GradingError, ValueError):
    """The question type is not one the evaluator knows how to grade."""

    def __init__(self, question_type) -> None:
        self.question_type = question_type
        super().__init__(f"Unsupported question type: {question_type!r}")


class AttemptStateError(GradingError):
    """An operation is not allowed in the attempt's current status."""
