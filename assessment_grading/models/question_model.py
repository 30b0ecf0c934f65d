from enum import Enum
from typing import Optional, List
from pydantic import BaseModel, Field, field_validator, model_validator


class QuestionType(str, Enum):
    """Question formats the evaluator can grade."""

    MULTIPLE_CHOICE = "MULTIPLE_CHOICE"
    SHORT_ANSWER = "SHORT_ANSWER"
    LIST_BASED = "LIST_BASED"
    TRUE_FALSE = "TRUE_FALSE"


class Difficulty(str, Enum):
    EASY = "EASY"
    MEDIUM = "MEDIUM"
    HARD = "HARD"


class Question(BaseModel):
    """
    CAT question with its accepted answers.
    Pydantic v2.
    """
    question_id: str = Field(
        ...,
        min_length=1,
        description="Question identifier (unique within a question bank)"
    )
    question_text: str = Field(
        ...,
        min_length=1,
        description="Prompt shown to the student"
    )
    question_type: QuestionType = Field(
        ...,
        description="Grading rule applied to responses"
    )
    topic: Optional[str] = Field(
        None,
        description="Topic the question belongs to (None if untagged)"
    )
    difficulty: Difficulty = Field(
        Difficulty.MEDIUM,
        description="Difficulty level"
    )
    options: List[str] = Field(
        default_factory=list,
        description="Choices for MULTIPLE_CHOICE / TRUE_FALSE questions"
    )
    correct_answers: List[str] = Field(
        default_factory=list,
        description="Accepted answers, in order. LIST_BASED items are all required."
    )
    marks: int = Field(
        ...,
        ge=0,
        description="Maximum marks for the question"
    )

    @field_validator('correct_answers')
    @classmethod
    def strip_blank_answers(cls, v: List[str]) -> List[str]:
        """
        Blank accepted answers can never match anything, so drop them.
        """
        return [a for a in v if a and a.strip()]

    @model_validator(mode='after')
    def validate_answers(self) -> 'Question':
        """
        Validation 1: a LIST_BASED question needs at least one non-blank item
        once its answers are split on commas, otherwise partial credit
        divides by zero.
        Validation 2: when a MULTIPLE_CHOICE question lists its options, the
        first accepted answer must be one of them.
        """
        # local import: services depend on models, not the other way round
        from assessment_grading.services.text_normalizer import normalize, split_list_items

        if self.question_type is QuestionType.LIST_BASED and not any(
            split_list_items(answer) for answer in self.correct_answers
        ):
            raise ValueError(
                f"LIST_BASED question '{self.question_id}' has no correct answers."
            )
        if (
            self.question_type is QuestionType.MULTIPLE_CHOICE
            and self.options
            and self.correct_answers
        ):
            normalized_options = {normalize(o) for o in self.options}
            if normalize(self.correct_answers[0]) not in normalized_options:
                raise ValueError(
                    f"Correct answer ('{self.correct_answers[0]}') is not one of "
                    f"the options ({self.options})."
                )
        return self
