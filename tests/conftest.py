import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from assessment_grading.models.question_model import Question, QuestionType


@pytest.fixture
def questions():
    return [
        Question(
            question_id="Q1",
            question_text="Capital of France?",
            question_type=QuestionType.SHORT_ANSWER,
            topic="Geography",
            correct_answers=["Paris"],
            marks=5,
        ),
        Question(
            question_id="Q2",
            question_text="Which of these is a mammal?",
            question_type=QuestionType.MULTIPLE_CHOICE,
            topic="Biology",
            options=["Shark", "Whale", "Trout"],
            correct_answers=["Whale"],
            marks=2,
        ),
        Question(
            question_id="Q3",
            question_text="Name the first three Greek letters.",
            question_type=QuestionType.LIST_BASED,
            topic="Languages",
            correct_answers=["Alpha", "Beta", "Gamma"],
            marks=9,
        ),
        Question(
            question_id="Q4",
            question_text="Water boils at 100 degrees Celsius at sea level.",
            question_type=QuestionType.TRUE_FALSE,
            topic="Geography",
            options=["True", "False"],
            correct_answers=["True"],
            marks=4,
        ),
    ]
