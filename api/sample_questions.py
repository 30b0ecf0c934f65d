"""
api/sample_questions.py — built-in sample CAT for trying the API without uploading a question bank
"""

from assessment_grading.models.attempt_model import Assessment
from assessment_grading.models.question_model import Difficulty, Question, QuestionType

SAMPLE_QUESTIONS = [
    Question(
        question_id="SAMPLE-1",
        question_text="Which data structure uses FIFO ordering?",
        question_type=QuestionType.MULTIPLE_CHOICE,
        topic="Data Structures",
        difficulty=Difficulty.EASY,
        options=["Stack", "Queue", "Tree", "Graph"],
        correct_answers=["Queue"],
        marks=2,
    ),
    Question(
        question_id="SAMPLE-2",
        question_text="A binary search runs in logarithmic time on a sorted array.",
        question_type=QuestionType.TRUE_FALSE,
        topic="Algorithms",
        options=["True", "False"],
        correct_answers=["True"],
        marks=1,
    ),
    Question(
        question_id="SAMPLE-3",
        question_text="What does SQL stand for?",
        question_type=QuestionType.SHORT_ANSWER,
        topic="Databases",
        correct_answers=["Structured Query Language"],
        marks=3,
    ),
    Question(
        question_id="SAMPLE-4",
        question_text="List the three primary colours of light.",
        question_type=QuestionType.LIST_BASED,
        topic="General",
        difficulty=Difficulty.EASY,
        correct_answers=["Red", "Green", "Blue"],
        marks=6,
    ),
    Question(
        question_id="SAMPLE-5",
        question_text="Give the value of pi to two decimal places.",
        question_type=QuestionType.SHORT_ANSWER,
        topic="Algorithms",
        difficulty=Difficulty.HARD,
        correct_answers=["3.14"],
        marks=3,
    ),
]

SAMPLE_ASSESSMENT = Assessment(
    assessment_id="SAMPLE-CAT",
    title="Sample CAT",
    total_marks=sum(q.marks for q in SAMPLE_QUESTIONS),
    question_ids=[q.question_id for q in SAMPLE_QUESTIONS],
    is_practice=True,
)
