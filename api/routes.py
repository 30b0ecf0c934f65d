"""
api/routes.py — FastAPI endpoints
"""

from typing import Union

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel, Field

from api.sample_questions import SAMPLE_ASSESSMENT, SAMPLE_QUESTIONS
from api.session import GradingSession

from assessment_grading.errors import AttemptStateError, ConfigurationError, UnsupportedQuestionTypeError
from assessment_grading.models.attempt_model import Assessment, Attempt
from assessment_grading.models.question_model import Question
from assessment_grading.services.attempt_service import (
    add_feedback, incorrect_questions, record_response,
    start_attempt, submit, topic_breakdown,
)
from assessment_grading.services.response_evaluator import evaluate
from assessment_grading.services.scoring_service import apply_report, build_report

router = APIRouter()

# ── Pydantic request bodies ──────────────────────────────────────────────────

class EvaluateBody(BaseModel):
    response_text: Union[str, list[str], None] = None
    accepted_answers: Union[str, list[str], None] = None
    question_type: str
    max_marks: int


class LoadQuestionsBody(BaseModel):
    assessment: Assessment
    questions: list[Question] = Field(..., min_length=1)


class StartAttemptBody(BaseModel):
    student_id: str = ""


class SaveAnswerBody(BaseModel):
    question_id: str
    answer: Union[str, list[str]] = ""


class FeedbackBody(BaseModel):
    question_id: str
    feedback: str


# ── Dependencies / helpers ──────────────────────────────────────────────────

def grading_session(request: Request) -> GradingSession:
    return request.state.grading


def current_attempt(grading: GradingSession = Depends(grading_session)) -> Attempt:
    if grading.attempt is None:
        raise HTTPException(status_code=404, detail="No attempt in progress.")
    return grading.attempt


def loaded_bank(grading: GradingSession = Depends(grading_session)) -> GradingSession:
    if grading.assessment is None or not grading.questions:
        raise HTTPException(status_code=400, detail="No questions loaded.")
    return grading


def _question_to_dict(q: Question) -> dict:
    """Question as shown to a student; accepted answers are withheld."""
    return {
        "question_id": q.question_id,
        "question_text": q.question_text,
        "question_type": q.question_type.value,
        "topic": q.topic,
        "difficulty": q.difficulty.value,
        "options": q.options,
        "marks": q.marks,
    }


# ── Endpoints ────────────────────────────────────────────────────────────────

@router.post("/api/evaluate")
async def api_evaluate(body: EvaluateBody):
    try:
        result = evaluate(body.response_text, body.accepted_answers, body.question_type, body.max_marks)
    except (ConfigurationError, UnsupportedQuestionTypeError) as e:
        raise HTTPException(status_code=422, detail=str(e))
    return {"is_correct": result.is_correct, "marks_awarded": result.marks_awarded}


@router.post("/api/load-questions")
async def load_questions(body: LoadQuestionsBody, grading: GradingSession = Depends(grading_session)):
    assessment = body.assessment.model_copy(
        update={"question_ids": [q.question_id for q in body.questions]}
    )
    grading.load(assessment, body.questions)
    return {"count": len(body.questions), "ok": True}


@router.post("/api/start-sample-exam")
async def start_sample_exam(grading: GradingSession = Depends(grading_session)):
    grading.load(SAMPLE_ASSESSMENT.model_copy(deep=True), SAMPLE_QUESTIONS)
    grading.attempt = start_attempt(assessment_id=SAMPLE_ASSESSMENT.assessment_id)
    return {"total": len(SAMPLE_QUESTIONS), "ok": True}


@router.post("/api/start-attempt")
async def api_start_attempt(body: StartAttemptBody, grading: GradingSession = Depends(loaded_bank)):
    grading.attempt = start_attempt(
        student_id=body.student_id,
        assessment_id=grading.assessment.assessment_id,
        is_practice=grading.assessment.is_practice,
    )
    grading.report = None
    return {"attempt_id": grading.attempt.attempt_id, "total": len(grading.questions), "ok": True}


@router.get("/api/question/{index}")
async def get_question(index: int, grading: GradingSession = Depends(grading_session)):
    if not (0 <= index < len(grading.questions)):
        raise HTTPException(status_code=404, detail="Question not found.")

    q = grading.questions[index]
    saved = grading.attempt.responses.get(q.question_id) if grading.attempt else None

    d = _question_to_dict(q)
    d.update({
        "saved_answer": saved.response_text if saved else "",
        "index": index,
        "total": len(grading.questions),
    })
    return d


@router.post("/api/save-answer")
async def save_answer(
    body: SaveAnswerBody,
    attempt: Attempt = Depends(current_attempt),
    grading: GradingSession = Depends(grading_session),
):
    if body.question_id not in grading.question_ids():
        raise HTTPException(status_code=404, detail="Question not found.")

    try:
        record_response(attempt, body.question_id, body.answer)
    except AttemptStateError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"ok": True, "answered_count": len(attempt.responses)}


@router.get("/api/attempt-state")
async def get_attempt_state(
    attempt: Attempt = Depends(current_attempt),
    grading: GradingSession = Depends(grading_session),
):
    return {
        "attempt_id": attempt.attempt_id,
        "status": attempt.status.value,
        "start_time": attempt.start_time,
        "end_time": attempt.end_time,
        "answers": {qid: r.response_text for qid, r in attempt.responses.items()},
        "answered_count": len(attempt.responses),
        "total": len(grading.questions),
        "question_ids": grading.question_ids(),
    }


@router.post("/api/submit-attempt")
async def submit_attempt(
    attempt: Attempt = Depends(current_attempt),
    grading: GradingSession = Depends(loaded_bank),
):
    assessment = grading.assessment
    if assessment.total_marks <= 0:
        raise HTTPException(status_code=422, detail="Assessment total marks must be greater than zero.")

    try:
        submit(attempt, grading.questions)
        report = build_report(attempt, assessment.total_marks, grading.questions)
    except AttemptStateError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except (ConfigurationError, UnsupportedQuestionTypeError) as e:
        raise HTTPException(status_code=422, detail=str(e))

    apply_report(assessment, report)
    grading.report = report
    return {"score": report.score, "percentage": report.percentage, "grade": report.grade, "ok": True}


@router.get("/api/results")
async def get_results(
    attempt: Attempt = Depends(current_attempt),
    grading: GradingSession = Depends(grading_session),
):
    if not attempt.is_closed or grading.report is None:
        raise HTTPException(status_code=400, detail="The attempt has not been submitted yet.")

    incorrect_data = []
    for q in incorrect_questions(grading.questions, attempt):
        d = _question_to_dict(q)
        response = attempt.responses.get(q.question_id)
        d["correct_answers"] = q.correct_answers
        d["user_answer"] = response.response_text if response else ""
        d["marks_awarded"] = response.marks_awarded if response else 0
        d["feedback"] = response.feedback if response else None
        incorrect_data.append(d)

    return {
        **grading.report.model_dump(),
        "total": len(grading.questions),
        "topic_scores": topic_breakdown(grading.questions, attempt),
        "incorrect_questions": incorrect_data,
    }


@router.post("/api/feedback")
async def post_feedback(body: FeedbackBody, attempt: Attempt = Depends(current_attempt)):
    try:
        response = add_feedback(attempt, body.question_id, body.feedback)
    except KeyError:
        raise HTTPException(status_code=404, detail="No response for that question.")
    return {"ok": True, "question_id": response.question_id, "feedback": response.feedback}


@router.post("/api/reset")
async def reset_session(grading: GradingSession = Depends(grading_session)):
    grading.clear()
    return {"ok": True}
