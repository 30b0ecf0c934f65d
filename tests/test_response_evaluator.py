import logging

import pytest

from assessment_grading.errors import ConfigurationError, UnsupportedQuestionTypeError
from assessment_grading.models.attempt_model import Response
from assessment_grading.models.question_model import QuestionType
from assessment_grading.services.response_evaluator import evaluate, evaluate_response, grade_response


# ── Exact-match types ──────────────────────────────────────────────────────────

def test_short_answer_normalized_match():
    assert evaluate("Paris", ["paris"], QuestionType.SHORT_ANSWER, 5) == (True, 5)


def test_short_answer_near_miss_gets_nothing():
    assert evaluate("pariss", ["paris"], QuestionType.SHORT_ANSWER, 5) == (False, 0)


def test_multiple_choice_ignores_case_spacing_and_punctuation():
    assert evaluate("  queue. ", ["Queue"], QuestionType.MULTIPLE_CHOICE, 2) == (True, 2)


def test_true_false_is_exact_match():
    assert evaluate("TRUE", ["True"], QuestionType.TRUE_FALSE, 1) == (True, 1)
    assert evaluate("false", ["True"], QuestionType.TRUE_FALSE, 1) == (False, 0)


def test_only_first_accepted_answer_counts():
    assert evaluate("Lutetia", ["Paris", "Lutetia"], QuestionType.SHORT_ANSWER, 5) == (False, 0)


def test_single_string_accepted_answer():
    assert evaluate("3.14", "3.14", QuestionType.SHORT_ANSWER, 3) == (True, 3)


def test_decimal_point_is_significant():
    assert evaluate("314", ["3.14"], QuestionType.SHORT_ANSWER, 3) == (False, 0)


@pytest.mark.parametrize("response, accepted", [
    (None, ["Paris"]),
    ("Paris", None),
    ("Paris", []),
])
def test_missing_text_is_incorrect_not_an_error(response, accepted):
    assert evaluate(response, accepted, QuestionType.SHORT_ANSWER, 5) == (False, 0)


def test_question_type_by_string_value():
    assert evaluate("Paris", ["paris"], "SHORT_ANSWER", 5) == (True, 5)


def test_result_unpacks_as_pair():
    is_correct, marks = evaluate("Paris", ["paris"], QuestionType.SHORT_ANSWER, 5)
    assert is_correct is True
    assert marks == 5


# ── LIST_BASED ────────────────────────────────────────────────────────────────

def test_list_partial_credit():
    result = evaluate("beta, alpha", ["Alpha", "Beta", "Gamma"], QuestionType.LIST_BASED, 9)
    assert result == (False, 6)


def test_list_full_match():
    assert evaluate("A,B", ["A", "B"], QuestionType.LIST_BASED, 10) == (True, 10)


def test_list_response_given_as_list():
    assert evaluate(["b", " a "], ["A", "B"], QuestionType.LIST_BASED, 10) == (True, 10)


def test_list_accepted_given_as_one_string():
    assert evaluate("Blue", "red, green, blue", QuestionType.LIST_BASED, 6) == (False, 2)


def test_list_rounds_half_up():
    # 1/4 of 2 marks = 0.5, rounded up
    assert evaluate("a", ["a", "b", "c", "d"], QuestionType.LIST_BASED, 2) == (False, 1)
    # 1/8 of 4 marks = 0.5
    accepted = ["a", "b", "c", "d", "e", "f", "g", "h"]
    assert evaluate("h", accepted, QuestionType.LIST_BASED, 4) == (False, 1)


def test_list_wrong_items_score_zero():
    assert evaluate("delta, epsilon", ["Alpha", "Beta"], QuestionType.LIST_BASED, 4) == (False, 0)


def test_list_items_are_only_trimmed_and_case_folded():
    assert evaluate("alpha.", ["Alpha"], QuestionType.LIST_BASED, 4) == (False, 0)


def test_list_repeated_item_counts_each_time():
    assert evaluate("A, A", ["A", "B", "C"], QuestionType.LIST_BASED, 3) == (False, 2)
    assert evaluate("A, A, A", ["A", "B", "C"], QuestionType.LIST_BASED, 3) == (True, 3)


def test_list_marks_never_exceed_maximum():
    assert evaluate("A,A,A,A", ["A", "B", "C"], QuestionType.LIST_BASED, 3) == (True, 3)


def test_list_blank_items_ignored():
    assert evaluate("A,,B,", ["A", "B"], QuestionType.LIST_BASED, 10) == (True, 10)


def test_list_missing_response():
    assert evaluate(None, ["A", "B"], QuestionType.LIST_BASED, 10) == (False, 0)


@pytest.mark.parametrize("accepted", [None, [], ["", "  "], " , ", [","]])
def test_list_without_accepted_items_is_configuration_error(accepted):
    with pytest.raises(ConfigurationError):
        evaluate("A", accepted, QuestionType.LIST_BASED, 10)


# ── Errors ────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("question_type", ["ESSAY", "short_answer", "", None])
def test_unknown_question_type(question_type):
    with pytest.raises(UnsupportedQuestionTypeError) as exc:
        evaluate("Paris", ["Paris"], question_type, 5)
    assert exc.value.question_type == question_type


def test_negative_marks_rejected():
    with pytest.raises(ConfigurationError):
        evaluate("Paris", ["Paris"], QuestionType.SHORT_ANSWER, -1)


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        evaluate("A", [], QuestionType.LIST_BASED, 1)


# ── Response records ──────────────────────────────────────────────────────────

def test_evaluate_response_stores_verdict(questions):
    response = Response(question_id="Q3", response_text="Gamma, beta")

    returned = evaluate_response(response, questions[2])

    assert returned is response
    assert response.is_correct is False
    assert response.marks_awarded == 6


def test_evaluate_response_unanswered(questions):
    response = Response(question_id="Q1")

    evaluate_response(response, questions[0])

    assert response.is_correct is False
    assert response.marks_awarded == 0


def test_edit_distance_logged_but_not_used(caplog):
    caplog.set_level(logging.DEBUG, logger="assessment_grading.services.response_evaluator")

    result = evaluate("pariss", ["Paris"], QuestionType.SHORT_ANSWER, 5)

    assert result == (False, 0)
    assert "edit distance 1" in caplog.text


def test_grade_response_leaves_record_alone(questions):
    response = Response(question_id="Q1", response_text="Paris")

    result = grade_response(response, questions[0])

    assert result == (True, 5)
    assert response.is_correct is False
    assert response.marks_awarded == 0
