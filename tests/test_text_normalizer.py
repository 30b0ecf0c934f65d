import pytest

from assessment_grading.services.text_normalizer import normalize, split_list_items


def test_lowercases_and_trims():
    assert normalize("  Hello   World  ") == "hello world"


def test_collapses_tabs_and_newlines():
    assert normalize("binary\t\tsearch\ntree") == "binary search tree"


def test_strips_standalone_punctuation():
    assert normalize("Hello, world. Is it you?!") == "hello world is it you"


def test_keeps_punctuation_after_digits():
    assert normalize("3.14") == "3.14"
    assert normalize("1,000") == "1,000"
    # the full stop follows a digit, so it stays
    assert normalize("The answer is 42.") == "the answer is 42."


def test_straightens_typographic_quotes():
    assert normalize("don’t") == "don't"
    assert normalize("‘a’") == "'a'"
    assert normalize("“Hamlet”") == '"hamlet"'


def test_none_is_empty():
    assert normalize(None) == ""
    assert normalize("") == ""


def test_removed_mark_leaves_no_stray_space():
    assert normalize("paris !") == "paris"
    assert normalize("a . b") == "a b"


@pytest.mark.parametrize("text", [
    "  Hello   World  ",
    "a . b",
    "x ,y ; z",
    "Pi is 3.14.",
    "5,.:",
    "“Quoted” , text !",
    "?!",
    "",
])
def test_idempotent(text):
    once = normalize(text)
    assert normalize(once) == once


def test_split_list_items_trims():
    assert split_list_items(" Alpha ,Beta,  Gamma") == ["Alpha", "Beta", "Gamma"]


def test_split_list_items_drops_blank_items():
    assert split_list_items("A,,B,") == ["A", "B"]
    assert split_list_items(" , ") == []
    assert split_list_items(None) == []
