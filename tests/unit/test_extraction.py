"""Unit tests for JSON recovery from generated text."""

import pytest

from tripsage.generation.errors import ExtractionError
from tripsage.generation.extraction import extract_json, looks_like_attempted_json, missing_keys


def test_direct_json_object():
    assert extract_json('{"cuisine": "Seafood", "dishes": ["Bacalhau"]}') == {
        "cuisine": "Seafood",
        "dishes": ["Bacalhau"],
    }


def test_fenced_block_with_surrounding_prose():
    text = 'Here you go:\n```json\n{"a": 1}\n```\nEnjoy your trip!'
    assert extract_json(text) == {"a": 1}


def test_fenced_block_without_language_tag():
    assert extract_json('```\n{"a": {"b": [1, 2]}}\n```') == {"a": {"b": [1, 2]}}


def test_outer_braces_with_leading_whitespace():
    assert extract_json('  \n{"a": 1}\n  ') == {"a": 1}


def test_prose_before_object_is_not_recovered():
    # Only a fence or a whole-text object is recovered, not an embedded span
    with pytest.raises(ExtractionError):
        extract_json('Sure! {"a": 1}')


def test_top_level_array_is_rejected():
    with pytest.raises(ExtractionError):
        extract_json('[{"a": 1}]')


def test_fenced_array_is_rejected():
    with pytest.raises(ExtractionError):
        extract_json('```json\n[1, 2, 3]\n```')


def test_truncated_json_fails():
    with pytest.raises(ExtractionError):
        extract_json('{"cuisine": "Seafood", "dishes": [')


def test_empty_text_fails():
    with pytest.raises(ExtractionError):
        extract_json("")


def test_attempted_json_predicate():
    assert looks_like_attempted_json('{"a": 1') is True
    assert looks_like_attempted_json("the end }") is True
    assert looks_like_attempted_json("Lisbon is lovely in spring.") is False
    assert looks_like_attempted_json("") is False


def test_missing_keys_reports_absent_top_level_keys():
    assert missing_keys({"a": 1, "c": None}, ("a", "b", "c")) == ["b"]
    assert missing_keys({"a": 1, "extra": 2}, ("a",)) == []


@pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
def test_non_finite_constants_are_rejected(constant):
    with pytest.raises(ExtractionError):
        extract_json(f'{{"cuisine": {constant}, "dishes": []}}')


def test_non_finite_constant_in_fenced_block_is_rejected():
    with pytest.raises(ExtractionError):
        extract_json('```json\n{"price": Infinity}\n```')
