import pytest

from moodcam_recs.config import DEFAULT_MOOD, MOOD_QUERIES, SUPPORTED_MOODS
from moodcam_recs.moods import (
    is_supported_mood,
    normalize_mood,
    resolve_queries,
    resolve_query,
)


@pytest.mark.parametrize("mood", SUPPORTED_MOODS)
def test_supported_moods_resolve_to_first_phrase(mood):
    assert resolve_query(mood) == MOOD_QUERIES[mood][0]
    assert resolve_query(mood) == resolve_query(mood)


def test_happy_resolves_to_happy_pop():
    assert resolve_query("happy") == "happy pop"


@pytest.mark.parametrize("label", ["furious", "", "  ", "happy!", "sad face"])
def test_unknown_moods_fall_back_to_neutral(label):
    assert DEFAULT_MOOD == "neutral"
    assert resolve_query(label) == resolve_query("neutral") == "top hits"


@pytest.mark.parametrize("label", ["HAPPY", "Happy ", "  happy\n"])
def test_lookup_ignores_case_and_surrounding_space(label):
    assert resolve_query(label) == "happy pop"


def test_resolve_queries_keeps_all_phrases_in_order():
    assert resolve_queries("calm") == ("chill", "ambient", "peaceful")
    assert resolve_queries("furious") == MOOD_QUERIES["neutral"]


def test_vocabulary_has_fifteen_moods():
    assert len(SUPPORTED_MOODS) == 15
    assert all(len(MOOD_QUERIES[m]) == 3 for m in SUPPORTED_MOODS)


def test_table_is_read_only():
    with pytest.raises(TypeError):
        MOOD_QUERIES["furious"] = ("metal",)


def test_normalize_and_membership():
    assert normalize_mood(" Nostalgic ") == "nostalgic"
    assert normalize_mood(None) == ""
    assert is_supported_mood("Tired")
    assert not is_supported_mood("furious")
