import pytest

from puzzlekit.suffixes import longest_previous_match, suffix_array


SAMPLES = ["aabaacaba", "banana", "mississippi", "abcabcabc", "zzzz", "a", "ab", "ba"]


def test_suffix_array_worked_example():
    assert suffix_array("aabaacaba") == [8, 0, 3, 6, 1, 4, 7, 2, 5]


def test_suffix_array_empty():
    assert suffix_array("") == []


@pytest.mark.parametrize("text", SAMPLES)
def test_suffix_array_is_permutation(text):
    assert sorted(suffix_array(text)) == list(range(len(text)))


@pytest.mark.parametrize("text", SAMPLES)
def test_suffix_array_orders_suffixes(text):
    order = suffix_array(text)
    suffixes = [text[start:] for start in order]
    assert suffixes == sorted(suffixes)


def test_longest_previous_match_worked_example():
    assert longest_previous_match("aabaacaba") == [0, 1, 0, 2, 1, 0, 3, 2, 1]


def test_longest_previous_match_empty():
    assert longest_previous_match("") == []


def test_first_position_has_no_match():
    assert longest_previous_match("mississippi")[0] == 0


def test_distinct_characters_never_match():
    assert longest_previous_match("abcdef") == [0] * 6


@pytest.mark.parametrize("text", SAMPLES)
def test_match_occurs_before_position(text):
    for i, length in enumerate(longest_previous_match(text)):
        assert text[i : i + length] in text[:i]


@pytest.mark.parametrize("text", SAMPLES)
def test_match_is_maximal(text):
    for i, length in enumerate(longest_previous_match(text)):
        if i + length < len(text):
            assert text[i : i + length + 1] not in text[:i]


@pytest.mark.parametrize("text", SAMPLES)
def test_match_length_has_one_entry_per_character(text):
    assert len(longest_previous_match(text)) == len(text)