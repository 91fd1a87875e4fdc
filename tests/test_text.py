import pytest

from exercisekit.text import (
    CharacterCounts,
    count_characters,
    is_alpha,
    is_anagram,
    is_palindrome,
    is_vowel,
    longest_common_subsequence,
    postfix_to_infix,
    reverse_string,
    sort_string,
    word_frequencies,
    zigzag,
)


def _is_subsequence(small, big):
    it = iter(big)
    return all(ch in it for ch in small)


def test_anagram():
    assert is_anagram("listen", "silent") is True
    assert is_anagram("abc", "abd") is False
    assert is_anagram("aab", "abb") is False
    assert is_anagram("abc", "abcd") is False


def test_palindrome():
    assert is_palindrome("racecar") is True
    assert is_palindrome("abca") is False
    assert is_palindrome("") is True


def test_reverse_string_round_trip():
    text = "Hello, World"
    assert reverse_string(reverse_string(text)) == text
    assert reverse_string(text)[0] == text[-1]


def test_sort_string():
    text = "zebra"
    result = sort_string(text)
    assert list(result) == sorted(text)
    assert sort_string(result) == result


def test_zigzag_source_example():
    assert zigzag("ILOVECODING", 3) == "IEILVCDNOOG"


def test_zigzag_single_row_and_permutation():
    assert zigzag("ILOVECODING", 1) == "ILOVECODING"
    for rows in range(1, 8):
        assert sorted(zigzag("programming", rows)) == sorted("programming")


def test_zigzag_many_rows_is_identity():
    assert zigzag("abc", 10) == "abc"


def test_zigzag_rejects_zero_rows():
    with pytest.raises(ValueError):
        zigzag("abc", 0)


def test_count_characters_invariant():
    line = "Hello World 2024"
    counts = count_characters(line)
    assert counts.vowels + counts.consonants + counts.digits + counts.spaces == len(line)
    assert counts.digits == 4


def test_count_characters_ignores_punctuation():
    assert count_characters("!?.,") == CharacterCounts()


def test_word_frequencies_source_sentence():
    sentence = "I am a good boy I love coding"
    freq = word_frequencies(sentence)
    assert freq["I"] == 2
    assert sum(freq.values()) == len(sentence.split())
    assert list(freq) == list(dict.fromkeys(sentence.split()))


def test_vowels():
    assert all(is_vowel(ch) for ch in "aeiouAEIOU")
    assert not any(is_vowel(ch) for ch in "bcdXYZ1 ")


def test_is_alpha():
    assert is_alpha("q") and is_alpha("Q")
    assert not is_alpha("5")
    assert not is_alpha("é")


@pytest.mark.parametrize("func", [is_vowel, is_alpha])
def test_single_character_required(func):
    with pytest.raises(ValueError):
        func("ab")


def test_lcs_invariants():
    a, b = "ABCBDAB", "BDCABA"
    result = longest_common_subsequence(a, b)
    assert _is_subsequence(result, a)
    assert _is_subsequence(result, b)
    assert len(result) == len(longest_common_subsequence(b, a))


def test_lcs_edge_cases():
    assert longest_common_subsequence("same", "same") == "same"
    assert longest_common_subsequence("abc", "") == ""
    assert longest_common_subsequence("abc", "xyz") == ""


def test_postfix_source_example():
    assert postfix_to_infix("ab*c+") == "((a*b)+c)"


def test_postfix_single_operand():
    assert postfix_to_infix("x") == "x"


@pytest.mark.parametrize("expression", ["a+", "ab", "", "+"])
def test_postfix_invalid(expression):
    with pytest.raises(ValueError):
        postfix_to_infix(expression)