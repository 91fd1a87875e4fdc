"""String exercises: anagrams, palindromes, zig-zag, counting and LCS."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

_VOWELS = frozenset("aeiouAEIOU")


def _is_ascii_letter(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z")


def _single_char(ch: str) -> str:
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return ch


def is_anagram(first: str, second: str) -> bool:
    """True if both strings hold the same characters the same number of times."""
    return len(first) == len(second) and Counter(first) == Counter(second)


def is_palindrome(text: str) -> bool:
    return text == text[::-1]


def reverse_string(text: str) -> str:
    return text[::-1]


def sort_string(text: str) -> str:
    """The characters of ``text`` in ascending order."""
    return "".join(sorted(text))


def zigzag(text: str, rows: int) -> str:
    """Write ``text`` in a zig-zag over ``rows`` rows and read it back row by row."""
    if rows < 1:
        raise ValueError("rows must be at least 1")
    if rows == 1:
        return text
    lines: list[list[str]] = [[] for _ in range(rows)]
    row, step = 0, 1
    for ch in text:
        lines[row].append(ch)
        if row == 0:
            step = 1
        elif row == rows - 1:
            step = -1
        row += step
    return "".join("".join(line) for line in lines)


@dataclass(frozen=True)
class CharacterCounts:
    vowels: int = 0
    consonants: int = 0
    digits: int = 0
    spaces: int = 0


def count_characters(line: str) -> CharacterCounts:
    """Count ASCII vowels, consonants, digits and spaces in ``line``."""
    vowels = consonants = digits = spaces = 0
    for ch in line:
        if ch in _VOWELS:
            vowels += 1
        elif _is_ascii_letter(ch):
            consonants += 1
        elif "0" <= ch <= "9":
            digits += 1
        elif ch == " ":
            spaces += 1
    return CharacterCounts(vowels, consonants, digits, spaces)


def word_frequencies(sentence: str) -> dict[str, int]:
    """How often each whitespace-separated word occurs, in order of first appearance."""
    return dict(Counter(sentence.split()))


def is_vowel(ch: str) -> bool:
    return _single_char(ch) in _VOWELS


def is_alpha(ch: str) -> bool:
    return _is_ascii_letter(_single_char(ch))


def longest_common_subsequence(a: str, b: str) -> str:
    """One longest subsequence common to ``a`` and ``b``."""
    m, n = len(a), len(b)
    table = [[0] * (n + 1) for _ in range(m + 1)]
    for i, ch_a in enumerate(a, start=1):
        for j, ch_b in enumerate(b, start=1):
            if ch_a == ch_b:
                table[i][j] = table[i - 1][j - 1] + 1
            else:
                table[i][j] = max(table[i][j - 1], table[i - 1][j])

    picked: list[str] = []
    i, j = m, n
    while i and j:
        if a[i - 1] == b[j - 1]:
            picked.append(a[i - 1])
            i -= 1
            j -= 1
        elif table[i][j - 1] >= table[i - 1][j]:
            j -= 1
        else:
            i -= 1
    return "".join(reversed(picked))


def postfix_to_infix(expression: str) -> str:
    """Fully parenthesised infix form of a postfix expression with single-letter operands."""
    stack: list[str] = []
    for ch in expression:
        if _is_ascii_letter(ch):
            stack.append(ch)
            continue
        if len(stack) < 2:
            raise ValueError(f"operator {ch!r} lacks operands in {expression!r}")
        right = stack.pop()
        left = stack.pop()
        stack.append(f"({left}{ch}{right})")
    if len(stack) != 1:
        raise ValueError(f"not a valid postfix expression: {expression!r}")
    return stack[0]