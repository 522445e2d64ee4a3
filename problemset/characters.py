"""Problems over the characters of a string."""

import re
from collections import Counter
from string import ascii_lowercase

_LETTERS = frozenset(ascii_lowercase)


def beauty_sum(s):
    """Return the sum over all substrings of (highest - lowest) character frequency."""
    total = 0
    for start in range(len(s)):
        counts = Counter()
        for char in s[start:]:
            counts[char] += 1
            frequencies = counts.values()
            total += max(frequencies) - min(frequencies)
    return total


def second_highest(s):
    """Return the second largest distinct digit in s, or -1 if there is none."""
    digits = sorted({int(char) for char in s if char.isdigit()}, reverse=True)
    return digits[1] if len(digits) > 1 else -1


def num_different_integers(word):
    """Return how many distinct integers appear as digit runs in word."""
    return len({run.lstrip("0") for run in re.findall(r"\d+", word)})


def square_is_white(coordinates):
    """Return whether a chessboard square such as "a1" is white."""
    file, rank = coordinates
    if file not in "abcdefgh" or rank not in "12345678":
        raise ValueError(f"not a chessboard square: {coordinates!r}")
    return (ord(file) - ord("a") + ord(rank) - ord("1")) % 2 == 1


def check_if_pangram(sentence):
    """Return whether every lowercase English letter appears in sentence."""
    return _LETTERS <= set(sentence)


def _digit_sum(number):
    return sum(int(digit) for digit in str(number))


def get_lucky(s, k):
    """Turn letters into their alphabet positions, then sum digits k times."""
    if k < 1:
        raise ValueError("k must be at least 1")
    total = sum(_digit_sum(ord(char) - ord("a") + 1) for char in s)
    for _ in range(k - 1):
        if total < 10:
            break
        total = _digit_sum(total)
    return total


def final_value_after_operations(operations):
    """Apply "++X", "X++", "--X" and "X--" to a counter starting at 0."""
    return sum(1 if operation[1] == "+" else -1 for operation in operations)


def minimum_moves(s):
    """Return the fewest moves turning three consecutive characters into "O" to clear every "X"."""
    moves = 0
    position = 0
    while position < len(s):
        if s[position] == "X":
            moves += 1
            position += 3
        else:
            position += 1
    return moves


def remove_anagrams(words):
    """Drop every word that is an anagram of the word just before it."""
    result = []
    previous = None
    for word in words:
        signature = sorted(word)
        if signature != previous:
            result.append(word)
        previous = signature
    return result