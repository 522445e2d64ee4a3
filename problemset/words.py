"""Problems over single strings and pairs of strings."""

from itertools import groupby, zip_longest

MOD = 10**9 + 7

_VOWELS = frozenset("aeiouAEIOU")

_RULE_INDEX = {"type": 0, "color": 1, "name": 2}


def _vowel_count(text):
    return sum(char in _VOWELS for char in text)


def halves_are_alike(s):
    """Return whether both halves of s hold the same number of vowels."""
    half = len(s) // 2
    return _vowel_count(s[:half]) == _vowel_count(s[half:2 * half])


def largest_merge(word1, word2):
    """Return the lexicographically largest merge of the two words."""
    merged = []
    i = j = 0
    while i < len(word1) and j < len(word2):
        if word1[i:] > word2[j:]:
            merged.append(word1[i])
            i += 1
        else:
            merged.append(word2[j])
            j += 1
    merged.append(word1[i:])
    merged.append(word2[j:])
    return "".join(merged)


def min_operations_alternating(s):
    """Return the fewest bit flips that make the binary string alternate."""
    mismatches = sum(char != "01"[i % 2] for i, char in enumerate(s))
    return min(mismatches, len(s) - mismatches)


def count_homogenous(s):
    """Return the number of substrings made of one repeated character, modulo 1e9+7."""
    total = 0
    for _, run in groupby(s):
        length = sum(1 for _ in run)
        total += length * (length + 1) // 2
    return total % MOD


def merge_alternately(word1, word2):
    """Interleave the two words letter by letter, appending what is left over."""
    return "".join(a + b for a, b in zip_longest(word1, word2, fillvalue=""))


def count_matches(items, rule_key, rule_value):
    """Count items ``(type, color, name)`` whose field rule_key equals rule_value."""
    try:
        index = _RULE_INDEX[rule_key]
    except KeyError:
        raise ValueError(f"unknown rule key {rule_key!r}") from None
    return sum(item[index] == rule_value for item in items)