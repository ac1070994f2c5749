"""Guess-to-answer matching.

A guess refers to an answer when, after lower-casing and trimming, it is
an exact match, a naive singular/plural variant, or a word-subset of the
answer (or the answer of it) under a prefix relation between words.
"""

import re

_WHITESPACE = re.compile(r'\s+')


def normalize(text: str) -> str:
    """Lower-case and trim a guess or answer phrase."""
    return text.lower().strip()


def split_words(text: str) -> list[str]:
    """Split a normalized phrase on runs of whitespace."""
    return [word for word in _WHITESPACE.split(text) if word]


def words_cover(a: str, b: str) -> bool:
    """Return True if word ``a`` covers word ``b`` (equal, or either is a prefix of the other)."""
    return a == b or b.startswith(a) or a.startswith(b)


def _all_covered(words: list[str], by: list[str]) -> bool:
    return all(any(words_cover(other, word) for other in by) for word in words)


def is_plural_variant(guess: str, answer: str) -> bool:
    """
    Check the trailing-"s" plural rule on normalized strings.

    Accepts "taco" for "tacos" and "tacos" for "taco". Words that merely
    end in "s" ("bus") are treated the same way.
    """
    if answer.endswith('s') and guess == answer[:-1]:
        return True
    if guess.endswith('s') and guess[:-1] == answer:
        return True
    return False


def matches(guess: str, answer: str) -> bool:
    """
    Decide whether a free-text guess refers to a canonical answer.

    Rules, in order:
        - Exact match after normalization
        - Singular/plural tolerance on a trailing "s"
        - Every guess word covered by an answer word, or every answer
          word covered by a guess word

    An empty guess matches vacuously under the word rule, so callers must
    reject blank input before calling this.

    Args:
        guess: Raw guess text
        answer: Canonical answer phrase

    Returns:
        True if the guess matches the answer
    """
    guess_norm = normalize(guess)
    answer_norm = normalize(answer)

    if guess_norm == answer_norm:
        return True

    if is_plural_variant(guess_norm, answer_norm):
        return True

    guess_words = split_words(guess_norm)
    answer_words = split_words(answer_norm)

    return _all_covered(guess_words, answer_words) or _all_covered(answer_words, guess_words)
