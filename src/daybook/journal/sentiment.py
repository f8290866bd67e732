"""Lexicon-based sentiment scoring for journal entries.

Counts words from a positive and a negative word list and scores the
balance between them. Pure and deterministic: no model and no I/O.
"""

from __future__ import annotations

import re

POSITIVE_WORDS: frozenset[str] = frozenset(
    {
        "happy", "good", "great", "wonderful", "excellent", "amazing", "awesome",
        "love", "loved", "fantastic", "brilliant", "perfect", "beautiful", "grateful",
        "thankful", "blessed", "joy", "joyful", "excited", "proud", "success",
        "accomplished", "delighted", "pleased", "superb", "outstanding", "epic",
        "incredible",
    }
)  # fmt: skip

NEGATIVE_WORDS: frozenset[str] = frozenset(
    {
        "sad", "bad", "terrible", "awful", "horrible", "hate", "hated", "angry",
        "frustrated", "disappointed", "depressed", "miserable", "anxious", "worried",
        "stressed", "scared", "fear", "afraid", "failed", "failure", "waste", "lost",
        "struggle", "pain", "hurt", "annoyed", "upset", "useless", "stupid",
        "disgusting", "pathetic", "difficult", "crisis",
    }
)  # fmt: skip

_WORD_RE = re.compile(r"\b\w+\b", re.ASCII)

# Channel weights of the sidebar gradient (tailwind blue-500)
_GRADIENT_RGB = (59, 130, 246)


def tokenize(text: str) -> list[str]:
    """Lowercase ``text`` and split it into word runs."""
    return _WORD_RE.findall(text.lower())


def analyze_sentiment(text: str) -> float:
    """Score ``text`` in [-1, 1].

    ``(positive - negative) / (positive + negative)`` over lexicon hits,
    or 0.0 when the text contains no lexicon words at all.

    Example::

        >>> analyze_sentiment("I am happy and proud")
        1.0
        >>> analyze_sentiment("happy but sad")
        0.0
    """
    positive = negative = 0
    for word in tokenize(text):
        if word in POSITIVE_WORDS:
            positive += 1
        if word in NEGATIVE_WORDS:
            negative += 1

    total = positive + negative
    if total == 0:
        return 0.0
    return max(-1.0, min(1.0, (positive - negative) / total))


def sentiment_color(score: float | None) -> str:
    """CSS ``rgb()`` colour for a score, shading toward blue as it rises.

    None is treated as neutral.
    """
    score = max(-1.0, min(1.0, score or 0.0))
    x = (score + 1) / 2
    r_w, g_w, b_w = _GRADIENT_RGB
    r = _round_half_up(r_w * (1 - x))
    g = _round_half_up(g_w * (1 - x))
    b = _round_half_up(b_w * x)
    return f"rgb({r}, {g}, {b})"


def _round_half_up(value: float) -> int:
    return int(value + 0.5)
