# wordswap/classify.py
"""
Lexical classification by fixed pattern sets.

Two call sites share one table but differ on purpose:
  * classify(word)         - a single word already in the sentence
  * classify_content(text) - the spoken replacement, which may be a phrase and
                             also knows relative days ("tomorrow") and compound
                             places ("conference room", "online")
"""
from __future__ import annotations
import re
import string
from typing import Iterable, List, Optional, Pattern, Tuple

from .models import ClassifiedWord, Token, WordType

_DAYS = r"monday|tuesday|wednesday|thursday|friday|saturday|sunday"
_RELATIVE_DAYS = r"tomorrow|today|yesterday"
_TIME = r"\d+(?::\d+)?\s*(?:am|pm)|noon|midnight"
_LOCATIONS = r"studio|office|room|home|building"
_CONTENT_LOCATIONS = r"conference room|online"
_PREPOSITIONS = r"at|in|on|for|with|to|by"
_ARTICLES = r"the|a|an|this|that|these|those"
_TEMPORALS = r"next|last|this|coming|previous"

# /* ~~~ priority order matters: first match wins ~~~ */
# (type, pattern for existing words, pattern for new content or None to reuse)
_TABLE: List[Tuple[WordType, str, Optional[str]]] = [
    (WordType.DAY, _DAYS, rf"{_DAYS}|{_RELATIVE_DAYS}"),
    (WordType.TIME, _TIME, None),
    (WordType.LOCATION, _LOCATIONS, rf"{_CONTENT_LOCATIONS}|{_LOCATIONS}"),
    (WordType.PREPOSITION, _PREPOSITIONS, None),
    (WordType.ARTICLE, _ARTICLES, None),
    (WordType.TEMPORAL, _TEMPORALS, None),
]

# Content types that may appear anywhere inside a spoken phrase ("next Tuesday")
_SEARCHED = {WordType.DAY, WordType.TIME, WordType.LOCATION}


def _compile(pattern: str, *, search: bool) -> Pattern[str]:
    if search:
        return re.compile(rf"\b(?:{pattern})\b", re.IGNORECASE)
    return re.compile(rf"(?:{pattern})", re.IGNORECASE)


_WORD_RULES = [(t, _compile(p, search=False)) for t, p, _ in _TABLE]
_CONTENT_RULES = [(t, _compile(c or p, search=t in _SEARCHED)) for t, p, c in _TABLE]

_EDGE_PUNCT = string.punctuation


def bare(word: str) -> str:
    """Lowercased word without surrounding whitespace or punctuation."""
    return word.strip().strip(_EDGE_PUNCT).lower()


def classify(word: str) -> WordType:
    """Type of a single word already present in the document."""
    w = bare(word)
    for wtype, rx in _WORD_RULES:
        if rx.fullmatch(w):
            return wtype
    return WordType.OTHER


def classify_content(content: str) -> WordType:
    """Type of new replacement content (one word or a short phrase)."""
    c = " ".join(content.split()).lower()
    for wtype, rx in _CONTENT_RULES:
        if wtype in _SEARCHED:
            if rx.search(c):
                return wtype
        elif rx.fullmatch(bare(c)):
            return wtype
    return WordType.OTHER


def classify_words(tokens: Iterable[Token]) -> List[ClassifiedWord]:
    """Classified view over the non-whitespace tokens of a document."""
    return [
        ClassifiedWord(t.original_index, bare(t.text), classify(t.text))
        for t in tokens
        if not t.is_whitespace
    ]
