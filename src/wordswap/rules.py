# wordswap/rules.py
"""
Grammar repair rules keyed by word type.

A rule runs only when the selected word and the new content share a type.
Each rule looks at the resolved phrase and returns which neighbors to blank,
which to rewrite in place, and the content left to put in the target's slot.
Pairs without an entry in RULES fall back to a plain replacement.
"""
from __future__ import annotations
import re
from typing import Callable, Dict, List

from .classify import bare
from .models import ClassifiedWord, RuleOutcome, WordType
from .phrase import first_of

Rule = Callable[[List[ClassifiedWord], str], RuleOutcome]

_LEAD_NEXT = re.compile(r"^next\s+", re.IGNORECASE)
_LEAD_IN = re.compile(r"^in\s+", re.IGNORECASE)
_LEAD_AT = re.compile(r"^at\s+", re.IGNORECASE)


def _outcome(content: str, rule: str, *, blanks=(), rewrites=None) -> RuleOutcome:
    return RuleOutcome(frozenset(blanks), dict(rewrites or {}), content, rule)


def _day_rule(phrase: List[ClassifiedWord], content: str) -> RuleOutcome:
    low = bare(content)
    prep = first_of(phrase, WordType.PREPOSITION)
    temporal = first_of(phrase, WordType.TEMPORAL)

    # "on Monday" -> "next Tuesday": the preposition slot becomes "next"
    if prep and prep.lowercase_text == "on" and "next" in low:
        return _outcome(_LEAD_NEXT.sub("", content), "day.on_to_next",
                        rewrites={prep.original_index: "next"})
    if prep and low == "tomorrow":
        blanks = [prep.original_index]
        if temporal:
            blanks.append(temporal.original_index)
        return _outcome(content, "day.tomorrow", blanks=blanks)
    # Anything else keeps its preposition ("on Monday" -> "on this Friday")
    return _outcome(content, "day.keep")


def _location_rule(phrase: List[ClassifiedWord], content: str) -> RuleOutcome:
    low = bare(content)
    prep = first_of(phrase, WordType.PREPOSITION)

    if prep is None and low.startswith("in "):
        return _outcome(content, "location.own_preposition")
    if prep and low == "online":
        blanks = [prep.original_index]
        article = first_of(phrase, WordType.ARTICLE)
        if article:
            blanks.append(article.original_index)
        return _outcome(content, "location.online", blanks=blanks)
    if prep and low.startswith("in ") and prep.lowercase_text != "in":
        return _outcome(_LEAD_IN.sub("", content), "location.to_in",
                        rewrites={prep.original_index: "in"})
    return _outcome(content, "location.keep")


def _time_rule(phrase: List[ClassifiedWord], content: str) -> RuleOutcome:
    low = bare(content)
    prep = first_of(phrase, WordType.PREPOSITION)

    if prep is None and low.startswith("at "):
        return _outcome(content, "time.own_preposition")
    if prep and low.startswith("at ") and prep.lowercase_text != "at":
        return _outcome(_LEAD_AT.sub("", content), "time.to_at",
                        rewrites={prep.original_index: "at"})
    return _outcome(content, "time.keep")


RULES: Dict[WordType, Rule] = {
    WordType.DAY: _day_rule,
    WordType.LOCATION: _location_rule,
    WordType.TIME: _time_rule,
}


def apply_rules(
    phrase: List[ClassifiedWord],
    target_type: WordType,
    content_type: WordType,
    raw_content: str,
) -> RuleOutcome:
    """
    Decide the structural change for one targeted edit.
    Returns an outcome with rule=None when no specialized rule covers the pair.
    """
    rule = RULES.get(target_type) if target_type == content_type else None
    if rule is None:
        return RuleOutcome(frozenset(), {}, raw_content, None)
    return rule(phrase, raw_content)
