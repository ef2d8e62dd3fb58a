# src/e2e/test_rules.py

import pytest

from wordswap.models import ClassifiedWord, WordType as T
from wordswap.rules import apply_rules, RULES


def _w(i: int, text: str, t: T) -> ClassifiedWord:
    return ClassifiedWord(i, text, t)


# Phrase doubles in resolve_phrase order: target first, then neighbors
ON_MONDAY = [_w(4, "monday", T.DAY), _w(2, "on", T.PREPOSITION)]
ON_THIS_MONDAY = [_w(6, "monday", T.DAY), _w(4, "this", T.TEMPORAL), _w(2, "on", T.PREPOSITION)]
AT_THE_STUDIO = [_w(8, "studio", T.LOCATION), _w(6, "the", T.ARTICLE), _w(4, "at", T.PREPOSITION)]
STUDIO_ALONE = [_w(0, "studio", T.LOCATION)]
BY_5PM = [_w(2, "5pm", T.TIME), _w(0, "by", T.PREPOSITION)]
AT_5PM = [_w(2, "5pm", T.TIME), _w(0, "at", T.PREPOSITION)]


def test_rule_table_covers_day_location_time_only():
    assert set(RULES) == {T.DAY, T.LOCATION, T.TIME}


def test_on_plus_next_rewrites_preposition_and_trims_content():
    out = apply_rules(ON_MONDAY, T.DAY, T.DAY, "Next Tuesday")
    assert out.rewrites == {2: "next"}
    assert out.blanks == frozenset()
    assert out.trimmed_content == "Tuesday"
    assert out.rule == "day.on_to_next"


def test_tomorrow_blanks_preposition_and_temporal():
    out = apply_rules(ON_THIS_MONDAY, T.DAY, T.DAY, "tomorrow")
    assert out.blanks == {2, 4}
    assert out.trimmed_content == "tomorrow"


def test_tomorrow_without_preposition_changes_nothing():
    out = apply_rules([_w(0, "monday", T.DAY)], T.DAY, T.DAY, "tomorrow")
    assert not out.blanks and not out.rewrites
    assert out.rule == "day.keep"


def test_other_day_keeps_preposition():
    out = apply_rules(ON_MONDAY, T.DAY, T.DAY, "this Friday")
    assert not out.blanks and not out.rewrites
    assert out.trimmed_content == "this Friday"


def test_online_blanks_preposition_and_article():
    out = apply_rules(AT_THE_STUDIO, T.LOCATION, T.LOCATION, "online")
    assert out.blanks == {4, 6}
    assert out.rule == "location.online"


def test_in_phrase_rewrites_non_in_preposition():
    out = apply_rules(AT_THE_STUDIO, T.LOCATION, T.LOCATION, "in the office")
    assert out.rewrites == {4: "in"}
    assert out.trimmed_content == "the office"


def test_in_phrase_with_existing_in_is_left_alone():
    phrase = [_w(4, "studio", T.LOCATION), _w(2, "in", T.PREPOSITION)]
    out = apply_rules(phrase, T.LOCATION, T.LOCATION, "in the office")
    assert out.rule == "location.keep"
    assert out.trimmed_content == "in the office"


def test_in_phrase_without_preposition_supplies_its_own():
    out = apply_rules(STUDIO_ALONE, T.LOCATION, T.LOCATION, "in the office")
    assert out.rule == "location.own_preposition"
    assert not out.rewrites


def test_time_at_phrase_rewrites_other_preposition():
    out = apply_rules(BY_5PM, T.TIME, T.TIME, "at 6pm")
    assert out.rewrites == {0: "at"}
    assert out.trimmed_content == "6pm"


def test_time_at_phrase_when_already_at_is_untouched():
    out = apply_rules(AT_5PM, T.TIME, T.TIME, "6pm")
    assert out.rule == "time.keep"
    assert out.trimmed_content == "6pm"


@pytest.mark.parametrize("target, content", [
    (T.DAY, T.TIME),
    (T.OTHER, T.OTHER),
    (T.ARTICLE, T.ARTICLE),
    (T.PREPOSITION, T.PREPOSITION),
])
def test_unmatched_pairs_are_plain_replacements(target, content):
    out = apply_rules(ON_MONDAY, target, content, "whatever")
    assert out.rule is None
    assert out.trimmed_content == "whatever"
    assert not out.blanks and not out.rewrites
