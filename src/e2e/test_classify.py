import pytest
from wordswap.classify import classify, classify_content, classify_words
from wordswap.models import WordType
from wordswap.tokenize import tokenize

@pytest.mark.parametrize("word, expected", [
    ("Monday", WordType.DAY),
    ("sunday,", WordType.DAY),
    ("Monday:", WordType.DAY),
    ("Studio:", WordType.LOCATION),
    ("3:30pm:", WordType.TIME),
    ("3pm", WordType.TIME),
    ("10:30am", WordType.TIME),
    ("Noon", WordType.TIME),
    ("Studio.", WordType.LOCATION),
    ("room", WordType.LOCATION),
    ("at", WordType.PREPOSITION),
    ("The", WordType.ARTICLE),
    ("this", WordType.ARTICLE),      # article wins over temporal
    ("next", WordType.TEMPORAL),
    ("coming", WordType.TEMPORAL),
    ("Meeting", WordType.OTHER),
    ("that's", WordType.OTHER),
])
def test_existing_word_types(word, expected):
    assert classify(word) is expected

def test_existing_words_do_not_know_relative_days_or_online():
    assert classify("tomorrow") is WordType.OTHER
    assert classify("online") is WordType.OTHER

def test_whole_word_matching_only():
    # "at" inside "that" / "Saturday" inside "Saturdays" must not match
    assert classify("that") is WordType.ARTICLE
    assert classify("Saturdays") is WordType.OTHER
    assert classify("into") is WordType.OTHER

@pytest.mark.parametrize("content, expected", [
    ("tomorrow", WordType.DAY),
    ("next Tuesday", WordType.DAY),
    ("today", WordType.DAY),
    ("at 5 pm", WordType.TIME),
    ("midnight", WordType.TIME),
    ("online", WordType.LOCATION),
    ("in the conference room", WordType.LOCATION),
    ("the office", WordType.LOCATION),
    ("with", WordType.PREPOSITION),
    ("bring laptop", WordType.OTHER),
])
def test_content_types(content, expected):
    assert classify_content(content) is expected

def test_classify_words_skips_whitespace_and_keeps_indices():
    cw = classify_words(tokenize("on  Monday"))
    assert [(w.original_index, w.lowercase_text, w.type) for w in cw] == [
        (0, "on", WordType.PREPOSITION), (2, "monday", WordType.DAY)
    ]
