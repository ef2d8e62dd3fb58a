from __future__ import annotations
import logging
from typing import List, Optional

from . import config as CFG
from .models import ClassifiedWord, WordType

log = logging.getLogger(__name__)

_FUNCTION_WORDS = {WordType.PREPOSITION, WordType.ARTICLE, WordType.TEMPORAL}
_FORWARD_STOPS = {WordType.PREPOSITION, WordType.TEMPORAL}


def resolve_phrase(
    classified: List[ClassifiedWord],
    target: ClassifiedWord,
    *,
    back_limit: int = CFG.BACKWARD_SCAN_LIMIT,
    fwd_limit: int = CFG.FORWARD_SCAN_LIMIT,
) -> List[ClassifiedWord]:
    """
    Collect the words forming the target's local phrase.

    Order of the result: target, backward members (nearest first), forward
    members. Limits count positions scanned, not members found.

    Backward: take prepositions/articles/temporals; stop on any other word of a
    different type than the target; same-type words are passed over.
    Forward: take same-type words and articles; stop on a preposition or
    temporal; anything else is passed over.
    """
    phrase = [target]
    pos = next((i for i, w in enumerate(classified) if w.original_index == target.original_index), None)
    if pos is None:
        return phrase

    for i in range(pos - 1, max(pos - 1 - back_limit, -1), -1):
        w = classified[i]
        if w.type in _FUNCTION_WORDS:
            phrase.append(w)
        elif w.type != target.type:
            break

    for i in range(pos + 1, min(pos + 1 + fwd_limit, len(classified))):
        w = classified[i]
        if w.type == target.type or w.type == WordType.ARTICLE:
            phrase.append(w)
        elif w.type in _FORWARD_STOPS:
            break

    log.debug("phrase for %r: %s", target.lowercase_text,
              [(w.lowercase_text, w.type.value) for w in phrase])
    return phrase


def first_of(phrase: List[ClassifiedWord], wtype: WordType) -> Optional[ClassifiedWord]:
    """First phrase member of the given type, in phrase order."""
    return next((w for w in phrase if w.type == wtype), None)
