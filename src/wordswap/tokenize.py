from __future__ import annotations
from typing import Iterable, Iterator, List

from .models import Token


def tokenize(text: str) -> List[Token]:
    """
    Split text into alternating runs of non-whitespace and whitespace.

    Rules:
      * every whitespace run is kept verbatim (multi-space gaps survive)
      * ''.join(t.text for t in tokenize(s)) == s for any s
      * empty input -> empty list
    """
    tokens: List[Token] = []
    run: list[str] = []
    run_is_space = False

    for ch in text:
        is_space = ch.isspace()
        if run and is_space != run_is_space:
            tokens.append(Token(''.join(run), run_is_space, len(tokens)))
            run = []
        run.append(ch)
        run_is_space = is_space

    if run:
        tokens.append(Token(''.join(run), run_is_space, len(tokens)))
    return tokens


def words(tokens: Iterable[Token]) -> Iterator[Token]:
    """Convenience: only the non-whitespace tokens, in order."""
    return (t for t in tokens if not t.is_whitespace)
