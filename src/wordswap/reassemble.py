from __future__ import annotations
from typing import AbstractSet, List, Mapping, Optional, Sequence, Tuple

from .models import Token


def reassemble(
    tokens: Sequence[Token],
    blanks: AbstractSet[int],
    target_index: Optional[int],
    trimmed_content: str,
    rewrites: Optional[Mapping[int, str]] = None,
) -> str:
    """
    Rebuild the document text after an edit.

    Guarantees:
      * the target token (if any) reads `trimmed_content`, rewritten tokens
        read their new text, blanked tokens disappear
      * consecutive whitespace tokens collapse to the first of the run
      * adjacent words with nothing between them get exactly one space
      * whitespace stranded at either end by a blank is dropped
    With no blanks and the target's own text as content, the input comes back unchanged.
    """
    texts = [t.text for t in tokens]
    if target_index is not None:
        texts[target_index] = trimmed_content
    for i, new in (rewrites or {}).items():
        texts[i] = new
    for i in blanks:
        texts[i] = ""

    # (text, is_whitespace, original_index) for survivors, runs collapsed
    kept: List[Tuple[str, bool, int]] = []
    for tok, text in zip(tokens, texts):
        if text == "":
            continue
        is_space = text.isspace()
        if is_space and kept and kept[-1][1]:
            continue
        kept.append((text, is_space, tok.original_index))

    last = len(tokens) - 1
    if kept and kept[0][1] and kept[0][2] != 0:
        kept.pop(0)
    if kept and kept[-1][1] and kept[-1][2] != last:
        kept.pop()

    out: list[str] = []
    prev_word = False
    for text, is_space, _ in kept:
        if not is_space and prev_word:
            out.append(" ")
        out.append(text)
        prev_word = not is_space
    return "".join(out)
