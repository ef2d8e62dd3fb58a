# wordswap/engine.py
from __future__ import annotations

import logging
import os
from typing import List, Optional

from . import config as CFG
from .classify import classify_content, classify_words
from .history import EditHistory
from .models import DocumentView, EditResult, EditStatus, Token
from .phrase import resolve_phrase
from .reassemble import reassemble
from .rules import apply_rules
from .tokenize import tokenize

log = logging.getLogger(__name__)


class Engine:
    """
    Edit dispatcher: owns the document and its history for one session.

    Public API (used by CLI/Flask):
      * edit(index, content): targeted replacement when index is given,
                              dictation (append) when index is None
      * delete(index):        remove one word
      * undo() / redo():      move through history
      * view():               tokens + history state for rendering
      * reset(text):          start over with new text

    Every call returns an EditResult; nothing here raises for bad user input.
    The document only changes after the new text has been fully built.
    """

    # ------------- lifecycle -------------

    def __init__(self, text: str = "") -> None:
        # Per-edit phrase detail (set WORDSWAP_VERBOSE=1 to enable)
        self._verbose = os.environ.get("WORDSWAP_VERBOSE") == "1"
        self.reset(text)

    def reset(self, text: str = "") -> None:
        self._history = EditHistory(text)
        self._tokens: List[Token] = tokenize(text)
        log.info("Engine reset: %d tokens", len(self._tokens))

    # ------------- state -------------

    @property
    def text(self) -> str:
        return self._history.current

    @property
    def tokens(self) -> List[Token]:
        return list(self._tokens)

    @property
    def history(self) -> EditHistory:
        """Detached copy: pushing onto it never touches the session."""
        return self._history.copy()

    def view(self) -> DocumentView:
        h = self._history
        return DocumentView(
            tokens=list(self._tokens),
            cursor=h.cursor,
            history_size=len(h),
            can_undo=h.can_undo,
            can_redo=h.can_redo,
        )

    # ------------- edits -------------

    # /* ~~~ Route one finalized transcript to targeted or dictation mode ~~~ */
    def edit(self, index: Optional[int], content: str) -> EditResult:
        content = " ".join((content or "").split())
        if not content:
            log.info("edit dropped: empty input")
            return self._unchanged(EditStatus.EMPTY_INPUT, CFG.MSG_EMPTY)
        if index is None:
            return self._append(content)
        return self._replace(index, content)

    def delete(self, index: int) -> EditResult:
        target = self._word_at(index)
        if target is None:
            log.info("delete dropped: no word at index %r", index)
            return self._unchanged(EditStatus.TARGET_NOT_FOUND, CFG.MSG_NOT_FOUND)
        new_text = reassemble(self._tokens, {index}, None, "")
        log.info("delete: index=%d word=%r", index, target.text)
        return self._commit(new_text, EditStatus.DELETED, CFG.MSG_DELETED.format(word=target.text))

    def undo(self) -> EditResult:
        text = self._history.undo()
        if text is None:
            return self._unchanged(EditStatus.HISTORY_BOUNDARY, CFG.MSG_NOTHING_TO_UNDO)
        self._tokens = tokenize(text)
        return EditResult(EditStatus.UNDONE, text, CFG.MSG_UNDO, changed=True)

    def redo(self) -> EditResult:
        text = self._history.redo()
        if text is None:
            return self._unchanged(EditStatus.HISTORY_BOUNDARY, CFG.MSG_NOTHING_TO_REDO)
        self._tokens = tokenize(text)
        return EditResult(EditStatus.REDONE, text, CFG.MSG_REDO, changed=True)

    # ------------- internals -------------

    def _replace(self, index: int, content: str) -> EditResult:
        if self._word_at(index) is None:
            log.info("edit dropped: no word at index %r", index)
            return self._unchanged(EditStatus.TARGET_NOT_FOUND, CFG.MSG_NOT_FOUND)

        classified = classify_words(self._tokens)
        target = next(w for w in classified if w.original_index == index)
        content_type = classify_content(content)
        log.info("target %r is %s, content %r is %s",
                 target.lowercase_text, target.type.value, content, content_type.value)

        phrase = resolve_phrase(classified, target)
        if self._verbose:
            log.info("phrase: %s", [(w.lowercase_text, w.type.value) for w in phrase])
        outcome = apply_rules(phrase, target.type, content_type, content)
        new_text = reassemble(self._tokens, outcome.blanks, index,
                              outcome.trimmed_content, outcome.rewrites)

        if outcome.rule is None:
            log.info("no rule for %s -> %s; plain replacement", target.type.value, content_type.value)
            return self._commit(new_text, EditStatus.NO_RULE_MATCHED, CFG.MSG_REPLACED)
        log.info("rule %s: blanks=%s rewrites=%s", outcome.rule, sorted(outcome.blanks), outcome.rewrites)
        return self._commit(new_text, EditStatus.APPLIED, CFG.MSG_RULE_APPLIED, rule=outcome.rule)

    def _append(self, content: str) -> EditResult:
        current = self.text
        needs_space = bool(current.strip()) and not current[-1].isspace()
        new_text = current + (" " if needs_space else "") + content
        log.info("dictation: appended %d chars", len(content))
        return self._commit(new_text, EditStatus.APPENDED, CFG.MSG_APPENDED)

    def _word_at(self, index) -> Optional[Token]:
        if isinstance(index, bool) or not isinstance(index, int):
            return None
        if not 0 <= index < len(self._tokens):
            return None
        tok = self._tokens[index]
        return None if tok.is_whitespace else tok

    def _commit(self, new_text: str, status: EditStatus, message: str,
                rule: Optional[str] = None) -> EditResult:
        self._history.push(new_text)
        self._tokens = tokenize(new_text)
        return EditResult(status, new_text, message, rule=rule, changed=True)

    def _unchanged(self, status: EditStatus, message: str) -> EditResult:
        return EditResult(status, self.text, message)
