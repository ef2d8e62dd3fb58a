# wordswap/models.py
"""
Data models for the word replacement engine.

These classes do not contain business logic; they only structure the data
passed between tokenizer, classifier, phrase resolver, rule engine and
dispatcher so each stage stays small and predictable.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, List, Optional


@dataclass(frozen=True, slots=True)
class Token:
    """
    One slice of the document text: a run of non-whitespace or of whitespace.

    Attributes
    ----------
    text : str
        The exact characters of the run.
    is_whitespace : bool
        True when the run consists only of whitespace.
    original_index : int
        Position of the token in the list produced by tokenize().
    """
    text: str
    is_whitespace: bool
    original_index: int


class WordType(str, Enum):
    DAY = "day"
    TIME = "time"
    LOCATION = "location"
    PREPOSITION = "preposition"
    ARTICLE = "article"
    TEMPORAL = "temporal"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class ClassifiedWord:
    original_index: int       # index of the token in the document
    lowercase_text: str
    type: WordType


@dataclass(frozen=True, slots=True)
class RuleOutcome:
    """
    What the rule engine decided for one targeted edit.

    Attributes
    ----------
    blanks : FrozenSet[int]
        Token indices removed during reassembly.
    rewrites : Dict[int, str]
        Token indices whose text is replaced in place (e.g. "on" -> "next").
    trimmed_content : str
        The replacement content after any leading word was absorbed by a rewrite.
    rule : Optional[str]
        Name of the rule branch that fired, or None for a plain replacement.
    """
    blanks: FrozenSet[int]
    rewrites: Dict[int, str]
    trimmed_content: str
    rule: Optional[str] = None


class EditStatus(str, Enum):
    APPLIED = "applied"                    # targeted edit driven by a type rule
    NO_RULE_MATCHED = "no_rule_matched"    # targeted edit, plain replacement
    APPENDED = "appended"
    DELETED = "deleted"
    UNDONE = "undone"
    REDONE = "redone"
    EMPTY_INPUT = "empty_input"
    TARGET_NOT_FOUND = "target_not_found"
    HISTORY_BOUNDARY = "history_boundary"


@dataclass(frozen=True, slots=True)
class EditResult:
    """
    Returned by every Engine call. `changed` tells the caller whether the
    document text moved; `message` is the short status line shown to the user.
    """
    status: EditStatus
    text: str
    message: str
    rule: Optional[str] = None
    changed: bool = False

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "text": self.text,
            "message": self.message,
            "rule": self.rule,
            "changed": self.changed,
        }


@dataclass(slots=True)
class DocumentView:
    """Snapshot consumed by the rendering layer after every edit."""
    tokens: List[Token] = field(default_factory=list)
    cursor: int = 0
    history_size: int = 1
    can_undo: bool = False
    can_redo: bool = False

    @property
    def text(self) -> str:
        return "".join(t.text for t in self.tokens)

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "tokens": [
                {"index": t.original_index, "text": t.text, "is_whitespace": t.is_whitespace}
                for t in self.tokens
            ],
            "cursor": self.cursor,
            "history_size": self.history_size,
            "can_undo": self.can_undo,
            "can_redo": self.can_redo,
        }
