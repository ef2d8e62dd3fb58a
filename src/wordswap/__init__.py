"""
Context-aware word replacement engine.

Select one word of a sentence and supply new content; the engine replaces the
word and repairs the few neighbors that would otherwise read wrong
("on Monday" -> "tomorrow" drops the "on"). Without a selection the content is
appended as dictation. Every change lands on a linear undo/redo history.

Example Usage:
    from wordswap import Engine

    eng = Engine("Meeting on Monday at 3pm")
    eng.edit(4, "tomorrow")      # token 4 is "Monday"
    print(eng.text)              # Meeting tomorrow at 3pm
    eng.undo()
"""

# src/wordswap/__init__.py
from .engine import Engine  # re-export
from .models import EditResult, EditStatus, Token, WordType

__version__ = "1.0.0"
__all__ = ["Engine", "EditResult", "EditStatus", "Token", "WordType"]
