# wordswap/history.py
from __future__ import annotations
from typing import List, Optional


class EditHistory:
    """
    Linear undo/redo over whole-document snapshots.

    Invariant: 0 <= cursor < len(snapshots). push() drops every entry past the
    cursor before appending, so a new edit after an undo discards the redo branch.
    """
    def __init__(self, initial: str = "") -> None:
        self._snapshots: List[str] = [initial]
        self._cursor = 0

    # R
    @property
    def current(self) -> str:
        return self._snapshots[self._cursor]

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def snapshots(self) -> List[str]:
        return list(self._snapshots)

    def __len__(self) -> int:
        return len(self._snapshots)

    def copy(self) -> "EditHistory":
        other = EditHistory()
        other._snapshots = list(self._snapshots)
        other._cursor = self._cursor
        return other

    @property
    def can_undo(self) -> bool:
        return self._cursor > 0

    @property
    def can_redo(self) -> bool:
        return self._cursor < len(self._snapshots) - 1

    # W
    def push(self, text: str) -> None:
        del self._snapshots[self._cursor + 1:]
        self._snapshots.append(text)
        self._cursor = len(self._snapshots) - 1

    # /* ~~~ cursor moves return the new current text, or None at a bound ~~~ */
    def undo(self) -> Optional[str]:
        if not self.can_undo:
            return None
        self._cursor -= 1
        return self.current

    def redo(self) -> Optional[str]:
        if not self.can_redo:
            return None
        self._cursor += 1
        return self.current
