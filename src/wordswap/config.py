# Phrase scope: how many positions to scan on each side of the target
BACKWARD_SCAN_LIMIT: int = 3
FORWARD_SCAN_LIMIT: int = 3

# /* ~~~ status lines shown to the user after each call ~~~ */
MSG_RULE_APPLIED = "Semantic edit applied"
MSG_REPLACED = "Word replaced"
MSG_APPENDED = "Text appended"
MSG_DELETED = 'Deleted "{word}"'
MSG_UNDO = "Undo"
MSG_REDO = "Redo"
MSG_EMPTY = "Not applying empty edit"
MSG_NOT_FOUND = "Selected word not found"
MSG_NOTHING_TO_UNDO = "Nothing to undo"
MSG_NOTHING_TO_REDO = "Nothing to redo"

# Web UI defaults
HOST: str = "127.0.0.1"
PORT: int = 8000
DEFAULT_TEXT: str = "Meeting on Monday at 3pm in the Studio"
