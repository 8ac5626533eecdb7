# torqueup/nlp/normalize.py
from __future__ import annotations
from typing import Any, Dict, Iterable, Mapping, Optional


# -----------------------------------------------------------------------------
# Record helpers
# -----------------------------------------------------------------------------
def lower_or_empty(value: Any) -> str:
    """
    Lowercase text for substring checks. Missing / non-text values become "".
    """
    if value is None:
        return ""
    return str(value).lower()


def field_contains(record: Mapping[str, Any], field: str, needle: str) -> bool:
    return needle in lower_or_empty(record.get(field))


def numeric_field(record: Mapping[str, Any], field: str) -> Optional[float]:
    """
    Numeric value of a record field, or None when it is missing or not a number.
    """
    value = record.get(field)
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


# -----------------------------------------------------------------------------
# Conversation context
# -----------------------------------------------------------------------------
def build_user_context(previous_messages: Iterable[Dict[str, Any]], message: str) -> str:
    """
    Everything the user has said so far, lowercased and joined with spaces:
    the text of each user turn (oldest first) followed by the current message.
    Assistant turns are ignored. No length limit is applied here.
    """
    texts = [
        str(turn.get("text") or "")
        for turn in (previous_messages or [])
        if turn.get("isUser")
    ]
    texts.append(message or "")
    return " ".join(texts).lower()
