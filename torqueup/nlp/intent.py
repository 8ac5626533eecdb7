# torqueup/nlp/intent.py
from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Optional, Tuple

# Markers the assistant model embeds in its reply (see texts.SYSTEM_PROMPT)
CARS_MARKER = "[RECOMMEND_CARS]"
PARTS_MARKER_RE = re.compile(r"\[RECOMMEND_PARTS:([^\]]+)\]")
ANY_MARKER_RE = re.compile(r"\[RECOMMEND_CARS\]|\[RECOMMEND_PARTS:[^\]]+\]")

BRANCH_CARS = "cars"
BRANCH_PARTS = "parts"


@dataclass(frozen=True)
class ReplyIntent:
    """
    Result of scanning a model reply for recommendation markers.

    `text` is the reply with every marker cut out (nothing else touched).
    `removed` lists the cuts in the order they were made, each as
    (position in the text at that moment, marker), so `restore()` gives back
    the exact model output. `display_text` is what the user sees.
    """
    branch: Optional[str]
    text: str
    removed: Tuple[Tuple[int, str], ...] = ()
    part_type: Optional[str] = None

    @property
    def display_text(self) -> str:
        return self.text.strip()

    def restore(self) -> str:
        text = self.text
        for pos, marker in reversed(self.removed):
            text = text[:pos] + marker + text[pos:]
        return text


def _strip_markers(text: str) -> Tuple[str, Tuple[Tuple[int, str], ...]]:
    # Cutting a marker can join two halves into a new one, so repeat until clean
    removed = []
    m = ANY_MARKER_RE.search(text)
    while m:
        removed.append((m.start(), m.group(0)))
        text = text[:m.start()] + text[m.end():]
        m = ANY_MARKER_RE.search(text)
    return text, tuple(removed)


def classify_reply(reply: str) -> ReplyIntent:
    """
    1) "[RECOMMEND_CARS]" → cars branch
    2) otherwise "[RECOMMEND_PARTS:<type>]" → parts branch with the first <type>
    3) otherwise no branch, text untouched
    Once a branch is chosen every marker is cut from the text, including a
    parts marker that lost to the cars marker.
    """
    text = reply or ""

    if CARS_MARKER in text:
        stripped, removed = _strip_markers(text)
        return ReplyIntent(BRANCH_CARS, stripped, removed)

    m = PARTS_MARKER_RE.search(text)
    if m:
        stripped, removed = _strip_markers(text)
        return ReplyIntent(BRANCH_PARTS, stripped, removed, part_type=m.group(1))

    return ReplyIntent(None, text)
