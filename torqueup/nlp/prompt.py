# torqueup/nlp/prompt.py
import json
from typing import Any, Dict, List

from torqueup.settings import PROMPT_INVENTORY_SIZE
from torqueup.texts import SYSTEM_PROMPT


def render_conversation(previous_messages: List[Dict[str, Any]]) -> str:
    if not previous_messages:
        return ""
    lines = [
        f"{'User' if turn.get('isUser') else 'Assistant'}: {turn.get('text') or ''}"
        for turn in previous_messages
    ]
    return "Previous conversation: " + "\n".join(lines)


def build_prompt(message: str, cars: List[Dict[str, Any]], previous_messages: List[Dict[str, Any]]) -> str:
    """
    System instructions (with a slice of the inventory), the prior turns and
    the new message, as one text prompt.
    """
    inventory = json.dumps(list(cars or [])[:PROMPT_INVENTORY_SIZE],
                           ensure_ascii=False, separators=(",", ":"), default=str)
    system = SYSTEM_PROMPT.format(inventory=inventory)
    conversation = render_conversation(previous_messages)
    return f"{system}\n\n{conversation}\n\nUser message: {message}"
