# torqueup/router.py
import logging
from typing import Any, Dict, List, Optional

from torqueup.nlp import llm
from torqueup.nlp.intent import BRANCH_CARS, BRANCH_PARTS, classify_reply
from torqueup.nlp.normalize import build_user_context
from torqueup.nlp.prompt import build_prompt
from torqueup.reco import parts
from torqueup.reco.catalog import recommend_cars
from torqueup.texts import BRAND_UNAVAILABLE_NOTE, CARS_TITLE

logger = logging.getLogger("torqueup.router")


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:]


def car_recommendations(
    text: str,
    message: str,
    cars: List[Dict[str, Any]],
    previous_messages: List[Dict[str, Any]],
) -> tuple[str, Dict[str, Any]]:
    context = build_user_context(previous_messages, message)
    logger.debug("User context for filtering: %s", context)

    pick = recommend_cars(cars, context)
    if pick.missing_brand:
        text += BRAND_UNAVAILABLE_NOTE.format(brand=_capitalize(pick.missing_brand))

    return text, {"type": "cars", "items": pick.items, "title": CARS_TITLE}


def assemble_response(text: str, recommendations: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    return {"response": text, "recommendations": recommendations}


async def answer_turn(
    message: str,
    cars: List[Dict[str, Any]],
    previous_messages: List[Dict[str, Any]],
) -> Dict[str, Any]:
    """
    One chat turn:
      1) ask the model (prompt = instructions + inventory + conversation)
      2) look for a recommendation marker in its reply
      3) cars → filter the inventory; parts → catalog lookup
      4) package display text + optional recommendations
    Model errors propagate to the caller; catalog errors only drop the cards.
    """
    prompt = build_prompt(message, cars, previous_messages)
    client = llm.get_client()
    raw_reply = await client.generate(prompt)

    intent = classify_reply(raw_reply)
    text = intent.display_text
    recommendations = None

    if intent.branch == BRANCH_CARS:
        text, recommendations = car_recommendations(text, message, cars, previous_messages)
    elif intent.branch == BRANCH_PARTS:
        recommendations = parts.recommend_parts(intent.part_type)

    logger.info(
        "branch=%s recommendations=%d",
        intent.branch or "none",
        len(recommendations["items"]) if recommendations else 0,
    )
    return assemble_response(text, recommendations)
