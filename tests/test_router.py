# tests/test_router.py
import asyncio

import pytest

import torqueup.reco.parts as partsmod
from torqueup.nlp.llm import LLMError
from torqueup.router import answer_turn, assemble_response


def _turn(message, cars, previous=None):
    return asyncio.run(answer_turn(message, cars, previous or []))


def test_plain_reply_has_no_recommendations(fake_llm, sample_cars):
    fake_llm.reply = "What will you mainly use this car for?"
    out = _turn("I want a car", sample_cars)
    assert out == {"response": "What will you mainly use this car for?", "recommendations": None}


def test_cars_branch(fake_llm, sample_cars):
    fake_llm.reply = "Here are my picks! [RECOMMEND_CARS]"
    out = _turn("I want a car", sample_cars)
    assert out["response"] == "Here are my picks!"
    rec = out["recommendations"]
    assert rec["type"] == "cars"
    assert rec["title"] == "Perfect Cars for You"
    assert [c["id"] for c in rec["items"]] == [1, 2, 3, 4]


def test_cars_branch_uses_whole_user_history(fake_llm, sample_cars):
    fake_llm.reply = "[RECOMMEND_CARS] Try these."
    previous = [
        {"text": "Off-road weekends", "isUser": True},
        {"text": "Great, budget?", "isUser": False},
        {"text": "2,000,000 - 3,000,000", "isUser": True},
    ]
    out = _turn("Large please", sample_cars, previous)
    assert out["response"] == "Try these."
    assert [c["id"] for c in out["recommendations"]["items"]] == [5, 8]


def test_unavailable_brand_note(fake_llm, sample_cars):
    fake_llm.reply = "Let me check our stock. [RECOMMEND_CARS]"
    out = _turn("I love Ferrari", sample_cars)
    assert out["response"].startswith("Let me check our stock. Unfortunately, we don't have any Ferrari vehicles")
    assert "suggest similar cars from other brands?" in out["response"]
    assert [c["id"] for c in out["recommendations"]["items"]] == [1, 2, 3, 4]


def test_no_note_when_other_stages_narrowed(fake_llm, sample_cars):
    fake_llm.reply = "Here you go. [RECOMMEND_CARS]"
    out = _turn("family car with seating for 7", sample_cars)
    assert out["response"] == "Here you go."
    assert [c["id"] for c in out["recommendations"]["items"]] == [1, 2, 3, 4]


def test_losing_parts_marker_is_not_shown(fake_llm, sample_cars):
    fake_llm.reply = "Try these [RECOMMEND_CARS] or [RECOMMEND_PARTS:tires]"
    out = _turn("I want a car", sample_cars)
    assert out["response"] == "Try these  or"
    assert out["recommendations"]["type"] == "cars"


def test_multi_word_brand_note_capitalizes_first_letter_only(fake_llm, sample_cars):
    fake_llm.reply = "[RECOMMEND_CARS]"
    out = _turn("a land rover", sample_cars)
    assert "any Land rover vehicles" in out["response"]


def test_parts_branch(fake_llm, sample_cars):
    fake_llm.reply = "Could be worn pads or rotors. [RECOMMEND_PARTS:brakes]"
    out = _turn("My car squeaks when braking", sample_cars)
    assert out["response"] == "Could be worn pads or rotors."
    rec = out["recommendations"]
    assert rec["type"] == "parts"
    assert rec["title"] == "Brakes Parts for Your Car"
    assert len(rec["items"]) == 2
    assert [p["seller"]["username"] for p in rec["items"]] == ["garage_ali", "Unknown seller"]


def test_parts_branch_degrades_to_text_only(fake_llm, sample_cars, monkeypatch):
    def _boom(path=None):
        raise OSError("disk gone")
    monkeypatch.setattr(partsmod, "load_parts_catalog", _boom)

    fake_llm.reply = "Check the brakes. [RECOMMEND_PARTS:brakes]"
    out = _turn("squeak", sample_cars)
    assert out == {"response": "Check the brakes.", "recommendations": None}


def test_model_errors_propagate(fake_llm, sample_cars):
    fake_llm.error = LLMError("Gemini API error: 500 Internal")
    with pytest.raises(LLMError):
        _turn("hi", sample_cars)


def test_prompt_contains_message_and_history(fake_llm, sample_cars):
    fake_llm.reply = "ok"
    _turn("Budget B", sample_cars, [{"text": "Family trips", "isUser": True}])
    prompt = fake_llm.prompts[0]
    assert "User: Family trips" in prompt
    assert prompt.endswith("User message: Budget B")


def test_assemble_response():
    assert assemble_response("hi", None) == {"response": "hi", "recommendations": None}
