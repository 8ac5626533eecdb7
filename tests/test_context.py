# tests/test_context.py
from torqueup.nlp.normalize import build_user_context, field_contains, numeric_field


def test_only_user_turns_then_current_message():
    previous = [
        {"text": "Hi There", "isUser": True},
        {"text": "Hello! How can I help?", "isUser": False},
        {"text": "I drive in the CITY", "isUser": True},
    ]
    ctx = build_user_context(previous, "Budget A please")
    assert ctx == "hi there i drive in the city budget a please"


def test_empty_history_is_just_the_message():
    assert build_user_context([], "I Want A Car") == "i want a car"
    assert build_user_context(None, "Hey") == "hey"


def test_history_is_not_mutated():
    previous = [{"text": "Family TRIPS", "isUser": True}]
    build_user_context(previous, "ok")
    assert previous == [{"text": "Family TRIPS", "isUser": True}]


def test_field_helpers_tolerate_missing_values():
    car = {"body_style": None, "seating_capacity": "7", "price": "abc"}
    assert not field_contains(car, "body_style", "suv")
    assert not field_contains(car, "drivetrain", "awd")
    assert numeric_field(car, "seating_capacity") == 7.0
    assert numeric_field(car, "price") is None
    assert numeric_field(car, "missing") is None
