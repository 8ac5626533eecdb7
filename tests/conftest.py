# tests/conftest.py
import os
import sys
import importlib
import pandas as pd
import pytest
from fastapi.testclient import TestClient

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


# ---------- Inventory used across tests ----------
@pytest.fixture
def sample_cars():
    return [
        {"id": 1,  "make": "Toyota",     "model": "Corolla",  "price": 14000, "body_style": "Sedan",
         "drivetrain": "FWD", "seating_capacity": 5, "category": "Economy", "fuel_consumption": "Efficient 6L/100km"},
        {"id": 2,  "make": "Honda",      "model": "Civic",    "price": 18000, "body_style": "Sedan",
         "drivetrain": "FWD", "seating_capacity": 5, "category": "Economy", "fuel_consumption": "6.5L/100km"},
        {"id": 3,  "make": "BMW",        "model": "X5",       "price": 52000, "body_style": "SUV",
         "drivetrain": "AWD", "seating_capacity": 7, "category": "Luxury", "fuel_consumption": "10L/100km"},
        {"id": 4,  "make": "Hyundai",    "model": "i20",      "price": 12000, "body_style": "Hatchback",
         "drivetrain": "FWD", "seating_capacity": 5, "category": "Economy", "fuel_consumption": "5.5L/100km"},
        {"id": 5,  "make": "Toyota",     "model": "RAV4",     "price": 28000, "body_style": "SUV",
         "drivetrain": "AWD", "seating_capacity": 5, "category": "Family", "fuel_consumption": "8L/100km"},
        {"id": 6,  "make": "Volkswagen", "model": "Golf",     "price": 22000, "body_style": "Hatchback",
         "drivetrain": "FWD", "seating_capacity": 5, "category": "Economy", "fuel_consumption": "6L/100km"},
        {"id": 7,  "make": "Mercedes-Benz", "model": "C-Class", "price": 45000, "body_style": "Sedan",
         "drivetrain": "RWD", "seating_capacity": 5, "category": "Luxury", "fuel_consumption": "8L/100km"},
        {"id": 8,  "make": "Kia",        "model": "Sorento",  "price": 33000, "body_style": "SUV",
         "drivetrain": "4WD", "seating_capacity": 7, "category": "Family", "fuel_consumption": "9L/100km"},
        {"id": 9,  "make": "Renault",    "model": "Clio",     "price": 11000, "body_style": "Hatchback",
         "drivetrain": "FWD", "seating_capacity": 5, "category": "Economy", "fuel_consumption": None},
        {"id": 10, "make": "Ford",       "model": "Ranger",   "price": 30000, "body_style": "Pickup",
         "drivetrain": "4WD", "seating_capacity": 5, "category": "Utility", "fuel_consumption": "11L/100km"},
    ]


# ---------- Parts catalog / profiles stubs (no disk) ----------
@pytest.fixture
def parts_df():
    return pd.DataFrame(
        [
            ("p1", "Front Brakes Kit",   "120", "new",  "https://img/p1.jpg", "Toyota Corolla|Honda Civic", "u1"),
            ("p2", "Rear brakes pads",   "45",  "used", "",                   "",                           "u9"),
            ("p3", "Oil Filter",         "10",  "new",  "https://img/p3.jpg", "Kia Sorento",                "u2"),
        ],
        columns=["id", "title", "price", "condition", "image_url", "compatible_cars", "seller_id"],
    )


@pytest.fixture
def profiles_df():
    return pd.DataFrame(
        [("u1", "garage_ali"), ("u2", "parts_plus")],
        columns=["id", "username"],
    )


@pytest.fixture(autouse=True)
def stub_catalogs(monkeypatch, parts_df, profiles_df):
    from torqueup.reco.parts import normalize_parts_columns, normalize_profile_columns

    monkeypatch.setattr("torqueup.reco.parts.load_parts_catalog",
                        lambda path=None: normalize_parts_columns(parts_df), raising=True)
    monkeypatch.setattr("torqueup.reco.parts.load_profiles",
                        lambda path=None: normalize_profile_columns(profiles_df), raising=True)
    yield


# ---------- Scripted model ----------
class FakeLLM:
    def __init__(self, reply: str = "", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.prompts = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return self.reply


@pytest.fixture
def fake_llm(monkeypatch):
    fake = FakeLLM()
    monkeypatch.setattr("torqueup.nlp.llm.get_client", lambda: fake, raising=True)
    return fake


# ---------- FastAPI TestClient ----------
@pytest.fixture()
def client(monkeypatch):
    monkeypatch.setattr("torqueup.config.MAX_CONTEXT_TURNS", 10, raising=False)

    import torqueup.main as m
    importlib.reload(m)
    from torqueup.main import app
    return TestClient(app)


# Helper: POST a chat turn to /gemini-chat
@pytest.fixture()
def post_chat(client):
    def _post(message: str, cars=None, previous=None):
        payload = {"message": message, "cars": cars or []}
        if previous is not None:
            payload["context"] = {"previousMessages": previous}
        return client.post("/gemini-chat", json=payload)
    return _post
