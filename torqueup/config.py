# torqueup/config.py
import os
from dotenv import load_dotenv

load_dotenv()

# Which hosted model answers the chat: "gemini" (default) or "openai"
LLM_PROVIDER = os.getenv("LLM_PROVIDER", "gemini").strip().lower()

GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", "")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-1.5-flash-latest")

OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")

# CSV exports of the approved parts catalog and seller profiles
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
DATA_DIR = os.path.abspath(os.path.join(BASE_DIR, "data"))
PARTS_CATALOG_PATH = os.getenv("PARTS_CATALOG_PATH") or os.path.join(DATA_DIR, "approved_parts.csv")
PROFILES_PATH = os.getenv("PROFILES_PATH") or os.path.join(DATA_DIR, "profiles.csv")

# The client only sends the last N turns; 0 disables the cut
MAX_CONTEXT_TURNS = int(os.getenv("MAX_CONTEXT_TURNS", "10"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
