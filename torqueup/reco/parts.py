# torqueup/reco/parts.py
from __future__ import annotations
import logging
import os
from typing import Any, Dict, List, Optional

import pandas as pd

from torqueup import config
from torqueup.settings import MAX_RECOMMENDATIONS
from torqueup.texts import PARTS_TITLE, UNKNOWN_SELLER

logger = logging.getLogger("torqueup.parts")

# ------------------------------------------------------------------------------------
# Expected columns (and the names they show up under in raw exports)
# ------------------------------------------------------------------------------------
PART_COLUMNS = {
    "id":              ["id", "part_id", "uuid"],
    "title":           ["title", "name", "part_name"],
    "price":           ["price", "amount", "cost"],
    "condition":       ["condition", "state"],
    "image_url":       ["image_url", "image", "photo_url", "picture"],
    "compatible_cars": ["compatible_cars", "compatibility", "fits"],
    "seller_id":       ["seller_id", "seller", "user_id", "owner_id"],
}
REQUIRED_PART_COLUMNS = ["id", "title", "seller_id"]

PROFILE_COLUMNS = {
    "id":       ["id", "user_id", "profile_id"],
    "username": ["username", "user_name", "display_name"],
}

# compatible_cars is stored as "Toyota Corolla|Honda Civic"
COMPAT_SEP = "|"


def _normalize_columns(df: pd.DataFrame, synonyms: Dict[str, List[str]], required: List[str]) -> pd.DataFrame:
    df = df.copy()
    df.columns = [str(c).strip().lower() for c in df.columns]

    rename = {}
    for target, alts in synonyms.items():
        if target in df.columns:
            continue
        for col in df.columns:
            if col in alts:
                rename[col] = target
                break
    if rename:
        df = df.rename(columns=rename)

    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(f"Missing columns (after mapping): {missing}")

    for col in synonyms:
        if col not in df.columns:
            df[col] = ""
    return df[list(synonyms)]


def normalize_parts_columns(df: pd.DataFrame) -> pd.DataFrame:
    df = _normalize_columns(df, PART_COLUMNS, REQUIRED_PART_COLUMNS)
    df["price"] = pd.to_numeric(df["price"], errors="coerce")
    return df


def normalize_profile_columns(df: pd.DataFrame) -> pd.DataFrame:
    return _normalize_columns(df, PROFILE_COLUMNS, list(PROFILE_COLUMNS))


# ------------------------------------------------------------------------------------
# Loading (fresh on every call, nothing is cached)
# ------------------------------------------------------------------------------------
def _read_csv(path: str) -> pd.DataFrame:
    if not os.path.exists(path):
        raise FileNotFoundError(f"CSV not found at {os.path.abspath(path)}")
    return pd.read_csv(path, dtype=str, keep_default_na=False)


def load_parts_catalog(path: Optional[str] = None) -> pd.DataFrame:
    return normalize_parts_columns(_read_csv(path or config.PARTS_CATALOG_PATH))


def load_profiles(path: Optional[str] = None) -> pd.DataFrame:
    return normalize_profile_columns(_read_csv(path or config.PROFILES_PATH))


# ------------------------------------------------------------------------------------
# Lookup
# ------------------------------------------------------------------------------------
def _text_or_none(value: Any) -> Optional[str]:
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return None
    s = str(value).strip()
    return s or None


def _price(value: Any) -> Optional[float]:
    if value is None or pd.isna(value):
        return None
    return float(value)


def _compatible(value: Any) -> List[str]:
    s = _text_or_none(value)
    if not s:
        return []
    return [c.strip() for c in s.split(COMPAT_SEP) if c.strip()]


def lookup_parts(part_type: str, limit: int = MAX_RECOMMENDATIONS) -> List[Dict[str, Any]]:
    """
    Parts whose title contains `part_type` (case-insensitive, literal match),
    in catalog order, at most `limit`. Each part carries seller.username from
    the profiles table, or "Unknown seller".
    Catalog / profile read errors propagate.
    """
    catalog = load_parts_catalog()
    needle = (part_type or "").lower()
    titles = catalog["title"].astype(str).str.lower()
    hits = catalog[titles.str.contains(needle, regex=False)].head(limit)

    profiles = load_profiles()
    # first row wins for a duplicated profile id
    usernames: Dict[str, Any] = {}
    for pid, name in zip(profiles["id"], profiles["username"]):
        usernames.setdefault(str(pid), name)

    out: List[Dict[str, Any]] = []
    for _, row in hits.iterrows():
        seller_id = _text_or_none(row["seller_id"])
        out.append({
            "id":              _text_or_none(row["id"]),
            "title":           _text_or_none(row["title"]),
            "price":           _price(row["price"]),
            "condition":       _text_or_none(row["condition"]),
            "image_url":       _text_or_none(row["image_url"]),
            "compatible_cars": _compatible(row["compatible_cars"]),
            "seller": {
                "username": _text_or_none(usernames.get(seller_id or "")) or UNKNOWN_SELLER,
            },
        })
    return out


def parts_title(part_type: str) -> str:
    part = part_type or ""
    return PARTS_TITLE.format(part=part[:1].upper() + part[1:])


def recommend_parts(part_type: str) -> Optional[Dict[str, Any]]:
    """
    Recommendation payload for the parts branch, or None when the catalog
    could not be read (the reply is then sent without cards).
    """
    try:
        items = lookup_parts(part_type)
    except (OSError, ValueError, KeyError, pd.errors.ParserError) as e:
        logger.exception("Parts lookup failed for %r: %s", part_type, e)
        return None

    logger.info("Parts lookup %r → %d items", part_type, len(items))
    return {"type": "parts", "items": items, "title": parts_title(part_type)}
