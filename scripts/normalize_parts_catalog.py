import os
import sys

import pandas as pd

from torqueup.reco.parts import normalize_parts_columns, normalize_profile_columns

# usage: python scripts/normalize_parts_catalog.py <parts.csv> [profiles.csv]
parts_path = sys.argv[1] if len(sys.argv) > 1 else os.path.join("torqueup", "data", "approved_parts.csv")
profiles_path = sys.argv[2] if len(sys.argv) > 2 else None

try:
    df = normalize_parts_columns(pd.read_csv(parts_path, dtype=str, keep_default_na=False))
except ValueError as e:
    raise SystemExit(f"❌ {parts_path}: {e}")

df.to_csv(parts_path, index=False)
print("✅ parts catalog normalized:", os.path.abspath(parts_path))
print("✅ Columns:", list(df.columns))
print("✅ Rows:", len(df))

if profiles_path:
    try:
        prof = normalize_profile_columns(pd.read_csv(profiles_path, dtype=str, keep_default_na=False))
    except ValueError as e:
        raise SystemExit(f"❌ {profiles_path}: {e}")
    prof.to_csv(profiles_path, index=False)
    print("✅ profiles normalized:", os.path.abspath(profiles_path), f"({len(prof)} rows)")
