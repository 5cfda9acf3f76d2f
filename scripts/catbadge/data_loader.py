import json
import logging
from pathlib import Path

from catbadge.models import Category

logger = logging.getLogger(__name__)

SITE = Path("site")
DATA = SITE / "data"

def _load_json(path: Path):
    with open(path, encoding="utf-8") as f:
        return json.load(f)

def _blank_to_none(value):
    if value is None:
        return None
    if isinstance(value, str):
        return value.strip() or None
    return value

def _as_bool(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes"}
    return bool(value)

def category_from_row(row) -> Category:
    return Category(
        id=row["id"],
        name=row["name"],
        slug=(row.get("slug") or "").strip(),
        parent_category_id=_blank_to_none(row.get("parent_category_id", row.get("parent_id"))),
        description_text=_blank_to_none(row.get("description_text")),
        read_restricted=_as_bool(row.get("read_restricted")),
    )

def load_categories(path: Path = DATA / "categories.json"):
    rows = _load_json(path)

    # --- safety: filter bad rows (prevents KeyError) ---
    good = [r for r in rows if isinstance(r, dict) and r.get("id") not in (None, "") and r.get("name")]
    if len(good) != len(rows):
        logger.warning("Skipped %d malformed category rows in %s", len(rows) - len(good), path)

    return [category_from_row(r) for r in good]
