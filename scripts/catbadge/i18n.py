import logging

logger = logging.getLogger(__name__)

# English strings for the badge labels, keyed like the forum's locale files.
STRINGS = {
    "category_row.topic_count": {
        "one": "{count} topic in this category",
        "other": "{count} topics in this category",
    },
    "category_row.plus_subcategories": {
        "one": "+ {count} subcategory",
        "other": "+ {count} subcategories",
    },
}


def translate(key: str, **params) -> str:
    entry = STRINGS.get(key)
    if entry is None:
        logger.debug("Missing translation for %s", key)
        return key

    if isinstance(entry, dict):
        form = "one" if params.get("count") == 1 else "other"
        entry = entry[form]
    return entry.format(**params)
