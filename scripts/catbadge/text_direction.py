import unicodedata

RTL_CLASSES = {"R", "AL"}


def is_rtl(text: str) -> bool:
    """True when the first strongly-directional character is right-to-left."""
    for ch in text or "":
        bidi = unicodedata.bidirectional(ch)
        if bidi in RTL_CLASSES:
            return True
        if bidi == "L":
            return False
    return False


def text_direction(text: str) -> str:
    return "rtl" if is_rtl(text) else "ltr"
