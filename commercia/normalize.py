"""Normalizers for raw text extracted from product pages.

Turns glyph-encoded ratings and locale-formatted currency strings into
numbers. Both functions are pure and never raise on bad input.
"""

import math
import re
from typing import Optional

from commercia.config import CURRENCY_LABEL, FILLED_STAR

__all__ = [
    "stars_to_score",
    "currency_to_number",
]

# "1.234" / "12.345.678": dots used as thousands separators
THOUSANDS_RE = re.compile(r"^-?\d{1,3}(\.\d{3})+$")


def stars_to_score(text: Optional[str], filled: str = FILLED_STAR) -> int:
    """Count the filled rating glyphs in a star string.

    "★★★★☆" -> 4. Empty or missing input gives 0.
    """
    if not text:
        return 0
    return text.count(filled)


def currency_to_number(text: Optional[str], label: str = CURRENCY_LABEL) -> Optional[float]:
    """Convert a currency string such as "R$ 1.234,56" into 1234.56.

    Args:
        text: Raw price text, with currency label and padding
        label: Currency label to strip (case-insensitive)

    Returns:
        The numeric value, or None when the text holds no number
        (empty string, label only, garbage). Never 0 for missing prices.
    """
    if not text:
        return None

    cleaned = text
    if label:
        cleaned = re.sub(re.escape(label), "", cleaned, flags=re.IGNORECASE)
    cleaned = re.sub(r"\s+", "", cleaned)

    if not cleaned:
        return None

    if "," in cleaned:
        # Comma is the decimal separator, dots group thousands
        cleaned = cleaned.replace(".", "").replace(",", ".", 1)
    elif THOUSANDS_RE.match(cleaned):
        cleaned = cleaned.replace(".", "")

    try:
        value = float(cleaned)
    except ValueError:
        return None

    if math.isnan(value) or math.isinf(value):
        return None
    return value
