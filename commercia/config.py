"""Configuration and constants for the scraper."""

import copy
import os
from typing import Any, Dict

__all__ = [
    "PRODUCT_URL",
    "HEADERS",
    "REQUEST_TIMEOUT",
    "OUTPUT_PATH",
    "FILLED_STAR",
    "CURRENCY_LABEL",
    "SELECTORS",
    "get_selectors",
]

# Product page to scrape
PRODUCT_URL = os.getenv(
    "COMMERCIA_URL",
    "https://infosimples.com/vagas/desafio/commercia/product.html",
)

# HTTP headers
HEADERS = {
    "User-Agent": "commercia product scraper",
    "Accept": "text/html,application/xhtml+xml",
}

# Request timeout (seconds)
REQUEST_TIMEOUT = float(os.getenv("COMMERCIA_REQUEST_TIMEOUT", "15"))

# Output path for the serialized product
OUTPUT_PATH = os.getenv("COMMERCIA_OUTPUT_PATH", "produto.json")

# Filled rating glyph used by the review stars
FILLED_STAR = "★"

# Currency label prefixed to prices (e.g. "R$ 1.234,56")
CURRENCY_LABEL = "R$"


# =============================================================================
# Selector Configuration
# =============================================================================
# Maps each logical field to a CSS selector. Collection sections carry a
# "main" selector for the repeated container and per-field selectors that are
# resolved relative to each container.

SelectorConfig = Dict[str, Any]

SELECTORS: SelectorConfig = {
    "title": "h2#product_title",
    "brand": "div.brand",
    "description": "div.proddet p",
    "categories": "nav.current-category a",
    "skus": {
        "main": "div.skus-area div.card-container",
        "name": "div.prod-nome",
        "current_price": "div.prod-pnow",
        "old_price": "div.prod-pold",
        "available": "i",
    },
    "properties": {
        "main": "h4:-soup-contains('Product properties')",
        "additional": "div#propadd h4:-soup-contains('Additional properties')",
        "label": "td b",
        "value": "td",
    },
    "reviews": {
        "main": "div#comments div.analisebox",
        "name": "span.analiseusername",
        "date": "span.analisedate",
        "score": "span.analisestars",
        "text": "p",
    },
}


def get_selectors() -> SelectorConfig:
    """Get a copy of the selector configuration that callers may modify."""
    return copy.deepcopy(SELECTORS)
