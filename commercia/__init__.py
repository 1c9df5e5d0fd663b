"""Product page scraper: extracts a product page into a JSON document."""

__version__ = "0.1.0"

# Re-export main components for convenient imports
from commercia.config import PRODUCT_URL, SELECTORS, get_selectors
from commercia.models import (
    SKU,
    InvalidReviewScoreError,
    NoReviewsError,
    Product,
    ProductRecord,
    Property,
    Review,
)
from commercia.normalize import currency_to_number, stars_to_score
from commercia.scraper import FetchError, extract, parse_product_page, scrape_product
from commercia.storage import save_json

__all__ = [
    # Version
    "__version__",
    # Config
    "PRODUCT_URL",
    "SELECTORS",
    "get_selectors",
    # Models
    "Product",
    "ProductRecord",
    "SKU",
    "Property",
    "Review",
    "NoReviewsError",
    "InvalidReviewScoreError",
    # Normalizers
    "stars_to_score",
    "currency_to_number",
    # Core functions
    "extract",
    "parse_product_page",
    "scrape_product",
    "save_json",
    "FetchError",
]
