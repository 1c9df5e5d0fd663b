"""Core scraping logic: fetch a product page and extract a Product from it."""

from typing import Dict, Optional

import requests  # type: ignore[import-untyped]
from bs4 import BeautifulSoup

from commercia.config import HEADERS, REQUEST_TIMEOUT, SELECTORS, SelectorConfig
from commercia.html_utils import (
    next_sibling_text,
    node_text,
    select_all,
    select_text,
    table_rows_after,
)
from commercia.logging_config import get_logger, log_scrape_event
from commercia.models import Product
from commercia.normalize import currency_to_number, stars_to_score
from commercia.url_validation import URLValidationError, validate_url

__all__ = [
    "FetchError",
    "create_session",
    "fetch_html",
    "extract",
    "parse_product_page",
    "scrape_product",
]

logger = get_logger("scraper")


class FetchError(Exception):
    """Raised when the product page cannot be retrieved."""
    pass


def create_session() -> requests.Session:
    """Create a requests Session with the scraper headers."""
    session = requests.Session()
    session.headers.update(HEADERS)
    session.headers.setdefault("Accept-Encoding", "gzip, deflate")
    return session


def fetch_html(
    url: str,
    session: Optional[requests.Session] = None,
    timeout: float = REQUEST_TIMEOUT,
) -> str:
    """HTTP GET for a single page. No retries.

    Args:
        url: Absolute http(s) URL to fetch
        session: Optional requests.Session (default: a new one)
        timeout: Request timeout in seconds

    Returns:
        HTML content as string

    Raises:
        FetchError: If the URL is invalid, the request fails or times out,
            or the server answers with an error status
    """
    try:
        url = validate_url(url)
    except URLValidationError as e:
        logger.error(f"URL validation failed: {e}")
        raise FetchError(f"Invalid URL: {e}") from e

    sess = session or create_session()

    try:
        resp = sess.get(url, timeout=timeout)
        resp.raise_for_status()
    except requests.exceptions.Timeout as e:
        logger.error(f"Timeout fetching {url}: {e}")
        raise FetchError(f"Timeout fetching {url} after {timeout}s") from e
    except requests.exceptions.HTTPError as e:
        status_code = e.response.status_code if e.response is not None else "unknown"
        logger.error(f"HTTP error fetching {url}: {e}")
        raise FetchError(f"HTTP Error {status_code} fetching {url}") from e
    except requests.exceptions.RequestException as e:
        logger.error(f"Request error fetching {url}: {e}")
        raise FetchError(f"Failed to fetch {url}: {e}") from e

    # Pages without a declared charset default to ISO-8859-1 in requests
    if resp.encoding is None or resp.encoding.lower() == "iso-8859-1":
        resp.encoding = resp.apparent_encoding or "utf-8"

    log_scrape_event("fetch_complete", {
        "url": url,
        "status_code": resp.status_code,
        "bytes": len(resp.content),
    }, logger_name="scraper")
    return str(resp.text)


# =============================================================================
# Extraction
# =============================================================================

def _extract_header(soup: BeautifulSoup, selectors: SelectorConfig, product: Product) -> None:
    product.set_header(
        title=select_text(soup, selectors["title"]),
        brand=select_text(soup, selectors["brand"]),
        description=select_text(soup, selectors["description"]),
    )


def _extract_categories(soup: BeautifulSoup, selectors: SelectorConfig, product: Product) -> None:
    for crumb in select_all(soup, selectors["categories"]):
        product.add_category(node_text(crumb))


def _extract_skus(soup: BeautifulSoup, selectors: Dict[str, str], product: Product) -> None:
    for card in select_all(soup, selectors["main"]):
        product.add_sku(
            name=select_text(card, selectors["name"]),
            current_price=currency_to_number(select_text(card, selectors["current_price"])),
            old_price=currency_to_number(select_text(card, selectors["old_price"])),
            # An "out of stock" label marks the variant unavailable
            available=not select_text(card, selectors["available"]),
        )


def _extract_properties(soup: BeautifulSoup, selectors: Dict[str, str], product: Product) -> None:
    # Base and additional tables go into the same list, base first
    for table_key in ("main", "additional"):
        for row in table_rows_after(soup, selectors[table_key]):
            product.add_property(
                label=select_text(row, selectors["label"]),
                value=next_sibling_text(row, selectors["value"]),
            )


def _extract_reviews(soup: BeautifulSoup, selectors: Dict[str, str], product: Product) -> None:
    for box in select_all(soup, selectors["main"]):
        product.add_review(
            name=select_text(box, selectors["name"]),
            date=select_text(box, selectors["date"]),
            score=stars_to_score(select_text(box, selectors["score"])),
            text=select_text(box, selectors["text"]),
        )


def extract(
    soup: BeautifulSoup,
    selectors: Optional[SelectorConfig] = None,
    url: str = "",
) -> Product:
    """Populate a fresh Product from a parsed product page.

    Selectors that match nothing give empty strings or empty collections;
    collection items with missing fields are kept with default values.

    Args:
        soup: Parsed product page
        selectors: Selector configuration (default: config.SELECTORS)
        url: URL recorded on the product

    Returns:
        The populated Product
    """
    selectors = selectors or SELECTORS
    product = Product(url)

    _extract_header(soup, selectors, product)
    _extract_categories(soup, selectors, product)
    _extract_skus(soup, selectors["skus"], product)
    _extract_properties(soup, selectors["properties"], product)
    _extract_reviews(soup, selectors["reviews"], product)

    log_scrape_event("extract_complete", {
        "url": url,
        "title": product.title,
        "skus": len(product.skus),
        "categories": len(product.categories),
        "properties": len(product.properties),
        "reviews": len(product.reviews),
    }, logger_name="scraper")
    return product


def parse_product_page(html: str, url: str, selectors: Optional[SelectorConfig] = None) -> Product:
    """Parse a product page's HTML into a Product."""
    soup = BeautifulSoup(html, "html.parser")
    return extract(soup, selectors, url=url)


def scrape_product(
    url: str,
    session: Optional[requests.Session] = None,
    selectors: Optional[SelectorConfig] = None,
) -> Product:
    """Fetch and extract a single product page.

    Raises:
        FetchError: If the page cannot be retrieved; nothing is extracted
    """
    logger.info(f"Scraping product: {url}")
    html = fetch_html(url, session=session)
    product = parse_product_page(html, url, selectors)
    logger.info(
        f"Extracted '{product.title}': {len(product.skus)} SKUs, "
        f"{len(product.properties)} properties, {len(product.reviews)} reviews"
    )
    return product
