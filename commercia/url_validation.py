"""URL validation and sanitization utilities.

The product URL comes from the command line or the environment, so it is
checked before any request is made.
"""

import re
from urllib.parse import urlparse

__all__ = [
    "validate_url",
    "sanitize_url",
    "URLValidationError",
]


class URLValidationError(Exception):
    """Raised when URL validation fails."""
    pass


# Dangerous URL schemes to reject
DANGEROUS_SCHEMES = {"javascript", "data", "vbscript", "file"}

SUSPICIOUS_PATTERNS = [
    r"\.\./",            # Path traversal
    r"%2e%2e",           # Encoded path traversal
    r"<script",          # XSS attempt
    r"javascript:",      # JS injection
]


def sanitize_url(url: str) -> str:
    """Strip whitespace, control characters and null bytes from a URL."""
    if not url:
        return ""

    url = url.strip()
    url = re.sub(r"[\x00-\x1f\x7f-\x9f]", "", url)
    url = url.replace("%00", "")

    return url


def validate_url(url: str) -> str:
    """Validate an absolute http(s) URL.

    Args:
        url: URL to validate

    Returns:
        Sanitized URL

    Raises:
        URLValidationError: If URL is not an absolute http(s) URL or looks malicious
    """
    if not url:
        raise URLValidationError("URL is empty")

    url = sanitize_url(url)

    try:
        parsed = urlparse(url)
    except ValueError as e:
        raise URLValidationError(f"Failed to parse URL: {e}") from e

    scheme = parsed.scheme.lower()
    if scheme in DANGEROUS_SCHEMES:
        raise URLValidationError(f"Dangerous URL scheme: {scheme}")

    if scheme not in ("http", "https"):
        raise URLValidationError(f"Invalid URL scheme: {scheme or '(none)'}")

    domain = (parsed.hostname or "").lower()
    if not domain:
        raise URLValidationError("URL has no domain")

    url_lower = url.lower()
    for pattern in SUSPICIOUS_PATTERNS:
        if re.search(pattern, url_lower):
            raise URLValidationError(f"URL contains suspicious pattern: {pattern}")

    return url

