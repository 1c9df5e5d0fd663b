"""Persistence of the serialized product."""

from pathlib import Path
from typing import Union

from commercia.logging_config import get_logger, log_scrape_event

__all__ = ["save_json"]

logger = get_logger("storage")


def save_json(text: str, path: Union[str, Path]) -> bool:
    """Write serialized JSON to path, creating parent directories.

    Write failures are logged, not raised, so the caller still has the
    in-memory result.

    Returns:
        True if the file was written, False otherwise
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        logger.error(f"Failed to save product to {path}: {e}")
        log_scrape_event("save_failed", {
            "path": str(path),
            "error": str(e),
        })
        return False

    logger.info(f"Saved product to {path}")
    return True
