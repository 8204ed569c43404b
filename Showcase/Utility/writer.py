"""Output helpers for the generated pages and the collaborator fragment."""
import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)


def write_page(directory: str, filename: str, html: str) -> str:
    os.makedirs(directory or ".", exist_ok=True)
    path = os.path.join(directory, filename)
    with open(path, "w", encoding="utf-8") as f:
        f.write(html)
    logger.info("Wrote %s (%d bytes)", path, len(html.encode("utf-8")))
    return path


def read_fragment(path: Optional[str]) -> str:
    """Read a pre-authored HTML fragment verbatim; a missing file yields ""."""
    if not path:
        return ""
    if not os.path.exists(path):
        logger.warning("Fragment file not found, skipping: %s", path)
        return ""
    with open(path, "r", encoding="utf-8") as f:
        return f.read()
