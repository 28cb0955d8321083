"""Reading existing pages and writing generated ones under the static root"""

import time
import uuid
from pathlib import Path

from vibeforge.config import GENERATED_DIRNAME
from vibeforge.logger import get_logger
from vibeforge.paths import page_location

logger = get_logger(__name__)


def load_page(root: Path, relative: str) -> str:
    """Return the page's text, or an empty string if it cannot be read"""
    location = page_location(root, relative)
    if location is None:
        logger.warning(f"Page {relative!r} is not a path under {root}, ignoring it")
        return ""

    try:
        with open(location, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, ValueError) as e:
        logger.debug(f"No prior content for {relative}: {e}")
        return ""


def generated_filename() -> str:
    """Root-relative name for a new page: timestamp plus a random token"""
    timestamp = int(time.time() * 1000)
    token = uuid.uuid4().hex[:8]
    return f"{GENERATED_DIRNAME}/page-{timestamp}-{token}.html"


def persist_page(root: Path, html: str) -> str:
    """Write html to a freshly named file under generated/ and return its name"""
    (root / GENERATED_DIRNAME).mkdir(parents=True, exist_ok=True)

    filename = generated_filename()
    path = root / filename
    # "x" fails instead of overwriting if the name is somehow taken
    f = open(path, "x", encoding="utf-8")
    try:
        with f:
            f.write(html)
    except Exception:
        # a half-written page must not be left behind
        path.unlink(missing_ok=True)
        raise

    logger.info(f"Wrote generated page {filename} ({len(html)} chars)")
    return filename
