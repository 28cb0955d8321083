import re
from typing import Optional

from vibeforge.errors import EmptyResponseError, MarkdownFenceError, NotHtmlDocumentError

DOCTYPE_PATTERN = re.compile(r"^<!DOCTYPE html>", re.IGNORECASE)
MARKDOWN_FENCE = "```"


def validate_html(output: Optional[str]) -> str:
    """Check that model output is a bare, complete HTML document and return it trimmed"""
    html = (output or "").strip()

    if not html:
        raise EmptyResponseError()

    if not DOCTYPE_PATTERN.match(html) or "<html" not in html.lower():
        raise NotHtmlDocumentError()

    if MARKDOWN_FENCE in html:
        raise MarkdownFenceError()

    return html
