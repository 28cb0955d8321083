"""Agent turning a free-text request into a new generated page"""

import asyncio
from dataclasses import dataclass
from typing import Optional

from vibeforge import llm
from vibeforge.config import Settings
from vibeforge.errors import BlankPromptError
from vibeforge.logger import get_logger
from vibeforge.paths import resolve_page
from vibeforge.storage import load_page, persist_page
from vibeforge.validation import validate_html

logger = get_logger(__name__)


@dataclass(frozen=True)
class GeneratedDocument:
    """A validated page written under generated/"""

    filename: str
    html: str
    source_page: str


class DocumentSynthesizer:
    """Single-turn editor: one request in, one new page out.

    Holds no per-request state, so one instance serves every request
    concurrently. The only shared resource is the static root, which is
    only ever appended to.
    """

    def __init__(self, settings: Settings, model_client: llm.ModelClient):
        self.settings = settings
        self.model_client = model_client

    async def synthesize(
        self, instruction: Optional[str], current_page: Optional[str] = None
    ) -> GeneratedDocument:
        if not instruction or not instruction.strip():
            raise BlankPromptError()

        root = self.settings.public_dir
        page = resolve_page(current_page, self.settings.default_page)
        logger.info(f"Editing page {page}")

        prior = await asyncio.to_thread(load_page, root, page)
        request = llm.build_request(prior, instruction, page)

        output = await self.model_client.submit(request)
        html = validate_html(output)

        filename = await asyncio.to_thread(persist_page, root, html)
        return GeneratedDocument(filename=filename, html=html, source_page=page)
