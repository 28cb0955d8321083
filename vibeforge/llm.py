"""
LLM module for handling AI model interactions
"""

import re
from typing import Any, Dict, Optional, Protocol

import openai

from vibeforge.config import Settings
from vibeforge.logger import get_logger
from vibeforge.models import ModelRequest
from vibeforge.prompt import EMPTY_DOCUMENT, system_prompt, user_prompt

logger = get_logger(__name__)

_PLACEHOLDER = re.compile(r"\{(LABEL|FILE|QUERY)\}")


def build_request(prior: str, instruction: str, label: str) -> ModelRequest:
    """Build the model prompt from the current document and the user's request"""
    values = {
        "LABEL": label,
        "FILE": prior or EMPTY_DOCUMENT,
        "QUERY": instruction,
    }
    # Single pass, so braces inside the HTML or the request are left alone
    formatted = _PLACEHOLDER.sub(lambda m: values[m.group(1)], user_prompt)

    return ModelRequest(instructions=system_prompt, user_input=formatted, label=label)


class ModelClient(Protocol):
    async def submit(self, request: ModelRequest) -> str: ...


class OpenAIModelClient:
    """ModelClient backed by the OpenAI Responses API"""

    def __init__(self, settings: Settings, client: Optional[Any] = None):
        self.model = settings.openai_model
        self.tools = list(settings.model_tools)
        self.client = client or openai.AsyncOpenAI(
            api_key=settings.openai_api_key,
            base_url=settings.openai_base_url,
            timeout=settings.model_timeout,
            max_retries=0,
        )

    def request_kwargs(self, request: ModelRequest) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {"model": self.model, "input": request.to_input()}
        if self.tools:
            kwargs["tools"] = [{"type": tool} for tool in self.tools]
            kwargs["tool_choice"] = "auto"
        return kwargs

    async def submit(self, request: ModelRequest) -> str:
        logger.info(
            f"Calling model {self.model} for {request.label}, "
            f"prompt length: {len(request.user_input)}"
        )
        response = await self.client.responses.create(**self.request_kwargs(request))

        text = getattr(response, "output_text", None) or ""
        preview = text[:100].replace("\n", " ").strip()
        logger.info(f"Model response: length {len(text)}, preview: {preview}")
        return text
