import dotenv
import os
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from vibeforge.errors import ConfigurationError

DEFAULT_PAGE = "playground.html"
GENERATED_DIRNAME = "generated"
MAX_BODY_BYTES = 1024 * 1024


class Settings(BaseModel):
    """Process-wide configuration, fixed at startup"""

    model_config = ConfigDict(protected_namespaces=())

    openai_api_key: str
    port: int = 3000
    host: str = "0.0.0.0"
    openai_model: str = "gpt-4o-mini"
    openai_base_url: Optional[str] = None
    model_timeout: Optional[float] = None
    model_tools: List[str] = Field(
        default_factory=lambda: ["web_search_preview", "image_generation"]
    )
    public_dir: Path = Path("public")
    default_page: str = DEFAULT_PAGE
    max_body_bytes: int = MAX_BODY_BYTES

    @property
    def generated_dir(self) -> Path:
        return self.public_dir / GENERATED_DIRNAME


def _parse_tools(raw: Optional[str]) -> Optional[List[str]]:
    if raw is None:
        return None
    return [tool.strip() for tool in raw.split(",") if tool.strip()]


def load_settings() -> Settings:
    """Read settings from the environment (and .env when present)"""
    dotenv.load_dotenv(dotenv.find_dotenv(usecwd=True))

    api_key = os.getenv("OPENAI_API_KEY", "").strip()
    if not api_key:
        raise ConfigurationError("OPENAI_API_KEY environment variable is required.")

    values = {
        "openai_api_key": api_key,
        "host": os.getenv("HOST", "0.0.0.0"),
        "openai_model": os.getenv("OPENAI_MODEL") or "gpt-4o-mini",
        "openai_base_url": os.getenv("OPENAI_BASE_URL") or None,
        "public_dir": Path(os.getenv("PUBLIC_DIR", "public")).resolve(),
    }

    try:
        values["port"] = int(os.getenv("PORT", "3000"))
        values["max_body_bytes"] = int(os.getenv("MAX_BODY_BYTES", str(MAX_BODY_BYTES)))
        timeout = os.getenv("MODEL_TIMEOUT")
        values["model_timeout"] = float(timeout) if timeout else None
    except ValueError as e:
        raise ConfigurationError(f"Invalid numeric setting: {e}") from e

    tools = _parse_tools(os.getenv("OPENAI_TOOLS"))
    if tools is not None:
        values["model_tools"] = tools

    return Settings(**values)
