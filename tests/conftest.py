"""Shared test fixtures."""

from pathlib import Path
from typing import List, Optional

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from vibeforge.config import Settings
from vibeforge.main import create_app
from vibeforge.models import ModelRequest

MINIMAL_HTML = "<!DOCTYPE html><html><body>ok</body></html>"


class FakeModelClient:
    """Model client returning canned text and recording what it was sent."""

    def __init__(self, output: str = MINIMAL_HTML, error: Optional[Exception] = None):
        self.output = output
        self.error = error
        self.requests: List[ModelRequest] = []

    async def submit(self, request: ModelRequest) -> str:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.output


@pytest.fixture
def public_dir(tmp_path: Path) -> Path:
    """Create the static root with a playground page."""
    public = tmp_path / "public"
    public.mkdir()
    (public / "playground.html").write_text(
        "<!DOCTYPE html><html><body>playground</body></html>", encoding="utf-8"
    )
    return public


@pytest.fixture
def settings(public_dir: Path) -> Settings:
    return Settings(openai_api_key="test-key", public_dir=public_dir)


@pytest.fixture
def model_client() -> FakeModelClient:
    return FakeModelClient()


@pytest.fixture
def app(settings: Settings, model_client: FakeModelClient) -> FastAPI:
    return create_app(settings, model_client)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
