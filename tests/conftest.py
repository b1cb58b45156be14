"""Shared pytest fixtures for Logoforge tests."""

from __future__ import annotations

import shutil
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from logoforge.core.config import LogoforgeConfig
from logoforge.core.controller import GenerationContext
from logoforge.core.image_client import GeneratedImage


class FakeImageGenerator:
    """In-memory stand-in for the image-generation collaborator.

    Returns ``result`` or raises ``error``, and records every call so tests
    can assert whether (and how) generation was attempted.
    """

    def __init__(self, result: GeneratedImage | None = None, error: Exception | None = None):
        self.result = result if result is not None else GeneratedImage(b64_json="aGVsbG8=")
        self.error = error
        self.calls: list[dict] = []

    async def generate(self, prompt: str, *, size: str = "1024x1024") -> GeneratedImage:
        self.calls.append({"prompt": prompt, "size": size})
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files.

    Yields:
        Path to temporary directory

    Cleanup:
        Directory is removed after test completes
    """
    temp_path = Path(tempfile.mkdtemp())
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def fake_generator() -> FakeImageGenerator:
    """Create a fake generator returning an inline payload.

    Returns:
        FakeImageGenerator instance
    """
    return FakeImageGenerator()


@pytest.fixture
def generation_context(fake_generator: FakeImageGenerator) -> GenerationContext:
    """Create a generation context around the fake generator.

    Returns:
        GenerationContext with the default output size
    """
    return GenerationContext(generator=fake_generator, image_size="1024x1024")


@pytest.fixture
def test_config(monkeypatch) -> LogoforgeConfig:
    """Create a configuration isolated from the environment and .env files.

    Returns:
        LogoforgeConfig instance for testing
    """
    for name in (
        "LOGOFORGE_API_KEY",
        "LOGOFORGE_IMAGE_MODEL",
        "LOGOFORGE_IMAGE_SIZE",
        "LOGOFORGE_SERVER_PORT",
    ):
        monkeypatch.delenv(name, raising=False)
    return LogoforgeConfig(api_key="sk-test", _env_file=None)


@pytest.fixture
def test_client(fake_generator: FakeImageGenerator) -> Generator[TestClient, None, None]:
    """Create a FastAPI TestClient whose context uses the fake generator.

    The lifespan runs on entering the client; its context is then replaced
    so no request ever reaches the real image API.

    Yields:
        TestClient instance
    """
    from logoforge.api.main import app

    with TestClient(app) as client:
        client.app.state.context = GenerationContext(
            generator=fake_generator, image_size="1024x1024"
        )
        yield client


@pytest.fixture
def sample_form() -> dict:
    """A fully filled-in logo form, keyed by DOM field names.

    Returns:
        Dictionary of form values
    """
    return {
        "organization": "  Nova Labs  ",
        "logoType": "text-icon",
        "industry": "Finance",
        "style": ["minimalist", "geometric"],
        "colors": ["blue"],
        "references": "https://example.com/brand",
        "referenceNotes": "Like the spacing",
        "wishes": "keep it simple",
    }


@pytest.fixture
def make_generator() -> type[FakeImageGenerator]:
    """Expose the fake generator class for tests needing custom results.

    Returns:
        The FakeImageGenerator class
    """
    return FakeImageGenerator
