"""Shared pytest fixtures for all test types."""

import json
from typing import Callable

import httpx
import pytest

from voicecatalog.lib.config import CatalogConfig, SynthesisConfig, reset_all_configs
from voicecatalog.lib.diagnostics import RecordingDiagnostics


@pytest.fixture(autouse=True)
def fresh_configs():
    """Drop cached config singletons around every test."""
    reset_all_configs()
    yield
    reset_all_configs()


@pytest.fixture
def sample_catalog() -> dict:
    """Single language, single voice."""
    return {
        "a": {
            "name": "English",
            "language_id": 1,
            "voices": {
                "x": {
                    "voice_name": "Amy",
                    "gender": "F",
                    "engine_id": 9,
                    "language_id": 1,
                    "voice_id": 42,
                },
            },
        },
    }


@pytest.fixture
def rich_catalog() -> dict:
    """Several languages, including duplicates and a language without voices."""
    return {
        "en": {
            "name": "English",
            "language_id": 1,
            "voices": {
                "1": {"voice_name": "Amy", "gender": "F", "engine_id": 9, "language_id": 1, "voice_id": 42},
                "2": {"voice_name": "Brian", "gender": "M", "engine_id": 9, "language_id": 1, "voice_id": 43},
            },
        },
        "es": {
            "name": "Spanish",
            "language_id": "2",
            "voices": {
                "1": {"voice_name": "Lucia", "gender": "F", "engine_id": 4, "language_id": "2", "voice_id": "7"},
                "2": {"voice_name": "Amy", "gender": "F", "engine_id": 4, "language_id": "2", "voice_id": "99"},
            },
        },
        "la": {
            "name": "Latin",
            "language_id": 30,
        },
        "en-dup": {
            "name": "English",
            "language_id": 100,
            "voices": {
                "1": {"voice_name": "Shadowed", "gender": "M", "engine_id": 1, "language_id": 100, "voice_id": 1},
            },
        },
    }


@pytest.fixture
def diagnostics() -> RecordingDiagnostics:
    """In-memory diagnostic sink."""
    return RecordingDiagnostics()


@pytest.fixture
def synthesis_config() -> SynthesisConfig:
    """Synthesis configuration with the wire-contract defaults."""
    return SynthesisConfig()


@pytest.fixture
def catalog_config() -> CatalogConfig:
    return CatalogConfig(timeout_seconds=5)


@pytest.fixture
def make_transport() -> Callable[..., tuple[httpx.MockTransport, list[httpx.Request]]]:
    """Build a MockTransport that records every request it receives.

    Usage:
        transport, seen = make_transport(status_code=200, content=b"...")
        transport, seen = make_transport(handler=my_handler)
    """

    def factory(
        status_code: int = 200,
        content: bytes = b"",
        headers: dict | None = None,
        handler: Callable[[httpx.Request], httpx.Response] | None = None,
    ):
        seen: list[httpx.Request] = []

        def _handle(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            if handler is not None:
                return handler(request)
            return httpx.Response(status_code, content=content, headers=headers)

        return httpx.MockTransport(_handle), seen

    return factory


@pytest.fixture
def catalog_bytes(sample_catalog) -> bytes:
    return json.dumps(sample_catalog).encode("utf-8")
