"""Integration tests: catalog load, queries and synthesis through VoiceService."""

import asyncio
import json

import httpx
import pytest

from voicecatalog import VoiceService
from voicecatalog.models.catalog import LanguageSummary, VoiceSummary
from voicecatalog.models.results import FailureKind


CATALOG_URL = "https://voices.example.com/catalog.json"
AUDIO_BYTES = b"ID3fake-mp3-data"


@pytest.fixture
def provider(rich_catalog, make_transport):
    """Stub provider serving the catalog and the synthesis endpoint."""

    def handler(request: httpx.Request) -> httpx.Response:
        if str(request.url) == CATALOG_URL:
            return httpx.Response(200, content=json.dumps(rich_catalog).encode())
        if request.url.path == "/tts/genC.php":
            if request.url.params["VID"] == "500":
                return httpx.Response(500)
            return httpx.Response(200, content=AUDIO_BYTES, headers={"content-type": "audio/mpeg"})
        return httpx.Response(404)

    return make_transport(handler=handler)


class TestVoiceServiceFlow:
    """End-to-end flows."""

    @pytest.mark.asyncio
    async def test_load_query_synthesize(self, provider, synthesis_config, catalog_config, diagnostics, tmp_path):
        transport, seen = provider

        async with httpx.AsyncClient(transport=transport) as client:
            service = VoiceService(synthesis_config, catalog_config, client, diagnostics)

            catalog = await service.load_catalog(CATALOG_URL)
            assert catalog.success

            languages = service.languages(catalog.document)
            assert LanguageSummary(name="Spanish", language_id="2") in languages

            voices = service.voices(catalog.document, "Spanish")
            assert [v.name for v in voices] == ["Lucia", "Amy"]

            audio = await service.synthesize(catalog.document, "Lucia", "Hola, ¿qué tal?")

        assert audio.success
        assert audio.payload == AUDIO_BYTES
        assert audio.save(tmp_path / "lucia.mp3").read_bytes() == AUDIO_BYTES

        synth_request = seen[-1]
        assert synth_request.url.params["EID"] == "4"
        assert synth_request.url.params["VID"] == "7"
        assert synth_request.url.params["TXT"] == "Hola, ¿qué tal?"
        assert synth_request.url.params["ACC"] == "9066743"
        assert synth_request.url.params["SceneID"] == "2770536"
        assert synth_request.url.params["EXT"] == "mp3"
        assert diagnostics.records == []

    @pytest.mark.asyncio
    async def test_synthesize_uses_first_voice_match(self, provider, synthesis_config, catalog_config, rich_catalog):
        transport, seen = provider

        async with httpx.AsyncClient(transport=transport) as client:
            service = VoiceService(synthesis_config, catalog_config, client)
            await service.synthesize(rich_catalog, "Amy", "hi")

        assert seen[-1].url.params["VID"] == "42"

    @pytest.mark.asyncio
    async def test_unknown_voice_makes_no_request(self, provider, synthesis_config, catalog_config, rich_catalog, diagnostics):
        transport, seen = provider

        async with httpx.AsyncClient(transport=transport) as client:
            service = VoiceService(synthesis_config, catalog_config, client, diagnostics)
            result = await service.synthesize(rich_catalog, "Nobody", "hi")

        assert not result.success
        assert result.failure == FailureKind.LOOKUP
        assert seen == []
        assert diagnostics.warnings == ["Voice not found: Nobody"]

    @pytest.mark.asyncio
    async def test_synthesis_failure_is_returned(self, provider, synthesis_config, catalog_config, diagnostics):
        transport, _ = provider
        document = {"x": {"name": "Test", "voices": {"v": {"voice_name": "Broken", "engine_id": 1, "language_id": 1, "voice_id": 500}}}}

        async with httpx.AsyncClient(transport=transport) as client:
            service = VoiceService(synthesis_config, catalog_config, client, diagnostics)
            result = await service.synthesize(document, "Broken", "hi")

        assert result.failure == FailureKind.TRANSPORT
        assert result.status_code == 500
        assert diagnostics.errors == ["Audio generation failed"]

    @pytest.mark.asyncio
    async def test_failed_load_then_queries_are_empty(self, provider, synthesis_config, catalog_config, diagnostics):
        """A failed load is explicit; queries over its absent document are empty."""
        transport, _ = provider

        async with httpx.AsyncClient(transport=transport) as client:
            service = VoiceService(synthesis_config, catalog_config, client, diagnostics)
            catalog = await service.load_catalog("https://voices.example.com/missing.json")

        assert not catalog.success
        assert catalog.failure == FailureKind.TRANSPORT
        assert service.languages(catalog.document) == []
        assert service.voices(catalog.document, "English") == []
        assert service.voice(catalog.document, "Amy") is None

    def test_build_url_from_voice(self, synthesis_config, catalog_config):
        service = VoiceService(synthesis_config, catalog_config)
        voice = VoiceSummary(name="Amy", gender="F", engine_id=9, language_id=1, voice_id=42)

        url = service.build_url(voice, "hello world")

        assert url.endswith("?EID=9&LID=1&VID=42&TXT=hello+world&ACC=9066743&SceneID=2770536&EXT=mp3")

    @pytest.mark.asyncio
    async def test_concurrent_calls_share_document(self, provider, synthesis_config, catalog_config, rich_catalog):
        """Concurrent syntheses over one document need no coordination."""
        transport, seen = provider
        snapshot = json.dumps(rich_catalog)

        async with httpx.AsyncClient(transport=transport) as client:
            service = VoiceService(synthesis_config, catalog_config, client)
            results = await asyncio.gather(
                service.synthesize(rich_catalog, "Amy", "one"),
                service.synthesize(rich_catalog, "Brian", "two"),
                service.synthesize(rich_catalog, "Lucia", "three"),
            )

        assert all(r.success for r in results)
        assert {r.url.split("VID=")[1].split("&")[0] for r in results} == {"42", "43", "7"}
        assert json.dumps(rich_catalog) == snapshot
        assert len(seen) == 3
