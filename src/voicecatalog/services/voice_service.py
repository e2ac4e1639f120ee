"""High-level entry point combining catalog queries and synthesis.

Typical use from a UI:

    service = VoiceService()
    catalog = await service.load_catalog(CATALOG_URL)
    if catalog.success:
        names = [lang.name for lang in service.languages(catalog.document)]
        voices = service.voices(catalog.document, "English")
        audio = await service.synthesize(catalog.document, "Amy", "Hello!")
"""

import logging
from pathlib import Path
from typing import Any, Optional

import httpx

from voicecatalog.lib.config import CatalogConfig, SynthesisConfig, get_synthesis_config
from voicecatalog.lib.diagnostics import DiagnosticSink, resolve_sink
from voicecatalog.models.catalog import LanguageSummary, VoiceSummary
from voicecatalog.models.results import AudioResult, CatalogLoadResult, FailureKind
from voicecatalog.services.catalog.fetcher import CatalogFetcher
from voicecatalog.services.catalog.index import (
    find_voice_by_name,
    list_languages,
    list_voices,
)
from voicecatalog.services.synthesis.audio_fetcher import AudioFetcher
from voicecatalog.services.synthesis.request_builder import build_tts_url

logger = logging.getLogger(__name__)


class VoiceService:
    """Facade over CatalogFetcher, the catalog queries and AudioFetcher.

    Holds no catalog state: every query takes the document explicitly,
    so one service can serve several catalogs concurrently.
    """

    def __init__(
        self,
        synthesis_config: SynthesisConfig | None = None,
        catalog_config: CatalogConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
        diagnostics: DiagnosticSink | None = None,
    ):
        self.synthesis_config = synthesis_config or get_synthesis_config()
        self.diagnostics = resolve_sink(diagnostics)
        self.catalog_fetcher = CatalogFetcher(catalog_config, http_client, self.diagnostics)
        self.audio_fetcher = AudioFetcher(self.synthesis_config, http_client, self.diagnostics)

    async def load_catalog(self, location: str | Path) -> CatalogLoadResult:
        return await self.catalog_fetcher.load(location)

    def languages(self, document: Any) -> list[LanguageSummary]:
        return list_languages(document)

    def voices(self, document: Any, language_name: Optional[str]) -> list[VoiceSummary]:
        return list_voices(document, language_name, self.diagnostics)

    def voice(self, document: Any, voice_name: Optional[str]) -> Optional[VoiceSummary]:
        return find_voice_by_name(document, voice_name)

    def build_url(self, voice: VoiceSummary, text: Any) -> str:
        return build_tts_url(
            voice.engine_id,
            voice.language_id,
            voice.voice_id,
            text,
            self.synthesis_config,
        )

    async def synthesize(self, document: Any, voice_name: Optional[str], text: Any) -> AudioResult:
        """Resolve ``voice_name`` in the catalog and fetch its audio.

        An unknown voice returns a LOOKUP failure without any request.
        """
        voice = find_voice_by_name(document, voice_name)
        if voice is None:
            message = f"Voice not found: {voice_name}"
            self.diagnostics.warning(message)
            return AudioResult.error(FailureKind.LOOKUP, message)

        logger.debug(f"Synthesizing with voice {voice.name} (VID={voice.voice_id})")
        return await self.audio_fetcher.fetch_voice_audio(voice, text)
