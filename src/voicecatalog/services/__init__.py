"""Service layer: catalog access, synthesis and the combined facade."""

from voicecatalog.services.catalog import (
    CatalogFetcher,
    CatalogIndex,
    find_voice_by_name,
    list_languages,
    list_voices,
)
from voicecatalog.services.synthesis import AudioFetcher, build_tts_url
from voicecatalog.services.voice_service import VoiceService

__all__ = [
    "CatalogFetcher",
    "CatalogIndex",
    "find_voice_by_name",
    "list_languages",
    "list_voices",
    "AudioFetcher",
    "build_tts_url",
    "VoiceService",
]
