"""Client for a remote text-to-speech voice catalog and synthesis endpoint.

Example:
    >>> from voicecatalog import VoiceService
    >>>
    >>> service = VoiceService()
    >>> catalog = await service.load_catalog("https://example.com/voices.json")
    >>> voices = service.voices(catalog.document, "English")
    >>> audio = await service.synthesize(catalog.document, voices[0].name, "Hello!")
    >>> if audio.success:
    ...     audio.save("hello.mp3")
"""

from voicecatalog.lib.diagnostics import LoggingDiagnostics, RecordingDiagnostics
from voicecatalog.models import (
    AudioResult,
    CatalogLoadResult,
    FailureKind,
    LanguageSummary,
    VoiceSummary,
)
from voicecatalog.services import (
    AudioFetcher,
    CatalogFetcher,
    CatalogIndex,
    VoiceService,
    build_tts_url,
    find_voice_by_name,
    list_languages,
    list_voices,
)

__version__ = "0.1.0"

__all__ = [
    "LoggingDiagnostics",
    "RecordingDiagnostics",
    "AudioResult",
    "CatalogLoadResult",
    "FailureKind",
    "LanguageSummary",
    "VoiceSummary",
    "AudioFetcher",
    "CatalogFetcher",
    "CatalogIndex",
    "VoiceService",
    "build_tts_url",
    "find_voice_by_name",
    "list_languages",
    "list_voices",
]
