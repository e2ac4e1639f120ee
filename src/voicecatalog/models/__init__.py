"""Domain models for the voice catalog."""

from voicecatalog.models.catalog import (
    CatalogDocument,
    Identifier,
    LanguageEntry,
    LanguageSummary,
    VoiceEntry,
    VoiceSummary,
    iter_voice_entries,
)
from voicecatalog.models.results import AudioResult, CatalogLoadResult, FailureKind

__all__ = [
    "CatalogDocument",
    "Identifier",
    "LanguageEntry",
    "LanguageSummary",
    "VoiceEntry",
    "VoiceSummary",
    "iter_voice_entries",
    "AudioResult",
    "CatalogLoadResult",
    "FailureKind",
]
