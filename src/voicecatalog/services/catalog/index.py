"""Queries over an in-memory catalog document.

All queries are linear scans in the document's own iteration order.
When a language name or voice name appears more than once, the first
occurrence wins and later ones are unreachable through these queries.

Malformed input never raises: an absent or non-mapping document, or an
empty search key, yields an empty list (or None for single lookups).
"""

from collections.abc import Mapping
from typing import Any, Iterator, Optional

from voicecatalog.lib.diagnostics import DiagnosticSink, resolve_sink
from voicecatalog.models.catalog import (
    LanguageEntry,
    LanguageSummary,
    VoiceSummary,
    iter_voice_entries,
)


def _same_name(candidate: Any, wanted: Any) -> bool:
    # Exact match: 1 must not match True or 1.0.
    return type(candidate) is type(wanted) and candidate == wanted


def _iter_languages(document: Any) -> Iterator[LanguageEntry]:
    for raw in document.values():
        yield LanguageEntry.from_raw(raw)


def list_languages(document: Any) -> list[LanguageSummary]:
    """List every language in the catalog.

    Entries are not filtered: one summary per document entry, with
    missing fields left as None.
    """
    if not isinstance(document, Mapping):
        return []

    return [LanguageSummary.from_entry(lang) for lang in _iter_languages(document)]


def list_voices(
    document: Any,
    language_name: Optional[str],
    diagnostics: Optional[DiagnosticSink] = None,
) -> list[VoiceSummary]:
    """List the voices of the first language named ``language_name``.

    Name matching is exact and case-sensitive. An unknown language, or a
    language without a ``voices`` field, reports a warning and yields [].
    """
    if not isinstance(document, Mapping) or not language_name:
        return []

    match = next(
        (lang for lang in _iter_languages(document) if _same_name(lang.name, language_name)),
        None,
    )

    if match is None or not match.has_voices:
        resolve_sink(diagnostics).warning(f"No voices found for language: {language_name}")
        return []

    return [VoiceSummary.from_entry(voice) for voice in match.voices]


def find_voice_by_name(document: Any, voice_name: Optional[str]) -> Optional[VoiceSummary]:
    """Find the first voice named ``voice_name`` anywhere in the catalog.

    Languages are scanned in document order, voices in their own order;
    the scan stops at the first match. Returns None when nothing matches.
    """
    if not isinstance(document, Mapping) or not voice_name:
        return None

    for raw in document.values():
        voices = iter_voice_entries(raw)
        if voices is None:
            continue
        for voice in voices:
            if _same_name(voice.voice_name, voice_name):
                return VoiceSummary.from_entry(voice)

    return None


class CatalogIndex:
    """A catalog document bound to a diagnostic sink.

    Holds a reference to the caller's document and never copies or
    mutates it, so an index can be shared across concurrent tasks.

    Example:
        >>> index = CatalogIndex(result.document)
        >>> [lang.name for lang in index.languages()]
        ['English', 'Spanish']
        >>> index.voice("Amy").voice_id
        42
    """

    def __init__(self, document: Any, diagnostics: Optional[DiagnosticSink] = None):
        self.document = document
        self.diagnostics = diagnostics

    def languages(self) -> list[LanguageSummary]:
        return list_languages(self.document)

    def voices(self, language_name: Optional[str]) -> list[VoiceSummary]:
        return list_voices(self.document, language_name, self.diagnostics)

    def voice(self, voice_name: Optional[str]) -> Optional[VoiceSummary]:
        return find_voice_by_name(self.document, voice_name)
