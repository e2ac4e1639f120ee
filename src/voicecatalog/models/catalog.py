"""Catalog data models.

The catalog arrives as a loosely-typed JSON tree:

    {
        "<language key>": {
            "name": "English",
            "language_id": 1,
            "voices": {
                "<voice key>": {
                    "voice_name": "Amy",
                    "gender": "F",
                    "engine_id": 9,
                    "language_id": 1,
                    "voice_id": 42
                }
            }
        }
    }

Entries are projected into frozen dataclasses without validation or
coercion: a missing field becomes None and every other value passes
through untouched. Callers only ever see the Summary types.
"""

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any, Iterator, Optional, Union

# Opaque provider identifier; the catalog uses both numbers and strings.
Identifier = Union[str, int]

CatalogDocument = Mapping[str, Any]


def _field(raw: Any, key: str) -> Any:
    if isinstance(raw, Mapping):
        return raw.get(key)
    return None


@dataclass(frozen=True)
class VoiceEntry:
    """A voice as stored in the catalog.

    Attributes:
        voice_name: Display name, used for by-name lookup
        gender: Provider gender label (e.g. "F", "M")
        engine_id: Synthesis engine identifier (EID)
        language_id: Language identifier (LID)
        voice_id: Voice identifier (VID)
    """
    voice_name: Optional[str] = None
    gender: Optional[str] = None
    engine_id: Optional[Identifier] = None
    language_id: Optional[Identifier] = None
    voice_id: Optional[Identifier] = None

    @classmethod
    def from_raw(cls, raw: Any) -> "VoiceEntry":
        return cls(
            voice_name=_field(raw, "voice_name"),
            gender=_field(raw, "gender"),
            engine_id=_field(raw, "engine_id"),
            language_id=_field(raw, "language_id"),
            voice_id=_field(raw, "voice_id"),
        )


def iter_voice_entries(raw_language: Any) -> Optional[Iterator[VoiceEntry]]:
    """Lazily project the voices of a raw language entry.

    Returns None when the entry has no usable ``voices`` field, so callers
    can tell "no voices field" from "empty voices".
    """
    raw_voices = _field(raw_language, "voices")
    if isinstance(raw_voices, Mapping):
        values = raw_voices.values()
    elif isinstance(raw_voices, (list, tuple)):
        values = raw_voices
    else:
        return None
    return (VoiceEntry.from_raw(v) for v in values)


@dataclass(frozen=True)
class LanguageEntry:
    """A language as stored in the catalog.

    ``voices`` is None when the raw entry has no usable ``voices`` field.
    An empty tuple means the field was present but held no voices.
    """
    name: Optional[str] = None
    language_id: Optional[Identifier] = None
    voices: Optional[tuple[VoiceEntry, ...]] = None

    @property
    def has_voices(self) -> bool:
        return self.voices is not None

    @classmethod
    def from_raw(cls, raw: Any) -> "LanguageEntry":
        voices = iter_voice_entries(raw)
        if voices is not None:
            voices = tuple(voices)

        return cls(
            name=_field(raw, "name"),
            language_id=_field(raw, "language_id"),
            voices=voices,
        )


@dataclass(frozen=True)
class VoiceSummary:
    """Public view of a voice.

    Same data as VoiceEntry with ``voice_name`` exposed as ``name``.
    """
    name: Optional[str] = None
    gender: Optional[str] = None
    engine_id: Optional[Identifier] = None
    language_id: Optional[Identifier] = None
    voice_id: Optional[Identifier] = None

    @classmethod
    def from_entry(cls, entry: VoiceEntry) -> "VoiceSummary":
        return cls(
            name=entry.voice_name,
            gender=entry.gender,
            engine_id=entry.engine_id,
            language_id=entry.language_id,
            voice_id=entry.voice_id,
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class LanguageSummary:
    """Public view of a language."""
    name: Optional[str] = None
    language_id: Optional[Identifier] = None

    @classmethod
    def from_entry(cls, entry: LanguageEntry) -> "LanguageSummary":
        return cls(name=entry.name, language_id=entry.language_id)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
