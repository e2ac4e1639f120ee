"""Synthesis URL building and audio retrieval."""

from voicecatalog.services.synthesis.request_builder import build_tts_params, build_tts_url
from voicecatalog.services.synthesis.audio_fetcher import AudioFetcher

__all__ = [
    "build_tts_params",
    "build_tts_url",
    "AudioFetcher",
]
