"""Audio retrieval from the synthesis endpoint.

One GET per call against the URL produced by build_tts_url. The payload
is returned as raw bytes; playback and storage are up to the caller.
"""

import logging
from typing import Any

import httpx

from voicecatalog.lib.config import SynthesisConfig, get_synthesis_config
from voicecatalog.lib.diagnostics import DiagnosticSink, resolve_sink
from voicecatalog.lib.exceptions import TransportError
from voicecatalog.models.catalog import VoiceSummary
from voicecatalog.models.results import AudioResult, FailureKind
from voicecatalog.services.http import http_get
from voicecatalog.services.synthesis.request_builder import build_tts_url

logger = logging.getLogger(__name__)


class AudioFetcher:
    """Fetches synthesized audio.

    Never raises to the caller: transport failures are reported to the
    diagnostic sink and returned as ``AudioResult(success=False)``.

    Example:
        >>> fetcher = AudioFetcher()
        >>> result = await fetcher.fetch_audio(9, 1, 42, "hello world")
        >>> if result.success:
        ...     result.save("hello.mp3")
    """

    def __init__(
        self,
        config: SynthesisConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
        diagnostics: DiagnosticSink | None = None,
    ):
        """Initialize the fetcher.

        Raises:
            ConfigError: If the configured endpoint is not an http(s) URL
        """
        self.config = config or get_synthesis_config()
        self.config.validate_endpoint()
        self.http_client = http_client
        self.diagnostics = resolve_sink(diagnostics)

    async def fetch_audio(
        self,
        engine_id: Any,
        language_id: Any,
        voice_id: Any,
        text: Any,
    ) -> AudioResult:
        """Request synthesized audio for ``text``.

        Args:
            engine_id: Engine identifier (EID)
            language_id: Language identifier (LID)
            voice_id: Voice identifier (VID)
            text: Text to speak, sent verbatim

        Returns:
            AudioResult with the payload, or the failure details
        """
        url = build_tts_url(engine_id, language_id, voice_id, text, self.config)

        try:
            response = await http_get(
                url,
                timeout=self.config.timeout_seconds,
                client=self.http_client,
            )
        except TransportError as e:
            self.diagnostics.error("Audio generation failed", e)
            return AudioResult.error(
                FailureKind.TRANSPORT,
                e.message,
                url=url,
                status_code=e.status_code,
            )
        except Exception as e:
            logger.error(f"Unexpected audio fetch error: {e}", exc_info=True)
            self.diagnostics.error("Audio generation failed", e)
            return AudioResult.error(FailureKind.TRANSPORT, str(e), url=url)

        content_type = response.headers.get("content-type") or self.config.content_type
        logger.debug(f"Audio fetched: {len(response.content)} bytes ({content_type})")
        return AudioResult.ok(
            response.content,
            url=url,
            content_type=content_type,
            status_code=response.status_code,
        )

    async def fetch_voice_audio(self, voice: VoiceSummary, text: Any) -> AudioResult:
        """Request audio using the identifiers of a catalog voice."""
        return await self.fetch_audio(voice.engine_id, voice.language_id, voice.voice_id, text)
