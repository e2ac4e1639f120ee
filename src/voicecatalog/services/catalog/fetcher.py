"""Catalog loading.

Retrieves the catalog document from a URL or a local JSON file and
parses it. Loading is a single attempt: there are no retries and no
caching between calls.
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Mapping

import httpx

from voicecatalog.lib.config import CatalogConfig, get_catalog_config
from voicecatalog.lib.diagnostics import DiagnosticSink, resolve_sink
from voicecatalog.lib.exceptions import ParseError, TransportError
from voicecatalog.models.results import CatalogLoadResult, FailureKind
from voicecatalog.services.http import http_get, is_remote

logger = logging.getLogger(__name__)


class CatalogFetcher:
    """Loads catalog documents.

    Never raises to the caller: every failure becomes a
    CatalogLoadResult with ``success=False`` and is reported to the
    diagnostic sink.

    Attributes:
        config: Catalog configuration
        http_client: Optional shared client (left open after use)
        diagnostics: Sink receiving load failures

    Example:
        >>> fetcher = CatalogFetcher()
        >>> result = await fetcher.load("https://example.com/voices.json")
        >>> if result.success:
        ...     languages = list_languages(result.document)
    """

    def __init__(
        self,
        config: CatalogConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
        diagnostics: DiagnosticSink | None = None,
    ):
        self.config = config or get_catalog_config()
        self.http_client = http_client
        self.diagnostics = resolve_sink(diagnostics)

    async def load(self, location: str | Path) -> CatalogLoadResult:
        """Retrieve and parse the catalog at ``location``.

        Args:
            location: http(s) URL or filesystem path of a JSON document

        Returns:
            CatalogLoadResult holding the document, or the failure kind
        """
        location = str(location)

        try:
            body = await self._read(location)
            document = self._parse(body, location)
        except TransportError as e:
            self.diagnostics.error(f"Failed to load catalog from {location}", e)
            return CatalogLoadResult.error(FailureKind.TRANSPORT, e.message, location)
        except ParseError as e:
            self.diagnostics.error(f"Invalid catalog at {location}", e)
            return CatalogLoadResult.error(FailureKind.PARSE, e.message, location)
        except Exception as e:
            logger.error(f"Unexpected catalog load error: {e}", exc_info=True)
            self.diagnostics.error(f"Failed to load catalog from {location}", e)
            return CatalogLoadResult.error(FailureKind.TRANSPORT, str(e), location)

        logger.debug(f"Catalog loaded from {location} ({len(document)} languages)")
        return CatalogLoadResult.ok(document, location)

    async def _read(self, location: str) -> bytes | str:
        if is_remote(location):
            response = await http_get(
                location,
                timeout=self.config.timeout_seconds,
                client=self.http_client,
            )
            return response.content

        try:
            return await asyncio.to_thread(
                Path(location).read_text,
                encoding=self.config.encoding,
            )
        except UnicodeDecodeError as e:
            raise ParseError(
                f"Catalog is not valid {self.config.encoding} text",
                location=location,
                original_error=e,
            ) from e
        except OSError as e:
            raise TransportError(
                f"Cannot read catalog file: {e.strerror or e}",
                location=location,
                original_error=e,
            ) from e

    def _parse(self, body: bytes | str, location: str) -> Mapping[str, Any]:
        """
        Decode a JSON catalog body.

        Raises:
            ParseError: If the body is not JSON or not a JSON object
        """
        try:
            data = json.loads(body)
        except ValueError as e:
            raise ParseError(
                f"Catalog is not valid JSON: {e}",
                location=location,
                original_error=e,
            ) from e

        if not isinstance(data, dict):
            raise ParseError(
                f"Catalog must be a JSON object, got {type(data).__name__}",
                location=location,
            )

        return data
