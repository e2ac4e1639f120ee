"""Result types for operations that touch the network.

Fetchers never raise to their caller. They return one of these
results, so "the catalog failed to load" is always distinguishable from
"the catalog loaded but is empty".
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Mapping, Optional


class FailureKind(str, Enum):
    """Why an operation produced no data."""

    TRANSPORT = "TRANSPORT"
    PARSE = "PARSE"
    LOOKUP = "LOOKUP"


@dataclass
class CatalogLoadResult:
    """Result of loading a catalog document.

    Attributes:
        success: Whether a document was loaded
        location: URL or path that was requested
        document: Parsed catalog (if success)
        failure: Failure category (if failed)
        error_message: Error description (if failed)
    """
    success: bool
    location: str
    document: Optional[Mapping[str, Any]] = None
    failure: Optional[FailureKind] = None
    error_message: Optional[str] = None

    @classmethod
    def ok(cls, document: Mapping[str, Any], location: str) -> "CatalogLoadResult":
        return cls(success=True, location=location, document=document)

    @classmethod
    def error(cls, kind: FailureKind, message: str, location: str) -> "CatalogLoadResult":
        return cls(success=False, location=location, failure=kind, error_message=message)


@dataclass
class AudioResult:
    """Result of a synthesis request.

    Attributes:
        success: Whether audio was retrieved
        url: Synthesis URL that was (or would have been) requested
        payload: Raw audio bytes (if success)
        content_type: MIME type of the payload (if success)
        status_code: HTTP status, when a response was received
        failure: Failure category (if failed)
        error_message: Error description (if failed)
    """
    success: bool
    url: str = ""
    payload: Optional[bytes] = None
    content_type: Optional[str] = None
    status_code: Optional[int] = None
    failure: Optional[FailureKind] = None
    error_message: Optional[str] = None

    @classmethod
    def ok(
        cls,
        payload: bytes,
        url: str,
        content_type: str,
        status_code: int = 200,
    ) -> "AudioResult":
        return cls(
            success=True,
            url=url,
            payload=payload,
            content_type=content_type,
            status_code=status_code,
        )

    @classmethod
    def error(
        cls,
        kind: FailureKind,
        message: str,
        url: str = "",
        status_code: Optional[int] = None,
    ) -> "AudioResult":
        return cls(
            success=False,
            url=url,
            status_code=status_code,
            failure=kind,
            error_message=message,
        )

    def save(self, path: Path | str) -> Path:
        """Write the audio payload to ``path``.

        Parent directories are created as needed.

        Returns:
            The path written

        Raises:
            ValueError: If this result holds no audio
        """
        if not self.success or self.payload is None:
            raise ValueError(f"No audio to save: {self.error_message or 'empty result'}")

        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(self.payload)
        return target
