"""Configuration management via environment variables and pydantic-settings.

Defaults reproduce the provider's wire contract exactly; environment
variables are optional overrides.
"""

import mimetypes

from pydantic_settings import BaseSettings
from pydantic import Field


DEFAULT_TTS_BASE_URL = "https://cache-a.oddcast.com/tts/genC.php"


class SynthesisConfig(BaseSettings):
    """Configuration for the synthesis endpoint.

    Attributes:
        base_url: Endpoint the synthesis query string is appended to
        account_id: Static account identifier (ACC parameter)
        scene_id: Static scene identifier (SceneID parameter)
        audio_format: Output extension requested from the provider (EXT)
        timeout_seconds: Timeout for a single audio request
    """

    base_url: str = Field(
        default=DEFAULT_TTS_BASE_URL,
        alias="TTS_BASE_URL",
        description="Synthesis endpoint URL",
    )

    account_id: str = Field(
        default="9066743",
        alias="TTS_ACCOUNT_ID",
        description="Account identifier sent as ACC",
    )

    scene_id: str = Field(
        default="2770536",
        alias="TTS_SCENE_ID",
        description="Scene identifier sent as SceneID",
    )

    audio_format: str = Field(
        default="mp3",
        alias="TTS_AUDIO_FORMAT",
        description="Audio extension sent as EXT",
    )

    timeout_seconds: float = Field(
        default=30.0,
        alias="TTS_TIMEOUT_SECONDS",
        description="Timeout for audio requests in seconds",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "populate_by_name": True,
    }

    @property
    def content_type(self) -> str:
        """MIME type matching the configured audio format."""
        guessed, _ = mimetypes.guess_type(f"audio.{self.audio_format}")
        return guessed or "application/octet-stream"

    def validate_endpoint(self) -> None:
        """
        Validate that the endpoint can produce absolute URLs.

        Raises:
            ConfigError: If base_url is empty or not http(s)
        """
        from voicecatalog.lib.exceptions import ConfigError

        if not self.base_url or not self.base_url.startswith(("http://", "https://")):
            raise ConfigError(
                f"Invalid synthesis endpoint '{self.base_url}'. "
                "Set TTS_BASE_URL to an absolute http(s) URL."
            )


class CatalogConfig(BaseSettings):
    """Configuration for catalog loading."""

    timeout_seconds: float = Field(
        default=30.0,
        alias="CATALOG_TIMEOUT_SECONDS",
        description="Timeout for catalog requests in seconds",
    )

    encoding: str = Field(
        default="utf-8",
        alias="CATALOG_ENCODING",
        description="Encoding used when reading a catalog from disk",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "populate_by_name": True,
    }


# Config instances (lazy loaded)
_synthesis_config: SynthesisConfig | None = None
_catalog_config: CatalogConfig | None = None


def get_synthesis_config() -> SynthesisConfig:
    """Get the synthesis configuration instance."""
    global _synthesis_config
    if _synthesis_config is None:
        _synthesis_config = SynthesisConfig()
    return _synthesis_config


def get_catalog_config() -> CatalogConfig:
    """Get the catalog configuration instance."""
    global _catalog_config
    if _catalog_config is None:
        _catalog_config = CatalogConfig()
    return _catalog_config


def reset_all_configs() -> None:
    """Reset all configuration instances (useful for testing)."""
    global _synthesis_config, _catalog_config
    _synthesis_config = None
    _catalog_config = None
