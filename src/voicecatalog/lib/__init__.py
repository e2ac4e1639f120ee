"""Shared utilities and configuration."""

from voicecatalog.lib.config import (
    CatalogConfig,
    SynthesisConfig,
    get_catalog_config,
    get_synthesis_config,
    reset_all_configs,
)
from voicecatalog.lib.diagnostics import (
    DiagnosticSink,
    LoggingDiagnostics,
    RecordingDiagnostics,
)
from voicecatalog.lib.exceptions import (
    VoiceCatalogError,
    TransportError,
    ParseError,
    ConfigError,
)

__all__ = [
    "CatalogConfig",
    "SynthesisConfig",
    "get_catalog_config",
    "get_synthesis_config",
    "reset_all_configs",
    "DiagnosticSink",
    "LoggingDiagnostics",
    "RecordingDiagnostics",
    "VoiceCatalogError",
    "TransportError",
    "ParseError",
    "ConfigError",
]
