"""Synthesis URL construction.

    GET <base_url>?EID=<engine>&LID=<language>&VID=<voice>&TXT=<text>
                  &ACC=<account>&SceneID=<scene>&EXT=<format>

Values are rendered as the provider's web client renders them (None as
``null``, booleans in lower case, whole floats without ``.0``) and
form-urlencoded, so spaces become ``+`` and reserved or non-ASCII
characters are percent-escaped (UTF-8).
"""

from typing import Any
from urllib.parse import urlencode

from voicecatalog.lib.config import SynthesisConfig, get_synthesis_config


def render_value(value: Any) -> str:
    """Render a query value the way the web client does."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_tts_params(
    engine_id: Any,
    language_id: Any,
    voice_id: Any,
    text: Any,
    config: SynthesisConfig | None = None,
) -> dict[str, str]:
    """Query parameters for a synthesis request, in wire order."""
    config = config or get_synthesis_config()
    return {
        "EID": render_value(engine_id),
        "LID": render_value(language_id),
        "VID": render_value(voice_id),
        "TXT": render_value(text),
        "ACC": config.account_id,
        "SceneID": config.scene_id,
        "EXT": config.audio_format,
    }


def build_tts_url(
    engine_id: Any,
    language_id: Any,
    voice_id: Any,
    text: Any,
    config: SynthesisConfig | None = None,
) -> str:
    """Build the full synthesis URL.

    Pure and total: no argument is validated, and identical inputs always
    produce an identical string.

    Example:
        >>> build_tts_url(9, 1, 42, "hello world")
        'https://cache-a.oddcast.com/tts/genC.php?EID=9&LID=1&VID=42&TXT=hello+world&ACC=9066743&SceneID=2770536&EXT=mp3'
    """
    config = config or get_synthesis_config()
    query = urlencode(build_tts_params(engine_id, language_id, voice_id, text, config))
    return f"{config.base_url}?{query}"
