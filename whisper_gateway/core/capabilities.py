"""Model capability table and request enumerations.

WHY: The supported models differ in what they can return: some only produce
bare text and a VTT document, one also produces language, duration, segment
and word timing. Formatters decide what to emit from these flags instead of
branching on model names.

HOW: ModelName, ResponseFormat and Granularity are str enums shared by the
request schema, adapters and formatters. MODEL_CAPABILITIES maps every
ModelName to a frozen ModelCapabilities record.

RULES:
- Lookup is total over ModelName; unknown models are rejected earlier by
  request validation
- The table is read-only and shared by all requests
- json_includes_timing is kept per model because providers disagree on
  whether "json" may carry timing data
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


class ModelName(str, enum.Enum):
    """Workers AI speech model identifiers accepted by the gateway."""

    WHISPER = "@cf/openai/whisper"
    WHISPER_TINY_EN = "@cf/openai/whisper-tiny-en"
    WHISPER_LARGE_V3_TURBO = "@cf/openai/whisper-large-v3-turbo"


class ResponseFormat(str, enum.Enum):
    """OpenAI transcription response formats."""

    JSON = "json"
    TEXT = "text"
    SRT = "srt"
    VERBOSE_JSON = "verbose_json"
    VTT = "vtt"


class Granularity(str, enum.Enum):
    """Timing detail levels a client may request."""

    WORD = "word"
    SEGMENT = "segment"


@dataclass(frozen=True)
class ModelCapabilities:
    """What a model can honor natively.

    RULES:
    - response_formats: formats the renderer may produce for this model
    - word_timestamps / segment_timestamps: timing data the provider reports
    - accepts_prompt: provider takes language and initial prompt conditioning
    - json_includes_timing: "json" renders the verbose shape when timing
      data is requested and available
    """

    model: ModelName
    response_formats: frozenset[ResponseFormat]
    word_timestamps: bool = False
    segment_timestamps: bool = False
    accepts_prompt: bool = False
    json_includes_timing: bool = False


_TEXT_ONLY_FORMATS = frozenset(
    {ResponseFormat.JSON, ResponseFormat.TEXT, ResponseFormat.VTT}
)

MODEL_CAPABILITIES: dict[ModelName, ModelCapabilities] = {
    ModelName.WHISPER: ModelCapabilities(
        model=ModelName.WHISPER,
        response_formats=_TEXT_ONLY_FORMATS,
    ),
    ModelName.WHISPER_TINY_EN: ModelCapabilities(
        model=ModelName.WHISPER_TINY_EN,
        response_formats=_TEXT_ONLY_FORMATS,
    ),
    ModelName.WHISPER_LARGE_V3_TURBO: ModelCapabilities(
        model=ModelName.WHISPER_LARGE_V3_TURBO,
        response_formats=_TEXT_ONLY_FORMATS | {ResponseFormat.VERBOSE_JSON},
        word_timestamps=True,
        segment_timestamps=True,
        accepts_prompt=True,
    ),
}


def get_capabilities(model: ModelName) -> ModelCapabilities:
    """Return the capability record for ``model``."""
    return MODEL_CAPABILITIES[ModelName(model)]
