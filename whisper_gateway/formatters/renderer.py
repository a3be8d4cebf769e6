"""Format renderer — the response-format state machine.

WHY: Whether a format can be produced depends on both the format and the
model. Keeping that decision in one function, driven by the capability
table, replaces per-model copies of the same format switch.

HOW: render() looks up the formatter for the format, checks the model's
capability record, then delegates to the formatter.

RULES:
- Unknown format value → InvalidResponseFormatError
- Format not in the model's response_formats → UnsupportedFormatError
- Everything else is decided by the formatter itself
"""

from __future__ import annotations

from typing import AbstractSet

from whisper_gateway.core.capabilities import (
    Granularity,
    ModelCapabilities,
    ResponseFormat,
)
from whisper_gateway.core.ir import CanonicalTranscription
from whisper_gateway.errors import InvalidResponseFormatError, UnsupportedFormatError
from whisper_gateway.formatters import FORMATTERS
from whisper_gateway.formatters.base import FormatterOutput


def render(
    transcription: CanonicalTranscription,
    response_format: ResponseFormat,
    granularities: AbstractSet[Granularity],
    capabilities: ModelCapabilities,
) -> FormatterOutput:
    """Render ``transcription`` as ``response_format``.

    Args:
        transcription: The normalized transcription.
        response_format: The format the client asked for.
        granularities: Timing detail levels the client asked for.
        capabilities: Capability record of the model that produced the result.

    Returns:
        The rendered body and its MIME type.

    Raises:
        InvalidResponseFormatError: no formatter handles ``response_format``.
        UnsupportedFormatError: the model cannot produce ``response_format``.
        MissingTranscriptionMetadataError: verbose output lacks language/duration.
    """
    formatter_cls = FORMATTERS.get(response_format)
    if formatter_cls is None:
        raise InvalidResponseFormatError()

    if response_format not in capabilities.response_formats:
        raise UnsupportedFormatError()

    return formatter_cls().format(transcription, granularities, capabilities)
