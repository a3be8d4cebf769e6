"""Plain text response formatter.

RULES:
- Body is the transcription text, unchanged
- Media type: "text/plain"
"""

from __future__ import annotations

from typing import AbstractSet

from whisper_gateway.core.capabilities import Granularity, ModelCapabilities
from whisper_gateway.core.ir import CanonicalTranscription
from whisper_gateway.formatters.base import BaseFormatter, FormatterOutput


class PlainTextFormatter(BaseFormatter):
    """Formatter for response_format=text."""

    @property
    def name(self) -> str:
        return "Plain Text"

    def format(
        self,
        transcription: CanonicalTranscription,
        granularities: AbstractSet[Granularity],
        capabilities: ModelCapabilities,
    ) -> FormatterOutput:
        return FormatterOutput(content=transcription.text, media_type="text/plain")
