"""Subtitle response formatters (WebVTT and SRT).

WHY: Workers AI models return their own WebVTT document, so VTT output is a
pass-through. None of them return SRT, and the gateway does not write
timing files itself.

RULES:
- vtt never fails: a missing provider document becomes an empty WebVTT file
- srt always raises UnsupportedFormatError
"""

from __future__ import annotations

from typing import AbstractSet

from whisper_gateway.core.capabilities import Granularity, ModelCapabilities
from whisper_gateway.core.ir import CanonicalTranscription
from whisper_gateway.errors import UnsupportedFormatError
from whisper_gateway.formatters.base import BaseFormatter, FormatterOutput

EMPTY_VTT = "WEBVTT\n\n"


class VTTFormatter(BaseFormatter):
    """Formatter for response_format=vtt."""

    @property
    def name(self) -> str:
        return "WebVTT"

    def format(
        self,
        transcription: CanonicalTranscription,
        granularities: AbstractSet[Granularity],
        capabilities: ModelCapabilities,
    ) -> FormatterOutput:
        vtt = transcription.vtt if transcription.vtt is not None else EMPTY_VTT
        return FormatterOutput(content=vtt, media_type="text/vtt")


class SRTFormatter(BaseFormatter):
    """Formatter for response_format=srt; no provider emits SRT.

    RULES:
    - No shipped capability record lists srt, so render() rejects it first
    - This formatter is reached only when a capability record claims srt,
      and it still raises UnsupportedFormatError
    """

    @property
    def name(self) -> str:
        return "SubRip"

    def format(
        self,
        transcription: CanonicalTranscription,
        granularities: AbstractSet[Granularity],
        capabilities: ModelCapabilities,
    ) -> FormatterOutput:
        raise UnsupportedFormatError()
