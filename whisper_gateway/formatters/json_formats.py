"""JSON and verbose JSON response formatters.

WHY: "json" is the OpenAI default and carries only the text. "verbose_json"
adds language, duration, and the segment and word timing the client asked
for. Both must be deterministic so identical inputs give identical bytes.

HOW: build_verbose_body() assembles the verbose document as an ordered
dict; dump_json() serializes it compactly without ASCII escaping.

RULES:
- verbose_json requires both language and duration
- "segments" is present only if "segment" was requested; "words" only if
  "word" was requested. Absent keys are omitted, never null
- A requested collection the provider never reported renders as []
- "json" is {"text"} unless the model's json_includes_timing flag is set,
  timing was requested, and language/duration are both available
"""

from __future__ import annotations

import json
from typing import AbstractSet, Any, Dict, List

from whisper_gateway.core.capabilities import Granularity, ModelCapabilities
from whisper_gateway.core.ir import CanonicalTranscription, Segment, Word
from whisper_gateway.errors import MissingTranscriptionMetadataError
from whisper_gateway.formatters.base import BaseFormatter, FormatterOutput

JSON_MEDIA_TYPE = "application/json"


def dump_json(body: Dict[str, Any]) -> str:
    return json.dumps(body, ensure_ascii=False, separators=(",", ":"))


def _segment_to_dict(segment: Segment) -> Dict[str, Any]:
    return {
        "id": segment.index,
        "seek": segment.seek_offset,
        "start": segment.start,
        "end": segment.end,
        "text": segment.text,
        "tokens": list(segment.token_ids),
        "temperature": segment.temperature,
        "avg_logprob": segment.avg_logprob,
        "compression_ratio": segment.compression_ratio,
        "no_speech_prob": segment.no_speech_prob,
    }


def _word_to_dict(word: Word) -> Dict[str, Any]:
    return {"word": word.text, "start": word.start, "end": word.end}


def has_transcription_info(transcription: CanonicalTranscription) -> bool:
    return transcription.language is not None and transcription.duration is not None


def build_verbose_body(
    transcription: CanonicalTranscription,
    granularities: AbstractSet[Granularity],
) -> Dict[str, Any]:
    """Assemble the verbose_json document.

    Raises:
        MissingTranscriptionMetadataError: if language or duration is absent.
    """
    if not has_transcription_info(transcription):
        raise MissingTranscriptionMetadataError()

    body: Dict[str, Any] = {
        "language": transcription.language,
        "duration": transcription.duration,
        "text": transcription.text,
    }
    if Granularity.SEGMENT in granularities:
        segments: List[Segment] = transcription.segments or []
        body["segments"] = [_segment_to_dict(s) for s in segments]
    if Granularity.WORD in granularities:
        words: List[Word] = transcription.words or []
        body["words"] = [_word_to_dict(w) for w in words]
    return body


class JSONFormatter(BaseFormatter):
    """Formatter for response_format=json."""

    @property
    def name(self) -> str:
        return "JSON"

    def format(
        self,
        transcription: CanonicalTranscription,
        granularities: AbstractSet[Granularity],
        capabilities: ModelCapabilities,
    ) -> FormatterOutput:
        if (
            capabilities.json_includes_timing
            and granularities
            and has_transcription_info(transcription)
        ):
            body = build_verbose_body(transcription, granularities)
        else:
            body = {"text": transcription.text}
        return FormatterOutput(content=dump_json(body), media_type=JSON_MEDIA_TYPE)


class VerboseJSONFormatter(BaseFormatter):
    """Formatter for response_format=verbose_json."""

    @property
    def name(self) -> str:
        return "Verbose JSON"

    def format(
        self,
        transcription: CanonicalTranscription,
        granularities: AbstractSet[Granularity],
        capabilities: ModelCapabilities,
    ) -> FormatterOutput:
        body = build_verbose_body(transcription, granularities)
        return FormatterOutput(content=dump_json(body), media_type=JSON_MEDIA_TYPE)
