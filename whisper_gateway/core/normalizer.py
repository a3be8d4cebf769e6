"""Raw provider result to CanonicalTranscription conversion.

WHY: Provider outputs are partially populated: segments may lack confidence
metadata, words may lack timing, and audio metadata may be missing entirely.
Formatters must never see half-filled entries or probe raw fields, so all
filtering happens here, once.

HOW: normalize() dispatches on the raw result's type to one total
conversion function per provider output shape. Segments and words pass
through explicit presence filters; incomplete entries are dropped, never
emitted with placeholder values.

RULES:
- A segment is kept only if start, end, text, temperature, avg_logprob,
  compression_ratio and no_speech_prob are all present (not None)
- A word is kept only if start, end and word are present (not None);
  a boundary of exactly 0 and an empty word are valid values
- Words are collected from every raw segment, kept or dropped
- Segment order follows provider emission order; index counts kept segments
- normalize() never raises for a result that has text
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

from whisper_gateway.api.models import (
    RawProviderResult,
    RawSegment,
    RawWord,
    WhisperOutput,
    WhisperTurboOutput,
)
from whisper_gateway.core.ir import CanonicalTranscription, Segment, Word

# Fields a raw segment must carry to be emitted.
_REQUIRED_SEGMENT_FIELDS = (
    "start",
    "end",
    "text",
    "temperature",
    "avg_logprob",
    "compression_ratio",
    "no_speech_prob",
)


def _is_complete_segment(raw: RawSegment) -> bool:
    return all(getattr(raw, name) is not None for name in _REQUIRED_SEGMENT_FIELDS)


def _to_word(raw: RawWord) -> Optional[Word]:
    """Convert one raw word, or return None if any field is absent."""
    if raw.start is None or raw.end is None or raw.word is None:
        return None
    return Word(text=raw.word, start=float(raw.start), end=float(raw.end))


def _collect_words(raw_words: List[RawWord]) -> List[Word]:
    words = []
    for raw in raw_words:
        word = _to_word(raw)
        if word is not None:
            words.append(word)
    return words


def _normalize_whisper(raw: WhisperOutput) -> CanonicalTranscription:
    """Whisper and whisper-tiny-en: text, flat word list, native VTT."""
    return CanonicalTranscription(
        text=raw.text,
        words=_collect_words(raw.words) if raw.words is not None else None,
        vtt=raw.vtt,
    )


def _normalize_whisper_turbo(raw: WhisperTurboOutput) -> CanonicalTranscription:
    """whisper-large-v3-turbo: audio metadata plus per-segment timing.

    Segment-level words are flattened into one ordered word list.
    """
    language = None
    duration = None
    if raw.transcription_info is not None:
        language = raw.transcription_info.language
        if raw.transcription_info.duration is not None:
            duration = float(raw.transcription_info.duration)

    segments = None  # type: Optional[List[Segment]]
    words = None  # type: Optional[List[Word]]
    if raw.segments is not None:
        segments = []
        words = []
        for raw_segment in raw.segments:
            if _is_complete_segment(raw_segment):
                segments.append(
                    Segment(
                        index=len(segments),
                        seek_offset=0,
                        start=float(raw_segment.start),
                        end=float(raw_segment.end),
                        text=raw_segment.text,
                        temperature=float(raw_segment.temperature),
                        avg_logprob=float(raw_segment.avg_logprob),
                        compression_ratio=float(raw_segment.compression_ratio),
                        no_speech_prob=float(raw_segment.no_speech_prob),
                    )
                )
            if raw_segment.words:
                words.extend(_collect_words(raw_segment.words))

    return CanonicalTranscription(
        text=raw.text,
        language=language,
        duration=duration,
        segments=segments,
        words=words,
        vtt=raw.vtt,
    )


_NORMALIZERS: Dict[type, Callable[..., CanonicalTranscription]] = {
    WhisperOutput: _normalize_whisper,
    WhisperTurboOutput: _normalize_whisper_turbo,
}


def normalize(raw: RawProviderResult) -> CanonicalTranscription:
    """Convert a raw provider result into the canonical transcription IR.

    Args:
        raw: A parsed Workers AI output (WhisperOutput or WhisperTurboOutput).

    Returns:
        The CanonicalTranscription consumed by every formatter.

    Raises:
        TypeError: if ``raw`` is not a known provider output type.
    """
    converter = _NORMALIZERS.get(type(raw))
    if converter is None:
        raise TypeError(
            "No normalizer registered for {}".format(type(raw).__name__)
        )
    return converter(raw)
