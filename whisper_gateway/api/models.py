"""Workers AI speech model output dataclasses.

WHY: The Workers AI speech models return loosely-typed JSON where almost
every field is optional. Typed dataclasses make each output shape explicit
and give the normalizer one concrete type per model family to convert.

HOW: Each dataclass maps 1:1 to a Workers AI output object. Factory methods
(from_dict) parse raw API responses, using None for any absent field so the
normalizer can apply explicit presence checks.

RULES:
- WhisperOutput is returned by @cf/openai/whisper and whisper-tiny-en
- WhisperTurboOutput is returned by @cf/openai/whisper-large-v3-turbo
- text is the only field every output is guaranteed to carry, as a string
- Absent and null fields both parse to None; 0 and "" are kept as values
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


def _require_text(data: dict) -> str:
    """Return data["text"], raising TypeError unless it is a string."""
    text = data["text"]
    if not isinstance(text, str):
        raise TypeError(f"Output text must be a string, got {type(text).__name__}")
    return text


@dataclass
class RawWord:
    """A word timing entry as reported by the provider."""

    word: str | None = None
    start: float | None = None
    end: float | None = None

    @classmethod
    def from_dict(cls, data: dict) -> RawWord:
        return cls(
            word=data.get("word"),
            start=data.get("start"),
            end=data.get("end"),
        )


@dataclass
class RawSegment:
    """A segment entry from the whisper-large-v3-turbo output.

    RULES:
    - Every field may be absent; the normalizer drops incomplete segments
    - words is None when word timing was not reported for this segment
    """

    start: float | None = None
    end: float | None = None
    text: str | None = None
    temperature: float | None = None
    avg_logprob: float | None = None
    compression_ratio: float | None = None
    no_speech_prob: float | None = None
    words: list[RawWord] | None = None

    @classmethod
    def from_dict(cls, data: dict) -> RawSegment:
        raw_words = data.get("words")
        return cls(
            start=data.get("start"),
            end=data.get("end"),
            text=data.get("text"),
            temperature=data.get("temperature"),
            avg_logprob=data.get("avg_logprob"),
            compression_ratio=data.get("compression_ratio"),
            no_speech_prob=data.get("no_speech_prob"),
            words=(
                [RawWord.from_dict(w) for w in raw_words]
                if raw_words is not None
                else None
            ),
        )


@dataclass
class TranscriptionInfo:
    """Audio-level metadata from the whisper-large-v3-turbo output."""

    language: str | None = None
    language_probability: float | None = None
    duration: float | None = None
    duration_after_vad: float | None = None

    @classmethod
    def from_dict(cls, data: dict) -> TranscriptionInfo:
        return cls(
            language=data.get("language"),
            language_probability=data.get("language_probability"),
            duration=data.get("duration"),
            duration_after_vad=data.get("duration_after_vad"),
        )


@dataclass
class WhisperOutput:
    """Output of @cf/openai/whisper and @cf/openai/whisper-tiny-en.

    RULES:
    - words is a flat list across the whole audio, or None
    - vtt is a complete WebVTT document, or None
    """

    text: str
    word_count: int | None = None
    words: list[RawWord] | None = None
    vtt: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> WhisperOutput:
        raw_words = data.get("words")
        return cls(
            text=_require_text(data),
            word_count=data.get("word_count"),
            words=(
                [RawWord.from_dict(w) for w in raw_words]
                if raw_words is not None
                else None
            ),
            vtt=data.get("vtt"),
        )


@dataclass
class WhisperTurboOutput:
    """Output of @cf/openai/whisper-large-v3-turbo.

    RULES:
    - transcription_info carries language and duration, or is None
    - segments carry per-segment word lists
    """

    text: str
    word_count: int | None = None
    transcription_info: TranscriptionInfo | None = None
    segments: list[RawSegment] | None = None
    vtt: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> WhisperTurboOutput:
        raw_info = data.get("transcription_info")
        raw_segments = data.get("segments")
        return cls(
            text=_require_text(data),
            word_count=data.get("word_count"),
            transcription_info=(
                TranscriptionInfo.from_dict(raw_info)
                if raw_info is not None
                else None
            ),
            segments=(
                [RawSegment.from_dict(s) for s in raw_segments]
                if raw_segments is not None
                else None
            ),
            vtt=data.get("vtt"),
        )


RawProviderResult = Union[WhisperOutput, WhisperTurboOutput]
