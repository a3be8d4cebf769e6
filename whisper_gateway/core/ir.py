"""Intermediate representation dataclasses for normalized transcriptions.

WHY: Each Workers AI speech model returns a different, partially-populated
result. Formatters need one well-typed shape to render from, regardless of
which model produced it.

HOW: Three dataclasses:
  Word                   — one word with start/end timing
  Segment                — one phrase with timing and decoder confidence
  CanonicalTranscription — the complete normalized result

RULES:
- All times are float seconds
- Optional collections are None when the provider never reported them,
  and an empty list when it reported them but none survived filtering
- A CanonicalTranscription is built once per request and never mutated
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Word:
    """A single word with its audio boundaries."""

    text: str
    start: float
    end: float


@dataclass(frozen=True)
class Segment:
    """A contiguous transcribed span with timing and confidence metadata.

    RULES:
    - index: position among the kept segments, starting at 0
    - seek_offset: 0 unless the provider reports real seek offsets
    - token_ids: empty unless the provider reports decoder token IDs
    """

    index: int
    seek_offset: int
    start: float
    end: float
    text: str
    temperature: float
    avg_logprob: float
    compression_ratio: float
    no_speech_prob: float
    token_ids: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class CanonicalTranscription:
    """The provider-agnostic result every formatter consumes.

    RULES:
    - text is always present
    - language and duration are only meaningful together (verbose_json)
    - vtt is the provider's own WebVTT document, when it returns one
    """

    text: str
    language: str | None = None
    duration: float | None = None
    segments: list[Segment] | None = None
    words: list[Word] | None = None
    vtt: str | None = None
