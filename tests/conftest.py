"""Shared test fixtures for the whisper_gateway test suite.

WHY: Normalizer, formatter, adapter, and API tests all need the same
representative Workers AI outputs. Centralizing them here keeps every test
module working from identical sample data.

HOW: Module-level dicts mirror the JSON returned by each Workers AI speech
model. Fixtures hand out deep copies so tests may mutate them freely.
StubWorkersAIClient stands in for WorkersAIClient without any HTTP.

RULES:
- Sample outputs match the Workers AI response shapes field for field
- Fixtures always return fresh copies
"""

import copy
from typing import Any, Dict, List, Optional

import pytest

from whisper_gateway.core.ir import CanonicalTranscription, Segment, Word


# ---------------------------------------------------------------------------
# Sample Workers AI outputs
# ---------------------------------------------------------------------------

SAMPLE_VTT = "WEBVTT\n\n00:00.000 --> 00:04.200\nHello from the gateway.\n\n"

FULL_SEGMENT: Dict[str, Any] = {
    "start": 0.0,
    "end": 4.2,
    "text": "Hello from the gateway.",
    "temperature": 0.0,
    "avg_logprob": -0.21,
    "compression_ratio": 0.93,
    "no_speech_prob": 0.01,
    "words": [
        {"word": "Hello", "start": 0.0, "end": 0.6},
        {"word": "from", "start": 0.7, "end": 1.1},
        {"word": "the", "start": 1.2, "end": 1.4},
        {"word": "gateway.", "start": 1.5, "end": 4.2},
    ],
}

TURBO_RESULT: Dict[str, Any] = {
    "transcription_info": {
        "language": "en",
        "language_probability": 0.98,
        "duration": 4.2,
        "duration_after_vad": 4.1,
    },
    "text": "Hello from the gateway.",
    "word_count": 4,
    "segments": [FULL_SEGMENT],
    "vtt": SAMPLE_VTT,
}

WHISPER_RESULT: Dict[str, Any] = {
    "text": "hello",
    "word_count": 1,
    "words": [{"word": "hello", "start": 0.0, "end": 0.5}],
    "vtt": SAMPLE_VTT,
}


@pytest.fixture
def turbo_result():
    """Complete whisper-large-v3-turbo output with one segment."""
    return copy.deepcopy(TURBO_RESULT)


@pytest.fixture
def whisper_result():
    """Complete @cf/openai/whisper output."""
    return copy.deepcopy(WHISPER_RESULT)


@pytest.fixture
def full_segment():
    """A raw segment carrying every required field."""
    return copy.deepcopy(FULL_SEGMENT)


@pytest.fixture
def canonical_transcription():
    """Normalized transcription with metadata, one segment, and two words."""
    return CanonicalTranscription(
        text="Hello from the gateway.",
        language="en",
        duration=4.2,
        segments=[
            Segment(
                index=0,
                seek_offset=0,
                start=0.0,
                end=4.2,
                text="Hello from the gateway.",
                temperature=0.0,
                avg_logprob=-0.21,
                compression_ratio=0.93,
                no_speech_prob=0.01,
            )
        ],
        words=[
            Word(text="Hello", start=0.0, end=0.6),
            Word(text="gateway.", start=1.5, end=4.2),
        ],
        vtt=SAMPLE_VTT,
    )


# ---------------------------------------------------------------------------
# Workers AI client double
# ---------------------------------------------------------------------------


class StubWorkersAIClient:
    """Async stand-in for WorkersAIClient.

    Returns ``result`` from run(), or raises ``error`` when set. Every call
    is recorded in ``calls`` as (model, payload).
    """

    def __init__(
        self,
        result: Optional[Dict[str, Any]] = None,
        error: Optional[Exception] = None,
    ) -> None:
        self.result = result
        self.error = error
        self.calls: List[tuple] = []
        self.entered = False
        self.exited = False

    async def __aenter__(self):
        self.entered = True
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        self.exited = True

    async def run(self, model: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        self.calls.append((model, payload))
        if self.error is not None:
            raise self.error
        return copy.deepcopy(self.result)


@pytest.fixture
def stub_client_cls():
    """The StubWorkersAIClient class, for tests that build their own stub."""
    return StubWorkersAIClient
