"""Pydantic request/response models for the HTTP API.

WHY: The dispatcher needs a typed, validated request before any provider is
called, and the OpenAPI docs need schemas for every response shape. Pydantic
enforces field types and bounds at runtime and generates the JSON Schema
shown in /docs.

HOW: TranscriptionRequest is the frozen, validated form of one multipart
upload. The response models document the JSON bodies the formatters emit;
the formatters themselves serialize from the IR.

RULES:
- Enum values match the OpenAI audio API and Workers AI model IDs exactly
- TranscriptionRequest is immutable and built once per call
- Python 3.9+ compatible (no PEP 604 unions, use Optional from typing)
"""

from __future__ import annotations

from typing import FrozenSet, List, Optional

from pydantic import BaseModel, Field

from whisper_gateway.core.capabilities import Granularity, ModelName, ResponseFormat


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class TranscriptionRequest(BaseModel):
    """A decoded and validated transcription request.

    RULES:
    - model must be one of ModelName
    - response_format defaults to json
    - temperature is bounded to [0, 1], default 0
    - timestamp_granularities defaults to {segment}
    """

    model_config = {"frozen": True}

    audio: bytes = Field(description="Raw audio file content.")
    model: ModelName = Field(description="Workers AI speech model to run.")
    language: Optional[str] = Field(
        default=None,
        description="ISO 639-1 language of the audio, if known.",
    )
    prompt: Optional[str] = Field(
        default=None,
        description="Text to condition the model on.",
    )
    response_format: ResponseFormat = Field(
        default=ResponseFormat.JSON,
        description="Representation of the transcription in the response.",
    )
    temperature: float = Field(
        default=0.0,
        ge=0.0,
        le=1.0,
        description="Sampling temperature between 0 and 1.",
    )
    timestamp_granularities: FrozenSet[Granularity] = Field(
        default=frozenset({Granularity.SEGMENT}),
        description="Timing detail levels to include in verbose_json.",
    )


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class TranscriptionSegment(BaseModel):
    """One segment of a verbose_json response."""

    id: int = Field(description="Position of the segment in the response.")
    seek: int = Field(description="Seek offset of the segment (0 when unknown).")
    start: float = Field(description="Start time in seconds.")
    end: float = Field(description="End time in seconds.")
    text: str = Field(description="Segment text.")
    tokens: List[int] = Field(description="Decoder token IDs (empty when unknown).")
    temperature: float = Field(description="Decoding temperature used.")
    avg_logprob: float = Field(description="Average token log probability.")
    compression_ratio: float = Field(description="Text compression ratio.")
    no_speech_prob: float = Field(description="Probability the segment is silence.")


class TranscriptionWord(BaseModel):
    """One word of a verbose_json response."""

    word: str = Field(description="Word text.")
    start: float = Field(description="Start time in seconds.")
    end: float = Field(description="End time in seconds.")


class TranscriptionResponse(BaseModel):
    """JSON body of a transcription response.

    RULES:
    - json returns only text
    - verbose_json adds language and duration
    - segments is present only when "segment" granularity was requested
    - words is present only when "word" granularity was requested
    """

    text: str = Field(description="The transcribed text.")
    language: Optional[str] = Field(
        default=None,
        description="Language of the audio (verbose_json only).",
    )
    duration: Optional[float] = Field(
        default=None,
        description="Audio duration in seconds (verbose_json only).",
    )
    segments: Optional[List[TranscriptionSegment]] = Field(
        default=None,
        description="Segment timing, only with timestamp_granularities[]=segment.",
    )
    words: Optional[List[TranscriptionWord]] = Field(
        default=None,
        description="Word timing, only with timestamp_granularities[]=word.",
    )


class ModelInfo(BaseModel):
    """One entry of the model listing, with its capabilities."""

    id: str = Field(description="Model identifier used in requests.")
    object: str = Field(default="model", description="Always 'model'.")
    owned_by: str = Field(default="cloudflare", description="Model owner.")
    response_formats: List[ResponseFormat] = Field(
        description="Response formats the model can produce."
    )
    word_timestamps: bool = Field(description="Model reports word timing.")
    segment_timestamps: bool = Field(description="Model reports segment timing.")
    accepts_prompt: bool = Field(
        description="Model accepts language and prompt conditioning."
    )


class ModelListResponse(BaseModel):
    """OpenAI-style model list."""

    object: str = Field(default="list", description="Always 'list'.")
    data: List[ModelInfo] = Field(description="Available models.")


class ErrorResponse(BaseModel):
    """Standard error response body.

    RULES:
    - detail is always a human-readable error message
    - type and stage are set for transcription pipeline errors
    """

    detail: str = Field(description="Human-readable error description.")
    type: Optional[str] = Field(default=None, description="Error kind.")
    stage: Optional[str] = Field(
        default=None, description="Pipeline stage that failed."
    )


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service health status.", json_schema_extra={"example": "ok"})
    version: str = Field(description="API version string.", json_schema_extra={"example": "0.1.0"})
