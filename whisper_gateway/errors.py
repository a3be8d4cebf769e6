"""Error taxonomy for the transcription pipeline.

WHY: Every failure must be reported to the caller verbatim, tagged with the
pipeline stage that detected it. Typed exceptions let the HTTP layer map
failures to responses in one place instead of inside each route.

HOW: ErrorKind enumerates the closed set of failure kinds. Each kind has one
exception class deriving from TranscriptionError, which carries the kind, the
stage name, the HTTP status code, and a human-readable message.

RULES:
- Errors are raised at the stage where the missing precondition is found
- Nothing is retried, swallowed, or downgraded
- Only ValidationError maps to a 4xx status; everything else is a 500
"""

from __future__ import annotations

import enum


class ErrorKind(str, enum.Enum):
    """Closed set of failure kinds, serialized in error response bodies."""

    VALIDATION_ERROR = "ValidationError"
    PROVIDER_UNAVAILABLE = "ProviderUnavailable"
    UNSUPPORTED_FORMAT = "UnsupportedFormat"
    MISSING_TRANSCRIPTION_METADATA = "MissingTranscriptionMetadata"
    INVALID_RESPONSE_FORMAT = "InvalidResponseFormat"


class TranscriptionError(Exception):
    """Base class for every failure surfaced by the transcription pipeline.

    Subclasses set ``kind``, ``stage``, ``status_code`` and
    ``default_message`` as class attributes. The message may be overridden
    per instance.
    """

    kind: ErrorKind
    stage: str
    status_code: int = 500
    default_message: str = "Transcription failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidRequestError(TranscriptionError):
    """Raised when the decoded request fails schema validation."""

    kind = ErrorKind.VALIDATION_ERROR
    stage = "validation"
    status_code = 400
    default_message = "Invalid request"


class ProviderUnavailableError(TranscriptionError):
    """Raised when the inference call fails or times out."""

    kind = ErrorKind.PROVIDER_UNAVAILABLE
    stage = "provider"
    default_message = "Inference provider unavailable"


class UnsupportedFormatError(TranscriptionError):
    """Raised when the model cannot produce the requested response format."""

    kind = ErrorKind.UNSUPPORTED_FORMAT
    stage = "render"
    default_message = "Not implemented"


class MissingTranscriptionMetadataError(TranscriptionError):
    """Raised when verbose_json needs language/duration the provider omitted."""

    kind = ErrorKind.MISSING_TRANSCRIPTION_METADATA
    stage = "render"
    default_message = "Transcription info not found"


class InvalidResponseFormatError(TranscriptionError):
    """Raised when a format value with no registered formatter reaches render()."""

    kind = ErrorKind.INVALID_RESPONSE_FORMAT
    stage = "render"
    default_message = "Invalid response_format"
