"""Abstract base formatter and output container.

WHY: Every response format consumes the same CanonicalTranscription IR but
produces a different body. This base class enforces a consistent interface
so render() can treat every format generically.

HOW: BaseFormatter is an ABC with two requirements — a ``name`` property
and a ``format()`` method. FormatterOutput bundles the response body with
its MIME type.

RULES:
- Subclasses MUST implement ``name`` and ``format()``
- ``format()`` is pure: same inputs, byte-identical output
- Formatters raise TranscriptionError subclasses, never HTTP errors
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import AbstractSet

from whisper_gateway.core.capabilities import Granularity, ModelCapabilities
from whisper_gateway.core.ir import CanonicalTranscription


@dataclass(frozen=True)
class FormatterOutput:
    """One rendered response body.

    Attributes:
        content: The response body (JSON document, plain text, or WebVTT).
        media_type: MIME type for the content, e.g. ``"application/json"``.
    """

    content: str
    media_type: str


class BaseFormatter(ABC):
    """Abstract base for all response formatters.

    To add a new response format:
    1. Add it to ResponseFormat
    2. Subclass BaseFormatter and implement format() and name
    3. Register it in FORMATTERS in formatters/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'Verbose JSON'."""

    @abstractmethod
    def format(
        self,
        transcription: CanonicalTranscription,
        granularities: AbstractSet[Granularity],
        capabilities: ModelCapabilities,
    ) -> FormatterOutput:
        """Render the IR into a response body.

        Args:
            transcription: The normalized transcription.
            granularities: Timing detail levels the client requested.
            capabilities: What the producing model supports.

        Returns:
            The rendered body and its MIME type.
        """
