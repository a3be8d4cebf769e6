"""Workers AI client package — async HTTP interface to the inference service.

WHY: Provider adapters need to run speech models on Workers AI and receive
typed results. This package owns all HTTP communication and the dataclasses
describing each model's output shape.

HOW: client.py wraps httpx.AsyncClient; models.py defines one dataclass per
provider output shape with from_dict() factories.

RULES:
- All HTTP calls go through WorkersAIClient (no direct httpx usage elsewhere)
- Authentication is via Bearer token from config
"""

from whisper_gateway.api.client import WorkersAIClient, WorkersAIError
from whisper_gateway.api.models import (
    RawProviderResult,
    WhisperOutput,
    WhisperTurboOutput,
)

__all__ = [
    "RawProviderResult",
    "WhisperOutput",
    "WhisperTurboOutput",
    "WorkersAIClient",
    "WorkersAIError",
]
