"""Adapter for @cf/openai/whisper-large-v3-turbo.

WHY: The turbo model takes base64-encoded audio and accepts a language hint
and an initial prompt, and returns segment and word timing.

RULES:
- task is always "transcribe"
- language and initial_prompt are only sent when the client gave them
- temperature is not part of the model's input schema and is not sent
"""

from __future__ import annotations

import base64
from typing import Any, Dict, Optional

from whisper_gateway.adapters.base import ProviderAdapter
from whisper_gateway.api.models import WhisperTurboOutput
from whisper_gateway.core.capabilities import ModelName


class WhisperTurboAdapter(ProviderAdapter):
    """Adapter for @cf/openai/whisper-large-v3-turbo."""

    model = ModelName.WHISPER_LARGE_V3_TURBO

    def build_payload(
        self,
        audio: bytes,
        language: Optional[str] = None,
        prompt: Optional[str] = None,
        temperature: float = 0.0,
    ) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "audio": base64.b64encode(audio).decode("ascii"),
            "task": "transcribe",
        }
        if language:
            payload["language"] = language
        if prompt:
            payload["initial_prompt"] = prompt
        return payload

    def parse_result(self, data: Dict[str, Any]) -> WhisperTurboOutput:
        return WhisperTurboOutput.from_dict(data)
