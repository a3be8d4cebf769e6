"""Adapters for the text-only Whisper models.

WHY: @cf/openai/whisper and @cf/openai/whisper-tiny-en take the raw audio as
a list of byte values and accept no conditioning at all.

RULES:
- language, prompt and temperature are accepted but not sent
- Both models return WhisperOutput
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from whisper_gateway.adapters.base import ProviderAdapter
from whisper_gateway.api.models import WhisperOutput
from whisper_gateway.core.capabilities import ModelName


class WhisperAdapter(ProviderAdapter):
    """Adapter for @cf/openai/whisper."""

    model = ModelName.WHISPER

    def build_payload(
        self,
        audio: bytes,
        language: Optional[str] = None,
        prompt: Optional[str] = None,
        temperature: float = 0.0,
    ) -> Dict[str, Any]:
        return {"audio": list(audio)}

    def parse_result(self, data: Dict[str, Any]) -> WhisperOutput:
        return WhisperOutput.from_dict(data)


class WhisperTinyEnAdapter(WhisperAdapter):
    """Adapter for @cf/openai/whisper-tiny-en (same wire shape as whisper)."""

    model = ModelName.WHISPER_TINY_EN
