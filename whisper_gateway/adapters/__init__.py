"""Provider adapter registry — one adapter per Workers AI model.

WHY: The dispatcher needs a single lookup from the requested model to the
code that knows how to call it.

HOW: ADAPTERS maps ModelName to adapter *classes*. Callers instantiate as
needed: ``adapter = ADAPTERS[ModelName.WHISPER]()``.

RULES:
- Every ModelName has exactly one adapter
- Adapters are stateless; a fresh instance per request is fine
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from whisper_gateway.adapters.whisper import WhisperAdapter, WhisperTinyEnAdapter
from whisper_gateway.adapters.whisper_turbo import WhisperTurboAdapter
from whisper_gateway.core.capabilities import ModelName

if TYPE_CHECKING:
    from whisper_gateway.adapters.base import ProviderAdapter

ADAPTERS: dict[ModelName, type[ProviderAdapter]] = {
    ModelName.WHISPER: WhisperAdapter,
    ModelName.WHISPER_TINY_EN: WhisperTinyEnAdapter,
    ModelName.WHISPER_LARGE_V3_TURBO: WhisperTurboAdapter,
}
