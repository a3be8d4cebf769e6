"""Abstract provider adapter.

WHY: Workers AI speech models disagree on their input shape: some take the
audio as a list of byte values, others take base64 plus language and prompt
conditioning. Each model gets its own adapter so these differences never
leak into shared code as scattered branches.

HOW: ProviderAdapter is an ABC with two requirements — build_payload(),
which produces the model's JSON input, and parse_result(), which turns the
model's output object into a typed raw result. invoke() ties them together
around one WorkersAIClient.run() call and maps transport failures to
ProviderUnavailableError.

RULES:
- One adapter class per ModelName, registered in ADAPTERS
- Adapters never retry; the first failure is final
- Adapters never inspect the requested response format
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import httpx

from whisper_gateway.api.client import WorkersAIClient, WorkersAIError
from whisper_gateway.api.models import RawProviderResult
from whisper_gateway.core.capabilities import ModelName
from whisper_gateway.errors import ProviderUnavailableError

logger = logging.getLogger(__name__)


class ProviderAdapter(ABC):
    """Base class for per-model Workers AI adapters.

    To add a new model:
    1. Add it to ModelName and MODEL_CAPABILITIES
    2. Subclass ProviderAdapter and implement build_payload() and parse_result()
    3. Register it in ADAPTERS in adapters/__init__.py
    """

    model: ModelName

    @abstractmethod
    def build_payload(
        self,
        audio: bytes,
        language: Optional[str] = None,
        prompt: Optional[str] = None,
        temperature: float = 0.0,
    ) -> Dict[str, Any]:
        """Build the JSON input the model expects."""

    @abstractmethod
    def parse_result(self, data: Dict[str, Any]) -> RawProviderResult:
        """Parse the model's output object into a typed raw result."""

    async def invoke(
        self,
        client: WorkersAIClient,
        audio: bytes,
        language: Optional[str] = None,
        prompt: Optional[str] = None,
        temperature: float = 0.0,
    ) -> RawProviderResult:
        """Run the model on ``audio`` and return its typed raw result.

        Raises:
            ProviderUnavailableError: on network errors, timeouts, error
                responses, or an output object that cannot be parsed.
        """
        payload = self.build_payload(
            audio, language=language, prompt=prompt, temperature=temperature
        )
        try:
            data = await client.run(self.model.value, payload)
        except (httpx.HTTPError, WorkersAIError) as exc:
            logger.warning("Workers AI call failed for %s: %s", self.model.value, exc)
            raise ProviderUnavailableError() from exc

        try:
            return self.parse_result(data)
        except (KeyError, TypeError, AttributeError) as exc:
            logger.warning(
                "Unparseable Workers AI output for %s: %s", self.model.value, exc
            )
            raise ProviderUnavailableError() from exc
