"""Async HTTP client for the Cloudflare Workers AI REST API.

WHY: Every provider adapter runs a model on Workers AI. This module keeps
all HTTP details (auth, URL layout, envelope unwrapping, error mapping)
behind a single client class so adapters only build payloads.

HOW: Uses httpx.AsyncClient for non-blocking HTTP. WorkersAIClient is an
async context manager — enter it to get an authenticated client, exit to
close the connection. run() posts a JSON payload to
/accounts/{account_id}/ai/run/{model} and returns the envelope's "result".

RULES:
- Always use the async context manager (async with WorkersAIClient() as client:)
- Non-2xx responses, non-object bodies, and "success": false envelopes
  raise WorkersAIError
- No retries; a failed call surfaces immediately
- transport is injectable so tests can use httpx.MockTransport
"""

from __future__ import annotations

from typing import Any

import httpx

from whisper_gateway.config import (
    WORKERS_AI_BASE_URL,
    WORKERS_AI_TIMEOUT_S,
    load_account_id,
    load_api_token,
)


class WorkersAIError(Exception):
    """Raised when the Workers AI API returns an error response.

    RULES:
    - Always include status_code and message
    - message is the envelope's error list or the response body text
    """

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"Workers AI error {status_code}: {message}")


class WorkersAIClient:
    """Async client for running Workers AI models.

    RULES:
    - api_token defaults to load_api_token() from .env
    - account_id defaults to load_account_id() from .env
    - base_url defaults to WORKERS_AI_BASE_URL from config
    """

    def __init__(
        self,
        api_token: str | None = None,
        account_id: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_token = api_token or load_api_token()
        self._account_id = account_id or load_account_id()
        self._base_url = (base_url or WORKERS_AI_BASE_URL).rstrip("/")
        self._timeout = timeout or WORKERS_AI_TIMEOUT_S
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> WorkersAIClient:
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers={"Authorization": f"Bearer {self._api_token}"},
            timeout=httpx.Timeout(self._timeout, connect=30.0),
            transport=self._transport,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        if self._client:
            await self._client.aclose()
            self._client = None

    def _ensure_client(self) -> httpx.AsyncClient:
        """Return the active httpx client, raising if not in context manager."""
        if self._client is None:
            raise RuntimeError(
                "WorkersAIClient must be used as an async context manager: "
                "async with WorkersAIClient() as client: ..."
            )
        return self._client

    async def run(self, model: str, payload: dict[str, Any]) -> dict[str, Any]:
        """Run ``model`` on ``payload`` and return the model output object.

        Args:
            model: Workers AI model identifier, e.g. "@cf/openai/whisper".
            payload: JSON-serializable model input.

        Returns:
            The "result" object of the Workers AI response envelope.

        Raises:
            WorkersAIError: on a non-2xx status, a body that is not a JSON
                object, or an unsuccessful envelope.
            httpx.HTTPError: on network failures and timeouts.
        """
        client = self._ensure_client()
        resp = await client.post(
            f"/accounts/{self._account_id}/ai/run/{model}",
            json=payload,
        )

        if resp.status_code != 200:
            raise WorkersAIError(resp.status_code, resp.text)

        try:
            data = resp.json()
        except ValueError:
            data = None
        if not isinstance(data, dict):
            raise WorkersAIError(resp.status_code, "Response is not a JSON object")

        if not data.get("success", True):
            raise WorkersAIError(resp.status_code, str(data.get("errors")))

        result = data.get("result")
        if not isinstance(result, dict):
            raise WorkersAIError(resp.status_code, "Response has no result object")
        return result
