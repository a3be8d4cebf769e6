"""Tests for the provider adapters and the Workers AI client.

WHY: Each model expects a different input payload, and every transport
failure must surface as ProviderUnavailable without a retry. A wrong
payload shape is only caught by the provider at runtime, so it is pinned
down here.

HOW: Adapters run against StubWorkersAIClient. WorkersAIClient runs against
httpx.MockTransport so the URL, headers, and envelope handling are
exercised without network access. Async code is driven with asyncio.run().

RULES:
- No test makes a real network call
- Every adapter is registered for exactly one model
"""

import asyncio
import base64
import json

import httpx
import pytest

from whisper_gateway.adapters import ADAPTERS
from whisper_gateway.adapters.whisper import WhisperAdapter, WhisperTinyEnAdapter
from whisper_gateway.adapters.whisper_turbo import WhisperTurboAdapter
from whisper_gateway.api.client import WorkersAIClient, WorkersAIError
from whisper_gateway.api.models import WhisperOutput, WhisperTurboOutput
from whisper_gateway.core.capabilities import ModelName
from whisper_gateway.errors import ProviderUnavailableError

AUDIO = b"\x00\x01\xfeRIFF"


# ---------------------------------------------------------------------------
# Adapter registry and payloads
# ---------------------------------------------------------------------------


class TestAdapterRegistry:

    def test_every_model_has_an_adapter(self):
        assert set(ADAPTERS) == set(ModelName)

    @pytest.mark.parametrize("model", list(ModelName))
    def test_adapter_model_matches_key(self, model):
        assert ADAPTERS[model].model is model


class TestWhisperAdapter:

    @pytest.mark.parametrize("adapter_cls", [WhisperAdapter, WhisperTinyEnAdapter])
    def test_audio_sent_as_byte_list(self, adapter_cls):
        payload = adapter_cls().build_payload(
            AUDIO, language="de", prompt="hint", temperature=0.4
        )
        assert payload == {"audio": [0, 1, 254, 82, 73, 70, 70]}

    def test_invoke_returns_whisper_output(self, stub_client_cls, whisper_result):
        client = stub_client_cls(result=whisper_result)
        raw = asyncio.run(WhisperAdapter().invoke(client, AUDIO))
        assert isinstance(raw, WhisperOutput)
        assert raw.text == "hello"
        assert client.calls[0][0] == "@cf/openai/whisper"

    def test_tiny_en_uses_its_own_model_id(self, stub_client_cls, whisper_result):
        client = stub_client_cls(result=whisper_result)
        asyncio.run(WhisperTinyEnAdapter().invoke(client, AUDIO))
        assert client.calls[0][0] == "@cf/openai/whisper-tiny-en"


class TestWhisperTurboAdapter:

    def test_payload_with_conditioning(self):
        payload = WhisperTurboAdapter().build_payload(
            AUDIO, language="en", prompt="Names: Ada", temperature=0.2
        )
        assert payload == {
            "audio": base64.b64encode(AUDIO).decode("ascii"),
            "task": "transcribe",
            "language": "en",
            "initial_prompt": "Names: Ada",
        }

    def test_payload_omits_absent_conditioning(self):
        payload = WhisperTurboAdapter().build_payload(AUDIO)
        assert set(payload) == {"audio", "task"}

    def test_invoke_returns_turbo_output(self, stub_client_cls, turbo_result):
        client = stub_client_cls(result=turbo_result)
        raw = asyncio.run(WhisperTurboAdapter().invoke(client, AUDIO, language="en"))
        assert isinstance(raw, WhisperTurboOutput)
        assert raw.transcription_info.language == "en"
        assert len(raw.segments) == 1
        assert client.calls[0][0] == "@cf/openai/whisper-large-v3-turbo"


class TestProviderFailures:

    @pytest.mark.parametrize(
        "error",
        [
            httpx.ConnectError("connection refused"),
            httpx.ReadTimeout("timed out"),
            WorkersAIError(502, "bad gateway"),
        ],
    )
    def test_transport_errors_become_provider_unavailable(self, stub_client_cls, error):
        client = stub_client_cls(error=error)
        with pytest.raises(ProviderUnavailableError) as excinfo:
            asyncio.run(WhisperTurboAdapter().invoke(client, AUDIO))
        assert excinfo.value.__cause__ is error

    def test_no_retry_on_failure(self, stub_client_cls):
        client = stub_client_cls(error=WorkersAIError(500, "boom"))
        with pytest.raises(ProviderUnavailableError):
            asyncio.run(WhisperAdapter().invoke(client, AUDIO))
        assert len(client.calls) == 1

    def test_output_without_text_is_provider_failure(self, stub_client_cls):
        client = stub_client_cls(result={"vtt": "WEBVTT\n\n"})
        with pytest.raises(ProviderUnavailableError):
            asyncio.run(WhisperAdapter().invoke(client, AUDIO))

    @pytest.mark.parametrize(
        "adapter_cls,result",
        [
            (WhisperAdapter, {"text": None, "vtt": "WEBVTT\n\n"}),
            (WhisperAdapter, {"text": 42}),
            (WhisperTurboAdapter, {"text": None, "segments": []}),
        ],
    )
    def test_non_string_text_is_provider_failure(self, stub_client_cls, adapter_cls, result):
        client = stub_client_cls(result=result)
        with pytest.raises(ProviderUnavailableError):
            asyncio.run(adapter_cls().invoke(client, AUDIO))

    def test_non_json_body_is_provider_failure(self):
        def handler(request):
            return httpx.Response(200, text="<html>bad gateway</html>")

        async def _go():
            client = WorkersAIClient(
                api_token="t",
                account_id="a",
                base_url="https://workers.test/client/v4",
                transport=httpx.MockTransport(handler),
            )
            async with client:
                return await WhisperAdapter().invoke(client, AUDIO)

        with pytest.raises(ProviderUnavailableError) as excinfo:
            asyncio.run(_go())
        assert isinstance(excinfo.value.__cause__, WorkersAIError)


# ---------------------------------------------------------------------------
# WorkersAIClient over httpx.MockTransport
# ---------------------------------------------------------------------------


def _run_client(handler, model="@cf/openai/whisper", payload=None):
    async def _go():
        client = WorkersAIClient(
            api_token="test-token",
            account_id="acct-123",
            base_url="https://workers.test/client/v4",
            transport=httpx.MockTransport(handler),
        )
        async with client:
            return await client.run(model, payload or {"audio": [1, 2]})

    return asyncio.run(_go())


class TestWorkersAIClient:

    def test_run_posts_to_model_url_and_unwraps_result(self):
        seen = {}

        def handler(request):
            seen["url"] = str(request.url)
            seen["auth"] = request.headers["Authorization"]
            seen["body"] = json.loads(request.content)
            return httpx.Response(
                200, json={"success": True, "result": {"text": "hi"}, "errors": []}
            )

        result = _run_client(handler)

        assert result == {"text": "hi"}
        assert seen["url"] == (
            "https://workers.test/client/v4/accounts/acct-123/ai/run/@cf/openai/whisper"
        )
        assert seen["auth"] == "Bearer test-token"
        assert seen["body"] == {"audio": [1, 2]}

    def test_non_200_raises(self):
        def handler(request):
            return httpx.Response(401, text="unauthorized")

        with pytest.raises(WorkersAIError) as excinfo:
            _run_client(handler)
        assert excinfo.value.status_code == 401

    def test_unsuccessful_envelope_raises(self):
        def handler(request):
            return httpx.Response(
                200, json={"success": False, "errors": [{"message": "no"}]}
            )

        with pytest.raises(WorkersAIError):
            _run_client(handler)

    def test_missing_result_raises(self):
        def handler(request):
            return httpx.Response(200, json={"success": True})

        with pytest.raises(WorkersAIError):
            _run_client(handler)

    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(200, text="<html>bad gateway</html>"),
            httpx.Response(200, json=[{"text": "hi"}]),
            httpx.Response(200, json="hi"),
        ],
    )
    def test_non_object_body_raises(self, response):
        def handler(request):
            return response

        with pytest.raises(WorkersAIError) as excinfo:
            _run_client(handler)
        assert excinfo.value.status_code == 200
        assert excinfo.value.message == "Response is not a JSON object"

    def test_run_outside_context_manager(self):
        client = WorkersAIClient(api_token="t", account_id="a")
        with pytest.raises(RuntimeError):
            asyncio.run(client.run("@cf/openai/whisper", {}))

    def test_missing_credentials(self, monkeypatch):
        monkeypatch.delenv("CLOUDFLARE_API_TOKEN", raising=False)
        with pytest.raises(ValueError):
            WorkersAIClient(account_id="a")
