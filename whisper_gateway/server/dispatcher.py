"""Request dispatcher — validate, invoke, normalize, render.

WHY: The HTTP route should only decode the multipart form and encode the
response. Everything between — validation, adapter selection, the provider
call, normalization, and rendering — runs here so it can be tested without
HTTP.

HOW: dispatch() validates the decoded fields into a TranscriptionRequest,
looks up the adapter and capability record for the model, opens a Workers AI
client from the given factory, awaits the adapter, then normalizes and
renders the result.

RULES:
- Validation happens before any client is created or provider is called
- Exactly one provider call per request; no retry, no parallel branches
- Every failure is a TranscriptionError raised by the stage that found it
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Mapping

from pydantic import ValidationError

from whisper_gateway.adapters import ADAPTERS
from whisper_gateway.api.client import WorkersAIClient
from whisper_gateway.core.capabilities import get_capabilities
from whisper_gateway.core.normalizer import normalize
from whisper_gateway.errors import InvalidRequestError, ProviderUnavailableError
from whisper_gateway.formatters.base import FormatterOutput
from whisper_gateway.formatters.renderer import render
from whisper_gateway.server.models import TranscriptionRequest

logger = logging.getLogger(__name__)


def parse_request(fields: Mapping[str, Any]) -> TranscriptionRequest:
    """Validate decoded form fields into a TranscriptionRequest.

    Fields whose value is None are treated as absent so defaults apply.

    Raises:
        InvalidRequestError: with a summary of every failing field.
    """
    present = {key: value for key, value in fields.items() if value is not None}
    try:
        return TranscriptionRequest.model_validate(present)
    except ValidationError as exc:
        problems = []
        for error in exc.errors():
            location = ".".join(str(part) for part in error["loc"]) or "request"
            problems.append("{}: {}".format(location, error["msg"]))
        raise InvalidRequestError("; ".join(problems)) from exc


async def dispatch(
    fields: Mapping[str, Any],
    client_factory: Callable[[], WorkersAIClient],
) -> FormatterOutput:
    """Run one transcription request end to end.

    Args:
        fields: Decoded multipart fields (audio, model, language, prompt,
                response_format, temperature, timestamp_granularities).
        client_factory: Zero-argument callable returning an unopened
                        WorkersAIClient (or a compatible test double).

    Returns:
        The rendered body and its MIME type.

    Raises:
        TranscriptionError: subclass naming the failing stage.
    """
    request = parse_request(fields)
    capabilities = get_capabilities(request.model)
    adapter = ADAPTERS[request.model]()

    if not capabilities.accepts_prompt and (request.language or request.prompt):
        logger.debug(
            "Model %s ignores language/prompt conditioning", request.model.value
        )

    try:
        client = client_factory()
    except ValueError as exc:
        logger.error("Workers AI client not configured: %s", exc)
        raise ProviderUnavailableError() from exc

    start_ts = time.perf_counter()
    async with client:
        raw = await adapter.invoke(
            client,
            request.audio,
            language=request.language,
            prompt=request.prompt,
            temperature=request.temperature,
        )
    elapsed = time.perf_counter() - start_ts

    transcription = normalize(raw)
    output = render(
        transcription,
        request.response_format,
        request.timestamp_granularities,
        capabilities,
    )
    logger.info(
        "Transcription completed in %.2fs (model=%s, format=%s, granularities=%s)",
        elapsed,
        request.model.value,
        request.response_format.value,
        ",".join(sorted(g.value for g in request.timestamp_granularities)) or "none",
    )
    return output
