"""FastAPI application with the OpenAI-compatible transcription route.

WHY: Existing OpenAI SDK clients call POST /v1/audio/transcriptions with a
multipart upload. FastAPI decodes the form, documents every field in
OpenAPI, and turns pipeline errors into consistent JSON error bodies.

HOW: The transcription route reads the upload and passes the raw fields to
dispatch(), which owns validation and the pipeline. A single exception
handler maps every TranscriptionError to its status code and an
ErrorResponse body. An HTTP middleware logs each request.

RULES:
- Success is always 200 with the formatter's body and media type
- TranscriptionError → its status_code with {"detail", "type", "stage"}
- The Workers AI client factory is a dependency so tests can override it
- Python 3.9+ compatible (no match/case, no PEP 604 unions)
"""

from __future__ import annotations

import logging
import time
from typing import Annotated, Callable, List, Optional

from fastapi import Depends, FastAPI, File, Form, Request, UploadFile
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from whisper_gateway import __version__
from whisper_gateway.api.client import WorkersAIClient
from whisper_gateway.config import API_HOST, API_PORT, LOG_LEVEL
from whisper_gateway.core.capabilities import MODEL_CAPABILITIES, ResponseFormat
from whisper_gateway.errors import TranscriptionError
from whisper_gateway.server.dispatcher import dispatch
from whisper_gateway.server.models import (
    ErrorResponse,
    HealthResponse,
    ModelInfo,
    ModelListResponse,
    TranscriptionResponse,
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Whisper Gateway",
    description=(
        "OpenAI-compatible audio transcription API backed by Cloudflare "
        "Workers AI Whisper models. Responses are available as json, text, "
        "verbose_json and vtt."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ---------------------------------------------------------------------------
# Dependencies, middleware, and error handling
# ---------------------------------------------------------------------------


def get_client_factory() -> Callable[[], WorkersAIClient]:
    """Return the callable that builds a Workers AI client per request."""
    return WorkersAIClient


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_ts = time.perf_counter()
    response = await call_next(request)
    logger.info(
        "%s %s -> %d (%.1fms)",
        request.method,
        request.url.path,
        response.status_code,
        (time.perf_counter() - start_ts) * 1000,
    )
    return response


@app.exception_handler(TranscriptionError)
async def handle_transcription_error(
    request: Request, exc: TranscriptionError
) -> JSONResponse:
    logger.warning(
        "%s failed at %s stage (%s): %s",
        request.url.path,
        exc.stage,
        exc.kind.value,
        exc.message,
    )
    body = ErrorResponse(detail=exc.message, type=exc.kind.value, stage=exc.stage)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


# ---------------------------------------------------------------------------
# Endpoints: Transcriptions
# ---------------------------------------------------------------------------


@app.post(
    "/v1/audio/transcriptions",
    tags=["v1"],
    summary="Transcribe audio",
    description=(
        "Transcribe an uploaded audio file with a Workers AI Whisper model. "
        "The response body depends on response_format: json and "
        "verbose_json return JSON, text returns text/plain, vtt returns "
        "text/vtt. srt is not supported."
    ),
    responses={
        200: {
            "model": TranscriptionResponse,
            "description": "The transcription in the requested format.",
            "content": {
                "text/plain": {"schema": {"type": "string"}},
                "text/vtt": {"schema": {"type": "string"}},
            },
        },
        400: {"model": ErrorResponse, "description": "Invalid request fields"},
        500: {"model": ErrorResponse, "description": "Provider or format failure"},
    },
)
async def create_transcription(
    file: Annotated[
        UploadFile,
        File(description="Audio file to transcribe."),
    ],
    client_factory: Annotated[
        Callable[[], WorkersAIClient],
        Depends(get_client_factory),
    ],
    model: Annotated[
        Optional[str],
        Form(description="Model ID, e.g. '@cf/openai/whisper-large-v3-turbo'."),
    ] = None,
    language: Annotated[
        Optional[str],
        Form(description="ISO 639-1 language of the audio."),
    ] = None,
    prompt: Annotated[
        Optional[str],
        Form(description="Text to condition the model on."),
    ] = None,
    response_format: Annotated[
        Optional[str],
        Form(description="One of json, text, srt, verbose_json, vtt. Defaults to json."),
    ] = None,
    temperature: Annotated[
        Optional[str],
        Form(description="Sampling temperature between 0 and 1. Defaults to 0."),
    ] = None,
    timestamp_granularities: Annotated[
        Optional[List[str]],
        Form(
            alias="timestamp_granularities[]",
            description="Timing detail for verbose_json: word and/or segment.",
        ),
    ] = None,
) -> Response:
    audio = await file.read()
    output = await dispatch(
        {
            "audio": audio,
            "model": model,
            "language": language,
            "prompt": prompt,
            "response_format": response_format,
            "temperature": temperature,
            "timestamp_granularities": timestamp_granularities,
        },
        client_factory,
    )
    return Response(content=output.content, media_type=output.media_type)


# ---------------------------------------------------------------------------
# Endpoints: Models
# ---------------------------------------------------------------------------


@app.get(
    "/v1/models",
    response_model=ModelListResponse,
    tags=["v1"],
    summary="List available models",
    description="Returns every supported model with its capabilities.",
)
async def list_models() -> ModelListResponse:
    data = []
    for capabilities in MODEL_CAPABILITIES.values():
        data.append(ModelInfo(
            id=capabilities.model.value,
            response_formats=[
                fmt for fmt in ResponseFormat if fmt in capabilities.response_formats
            ],
            word_timestamps=capabilities.word_timestamps,
            segment_timestamps=capabilities.segment_timestamps,
            accepts_prompt=capabilities.accepts_prompt,
        ))
    return ModelListResponse(data=data)


# ---------------------------------------------------------------------------
# Endpoints: Health
# ---------------------------------------------------------------------------


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
    description="Liveness and readiness check for load balancers and orchestrators.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


@app.get("/", response_class=PlainTextResponse, include_in_schema=False)
async def root() -> str:
    return "Whisper Gateway"


def run_api():
    """Entry point for the whisper-gateway console script."""
    import uvicorn

    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(app, host=API_HOST, port=API_PORT)
