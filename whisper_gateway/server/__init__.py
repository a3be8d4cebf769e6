"""HTTP API package — FastAPI app, request dispatcher, and schemas.

WHY: The transcription pipeline is exposed to OpenAI SDK clients over HTTP.
This package holds everything HTTP-facing plus the dispatcher that the
route delegates to.

HOW: app.py defines routes and error mapping, dispatcher.py runs the
pipeline, models.py defines the Pydantic schemas.
"""
