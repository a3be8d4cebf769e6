"""Package entry point for ``python -m whisper_gateway``.

Starts the HTTP API with uvicorn, same as the ``whisper-gateway`` console
script.
"""

from whisper_gateway.server.app import run_api

if __name__ == "__main__":
    run_api()
