"""Response formatter registry — one formatter per response format.

WHY: render() needs a single lookup from the requested response format to
the code that renders it. A central dict makes the format state machine
explicit and easy to extend.

HOW: FORMATTERS maps ResponseFormat to formatter *classes* (not instances).
render() in renderer.py instantiates the right one per call.

RULES:
- Keys are ResponseFormat members
- Values are BaseFormatter subclasses (not instances)
- Every formatter listed here must be importable without side effects
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from whisper_gateway.core.capabilities import ResponseFormat
from whisper_gateway.formatters.json_formats import JSONFormatter, VerboseJSONFormatter
from whisper_gateway.formatters.plain_text import PlainTextFormatter
from whisper_gateway.formatters.subtitles import SRTFormatter, VTTFormatter

if TYPE_CHECKING:
    from whisper_gateway.formatters.base import BaseFormatter

FORMATTERS: dict[ResponseFormat, type[BaseFormatter]] = {
    ResponseFormat.JSON: JSONFormatter,
    ResponseFormat.TEXT: PlainTextFormatter,
    ResponseFormat.SRT: SRTFormatter,
    ResponseFormat.VERBOSE_JSON: VerboseJSONFormatter,
    ResponseFormat.VTT: VTTFormatter,
}
