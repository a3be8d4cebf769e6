"""Whisper Gateway — OpenAI-compatible transcription API over Workers AI.

WHY: Clients built against the OpenAI audio API expect one endpoint and five
response formats. The Workers AI speech models each return a different,
partially-populated result shape. This package bridges the two.

HOW: Four-stage pipeline — adapt (one provider adapter per model), invoke
(async Workers AI client), normalize (raw result to canonical IR), render
(one formatter per response format). Each stage is independently testable.

RULES:
- All formatters consume the same CanonicalTranscription IR
- Raw provider results never cross the normalizer boundary
- Model differences live in the capability table, not in formatter branches
"""

__version__ = "0.1.0"
