"""Core capability table, intermediate representation, and normalizer.

WHY: The core holds the provider-agnostic heart of the gateway — the
canonical transcription IR and the rules that build it from raw provider
results. Formatters and adapters both depend on it; it depends on neither.

HOW: ir.py defines the dataclasses, capabilities.py the static per-model
feature table, normalizer.py the raw-result-to-IR conversion.

RULES:
- IR dataclasses are the contract — change with care
- Normalization is format-agnostic — no formatter-specific logic here
"""
