"""Structured generation with fallback: prompt building, upstream calls,
JSON extraction, a single reinforced retry and template fallbacks."""
