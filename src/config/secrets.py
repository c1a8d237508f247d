"""Secrets configuration for the generation endpoint."""

from __future__ import annotations

ENV_GEMINI_API_KEY = "GEMINI_API_KEY"

# Placeholder shipped in sample .env files; treated as "not configured".
DEMO_GEMINI_API_KEY = "test_key_for_demo"

__all__ = ["DEMO_GEMINI_API_KEY", "ENV_GEMINI_API_KEY"]
