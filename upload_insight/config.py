"""Model configuration sourced from the environment at startup."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from dotenv import dotenv_values

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"

CHUNK_SIZE = 24000
MAX_UPLOAD_BYTES = 10 * 1024 * 1024
MAX_SUMMARY_CHARS = 4000
ELLIPSIS = "..."


@dataclass(frozen=True)
class ModelConfig:
    model: str = DEFAULT_MODEL
    api_key: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    temperature: Optional[float] = None
    timeout: Optional[float] = None
    max_retries: int = 0

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        env_file: Optional[str] = ".env",
    ) -> "ModelConfig":
        """Build from ``environ`` (default: process environment over ``env_file``)."""
        if environ is None:
            file_values = dotenv_values(env_file) if env_file else {}
            env = {key: value for key, value in file_values.items() if value is not None}
            env.update(os.environ)
        else:
            env = environ
        timeout = env.get("UPLOAD_INSIGHT_TIMEOUT")
        return cls(
            model=env.get("UPLOAD_INSIGHT_MODEL") or DEFAULT_MODEL,
            api_key=env.get("GEMINI_API_KEY") or env.get("OPENAI_API_KEY") or None,
            base_url=env.get("UPLOAD_INSIGHT_BASE_URL") or DEFAULT_BASE_URL,
            timeout=float(timeout) if timeout else None,
        )

    def with_overrides(self, **overrides: object) -> "ModelConfig":
        """Return a copy with every non-None override applied."""
        values = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **values)
