"""Client configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_BASE_URL = "https://api.loop.dev"
DEFAULT_TIMEOUT_MS = 30000

ENV_API_KEY = "PAYLOOPS_API_KEY"
ENV_BASE_URL = "PAYLOOPS_BASE_URL"
ENV_TIMEOUT_MS = "PAYLOOPS_TIMEOUT_MS"


def _redact(value: str) -> str:
    if len(value) < 8:
        return "***"
    return f"{value[:4]}***{value[-2:]}"


@dataclass(frozen=True)
class LoopConfig:
    """Immutable settings shared by every request a client makes.

    ``timeout_ms`` bounds each call in milliseconds. Validation happens at
    construction so a missing key fails before any network activity.
    """

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout_ms: int = DEFAULT_TIMEOUT_MS

    def __post_init__(self) -> None:
        if not self.api_key:
            raise ValueError("API key is required")
        base_url = (self.base_url or DEFAULT_BASE_URL).rstrip("/")
        object.__setattr__(self, "base_url", base_url)
        if self.timeout_ms is None:
            object.__setattr__(self, "timeout_ms", DEFAULT_TIMEOUT_MS)
        elif self.timeout_ms <= 0:
            raise ValueError("timeout_ms must be positive")

    def __repr__(self) -> str:
        return (
            f"LoopConfig(api_key={_redact(self.api_key)!r}, "
            f"base_url={self.base_url!r}, timeout_ms={self.timeout_ms})"
        )

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000.0

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        **overrides: object,
    ) -> "LoopConfig":
        """Build a config from ``PAYLOOPS_*`` environment variables.

        Keyword overrides that are not ``None`` take precedence.
        """
        env = os.environ if environ is None else environ
        timeout_raw = env.get(ENV_TIMEOUT_MS)
        try:
            timeout_ms = int(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT_MS
        except ValueError as exc:
            raise ValueError(f"{ENV_TIMEOUT_MS} must be an integer") from exc

        values = {
            "api_key": env.get(ENV_API_KEY, ""),
            "base_url": env.get(ENV_BASE_URL) or DEFAULT_BASE_URL,
            "timeout_ms": timeout_ms,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)  # type: ignore[arg-type]
