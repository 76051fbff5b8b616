"""Client configuration: credentials, endpoint root and timeout."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, Field

from mcpchat.chat.errors import ConfigurationError

DEFAULT_BASE_URL = "https://api.abacus.ai"
DEFAULT_TIMEOUT = 30.0

ENV_API_KEY = "ABACUS_API_KEY"
ENV_DEPLOYMENT_TOKEN = "ABACUS_DEPLOYMENT_TOKEN"
ENV_DEPLOYMENT_ID = "ABACUS_DEPLOYMENT_ID"
ENV_BASE_URL = "ABACUS_BASE_URL"
ENV_TIMEOUT = "ABACUS_TIMEOUT"


class ClientConfig(BaseModel):
    """Settings shared by both chat client variants.

    Empty strings count as unset. ``base_url`` and ``timeout`` fall back to
    :data:`DEFAULT_BASE_URL` and :data:`DEFAULT_TIMEOUT`.
    """

    api_key: str = ""
    deployment_token: str = ""
    deployment_id: str = ""
    base_url: str | None = None
    timeout: float | None = Field(default=None, gt=0)

    @property
    def resolved_base_url(self) -> str:
        return (self.base_url or DEFAULT_BASE_URL).rstrip("/")

    @property
    def resolved_timeout(self) -> float:
        return self.timeout or DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ClientConfig:
        """Build a config from ``ABACUS_*`` environment variables."""
        env = os.environ if environ is None else environ
        raw_timeout = env.get(ENV_TIMEOUT)
        try:
            timeout = float(raw_timeout) if raw_timeout else None
        except ValueError as exc:
            msg = f"{ENV_TIMEOUT} must be a number of seconds, got {raw_timeout!r}"
            raise ConfigurationError(msg) from exc
        return cls(
            api_key=env.get(ENV_API_KEY, ""),
            deployment_token=env.get(ENV_DEPLOYMENT_TOKEN, ""),
            deployment_id=env.get(ENV_DEPLOYMENT_ID, ""),
            base_url=env.get(ENV_BASE_URL) or None,
            timeout=timeout,
        )

    def merged_with(self, other: ClientConfig) -> ClientConfig:
        """Return a copy where every unset field is taken from *other*."""
        return ClientConfig(
            api_key=self.api_key or other.api_key,
            deployment_token=self.deployment_token or other.deployment_token,
            deployment_id=self.deployment_id or other.deployment_id,
            base_url=self.base_url or other.base_url,
            timeout=self.timeout or other.timeout,
        )
