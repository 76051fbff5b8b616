"""JsonHttpClient: the shared "POST JSON, parse JSON" helper.

Both chat client variants subclass this. It owns one :class:`httpx.Client`
and issues exactly one request per call: no retries, no streaming.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from mcpchat.chat.errors import (
    APIStatusError,
    ChatConnectionError,
    RequestEncodeError,
    ResponseDecodeError,
)
from mcpchat.utils.telemetry import ATTR_HTTP_PATH, ATTR_HTTP_STATUS

if TYPE_CHECKING:
    from collections.abc import Mapping

    from opentelemetry.trace import Span

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=BaseModel)


class JsonHttpClient:
    """Synchronous JSON-over-HTTP client bound to one base URL.

    Usage::

        with SomeClient(config) as client:
            reply = client.some_call(...)

    An ``http_client`` may be supplied (e.g. with an ``httpx.MockTransport``);
    it is then owned by the caller and not closed here.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float,
        *,
        http_client: httpx.Client | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(base_url=base_url, timeout=timeout)

    def __enter__(self) -> JsonHttpClient:
        return self

    def __exit__(self, *_: object) -> None:
        self.close()

    def close(self) -> None:
        """Release the underlying connection pool."""
        if self._owns_client:
            self._client.close()

    def _auth_headers(self) -> dict[str, str]:
        """Credential headers for every request. Subclasses override."""
        return {}

    def _post_json(
        self,
        path: str,
        body: BaseModel,
        response_model: type[ResponseT],
        *,
        span: Span | None = None,
    ) -> ResponseT:
        """POST *body* to *path* and parse the reply as *response_model*."""
        try:
            payload = json.dumps(body.model_dump(mode="json", by_alias=True, exclude_none=True))
        except (PydanticSerializationError, TypeError, ValueError) as exc:
            raise RequestEncodeError(f"failed to marshal request body: {exc}") from exc

        headers: Mapping[str, str] = {"Content-Type": "application/json", **self._auth_headers()}
        url = self.base_url + path

        if span is not None:
            span.set_attribute(ATTR_HTTP_PATH, path)

        logger.debug("POST %s", url)
        try:
            response = self._client.post(url, content=payload, headers=headers)
        except httpx.TimeoutException as exc:
            raise ChatConnectionError(f"request to {path} timed out: {exc}") from exc
        except httpx.HTTPError as exc:
            raise ChatConnectionError(f"failed to execute request: {exc}") from exc

        if span is not None:
            span.set_attribute(ATTR_HTTP_STATUS, response.status_code)

        if not 200 <= response.status_code < 300:
            logger.debug("POST %s -> %d", url, response.status_code)
            raise APIStatusError(response.status_code, response.text)

        try:
            data: Any = response.json()
        except ValueError as exc:
            raise ResponseDecodeError(f"failed to unmarshal response: {exc}") from exc

        try:
            return response_model.model_validate(data)
        except ValidationError as exc:
            raise ResponseDecodeError(f"unexpected response shape: {exc}") from exc
