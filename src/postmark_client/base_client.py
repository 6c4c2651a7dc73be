from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Type, TypeVar

import httpx

from . import __version__
from .config import ClientOptions, settings
from .errors import PostmarkError, build_error
from .models import DefaultHeaderNames, HttpMethod, PostmarkModel, RequestBody

ModelT = TypeVar("ModelT", bound=PostmarkModel)
ClientT = TypeVar("ClientT", bound="BaseClient")

USER_AGENT = f"postmark-client-python - {__version__}"


class BaseClient:
    """Shared request dispatcher for the Postmark REST API.

    Owns authentication headers, URL building, JSON (de)serialization and
    error translation. Endpoint facades such as ``AccountClient`` only build a
    path and a query/body and hand them to one of the ``process_request_*``
    methods.

    An ``httpx.AsyncClient`` may be injected so several facades share one
    connection pool; an injected client is left open on ``aclose()``.
    """

    def __init__(
        self,
        token: Optional[str],
        auth_header: DefaultHeaderNames,
        options: ClientOptions | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        if not token or not token.strip():
            raise PostmarkError("A valid API token must be provided.")

        self.options = options or settings
        self._token = token.strip()
        self._auth_header = auth_header
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(self.options.timeout),
        )
        self._log = logging.getLogger(__name__ + "." + type(self).__name__)

    # ---------------------------------------------------------------
    # Lifecycle
    # ---------------------------------------------------------------

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self: ClientT) -> ClientT:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    # ---------------------------------------------------------------
    # Dispatch
    # ---------------------------------------------------------------

    def _headers(self) -> dict[str, str]:
        return {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
            self._auth_header.value: self._token,
        }

    def _url(self, path: str) -> str:
        return self.options.base_url + path

    async def process_request_without_body(
        self,
        method: HttpMethod,
        path: str,
        query: Mapping[str, Any],
        response_model: Type[ModelT],
    ) -> ModelT:
        """Send a request whose parameters travel in the query string."""
        return await self._process_request(method, path, response_model, params=dict(query))

    async def process_request_with_body(
        self,
        method: HttpMethod,
        path: str,
        body: RequestBody,
        response_model: Type[ModelT],
    ) -> ModelT:
        """Send a request with a JSON body built from a model or a raw dict."""
        payload = body.to_payload() if isinstance(body, PostmarkModel) else dict(body)
        return await self._process_request(method, path, response_model, json=payload)

    async def _process_request(
        self,
        method: HttpMethod,
        path: str,
        response_model: Type[ModelT],
        **kwargs: Any,
    ) -> ModelT:
        self._log.debug("%s %s", method.value, path)
        try:
            resp = await self._client.request(
                method.value,
                self._url(path),
                headers=self._headers(),
                **kwargs,
            )
            resp.raise_for_status()
        except httpx.HTTPError as exc:
            error = build_error(exc)
            self._log.error("%s %s failed: %r", method.value, path, error)
            raise error from exc

        try:
            return response_model.model_validate(resp.json())
        except ValueError as exc:  # bad JSON or pydantic ValidationError
            self._log.error("Unexpected response body for %s %s: %s", method.value, path, exc)
            raise PostmarkError(
                f"Unable to parse response from {path}: {exc}",
                status_code=resp.status_code,
            ) from exc
