# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""HTTP service client builder with a middleware pipeline."""

from __future__ import annotations

from datetime import timedelta
from typing import Any

import httpx

from flyretry.client.adapters.httpx_adapter import HttpxClientAdapter
from flyretry.client.middleware import ClientMiddleware, RequestHandler, build_pipeline
from flyretry.client.ports.outbound import HttpClientPort
from flyretry.client.request import RequestContext
from flyretry.client.retry.middleware import RetryMiddleware
from flyretry.client.retry.options import RetryOptions, RetryProperties
from flyretry.core.config import Config


class ServiceClient:
    """HTTP client whose requests run through a middleware pipeline.

    Built on httpx with a fluent builder API:

        client = (ServiceClient.rest("user-service")
            .base_url("http://localhost:8081")
            .timeout(timedelta(seconds=10))
            .retry(RetryOptions(max_retries=3, interval=0.2, backoff_factor=2))
            .build())

        response = await client.get("/users/123")
    """

    def __init__(
        self,
        name: str,
        transport: HttpClientPort,
        middlewares: list[ClientMiddleware] | None = None,
    ) -> None:
        self.name = name
        self._transport = transport
        self._middlewares = list(middlewares or [])
        self._pipeline: RequestHandler = build_pipeline(self._middlewares, transport.send)

    @property
    def middlewares(self) -> list[ClientMiddleware]:
        return list(self._middlewares)

    async def get(self, path: str, **kwargs: Any) -> httpx.Response:
        """Send a GET request."""
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, body: Any = None, **kwargs: Any) -> httpx.Response:
        """Send a POST request."""
        return await self.request("POST", path, body=body, **kwargs)

    async def put(self, path: str, body: Any = None, **kwargs: Any) -> httpx.Response:
        """Send a PUT request."""
        return await self.request("PUT", path, body=body, **kwargs)

    async def patch(self, path: str, body: Any = None, **kwargs: Any) -> httpx.Response:
        """Send a PATCH request."""
        return await self.request("PATCH", path, body=body, **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> httpx.Response:
        """Send a DELETE request."""
        return await self.request("DELETE", path, **kwargs)

    async def request(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        headers: dict[str, str] | None = None,
        params: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Run one logical request through the pipeline."""
        context = RequestContext(
            method=method,
            url=path,
            body=body,
            headers=dict(headers or {}),
            params=dict(params or {}),
        )
        return await self._pipeline(context)

    async def close(self) -> None:
        """Close the underlying transport."""
        await self._transport.close()

    async def __aenter__(self) -> ServiceClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    @staticmethod
    def rest(name: str) -> ServiceClientBuilder:
        """Create a builder for a REST service client."""
        return ServiceClientBuilder(name)

    @staticmethod
    def from_config(name: str, config: Config, **retry_overrides: Any) -> ServiceClient:
        """Build a client from ``flyretry.client`` settings.

        Reads ``flyretry.client.<name>.base-url``, ``flyretry.client.timeout``
        (seconds) and the ``flyretry.client.retry`` section. Settings absent
        from *config* fall back to the ``RetryProperties`` defaults.
        ``retry_overrides`` are passed to ``RetryOptions.from_properties``.
        """
        builder = ServiceClient.rest(name)
        base_url = config.get(f"flyretry.client.{name}.base-url")
        if base_url:
            builder.base_url(str(base_url))
        builder.timeout(timedelta(seconds=float(config.get("flyretry.client.timeout", 30))))
        properties = config.bind(RetryProperties)
        builder.retry(RetryOptions.from_properties(properties, **retry_overrides))
        return builder.build()


class ServiceClientBuilder:
    """Fluent builder for ServiceClient."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._base_url: str = ""
        self._timeout: timedelta = timedelta(seconds=30)
        self._headers: dict[str, str] = {}
        self._raise_for_status = False
        self._retry: RetryMiddleware | None = None
        self._middlewares: list[ClientMiddleware] = []
        self._transport: HttpClientPort | None = None

    def base_url(self, url: str) -> ServiceClientBuilder:
        """Set the base URL for all requests."""
        self._base_url = url
        return self

    def timeout(self, timeout: timedelta) -> ServiceClientBuilder:
        """Set the request timeout."""
        self._timeout = timeout
        return self

    def header(self, name: str, value: str) -> ServiceClientBuilder:
        """Add a default header."""
        self._headers[name] = value
        return self

    def raise_for_status(self, enabled: bool = True) -> ServiceClientBuilder:
        """Raise ``httpx.HTTPStatusError`` for 4xx/5xx responses."""
        self._raise_for_status = enabled
        return self

    def retry(self, options: RetryOptions | None = None) -> ServiceClientBuilder:
        """Enable retries; the retry middleware runs closest to the transport."""
        self._retry = RetryMiddleware(options)
        return self

    def middleware(self, middleware: ClientMiddleware) -> ServiceClientBuilder:
        """Append a middleware; earlier middlewares wrap later ones."""
        self._middlewares.append(middleware)
        return self

    def transport(self, transport: HttpClientPort) -> ServiceClientBuilder:
        """Replace the httpx adapter with another transport."""
        self._transport = transport
        return self

    def build(self) -> ServiceClient:
        """Build the ServiceClient."""
        transport = self._transport or HttpxClientAdapter(
            base_url=self._base_url,
            timeout=self._timeout,
            headers=self._headers,
            raise_for_status=self._raise_for_status,
        )
        middlewares = list(self._middlewares)
        if self._retry is not None:
            middlewares.append(self._retry)
        return ServiceClient(name=self._name, transport=transport, middlewares=middlewares)
