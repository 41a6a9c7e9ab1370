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
"""httpx-based transport adapter."""

from __future__ import annotations

from datetime import timedelta
from typing import Any

import httpx

from flyretry.client.request import RequestContext


class HttpxClientAdapter:
    """Transport adapter backed by httpx.AsyncClient.

    Bytes and str bodies are sent as raw content, anything else as JSON.
    With ``raise_for_status`` enabled, 4xx/5xx responses raise
    ``httpx.HTTPStatusError`` after being recorded on the request.
    """

    def __init__(
        self,
        base_url: str = "",
        timeout: timedelta = timedelta(seconds=30),
        headers: dict[str, str] | None = None,
        raise_for_status: bool = False,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout.total_seconds(),
            headers=headers or {},
            transport=transport,
        )
        self._raise_for_status = raise_for_status

    async def send(self, request: RequestContext) -> httpx.Response:
        kwargs: dict[str, Any] = {"headers": request.headers, "params": request.params}
        if isinstance(request.body, (bytes, str)):
            kwargs["content"] = request.body
        elif request.body is not None:
            kwargs["json"] = request.body

        response = await self._client.request(request.method, request.url, **kwargs)
        request.response = response
        request.response_body = response.content
        if self._raise_for_status:
            response.raise_for_status()
        return response

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()
