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
"""Client middleware pipeline: cross-cutting concerns around request execution."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from typing import Any, Protocol

from flyretry.client.request import RequestContext

RequestHandler = Callable[[RequestContext], Awaitable[Any]]


class ClientMiddleware(Protocol):
    """Middleware that wraps the execution of a request."""

    async def handle(self, request: RequestContext, next_handler: RequestHandler) -> Any: ...


def build_pipeline(middlewares: Iterable[ClientMiddleware], terminal: RequestHandler) -> RequestHandler:
    """Chain *middlewares* around *terminal*; the first middleware is outermost."""
    handler = terminal
    for middleware in reversed(list(middlewares)):
        handler = _link(middleware, handler)
    return handler


def _link(middleware: ClientMiddleware, next_handler: RequestHandler) -> RequestHandler:
    async def invoke(request: RequestContext) -> Any:
        return await middleware.handle(request, next_handler)

    return invoke
