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
"""Tests for the client middleware pipeline."""

import pytest

from flyretry.client.middleware import build_pipeline
from flyretry.client.request import RequestContext


class Recording:
    def __init__(self, name: str, log: list[str]) -> None:
        self._name = name
        self._log = log

    async def handle(self, request, next_handler):
        self._log.append(f"{self._name}:before")
        result = await next_handler(request)
        self._log.append(f"{self._name}:after")
        return result


class TestBuildPipeline:
    @pytest.mark.asyncio
    async def test_first_middleware_is_outermost(self):
        log: list[str] = []

        async def terminal(request):
            log.append("terminal")
            return "done"

        pipeline = build_pipeline([Recording("a", log), Recording("b", log)], terminal)
        result = await pipeline(RequestContext(method="GET", url="/"))

        assert result == "done"
        assert log == ["a:before", "b:before", "terminal", "b:after", "a:after"]

    @pytest.mark.asyncio
    async def test_empty_pipeline_is_terminal(self):
        async def terminal(request):
            return request.method

        pipeline = build_pipeline([], terminal)
        assert await pipeline(RequestContext(method="delete", url="/")) == "DELETE"
