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
"""Client test fixtures: stub transports and a recording sleep."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from flyretry.client.request import RequestContext


class UnstableTransport:
    """Transport stub that delegates every attempt to ``handler(request, call_number)``."""

    def __init__(self, handler: Callable[[RequestContext, int], Any]) -> None:
        self._handler = handler
        self.calls = 0
        self.closed = False

    async def send(self, request: RequestContext) -> Any:
        self.calls += 1
        return self._handler(request, self.calls)

    async def close(self) -> None:
        self.closed = True


class SleepRecorder:
    """Awaitable sleep replacement that records requested delays."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


@pytest.fixture
def unstable_transport() -> Callable[[Callable[[RequestContext, int], Any]], UnstableTransport]:
    """Factory fixture for stub transports.

    Usage:
        def test_something(unstable_transport):
            transport = unstable_transport(lambda request, n: "ok")
    """
    return UnstableTransport


@pytest.fixture
def timing_out() -> Callable[[RequestContext, int], Any]:
    """Handler that fails every attempt with ``TimeoutError``."""

    def handler(request: RequestContext, number: int) -> Any:
        raise TimeoutError("timed out")

    return handler


@pytest.fixture
def sleep_recorder() -> SleepRecorder:
    return SleepRecorder()
