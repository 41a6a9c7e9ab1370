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
"""Retry middleware for the client request pipeline."""

from __future__ import annotations

import asyncio
import inspect
import random as _random
from collections.abc import Awaitable, Callable
from typing import Any

import structlog

from flyretry.client.middleware import RequestHandler
from flyretry.client.request import RequestContext
from flyretry.client.retry.backoff import BackoffCalculator
from flyretry.client.retry.options import RetryOptions
from flyretry.client.retry.predicate import RetryPredicateEvaluator
from flyretry.client.retry.snapshot import RequestSnapshot

logger = structlog.get_logger("flyretry.client.retry")


class RetryMiddleware:
    """Re-invokes the next handler when it fails with a retryable error.

    A request is attempted at most ``max_retries + 1`` times. Every attempt
    resends the request exactly as it was before the first one. When the
    request is not retried, or the budget runs out, the error raised by the
    last attempt propagates unchanged.

        retry = RetryMiddleware(RetryOptions(max_retries=3, interval=0.5, backoff_factor=2))
        response = await retry.handle(request, transport.send)

    The middleware holds no per-request state and can serve concurrent
    requests.

    Args:
        options: Retry policy; defaults to ``RetryOptions()``.
        sleep: Awaitable sleep used between attempts.
        random: Uniform ``[0, 1)`` source for jitter.
    """

    def __init__(
        self,
        options: RetryOptions | None = None,
        *,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
        random: Callable[[], float] = _random.random,
    ) -> None:
        self._options = options or RetryOptions()
        self._sleep = sleep
        self._backoff = BackoffCalculator(self._options, random=random)
        self._evaluator = RetryPredicateEvaluator(self._options)

    @classmethod
    def from_max(
        cls,
        max_retries: int,
        *,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
        random: Callable[[], float] = _random.random,
    ) -> RetryMiddleware:
        """Legacy form: only the number of retries is given."""
        return cls(RetryOptions.from_max(max_retries), sleep=sleep, random=random)

    @property
    def options(self) -> RetryOptions:
        return self._options

    def sleep_amount(self, retries_remaining: int) -> float:
        """Delay before the retry taken while *retries_remaining* are unspent."""
        return self._backoff.amount(retries_remaining)

    async def handle(self, request: RequestContext, next_handler: RequestHandler) -> Any:
        snapshot = RequestSnapshot.capture(request)
        retries_remaining = self._options.max_retries

        while True:
            snapshot.restore(request)
            try:
                return await next_handler(request)
            except asyncio.CancelledError:
                raise
            except self._options.exceptions as exc:
                if not await self._evaluator.should_retry(request, exc):
                    logger.debug(
                        "http_request_not_retried",
                        method=request.method,
                        url=request.url,
                        error_type=type(exc).__name__,
                    )
                    raise
                if retries_remaining <= 0:
                    logger.warning(
                        "http_request_retries_exhausted",
                        method=request.method,
                        url=request.url,
                        attempts=self._options.max_retries + 1,
                        error_type=type(exc).__name__,
                    )
                    raise

                delay = self.sleep_amount(retries_remaining)
                retries_remaining -= 1
                retry_count = self._options.max_retries - retries_remaining
                logger.info(
                    "http_request_retry",
                    method=request.method,
                    url=request.url,
                    attempt=retry_count + 1,
                    retries_remaining=retries_remaining,
                    delay=round(delay, 4),
                    error_type=type(exc).__name__,
                )
                await self._notify(request, retry_count, exc, delay)
                await self._wait(request, delay)

    async def _notify(self, request: RequestContext, retry_count: int, error: BaseException, delay: float) -> None:
        callback = self._options.retry_block
        if callback is None:
            return
        result = callback(request, retry_count, error, delay)
        if inspect.isawaitable(result):
            await result

    async def _wait(self, request: RequestContext, delay: float) -> None:
        try:
            await self._sleep(delay)
        except asyncio.CancelledError:
            logger.info("http_request_retry_cancelled", method=request.method, url=request.url)
            raise
