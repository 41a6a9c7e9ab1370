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
"""Decides whether a failed request may be sent again."""

from __future__ import annotations

import inspect

from flyretry.client.request import RequestContext
from flyretry.client.retry.options import RetryOptions


class RetryPredicateEvaluator:
    """Applies the idempotency rule and the caller's ``retry_if`` predicate.

    Requests whose method is in ``options.methods`` are always retryable and
    the predicate is never called for them. For every other method the
    predicate decides; without one the request is not retried.
    """

    def __init__(self, options: RetryOptions) -> None:
        self._options = options

    def is_idempotent(self, request: RequestContext) -> bool:
        return request.method.upper() in self._options.methods

    async def should_retry(self, request: RequestContext, error: BaseException) -> bool:
        if self.is_idempotent(request):
            return True
        return await self.should_retry_non_idempotent(request, error)

    async def should_retry_non_idempotent(self, request: RequestContext, error: BaseException) -> bool:
        """Result of ``retry_if(request, error)``, or False when none is configured.

        Errors raised by the predicate propagate to the caller.
        """
        predicate = self._options.retry_if
        if predicate is None:
            return False
        decision = predicate(request, error)
        if inspect.isawaitable(decision):
            decision = await decision
        return bool(decision)
