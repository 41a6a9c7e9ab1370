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
"""Delay computation between retry attempts."""

from __future__ import annotations

import random as _random
from collections.abc import Callable

from flyretry.client.retry.options import RetryOptions


class BackoffCalculator:
    """Exponential backoff with optional proportional jitter.

    The wait before retry *n* (zero-based) is ``interval * backoff_factor ** n``.
    With ``interval_randomness = r`` a uniform fraction ``[0, r)`` of that
    value is added, and the result is capped at ``max_interval``.

    Args:
        options: Retry policy supplying the delay parameters.
        random: Uniform source on ``[0, 1)``. Injectable for tests.
    """

    def __init__(self, options: RetryOptions, random: Callable[[], float] = _random.random) -> None:
        self._options = options
        self._random = random

    def amount(self, retries_remaining: int) -> float:
        """Seconds to wait while *retries_remaining* retries are still unspent."""
        options = self._options
        if not options.interval:
            return 0.0
        retry_index = options.max_retries - retries_remaining
        # the growth term can exceed float range long before the budget is spent
        try:
            delay = options.interval * (options.backoff_factor**retry_index)
        except OverflowError:
            return options.max_interval
        if options.interval_randomness:
            delay += delay * options.interval_randomness * self._random()
        return min(delay, options.max_interval)
