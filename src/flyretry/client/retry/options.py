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
"""Immutable retry configuration shared by every request of a client."""

from __future__ import annotations

import math
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field

from flyretry.client.request import RequestContext
from flyretry.core.config import config_properties
from flyretry.kernel.exceptions import OperationTimeoutException, ValidationException

RetryPredicate = Callable[[RequestContext, BaseException], bool | Awaitable[bool]]
RetryCallback = Callable[[RequestContext, int, BaseException, float], Awaitable[None] | None]

DEFAULT_RETRY_EXCEPTIONS: tuple[type[BaseException], ...] = (
    TimeoutError,
    httpx.TimeoutException,
    OperationTimeoutException,
)

IDEMPOTENT_METHODS: frozenset[str] = frozenset({"GET"})


def _seconds(value: float | timedelta) -> float:
    if isinstance(value, timedelta):
        return value.total_seconds()
    return float(value)


@dataclass(frozen=True)
class RetryOptions:
    """Retry policy for one client configuration.

    Args:
        max_retries: Retries allowed after the initial attempt.
        interval: Delay before the first retry, in seconds or as a timedelta.
        backoff_factor: Multiplier applied to the delay for each further retry.
        interval_randomness: Extra random fraction (0..1) of the delay added
            on top of it.
        max_interval: Upper bound for a single delay.
        exceptions: Exception classes that make a failure retryable.
        methods: HTTP methods retried without consulting ``retry_if``.
        retry_if: ``(request, error) -> bool`` deciding whether a request with
            any other method is retried. May return an awaitable.
        retry_block: ``(request, retry_count, error, delay)`` called before
            each wait. May return an awaitable.
    """

    max_retries: int = 2
    interval: float | timedelta = 0.0
    backoff_factor: float = 1.0
    interval_randomness: float = 0.0
    max_interval: float | timedelta = math.inf
    exceptions: tuple[type[BaseException], ...] = DEFAULT_RETRY_EXCEPTIONS
    methods: frozenset[str] = field(default=IDEMPOTENT_METHODS)
    retry_if: RetryPredicate | None = None
    retry_block: RetryCallback | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "interval", _seconds(self.interval))
        object.__setattr__(self, "max_interval", _seconds(self.max_interval))
        methods = (self.methods,) if isinstance(self.methods, str) else self.methods
        object.__setattr__(self, "methods", frozenset(m.upper() for m in methods))
        if isinstance(self.exceptions, type):
            object.__setattr__(self, "exceptions", (self.exceptions,))
        else:
            object.__setattr__(self, "exceptions", tuple(self.exceptions))
        self._validate()

    def _validate(self) -> None:
        problems: list[str] = []
        if not isinstance(self.max_retries, int) or isinstance(self.max_retries, bool):
            problems.append(f"max_retries must be an integer, got {self.max_retries!r}")
        elif self.max_retries < 0:
            problems.append(f"max_retries must be >= 0, got {self.max_retries}")
        if self.interval < 0:
            problems.append(f"interval must be >= 0, got {self.interval}")
        if self.max_interval < 0:
            problems.append(f"max_interval must be >= 0, got {self.max_interval}")
        if self.backoff_factor < 1:
            problems.append(f"backoff_factor must be >= 1, got {self.backoff_factor}")
        if not 0 <= self.interval_randomness <= 1:
            problems.append(f"interval_randomness must be within [0, 1], got {self.interval_randomness}")
        if not self.exceptions:
            problems.append("exceptions must name at least one exception class")
        elif not all(isinstance(e, type) and issubclass(e, BaseException) for e in self.exceptions):
            problems.append("exceptions must only contain exception classes")
        if problems:
            raise ValidationException(
                "Invalid retry options: " + "; ".join(problems),
                code="RETRY_OPTIONS_INVALID",
                context={"problems": problems},
            )

    @classmethod
    def from_max(cls, max_retries: int) -> RetryOptions:
        """Legacy shorthand: defaults for everything except the retry budget."""
        return cls(max_retries=max_retries)

    @classmethod
    def from_properties(cls, properties: RetryProperties, **overrides: Any) -> RetryOptions:
        """Build options from bound configuration.

        Callables and exception classes cannot come from a config file, so
        ``exceptions``, ``retry_if`` and ``retry_block`` are passed as
        *overrides*; any other field may be overridden too.
        """
        values: dict[str, Any] = {
            "max_retries": properties.max_retries,
            "interval": properties.interval,
            "backoff_factor": properties.backoff_factor,
            "interval_randomness": properties.interval_randomness,
            "methods": frozenset(properties.methods),
        }
        if properties.max_interval is not None:
            values["max_interval"] = properties.max_interval
        values.update(overrides)
        return cls(**values)


@config_properties(prefix="flyretry.client.retry")
class RetryProperties(BaseModel):
    """Retry settings bound from the ``flyretry.client.retry`` config section."""

    model_config = ConfigDict(populate_by_name=True)

    max_retries: int = Field(default=2, ge=0, alias="max")
    interval: float = Field(default=0.0, ge=0)
    backoff_factor: float = Field(default=1.0, ge=1, alias="backoff-factor")
    interval_randomness: float = Field(default=0.0, ge=0, le=1, alias="interval-randomness")
    max_interval: float | None = Field(default=None, ge=0, alias="max-interval")
    methods: list[str] = Field(default_factory=lambda: sorted(IDEMPOTENT_METHODS))

