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
"""Unified exception hierarchy for FlyRetry.

Only configuration and infrastructure failures raised by FlyRetry itself
live here. Failures raised by the transport are never wrapped: the retry
middleware re-raises them exactly as the next handler produced them.

Categories:
- BusinessException: invalid configuration and argument errors
- InfrastructureException: timeouts and other downstream failures
"""

from __future__ import annotations


class FlyRetryException(Exception):
    """Base exception for all FlyRetry errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "RETRY_OPTIONS_INVALID").
        context: Arbitrary key-value pairs describing the failure.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Business Exceptions
# =============================================================================


class BusinessException(FlyRetryException):
    """Caller-side errors: bad arguments and invalid configuration."""


class ValidationException(BusinessException):
    """A configuration value failed validation."""


# =============================================================================
# Infrastructure Exceptions
# =============================================================================


class InfrastructureException(FlyRetryException):
    """Failures of the network or of a downstream service."""


class OperationTimeoutException(InfrastructureException):
    """Operation exceeded its allowed time limit.

    Retryable by default, alongside ``TimeoutError`` and
    ``httpx.TimeoutException``.
    """
