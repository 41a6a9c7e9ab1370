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
"""Retry policy for the client pipeline: options, backoff, predicate, snapshot, middleware."""

from flyretry.client.retry.backoff import BackoffCalculator
from flyretry.client.retry.middleware import RetryMiddleware
from flyretry.client.retry.options import (
    DEFAULT_RETRY_EXCEPTIONS,
    IDEMPOTENT_METHODS,
    RetryCallback,
    RetryOptions,
    RetryPredicate,
    RetryProperties,
)
from flyretry.client.retry.predicate import RetryPredicateEvaluator
from flyretry.client.retry.snapshot import RequestSnapshot

__all__ = [
    "DEFAULT_RETRY_EXCEPTIONS",
    "IDEMPOTENT_METHODS",
    "BackoffCalculator",
    "RequestSnapshot",
    "RetryCallback",
    "RetryMiddleware",
    "RetryOptions",
    "RetryPredicate",
    "RetryPredicateEvaluator",
    "RetryProperties",
]
