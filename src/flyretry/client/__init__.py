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
"""FlyRetry Client: HTTP client pipeline with retry middleware."""

from flyretry.client.adapters.httpx_adapter import HttpxClientAdapter
from flyretry.client.middleware import ClientMiddleware, RequestHandler, build_pipeline
from flyretry.client.ports.outbound import HttpClientPort
from flyretry.client.request import RequestContext
from flyretry.client.retry import (
    DEFAULT_RETRY_EXCEPTIONS,
    BackoffCalculator,
    RequestSnapshot,
    RetryMiddleware,
    RetryOptions,
    RetryPredicateEvaluator,
    RetryProperties,
)
from flyretry.client.service_client import ServiceClient, ServiceClientBuilder

__all__ = [
    "DEFAULT_RETRY_EXCEPTIONS",
    "BackoffCalculator",
    "ClientMiddleware",
    "HttpClientPort",
    "HttpxClientAdapter",
    "RequestContext",
    "RequestHandler",
    "RequestSnapshot",
    "RetryMiddleware",
    "RetryOptions",
    "RetryPredicateEvaluator",
    "RetryProperties",
    "ServiceClient",
    "ServiceClientBuilder",
    "build_pipeline",
]
