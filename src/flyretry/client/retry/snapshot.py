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
"""Copy of the outgoing request taken before the first attempt."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any

from flyretry.client.request import RequestContext


@dataclass(frozen=True)
class RequestSnapshot:
    """The method, body, headers and params of a request as first sent."""

    method: str
    body: Any
    headers: dict[str, str]
    params: dict[str, Any]

    @classmethod
    def capture(cls, request: RequestContext) -> RequestSnapshot:
        return cls(
            method=request.method,
            body=copy.deepcopy(request.body),
            headers=dict(request.headers),
            params=copy.deepcopy(request.params),
        )

    def restore(self, request: RequestContext) -> RequestContext:
        """Write fresh copies of the captured state back onto *request*."""
        request.method = self.method
        request.body = copy.deepcopy(self.body)
        request.headers = dict(self.headers)
        request.params = copy.deepcopy(self.params)
        return request
