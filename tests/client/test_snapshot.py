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
"""Tests for RequestSnapshot."""

from flyretry.client.request import RequestContext
from flyretry.client.retry.snapshot import RequestSnapshot


class TestRequestSnapshot:
    def test_restore_undoes_body_replacement(self):
        request = RequestContext(method="POST", url="/orders", body=b"payload")
        snapshot = RequestSnapshot.capture(request)

        request.body = None
        snapshot.restore(request)

        assert request.body == b"payload"

    def test_restore_undoes_in_place_mutation(self):
        request = RequestContext(method="POST", url="/orders", body={"items": [1, 2]})
        snapshot = RequestSnapshot.capture(request)

        request.body["items"].append(3)
        request.headers["X-Attempt"] = "1"
        request.params["page"] = 2
        snapshot.restore(request)

        assert request.body == {"items": [1, 2]}
        assert request.headers == {}
        assert request.params == {}

    def test_restored_body_is_a_fresh_copy(self):
        request = RequestContext(method="PUT", url="/orders/1", body={"qty": 1})
        snapshot = RequestSnapshot.capture(request)

        snapshot.restore(request).body["qty"] = 99
        snapshot.restore(request)

        assert request.body == {"qty": 1}

    def test_capture_is_independent_of_original_objects(self):
        body = {"qty": 1}
        request = RequestContext(method="POST", url="/orders", body=body)
        snapshot = RequestSnapshot.capture(request)

        body["qty"] = 2

        assert snapshot.body == {"qty": 1}

    def test_response_slots_are_left_alone(self):
        request = RequestContext(method="GET", url="/orders")
        snapshot = RequestSnapshot.capture(request)

        request.response_body = b"error page"
        snapshot.restore(request)

        assert request.response_body == b"error page"
        assert request.url == "/orders"
