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
"""Tests for BackoffCalculator."""

from datetime import timedelta

import pytest

from flyretry.client.retry.backoff import BackoffCalculator
from flyretry.client.retry.middleware import RetryMiddleware
from flyretry.client.retry.options import RetryOptions


class TestExponentialBackoff:
    def test_grows_as_retries_are_spent(self):
        middleware = RetryMiddleware(RetryOptions(max_retries=5, interval=0.1, backoff_factor=2))
        assert middleware.sleep_amount(5) == pytest.approx(0.1)
        assert middleware.sleep_amount(4) == pytest.approx(0.2)
        assert middleware.sleep_amount(3) == pytest.approx(0.4)

    def test_factor_one_gives_constant_delay(self):
        calc = BackoffCalculator(RetryOptions(max_retries=3, interval=0.25))
        assert [calc.amount(r) for r in (3, 2, 1)] == [0.25, 0.25, 0.25]

    def test_zero_interval_is_zero_regardless_of_factor(self):
        calc = BackoffCalculator(RetryOptions(max_retries=4, backoff_factor=3))
        assert [calc.amount(r) for r in (4, 3, 2, 1)] == [0, 0, 0, 0]

    def test_timedelta_interval(self):
        calc = BackoffCalculator(RetryOptions(max_retries=2, interval=timedelta(milliseconds=200), backoff_factor=2))
        assert calc.amount(2) == pytest.approx(0.2)
        assert calc.amount(1) == pytest.approx(0.4)

    def test_max_interval_caps_delay(self):
        calc = BackoffCalculator(RetryOptions(max_retries=5, interval=1, backoff_factor=10, max_interval=30))
        assert calc.amount(5) == 1
        assert calc.amount(4) == 10
        assert calc.amount(3) == 30
        assert calc.amount(1) == 30

    def test_delay_beyond_float_range_is_capped(self):
        calc = BackoffCalculator(RetryOptions(max_retries=1100, interval=0.1, backoff_factor=2, max_interval=30))
        assert calc.amount(1100) == pytest.approx(0.1)
        assert calc.amount(1) == 30

    def test_float_factor_beyond_float_range_is_capped(self):
        calc = BackoffCalculator(RetryOptions(max_retries=2000, interval=1, backoff_factor=1.5, max_interval=60))
        assert calc.amount(0) == 60


class TestJitter:
    @pytest.mark.parametrize(
        ("randomness", "upper"),
        [(1.0, 0.2), (0.5, 0.15), (0.25, 0.125)],
    )
    def test_random_additional_interval_within_bounds(self, randomness, upper):
        middleware = RetryMiddleware(RetryOptions(max_retries=2, interval=0.1, interval_randomness=randomness))
        for _ in range(50):
            amount = middleware.sleep_amount(2)
            assert 0.1 <= amount <= upper

    @pytest.mark.parametrize(
        ("draw", "expected"),
        [(0.0, 0.1), (0.5, 0.125), (0.999, 0.14995)],
    )
    def test_injected_random_source(self, draw, expected):
        calc = BackoffCalculator(
            RetryOptions(max_retries=2, interval=0.1, interval_randomness=0.5),
            random=lambda: draw,
        )
        assert calc.amount(2) == pytest.approx(expected)

    def test_jitter_scales_with_backoff(self):
        calc = BackoffCalculator(
            RetryOptions(max_retries=3, interval=0.1, backoff_factor=2, interval_randomness=1.0),
            random=lambda: 0.5,
        )
        # base 0.4 on the third retry, plus half of it
        assert calc.amount(1) == pytest.approx(0.6)

    def test_no_randomness_never_draws(self):
        def draw() -> float:
            raise AssertionError("random source must not be used")

        calc = BackoffCalculator(RetryOptions(max_retries=1, interval=0.1), random=draw)
        assert calc.amount(1) == pytest.approx(0.1)
