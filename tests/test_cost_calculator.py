"""Tests for the API cost estimate."""

import pytest

from matchcraft.logging.cost_calculator import MODEL_PRICING, calculate_cost


class TestCalculateCost:
    def test_empty(self):
        assert calculate_cost([]) == 0.0

    def test_sonnet_pricing(self):
        cost = calculate_cost([("claude-sonnet-4-5-20250929", 1_000_000, 1_000_000)])
        assert cost == pytest.approx(18.0)

    def test_haiku_pricing(self):
        cost = calculate_cost([("claude-haiku-4-5-20251001", 1_000_000, 0)])
        assert cost == pytest.approx(MODEL_PRICING["claude-haiku-4-5-20251001"]["input"])

    def test_sums_calls(self):
        calls = [
            ("claude-sonnet-4-5-20250929", 2000, 1000),
            ("claude-sonnet-4-5-20250929", 2000, 1000),
        ]
        single = calculate_cost(calls[:1])
        assert calculate_cost(calls) == pytest.approx(2 * single)

    def test_unknown_model_is_free(self):
        assert calculate_cost([("some-other-model", 10_000, 10_000)]) == 0.0
