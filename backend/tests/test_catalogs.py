"""Tests for green metrics, sustainability goals and incentives."""
import pytest

from app.analysis.catalogs import get_green_incentives, get_green_metrics, get_sustainability_goals
from app.analysis.exceptions import InvalidArgumentError


class TestGreenMetrics:
    def test_size_scaled_metrics(self, fixed_now):
        metrics = {m.metric: m for m in get_green_metrics("Technology & IT", 1000, as_of=fixed_now)}
        assert metrics["Carbon Emissions"].value == 500
        assert metrics["Carbon Emissions"].target == 300
        assert metrics["Water Consumption"].value == 10_000
        assert metrics["Water Consumption"].target == 7_000

    def test_constant_metrics_ignore_size(self, fixed_now):
        small = get_green_metrics("Technology & IT", 10, as_of=fixed_now)
        large = get_green_metrics("Technology & IT", 10_000, as_of=fixed_now)
        for index in (1, 3, 4):
            assert small[index] == large[index]
        assert [m.value for m in small if m.metric in ("Renewable Energy Usage", "Waste Recycled", "Female Workforce")] == [25, 65, 45]

    def test_shape_and_timestamp(self, fixed_now):
        metrics = get_green_metrics("Pharmaceuticals", 1, as_of=fixed_now)
        assert [m.metric for m in metrics] == [
            "Carbon Emissions",
            "Renewable Energy Usage",
            "Water Consumption",
            "Waste Recycled",
            "Female Workforce",
        ]
        assert all(m.last_updated == "2026-01-15T12:00:00.000Z" for m in metrics)
        assert [m.trend for m in metrics] == ["stable", "improving", "improving", "stable", "improving"]

    def test_non_finite_investment_size_rejected(self):
        with pytest.raises(InvalidArgumentError):
            get_green_metrics("Pharmaceuticals", float("inf"))

    def test_defaults_to_current_time(self):
        assert get_green_metrics("Pharmaceuticals", 1)[0].last_updated.endswith("Z")


class TestGoalsAndIncentives:
    def test_goals_catalog(self):
        goals = get_sustainability_goals("Textile & Garments")
        assert [g.id for g in goals] == ["goal-001", "goal-002", "goal-003", "goal-004"]
        assert [g.related_sdg for g in goals] == [13, 12, 5, 11]
        assert goals[2].status == "at-risk"

    def test_goals_same_for_every_sector(self):
        assert get_sustainability_goals("Technology & IT") == get_sustainability_goals("Unknown")

    def test_returned_lists_are_copies(self):
        goals = get_sustainability_goals("Technology & IT")
        goals.clear()
        assert len(get_sustainability_goals("Technology & IT")) == 4

    def test_incentives_catalog(self):
        incentives = get_green_incentives()
        assert [i.name for i in incentives] == [
            "Green Factory Certification Bonus",
            "Renewable Energy Subsidy",
            "ETP Installation Grant",
            "Green Bond Financing",
        ]
        assert incentives[3].eligibility == "ESG score > 70"
