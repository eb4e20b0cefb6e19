"""Tests for the ROI calculator arithmetic and formatting."""

import pytest

from consultsite.services.calculations import (
    STANDARD_SCENARIOS,
    adjustment_factor,
    calculate_npv,
    calculate_payback_period,
    calculate_roi,
    estimate_roi,
    format_currency,
    format_number,
    format_percentage,
)


class TestFormatting:
    def test_currency_rounds_and_groups(self):
        assert format_currency(1234.5) == "$1,235"
        assert format_currency(0) == "$0"
        assert format_currency(-1234.4) == "-$1,234"

    def test_percentage_rounds_half_up(self):
        assert format_percentage(42.5) == "43%"
        assert format_percentage(12.4) == "12%"

    def test_number_groups_thousands(self):
        assert format_number(1234567.4) == "1,234,567"

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_values_are_not_available(self, value):
        assert format_currency(value) == "N/A"
        assert format_percentage(value) == "N/A"
        assert format_number(value) == "N/A"


class TestFormulas:
    def test_roi(self):
        assert calculate_roi(150, 100) == pytest.approx(50)
        assert calculate_roi(50, 100) == pytest.approx(-50)

    def test_roi_zero_investment(self):
        assert calculate_roi(1000, 0) == 0

    def test_payback_period(self):
        assert calculate_payback_period(1200, 100) == pytest.approx(12)

    def test_payback_without_benefit(self):
        assert calculate_payback_period(1000, 0) == 0
        assert calculate_payback_period(1000, -5) == 0

    def test_npv_breakeven(self):
        assert calculate_npv(1000, 1100, 1, 0.1) == pytest.approx(0, abs=1e-9)

    def test_npv_default_rate(self):
        expected = -100 + 50 / 1.1 + 50 / 1.1**2
        assert calculate_npv(100, 50, 2) == pytest.approx(expected)

    def test_npv_no_benefit(self):
        assert calculate_npv(100, 0, 3) == pytest.approx(-100)


class TestEstimate:
    def test_adjustment_factor_presets(self):
        assert adjustment_factor("medium", "technology") == pytest.approx(1.2)
        assert adjustment_factor("enterprise", "Finance") == pytest.approx(1.8 * 1.4)

    def test_unknown_presets_are_neutral(self):
        assert adjustment_factor("galactic", "astrology") == pytest.approx(1.0)

    def test_scenarios_apply_multipliers(self):
        factor, scenarios = estimate_roi(100_000, 50_000, years=3, company_size="medium", industry="technology")

        assert factor == pytest.approx(1.2)
        assert [s.name for s in scenarios] == [s.name for s in STANDARD_SCENARIOS]

        realistic = {r.label: r for r in scenarios[1].results}
        assert realistic["Annual Benefit"].value == pytest.approx(60_000)
        assert realistic["Total Benefit"].value == pytest.approx(180_000)
        assert realistic["Return on Investment"].value == pytest.approx(80)
        assert realistic["Return on Investment"].formatted == "80%"
        assert realistic["Return on Investment"].is_highlight
        assert realistic["Payback Period"].value == pytest.approx(20)

        conservative = {r.label: r for r in scenarios[0].results}
        assert conservative["Annual Benefit"].formatted == "$42,000"
