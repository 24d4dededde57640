"""Tests for display formatting."""

from svb_stress.explain.formatting import format_duration_loss, format_input_labels, format_score


class TestFormatting:
    def test_score_one_decimal(self):
        assert format_score(67.55) in ("67.5", "67.6")
        assert format_score(40.0) == "40.0"

    def test_duration_loss(self):
        assert format_duration_loss(60.0) == "~60.0% estimated price impact"

    def test_input_labels(self, svb_inputs):
        labels = format_input_labels(svb_inputs)
        assert labels == {
            "rate_shock_pct": "2.50%",
            "uninsured_pct": "80%",
            "duration_years": "6.5",
            "unrealized_loss_pct_cap": "65%",
            "withdrawal_speed": "85",
            "concentration": "85",
        }
