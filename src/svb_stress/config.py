"""
SVB STRESS LAB - Configuration & Thresholds

Single source of truth for all numerical constants.
All values are named, documented, and centralized.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class InputRange:
    """Slider bounds for one raw input."""

    label: str
    min_value: float
    max_value: float
    step: float
    unit: str = ""


@dataclass(frozen=True)
class InputRanges:
    """Nominal ranges of the six raw inputs, in driver order."""

    rate_shock_pct: InputRange = InputRange("Interest Rate Shock", 0.0, 6.0, 0.25, "pp")
    uninsured_pct: InputRange = InputRange("Uninsured Deposits", 0.0, 100.0, 1.0, "%")
    duration_years: InputRange = InputRange("Asset Duration", 0.0, 10.0, 0.1, "years")
    unrealized_loss_pct_cap: InputRange = InputRange("Unrealized Losses", 0.0, 120.0, 1.0, "% of capital")
    withdrawal_speed: InputRange = InputRange("Withdrawal Speed", 0.0, 100.0, 1.0)
    concentration: InputRange = InputRange("Deposit Concentration", 0.0, 100.0, 1.0)


@dataclass(frozen=True)
class NormalizationCeilings:
    """Divisors mapping each raw input onto 0-1."""

    rate_shock_pct: float = 6.0
    uninsured_pct: float = 100.0
    duration_years: float = 10.0
    unrealized_loss_pct_cap: float = 120.0  # losses can exceed capital
    withdrawal_speed: float = 100.0
    concentration: float = 100.0


@dataclass(frozen=True)
class ScoreWeights:
    """Hand-chosen driver weights. Must sum to 100."""

    rate_shock: float = 18.0
    uninsured: float = 22.0
    duration: float = 15.0
    losses: float = 18.0
    withdrawal: float = 17.0
    concentration: float = 10.0

    def as_list(self) -> list[float]:
        return [
            self.rate_shock,
            self.uninsured,
            self.duration,
            self.losses,
            self.withdrawal,
            self.concentration,
        ]

    def total(self) -> float:
        return sum(self.as_list())


@dataclass(frozen=True)
class ClassifierThresholds:
    """Score bands. Lower bound belongs to the higher band."""

    at_risk: float = 40.0
    critical: float = 70.0


@dataclass(frozen=True)
class DurationLossConfig:
    """Bounds on the duration x rate-shock price impact estimate (percent)."""

    floor: float = 0.0
    cap: float = 100.0


@dataclass(frozen=True)
class HistoryConfig:
    """Rolling score history shown on the dashboard."""

    max_points: int = 30


@dataclass(frozen=True)
class StressConfig:
    """Master configuration for SVB STRESS LAB."""

    ranges: InputRanges = InputRanges()
    ceilings: NormalizationCeilings = NormalizationCeilings()
    weights: ScoreWeights = ScoreWeights()
    classifier: ClassifierThresholds = ClassifierThresholds()
    duration_loss: DurationLossConfig = DurationLossConfig()
    history: HistoryConfig = HistoryConfig()
