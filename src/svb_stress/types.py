"""
SVB STRESS LAB - Core Type Definitions

All dataclasses and enums used across the system.
No scoring logic, only data structures.
"""

from __future__ import annotations

import json
import math
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Mapping

# Driver order shared by normalized inputs, weights, and charts
DRIVER_NAMES = [
    "Rate Shock",
    "Uninsured Deposits",
    "Duration",
    "Unrealized Losses",
    "Withdrawal Speed",
    "Concentration",
]

_FIELD_ALIASES = {
    "rateShockPct": "rate_shock_pct",
    "uninsuredPct": "uninsured_pct",
    "durationYears": "duration_years",
    "unrealizedLossPctCap": "unrealized_loss_pct_cap",
    "withdrawalSpeed": "withdrawal_speed",
}


class StressStatus(Enum):
    """Qualitative stress bands."""

    STABLE = "Stable"
    AT_RISK = "At Risk"
    CRITICAL = "Critical"

    @property
    def accent(self) -> str:
        """Visual accent key: good / warn / bad."""
        return {
            StressStatus.STABLE: "good",
            StressStatus.AT_RISK: "warn",
            StressStatus.CRITICAL: "bad",
        }[self]


@dataclass(frozen=True)
class StressInputs:
    """Six raw risk factors. Never validated; the normalizer clamps."""

    rate_shock_pct: float = 0.0  # 0-6 percentage points
    uninsured_pct: float = 0.0  # 0-100 percent
    duration_years: float = 0.0  # 0-10 years
    unrealized_loss_pct_cap: float = 0.0  # 0-120 percent of capital
    withdrawal_speed: float = 0.0  # 0-100 intensity
    concentration: float = 0.0  # 0-100 intensity

    @classmethod
    def from_mapping(cls, values: Mapping[str, object]) -> StressInputs:
        """Build from a dict with snake_case or camelCase keys. Missing keys are 0."""
        kwargs: dict[str, float] = {}
        for key, value in values.items():
            name = _FIELD_ALIASES.get(key, key)
            if name in cls.__dataclass_fields__:
                kwargs[name] = _to_float(value)
        return cls(**kwargs)

    def as_list(self) -> list[float]:
        return [
            self.rate_shock_pct,
            self.uninsured_pct,
            self.duration_years,
            self.unrealized_loss_pct_cap,
            self.withdrawal_speed,
            self.concentration,
        ]

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class NormalizedInputs:
    """Raw inputs mapped onto 0-1 by fixed ceilings."""

    rate_shock: float = 0.0
    uninsured: float = 0.0
    duration: float = 0.0
    losses: float = 0.0
    withdrawal: float = 0.0
    concentration: float = 0.0

    def as_list(self) -> list[float]:
        return [
            self.rate_shock,
            self.uninsured,
            self.duration,
            self.losses,
            self.withdrawal,
            self.concentration,
        ]


@dataclass(frozen=True)
class DriverContribution:
    """Points one driver adds to the stress score."""

    name: str
    intensity: float  # normalized 0-1
    weight: float
    points: float  # weight * intensity


@dataclass(frozen=True)
class StressResult:
    """Final pipeline output for one set of inputs."""

    inputs: StressInputs
    normalized: NormalizedInputs
    score: float
    status: StressStatus
    duration_loss_pct: float
    narrative: str
    drivers: list[DriverContribution] = field(default_factory=list)
    driver_notes: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Serialize to output JSON format."""
        return {
            "inputs": self.inputs.to_dict(),
            "normalized": asdict(self.normalized),
            "stress_score": round(self.score, 1),
            "status": self.status.value,
            "duration_loss_pct": round(self.duration_loss_pct, 1),
            "narrative": self.narrative,
            "drivers": [asdict(d) for d in self.drivers],
            "driver_notes": self.driver_notes,
        }

    def to_json(self) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=2)


def _to_float(value: object) -> float:
    # Malformed values become NaN; clamping maps NaN to the lower bound
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return math.nan
