"""
SVB STRESS LAB - Dashboard Session State

Holds the only mutable state in the system: the current inputs and
a bounded rolling history of stress scores. The scoring core stays
pure; the dashboard calls into it through on_input_changed().

No Streamlit import here, so the session is usable from tests and scripts.
"""

from __future__ import annotations

import logging
from collections import deque
from datetime import datetime

import pandas as pd

from svb_stress.config import StressConfig
from svb_stress.pipeline.engine import StressPipeline
from svb_stress.presets.library import get_preset
from svb_stress.types import StressInputs, StressResult

logger = logging.getLogger(__name__)


class ScoreHistory:
    """Fixed-capacity queue of (label, score). Oldest point dropped on overflow."""

    def __init__(self, max_points: int = 30) -> None:
        self.max_points = max_points
        self._points: deque[tuple[str, float]] = deque(maxlen=max_points)

    def __len__(self) -> int:
        return len(self._points)

    def append(self, score: float, label: str | None = None) -> None:
        label = label or datetime.now().strftime("%H:%M:%S")
        self._points.append((label, score))

    def labels(self) -> list[str]:
        return [label for label, _ in self._points]

    def scores(self) -> list[float]:
        return [score for _, score in self._points]

    def to_frame(self) -> pd.DataFrame:
        """History as a DataFrame with 'label' and 'stress_score' columns."""
        return pd.DataFrame(list(self._points), columns=["label", "stress_score"])


class DashboardSession:
    """
    Current inputs plus score history for one dashboard session.

    Every computation, whether from a slider move or a preset,
    runs the full pipeline and appends one history point.
    """

    def __init__(self, config: StressConfig | None = None) -> None:
        self.config = config or StressConfig()
        self.pipeline = StressPipeline(self.config)
        self.history = ScoreHistory(self.config.history.max_points)
        self.inputs = StressInputs()
        self.latest: StressResult | None = None

    def on_input_changed(self, inputs: StressInputs, label: str | None = None) -> StressResult:
        """Recompute for new inputs and record the score."""
        self.inputs = inputs
        result = self.pipeline.process(inputs)
        self.history.append(result.score, label)
        self.latest = result
        return result

    def apply_preset(self, name: str, label: str | None = None) -> StressResult:
        """Overwrite all six inputs with a preset, then recompute."""
        inputs = get_preset(name)
        logger.info(f"Session preset '{name}' applied")
        return self.on_input_changed(inputs, label)
