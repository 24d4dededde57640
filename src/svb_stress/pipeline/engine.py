"""
SVB STRESS LAB - Stress Pipeline Orchestration

Flow: normalize -> score -> classify -> estimate -> explain

Every step is a pure function of the current inputs.
Nothing is cached between calls.
"""

from __future__ import annotations

import logging

from svb_stress.classifier.engine import classify_status
from svb_stress.config import StressConfig
from svb_stress.explain.generator import generate_explanation
from svb_stress.features.duration_loss import estimate_duration_loss_pct
from svb_stress.normalization.normalizer import normalize_inputs
from svb_stress.presets.library import get_preset
from svb_stress.scoring.scorer import compute_stress_score, driver_contributions
from svb_stress.types import StressInputs, StressResult

logger = logging.getLogger(__name__)


class StressPipeline:
    """
    SVB STRESS LAB scoring pipeline.

    Orchestrates: normalize -> score -> classify -> estimate -> explain
    """

    def __init__(self, config: StressConfig | None = None) -> None:
        self.config = config or StressConfig()

    def process(self, inputs: StressInputs) -> StressResult:
        """
        Run the full pipeline on one set of raw inputs.

        Args:
            inputs: Raw slider values.

        Returns:
            StressResult.
        """
        # Step 1: Normalization
        normalized = normalize_inputs(inputs, self.config.ceilings)

        # Step 2: Scoring
        score = compute_stress_score(normalized, self.config.weights)

        # Step 3: Classification
        status = classify_status(score, self.config.classifier)

        # Step 4: Duration-loss estimate (independent of the score)
        duration_loss = estimate_duration_loss_pct(
            inputs.duration_years, inputs.rate_shock_pct, self.config.duration_loss
        )

        # Step 5: Explanation
        contributions = driver_contributions(normalized, self.config.weights)
        narrative, driver_notes = generate_explanation(status, contributions)

        logger.debug(
            f"Stress score {score:.1f} [{status.value}] "
            f"duration_loss={duration_loss:.1f}% inputs={inputs}"
        )

        return StressResult(
            inputs=inputs,
            normalized=normalized,
            score=score,
            status=status,
            duration_loss_pct=duration_loss,
            narrative=narrative,
            drivers=contributions,
            driver_notes=driver_notes,
        )

    def apply_preset(self, name: str) -> StressResult:
        """Replace all inputs with a named preset and rerun the pipeline."""
        inputs = get_preset(name)
        logger.info(f"Applying preset '{name}'")
        return self.process(inputs)
