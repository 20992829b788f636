from typing import Dict

from esg_scoring.methodology import (
    Benchmark,
    Indicator,
    IndicatorShape,
    Pillar,
    ScoringMethodology,
)
from esg_scoring.services.validator import ValidatedInputs

MAX_SCORE = 100.0
MIN_SCORE = 0.0

# Indicators whose raw value lives under a different input attribute.
SOURCE_FIELDS = {
    Indicator.COMMUNITY_ENGAGEMENT: "community_initiatives",
}


def _clamp(score: float) -> float:
    return max(MIN_SCORE, min(MAX_SCORE, score))


def normalize_inverse(value: float, best: float, worst: float) -> float:
    """
    Lower is better: emissions, waste, incidents, violations.
    `best` maps to 100, anything at or beyond `worst` maps to 0.
    """
    return _clamp(MAX_SCORE - MAX_SCORE * (value - best) / (worst - best))


def normalize_direct(value: float, best: float, worst: float) -> float:
    """
    Higher is better: percentages and training hours.
    `worst` maps to 0, anything at or beyond `best` maps to 100.
    """
    return _clamp(MAX_SCORE * (value - worst) / (best - worst))


def normalize_flag(value: bool, penalty: bool = False) -> float:
    if penalty:
        return MIN_SCORE if value else MAX_SCORE
    return MAX_SCORE if value else MIN_SCORE


def normalize_presence(text: str) -> float:
    return MAX_SCORE if text and text.strip() else MIN_SCORE


def normalize_indicator(
    indicator: Indicator,
    value,
    benchmark: Benchmark,
    methodology: ScoringMethodology,
) -> float:
    shape = benchmark.shape
    if shape is IndicatorShape.HIGHER_IS_BETTER:
        return normalize_direct(value, best=benchmark.ceiling, worst=benchmark.floor)
    if shape is IndicatorShape.LOWER_IS_BETTER:
        return normalize_inverse(value, best=benchmark.floor, worst=benchmark.ceiling)
    if shape is IndicatorShape.BONUS_FLAG:
        return normalize_flag(value)
    if shape is IndicatorShape.PENALTY_FLAG:
        return normalize_flag(value, penalty=True)
    if shape is IndicatorShape.ORDINAL:
        return float(methodology.climate_risk_scores[value])
    if shape is IndicatorShape.PRESENCE:
        return normalize_presence(value)
    raise ValueError(f"Unsupported indicator shape for {indicator.value}: {shape}")


def _raw_value(inputs: ValidatedInputs, pillar: Pillar, indicator: Indicator):
    if indicator is Indicator.CLIMATE_RISK_LEVEL:
        return inputs.climate_risk_level
    source = getattr(inputs, pillar.value)
    return getattr(source, SOURCE_FIELDS.get(indicator, indicator.value))


def normalize_inputs(
    inputs: ValidatedInputs,
    methodology: ScoringMethodology,
) -> Dict[Pillar, Dict[Indicator, float]]:
    """
    Map every weighted indicator onto the 0-100 goodness scale.
    Returns pillar -> indicator -> score, in methodology order.
    """
    normalized: Dict[Pillar, Dict[Indicator, float]] = {}
    for pillar, weights in methodology.indicator_weights.items():
        normalized[pillar] = {
            indicator: normalize_indicator(
                indicator,
                _raw_value(inputs, pillar, indicator),
                methodology.benchmarks[indicator],
                methodology,
            )
            for indicator in weights
        }
    return normalized
