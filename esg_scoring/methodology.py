"""ESG scoring methodology: enums and the named configuration tables.

Every policy number the engine uses (benchmark floors and ceilings, indicator
and pillar weights, band thresholds, the climate-risk ordinal table) lives
here, so the methodology can be tuned without touching the scoring code.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from esg_scoring.errors import MethodologyError

WEIGHT_TOLERANCE = 1e-9


class Pillar(str, Enum):
    """Top-level scoring category."""
    ENVIRONMENTAL = "environmental"
    SOCIAL = "social"
    GOVERNANCE = "governance"


class Indicator(str, Enum):
    """Scored indicators. Values match the input attribute they read from."""
    # Environmental
    SCOPE1_EMISSIONS = "scope1_emissions"
    SCOPE2_EMISSIONS = "scope2_emissions"
    SCOPE3_EMISSIONS = "scope3_emissions"
    RENEWABLE_ENERGY_PERCENTAGE = "renewable_energy_percentage"
    WATER_CONSUMPTION = "water_consumption"
    WATER_STRESS_AREA = "water_stress_area"
    HAZARDOUS_WASTE = "hazardous_waste"
    ELECTRONIC_WASTE = "electronic_waste"
    CLIMATE_RISK_LEVEL = "climate_risk_level"
    # Social
    GENDER_DIVERSITY_PERCENTAGE = "gender_diversity_percentage"
    TRAINING_HOURS_PER_EMPLOYEE = "training_hours_per_employee"
    HEALTH_SAFETY_INCIDENTS = "health_safety_incidents"
    SUPPLY_CHAIN_LABOUR_POLICY = "supply_chain_labour_policy"
    DATA_PRIVACY_INCIDENTS = "data_privacy_incidents"
    COMMUNITY_ENGAGEMENT = "community_engagement"
    # Governance
    INDEPENDENT_DIRECTORS_PERCENTAGE = "independent_directors_percentage"
    BOARD_DIVERSITY_PERCENTAGE = "board_diversity_percentage"
    ANTI_CORRUPTION_POLICY = "anti_corruption_policy"
    WHISTLEBLOWER_POLICY = "whistleblower_policy"
    COMPLIANCE_VIOLATIONS = "compliance_violations"
    TAX_TRANSPARENCY = "tax_transparency"


class IndicatorShape(str, Enum):
    """How a raw indicator value maps onto the 0-100 goodness scale."""
    HIGHER_IS_BETTER = "higher_is_better"
    LOWER_IS_BETTER = "lower_is_better"
    BONUS_FLAG = "bonus_flag"
    PENALTY_FLAG = "penalty_flag"
    ORDINAL = "ordinal"
    PRESENCE = "presence"


class ClimateRiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ESGBand(str, Enum):
    """Qualitative rating derived from the composite score."""
    LEADING = "Leading"
    ADVANCING = "Advancing"
    DEVELOPING = "Developing"
    LAGGING = "Lagging"


LINEAR_SHAPES = (IndicatorShape.HIGHER_IS_BETTER, IndicatorShape.LOWER_IS_BETTER)


@dataclass(frozen=True)
class Benchmark:
    """Reference values used to scale one indicator."""
    shape: IndicatorShape
    ceiling: Optional[float] = None
    floor: float = 0.0
    unit: str = ""

    def to_dict(self) -> dict:
        return {
            "shape": self.shape.value,
            "floor": self.floor,
            "ceiling": self.ceiling,
            "unit": self.unit,
        }


def _pct() -> Benchmark:
    return Benchmark(IndicatorShape.HIGHER_IS_BETTER, ceiling=100.0, unit="%")


DEFAULT_BENCHMARKS: Dict[Indicator, Benchmark] = {
    Indicator.SCOPE1_EMISSIONS: Benchmark(IndicatorShape.LOWER_IS_BETTER, 10_000.0, unit="tCO2e"),
    Indicator.SCOPE2_EMISSIONS: Benchmark(IndicatorShape.LOWER_IS_BETTER, 10_000.0, unit="tCO2e"),
    Indicator.SCOPE3_EMISSIONS: Benchmark(IndicatorShape.LOWER_IS_BETTER, 50_000.0, unit="tCO2e"),
    Indicator.RENEWABLE_ENERGY_PERCENTAGE: _pct(),
    Indicator.WATER_CONSUMPTION: Benchmark(IndicatorShape.LOWER_IS_BETTER, 100_000.0, unit="m3"),
    Indicator.WATER_STRESS_AREA: Benchmark(IndicatorShape.PENALTY_FLAG),
    Indicator.HAZARDOUS_WASTE: Benchmark(IndicatorShape.LOWER_IS_BETTER, 100.0, unit="t"),
    Indicator.ELECTRONIC_WASTE: Benchmark(IndicatorShape.LOWER_IS_BETTER, 50.0, unit="t"),
    Indicator.CLIMATE_RISK_LEVEL: Benchmark(IndicatorShape.ORDINAL),
    Indicator.GENDER_DIVERSITY_PERCENTAGE: _pct(),
    Indicator.TRAINING_HOURS_PER_EMPLOYEE: Benchmark(IndicatorShape.HIGHER_IS_BETTER, 40.0, unit="h/yr"),
    Indicator.HEALTH_SAFETY_INCIDENTS: Benchmark(IndicatorShape.LOWER_IS_BETTER, 10.0, unit="incidents"),
    Indicator.SUPPLY_CHAIN_LABOUR_POLICY: Benchmark(IndicatorShape.BONUS_FLAG),
    Indicator.DATA_PRIVACY_INCIDENTS: Benchmark(IndicatorShape.LOWER_IS_BETTER, 5.0, unit="incidents"),
    Indicator.COMMUNITY_ENGAGEMENT: Benchmark(IndicatorShape.PRESENCE),
    Indicator.INDEPENDENT_DIRECTORS_PERCENTAGE: _pct(),
    Indicator.BOARD_DIVERSITY_PERCENTAGE: _pct(),
    Indicator.ANTI_CORRUPTION_POLICY: Benchmark(IndicatorShape.BONUS_FLAG),
    Indicator.WHISTLEBLOWER_POLICY: Benchmark(IndicatorShape.BONUS_FLAG),
    Indicator.COMPLIANCE_VIOLATIONS: Benchmark(IndicatorShape.LOWER_IS_BETTER, 5.0, unit="violations"),
    Indicator.TAX_TRANSPARENCY: Benchmark(IndicatorShape.BONUS_FLAG),
}

DEFAULT_INDICATOR_WEIGHTS: Dict[Pillar, Dict[Indicator, float]] = {
    Pillar.ENVIRONMENTAL: {
        Indicator.SCOPE1_EMISSIONS: 0.15,
        Indicator.SCOPE2_EMISSIONS: 0.10,
        Indicator.SCOPE3_EMISSIONS: 0.10,
        Indicator.RENEWABLE_ENERGY_PERCENTAGE: 0.20,
        Indicator.WATER_CONSUMPTION: 0.10,
        Indicator.WATER_STRESS_AREA: 0.05,
        Indicator.HAZARDOUS_WASTE: 0.10,
        Indicator.ELECTRONIC_WASTE: 0.05,
        Indicator.CLIMATE_RISK_LEVEL: 0.15,
    },
    Pillar.SOCIAL: {
        Indicator.GENDER_DIVERSITY_PERCENTAGE: 0.20,
        Indicator.TRAINING_HOURS_PER_EMPLOYEE: 0.20,
        Indicator.HEALTH_SAFETY_INCIDENTS: 0.20,
        Indicator.SUPPLY_CHAIN_LABOUR_POLICY: 0.15,
        Indicator.DATA_PRIVACY_INCIDENTS: 0.15,
        Indicator.COMMUNITY_ENGAGEMENT: 0.10,
    },
    Pillar.GOVERNANCE: {
        Indicator.INDEPENDENT_DIRECTORS_PERCENTAGE: 0.25,
        Indicator.BOARD_DIVERSITY_PERCENTAGE: 0.15,
        Indicator.ANTI_CORRUPTION_POLICY: 0.15,
        Indicator.WHISTLEBLOWER_POLICY: 0.10,
        Indicator.COMPLIANCE_VIOLATIONS: 0.25,
        Indicator.TAX_TRANSPARENCY: 0.10,
    },
}

DEFAULT_PILLAR_WEIGHTS: Dict[Pillar, float] = {
    Pillar.ENVIRONMENTAL: 0.4,
    Pillar.SOCIAL: 0.3,
    Pillar.GOVERNANCE: 0.3,
}

# Inclusive lower bounds, evaluated top-down; first match wins.
BAND_THRESHOLDS: Tuple[Tuple[float, ESGBand], ...] = (
    (80.0, ESGBand.LEADING),
    (60.0, ESGBand.ADVANCING),
    (40.0, ESGBand.DEVELOPING),
    (0.0, ESGBand.LAGGING),
)

CLIMATE_RISK_SCORES: Dict[ClimateRiskLevel, float] = {
    ClimateRiskLevel.LOW: 100.0,
    ClimateRiskLevel.MEDIUM: 50.0,
    ClimateRiskLevel.HIGH: 0.0,
}


def _check_weights(label: str, weights: Mapping) -> None:
    if not weights:
        raise MethodologyError(f"{label}: no weights configured")
    for key, weight in weights.items():
        if not math.isfinite(weight) or weight < 0:
            raise MethodologyError(f"{label}: weight for {key.value} must be non-negative")
    total = math.fsum(weights.values())
    if abs(total - 1.0) > WEIGHT_TOLERANCE:
        raise MethodologyError(f"{label}: weights sum to {total}, expected 1.0")


@dataclass(frozen=True)
class ScoringMethodology:
    """Immutable scoring configuration, verified once at construction."""
    benchmarks: Mapping[Indicator, Benchmark] = field(
        default_factory=lambda: dict(DEFAULT_BENCHMARKS)
    )
    indicator_weights: Mapping[Pillar, Mapping[Indicator, float]] = field(
        default_factory=lambda: {p: dict(w) for p, w in DEFAULT_INDICATOR_WEIGHTS.items()}
    )
    pillar_weights: Mapping[Pillar, float] = field(
        default_factory=lambda: dict(DEFAULT_PILLAR_WEIGHTS)
    )
    band_thresholds: Tuple[Tuple[float, ESGBand], ...] = BAND_THRESHOLDS
    climate_risk_scores: Mapping[ClimateRiskLevel, float] = field(
        default_factory=lambda: dict(CLIMATE_RISK_SCORES)
    )

    def __post_init__(self):
        # Freeze the tables so a shared methodology cannot drift between calls.
        object.__setattr__(self, "benchmarks", MappingProxyType(dict(self.benchmarks)))
        object.__setattr__(
            self,
            "indicator_weights",
            MappingProxyType(
                {p: MappingProxyType(dict(w)) for p, w in self.indicator_weights.items()}
            ),
        )
        object.__setattr__(self, "pillar_weights", MappingProxyType(dict(self.pillar_weights)))
        object.__setattr__(self, "band_thresholds", tuple(self.band_thresholds))
        object.__setattr__(
            self, "climate_risk_scores", MappingProxyType(dict(self.climate_risk_scores))
        )
        self._validate()

    def _validate(self) -> None:
        if set(self.pillar_weights) != set(Pillar):
            raise MethodologyError("pillar weights must cover environmental, social and governance")
        _check_weights("pillar weights", self.pillar_weights)

        if set(self.indicator_weights) != set(Pillar):
            raise MethodologyError("indicator weights must be configured for every pillar")
        seen = set()
        for pillar, weights in self.indicator_weights.items():
            _check_weights(f"{pillar.value} indicator weights", weights)
            for indicator in weights:
                if indicator in seen:
                    raise MethodologyError(f"{indicator.value} is weighted in more than one pillar")
                seen.add(indicator)
                benchmark = self.benchmarks.get(indicator)
                if benchmark is None:
                    raise MethodologyError(f"{indicator.value} has no benchmark")
                if benchmark.shape in LINEAR_SHAPES and (
                    benchmark.ceiling is None or benchmark.ceiling <= benchmark.floor
                ):
                    raise MethodologyError(
                        f"{indicator.value}: benchmark ceiling must be greater than floor"
                    )

        if not self.band_thresholds:
            raise MethodologyError("band thresholds are empty")
        bounds = [bound for bound, _ in self.band_thresholds]
        if any(hi <= lo for hi, lo in zip(bounds, bounds[1:])):
            raise MethodologyError("band thresholds must be strictly descending")
        if bounds[-1] != 0.0:
            raise MethodologyError("lowest band threshold must be 0 so every score has a band")

        if set(self.climate_risk_scores) != set(ClimateRiskLevel):
            raise MethodologyError("climate risk scores must cover low, medium and high")
        for level, score in self.climate_risk_scores.items():
            if not 0.0 <= score <= 100.0:
                raise MethodologyError(f"climate risk score for {level.value} must be within 0-100")

    def pillar_of(self, indicator: Indicator) -> Pillar:
        for pillar, weights in self.indicator_weights.items():
            if indicator in weights:
                return pillar
        raise KeyError(indicator)

    def with_pillar_weights(self, **weights: float) -> "ScoringMethodology":
        """Copy of this methodology with some pillar weights replaced."""
        merged = dict(self.pillar_weights)
        for name, weight in weights.items():
            merged[Pillar(name)] = weight
        return ScoringMethodology(
            benchmarks=self.benchmarks,
            indicator_weights=self.indicator_weights,
            pillar_weights=merged,
            band_thresholds=self.band_thresholds,
            climate_risk_scores=self.climate_risk_scores,
        )

    def to_dict(self) -> dict:
        return {
            "pillar_weights": {p.value: w for p, w in self.pillar_weights.items()},
            "indicators": {
                pillar.value: {
                    indicator.value: {
                        "weight": weight,
                        **self.benchmarks[indicator].to_dict(),
                    }
                    for indicator, weight in weights.items()
                }
                for pillar, weights in self.indicator_weights.items()
            },
            "band_thresholds": [
                {"band": band.value, "min_score": bound} for bound, band in self.band_thresholds
            ],
            "climate_risk_scores": {
                level.value: score for level, score in self.climate_risk_scores.items()
            },
        }


DEFAULT_METHODOLOGY = ScoringMethodology()
