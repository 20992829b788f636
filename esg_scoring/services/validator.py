import math
from dataclasses import dataclass
from numbers import Real
from typing import Callable, Optional, Sequence, Tuple

from pydantic import BaseModel

from esg_scoring.errors import InvalidInputError
from esg_scoring.methodology import ClimateRiskLevel
from esg_scoring.schemas.esg import EnvironmentalInputs, GovernanceInputs, SocialInputs


@dataclass(frozen=True)
class ValidatedInputs:
    environmental: EnvironmentalInputs
    social: SocialInputs
    governance: GovernanceInputs
    climate_risk_level: ClimateRiskLevel


def _finite(value) -> Optional[str]:
    if isinstance(value, bool) or not isinstance(value, Real):
        return "must be a number"
    if not math.isfinite(value):
        return "must be a finite number"
    return None


def non_negative(value) -> Optional[str]:
    reason = _finite(value)
    if reason:
        return reason
    if value < 0:
        return "must be non-negative"
    return None


def percentage(value) -> Optional[str]:
    reason = _finite(value)
    if reason:
        return reason
    if not 0 <= value <= 100:
        return "must be within 0-100"
    return None


def climate_category(value) -> Optional[str]:
    try:
        ClimateRiskLevel(value)
    except ValueError:
        return "not a recognized category value"
    return None


Rule = Tuple[str, Callable[[object], Optional[str]]]

ENVIRONMENTAL_RULES: Sequence[Rule] = (
    ("scope1_emissions", non_negative),
    ("scope2_emissions", non_negative),
    ("scope3_emissions", non_negative),
    ("renewable_energy_percentage", percentage),
    ("water_consumption", non_negative),
    ("hazardous_waste", non_negative),
    ("electronic_waste", non_negative),
    ("climate_risk_level", climate_category),
)

SOCIAL_RULES: Sequence[Rule] = (
    ("total_employees", non_negative),
    ("gender_diversity_percentage", percentage),
    ("training_hours_per_employee", non_negative),
    ("health_safety_incidents", non_negative),
    ("data_privacy_incidents", non_negative),
)

GOVERNANCE_RULES: Sequence[Rule] = (
    ("board_size", non_negative),
    ("independent_directors_percentage", percentage),
    ("board_diversity_percentage", percentage),
    ("compliance_violations", non_negative),
)


def wire_name(model: BaseModel, attr: str) -> str:
    info = type(model).model_fields.get(attr)
    if info is not None and info.alias:
        return info.alias
    return attr


def _check(model: BaseModel, rules: Sequence[Rule]) -> None:
    for attr, rule in rules:
        reason = rule(getattr(model, attr))
        if reason:
            raise InvalidInputError(wire_name(model, attr), reason)


def validate_inputs(
    environmental: EnvironmentalInputs,
    social: SocialInputs,
    governance: GovernanceInputs,
) -> ValidatedInputs:
    """
    Check every pillar before any scoring work starts.
    Raises InvalidInputError on the first out-of-domain field.
    Zero is a valid reading everywhere and is never rejected.
    """
    _check(environmental, ENVIRONMENTAL_RULES)
    _check(social, SOCIAL_RULES)
    _check(governance, GOVERNANCE_RULES)

    return ValidatedInputs(
        environmental=environmental,
        social=social,
        governance=governance,
        climate_risk_level=ClimateRiskLevel(environmental.climate_risk_level),
    )
