"""Pytest configuration and shared fixtures."""

import pytest

from esg_scoring.config import get_methodology
from esg_scoring.schemas.esg import EnvironmentalInputs, GovernanceInputs, SocialInputs


@pytest.fixture(autouse=True)
def reset_methodology_cache():
    """Settings-driven methodology is cached; rebuild it for each test."""
    get_methodology.cache_clear()
    yield
    get_methodology.cache_clear()


# ── Worst-case disclosure: zeros, no policies, high climate risk ──


@pytest.fixture
def zero_environmental():
    return EnvironmentalInputs(climate_risk_level="high")


@pytest.fixture
def zero_social():
    return SocialInputs(gender_diversity_percentage=0)


@pytest.fixture
def zero_governance():
    return GovernanceInputs()


# ── Best-in-class disclosure ──


@pytest.fixture
def best_environmental():
    return EnvironmentalInputs(
        renewable_energy_percentage=100,
        water_stress_area=False,
        climate_risk_level="low",
    )


@pytest.fixture
def best_social():
    return SocialInputs(
        total_employees=250,
        gender_diversity_percentage=100,
        training_hours_per_employee=40,
        supply_chain_labour_policy=True,
        community_initiatives="Local school partnership",
    )


@pytest.fixture
def best_governance():
    return GovernanceInputs(
        board_size=8,
        independent_directors_percentage=100,
        board_diversity_percentage=100,
        anti_corruption_policy=True,
        whistleblower_policy=True,
        tax_transparency=True,
    )


# ── A mid-range disclosure with hand-computed expectations ──
# E = 52.0, S = 72.0, G = 66.0, composite = 62.2 (Advancing)


@pytest.fixture
def sample_environmental():
    return EnvironmentalInputs(
        scope1_emissions=5000,
        scope2_emissions=2500,
        scope3_emissions=25000,
        renewable_energy_percentage=40,
        water_consumption=50000,
        water_stress_area=True,
        hazardous_waste=25,
        electronic_waste=10,
        climate_risk_level="medium",
    )


@pytest.fixture
def sample_social():
    return SocialInputs(
        total_employees=1200,
        gender_diversity_percentage=45,
        training_hours_per_employee=20,
        health_safety_incidents=2,
        supply_chain_labour_policy=True,
        data_privacy_incidents=1,
        community_initiatives="Tree planting and STEM bursaries",
    )


@pytest.fixture
def sample_governance():
    return GovernanceInputs(
        board_size=9,
        independent_directors_percentage=60,
        board_diversity_percentage=40,
        anti_corruption_policy=True,
        whistleblower_policy=False,
        compliance_violations=1,
        tax_transparency=True,
    )


@pytest.fixture
def sample_payload(sample_environmental, sample_social, sample_governance):
    """JSON request body for the sample disclosure, camelCase as the UI sends it."""
    return {
        "environmental": sample_environmental.model_dump(by_alias=True),
        "social": sample_social.model_dump(by_alias=True),
        "governance": sample_governance.model_dump(by_alias=True),
    }
