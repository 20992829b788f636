from datetime import datetime
from typing import Dict, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from esg_scoring.methodology import ESGBand


class _CamelModel(BaseModel):
    """Snake_case attributes, camelCase on the wire (matches the report UI)."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        frozen = True


# Domain checks (non-negative, 0-100, enumerated categories) are done by
# services.validator so they surface as InvalidInputError naming the field.

class EnvironmentalInputs(_CamelModel):
    scope1_emissions: float = Field(0.0, examples=[1200.5])
    scope2_emissions: float = Field(0.0, examples=[800.0])
    scope3_emissions: float = Field(0.0, examples=[15000.0])
    renewable_energy_percentage: float = Field(0.0, examples=[35.0])
    water_consumption: float = Field(0.0, examples=[8000.0])
    water_stress_area: bool = False
    hazardous_waste: float = Field(0.0, examples=[12.0])
    electronic_waste: float = Field(0.0, examples=[3.5])
    climate_risk_level: str = Field("low", examples=["medium"])


class SocialInputs(_CamelModel):
    total_employees: int = Field(0, examples=[1000])
    gender_diversity_percentage: float = Field(50.0, examples=[42.0])
    training_hours_per_employee: float = Field(0.0, examples=[24.0])
    health_safety_incidents: int = Field(0, examples=[2])
    supply_chain_labour_policy: bool = False
    data_privacy_incidents: int = Field(0, examples=[0])
    community_initiatives: str = ""


class GovernanceInputs(_CamelModel):
    board_size: int = Field(0, examples=[9])
    independent_directors_percentage: float = Field(0.0, examples=[60.0])
    board_diversity_percentage: float = Field(0.0, examples=[33.0])
    anti_corruption_policy: bool = False
    whistleblower_policy: bool = False
    compliance_violations: int = Field(0, examples=[1])
    tax_transparency: bool = False


class ESGScores(_CamelModel):
    environmental_score: float = Field(..., ge=0, le=100)
    social_score: float = Field(..., ge=0, le=100)
    governance_score: float = Field(..., ge=0, le=100)
    composite_score: float = Field(..., ge=0, le=100)
    band: ESGBand
    # pillar -> indicator -> normalized 0-100 score
    indicator_scores: Dict[str, Dict[str, float]] = Field(default_factory=dict)


class ReportContext(_CamelModel):
    organization_name: str = Field(..., min_length=1, examples=["GreenBDG Africa"])
    reporting_year: int = Field(..., ge=1900, le=2100, examples=[2025])
    industry: str = ""
    country: str = ""
    reporting_framework: str = "General ESG"


class SectionCompletion(_CamelModel):
    environmental: bool
    social: bool
    governance: bool

    @property
    def all_complete(self) -> bool:
        return self.environmental and self.social and self.governance


class ESGCalculationRequest(_CamelModel):
    environmental: EnvironmentalInputs
    social: SocialInputs
    governance: GovernanceInputs


class ESGReportRequest(ESGCalculationRequest):
    context: ReportContext


class ESGReportResponse(_CamelModel):
    report_id: str
    context: ReportContext
    scores: ESGScores
    sections: SectionCompletion
    generated_at: Optional[datetime] = None
