from esg_scoring.schemas.esg import (
    EnvironmentalInputs,
    GovernanceInputs,
    SectionCompletion,
    SocialInputs,
)


def section_completion(
    environmental: EnvironmentalInputs,
    social: SocialInputs,
    governance: GovernanceInputs,
) -> SectionCompletion:
    """
    Whether each input section has been filled in enough to report on.
    This is form-level state; scoring itself treats zero as a real reading.
    """
    env_complete = (
        environmental.scope1_emissions > 0
        or environmental.scope2_emissions > 0
        or environmental.scope3_emissions > 0
        or environmental.renewable_energy_percentage > 0
        or environmental.water_consumption > 0
    )
    social_complete = social.total_employees > 0 or social.training_hours_per_employee > 0
    gov_complete = (
        governance.board_size > 0
        or governance.independent_directors_percentage > 0
        or governance.anti_corruption_policy
        or governance.whistleblower_policy
    )
    return SectionCompletion(
        environmental=env_complete,
        social=social_complete,
        governance=gov_complete,
    )
