"""Capacity tier classification."""
from typing import Dict, Optional

from .schemas import CapacityTier, InstallMethod, RequirementChecks, SystemFacts, TierRequirement

# Checked top-down, most demanding tier first.
TIER_REQUIREMENTS: Dict[CapacityTier, TierRequirement] = {
    CapacityTier.MORE_THAN_50: TierRequirement(cpu_cores=8, ram_gb=32, storage_gb=50),
    CapacityTier.UP_TO_50: TierRequirement(cpu_cores=4, ram_gb=4, storage_gb=20),
    CapacityTier.UP_TO_10: TierRequirement(cpu_cores=2, ram_gb=2, storage_gb=10),
}

MINIMUM_TIER = CapacityTier.UP_TO_10


def meets_minimum(value: Optional[int], minimum: int) -> bool:
    """Return True if a detected value satisfies a threshold. Unknown never does."""
    if value is None:
        return False
    return value >= minimum


def classify(cores: Optional[int], ram_gb: Optional[int], storage_gb: Optional[int]) -> CapacityTier:
    """Map hardware facts to the most capable tier they satisfy.

    Args:
        cores: CPU core count, or None if unknown.
        ram_gb: Total RAM in whole GB, or None if unknown.
        storage_gb: Free storage in whole GB, or None if unknown.

    Returns:
        The first tier whose every threshold is met, or INSUFFICIENT.
    """
    for tier, req in TIER_REQUIREMENTS.items():
        if (
            meets_minimum(cores, req.cpu_cores)
            and meets_minimum(ram_gb, req.ram_gb)
            and meets_minimum(storage_gb, req.storage_gb)
        ):
            return tier
    return CapacityTier.INSUFFICIENT


def classify_facts(facts: SystemFacts) -> CapacityTier:
    return classify(facts.cpu_cores, facts.ram_gb, facts.storage_free_gb)


def requirement_checks(facts: SystemFacts, method: InstallMethod) -> RequirementChecks:
    """Check each metric independently against the lowest tier."""
    req = TIER_REQUIREMENTS[MINIMUM_TIER]
    return RequirementChecks(
        cpu=meets_minimum(facts.cpu_cores, req.cpu_cores),
        ram=meets_minimum(facts.ram_gb, req.ram_gb),
        storage=meets_minimum(facts.storage_free_gb, req.storage_gb),
        os=method != InstallMethod.WEB,
    )


def minimum_requirements_table() -> Dict[str, TierRequirement]:
    """Static requirements table keyed by tier name, least demanding first."""
    return {tier.value: TIER_REQUIREMENTS[tier] for tier in reversed(list(TIER_REQUIREMENTS))}
