"""Unit tests for tier classification."""
import itertools

import pytest

from preflight_core.classifier import (
    TIER_REQUIREMENTS,
    classify,
    meets_minimum,
    minimum_requirements_table,
    requirement_checks,
)
from preflight_core.schemas import CapacityTier, InstallMethod, StorageType, SystemFacts


class TestClassify:
    """Tests for the threshold table."""

    @pytest.mark.parametrize("cores, ram, storage, expected", [
        (8, 32, 50, CapacityTier.MORE_THAN_50),
        (4, 4, 20, CapacityTier.UP_TO_50),
        (2, 2, 10, CapacityTier.UP_TO_10),
        (1, 1, 1, CapacityTier.INSUFFICIENT),
        (64, 256, 2000, CapacityTier.MORE_THAN_50),
    ])
    def test_boundaries(self, cores, ram, storage, expected):
        """Exact thresholds land in their tier."""
        assert classify(cores, ram, storage) == expected

    def test_one_short_drops_a_tier(self):
        """Missing any single threshold falls to the next tier down."""
        assert classify(7, 32, 50) == CapacityTier.UP_TO_50
        assert classify(8, 31, 50) == CapacityTier.UP_TO_50
        assert classify(8, 32, 49) == CapacityTier.UP_TO_50
        assert classify(3, 64, 500) == CapacityTier.UP_TO_10
        assert classify(16, 1, 500) == CapacityTier.INSUFFICIENT

    def test_unknown_fails_comparisons(self):
        """Unknown metrics never satisfy a threshold."""
        assert classify(None, 64, 500) == CapacityTier.INSUFFICIENT
        assert classify(16, None, 500) == CapacityTier.INSUFFICIENT
        assert classify(16, 64, None) == CapacityTier.INSUFFICIENT
        assert classify(None, None, None) == CapacityTier.INSUFFICIENT

    def test_monotonic(self):
        """Increasing one metric never lowers the tier."""
        values = [None, 0, 1, 2, 3, 4, 8, 10, 20, 32, 50, 100]
        for cores, ram, storage in itertools.product(values, repeat=3):
            base = classify(cores, ram, storage)
            for bumped in values:
                if bumped is None:
                    continue
                if cores is None or bumped > cores:
                    assert classify(bumped, ram, storage).rank >= base.rank
                if ram is None or bumped > ram:
                    assert classify(cores, bumped, storage).rank >= base.rank
                if storage is None or bumped > storage:
                    assert classify(cores, ram, bumped).rank >= base.rank


class TestTierOrdering:
    """Tests for tier ordering."""

    def test_tiers_are_ordered(self):
        assert CapacityTier.INSUFFICIENT < CapacityTier.UP_TO_10
        assert CapacityTier.UP_TO_10 < CapacityTier.UP_TO_50
        assert CapacityTier.UP_TO_50 < CapacityTier.MORE_THAN_50
        assert max(CapacityTier) == CapacityTier.MORE_THAN_50


class TestRequirementChecks:
    """Tests for the per-metric minimum checks."""

    def test_meets_minimum(self):
        assert meets_minimum(2, 2)
        assert not meets_minimum(1, 2)
        assert not meets_minimum(None, 0)

    def test_checks_use_lowest_tier(self):
        facts = SystemFacts(os_name="Ubuntu 22.04", cpu_cores=2, ram_gb=1, storage_free_gb=10)
        checks = requirement_checks(facts, InstallMethod.NATIVE)
        assert checks.cpu is True
        assert checks.ram is False
        assert checks.storage is True
        assert checks.os is True

    def test_unknown_cores_fail_cpu_check(self):
        facts = SystemFacts(os_name="Ubuntu 22.04", cpu_cores=None, ram_gb=8, storage_free_gb=100)
        assert requirement_checks(facts, InstallMethod.NATIVE).cpu is False

    def test_web_method_fails_os_check(self):
        facts = SystemFacts(
            os_name="FreeBSD", cpu_cores=8, ram_gb=8, storage_free_gb=100,
            storage_type=StorageType.SSD,
        )
        assert requirement_checks(facts, InstallMethod.WEB).os is False


class TestRequirementsTable:
    """Tests for the static requirements table."""

    def test_table_is_static_and_ordered(self):
        table = minimum_requirements_table()
        assert list(table) == ["up_to_10", "up_to_50", "more_than_50"]
        assert table["more_than_50"] == TIER_REQUIREMENTS[CapacityTier.MORE_THAN_50]
        assert table["up_to_10"].cpu_cores == 2
