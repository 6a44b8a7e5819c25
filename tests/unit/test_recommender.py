"""Unit tests for installation recommendations."""
import pytest

from preflight_core.recommender import (
    APT_BOOTSTRAP,
    DNF_BOOTSTRAP,
    INSUFFICIENT_COMMANDS,
    TIER_NOTES,
    recommend,
)
from preflight_core.schemas import CapacityTier, InstallMethod


class TestMethodSelection:
    """Tests for choosing a method by OS name."""

    @pytest.mark.parametrize("os_name, tier, expected", [
        ("Ubuntu 22.04", CapacityTier.UP_TO_10, InstallMethod.NATIVE),
        ("Debian GNU/Linux 12", CapacityTier.UP_TO_50, InstallMethod.NATIVE),
        ("CentOS Stream 9", CapacityTier.UP_TO_50, InstallMethod.NATIVE),
        ("Red Hat Enterprise Linux 9.3", CapacityTier.MORE_THAN_50, InstallMethod.NATIVE),
        ("Windows 11", CapacityTier.UP_TO_50, InstallMethod.WSL),
        ("macOS 14.0", CapacityTier.MORE_THAN_50, InstallMethod.CONTAINER),
        ("FreeBSD", CapacityTier.UP_TO_10, InstallMethod.WEB),
        ("", CapacityTier.UP_TO_10, InstallMethod.WEB),
    ])
    def test_method_by_os(self, os_name, tier, expected):
        assert recommend(os_name, tier).method == expected

    def test_debian_family_uses_apt(self):
        assert recommend("Ubuntu 24.04", CapacityTier.UP_TO_10).setup_commands == APT_BOOTSTRAP

    def test_redhat_family_uses_dnf(self):
        assert recommend("Fedora Linux 40", CapacityTier.UP_TO_10).setup_commands == DNF_BOOTSTRAP

    def test_wsl_commands_mention_wsl(self):
        rec = recommend("Windows 10", CapacityTier.UP_TO_10)
        assert "WSL2" in rec.setup_commands
        assert rec.requires_web_fallback is False

    def test_unsupported_os_requires_web(self):
        rec = recommend("Unknown operating system: SunOS", CapacityTier.MORE_THAN_50)
        assert rec.requires_web_fallback is True
        assert rec.notes == TIER_NOTES[CapacityTier.MORE_THAN_50]


class TestInsufficientTier:
    """Insufficient hardware always falls back to the hosted service."""

    @pytest.mark.parametrize("os_name", [
        "Ubuntu 22.04", "Windows 11", "macOS 14.0", "FreeBSD", "",
    ])
    def test_forces_web(self, os_name):
        rec = recommend(os_name, CapacityTier.INSUFFICIENT)
        assert rec.method == InstallMethod.WEB
        assert rec.requires_web_fallback is True
        assert rec.setup_commands == INSUFFICIENT_COMMANDS


class TestTierNotes:
    """Notes depend on the tier."""

    def test_notes_per_tier(self):
        for tier in (CapacityTier.UP_TO_10, CapacityTier.UP_TO_50, CapacityTier.MORE_THAN_50):
            assert recommend("Ubuntu 22.04", tier).notes == TIER_NOTES[tier]

    def test_enterprise_notes_suggest_split(self):
        notes = recommend("Ubuntu 22.04", CapacityTier.MORE_THAN_50).notes
        assert "base de datos" in notes
