"""
Preflight Core Module - Odoo host capacity checks.
"""
__version__ = "0.1.0"

from .exceptions import (
    PreflightError,
    DetectionError,
    ReportWriteError,
)
from .schemas import (
    CapacityTier,
    InstallMethod,
    Recommendation,
    Report,
    StorageType,
    SystemFacts,
)
from .classifier import classify, requirement_checks
from .recommender import recommend
from .config import get_config, get_config_manager

__all__ = [
    "__version__",
    # Exceptions
    "PreflightError",
    "DetectionError",
    "ReportWriteError",
    # Schemas
    "CapacityTier",
    "InstallMethod",
    "Recommendation",
    "Report",
    "StorageType",
    "SystemFacts",
    # Pipeline
    "classify",
    "requirement_checks",
    "recommend",
    # Config
    "get_config",
    "get_config_manager",
]
