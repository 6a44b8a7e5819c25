"""Core API wiring detection, classification, recommendation and reporting."""
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple

from .classifier import classify_facts
from .config import PreflightConfig, get_config
from .recommender import recommend
from .reporter import build_report, write_report
from .schemas import Report, SystemFacts
from platform_adapters import PlatformAdapter, get_adapter

logger = logging.getLogger(__name__)


def collect_facts(adapter: Optional[PlatformAdapter] = None) -> SystemFacts:
    """Detect host facts with the given adapter, or the one for this platform."""
    adapter = adapter or get_adapter()
    logger.debug(f"Detecting host facts with {type(adapter).__name__}")
    return adapter.collect_facts()


def analyze(
    facts: SystemFacts,
    config: Optional[PreflightConfig] = None,
    now: Optional[datetime] = None,
) -> Report:
    """Classify the facts, pick an install method and build the report."""
    tier = classify_facts(facts)
    recommendation = recommend(facts.os_name, tier)
    logger.debug(f"Tier {tier.value}, method {recommendation.method.value}")
    return build_report(facts, tier, recommendation, config=config or get_config(), now=now)


def run_analysis(
    output_path: Optional[Path] = None,
    adapter: Optional[PlatformAdapter] = None,
    config: Optional[PreflightConfig] = None,
) -> Tuple[Report, Path]:
    """Run the whole pipeline and write the report.

    Args:
        output_path: Report destination; defaults to the configured path.
        adapter: Detection adapter; defaults to the one for this platform.
        config: Configuration; defaults to the global one.

    Returns:
        The report and the path it was written to.

    Raises:
        ReportWriteError: If the report cannot be written.
    """
    config = config or get_config()
    facts = collect_facts(adapter)
    report = analyze(facts, config=config)
    path = write_report(report, output_path or Path(config.output_path))
    return report, path
