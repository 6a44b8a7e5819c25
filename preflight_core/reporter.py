"""Build and write the analysis report."""
import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

from .classifier import minimum_requirements_table, requirement_checks
from .config import PreflightConfig
from .exceptions import ReportWriteError
from .schemas import (
    UNKNOWN,
    CapacityTier,
    CpuSection,
    HardwareSection,
    InstallMethod,
    InstallSection,
    OperatingSystemSection,
    Recommendation,
    Report,
    StorageSection,
    SystemFacts,
    WebCredentials,
    WebSetupSection,
)

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def _or_unknown(value):
    return UNKNOWN if value is None else value


def format_timestamp(moment: Optional[datetime] = None) -> str:
    """Format a moment (default: now) as an ISO-8601 UTC timestamp."""
    moment = moment or datetime.now(timezone.utc)
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime(TIMESTAMP_FORMAT)


def build_report(
    facts: SystemFacts,
    tier: CapacityTier,
    recommendation: Recommendation,
    config: Optional[PreflightConfig] = None,
    now: Optional[datetime] = None,
) -> Report:
    """Project facts, tier and recommendation onto the report document.

    Args:
        facts: Detected host facts.
        tier: Capacity tier derived from the facts.
        recommendation: Installation recommendation for the host.
        config: Supplies the hosted-service URL and credential hints.
        now: Timestamp to record; defaults to the current UTC time.

    Returns:
        The report. Everything but the timestamp depends only on the inputs.
    """
    config = config or PreflightConfig()
    method = recommendation.method
    supported = method != InstallMethod.WEB

    return Report(
        analyzed_at=format_timestamp(now),
        operating_system=OperatingSystemSection(name=facts.os_name, compatible=supported),
        hardware=HardwareSection(
            cpu=CpuSection(
                cores=_or_unknown(facts.cpu_cores),
                model=_or_unknown(facts.cpu_model),
            ),
            ram_gb=_or_unknown(facts.ram_gb),
            storage=StorageSection(
                free_gb=_or_unknown(facts.storage_free_gb),
                type=facts.storage_type.value,
            ),
        ),
        tier=tier,
        minimum_requirements=minimum_requirements_table(),
        installation=InstallSection(
            method=method,
            requires_wsl=method == InstallMethod.WSL,
            use_web=recommendation.requires_web_fallback,
            commands=recommendation.setup_commands,
            notes=recommendation.notes,
        ),
        web_setup=WebSetupSection(
            required=recommendation.requires_web_fallback,
            suggested_url=config.web_url,
            credentials=WebCredentials(
                username=config.web_username,
                password=config.web_password_hint,
            ),
        ),
        checks=requirement_checks(facts, method),
    )


def render_report_json(report: Report) -> str:
    """Serialize a report with the document's keys, in document order."""
    data = report.model_dump(mode="json", by_alias=True)
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def write_report(report: Report, path: Union[str, Path]) -> Path:
    """Write the report to a file, replacing any previous one.

    Returns:
        The path written.

    Raises:
        ReportWriteError: If the file cannot be written.
    """
    path = Path(path)
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(render_report_json(report))
    except OSError as e:
        raise ReportWriteError(str(path), str(e)) from e

    logger.debug(f"Report written to {path}")
    return path
