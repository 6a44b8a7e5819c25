import logging
from abc import ABC, abstractmethod
from typing import Callable, Optional, TypeVar

import psutil

from preflight_core.config import get_config
from preflight_core.exceptions import DetectionError
from preflight_core.platform import default_disk_path
from preflight_core.schemas import StorageType, SystemFacts
from preflight_core.utils import bytes_to_gb

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Probe failures that degrade a metric to unknown.
PROBE_ERRORS = (DetectionError, OSError, ValueError, psutil.Error)


class PlatformAdapter(ABC):
    """Abstract base class for platform-specific host detection."""

    def __init__(self, disk_path: Optional[str] = None):
        self._disk_path = disk_path

    @property
    def disk_path(self) -> str:
        """Volume whose free space is measured."""
        return self._disk_path or get_config().disk_path or default_disk_path()

    @abstractmethod
    def os_name(self) -> str:
        """Return a human-readable OS name, e.g. 'Ubuntu 22.04'."""
        raise NotImplementedError

    @abstractmethod
    def cpu_cores(self) -> Optional[int]:
        """Return the CPU core count."""
        raise NotImplementedError

    @abstractmethod
    def cpu_model(self) -> Optional[str]:
        """Return the CPU model string."""
        raise NotImplementedError

    @abstractmethod
    def ram_gb(self) -> Optional[int]:
        """Return total RAM in whole GB."""
        raise NotImplementedError

    def storage_free_gb(self) -> Optional[int]:
        """Return free space on the primary volume in whole GB."""
        return bytes_to_gb(psutil.disk_usage(self.disk_path).free)

    def storage_type(self) -> StorageType:
        """Return SSD/HDD when a rotational flag is available."""
        return StorageType.UNKNOWN

    def _probe(self, metric: str, probe: Callable[[], Optional[T]]) -> Optional[T]:
        try:
            value = probe()
        except PROBE_ERRORS as e:
            logger.debug(f"{metric} detection failed: {e}")
            return None
        if value is None or value == "":
            logger.debug(f"{metric} not available on this host")
            return None
        return value

    def collect_facts(self) -> SystemFacts:
        """Query the host and return its facts, degrading failed probes to unknown."""
        os_name = self._probe("os", self.os_name) or "unknown"
        storage_type = self._probe("storage type", self.storage_type) or StorageType.UNKNOWN

        facts = SystemFacts(
            os_name=os_name,
            cpu_cores=self._probe("cpu cores", self.cpu_cores),
            cpu_model=self._probe("cpu model", self.cpu_model),
            ram_gb=self._probe("ram", self.ram_gb),
            storage_free_gb=self._probe("storage", self.storage_free_gb),
            storage_type=storage_type,
        )
        logger.debug(f"Collected facts: {facts}")
        return facts
