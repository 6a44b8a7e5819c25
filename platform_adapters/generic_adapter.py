import platform
from typing import Optional

import psutil

from preflight_core.utils import bytes_to_gb

from .base import PlatformAdapter


class GenericAdapter(PlatformAdapter):
    """Best-effort detection for platforms without a dedicated adapter."""

    def os_name(self) -> str:
        return f"Unknown operating system: {platform.system() or 'unknown'}"

    def cpu_cores(self) -> Optional[int]:
        return psutil.cpu_count()

    def cpu_model(self) -> Optional[str]:
        return platform.processor() or None

    def ram_gb(self) -> Optional[int]:
        return bytes_to_gb(psutil.virtual_memory().total)
