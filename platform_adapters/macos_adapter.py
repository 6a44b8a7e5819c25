import platform
from typing import Optional

import psutil

from preflight_core.utils import bytes_to_gb, run_command

from .base import PlatformAdapter


class MacOSAdapter(PlatformAdapter):
    def os_name(self) -> str:
        version = run_command(["sw_vers", "-productVersion"]) or platform.mac_ver()[0]
        return f"macOS {version}" if version else "macOS"

    def cpu_cores(self) -> Optional[int]:
        return psutil.cpu_count()

    def cpu_model(self) -> Optional[str]:
        return run_command(["sysctl", "-n", "machdep.cpu.brand_string"])

    def ram_gb(self) -> Optional[int]:
        return bytes_to_gb(psutil.virtual_memory().total)
