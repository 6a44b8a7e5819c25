import platform
from typing import Optional

import psutil

from preflight_core.utils import bytes_to_gb, run_command

from .base import PlatformAdapter


class WindowsAdapter(PlatformAdapter):
    def os_name(self) -> str:
        release = platform.release()
        return f"Windows {release}" if release else "Windows"

    def cpu_cores(self) -> Optional[int]:
        # Physical cores, as reported by Win32_Processor.NumberOfCores
        return psutil.cpu_count(logical=False)

    def cpu_model(self) -> Optional[str]:
        name = run_command([
            "powershell",
            "-NoProfile",
            "-Command",
            "(Get-CimInstance Win32_Processor | Select-Object -First 1).Name",
        ])
        return name or platform.processor() or None

    def ram_gb(self) -> Optional[int]:
        return bytes_to_gb(psutil.virtual_memory().total)
