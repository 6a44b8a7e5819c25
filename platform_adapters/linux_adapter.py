from pathlib import Path
from typing import Optional

import psutil

from preflight_core.exceptions import DetectionError
from preflight_core.schemas import StorageType
from preflight_core.utils import (
    base_block_device,
    bytes_to_gb,
    kb_to_gb,
    parse_key_value_lines,
    read_text,
    run_command,
)

from .base import PlatformAdapter

FALLBACK_DISK = "sda"


class LinuxAdapter(PlatformAdapter):
    """Reads facts from os-release, procfs and sysfs.

    The filesystem root is injectable so tests can point the adapter at a
    fake tree.
    """

    def __init__(self, root: Path = Path("/"), disk_path: Optional[str] = None):
        super().__init__(disk_path)
        self.root = Path(root)

    def os_name(self) -> str:
        content = read_text(self.root / "etc/os-release")
        if content is None:
            return "Linux (unknown distribution)"
        release = parse_key_value_lines(content)
        name = release.get("NAME", "Linux")
        version = release.get("VERSION_ID")
        return f"{name} {version}" if version else name

    def cpu_cores(self) -> Optional[int]:
        return psutil.cpu_count()

    def cpu_model(self) -> Optional[str]:
        content = read_text(self.root / "proc/cpuinfo")
        if content:
            for line in content.splitlines():
                key, _, value = line.partition(":")
                if key.strip() == "model name" and value.strip():
                    return value.strip()

        # ARM boards often lack "model name" in cpuinfo
        output = run_command(["lscpu"])
        if output:
            for line in output.splitlines():
                if line.startswith("Model name:"):
                    return line.split(":", 1)[1].strip()
        return None

    def ram_gb(self) -> Optional[int]:
        content = read_text(self.root / "proc/meminfo")
        if content:
            for line in content.splitlines():
                # "MemTotal:       16318412 kB"
                parts = line.split()
                if parts[:1] == ["MemTotal:"] and len(parts) >= 2 and parts[1].isdigit():
                    return kb_to_gb(int(parts[1]))
        return bytes_to_gb(psutil.virtual_memory().total)

    def _root_block_device(self) -> str:
        for part in psutil.disk_partitions(all=False):
            if part.mountpoint == self.disk_path and part.device.startswith("/dev/"):
                return base_block_device(part.device)
        return FALLBACK_DISK

    def storage_type(self) -> StorageType:
        for device in dict.fromkeys([self._root_block_device(), FALLBACK_DISK]):
            flag = read_text(self.root / "sys/block" / device / "queue/rotational")
            if flag is None:
                continue
            flag = flag.strip()
            if flag == "0":
                return StorageType.SSD
            if flag == "1":
                return StorageType.HDD
            raise DetectionError("storage type", f"unexpected rotational flag {flag!r}")
        return StorageType.UNKNOWN
