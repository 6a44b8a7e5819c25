"""Utility functions for the preflight checks."""
import logging
import re
import subprocess
from pathlib import Path
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)

BYTES_PER_GB = 1024 ** 3
COMMAND_TIMEOUT = 10

# nvme0n1p2 -> nvme0n1, mmcblk0p1 -> mmcblk0
NUMBERED_DISK_PATTERN = re.compile(r"^((?:nvme\d+n\d+)|(?:mmcblk\d+))(?:p\d+)?$")
# sda1 -> sda, vdb2 -> vdb
LETTERED_DISK_PATTERN = re.compile(r"^([a-z]+?)\d+$")


def bytes_to_gb(size_bytes: int) -> int:
    """Convert bytes to whole gigabytes, rounding down."""
    return int(size_bytes) // BYTES_PER_GB


def kb_to_gb(size_kb: int) -> int:
    """Convert kilobytes to whole gigabytes, rounding down."""
    return int(size_kb) // 1024 // 1024


def run_command(cmd: List[str], timeout: int = COMMAND_TIMEOUT) -> Optional[str]:
    """Run a read-only system command and return its stripped stdout.

    Args:
        cmd: Command and arguments.
        timeout: Seconds to wait before giving up.

    Returns:
        The command output, or None if the binary is missing, the command
        failed, or it produced no output.
    """
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, timeout=timeout)
    except (OSError, subprocess.TimeoutExpired) as e:
        logger.debug(f"Command {cmd[0]} unavailable: {e}")
        return None

    if result.returncode != 0:
        logger.debug(f"Command {cmd[0]} exited with {result.returncode}")
        return None

    output = result.stdout.strip()
    return output or None


def read_text(path: Path) -> Optional[str]:
    """Read a small text file, returning None if it does not exist or is unreadable."""
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.debug(f"Cannot read {path}: {e}")
        return None


def parse_key_value_lines(content: str, separator: str = "=") -> Dict[str, str]:
    """Parse ``KEY=value`` style lines into a dict.

    Surrounding quotes are stripped from values. Blank lines and comments
    are ignored. When a key repeats, the first occurrence wins.
    """
    values: Dict[str, str] = {}
    for line in content.splitlines():
        line = line.strip()
        if not line or line.startswith("#") or separator not in line:
            continue
        key, value = line.split(separator, 1)
        key = key.strip()
        if key not in values:
            values[key] = value.strip().strip('"').strip("'")
    return values


def base_block_device(device: str) -> str:
    """Strip the partition suffix from a block device name.

    Args:
        device: Device path or name, e.g. "/dev/nvme0n1p2".

    Returns:
        The whole-disk name, e.g. "nvme0n1".
    """
    name = Path(device).name
    match = NUMBERED_DISK_PATTERN.match(name)
    if match:
        return match.group(1)
    match = LETTERED_DISK_PATTERN.match(name)
    if match:
        return match.group(1)
    return name
