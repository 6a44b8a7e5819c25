"""Platform detection utilities.

This module is intentionally standalone with no dependencies on other preflight
modules to avoid circular imports between preflight_core and platform_adapters.
"""
import platform


def get_os_name() -> str:
    """Return normalized OS name: 'windows', 'linux', 'macos', or the raw system name."""
    system = platform.system().lower()
    if system == "darwin":
        return "macos"
    # Cygwin, MSYS and Git Bash report e.g. "CYGWIN_NT-10.0-19045"
    if system.startswith(("cygwin", "msys", "mingw")):
        return "windows"
    return system or "unknown"


def is_windows() -> bool:
    """Check if running on Windows."""
    return get_os_name() == "windows"


def default_disk_path() -> str:
    """Return the primary volume to measure: C: on Windows, / on Unix."""
    return "C:\\" if is_windows() else "/"
