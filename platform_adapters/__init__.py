"""Platform adapters for OS-specific host detection."""
import logging
from typing import Optional

from .base import PlatformAdapter
from .generic_adapter import GenericAdapter
from .windows_adapter import WindowsAdapter
from .linux_adapter import LinuxAdapter
from .macos_adapter import MacOSAdapter
from preflight_core.platform import get_os_name

logger = logging.getLogger(__name__)

# Singleton adapter instance
_adapter_instance: Optional[PlatformAdapter] = None


def get_adapter() -> PlatformAdapter:
    """Get the platform adapter for the current OS (singleton)."""
    global _adapter_instance
    if _adapter_instance is None:
        os_name = get_os_name()
        if os_name == "windows":
            _adapter_instance = WindowsAdapter()
        elif os_name == "linux":
            _adapter_instance = LinuxAdapter()
        elif os_name == "macos":
            _adapter_instance = MacOSAdapter()
        else:
            logger.debug(f"No dedicated adapter for '{os_name}', using generic detection")
            _adapter_instance = GenericAdapter()
    return _adapter_instance


def reset_adapter() -> None:
    """Reset the adapter singleton. Useful for testing."""
    global _adapter_instance
    _adapter_instance = None


__all__ = [
    "PlatformAdapter",
    "GenericAdapter",
    "WindowsAdapter",
    "LinuxAdapter",
    "MacOSAdapter",
    "get_adapter",
    "reset_adapter",
]
