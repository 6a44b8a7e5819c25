"""Installation method recommendation."""
import logging
from typing import Tuple

from .schemas import CapacityTier, InstallMethod, Recommendation

logger = logging.getLogger(__name__)

DEBIAN_FAMILY = ("Ubuntu", "Debian", "Linux Mint")
REDHAT_FAMILY = ("CentOS", "Red Hat", "Fedora", "Rocky", "AlmaLinux")

APT_BOOTSTRAP = (
    "sudo apt update && sudo apt install -y python3 python3-pip "
    "postgresql postgresql-contrib nginx git"
)
DNF_BOOTSTRAP = (
    "sudo dnf install -y python3 python3-pip "
    "postgresql-server postgresql-contrib nginx git"
)
WSL_BOOTSTRAP = f"Instalar WSL2 con Ubuntu, luego ejecutar: {APT_BOOTSTRAP}"
CONTAINER_BOOTSTRAP = (
    "Instalar Docker Desktop, luego usar: docker-compose up con configuración de Odoo"
)
UNSUPPORTED_OS = "Sistema no compatible para instalación local"

TIER_NOTES = {
    CapacityTier.UP_TO_10: (
        "Configuración básica para hasta 10 usuarios. SSD recomendado para mejor rendimiento."
    ),
    CapacityTier.UP_TO_50: (
        "Configuración intermedia para hasta 50 usuarios. SSD altamente recomendado."
    ),
    CapacityTier.MORE_THAN_50: (
        "Configuración empresarial para más de 50 usuarios. "
        "Considerar separar aplicación y base de datos en servidores diferentes."
    ),
}

INSUFFICIENT_COMMANDS = "Hardware insuficiente para instalación local"
INSUFFICIENT_NOTES = "Se recomienda usar Odoo Online o actualizar hardware"


def _method_for_os(os_name: str) -> Tuple[InstallMethod, str]:
    if any(name in os_name for name in DEBIAN_FAMILY):
        return InstallMethod.NATIVE, APT_BOOTSTRAP
    if any(name in os_name for name in REDHAT_FAMILY):
        return InstallMethod.NATIVE, DNF_BOOTSTRAP
    if "Windows" in os_name:
        return InstallMethod.WSL, WSL_BOOTSTRAP
    if "macOS" in os_name:
        return InstallMethod.CONTAINER, CONTAINER_BOOTSTRAP
    return InstallMethod.WEB, UNSUPPORTED_OS


def recommend(os_name: str, tier: CapacityTier) -> Recommendation:
    """Choose an installation method for an OS and capacity tier.

    Insufficient hardware always routes to the hosted offering, whatever
    the OS. Unrecognized operating systems also fall back to it.

    Args:
        os_name: Detected OS name, e.g. "Ubuntu 22.04".
        tier: Capacity tier of the host.

    Returns:
        The recommendation. Never raises.
    """
    if tier == CapacityTier.INSUFFICIENT:
        logger.debug(f"Insufficient hardware, recommending web for {os_name!r}")
        return Recommendation(
            method=InstallMethod.WEB,
            setup_commands=INSUFFICIENT_COMMANDS,
            notes=INSUFFICIENT_NOTES,
            requires_web_fallback=True,
        )

    method, commands = _method_for_os(os_name)
    logger.debug(f"Recommending {method.value} for {os_name!r} ({tier.value})")
    return Recommendation(
        method=method,
        setup_commands=commands,
        notes=TIER_NOTES[tier],
        requires_web_fallback=method == InstallMethod.WEB,
    )
