"""Pydantic schemas for the preflight pipeline.

``SystemFacts`` and ``Recommendation`` are the values passed between stages.
``Report`` mirrors the JSON document on disk; its field aliases are the
document keys, so always dump it with ``by_alias=True``.
"""
from enum import Enum
from typing import Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

UNKNOWN = "unknown"

MaybeInt = Union[int, Literal["unknown"]]


class StorageType(str, Enum):
    """Kind of media backing the primary volume."""
    SSD = "SSD"
    HDD = "HDD"
    UNKNOWN = UNKNOWN


class CapacityTier(str, Enum):
    """Capacity tiers, from least to most capable."""
    INSUFFICIENT = "insufficient"
    UP_TO_10 = "up_to_10"
    UP_TO_50 = "up_to_50"
    MORE_THAN_50 = "more_than_50"

    @property
    def rank(self) -> int:
        return list(CapacityTier).index(self)

    def __lt__(self, other):
        if not isinstance(other, CapacityTier):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, CapacityTier):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, CapacityTier):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, CapacityTier):
            return NotImplemented
        return self.rank >= other.rank


class InstallMethod(str, Enum):
    """How the application should be installed on this host."""
    NATIVE = "native"
    WSL = "wsl"
    CONTAINER = "container"
    WEB = "web"


class SystemFacts(BaseModel):
    """Hardware and OS facts read from the host. None means unknown."""
    model_config = ConfigDict(frozen=True)

    os_name: str
    cpu_cores: Optional[int] = None
    cpu_model: Optional[str] = None
    ram_gb: Optional[int] = None
    storage_free_gb: Optional[int] = None
    storage_type: StorageType = StorageType.UNKNOWN


class Recommendation(BaseModel):
    """Installation recommendation for an OS and capacity tier."""
    model_config = ConfigDict(frozen=True)

    method: InstallMethod
    setup_commands: str
    notes: str
    requires_web_fallback: bool = False


# ============================================================================
# Report document
# ============================================================================

class _Section(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class TierRequirement(_Section):
    """Minimum hardware for a tier."""
    cpu_cores: int = Field(alias="cpu_nucleos")
    ram_gb: int = Field(alias="ram_gb")
    storage_gb: int = Field(alias="almacenamiento_gb")


class OperatingSystemSection(_Section):
    name: str = Field(alias="nombre")
    compatible: bool = Field(alias="compatible")


class CpuSection(_Section):
    cores: MaybeInt = Field(alias="nucleos")
    model: str = Field(alias="modelo")


class StorageSection(_Section):
    free_gb: MaybeInt = Field(alias="espacio_libre_gb")
    type: str = Field(alias="tipo")


class HardwareSection(_Section):
    cpu: CpuSection = Field(alias="cpu")
    ram_gb: MaybeInt = Field(alias="ram_gb")
    storage: StorageSection = Field(alias="almacenamiento")


class InstallSection(_Section):
    method: InstallMethod = Field(alias="metodo")
    requires_wsl: bool = Field(alias="requiere_wsl")
    use_web: bool = Field(alias="usar_web")
    commands: str = Field(alias="comandos_instalacion")
    notes: str = Field(alias="notas")


class WebCredentials(_Section):
    username: str = Field(alias="usuario")
    password: str = Field(alias="contraseña")


class WebSetupSection(_Section):
    required: bool = Field(alias="necesaria")
    suggested_url: str = Field(alias="url_sugerida")
    credentials: WebCredentials = Field(alias="credenciales")


class RequirementChecks(_Section):
    """Pass/fail checks against the lowest tier."""
    cpu: bool = Field(alias="cpu")
    ram: bool = Field(alias="ram")
    storage: bool = Field(alias="almacenamiento")
    os: bool = Field(alias="os")


class Report(_Section):
    """The full analysis document."""
    analyzed_at: str = Field(alias="fecha_analisis")
    operating_system: OperatingSystemSection = Field(alias="sistema_operativo")
    hardware: HardwareSection = Field(alias="hardware")
    tier: CapacityTier = Field(alias="categoria_usuarios")
    minimum_requirements: Dict[str, TierRequirement] = Field(alias="requisitos_minimos")
    installation: InstallSection = Field(alias="recomendacion_instalacion")
    web_setup: WebSetupSection = Field(alias="configuracion_web")
    checks: RequirementChecks = Field(alias="cumple_requisitos")
