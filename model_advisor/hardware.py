"""
Declared hardware profiles and hardware class detection
"""

import json
import logging
from dataclasses import asdict, dataclass, fields
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .errors import HardwareProfileError

logger = logging.getLogger(__name__)


class GpuVendor(str, Enum):
    """GPU vendors offered to the user"""
    NVIDIA = "NVIDIA"
    AMD = "AMD"
    APPLE_SILICON = "Apple Silicon"
    INTEL = "Intel"
    NPU = "NPU"


class CpuType(str, Enum):
    """CPU families offered to the user"""
    X86_64 = "Intel/AMD"
    APPLE_SILICON = "Apple Silicon"
    RISC_V = "RISC-V"
    ARM64 = "ARM64"


class HardwareClass(Enum):
    """How the GPU memory relates to system memory"""
    DISCRETE = "discrete"      # dedicated VRAM
    UNIFIED = "unified"        # Apple Silicon, one shared pool
    INTEGRATED = "integrated"  # iGPU borrowing system RAM


@dataclass(frozen=True)
class HardwareProfile:
    """Hardware the user declares; all sizes in GB"""
    gpu_vendor: str
    vram_gb: float
    ram_gb: float
    cpu_type: str
    os: str
    disk_space_gb: float

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        # Enum members serialize by value
        data["gpu_vendor"] = _plain(self.gpu_vendor)
        data["cpu_type"] = _plain(self.cpu_type)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HardwareProfile":
        """Build a profile from a mapping, filling gaps from the defaults"""
        if not isinstance(data, dict):
            raise HardwareProfileError(f"Hardware profile must be a mapping, got {type(data).__name__}")

        unknown = set(data) - {f.name for f in fields(cls)}
        if unknown:
            raise HardwareProfileError(f"Unknown hardware fields: {', '.join(sorted(unknown))}")

        values = DEFAULT_HARDWARE.to_dict()
        values.update(data)
        try:
            return cls(
                gpu_vendor=str(_plain(values["gpu_vendor"])),
                vram_gb=float(values["vram_gb"]),
                ram_gb=float(values["ram_gb"]),
                cpu_type=str(_plain(values["cpu_type"])),
                os=str(values["os"]),
                disk_space_gb=float(values["disk_space_gb"]),
            )
        except (TypeError, ValueError) as e:
            raise HardwareProfileError(f"Invalid hardware profile: {e}") from e


DEFAULT_HARDWARE = HardwareProfile(
    gpu_vendor=GpuVendor.NVIDIA.value,
    vram_gb=8.0,
    ram_gb=16.0,
    cpu_type=CpuType.X86_64.value,
    os="Windows",
    disk_space_gb=64.0,
)


def _plain(value: Union[str, Enum]) -> str:
    return value.value if isinstance(value, Enum) else value


def classify_hardware(hardware: HardwareProfile) -> HardwareClass:
    """Derive the hardware class used by scoring and filtering"""
    if (
        _plain(hardware.gpu_vendor) == GpuVendor.APPLE_SILICON.value
        or _plain(hardware.cpu_type) == CpuType.APPLE_SILICON.value
    ):
        return HardwareClass.UNIFIED
    if _plain(hardware.gpu_vendor) == GpuVendor.INTEL.value:
        return HardwareClass.INTEGRATED
    return HardwareClass.DISCRETE


def load_hardware_profile(path: Path) -> HardwareProfile:
    """Load a hardware profile from a JSON or YAML file"""
    try:
        with open(path, 'r') as f:
            if path.suffix.lower() in (".yaml", ".yml"):
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except FileNotFoundError:
        logger.error(f"Hardware profile not found: {path}")
        raise HardwareProfileError(f"Hardware profile not found: {path}")
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        logger.error(f"Invalid hardware profile file {path}: {e}")
        raise HardwareProfileError(f"Invalid hardware profile file {path}: {e}") from e

    profile = HardwareProfile.from_dict(data or {})
    logger.debug(f"Loaded hardware profile from {path}: {profile}")
    return profile
