"""
Tests for hardware profiles and hardware class detection
"""

import json

import pytest

from model_advisor.errors import HardwareProfileError
from model_advisor.hardware import (
    DEFAULT_HARDWARE, CpuType, GpuVendor, HardwareClass, HardwareProfile, classify_hardware,
    load_hardware_profile
)


class TestClassifyHardware:
    """Hardware class is derived from vendor and CPU family"""

    @pytest.mark.parametrize("gpu_vendor,cpu_type,expected", [
        ("Apple Silicon", "Apple Silicon", HardwareClass.UNIFIED),
        ("Apple Silicon", "Intel/AMD", HardwareClass.UNIFIED),
        ("NVIDIA", "Apple Silicon", HardwareClass.UNIFIED),
        ("Intel", "Intel/AMD", HardwareClass.INTEGRATED),
        ("Intel", "Apple Silicon", HardwareClass.UNIFIED),
        ("NVIDIA", "Intel/AMD", HardwareClass.DISCRETE),
        ("AMD", "Intel/AMD", HardwareClass.DISCRETE),
        ("NPU", "ARM64", HardwareClass.DISCRETE),
        ("NVIDIA", "RISC-V", HardwareClass.DISCRETE),
    ])
    def test_classification(self, gpu_vendor, cpu_type, expected):
        hardware = HardwareProfile(gpu_vendor, 8, 16, cpu_type, "Linux", 64)
        assert classify_hardware(hardware) is expected

    def test_accepts_enum_members(self):
        hardware = HardwareProfile(GpuVendor.INTEL, 0, 16, CpuType.X86_64, "Windows", 64)
        assert classify_hardware(hardware) is HardwareClass.INTEGRATED


class TestHardwareProfile:
    """Profile construction and serialization"""

    def test_is_immutable(self, nvidia_hardware):
        with pytest.raises(AttributeError):
            nvidia_hardware.ram_gb = 64

    def test_to_dict_uses_plain_values(self):
        hardware = HardwareProfile(GpuVendor.APPLE_SILICON, 0, 16, CpuType.APPLE_SILICON, "macOS", 256)
        data = hardware.to_dict()
        assert data["gpu_vendor"] == "Apple Silicon"
        assert data["cpu_type"] == "Apple Silicon"
        assert json.loads(json.dumps(data)) == data

    def test_from_dict_fills_defaults(self):
        hardware = HardwareProfile.from_dict({"ram_gb": 32})
        assert hardware.ram_gb == 32.0
        assert hardware.gpu_vendor == DEFAULT_HARDWARE.gpu_vendor
        assert hardware.disk_space_gb == DEFAULT_HARDWARE.disk_space_gb

    def test_from_dict_round_trip(self, apple_hardware):
        assert HardwareProfile.from_dict(apple_hardware.to_dict()) == apple_hardware

    def test_from_dict_enum_values(self):
        hardware = HardwareProfile.from_dict({"gpu_vendor": GpuVendor.AMD, "cpu_type": CpuType.ARM64})
        assert hardware.gpu_vendor == "AMD"
        assert hardware.cpu_type == "ARM64"

    def test_from_dict_rejects_unknown_fields(self):
        with pytest.raises(HardwareProfileError, match="gpu_count"):
            HardwareProfile.from_dict({"gpu_count": 2})

    def test_from_dict_rejects_bad_numbers(self):
        with pytest.raises(HardwareProfileError):
            HardwareProfile.from_dict({"ram_gb": "lots"})

    def test_from_dict_rejects_non_mapping(self):
        with pytest.raises(HardwareProfileError):
            HardwareProfile.from_dict(["NVIDIA", 8])

    def test_default_profile(self):
        assert classify_hardware(DEFAULT_HARDWARE) is HardwareClass.DISCRETE


class TestLoadHardwareProfile:
    """Loading profiles from disk"""

    def test_load_json(self, temp_dir):
        path = temp_dir / "hw.json"
        path.write_text(json.dumps({"gpu_vendor": "AMD", "vram_gb": 16, "ram_gb": 32}))
        hardware = load_hardware_profile(path)
        assert hardware.gpu_vendor == "AMD"
        assert hardware.vram_gb == 16.0
        assert hardware.os == DEFAULT_HARDWARE.os

    def test_load_yaml(self, temp_dir):
        path = temp_dir / "hw.yaml"
        path.write_text(
            "gpu_vendor: Apple Silicon\n"
            "vram_gb: 0\n"
            "ram_gb: 24\n"
            "cpu_type: Apple Silicon\n"
            "os: macOS\n"
            "disk_space_gb: 512\n"
        )
        hardware = load_hardware_profile(path)
        assert classify_hardware(hardware) is HardwareClass.UNIFIED
        assert hardware.ram_gb == 24.0

    def test_empty_yaml_gives_defaults(self, temp_dir):
        path = temp_dir / "hw.yml"
        path.write_text("")
        assert load_hardware_profile(path) == DEFAULT_HARDWARE

    def test_missing_file(self, temp_dir):
        with pytest.raises(HardwareProfileError, match="not found"):
            load_hardware_profile(temp_dir / "missing.json")

    def test_invalid_json(self, temp_dir):
        path = temp_dir / "hw.json"
        path.write_text("{not json")
        with pytest.raises(HardwareProfileError):
            load_hardware_profile(path)

    def test_invalid_yaml(self, temp_dir):
        path = temp_dir / "hw.yaml"
        path.write_text("gpu_vendor: [unclosed\n")
        with pytest.raises(HardwareProfileError):
            load_hardware_profile(path)
