"""
Pytest configuration and fixtures
"""

import tempfile
from pathlib import Path

import pytest

from model_advisor.catalog import Backend, MinHardware, ModelCatalog, ModelDescriptor
from model_advisor.hardware import HardwareProfile


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests"""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def mock_home_dir(temp_dir, monkeypatch):
    """Mock home directory for testing"""
    monkeypatch.setattr(Path, 'home', lambda: temp_dir)
    return temp_dir


@pytest.fixture
def make_model():
    """Factory for catalog entries; a small GGUF chat LLM unless overridden"""
    def _make(**overrides) -> ModelDescriptor:
        values = dict(
            name="Test-Chat-7B",
            repo="test-org/Test-Chat-7B-GGUF",
            publisher="Test Org",
            provider="Test Org",
            params_b=7,
            type="LLM",
            license="Apache 2.0",
            formats=frozenset({"GGUF"}),
            backend=Backend.GGUF,
            quantization="Q4_K_M",
            apple_silicon_optimized=False,
            min_hardware=MinHardware(cpu="4-core", ram_gb=8, vram_gb=6),
            tasks=frozenset({"chat"}),
        )
        values.update(overrides)
        return ModelDescriptor(**values)
    return _make


@pytest.fixture
def sample_catalog(make_model):
    """Small catalog covering each backend and hardware path"""
    return ModelCatalog([
        make_model(name="Tiny-Chat-GGUF", min_hardware=MinHardware(cpu="any", ram_gb=4, vram_gb=3),
                   tasks=frozenset({"chat", "creative"}), pinokio=True),
        make_model(name="Big-Chat-FP16", repo="test-org/Big-Chat", formats=frozenset({"SafeTensors"}),
                   backend=Backend.PYTORCH, min_hardware=MinHardware(cpu="any", ram_gb=16, vram_gb=24),
                   tasks=frozenset({"chat", "reasoning"})),
        make_model(name="Chat-MLX-4bit", repo="mlx-community/Chat-4bit", formats=frozenset({"MLX"}),
                   backend=Backend.MLX, apple_silicon_optimized=True,
                   min_hardware=MinHardware(cpu="Apple M1", ram_gb=8, vram_gb=0),
                   tasks=frozenset({"chat"})),
        make_model(name="Image-Diffusion", repo="test-org/Image-Diffusion", type="Diffusion",
                   license="OpenRAIL++-M", formats=frozenset({"SafeTensors"}), backend=Backend.PYTORCH,
                   min_hardware=MinHardware(cpu="any", ram_gb=16, vram_gb=8),
                   tasks=frozenset({"text-to-image"})),
        make_model(name="Prompt-Writer", repo="test-org/Prompt-Writer", formats=frozenset({"ONNX"}),
                   backend=Backend.ONNX, min_hardware=MinHardware(cpu="any", ram_gb=2, vram_gb=0),
                   tasks=frozenset({"creative"}), text_to_image_prompt=True,
                   text_to_video_prompt=True),
        make_model(name="Speech-ASR", repo="test-org/Speech-ASR", type="ASR", license="MIT",
                   formats=frozenset({"SafeTensors"}), backend=Backend.PYTORCH,
                   min_hardware=MinHardware(cpu="any", ram_gb=4, vram_gb=2),
                   tasks=frozenset({"audio", "asr", "transcription"})),
    ])


@pytest.fixture
def nvidia_hardware():
    return HardwareProfile(
        gpu_vendor="NVIDIA", vram_gb=8, ram_gb=16, cpu_type="Intel/AMD", os="Windows", disk_space_gb=64
    )


@pytest.fixture
def apple_hardware():
    return HardwareProfile(
        gpu_vendor="Apple Silicon", vram_gb=0, ram_gb=16, cpu_type="Apple Silicon", os="macOS",
        disk_space_gb=256
    )


@pytest.fixture
def intel_hardware():
    return HardwareProfile(
        gpu_vendor="Intel", vram_gb=0.5, ram_gb=16, cpu_type="Intel/AMD", os="Windows", disk_space_gb=100
    )
