"""
Tests for the fit scoring engine
"""

from dataclasses import replace

import pytest

from model_advisor.catalog import Backend, MinHardware
from model_advisor.hardware import HardwareClass, HardwareProfile
from model_advisor.scoring import (
    capability_score,
    hardware_score,
    is_prompt_helper,
    license_score,
    locality_score,
    score_model,
)


class TestHardwareScore:
    """Hardware sub-score per memory architecture"""

    def test_discrete_vram_fits(self, make_model, nvidia_hardware):
        model = make_model()  # 8 GB RAM / 6 GB VRAM, GGUF
        # 40 VRAM fit + 30 CPU-runnable + 10 disk
        assert hardware_score(model, nvidia_hardware, HardwareClass.DISCRETE) == 80

    def test_discrete_gguf_offload_fallback(self, make_model, nvidia_hardware):
        model = make_model(min_hardware=MinHardware(cpu="any", ram_gb=8, vram_gb=12))
        # 16 GB RAM >= 1.5 * 8 GB, so partial offload: 20 + 30 + 10
        assert hardware_score(model, nvidia_hardware, HardwareClass.DISCRETE) == 60

    def test_discrete_gguf_without_offload_room(self, make_model, nvidia_hardware):
        model = make_model(min_hardware=MinHardware(cpu="any", ram_gb=12, vram_gb=12))
        # 16 < 18 GB needed for offload: -30 + 30 + 10
        assert hardware_score(model, nvidia_hardware, HardwareClass.DISCRETE) == 10

    def test_discrete_vram_short_without_gguf(self, make_model, nvidia_hardware):
        model = make_model(
            formats=frozenset({"SafeTensors"}),
            backend=Backend.PYTORCH,
            min_hardware=MinHardware(cpu="any", ram_gb=8, vram_gb=24),
        )
        assert hardware_score(model, nvidia_hardware, HardwareClass.DISCRETE) == -20

    def test_unified_headroom_bonus(self, make_model, apple_hardware):
        model = make_model(formats=frozenset({"MLX"}), backend=Backend.MLX)
        # 40 RAM fit + floor(50 * 8/16) + 10 disk
        assert hardware_score(model, apple_hardware, HardwareClass.UNIFIED) == 75

    def test_unified_rewards_smaller_models(self, make_model, apple_hardware):
        small = make_model(min_hardware=MinHardware(cpu="any", ram_gb=2, vram_gb=0))
        large = make_model(min_hardware=MinHardware(cpu="any", ram_gb=14, vram_gb=0))
        assert (
            hardware_score(small, apple_hardware, HardwareClass.UNIFIED)
            > hardware_score(large, apple_hardware, HardwareClass.UNIFIED)
        )

    def test_unified_headroom_floors(self, make_model):
        hardware = HardwareProfile("Apple Silicon", 0, 24, "Apple Silicon", "macOS", 0)
        model = make_model(formats=frozenset({"MLX"}), min_hardware=MinHardware("any", 7, 0))
        # floor(50 * 17/24) = floor(35.41...) = 35
        assert hardware_score(model, hardware, HardwareClass.UNIFIED) == 40 + 35

    def test_unified_ignores_vram(self, make_model, apple_hardware):
        model = make_model(
            formats=frozenset({"MLX"}), min_hardware=MinHardware(cpu="any", ram_gb=8, vram_gb=64)
        )
        assert hardware_score(model, apple_hardware, HardwareClass.UNIFIED) == 75

    def test_unified_zero_ram_does_not_divide(self, make_model):
        hardware = HardwareProfile("Apple Silicon", 0, 0, "Apple Silicon", "macOS", 0)
        model = make_model(formats=frozenset({"MLX"}))
        assert hardware_score(model, hardware, HardwareClass.UNIFIED) == 0

    def test_unified_insufficient_ram_has_no_headroom(self, make_model, apple_hardware):
        model = make_model(
            formats=frozenset({"MLX"}), min_hardware=MinHardware(cpu="any", ram_gb=32, vram_gb=0)
        )
        assert hardware_score(model, apple_hardware, HardwareClass.UNIFIED) == 10

    def test_integrated_uses_half_of_ram(self, make_model, intel_hardware):
        model = make_model()  # needs 6 GB VRAM; 16 GB RAM gives 8 GB effective
        # 30 VRAM fit + 10 RAM fit + 30 GGUF + 10 disk
        assert hardware_score(model, intel_hardware, HardwareClass.INTEGRATED) == 80

    def test_integrated_vram_short(self, make_model, intel_hardware):
        model = make_model(min_hardware=MinHardware(cpu="any", ram_gb=8, vram_gb=10))
        # -10 + 10 + 30 + 10
        assert hardware_score(model, intel_hardware, HardwareClass.INTEGRATED) == 40

    def test_integrated_prefers_dedicated_vram_when_larger(self, make_model):
        hardware = HardwareProfile("Intel", 12, 16, "Intel/AMD", "Linux", 0)
        model = make_model(formats=frozenset(), min_hardware=MinHardware(cpu="any", ram_gb=8, vram_gb=10))
        assert hardware_score(model, hardware, HardwareClass.INTEGRATED) == 40

    def test_onnx_counts_as_cpu_runnable(self, make_model, nvidia_hardware):
        model = make_model(formats=frozenset({"ONNX"}), backend=Backend.ONNX)
        assert hardware_score(model, nvidia_hardware, HardwareClass.DISCRETE) == 80

    def test_small_disk_gets_no_bonus(self, make_model, nvidia_hardware):
        hardware = replace(nvidia_hardware, disk_space_gb=19.9)
        assert hardware_score(make_model(), hardware, HardwareClass.DISCRETE) == 70


class TestCapabilityScore:
    """Capability sub-score"""

    def test_points_per_matched_tag(self, make_model):
        model = make_model(tasks=frozenset({"chat", "qa", "vision"}))
        assert capability_score(model, {"chat", "qa", "creative"}) == 40

    def test_no_match(self, make_model):
        assert capability_score(make_model(), {"audio"}) == 0

    def test_text_to_image_prompt_helper(self, make_model):
        model = make_model(text_to_image_prompt=True)
        assert capability_score(model, {"text-to-image"}) == 15
        assert capability_score(model, {"text-to-video"}) == 0

    def test_both_prompt_helpers(self, make_model):
        model = make_model(text_to_image_prompt=True, text_to_video_prompt=True)
        assert capability_score(model, {"text-to-image", "text-to-video"}) == 30

    def test_tag_match_and_helper_stack(self, make_model):
        model = make_model(tasks=frozenset({"text-to-image"}), text_to_image_prompt=True)
        assert capability_score(model, {"text-to-image"}) == 35

    def test_is_prompt_helper(self, make_model):
        model = make_model(text_to_video_prompt=True)
        assert is_prompt_helper(model, {"text-to-video"})
        assert not is_prompt_helper(model, {"text-to-image"})
        assert not is_prompt_helper(make_model(), {"text-to-video", "text-to-image"})


class TestLocalityScore:
    """Locality sub-score"""

    def test_all_local_conveniences(self, make_model):
        model = make_model(pinokio=True)
        assert locality_score(model, HardwareClass.DISCRETE) == 100

    def test_non_llm_without_gguf(self, make_model):
        model = make_model(type="Diffusion", formats=frozenset({"SafeTensors"}))
        assert locality_score(model, HardwareClass.DISCRETE) == 0

    def test_apple_optimized_bonus_only_on_unified(self, make_model):
        model = make_model(apple_silicon_optimized=True, formats=frozenset({"MLX"}))
        assert locality_score(model, HardwareClass.UNIFIED) == 30 + 120
        assert locality_score(model, HardwareClass.DISCRETE) == 30
        assert locality_score(model, HardwareClass.INTEGRATED) == 30


class TestLicenseScore:
    """License sub-score"""

    @pytest.mark.parametrize("license_text,expected", [
        ("Apache 2.0", 40),
        ("MIT", 40),
        ("Llama 3.1 Community License", 40),
        ("OpenRAIL-M", 30),
        ("Gemma Terms of Use", 30),
        ("CC-BY-NC-4.0", 20),
        ("Stability AI Community License", 20),
    ])
    def test_license_families(self, make_model, license_text, expected):
        assert license_score(make_model(license=license_text)) == expected


class TestScoreModel:
    """Total fit score"""

    def test_sum_of_sub_scores(self, make_model, nvidia_hardware):
        model = make_model(pinokio=True, tasks=frozenset({"chat", "creative"}))
        # hardware 80 + capability 40 + locality 100 + license 40
        assert score_model(model, nvidia_hardware, {"chat", "creative"}) == 260

    def test_derives_hardware_class(self, make_model, apple_hardware):
        model = make_model(apple_silicon_optimized=True)
        assert (
            score_model(model, apple_hardware, {"chat"})
            == score_model(model, apple_hardware, {"chat"}, HardwareClass.UNIFIED)
        )

    def test_apple_optimized_dominance(self, make_model, apple_hardware):
        plain = make_model(name="Plain")
        optimized = make_model(name="Optimized", apple_silicon_optimized=True)
        diff = score_model(optimized, apple_hardware, {"chat"}) - score_model(plain, apple_hardware, {"chat"})
        assert diff >= 120

    def test_cpu_type_alone_marks_unified(self, make_model):
        hardware = HardwareProfile("NVIDIA", 8, 16, "Apple Silicon", "macOS", 64)
        plain = make_model(name="Plain")
        optimized = make_model(name="Optimized", apple_silicon_optimized=True)
        assert score_model(optimized, hardware, set()) - score_model(plain, hardware, set()) == 120

    def test_negative_inputs_propagate(self, make_model):
        hardware = HardwareProfile("NVIDIA", -4, 16, "Intel/AMD", "Linux", -1)
        model = make_model(formats=frozenset({"SafeTensors"}), type="Vision", license="Other")
        # -30 hardware, 0 capability, 0 locality, 20 license
        assert score_model(model, hardware, set()) == -10

    def test_deterministic(self, make_model, intel_hardware):
        model = make_model(pinokio=True)
        scores = {score_model(model, intel_hardware, {"chat"}) for _ in range(5)}
        assert len(scores) == 1
