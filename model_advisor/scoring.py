"""
Fit scoring: how well a catalog model suits the declared hardware and tasks

FitScore = HardwareScore + CapabilityScore + LocalityScore + LicenseScore

The total is not normalized. Callers that display it should clamp it.
"""

import math
from typing import AbstractSet, Optional

from .catalog import ModelDescriptor
from .hardware import HardwareClass, HardwareProfile, classify_hardware
from .use_cases import TEXT_TO_IMAGE_TAG, TEXT_TO_VIDEO_TAG

# Hardware
UNIFIED_RAM_FIT = 40
UNIFIED_HEADROOM_MAX = 50
INTEGRATED_VRAM_FIT = 30
INTEGRATED_VRAM_SHORT = -10
INTEGRATED_RAM_FIT = 10
INTEGRATED_VRAM_SHARE = 0.5
DISCRETE_VRAM_FIT = 40
DISCRETE_OFFLOAD_FIT = 20
DISCRETE_VRAM_SHORT = -30
OFFLOAD_RAM_FACTOR = 1.5
CPU_RUNNABLE_BONUS = 30
DISK_OK_BONUS = 10
DISK_OK_GB = 20

# Capability
TAG_MATCH = 20
PROMPT_HELPER_BONUS = 15

# Locality
PINOKIO_BONUS = 40
LLM_RUNTIME_BONUS = 30
GGUF_BONUS = 30
APPLE_SILICON_OPTIMIZED_BONUS = 120

# License
PERMISSIVE_LICENSE = 40
OPEN_LICENSE = 30
OTHER_LICENSE = 20
PERMISSIVE_MARKERS = ("Apache", "MIT", "Llama")
OPEN_MARKERS = ("Open", "Gemma")


def hardware_score(
    model: ModelDescriptor,
    hardware: HardwareProfile,
    hardware_class: HardwareClass,
) -> int:
    """Points for fitting the machine's memory, CPU fallback and disk"""
    minimum = model.min_hardware
    score = 0

    if hardware_class is HardwareClass.UNIFIED:
        # VRAM is a slice of system RAM, so RAM is what counts
        if hardware.ram_gb >= minimum.ram_gb:
            score += UNIFIED_RAM_FIT
        # Reward headroom: smaller models leave more of the pool free
        if hardware.ram_gb > 0:
            headroom = max(0.0, (hardware.ram_gb - minimum.ram_gb) / hardware.ram_gb)
            score += math.floor(headroom * UNIFIED_HEADROOM_MAX)

    elif hardware_class is HardwareClass.INTEGRATED:
        effective_vram = max(hardware.vram_gb, hardware.ram_gb * INTEGRATED_VRAM_SHARE)
        if effective_vram >= minimum.vram_gb:
            score += INTEGRATED_VRAM_FIT
        else:
            score += INTEGRATED_VRAM_SHORT
        if hardware.ram_gb >= minimum.ram_gb:
            score += INTEGRATED_RAM_FIT

    else:
        if hardware.vram_gb >= minimum.vram_gb:
            score += DISCRETE_VRAM_FIT
        elif model.supports_gguf and hardware.ram_gb >= minimum.ram_gb * OFFLOAD_RAM_FACTOR:
            score += DISCRETE_OFFLOAD_FIT
        else:
            score += DISCRETE_VRAM_SHORT

    if model.cpu_runnable:
        score += CPU_RUNNABLE_BONUS
    if hardware.disk_space_gb >= DISK_OK_GB:
        score += DISK_OK_BONUS

    return score


def is_prompt_helper(model: ModelDescriptor, requested_tags: AbstractSet[str]) -> bool:
    """Whether the model writes prompts for a requested generation task"""
    return (
        (TEXT_TO_VIDEO_TAG in requested_tags and model.text_to_video_prompt)
        or (TEXT_TO_IMAGE_TAG in requested_tags and model.text_to_image_prompt)
    )


def capability_score(model: ModelDescriptor, requested_tags: AbstractSet[str]) -> int:
    """Points per requested tag the model covers, plus prompt-helper bonuses"""
    score = TAG_MATCH * len(model.tasks.intersection(requested_tags))
    if TEXT_TO_VIDEO_TAG in requested_tags and model.text_to_video_prompt:
        score += PROMPT_HELPER_BONUS
    if TEXT_TO_IMAGE_TAG in requested_tags and model.text_to_image_prompt:
        score += PROMPT_HELPER_BONUS
    return score


def locality_score(model: ModelDescriptor, hardware_class: HardwareClass) -> int:
    """Points for how easily the model installs and runs locally"""
    score = 0
    if model.pinokio:
        score += PINOKIO_BONUS
    # LLMs are the ones Ollama and friends serve out of the box
    if model.type == "LLM":
        score += LLM_RUNTIME_BONUS
    if model.supports_gguf:
        score += GGUF_BONUS
    if hardware_class is HardwareClass.UNIFIED and model.apple_silicon_optimized:
        # Large enough to put MLX builds on top of any Apple Silicon result
        score += APPLE_SILICON_OPTIMIZED_BONUS
    return score


def license_score(model: ModelDescriptor) -> int:
    """Points for license openness, judged from the license text"""
    if any(marker in model.license for marker in PERMISSIVE_MARKERS):
        return PERMISSIVE_LICENSE
    if any(marker in model.license for marker in OPEN_MARKERS):
        return OPEN_LICENSE
    return OTHER_LICENSE


def score_model(
    model: ModelDescriptor,
    hardware: HardwareProfile,
    requested_tags: AbstractSet[str],
    hardware_class: Optional[HardwareClass] = None,
) -> int:
    """Total fit score of a model for this hardware and these tags"""
    if hardware_class is None:
        hardware_class = classify_hardware(hardware)

    return (
        hardware_score(model, hardware, hardware_class)
        + capability_score(model, requested_tags)
        + locality_score(model, hardware_class)
        + license_score(model)
    )
