"""
Candidate filtering and ranking over the model catalog
"""

import logging
from dataclasses import dataclass
from typing import AbstractSet, Iterable, List, Optional

from .catalog import ModelDescriptor
from .hardware import HardwareClass, HardwareProfile, classify_hardware
from .scoring import is_prompt_helper, score_model

logger = logging.getLogger(__name__)

TOP_N = 5


@dataclass(frozen=True)
class ScoredCandidate:
    """A catalog model that passed the filters, with its fit score"""
    model: ModelDescriptor
    score: int


def is_eligible(
    model: ModelDescriptor,
    hardware: HardwareProfile,
    requested_tags: AbstractSet[str],
    use_case_count: int,
    hardware_class: HardwareClass,
) -> bool:
    """Hard filters applied before scoring"""
    minimum = model.min_hardware

    # RAM is a hard floor whatever the memory architecture
    if minimum.ram_gb > hardware.ram_gb:
        return False

    # Dedicated VRAM only matters when it is not carved out of system RAM
    if hardware_class is HardwareClass.DISCRETE and hardware.vram_gb < minimum.vram_gb:
        if not model.supports_gguf:
            return False
        # GGUF can offload layers to the CPU, given enough RAM
        if hardware.ram_gb < minimum.ram_gb:
            return False

    # No use cases selected means every task is acceptable
    if use_case_count > 0:
        matches_task = not model.tasks.isdisjoint(requested_tags)
        if not matches_task and not is_prompt_helper(model, requested_tags):
            return False

    return True


def rank_candidates(
    models: Iterable[ModelDescriptor],
    hardware: HardwareProfile,
    requested_tags: AbstractSet[str],
    use_case_count: int,
    limit: int = TOP_N,
    hardware_class: Optional[HardwareClass] = None,
) -> List[ScoredCandidate]:
    """Filter, score and order the catalog, best first

    Candidates scoring zero or less are dropped. Equal scores keep catalog
    order, so results are reproducible.
    """
    if limit < 1:
        raise ValueError(f"limit must be at least 1, got {limit}")
    if hardware_class is None:
        hardware_class = classify_hardware(hardware)

    candidates = []
    excluded = 0
    for model in models:
        if not is_eligible(model, hardware, requested_tags, use_case_count, hardware_class):
            excluded += 1
            continue

        score = score_model(model, hardware, requested_tags, hardware_class)
        if score <= 0:
            logger.debug(f"Dropping {model.name}: non-positive score {score}")
            continue
        candidates.append(ScoredCandidate(model=model, score=score))

    # list.sort is stable, so ties stay in catalog order
    candidates.sort(key=lambda c: c.score, reverse=True)

    logger.debug(
        f"Ranked {len(candidates)} candidates ({excluded} excluded) "
        f"for {hardware_class.value} hardware"
    )
    return candidates[:limit]
