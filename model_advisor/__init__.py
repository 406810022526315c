"""
Local Model Advisor
Recommends locally-runnable AI models for declared hardware and use cases
"""

from .catalog import Backend, MinHardware, ModelCatalog, ModelDescriptor
from .errors import CatalogError, HardwareProfileError, ModelAdvisorError
from .hardware import (
    DEFAULT_HARDWARE, CpuType, GpuVendor, HardwareClass, HardwareProfile, classify_hardware
)
from .ranking import ScoredCandidate, rank_candidates
from .recommendation import ModelRecommendation, RecommendationResult, evaluate
from .scoring import score_model
from .use_cases import UseCase, map_use_cases

__version__ = "1.0.0"
__all__ = [
    "Backend",
    "MinHardware",
    "ModelCatalog",
    "ModelDescriptor",
    "CatalogError",
    "HardwareProfileError",
    "ModelAdvisorError",
    "DEFAULT_HARDWARE",
    "CpuType",
    "GpuVendor",
    "HardwareClass",
    "HardwareProfile",
    "classify_hardware",
    "ScoredCandidate",
    "rank_candidates",
    "ModelRecommendation",
    "RecommendationResult",
    "evaluate",
    "score_model",
    "UseCase",
    "map_use_cases",
]
