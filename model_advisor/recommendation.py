"""
Recommendation assembly: the public entry point of the advisor
"""

import csv
import io
import json
import logging
import re
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Union

import yaml

from .catalog import Backend, ModelCatalog, ModelDescriptor
from .catalog_data import BUILTIN_CATALOG
from .hardware import HardwareClass, HardwareProfile, classify_hardware
from .ranking import TOP_N, ScoredCandidate, rank_candidates
from .use_cases import UseCase, map_use_cases

logger = logging.getLogger(__name__)

FIT_SCORE_CAP = 300
FIT_SCORE_SCALE = 3
PINOKIO_INSTALL_LINK = "pinokio://install/github.com/pinokiofactory/ollama"
HF_BASE_URL = "https://huggingface.co"

HARDWARE_NOTES = {
    HardwareClass.UNIFIED: "Apple Silicon detected. Prioritizing MLX models & Efficiency.",
    HardwareClass.INTEGRATED: "Shared Graphics Memory detected. Prioritizing RAM-efficient models.",
    HardwareClass.DISCRETE: "Discrete GPU detected. Prioritizing GGUF/Ollama.",
}

REASON_APPLE_OPTIMIZED = "Optimized for Apple Silicon (MLX). Runs natively on Neural Engine."
REASON_SHARED_MEMORY = "Compatible with Shared Memory architecture."
REASON_FULL_OFFLOAD = "VRAM sufficient for full offloading."
REASON_GGUF_OFFLOAD = "Can run partially on CPU via GGUF offloading."
REASON_DEFAULT = "Fits hardware constraints."


@dataclass
class Benchmark:
    name: str
    score: float
    max_score: float


@dataclass
class ModelRecommendation:
    """A ranked model enriched with install hints and links"""
    id: str
    name: str
    publisher: str
    provider: str
    repo: str
    size_params: str
    vram_req: float
    recommended_quantization: str
    description: str
    reason: str
    score: int
    lm_studio_command: str
    hf_url: str
    license: str
    tags: List[str]
    backend: str
    apple_silicon_optimized: bool
    type: Optional[str] = None
    pinokio_link: Optional[str] = None
    ollama_command: Optional[str] = None
    llama_cpp_command: Optional[str] = None
    hf_gguf: Optional[str] = None
    install_command: Optional[str] = None
    inference_speed: str = "N/A"
    libraries: List[str] = field(default_factory=list)
    providers: List[str] = field(default_factory=list)
    benchmarks: List[Benchmark] = field(default_factory=list)


@dataclass
class RecommendationResult:
    """Everything returned for one query"""
    models: List[ModelRecommendation]
    summary: str
    hardware_notes: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def fit_reason(model: ModelDescriptor, hardware: HardwareProfile, hardware_class: HardwareClass) -> str:
    """Why the model fits, most specific explanation first"""
    if hardware_class is HardwareClass.UNIFIED and model.apple_silicon_optimized:
        return REASON_APPLE_OPTIMIZED
    if hardware_class in (HardwareClass.UNIFIED, HardwareClass.INTEGRATED):
        return REASON_SHARED_MEMORY
    if hardware.vram_gb >= model.min_hardware.vram_gb:
        return REASON_FULL_OFFLOAD
    if model.supports_gguf:
        return REASON_GGUF_OFFLOAD
    return REASON_DEFAULT


def safe_file_name(name: str) -> str:
    """Lowercase name with anything but [a-z0-9-] replaced by hyphens"""
    return re.sub(r"[^a-z0-9-]", "-", name.lower())


def ollama_name(model: ModelDescriptor) -> str:
    """Ollama tag: the catalog's own when set, else the first hyphen token of the name

    The fallback is a heuristic; different models sharing a first token
    (e.g. two "Qwen2.5-*" builds) derive the same name.
    """
    if model.ollama_tag:
        return model.ollama_tag
    return model.name.split("-")[0].lower()


def build_recommendation(
    candidate: ScoredCandidate,
    hardware: HardwareProfile,
    hardware_class: HardwareClass,
) -> ModelRecommendation:
    """Turn a scored catalog entry into an external recommendation record"""
    model = candidate.model
    is_gguf = model.backend == Backend.GGUF
    hf_url = f"{HF_BASE_URL}/{model.repo}"

    return ModelRecommendation(
        id=model.name,
        name=model.name,
        publisher=model.publisher,
        provider=model.provider,
        repo=model.repo,
        size_params=f"{model.params_b:g}B",
        vram_req=model.min_hardware.vram_gb,
        recommended_quantization=model.quantization,
        description=model.description,
        reason=fit_reason(model, hardware, hardware_class),
        score=candidate.score,
        pinokio_link=PINOKIO_INSTALL_LINK if model.pinokio else None,
        ollama_command=f"ollama pull {ollama_name(model)}" if is_gguf else None,
        lm_studio_command=f'Search "{model.name}"',
        llama_cpp_command=f'./main -m {safe_file_name(model.name)}.gguf -p "User:"' if is_gguf else None,
        hf_url=hf_url,
        hf_gguf=f"{hf_url}/resolve/main/{model.name}.gguf" if is_gguf else None,
        install_command=(
            f'pip install mlx-lm && python -m mlx_lm.generate --model {model.repo} --prompt "Hello"'
            if model.backend == Backend.MLX
            else None
        ),
        type=model.type,
        license=model.license,
        tags=sorted(model.tasks),
        backend=Backend(model.backend).value,
        apple_silicon_optimized=model.apple_silicon_optimized,
        libraries=list(model.libraries),
        providers=list(model.cloud_providers),
        benchmarks=[
            Benchmark(
                name="Fit Score",
                score=min(candidate.score, FIT_SCORE_CAP) / FIT_SCORE_SCALE,
                max_score=100,
            )
        ],
    )


def summarize(models: List[ModelRecommendation]) -> str:
    if not models:
        return "Found 0 optimized models. No model fits this hardware and use case selection."
    return f"Found {len(models)} optimized models. Top match: {models[0].name}."


def hardware_notes(hardware_class: HardwareClass) -> str:
    return HARDWARE_NOTES[hardware_class]


def evaluate(
    hardware: HardwareProfile,
    use_cases: Iterable[Union[str, UseCase]],
    catalog: Optional[ModelCatalog] = None,
    limit: int = TOP_N,
) -> RecommendationResult:
    """Recommend up to `limit` catalog models for the hardware and use cases

    Never raises for well-formed input. With no use cases every model is
    considered relevant; with nothing eligible the model list is empty.
    """
    use_cases = list(use_cases)
    catalog = BUILTIN_CATALOG if catalog is None else catalog

    hardware_class = classify_hardware(hardware)
    requested_tags = map_use_cases(use_cases)
    logger.debug(f"Use cases {use_cases} map to tags {sorted(requested_tags)}")

    ranked = rank_candidates(
        catalog, hardware, requested_tags, len(use_cases),
        limit=limit, hardware_class=hardware_class,
    )
    models = [build_recommendation(c, hardware, hardware_class) for c in ranked]

    return RecommendationResult(
        models=models,
        summary=summarize(models),
        hardware_notes=hardware_notes(hardware_class),
    )


def export_recommendations(result: RecommendationResult, format: str = "json") -> str:
    """Export recommendations in various formats"""
    data = [_export_entry(model) for model in result.models]

    if format == "json":
        return json.dumps(
            {"summary": result.summary, "hardware_notes": result.hardware_notes, "models": data},
            indent=2,
        )
    elif format == "csv":
        return _export_csv(data)
    elif format == "yaml":
        return yaml.safe_dump(
            {"summary": result.summary, "hardware_notes": result.hardware_notes, "models": data},
            default_flow_style=False,
            sort_keys=False,
        )
    else:
        raise ValueError(f"Unsupported format: {format}")


def _export_entry(model: ModelRecommendation) -> Dict[str, Any]:
    return asdict(model)


def _export_csv(data: List[Dict[str, Any]]) -> str:
    """Export data as CSV"""
    output = io.StringIO()
    if not data:
        return ""

    rows = []
    for row in data:
        # Flatten nested values
        flat_row = {}
        for key, value in row.items():
            if key == "benchmarks":
                for bench in value:
                    flat_row[f"benchmark_{bench['name'].lower().replace(' ', '_')}"] = round(bench["score"], 2)
            elif isinstance(value, list):
                flat_row[key] = ", ".join(str(item) for item in value)
            elif value is None:
                flat_row[key] = ""
            else:
                flat_row[key] = value
        rows.append(flat_row)

    writer = csv.DictWriter(output, fieldnames=list(rows[0].keys()))
    writer.writeheader()
    writer.writerows(rows)
    return output.getvalue()
