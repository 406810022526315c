"""
Model catalog: immutable descriptors of locally-runnable models
"""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, FrozenSet, Iterable, Iterator, List, Optional, Tuple

from .errors import CatalogError

logger = logging.getLogger(__name__)

GGUF_FORMAT = "GGUF"
ONNX_FORMAT = "ONNX"


class Backend(str, Enum):
    """Runtime a model's recommended artifact targets"""
    MLX = "mlx"
    GGUF = "gguf"
    ONNX = "onnx"
    PYTORCH = "pytorch"
    OTHER = "other"


@dataclass(frozen=True)
class MinHardware:
    """Minimum hardware to run a model"""
    cpu: str
    ram_gb: float
    vram_gb: float


@dataclass(frozen=True)
class ModelDescriptor:
    """A catalog entry"""
    name: str
    repo: str
    publisher: str
    provider: str
    params_b: float
    type: str
    license: str
    formats: FrozenSet[str]
    backend: Backend
    quantization: str
    apple_silicon_optimized: bool
    min_hardware: MinHardware
    tasks: FrozenSet[str]
    pinokio: bool = False
    text_to_video_prompt: bool = False
    text_to_image_prompt: bool = False
    description: str = ""
    libraries: Tuple[str, ...] = ()
    cloud_providers: Tuple[str, ...] = ()
    ollama_tag: Optional[str] = None  # canonical `ollama pull` name when known

    @property
    def supports_gguf(self) -> bool:
        return GGUF_FORMAT in self.formats

    @property
    def cpu_runnable(self) -> bool:
        """GGUF and ONNX artifacts run without a GPU"""
        return GGUF_FORMAT in self.formats or ONNX_FORMAT in self.formats

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ModelDescriptor":
        """Build a descriptor from a catalog file entry"""
        min_hw = data["min_hardware"]
        return cls(
            name=data["name"],
            repo=data["repo"],
            publisher=data.get("publisher", ""),
            provider=data.get("provider", data.get("publisher", "")),
            params_b=float(data["params_b"]),
            type=data["type"],
            license=data["license"],
            formats=frozenset(data.get("formats", [])),
            backend=Backend(str(data.get("backend", "other")).lower()),
            quantization=data.get("quantization", ""),
            apple_silicon_optimized=bool(data.get("apple_silicon_optimized", False)),
            min_hardware=MinHardware(
                cpu=min_hw.get("cpu", ""),
                ram_gb=float(min_hw["ram_gb"]),
                vram_gb=float(min_hw["vram_gb"]),
            ),
            tasks=frozenset(data.get("tasks", [])),
            pinokio=bool(data.get("pinokio", False)),
            text_to_video_prompt=bool(data.get("text_to_video_prompt", False)),
            text_to_image_prompt=bool(data.get("text_to_image_prompt", False)),
            description=data.get("description", ""),
            libraries=tuple(data.get("libraries", [])),
            cloud_providers=tuple(data.get("cloud_providers", [])),
            ollama_tag=data.get("ollama_tag"),
        )


class ModelCatalog:
    """Read-only, ordered collection of model descriptors"""

    def __init__(self, models: Iterable[ModelDescriptor]):
        self._models: Tuple[ModelDescriptor, ...] = tuple(models)
        self._by_name: Dict[str, ModelDescriptor] = {}
        for model in self._models:
            if model.name in self._by_name:
                logger.warning(f"Duplicate model name in catalog: {model.name}")
                continue
            self._by_name[model.name] = model

    def __iter__(self) -> Iterator[ModelDescriptor]:
        return iter(self._models)

    def __len__(self) -> int:
        return len(self._models)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    @property
    def models(self) -> Tuple[ModelDescriptor, ...]:
        return self._models

    def get(self, name: str) -> Optional[ModelDescriptor]:
        """Get a model by name"""
        return self._by_name.get(name)

    def providers(self) -> List[str]:
        """Distinct providers, sorted"""
        return sorted({model.provider for model in self._models})

    def search(self, term: str = "", provider: Optional[str] = None) -> List[ModelDescriptor]:
        """Case-insensitive match on name or description, optionally by provider"""
        needle = term.lower()
        return [
            model
            for model in self._models
            if (needle in model.name.lower() or needle in model.description.lower())
            and (provider is None or model.provider == provider)
        ]

    @classmethod
    def from_file(cls, path: Path) -> "ModelCatalog":
        """Load a catalog from a JSON file"""
        try:
            with open(path, 'r') as f:
                data = json.load(f)
            entries = data["models"] if isinstance(data, dict) else data
            catalog = cls(ModelDescriptor.from_dict(entry) for entry in entries)
            logger.info(f"Loaded {len(catalog)} models from {path}")
            return catalog

        except FileNotFoundError:
            logger.error(f"Models file not found: {path}")
            raise CatalogError(f"Models file not found: {path}")
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in models file: {e}")
            raise CatalogError(f"Invalid JSON in models file {path}: {e}") from e
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.error(f"Malformed model entry in {path}: {e}")
            raise CatalogError(f"Malformed model entry in {path}: {e}") from e

