"""
User configuration persisted between sessions
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from .errors import HardwareProfileError
from .hardware import DEFAULT_HARDWARE, HardwareProfile

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = ".model-advisor"
CONFIG_FILE_NAME = "config.json"


def default_config_path() -> Path:
    return Path.home() / CONFIG_DIR_NAME / CONFIG_FILE_NAME


class AdvisorConfig:
    """Last hardware profile and use cases the user entered"""

    def __init__(self, path: Optional[Path] = None):
        self.path = path or default_config_path()
        self.data: Dict[str, Any] = self._load()

    def _load(self) -> Dict[str, Any]:
        """Load user configuration from file"""
        if self.path.exists():
            try:
                with open(self.path, 'r') as f:
                    data = json.load(f)
                if isinstance(data, dict):
                    return data
                logger.warning(f"Ignoring malformed user config: {self.path}")
            except (OSError, json.JSONDecodeError) as e:
                logger.warning(f"Failed to load user config: {e}")
        return {}

    def save(self) -> None:
        """Save user configuration to file"""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, 'w') as f:
                json.dump(self.data, f, indent=2)
        except OSError as e:
            logger.warning(f"Failed to save user config: {e}")

    def clear(self) -> bool:
        """Remove the config file; returns whether one existed"""
        self.data = {}
        if self.path.exists():
            self.path.unlink()
            return True
        return False

    @property
    def hardware(self) -> Optional[HardwareProfile]:
        stored = self.data.get("hardware")
        if not stored:
            return None
        try:
            return HardwareProfile.from_dict(stored)
        except HardwareProfileError as e:
            logger.warning(f"Ignoring saved hardware profile: {e}")
            return None

    @hardware.setter
    def hardware(self, profile: HardwareProfile) -> None:
        self.data["hardware"] = profile.to_dict()

    def hardware_or_default(self) -> HardwareProfile:
        return self.hardware or DEFAULT_HARDWARE

    @property
    def use_cases(self) -> List[str]:
        return list(self.data.get("use_cases", []))

    @use_cases.setter
    def use_cases(self, values: List[str]) -> None:
        self.data["use_cases"] = [getattr(v, "value", v) for v in values]
