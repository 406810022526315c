"""
Tests for the persisted user configuration
"""

import json

from model_advisor.config import CONFIG_DIR_NAME, CONFIG_FILE_NAME, AdvisorConfig
from model_advisor.hardware import DEFAULT_HARDWARE
from model_advisor.use_cases import UseCase


class TestAdvisorConfig:

    def test_default_path_under_home(self, mock_home_dir):
        config = AdvisorConfig()
        assert config.path == mock_home_dir / CONFIG_DIR_NAME / CONFIG_FILE_NAME
        assert config.data == {}

    def test_defaults_without_file(self, temp_dir):
        config = AdvisorConfig(temp_dir / "config.json")
        assert config.hardware is None
        assert config.hardware_or_default() == DEFAULT_HARDWARE
        assert config.use_cases == []

    def test_save_and_reload(self, temp_dir, apple_hardware):
        path = temp_dir / "nested" / "config.json"
        config = AdvisorConfig(path)
        config.hardware = apple_hardware
        config.use_cases = [UseCase.TEXT_TO_IMAGE, "Translation"]
        config.save()

        reloaded = AdvisorConfig(path)
        assert reloaded.hardware == apple_hardware
        assert reloaded.use_cases == ["Text-to-Image", "Translation"]

    def test_corrupt_file_is_ignored(self, temp_dir):
        path = temp_dir / "config.json"
        path.write_text("{not json")
        config = AdvisorConfig(path)
        assert config.data == {}
        assert config.hardware is None

    def test_non_mapping_file_is_ignored(self, temp_dir):
        path = temp_dir / "config.json"
        path.write_text(json.dumps(["NVIDIA"]))
        assert AdvisorConfig(path).data == {}

    def test_invalid_saved_hardware_falls_back(self, temp_dir):
        path = temp_dir / "config.json"
        path.write_text(json.dumps({"hardware": {"ram_gb": "plenty"}}))
        config = AdvisorConfig(path)
        assert config.hardware is None
        assert config.hardware_or_default() == DEFAULT_HARDWARE

    def test_clear(self, temp_dir, nvidia_hardware):
        path = temp_dir / "config.json"
        config = AdvisorConfig(path)
        config.hardware = nvidia_hardware
        config.save()

        assert config.clear()
        assert not path.exists()
        assert config.hardware is None
        assert not config.clear()
