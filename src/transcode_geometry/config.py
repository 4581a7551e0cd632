"""
Configuration management with YAML loading and environment variable support.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .constants import DEFAULT_TARGET_RESOLUTION
from .resolution import ResolutionPolicy

SECTIONS = ["transcode", "logging"]


@dataclass
class TranscodeConfig:
    """Transcode settings. Only target_resolution is interpreted by this package."""

    target_resolution: str = DEFAULT_TARGET_RESOLUTION  # "original" or larger-side pixels
    target_video_codec: str = "h264"
    target_audio_codec: str = "aac"
    accel: str = "disabled"
    tonemap: str = "disabled"
    crf: int = 23
    preset: str = "ultrafast"
    two_pass: bool = False
    threads: int = 0
    max_bitrate: str = "0"
    bframes: int = -1
    refs: int = 0
    gop_size: int = 0
    npl: int = 0
    temporal_aq: bool = False
    cq_mode: str = "crf"
    accepted_video_codecs: list[str] = field(default_factory=lambda: ["h264"])
    accepted_audio_codecs: list[str] = field(default_factory=list)
    accepted_containers: list[str] = field(default_factory=list)
    preferred_hw_device: str = "auto"

    def resolution_policy(self) -> ResolutionPolicy:
        return ResolutionPolicy.from_setting(self.target_resolution)


@dataclass
class LoggingConfig:
    level: str = "INFO"
    rich_tracebacks: bool = False


@dataclass
class AppConfig:
    transcode: TranscodeConfig = field(default_factory=TranscodeConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, path: Path) -> "AppConfig":
        """Load configuration from YAML file."""
        if not path.exists():
            return cls()

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: dict) -> "AppConfig":
        """Create config from dictionary, ignoring unknown keys."""
        config = cls()

        for attr in SECTIONS:
            section = getattr(config, attr)
            for key, value in (data.get(attr) or {}).items():
                if hasattr(section, key):
                    setattr(section, key, value)

        # Unquoted YAML numbers arrive as int
        config.transcode.target_resolution = str(config.transcode.target_resolution).strip()

        return config

    def _to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {attr: dict(vars(getattr(self, attr))) for attr in SECTIONS}


def _get_default_config_dir() -> Path:
    """Get default config directory."""
    # Check environment variable first
    if config_dir := os.environ.get("TGEO_CONFIG_DIR"):
        return Path(config_dir)

    # Check XDG config home
    if xdg_config := os.environ.get("XDG_CONFIG_HOME"):
        return Path(xdg_config) / "transcode-geometry"

    # Fall back to ~/.config
    return Path.home() / ".config" / "transcode-geometry"


def load_config(config_path: Path | None = None, config_dir: Path | None = None) -> AppConfig:
    """
    Load configuration from file and environment.

    Args:
        config_path: Path to config file (default: searches standard locations)
        config_dir: Config directory to search when no path is given

    Returns:
        AppConfig, with TGEO_TARGET_RESOLUTION applied last if set
    """
    if config_dir is None:
        config_dir = _get_default_config_dir()

    if config_path is None:
        search_paths = [
            config_dir / "config.yaml",
            Path.cwd() / "tgeo.yaml",
        ]
        for path in search_paths:
            if path.exists():
                config_path = path
                break

    # Returns defaults if file doesn't exist
    config = AppConfig.from_yaml(config_path) if config_path else AppConfig()

    if target := os.environ.get("TGEO_TARGET_RESOLUTION"):
        config.transcode.target_resolution = target.strip()

    return config
