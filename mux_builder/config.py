from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Dict, Optional
import json
import os
import logging
from pathlib import Path

from mux_builder.backend import BinaryPaths
from mux_builder.fonts import DEFAULT_FONT_TABLE
from mux_builder.language import DEFAULT_DISPLAY_NAMES, LanguageConfig

logger = logging.getLogger(__name__)

# Config file location
CONFIG_DIR = Path(os.environ.get("MUX_CONFIG_DIR", "~/.config/mux_builder")).expanduser()
CONFIG_FILE = CONFIG_DIR / "settings.json"

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class MuxSettings(BaseSettings):
    """Merge settings. Environment variables use the MUX_ prefix."""

    model_config = SettingsConfigDict(
        env_prefix="MUX_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Backend binaries; unset means not installed
    ffmpeg_path: Optional[str] = None
    mkvmerge_path: Optional[str] = None
    fonts_dir: str = "fonts"
    # Mux into MP4 (ffmpeg only) instead of Matroska
    use_mp4: bool = False
    simulcast: bool = False
    skip_subtitle_mux: bool = False
    # 2-letter code -> track display name used for mkvmerge track names
    display_names: Dict[str, str] = dict(DEFAULT_DISPLAY_NAMES)
    # ASS font name -> file name inside fonts_dir
    font_table: Dict[str, str] = dict(DEFAULT_FONT_TABLE)
    log_level: str = "INFO"

    def binaries(self) -> BinaryPaths:
        return BinaryPaths(ffmpeg=self.ffmpeg_path, mkvmerge=self.mkvmerge_path)

    def language_config(self) -> LanguageConfig:
        return LanguageConfig(display_names=dict(self.display_names))


# In-memory cache of settings
_cached_settings: Optional[MuxSettings] = None


def load_settings(path: Optional[Path] = None) -> MuxSettings:
    """Load settings from a JSON file (values override the environment).

    Falls back to environment/defaults when the file is missing or unreadable.
    """
    global _cached_settings

    if _cached_settings is not None and path is None:
        return _cached_settings

    config_file = Path(path) if path is not None else CONFIG_FILE
    settings = None
    if config_file.exists():
        try:
            data = json.loads(config_file.read_text())
            settings = MuxSettings(**data)
            logger.info(f"Loaded settings from {config_file}")
        except Exception as e:
            logger.error(f"Failed to load settings from {config_file}: {e}")

    if settings is None:
        logger.debug("Using default settings (no config file found or failed to parse)")
        settings = MuxSettings()

    _cached_settings = settings
    return settings


def save_settings(settings: MuxSettings, path: Optional[Path] = None) -> None:
    """Save settings to file."""
    global _cached_settings

    config_file = Path(path) if path is not None else CONFIG_FILE
    config_file.parent.mkdir(parents=True, exist_ok=True)
    config_file.write_text(json.dumps(settings.model_dump(), indent=2, ensure_ascii=False))
    _cached_settings = settings
    logger.info(f"Settings saved to {config_file}")


def clear_settings_cache() -> None:
    """Clear the cached settings (forces reload)."""
    global _cached_settings
    _cached_settings = None


def get_settings() -> MuxSettings:
    return load_settings()


def get_log_level_from_env() -> str:
    """Get log level from environment variable or default to INFO."""
    return os.environ.get("MUX_LOG_LEVEL", "INFO").upper()


def set_log_level(level: str) -> str:
    """Set the root logger level; invalid names fall back to INFO."""
    level_upper = level.upper()

    if level_upper not in VALID_LOG_LEVELS:
        logger.warning(f"Invalid log level '{level}', using INFO")
        level_upper = "INFO"

    logging.getLogger().setLevel(getattr(logging, level_upper))
    logger.debug(f"Log level set to {level_upper}")
    return level_upper
