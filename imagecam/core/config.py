import json
import os
import tomllib
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from loguru import logger

DEFAULT_IMAGE_EXTENSIONS = [".jpg", ".jpeg", ".png", ".gif", ".bmp"]


# --- Settings Models ---
class _Section(BaseModel):
    model_config = ConfigDict(validate_assignment=True)


class GeneralSettings(_Section):
    debug_mode: bool = False
    log_dir: str = "logs"


class BrowserSettings(_Section):
    start_folder: Optional[str] = None
    image_extensions: List[str] = Field(default_factory=lambda: list(DEFAULT_IMAGE_EXTENSIONS))
    show_thumbnails: bool = True
    thumbnail_size: int = Field(default=64, ge=16, le=512)
    watch_folder: bool = True

    @field_validator("image_extensions")
    @classmethod
    def _normalize_extensions(cls, value: List[str]) -> List[str]:
        # ".PNG", "png" and ".png" all mean the same thing
        normalized = []
        for ext in value:
            ext = ext.strip().lower()
            if not ext:
                continue
            if not ext.startswith("."):
                ext = "." + ext
            if ext not in normalized:
                normalized.append(ext)
        return normalized


class CameraSettings(_Section):
    enabled: bool = True
    device_index: int = Field(default=0, ge=0)
    frame_interval_ms: int = Field(default=33, ge=1)
    snapshot_prefix: str = "selfie"


class IconSettings(_Section):
    folder: Optional[str] = None
    image: Optional[str] = None


class AppConfig(BaseModel):
    general: GeneralSettings = Field(default_factory=GeneralSettings)
    browser: BrowserSettings = Field(default_factory=BrowserSettings)
    camera: CameraSettings = Field(default_factory=CameraSettings)
    icons: IconSettings = Field(default_factory=IconSettings)


class ConfigManager:
    """
    Settings read once at startup from ``filepath``.

    ``.toml`` files are read-only. Anything else is JSON and is (re)written
    with defaults when it is missing or cannot be used.
    """
    def __init__(self, filepath: str = "config.json"):
        self.filepath = filepath
        self._data = AppConfig()
        self._load()

    @property
    def data(self) -> AppConfig:
        return self._data

    @property
    def is_toml(self) -> bool:
        return self.filepath.lower().endswith(".toml")

    def save(self):
        if self.is_toml:
            return
        try:
            os.makedirs(os.path.dirname(self.filepath) or ".", exist_ok=True)
            with open(self.filepath, "w", encoding="utf-8") as f:
                json.dump(self._data.model_dump(), f, indent=4)
        except OSError as e:
            logger.error(f"Failed to save config to {self.filepath}: {e}")

    def _read(self) -> Dict[str, Any]:
        if self.is_toml:
            with open(self.filepath, "rb") as f:
                return tomllib.load(f)
        with open(self.filepath, "r", encoding="utf-8") as f:
            return json.load(f)

    def _load(self):
        if not os.path.isfile(self.filepath):
            self.save()
            return
        try:
            self._data = AppConfig.model_validate(self._read())
        except (OSError, ValueError, ValidationError) as e:
            logger.error(f"Failed to load config from {self.filepath}: {e}")
            self.save()
            return
        logger.debug(f"Loaded config from {self.filepath}")
