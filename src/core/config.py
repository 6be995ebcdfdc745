from typing import Any, Optional
import json
import os
from pydantic import BaseModel, Field, ValidationError
from loguru import logger
from .events import Signal
from .exceptions import ConfigurationError

# --- Settings Models ---
class GeneralSettings(BaseModel):
    debug_mode: bool = False
    log_dir: Optional[str] = None

class DispatcherSettings(BaseModel):
    capacity: int = Field(default=4, gt=0)

class AppConfig(BaseModel):
    general: GeneralSettings = Field(default_factory=GeneralSettings)
    dispatcher: DispatcherSettings = Field(default_factory=DispatcherSettings)

# --- Manager ---
class ConfigManager:
    """
    Loads application configuration and notifies listeners of changes.

    Settings are read from a JSON or TOML file when one exists; otherwise
    defaults are used. Nothing is written back to disk.
    """
    def __init__(self, filepath: Optional[str] = None):
        self.filepath = filepath
        self._data = AppConfig()
        self.on_changed = Signal("ConfigChanged")
        self._load()

    @property
    def data(self) -> AppConfig:
        return self._data

    def update(self, section: str, key: str, value: Any):
        """Update a setting, validate via Pydantic and emit change event."""
        if not hasattr(self._data, section):
            raise ConfigurationError(f"Invalid section: {section}")

        section_obj = getattr(self._data, section)
        if key not in type(section_obj).model_fields:
            raise ConfigurationError(f"Invalid key: {key} in section {section}")

        raw = self._data.model_dump()
        raw[section][key] = value
        self._data = self._validate(raw)
        self.on_changed.emit(section, key, value)

    def get(self, section: str, key: str) -> Any:
        section_obj = getattr(self._data, section)
        return getattr(section_obj, key)

    def _load(self):
        """Load settings from JSON or TOML file if present; otherwise keep defaults."""
        if not self.filepath or not os.path.isfile(self.filepath):
            if self.filepath:
                logger.debug(f"Config file {self.filepath} not found, using defaults")
            return

        try:
            if self.filepath.endswith('.toml'):
                import tomllib
                with open(self.filepath, "rb") as f:
                    raw = tomllib.load(f)
            else:
                with open(self.filepath, "r", encoding="utf-8") as f:
                    raw = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to load config from {self.filepath}: {e}")
            raise ConfigurationError(f"Cannot read {self.filepath}: {e}") from e

        self._data = self._validate(raw)
        logger.debug(f"Config loaded from {self.filepath}")

    @staticmethod
    def _validate(raw: Any) -> AppConfig:
        try:
            return AppConfig.model_validate(raw)
        except ValidationError as e:
            raise ConfigurationError(str(e)) from e
