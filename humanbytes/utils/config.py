import copy
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from humanbytes.core.cache import DEFAULT_MAX_ENTRIES
from humanbytes.core.formatter import FormatOptions

logger = logging.getLogger("humanbytes.config")

DEFAULT_CONFIG: Dict[str, Dict[str, Any]] = {
    "format": {
        "decimal_places": 2,
        "fixed_decimals": False,
        "thousands_separator": "",
        "unit_separator": "",
        "unit": "",
    },
    "cache": {"max_entries": DEFAULT_MAX_ENTRIES},
}


class Config:
    def __init__(self, config_path: Optional[str] = None):
        if config_path:
            self.config_path = Path(config_path)
        else:
            self.config_path = Path(".humanbytes") / "config.yaml"

        self.config: Dict[str, Dict[str, Any]] = copy.deepcopy(DEFAULT_CONFIG)
        self._load()

    def _load(self) -> None:
        if not self.config_path.exists():
            return

        try:
            with open(self.config_path) as f:
                user_config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load config from {self.config_path}: {e}")
            return

        if not user_config:
            return
        if not isinstance(user_config, dict):
            logger.warning(f"Ignoring config {self.config_path}: top level must be a mapping")
            return

        for section, values in user_config.items():
            if not isinstance(values, dict):
                logger.warning(f"Ignoring config section {section!r}: expected a mapping")
                continue
            if section in self.config:
                self.config[section].update(values)
            else:
                self.config[section] = values
        logger.debug(f"Loaded config from {self.config_path}")

    def save(self) -> None:
        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(self.config_path, "w") as f:
            yaml.safe_dump(self.config, f, default_flow_style=False)

    def get(self, section: str, key: str, default: Any = None) -> Any:
        return self.config.get(section, {}).get(key, default)

    def set(self, section: str, key: str, value: Any) -> None:
        """
        Set a configuration value.

        Args:
            section: Configuration section
            key: Configuration key
            value: Value to set
        """
        if section not in self.config:
            self.config[section] = {}

        self.config[section][key] = value

    def get_format_options(self) -> Optional[FormatOptions]:
        """Formatting options from the config, or None when all are defaults."""
        options = FormatOptions.from_dict(self.config.get("format", {}))
        return None if options.is_default else options

    def get_cache_size(self) -> int:
        """Get the dynamic cache capacity for each direction."""
        size = int(self.get("cache", "max_entries", DEFAULT_MAX_ENTRIES))
        if size < 0:
            raise ValueError(f"cache.max_entries must be >= 0, got {size}")
        return size
