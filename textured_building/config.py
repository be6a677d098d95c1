"""
Settings system for the random placement mod.

Holds the persisted, user-editable configuration and produces immutable
snapshots for the filter.

Example:

    from textured_building.config import create_default_config

    config = create_default_config(config_dir="config")
    config.allow_clay = True
    config.blacklist = "game:chest-*, game:torch-*"

    settings = config.snapshot()
    print(settings.blacklist_patterns)
"""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple, Type, Union

logger = logging.getLogger(__name__)

CONFIG_NAME = "textured_building"

_TRUE_STRINGS = {"true", "1", "yes", "on"}
_FALSE_STRINGS = {"false", "0", "no", "off"}


def parse_pattern_list(value: Optional[str]) -> List[str]:
    """
    Splits a comma-separated pattern list.

    Entries are trimmed and empty entries dropped, order is kept:
        "a, b ,, c" -> ["a", "b", "c"]
    """
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


@dataclass(frozen=True)
class FilterSettings:
    """Immutable settings snapshot handed to each filter call."""

    allow_food: bool = False
    allow_plants: bool = False
    allow_block_entities: bool = False
    allow_liquids: bool = False
    allow_clay: bool = False
    whitelist_only: bool = False
    whitelist_patterns: Tuple[str, ...] = ()
    blacklist_patterns: Tuple[str, ...] = ()
    debug_mode: bool = False
    use_entire_inventory: bool = False

    @classmethod
    def from_strings(cls, whitelist: str = "", blacklist: str = "", **flags: bool) -> 'FilterSettings':
        """Build a snapshot from the comma-separated list form."""
        return cls(
            whitelist_patterns=tuple(parse_pattern_list(whitelist)),
            blacklist_patterns=tuple(parse_pattern_list(blacklist)),
            **flags,
        )


@dataclass
class ConfigField:
    """Defines one configuration field."""

    type: Type
    default: Any = None
    description: str = ""
    required: bool = False

    def _convert(self, value: Any) -> Any:
        if isinstance(value, self.type):
            return value
        if self.type is bool:
            if isinstance(value, str):
                lowered = value.strip().lower()
                if lowered in _TRUE_STRINGS:
                    return True
                if lowered in _FALSE_STRINGS:
                    return False
            if isinstance(value, int):
                return bool(value)
            raise ValueError(value)
        if self.type is str and isinstance(value, (list, tuple)):
            return ", ".join(str(v) for v in value)
        return self.type(value)

    def validate(self, value: Any) -> tuple[bool, str]:
        """Validates a value for this field."""
        if value is None:
            if self.required:
                return False, "Field is required"
            return True, ""

        try:
            self._convert(value)
        except (ValueError, TypeError):
            return False, f"Invalid type. Expected {self.type.__name__}"

        return True, ""

    def coerce(self, value: Any) -> Any:
        """Converts a value to the field type."""
        if value is None:
            return self.default
        try:
            return self._convert(value)
        except (ValueError, TypeError):
            return self.default


class ModConfig:
    """
    Configuration manager for the mod.

    Usage:
        config = ModConfig(
            allow_food=bool_field(default=False),
            whitelist=string_field(default=""),
        )
        config.bind("config")
        config.allow_food = True  # validated, saved, subscribers notified
    """

    def __init__(self, **fields: ConfigField):
        self._fields: Dict[str, ConfigField] = fields
        self._values: Dict[str, Any] = {}
        self._config_path: Optional[str] = None
        self._subscribers: List[Callable[[str, Any], None]] = []

        for name, field_def in fields.items():
            self._values[name] = field_def.default

    def __getattr__(self, name: str) -> Any:
        if name.startswith('_'):
            return super().__getattribute__(name)
        if name in self._values:
            return self._values[name]
        raise AttributeError(f"Config has no field '{name}'")

    def __setattr__(self, name: str, value: Any):
        if name.startswith('_'):
            super().__setattr__(name, value)
            return
        if name in self._fields:
            field_def = self._fields[name]
            valid, error = field_def.validate(value)
            if not valid:
                raise ValueError(f"Config '{name}': {error}")
            self._values[name] = field_def.coerce(value)
            self._save()
            self._notify(name, self._values[name])
        else:
            super().__setattr__(name, value)

    @property
    def path(self) -> Optional[str]:
        return self._config_path

    def bind(self, config_dir: str = "config", name: str = CONFIG_NAME):
        """Binds the config to a JSON file and loads it."""
        self._config_path = os.path.join(config_dir, f"{name}.json")
        self._load()

    def _load(self):
        """Loads configuration from the file."""
        if not self._config_path or not os.path.exists(self._config_path):
            return

        try:
            with open(self._config_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Could not read config {self._config_path}: {e}")
            return

        if not isinstance(data, dict):
            logger.warning(f"Ignoring config {self._config_path}: expected a JSON object")
            return

        self.load_dict(data)

    def load_dict(self, data: Dict[str, Any]):
        """Applies known, valid entries from a dict without saving."""
        for name, value in data.items():
            if name not in self._fields:
                logger.debug(f"Ignoring unknown config key: {name}")
                continue
            field_def = self._fields[name]
            valid, error = field_def.validate(value)
            if valid:
                self._values[name] = field_def.coerce(value)
            else:
                logger.warning(f"Ignoring config '{name}': {error}")

    def _save(self):
        """Saves configuration to the file."""
        if not self._config_path:
            return

        try:
            directory = os.path.dirname(self._config_path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self._config_path, 'w', encoding='utf-8') as f:
                json.dump(self._values, f, indent=2, ensure_ascii=False)
        except OSError as e:
            logger.error(f"Could not save config {self._config_path}: {e}")

    def _notify(self, name: str, value: Any):
        for callback in list(self._subscribers):
            callback(name, value)

    def subscribe(self, callback: Callable[[str, Any], None]):
        """Registers a callback fired with (name, value) on every change."""
        self._subscribers.append(callback)

    def unsubscribe(self, callback: Callable[[str, Any], None]):
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def get(self, name: str, default: Any = None) -> Any:
        """Gets a configuration value."""
        return self._values.get(name, default)

    def set(self, name: str, value: Any):
        """Sets a configuration value."""
        if name not in self._fields:
            raise KeyError(f"Unknown config field: {name}")
        setattr(self, name, value)

    def reset(self, name: str = None):
        """Resets configuration to default values."""
        names = [name] if name else list(self._fields)
        names = [n for n in names if n in self._fields]
        for field_name in names:
            self._values[field_name] = self._fields[field_name].default
        self._save()
        for field_name in names:
            self._notify(field_name, self._values[field_name])

    def to_dict(self) -> Dict[str, Any]:
        """Exports configuration as a dict."""
        return dict(self._values)

    def get_schema(self) -> Dict[str, Dict]:
        """Returns the field schema."""
        schema = {}
        for name, field_def in self._fields.items():
            schema[name] = {
                "type": field_def.type.__name__,
                "default": field_def.default,
                "description": field_def.description,
                "required": field_def.required,
            }
        return schema

    def validate_all(self) -> Dict[str, str]:
        """Validates all fields and returns errors."""
        errors = {}
        for name, field_def in self._fields.items():
            valid, error = field_def.validate(self._values.get(name))
            if not valid:
                errors[name] = error
        return errors

    def snapshot(self) -> FilterSettings:
        """Takes an immutable snapshot of the current values."""
        return FilterSettings(
            allow_food=self.get("allow_food", False),
            allow_plants=self.get("allow_plants", False),
            allow_block_entities=self.get("allow_block_entities", False),
            allow_liquids=self.get("allow_liquids", False),
            allow_clay=self.get("allow_clay", False),
            whitelist_only=self.get("whitelist_only", False),
            whitelist_patterns=tuple(parse_pattern_list(self.get("whitelist", ""))),
            blacklist_patterns=tuple(parse_pattern_list(self.get("blacklist", ""))),
            debug_mode=self.get("debug_mode", False),
            use_entire_inventory=self.get("use_entire_inventory", False),
        )


# Helpers for common types
def string_field(default: str = "", description: str = "", **kwargs) -> ConfigField:
    return ConfigField(str, default=default, description=description, **kwargs)

def bool_field(default: bool = False, description: str = "", **kwargs) -> ConfigField:
    return ConfigField(bool, default=default, description=description, **kwargs)


def default_fields() -> Dict[str, ConfigField]:
    """Fields of the mod's configuration file."""
    return {
        "allow_food": bool_field(description="Randomize into food blocks (pies, meals, cheese)"),
        "allow_plants": bool_field(description="Randomize into plant blocks"),
        "allow_block_entities": bool_field(description="Randomize into block entities (chests, signs)"),
        "allow_liquids": bool_field(description="Randomize into liquid blocks"),
        "allow_clay": bool_field(description="Randomize into clay and pottery"),
        "debug_mode": bool_field(description="Log every filter decision"),
        "whitelist": string_field(description="Comma-separated codes or * patterns always allowed"),
        "whitelist_only": bool_field(description="Only whitelisted items are allowed"),
        "blacklist": string_field(description="Comma-separated codes or * patterns never allowed"),
        "use_entire_inventory": bool_field(
            description="Also draw from backpack and character inventories (needs the mod on the server)"
        ),
    }


def create_default_config(config_dir: Optional[Union[str, os.PathLike]] = None) -> ModConfig:
    """Creates the mod config, loading it from config_dir when given."""
    config = ModConfig(**default_fields())
    if config_dir is not None:
        config.bind(os.fspath(config_dir))
    return config
