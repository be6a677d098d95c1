"""
Config validator.

Checks a configuration file before the mod loads it.

Usage:
    python -m textured_building.validator /path/to/textured_building.json
"""
import json
import os
import sys
from dataclasses import dataclass
from typing import Any, Dict, List

from .config import default_fields, parse_pattern_list
from .filters.patterns import WILDCARD


@dataclass
class ValidationResult:
    """Validation result."""
    valid: bool
    errors: List[str]
    warnings: List[str]
    info: Dict[str, Any]


class ConfigValidator:
    """Validates configuration data."""

    def __init__(self, data: Dict[str, Any]):
        self.data = data
        self.fields = default_fields()
        self.errors: List[str] = []
        self.warnings: List[str] = []
        self.info: Dict[str, Any] = {}

    def validate(self) -> ValidationResult:
        """Runs every check."""
        self.errors = []
        self.warnings = []
        self.info = {}

        if not isinstance(self.data, dict):
            self.errors.append("Config must be a JSON object")
            return self._result()

        self._check_fields()
        if not self.errors:
            self._check_patterns()

        return self._result()

    def _result(self) -> ValidationResult:
        return ValidationResult(
            valid=len(self.errors) == 0,
            errors=self.errors,
            warnings=self.warnings,
            info=self.info
        )

    def _check_fields(self):
        for name, value in self.data.items():
            field_def = self.fields.get(name)
            if field_def is None:
                self.warnings.append(f"Unknown key '{name}' will be ignored")
                continue
            valid, error = field_def.validate(value)
            if not valid:
                self.errors.append(f"'{name}': {error}")

    def _check_patterns(self):
        whitelist = parse_pattern_list(self.fields["whitelist"].coerce(self.data.get("whitelist")))
        blacklist = parse_pattern_list(self.fields["blacklist"].coerce(self.data.get("blacklist")))
        self.info["whitelist"] = whitelist
        self.info["blacklist"] = blacklist

        for pattern in whitelist + blacklist:
            if ":" not in pattern and not pattern.startswith(WILDCARD):
                self.warnings.append(
                    f"Pattern '{pattern}' has no domain (e.g. 'game:{pattern}') and may never match"
                )

        for pattern in sorted(set(whitelist) & set(blacklist)):
            self.warnings.append(f"Pattern '{pattern}' is on both lists; the blacklist wins")

        whitelist_only = self.fields["whitelist_only"].coerce(self.data.get("whitelist_only"))
        if whitelist_only and not whitelist:
            self.warnings.append("whitelist_only is set but the whitelist is empty; it has no effect")


def validate_config(data: Dict[str, Any]) -> ValidationResult:
    """Validates configuration data."""
    return ConfigValidator(data).validate()


def validate_config_file(file_path: str) -> ValidationResult:
    """Validates a configuration file."""
    if not os.path.exists(file_path):
        return ValidationResult(False, [f"File not found: {file_path}"], [], {})

    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        return ValidationResult(False, [f"Invalid JSON at line {e.lineno}: {e.msg}"], [], {})
    except OSError as e:
        return ValidationResult(False, [f"Error reading file: {e}"], [], {})

    return validate_config(data)


def main():
    if len(sys.argv) < 2:
        print("Usage: python -m textured_building.validator <config.json>")
        sys.exit(2)

    result = validate_config_file(sys.argv[1])
    for error in result.errors:
        print(f"ERROR: {error}")
    for warning in result.warnings:
        print(f"WARNING: {warning}")
    print("OK" if result.valid else "INVALID")
    sys.exit(0 if result.valid else 1)


if __name__ == "__main__":
    main()
