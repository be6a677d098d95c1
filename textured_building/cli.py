"""
Textured Building command line.

Commands:
    textured-building check <code>...    - Runs item codes through the filter
    textured-building validate <file>    - Validates a config file
    textured-building schema             - Shows the config fields
    textured-building init [file]        - Writes a default config file
"""
import json
import logging
import os
import sys
from typing import List, Optional

from .config import CONFIG_NAME, create_default_config
from .filters import is_allowed
from .models.item import ItemDescriptor, MaterialClass


def _load_config(config_path: Optional[str]):
    if not config_path:
        return create_default_config()
    if not os.path.exists(config_path):
        print(f"❌ Config not found: {config_path}")
        return None
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        print(f"❌ Invalid config: {e}")
        return None
    except OSError as e:
        print(f"❌ Could not read config: {e}")
        return None
    if not isinstance(data, dict):
        print(f"❌ Invalid config: expected a JSON object, got {type(data).__name__}")
        return None

    config = create_default_config()
    config.load_dict(data)
    return config


def check_codes(args: List[str]) -> int:
    """Runs codes through the filter and prints the verdicts."""
    codes = []
    config_path = None
    material = MaterialClass.NONE
    entity_class = None
    has_nutrition = False
    is_meal = False
    is_block = True

    i = 0
    while i < len(args):
        a = args[i]
        if a == "--config" and i + 1 < len(args):
            config_path = args[i + 1]
            i += 2
            continue
        if a == "--material" and i + 1 < len(args):
            try:
                material = MaterialClass(args[i + 1].lower())
            except ValueError:
                print(f"❌ Unknown material: {args[i + 1]}")
                return 2
            i += 2
            continue
        if a == "--entity" and i + 1 < len(args):
            entity_class = args[i + 1]
            i += 2
            continue
        if a == "--nutrition":
            has_nutrition = True
        elif a == "--meal":
            is_meal = True
        elif a == "--item":
            is_block = False
        else:
            codes.append(a)
        i += 1

    if not codes:
        print("❌ Usage: textured-building check <code>... [--config file]")
        return 2

    config = _load_config(config_path)
    if config is None:
        return 2

    settings = config.snapshot()
    denied = 0
    for code in codes:
        item = ItemDescriptor(
            code=code,
            is_block=is_block,
            has_nutrition=has_nutrition,
            material=material,
            entity_class=entity_class,
            is_meal=is_meal,
        )
        if is_allowed(item, settings):
            print(f"✅ {code}")
        else:
            print(f"🚫 {code}")
            denied += 1

    return 1 if denied else 0


def validate(file_path: str) -> int:
    """Validates a config file."""
    from .validator import validate_config_file
    result = validate_config_file(file_path)

    print("=" * 50)
    print(f"📋 Validation: {os.path.basename(file_path)}")
    print("=" * 50)

    if result.errors:
        print(f"\n❌ ERRORS ({len(result.errors)}):")
        for error in result.errors:
            print(f"   • {error}")

    if result.warnings:
        print(f"\n⚠️  WARNINGS ({len(result.warnings)}):")
        for warning in result.warnings:
            print(f"   • {warning}")

    print("")
    print("✅ Config valid!" if result.valid else "❌ Config has errors")
    return 0 if result.valid else 1


def show_schema() -> int:
    for name, info in create_default_config().get_schema().items():
        print(f"{name:<22} {info['type']:<5} default={info['default']!r:<7} {info['description']}")
    return 0


def init_config(file_path: Optional[str] = None) -> int:
    """Writes a config file with default values."""
    file_path = file_path or f"{CONFIG_NAME}.json"
    if os.path.exists(file_path):
        print(f"❌ File already exists: {file_path}")
        return 1

    with open(file_path, 'w', encoding='utf-8') as f:
        json.dump(create_default_config().to_dict(), f, indent=2)

    print(f"✅ Config created: {file_path}")
    return 0


def show_help():
    print("""
🧱 Textured Building - Random Placement Rules
=============================================

Commands:
    textured-building check <code>... [options]  Runs codes through the filter
        --config <file>     Config file (defaults otherwise)
        --material <m>      none | plant | liquid | other
        --entity <class>    Block entity class
        --nutrition         Item has nutrition
        --meal              Item is a meal container
        --item              Not a block
    textured-building validate <file>            Validates a config file
    textured-building schema                     Shows config fields
    textured-building init [file]                Writes default config

Global:
    --verbose, -v           Debug logging

Examples:
    textured-building check game:rawclay game:bowl-fired
    textured-building check game:chest-east --entity GenericTypedContainer
""")


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    argv = list(sys.argv[1:] if argv is None else argv)

    verbose = "--verbose" in argv or "-v" in argv
    argv = [a for a in argv if a not in ("--verbose", "-v")]
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
    )

    if not argv:
        show_help()
        return 0

    command = argv[0].lower()

    if command in ("help", "-h", "--help"):
        show_help()
        return 0

    if command == "check":
        return check_codes(argv[1:])

    if command == "validate":
        if len(argv) < 2:
            print("❌ Usage: textured-building validate <config.json>")
            return 2
        return validate(argv[1])

    if command == "schema":
        return show_schema()

    if command == "init":
        return init_config(argv[1] if len(argv) > 1 else None)

    print(f"❌ Unknown command: {command}")
    show_help()
    return 2


if __name__ == "__main__":
    sys.exit(main())
