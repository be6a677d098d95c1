"""
Tests for the persisted mod configuration.
"""
import json

import pytest

from textured_building.config import (
    ConfigField,
    FilterSettings,
    ModConfig,
    bool_field,
    create_default_config,
    default_fields,
)


class TestConfigField:

    def test_bool_from_strings(self):
        field = bool_field()
        assert field.validate("true") == (True, "")
        assert field.coerce("false") is False
        assert field.coerce("YES") is True

    def test_bool_rejects_garbage(self):
        valid, error = bool_field().validate("maybe")
        assert not valid
        assert "bool" in error

    def test_required(self):
        assert ConfigField(str, required=True).validate(None) == (False, "Field is required")

    def test_string_from_list(self):
        assert ConfigField(str).coerce(["game:a", "game:b"]) == "game:a, game:b"


class TestModConfig:

    def test_defaults_are_restrictive(self):
        config = create_default_config()
        for name, value in config.to_dict().items():
            assert value in (False, ""), name

    def test_snapshot_parses_lists(self):
        config = create_default_config()
        config.whitelist = "game:log-*, game:planks-oak ,,"
        config.whitelist_only = True

        settings = config.snapshot()

        assert isinstance(settings, FilterSettings)
        assert settings.whitelist_patterns == ("game:log-*", "game:planks-oak")
        assert settings.blacklist_patterns == ()
        assert settings.whitelist_only is True

    def test_snapshot_is_immutable(self):
        settings = create_default_config().snapshot()
        with pytest.raises(AttributeError):
            settings.allow_food = True

    def test_invalid_assignment_raises(self):
        config = create_default_config()
        with pytest.raises(ValueError):
            config.allow_food = "sometimes"

    def test_unknown_field(self):
        config = create_default_config()
        with pytest.raises(KeyError):
            config.set("allow_everything", True)
        with pytest.raises(AttributeError):
            config.allow_everything

    def test_subscribers_notified(self):
        config = create_default_config()
        changes = []
        config.subscribe(lambda name, value: changes.append((name, value)))

        config.allow_clay = "true"
        config.set("blacklist", "game:chest-*")

        assert changes == [("allow_clay", True), ("blacklist", "game:chest-*")]

    def test_unsubscribe(self):
        config = create_default_config()
        changes = []
        callback = lambda name, value: changes.append(name)  # noqa: E731
        config.subscribe(callback)
        config.unsubscribe(callback)
        config.allow_food = True
        assert changes == []

    def test_reset(self):
        config = create_default_config()
        config.allow_food = True
        config.allow_clay = True
        config.reset("allow_food")
        assert config.allow_food is False
        assert config.allow_clay is True
        config.reset()
        assert config.allow_clay is False

    def test_reset_notifies_subscribers(self):
        config = create_default_config()
        config.allow_food = True
        changes = []
        config.subscribe(lambda name, value: changes.append((name, value)))

        config.reset("allow_food")
        assert changes == [("allow_food", False)]

        config.reset()
        assert len(changes) == 1 + len(default_fields())

    def test_schema(self):
        schema = create_default_config().get_schema()
        assert set(schema) == set(default_fields())
        assert schema["whitelist"]["type"] == "str"
        assert schema["allow_food"]["default"] is False
        assert set(schema["allow_food"]) == {"type", "default", "description", "required"}

    def test_validate_all(self):
        config = ModConfig(name=ConfigField(str, required=True))
        assert config.validate_all() == {"name": "Field is required"}


class TestPersistence:

    def test_save_and_reload(self, tmp_path):
        config = create_default_config(tmp_path)
        config.allow_plants = True
        config.blacklist = "game:torch-*"

        path = tmp_path / "textured_building.json"
        assert json.loads(path.read_text(encoding="utf-8"))["allow_plants"] is True

        reloaded = create_default_config(tmp_path)
        assert reloaded.allow_plants is True
        assert reloaded.snapshot().blacklist_patterns == ("game:torch-*",)

    def test_missing_file_keeps_defaults(self, tmp_path):
        config = create_default_config(tmp_path / "nowhere")
        assert config.allow_food is False

    def test_malformed_file_keeps_defaults(self, tmp_path, caplog):
        (tmp_path / "textured_building.json").write_text("{not json", encoding="utf-8")
        config = create_default_config(tmp_path)
        assert config.allow_food is False
        assert "Could not read config" in caplog.text

    def test_unknown_and_invalid_keys_ignored(self, tmp_path):
        (tmp_path / "textured_building.json").write_text(
            json.dumps({"allow_food": True, "allow_clay": "perhaps", "legacy_key": 3}),
            encoding="utf-8",
        )
        config = create_default_config(tmp_path)
        assert config.allow_food is True
        assert config.allow_clay is False
        assert "legacy_key" not in config.to_dict()
