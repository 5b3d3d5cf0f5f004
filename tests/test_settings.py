"""
Tests for launch argument composition and persisted settings.
"""

import json
import pytest

from common.exceptions import InvalidConfigError
from steam_launch.launch_args import (
    KNOWN_BOOL_PARAMS, build_launch_args_text, unique_tokens,
)
from steam_launch.settings import LaunchSettings, SettingsStore, default_settings_path


@pytest.mark.unit
class TestBuildLaunchArgsText:
    """Tests for build_launch_args_text()."""

    def test_empty(self):
        """No parameters yields an empty string."""
        assert build_launch_args_text({}, {}, []) == ""

    def test_order_bool_then_key_value_then_custom(self):
        """Switches, then sorted key=value pairs, then custom tokens."""
        text = build_launch_args_text(
            {"verbose": True, "no_ai": False, "debugmode": True},
            {"zeta": "1", "alpha": "2"},
            ["-custom"],
        )

        assert text == "verbose debugmode alpha=2 zeta=1 -custom"

    def test_invalid_key_value_pairs_dropped(self):
        """Blank keys, keys with spaces and blank values are skipped."""
        text = build_launch_args_text(
            {},
            {"": "x", "bad key": "x", "empty": "  ", "multi": "a\nb", "ok": " v "},
            [],
        )

        assert text == "ok=v"

    def test_duplicates_removed(self):
        """A token repeated across sources appears once."""
        text = build_launch_args_text({"verbose": True}, {}, ["verbose", " verbose "])

        assert text == "verbose"

    def test_unique_tokens_drops_blanks(self):
        """Blank tokens are discarded and order kept."""
        assert unique_tokens(["b", " ", "a", "b", ""]) == ["b", "a"]

    def test_known_params(self):
        """The game's documented switches are listed."""
        assert "skip_nat_server_usage" in KNOWN_BOOL_PARAMS
        assert "big_water" in KNOWN_BOOL_PARAMS
        assert len(KNOWN_BOOL_PARAMS) == 9


@pytest.mark.unit
class TestLaunchSettings:
    """Tests for LaunchSettings."""

    def test_round_trip_dict(self):
        """to_dict/from_dict preserve all fields."""
        settings = LaunchSettings({"verbose": True}, {"map": "m"}, ["-x"])

        assert LaunchSettings.from_dict(settings.to_dict()) == settings

    def test_from_dict_defaults(self):
        """Missing keys fall back to empty collections."""
        assert LaunchSettings.from_dict({}) == LaunchSettings()

    def test_from_dict_rejects_wrong_types(self):
        """Wrong container types raise InvalidConfigError."""
        with pytest.raises(InvalidConfigError):
            LaunchSettings.from_dict({"custom_tokens": "not-a-list"})

    @pytest.mark.parametrize("value", ["false", 0, 1, None])
    def test_from_dict_rejects_non_bool_switch(self, value):
        """Switch values must be JSON booleans, not truthy stand-ins."""
        with pytest.raises(InvalidConfigError) as exc_info:
            LaunchSettings.from_dict({"bool_params": {"verbose": value}})

        assert exc_info.value.details["field"] == "bool_params.verbose"

    def test_args_text(self):
        """args_text() composes the launch string."""
        settings = LaunchSettings({"opengl": True}, {"map": "m"}, [])

        assert settings.args_text() == "opengl map=m"


@pytest.mark.integration
class TestSettingsStore:
    """Tests for SettingsStore."""

    def test_default_path_env_override(self, settings_path):
        """RWR_LAUNCHER_CONFIG overrides the default location."""
        assert default_settings_path() == settings_path

    def test_missing_file_gives_defaults(self, settings_path):
        """No file yields empty settings without creating one."""
        store = SettingsStore()

        assert store.load() == LaunchSettings()
        assert not settings_path.exists()

    def test_mutators_persist(self, settings_path):
        """Every mutator saves to disk."""
        store = SettingsStore()
        store.set_bool_param("verbose", True)
        store.set_key_value_param("map", "map4")
        store.set_custom_tokens_from_text("  -a \n\n-b\r\n")

        data = json.loads(settings_path.read_text())
        assert data["bool_params"] == {"verbose": True}
        assert data["key_value_params"] == {"map": "map4"}
        assert data["custom_tokens"] == ["-a", "-b"]

        reloaded = SettingsStore(settings_path).load()
        assert reloaded.args_text() == "verbose map=map4 -a -b"

    def test_remove_key_value_param(self, settings_path):
        """Removing an unset key reports False."""
        store = SettingsStore()
        store.set_key_value_param("map", "m")

        assert store.remove_key_value_param("map") is True
        assert store.remove_key_value_param("map") is False
        assert store.settings.key_value_params == {}

    def test_malformed_json(self, settings_path):
        """Invalid JSON raises InvalidConfigError."""
        settings_path.parent.mkdir(parents=True)
        settings_path.write_text("{not json")

        with pytest.raises(InvalidConfigError):
            SettingsStore().load()

    def test_non_object_json(self, settings_path):
        """A JSON array is not a settings object."""
        settings_path.parent.mkdir(parents=True)
        settings_path.write_text("[]")

        with pytest.raises(InvalidConfigError):
            SettingsStore().load()

    def test_save_leaves_no_temp_files(self, settings_path):
        """Atomic save cleans up its temporary file."""
        SettingsStore().set_bool_param("flip", True)

        assert [p.name for p in settings_path.parent.iterdir()] == ["settings.json"]
