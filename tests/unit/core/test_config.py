"""Tests for library settings."""

import pytest

from image_sizes.core.config import Settings, configure, get_settings
from image_sizes.core.enums import Environment, LogFormat, LogLevel
from image_sizes.core.errors import ConfigurationError
from image_sizes.domain import orientation as orientation_module


class TestSettingsDefaults:
    """Test default values."""

    def test_defaults(self):
        """Test defaults favor compact production output."""
        settings = Settings()

        assert settings.environment is Environment.PRODUCTION
        assert settings.log_level is LogLevel.INFO
        assert settings.log_format is LogFormat.JSON
        assert settings.compact_json is True
        assert settings.json_max_size_kb is None
        assert settings.json_separators == (",", ":")

    def test_non_compact_separators(self):
        """Test json_separators follows compact_json."""
        assert Settings(compact_json=False).json_separators is None

    def test_settings_are_frozen(self):
        """Test settings cannot be mutated in place."""
        settings = Settings()

        with pytest.raises(AttributeError):
            settings.compact_json = False


class TestSettingsValidation:
    """Test invalid values are rejected."""

    @pytest.mark.parametrize(
        ("kwargs", "key"),
        [
            ({"environment": "prod"}, "environment"),
            ({"log_level": 20}, "log_level"),
            ({"log_format": "json"}, "log_format"),
            ({"compact_json": "yes"}, "compact_json"),
            ({"json_max_size_kb": 0}, "json_max_size_kb"),
            ({"json_max_size_kb": True}, "json_max_size_kb"),
            ({"slow_codec_threshold": 0}, "slow_codec_threshold"),
            ({"slow_codec_threshold": "fast"}, "slow_codec_threshold"),
        ],
    )
    def test_invalid_values(self, kwargs, key):
        """Test each invalid value names its config key."""
        with pytest.raises(ConfigurationError) as exc_info:
            Settings(**kwargs)

        assert exc_info.value.details["config_key"] == key


class TestSettingsFromMapping:
    """Test building settings from config-file mappings."""

    def test_string_enum_values_are_parsed(self):
        """Test enum-valued keys accept their string forms."""
        settings = Settings.from_mapping(
            {"environment": "development", "log_level": "debug", "log_format": "Console"}
        )

        assert settings.environment is Environment.DEVELOPMENT
        assert settings.log_level is LogLevel.DEBUG
        assert settings.log_format is LogFormat.CONSOLE

    def test_unknown_keys_are_rejected(self):
        """Test typos in config files fail loudly."""
        with pytest.raises(ConfigurationError, match="Unknown configuration keys: compact"):
            Settings.from_mapping({"compact": True})

    def test_invalid_enum_string_is_rejected(self):
        """Test bad enum strings raise ConfigurationError."""
        with pytest.raises(ConfigurationError):
            Settings.from_mapping({"log_level": "verbose"})

    def test_to_dict_round_trip(self):
        """Test from_mapping(to_dict()) reproduces the settings."""
        settings = Settings(
            environment=Environment.STAGING,
            log_level=LogLevel.WARNING,
            compact_json=False,
            json_max_size_kb=4,
        )

        assert Settings.from_mapping(settings.to_dict()) == settings


class TestSettingsInstallation:
    """Test the global accessor."""

    def test_configure_replaces_settings(self):
        """Test configure() installs settings returned by get_settings()."""
        custom = Settings(json_max_size_kb=2)

        configure(custom)

        assert get_settings() is custom

    def test_configure_none_restores_defaults(self):
        """Test configure(None) goes back to defaults."""
        configure(Settings(compact_json=False))
        configure(None)

        assert get_settings() == Settings()

    def test_configure_reaches_existing_library_loggers(self):
        """Test loggers created at import time follow installed settings."""
        logger = orientation_module.logger

        configure(Settings(log_level=LogLevel.DEBUG, log_format=LogFormat.CONSOLE))

        assert logger.config.level is LogLevel.DEBUG
        assert logger.config.format is LogFormat.CONSOLE

        configure(None)

        assert logger.config.level is LogLevel.INFO

    def test_configure_rejects_other_types(self):
        """Test only Settings instances are accepted."""
        with pytest.raises(ConfigurationError):
            configure({"compact_json": False})
