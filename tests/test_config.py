"""
Tests for session configuration
"""

import pytest

from pyq3rcon import ConfigValidationError, SessionConfig
from pyq3rcon.config.validation import parse_bool, validate_host, validate_interval, validate_port


class TestSessionConfig:
    """Test defaults and loading"""

    def test_defaults(self):
        config = SessionConfig()
        assert config.logging_enabled is True
        assert config.getstatus_interval == 2000
        assert config.min_command_interval == 1000

    def test_dict_round_trip(self):
        config = SessionConfig(getstatus_interval=500, logging_enabled=False)
        assert SessionConfig.from_dict(config.to_dict()) == config

    def test_update_ignores_unknown_keys(self):
        config = SessionConfig()
        config.update(getstatus_interval=750, bogus=1)
        assert config.getstatus_interval == 750
        assert not hasattr(config, "bogus")

    def test_validate_rejects_zero_poll_interval(self):
        with pytest.raises(ConfigValidationError):
            SessionConfig(getstatus_interval=0).validate()

    def test_validate_rejects_bad_file_format(self):
        with pytest.raises(ConfigValidationError):
            SessionConfig(log_file_format="transcript.log").validate()

    def test_preferences_top_level_keys(self, tmp_path):
        path = tmp_path / "preferences.ini"
        path.write_text("logging_enabled=0\ngetstatus_interval=500\n", encoding="utf-8")
        config = SessionConfig.from_preferences(path)
        assert config.logging_enabled is False
        assert config.getstatus_interval == 500

    def test_preferences_general_section(self, tmp_path):
        path = tmp_path / "preferences.ini"
        path.write_text("[General]\nlogging_enabled=1\ngetstatus_interval=3000\n", encoding="utf-8")
        config = SessionConfig.from_preferences(path)
        assert config.logging_enabled is True
        assert config.getstatus_interval == 3000

    def test_missing_preferences_gives_defaults(self, tmp_path):
        assert SessionConfig.from_preferences(tmp_path / "nope.ini") == SessionConfig()

    def test_bad_interval_in_preferences(self, tmp_path):
        path = tmp_path / "preferences.ini"
        path.write_text("getstatus_interval=soon\n", encoding="utf-8")
        with pytest.raises(ConfigValidationError):
            SessionConfig.from_preferences(path)


class TestValidation:
    """Test validation helpers"""

    def test_host(self):
        assert validate_host(" example.org ") == "example.org"
        with pytest.raises(ConfigValidationError):
            validate_host("   ")

    def test_port(self):
        assert validate_port(27960) == 27960
        for bad in (0, 65536, "27960", True):
            with pytest.raises(ConfigValidationError):
                validate_port(bad)

    def test_interval(self):
        assert validate_interval("x", 0) == 0
        with pytest.raises(ConfigValidationError):
            validate_interval("x", -1)
        with pytest.raises(ConfigValidationError):
            validate_interval("x", 1.5)

    @pytest.mark.parametrize("value,expected", [
        ("0", False), ("false", False), ("1", True), ("true", True), ("", True), (False, False),
    ])
    def test_parse_bool(self, value, expected):
        assert parse_bool(value) is expected
