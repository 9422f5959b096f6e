"""
Tests for configuration loading and validation.
"""

from pathlib import Path

import pytest

from payperiod.config import AppConfig, get_default_config_path
from payperiod.domain.models import LockedMonth, PayrollEventType


EXAMPLE_CONFIG = Path(__file__).parent.parent / "config.example.yaml"


class TestAppConfig:
    """Tests for AppConfig."""

    def test_defaults(self):
        """Test the defaults of a minimal config."""
        config = AppConfig(locked_month="2025-06")

        assert config.get_locked_month() == LockedMonth(2025, 6)
        assert config.weekend_days == [5, 6]
        assert config.locale == "fr"
        assert config.default_event_type is PayrollEventType.PAID_LEAVE
        assert config.employees == []

    def test_example_config_loads(self):
        """Test the bundled example configuration."""
        config = AppConfig.load(EXAMPLE_CONFIG)

        assert config.locked_month == "2025-06"
        assert config.find_employee("1").name == "Marie Dubois"
        assert config.find_employee("99") is None

    def test_invalid_locked_month(self):
        """Test that the locked month must be YYYY-MM."""
        with pytest.raises(ValueError, match="locked_month must be formatted as YYYY-MM"):
            AppConfig(locked_month="juin 2025")

    def test_weekend_days_validated_and_deduplicated(self):
        """Test weekday range checks and de-duplication."""
        config = AppConfig(locked_month="2025-06", weekend_days=[6, 5, 6])
        assert config.weekend_days == [6, 5]

        with pytest.raises(ValueError, match="weekend_days must be between 0 and 6"):
            AppConfig(locked_month="2025-06", weekend_days=[7])

    def test_duplicate_employee_ids(self):
        """Test that employee ids must be unique."""
        with pytest.raises(ValueError, match="Duplicate employee id"):
            AppConfig(
                locked_month="2025-06",
                employees=[{"id": 1, "name": "A"}, {"id": "1", "name": "B"}],
            )

    def test_missing_file_without_locked_month(self, tmp_path):
        """Test that a missing config file needs a locked month."""
        with pytest.raises(FileNotFoundError, match="no locked month given"):
            AppConfig.load(tmp_path / "config.yaml")

    def test_missing_file_with_locked_month_uses_defaults(self, tmp_path):
        """Test that a locked month alone is enough without a config file."""
        config = AppConfig.load(tmp_path / "config.yaml", locked_month="2025-07")

        assert config.get_locked_month() == LockedMonth(2025, 7)
        assert config.weekend_days == [5, 6]
        assert config.employees == []

    def test_locked_month_overrides_file(self):
        """Test that a given locked month replaces the file's and keeps the rest."""
        config = AppConfig.load(EXAMPLE_CONFIG, locked_month="2025-09")

        assert config.locked_month == "2025-09"
        assert config.find_employee("2").name == "Pierre Martin"

    def test_invalid_locked_month_override(self):
        """Test that an override goes through the same validation."""
        with pytest.raises(ValueError, match="locked_month must be formatted as YYYY-MM"):
            AppConfig.load(EXAMPLE_CONFIG, locked_month="2025/09")

    def test_non_mapping_root(self, tmp_path):
        """Test that a YAML list is rejected."""
        path = tmp_path / "config.yaml"
        path.write_text("- 2025-06\n", encoding="utf-8")

        with pytest.raises(ValueError, match="must hold a mapping of settings"):
            AppConfig.load(path)

    def test_invalid_yaml(self, tmp_path):
        """Test that malformed YAML is reported as ValueError."""
        path = tmp_path / "config.yaml"
        path.write_text("locked_month: [2025-06\n", encoding="utf-8")

        with pytest.raises(ValueError, match="is not valid YAML"):
            AppConfig.load(path)


def test_default_config_path_prefers_working_directory(tmp_path, monkeypatch):
    """The working directory's config.yaml wins when it exists."""
    (tmp_path / "config.yaml").write_text("locked_month: 2025-06\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert get_default_config_path().resolve() == (tmp_path / "config.yaml").resolve()
