"""
Unit tests for backend/settings.py
"""

import pytest
from pydantic import ValidationError

from backend.settings import Settings, get_settings
from shared import SEED_DIR


# Environment variables that CI might set which we need to clear for default tests
CI_ENV_VARS = [
    "ENVIRONMENT",
    "SEED_WORKOUTS_PATH",
    "SEED_EXERCISES_PATH",
    "MONTH_LABEL_FORMAT",
    "CORS_ALLOWED_ORIGINS",
    "SENTRY_DSN",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Clear CI environment variables to test true defaults."""
    for var in CI_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.mark.unit
class TestSettingsDefaults:
    """Test that Settings applies correct defaults."""

    def test_environment_default(self, clean_env):
        """Default environment should be development."""
        settings = Settings(_env_file=None)
        assert settings.environment == "development"

    def test_seed_paths_default_to_bundled_files(self, clean_env):
        """Seed files default to the ones shipped in shared/seed."""
        settings = Settings(_env_file=None)
        assert settings.seed_workouts_path == SEED_DIR / "workouts.yaml"
        assert settings.seed_exercises_path == SEED_DIR / "exercises.yaml"
        assert settings.seed_workouts_path.exists()
        assert settings.seed_exercises_path.exists()

    def test_month_label_format_default(self, clean_env):
        settings = Settings(_env_file=None)
        assert settings.month_label_format == "%B %Y"

    def test_cors_default_empty(self, clean_env):
        settings = Settings(_env_file=None)
        assert settings.cors_allowed_origins_list == []

    def test_sentry_dsn_default_to_none(self, clean_env):
        """Sentry DSN should default to None."""
        settings = Settings(_env_file=None)
        assert settings.sentry_dsn is None


@pytest.mark.unit
class TestSettingsValidation:
    """Test Settings validation behavior."""

    def test_valid_environments_accepted(self):
        """Valid environment values should be accepted."""
        for env in ["development", "staging", "production", "test"]:
            settings = Settings(environment=env, _env_file=None)
            assert settings.environment == env

    def test_environment_case_insensitive(self):
        """Environment validation should be case-insensitive."""
        settings = Settings(environment="PRODUCTION", _env_file=None)
        assert settings.environment == "production"

    def test_invalid_environment_raises_error(self):
        """Invalid environment should raise ValidationError."""
        with pytest.raises(ValidationError) as exc_info:
            Settings(environment="invalid", _env_file=None)
        assert "Invalid environment" in str(exc_info.value)

    @pytest.mark.parametrize("fmt", ["%B %Y", "%b %Y", "%Y-%m", "%m/%Y"])
    def test_month_label_format_accepted(self, fmt):
        settings = Settings(month_label_format=fmt, _env_file=None)
        assert settings.month_label_format == fmt

    def test_month_label_format_requires_month(self):
        with pytest.raises(ValidationError) as exc_info:
            Settings(month_label_format="%Y", _env_file=None)
        assert "month directive" in str(exc_info.value)

    def test_month_label_format_requires_year(self):
        """Labels without a year would merge the same month of different years."""
        with pytest.raises(ValidationError) as exc_info:
            Settings(month_label_format="%B", _env_file=None)
        assert "year directive" in str(exc_info.value)

    @pytest.mark.parametrize("fmt", ["%B %y", "%m/%y"])
    def test_two_digit_year_rejected(self, fmt):
        """'%y' renders 1923 and 2023 identically, so it cannot key a bucket."""
        with pytest.raises(ValidationError) as exc_info:
            Settings(month_label_format=fmt, _env_file=None)
        assert "four-digit year" in str(exc_info.value)


@pytest.mark.unit
class TestSettingsProperties:
    """Test Settings computed properties."""

    def test_cors_list_parses_comma_separated(self):
        settings = Settings(
            cors_allowed_origins="https://a.example, https://b.example",
            _env_file=None,
        )
        assert settings.cors_allowed_origins_list == [
            "https://a.example",
            "https://b.example",
        ]

    def test_cors_list_skips_blank_entries(self):
        settings = Settings(cors_allowed_origins=" , https://a.example ,", _env_file=None)
        assert settings.cors_allowed_origins_list == ["https://a.example"]

    def test_is_production_property(self):
        """is_production should return True only in production."""
        prod_settings = Settings(environment="production", _env_file=None)
        dev_settings = Settings(environment="development", _env_file=None)
        assert prod_settings.is_production is True
        assert dev_settings.is_production is False


@pytest.mark.unit
class TestGetSettings:
    """Test get_settings() function."""

    def test_get_settings_returns_settings_instance(self):
        """get_settings() should return a Settings instance."""
        get_settings.cache_clear()
        settings = get_settings()
        assert isinstance(settings, Settings)

    def test_get_settings_is_cached(self):
        """get_settings() should return the same cached instance."""
        get_settings.cache_clear()
        settings1 = get_settings()
        settings2 = get_settings()
        assert settings1 is settings2


@pytest.mark.unit
class TestSettingsFromEnv:
    """Test Settings loading from environment variables."""

    def test_settings_loads_from_env(self, monkeypatch, tmp_path):
        """Settings should load values from environment variables."""
        seed = tmp_path / "workouts.yaml"
        monkeypatch.setenv("ENVIRONMENT", "staging")
        monkeypatch.setenv("SEED_WORKOUTS_PATH", str(seed))
        monkeypatch.setenv("MONTH_LABEL_FORMAT", "%Y-%m")

        settings = Settings(_env_file=None)

        assert settings.environment == "staging"
        assert settings.seed_workouts_path == seed
        assert settings.month_label_format == "%Y-%m"

    def test_invalid_month_format_from_env(self, monkeypatch):
        monkeypatch.setenv("MONTH_LABEL_FORMAT", "%d")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)
