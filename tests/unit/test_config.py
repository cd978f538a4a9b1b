"""Unit tests for configuration management."""

from pathlib import Path

import pytest

from trip_ledger.config.defaults import LedgerParams, get_default_config
from trip_ledger.config.loader import ConfigLoader
from trip_ledger.config.validation import ConfigValidator


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Config directory with a trips.yaml holding two trips."""
    (tmp_path / "trips.yaml").write_text(
        "trips:\n"
        "  paris-2024:\n"
        "    ledger:\n"
        "      default_currency: EUR\n"
        "      settlement_threshold: 0.05\n"
        "  empty-trip:\n"
    )
    return tmp_path


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        """Test that default configuration can be created."""
        config = get_default_config()
        assert config.ledger.settlement_threshold == 0.01
        assert config.ledger.currency_precision == 2
        assert config.ledger.zero_sum_tolerance == 1e-6
        assert config.ledger.require_uniform_currency is True
        assert config.logging.level == "INFO"

    def test_defaults_are_frozen(self) -> None:
        params = LedgerParams()
        with pytest.raises(AttributeError):
            params.settlement_threshold = 1.0  # type: ignore[misc]


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_config_loader_creation(self) -> None:
        loader = ConfigLoader.create()
        assert isinstance(loader.config_dir, Path)

    def test_merge_config_defaults_only(self, tmp_path: Path) -> None:
        loader = ConfigLoader.create(tmp_path)
        config = loader.merge_config("UNKNOWN-TRIP")

        assert config["ledger"]["settlement_threshold"] == 0.01
        assert config["ledger"]["default_currency"] == "USD"

    def test_trip_overrides(self, config_dir: Path) -> None:
        loader = ConfigLoader.create(config_dir)
        config = loader.merge_config("paris-2024")

        assert config["ledger"]["default_currency"] == "EUR"
        assert config["ledger"]["settlement_threshold"] == 0.05
        # Other defaults should remain
        assert config["ledger"]["currency_precision"] == 2

    def test_trip_without_overrides(self, config_dir: Path) -> None:
        loader = ConfigLoader.create(config_dir)
        config = loader.merge_config("empty-trip")
        assert config["ledger"]["default_currency"] == "USD"

    def test_call_overrides_win(self, config_dir: Path) -> None:
        loader = ConfigLoader.create(config_dir)
        config = loader.merge_config("paris-2024", {"ledger": {"default_currency": "GBP"}})

        assert config["ledger"]["default_currency"] == "GBP"
        assert config["ledger"]["settlement_threshold"] == 0.05

    def test_build_config(self, config_dir: Path) -> None:
        loader = ConfigLoader.create(config_dir)
        config = loader.build_config(loader.merge_config("paris-2024"))

        assert config.ledger.default_currency == "EUR"
        assert config.ledger.settlement_threshold == 0.05
        assert config.logging.format_json is False

    def test_build_config_ignores_unknown_keys(self, tmp_path: Path) -> None:
        loader = ConfigLoader.create(tmp_path)
        merged = loader.merge_config(None, {"ledger": {"not_a_field": 1}})
        config = loader.build_config(merged)
        assert config.ledger == LedgerParams()


class TestConfigValidator:
    """Test suite for configuration validation."""

    def test_valid_ledger_params(self) -> None:
        params = {
            "settlement_threshold": 0.01,
            "currency_precision": 2,
            "require_uniform_currency": False,
            "default_currency": "EUR",
        }
        assert ConfigValidator.validate_ledger_params(params) == []

    @pytest.mark.parametrize("field,value", [
        ("settlement_threshold", 0),
        ("settlement_threshold", 2.0),
        ("currency_precision", -1),
        ("currency_precision", 2.5),
        ("currency_precision", True),
        ("zero_sum_tolerance", -1e-6),
        ("require_uniform_currency", "yes"),
        ("default_currency", "dollars"),
        ("progress_cap_pct", 0),
        ("default_category", "  "),
    ])
    def test_invalid_ledger_param(self, field, value) -> None:
        errors = ConfigValidator.validate_ledger_params({field: value})

        assert len(errors) == 1
        assert errors[0].field == field
        assert errors[0].value == value

    def test_invalid_logging_level(self) -> None:
        errors = ConfigValidator.validate_logging_params({"level": "LOUD"})
        assert len(errors) == 1
        assert errors[0].field == "level"

    def test_validate_config(self) -> None:
        config = {
            "ledger": {"settlement_threshold": -1},
            "logging": {"format_json": "no"},
        }
        errors = ConfigValidator.validate_config(config)
        assert {e.field for e in errors} == {"settlement_threshold", "format_json"}

    def test_defaults_are_valid(self) -> None:
        loader = ConfigLoader.create()
        assert ConfigValidator.validate_config(loader.merge_config()) == []
