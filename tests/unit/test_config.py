"""Unit tests for configuration management."""

import pytest
from pathlib import Path

from xover_app.config.defaults import IndicatorConfig, get_default_config
from xover_app.config.loader import ConfigLoader, indicator_config_from_dict
from xover_app.config.validation import ConfigValidator
from xover_app.errors import ConfigurationError


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Config directory with instrument overrides."""
    (tmp_path / "instruments.yaml").write_text(
        "instruments:\n"
        "  BTC-USD:\n"
        "    rsi:\n"
        "      period: 14\n"
        "  BROKEN:\n"
        "    macd:\n"
        "      fast: 30\n"
        "      slow: 26\n"
        "  FLAT-RSI:\n"
        "    rsi: 14\n"
        "  SCALAR: 14\n",
        encoding="utf-8",
    )
    return tmp_path


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        """Test that default configuration matches the documented periods."""
        config = get_default_config()
        assert config.macd.fast == 12
        assert config.macd.slow == 26
        assert config.macd.signal == 14
        assert config.rsi.period == 10
        assert config.stoch.k == 14
        assert config.stoch.slowing == 3
        assert config.stoch.d == 3

    def test_default_config_is_immutable(self) -> None:
        """Test that default parameters cannot be reassigned."""
        config = get_default_config()
        with pytest.raises(AttributeError):
            config.macd.fast = 5  # type: ignore[misc]


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_config_loader_creation(self) -> None:
        """Test that ConfigLoader can be created."""
        loader = ConfigLoader.create()
        assert isinstance(loader.config_dir, Path)
        assert loader.defaults == get_default_config()

    def test_merge_config_defaults_only(self, tmp_path: Path) -> None:
        """Missing instruments.yaml falls back to defaults."""
        loader = ConfigLoader.create(tmp_path)
        config = loader.merge_config("UNKNOWN-INSTRUMENT")

        assert config["macd"] == {"fast": 12, "slow": 26, "signal": 14}
        assert config["rsi"]["period"] == 10

    def test_instrument_overrides(self, config_dir: Path) -> None:
        """Test that instrument overrides replace only the keys they name."""
        loader = ConfigLoader.create(config_dir)
        config = loader.merge_config("BTC-USD")

        assert config["rsi"]["period"] == 14
        assert config["macd"]["fast"] == 12

    def test_call_overrides_win(self, config_dir: Path) -> None:
        """Test that per-call overrides take precedence over instrument overrides."""
        loader = ConfigLoader.create(config_dir)
        config = loader.merge_config("BTC-USD", {"rsi": {"period": 21}, "stoch": {"k": 5}})

        assert config["rsi"]["period"] == 21
        assert config["stoch"] == {"k": 5, "slowing": 3, "d": 3}

    def test_empty_instruments_file(self, tmp_path: Path) -> None:
        """Test that an empty instruments file yields no overrides."""
        (tmp_path / "instruments.yaml").write_text("", encoding="utf-8")
        loader = ConfigLoader.create(tmp_path)
        assert loader.load_instrument_config("BTC-USD") == {}

    def test_load_indicator_config(self, config_dir: Path) -> None:
        """Test that the merged configuration resolves to IndicatorConfig."""
        config = ConfigLoader.create(config_dir).load_indicator_config("BTC-USD")

        assert isinstance(config, IndicatorConfig)
        assert config.rsi.period == 14
        assert config.stoch.k == 14

    def test_load_indicator_config_rejects_invalid(self, config_dir: Path) -> None:
        """Test that validation failures surface as ConfigurationError."""
        loader = ConfigLoader.create(config_dir)

        with pytest.raises(ConfigurationError) as exc_info:
            loader.load_indicator_config("BROKEN")

        assert exc_info.value.recoverable is False
        assert exc_info.value.errors[0].field == "macd.fast"

    def test_load_indicator_config_rejects_unknown_keys(self, tmp_path: Path) -> None:
        """Test that unknown section keys surface as ConfigurationError."""
        loader = ConfigLoader.create(tmp_path)

        with pytest.raises(ConfigurationError):
            loader.load_indicator_config("BTC-USD", {"rsi": {"length": 14}})

    def test_load_indicator_config_rejects_scalar_section(self, config_dir: Path) -> None:
        """Test that a section written as a bare value is reported, not a TypeError."""
        loader = ConfigLoader.create(config_dir)

        with pytest.raises(ConfigurationError) as exc_info:
            loader.load_indicator_config("FLAT-RSI")

        assert [e.field for e in exc_info.value.errors] == ["rsi"]
        assert exc_info.value.errors[0].message == "Must be a mapping"
        assert exc_info.value.errors[0].value == 14

    def test_scalar_call_override_section_rejected(self, tmp_path: Path) -> None:
        """Test that a scalar per-call section override is reported."""
        loader = ConfigLoader.create(tmp_path)

        with pytest.raises(ConfigurationError) as exc_info:
            loader.load_indicator_config("BTC-USD", {"stoch": [14, 3, 3]})

        assert exc_info.value.errors[0].field == "stoch"

    def test_scalar_instrument_entry_rejected(self, config_dir: Path) -> None:
        """Test that an instrument entry that is not a mapping is rejected."""
        loader = ConfigLoader.create(config_dir)

        with pytest.raises(ConfigurationError) as exc_info:
            loader.load_indicator_config("SCALAR")

        assert exc_info.value.context["ticker"] == "SCALAR"

    def test_repository_instruments_file_is_valid(self) -> None:
        """Test that the shipped instruments.yaml validates for every ticker."""
        loader = ConfigLoader.create()
        for ticker in ("BTC-USD", "ETH-USD", "UNKNOWN-INSTRUMENT"):
            assert ConfigValidator.validate_config(loader.merge_config(ticker)) == []

    def test_indicator_config_from_dict(self) -> None:
        """Test that missing sections fall back to default parameters."""
        config = indicator_config_from_dict({"macd": {"fast": 5, "slow": 35, "signal": 5}})
        assert config.macd.fast == 5
        assert config.rsi.period == 10


class TestConfigValidator:
    """Test suite for configuration validation."""

    def test_defaults_are_valid(self) -> None:
        """Test that the default configuration passes validation."""
        loader = ConfigLoader.create()
        assert ConfigValidator.validate_config(loader._dataclass_to_dict(get_default_config())) == []

    @pytest.mark.parametrize("value", [0, -3, 2.5, "14", True, None])
    def test_invalid_rsi_period(self, value) -> None:
        """Test that non-positive or non-integer RSI periods are rejected."""
        errors = ConfigValidator.validate_rsi_params({"period": value})
        assert len(errors) == 1
        assert errors[0].field == "rsi.period"
        assert "Must be a positive integer" in errors[0].message

    def test_invalid_stoch_params(self) -> None:
        """Test that every invalid stochastic period is reported."""
        errors = ConfigValidator.validate_stoch_params({"k": 0, "slowing": 3, "d": -1})
        assert [e.field for e in errors] == ["stoch.k", "stoch.d"]

    def test_macd_fast_must_be_below_slow(self) -> None:
        """Test that MACD fast period must be lower than the slow period."""
        errors = ConfigValidator.validate_macd_params({"fast": 26, "slow": 26, "signal": 9})
        assert len(errors) == 1
        assert errors[0].message == "Must be lower than macd.slow"

    def test_validate_config_collects_all_sections(self) -> None:
        """Test that errors from every section are collected together."""
        errors = ConfigValidator.validate_config({
            "macd": {"signal": 0},
            "rsi": {"period": 0},
            "stoch": {"k": 0},
        })
        assert {e.field for e in errors} == {"macd.signal", "rsi.period", "stoch.k"}

    @pytest.mark.parametrize("section", ["macd", "rsi", "stoch"])
    @pytest.mark.parametrize("value", [14, "14", [14], None])
    def test_section_must_be_mapping(self, section, value) -> None:
        """Test that a section that is not a mapping yields one error."""
        errors = ConfigValidator.validate_config({section: value})

        assert len(errors) == 1
        assert errors[0].field == section
        assert errors[0].message == "Must be a mapping"
        assert errors[0].value == value
