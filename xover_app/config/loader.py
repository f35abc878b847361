"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from .defaults import IndicatorConfig, MACDParams, RSIParams, StochParams, get_default_config
from .validation import ConfigValidator


def indicator_config_from_dict(data: dict[str, Any]) -> IndicatorConfig:
    """Build an IndicatorConfig from a merged configuration dictionary."""
    return IndicatorConfig(
        macd=MACDParams(**data.get("macd", {})),
        rsi=RSIParams(**data.get("rsi", {})),
        stoch=StochParams(**data.get("stoch", {})),
    )


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: IndicatorConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_instrument_config(self, ticker: str) -> dict[str, Any]:
        """Load instrument-specific configuration overrides."""
        instruments_file = self.config_dir / "instruments.yaml"

        if not instruments_file.exists():
            return {}

        with open(instruments_file) as f:
            instruments_config = yaml.safe_load(f) or {}

        instrument = (instruments_config.get("instruments") or {}).get(ticker) or {}
        if not isinstance(instrument, dict):
            raise ConfigurationError(
                f"Instrument configuration for {ticker} must be a mapping",
                context={"ticker": ticker, "config_file": str(instruments_file)}
            )

        return instrument  # type: ignore[no-any-return]

    def merge_config(
        self,
        ticker: str,
        overrides: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Per-call overrides (highest priority)
        2. Instrument-specific overrides
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        instrument_config = self.load_instrument_config(ticker)
        config = self._deep_merge(config, instrument_config)

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load_indicator_config(
        self,
        ticker: str,
        overrides: Optional[dict[str, Any]] = None
    ) -> IndicatorConfig:
        """
        Resolve the immutable indicator configuration for an instrument.

        Raises:
            ConfigurationError: If the merged configuration fails validation
        """
        config = self.merge_config(ticker, overrides)

        errors = ConfigValidator.validate_config(config)
        if errors:
            details = [f"{err.field}: {err.message} (got: {err.value})" for err in errors]
            raise ConfigurationError(
                f"Invalid indicator configuration for {ticker}: {'; '.join(details)}",
                errors=errors,
                context={"ticker": ticker}
            )

        try:
            return indicator_config_from_dict(config)
        except TypeError as e:
            # Unknown keys in a section
            raise ConfigurationError(
                f"Invalid indicator configuration for {ticker}: {e}",
                context={"ticker": ticker}
            ) from e

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
