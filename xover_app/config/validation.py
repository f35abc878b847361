"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_positive_int(value: Any) -> bool:
    # bool is an int subclass; True is not a period
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class ConfigValidator:
    """Validates indicator configuration parameters."""

    @staticmethod
    def _validate_periods(
        section: str,
        params: dict[str, Any],
        fields: tuple[str, ...]
    ) -> list[ValidationError]:
        errors = []

        for name in fields:
            if name in params and not _is_positive_int(params[name]):
                errors.append(ValidationError(
                    field=f"{section}.{name}",
                    message="Must be a positive integer",
                    value=params[name]
                ))

        return errors

    @staticmethod
    def validate_macd_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate MACD parameters."""
        errors = ConfigValidator._validate_periods("macd", params, ("fast", "slow", "signal"))

        # Fast line must react quicker than the slow line
        fast = params.get("fast")
        slow = params.get("slow")
        if _is_positive_int(fast) and _is_positive_int(slow) and fast >= slow:
            errors.append(ValidationError(
                field="macd.fast",
                message="Must be lower than macd.slow",
                value=fast
            ))

        return errors

    @staticmethod
    def validate_rsi_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate RSI parameters."""
        return ConfigValidator._validate_periods("rsi", params, ("period",))

    @staticmethod
    def validate_stoch_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate stochastic oscillator parameters."""
        return ConfigValidator._validate_periods("stoch", params, ("k", "slowing", "d"))

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        sections = (
            ("macd", ConfigValidator.validate_macd_params),
            ("rsi", ConfigValidator.validate_rsi_params),
            ("stoch", ConfigValidator.validate_stoch_params),
        )

        for section, validate in sections:
            if section not in config:
                continue

            params = config[section]
            if not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=params
                ))
                continue

            errors.extend(validate(params))

        return errors
