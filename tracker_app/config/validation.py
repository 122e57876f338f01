"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_name(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_alias_pairs(pairs: Any) -> list[ValidationError]:
        """Validate a list of [variant, canonical] alias pairs."""
        if not isinstance(pairs, list):
            return [ValidationError(
                field="aliases",
                message="Must be a list of [variant, canonical] pairs",
                value=pairs
            )]

        errors = []
        for i, pair in enumerate(pairs):
            if not isinstance(pair, (list, tuple)) or len(pair) != 2:
                errors.append(ValidationError(
                    field=f"aliases[{i}]",
                    message="Must be a [variant, canonical] pair",
                    value=pair
                ))
                continue

            variant, canonical = pair
            if not _is_name(variant):
                errors.append(ValidationError(
                    field=f"aliases[{i}].variant",
                    message="Must be a non-empty string",
                    value=variant
                ))
            if not _is_name(canonical):
                errors.append(ValidationError(
                    field=f"aliases[{i}].canonical",
                    message="Must be a non-empty string",
                    value=canonical
                ))

        return errors

    @staticmethod
    def validate_match_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate name matching parameters."""
        errors = []

        if "abbreviation_pairs" in params:
            value = params["abbreviation_pairs"]
            valid = isinstance(value, (list, tuple)) and all(
                isinstance(pair, (list, tuple)) and len(pair) == 2
                and _is_name(pair[0]) and _is_name(pair[1])
                for pair in value
            )
            if not valid:
                errors.append(ValidationError(
                    field="abbreviation_pairs",
                    message="Must be a list of [full, abbreviation] string pairs",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_ledger_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate ledger row parameters."""
        errors = []

        if "date_format" in params:
            value = params["date_format"]
            if not isinstance(value, str) or "%" not in value:
                errors.append(ValidationError(
                    field="date_format",
                    message="Must be a strftime format string",
                    value=value
                ))

        if "percent_places" in params:
            value = params["percent_places"]
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                errors.append(ValidationError(
                    field="percent_places",
                    message="Must be a non-negative integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_source_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate source field names."""
        errors = []

        for key, value in params.items():
            if not _is_name(value):
                errors.append(ValidationError(
                    field=key,
                    message="Must be a non-empty field name",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "match" in config:
            errors.extend(ConfigValidator.validate_match_params(config["match"]))

        if "ledger" in config:
            errors.extend(ConfigValidator.validate_ledger_params(config["ledger"]))

        if "sources" in config:
            errors.extend(ConfigValidator.validate_source_params(config["sources"]))

        return errors
