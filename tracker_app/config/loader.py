"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from ..matching.alias_table import AliasTable
from .defaults import DefaultConfig, LedgerParams, MatchParams, SourceParams, get_default_config
from .validation import ConfigValidator, ValidationError

ALIASES_FILE = "aliases.yaml"
SETTINGS_FILE = "settings.yaml"


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def _read_yaml(self, filename: str) -> dict[str, Any]:
        path = self.config_dir / filename

        if not path.exists():
            return {}

        with open(path) as f:
            try:
                content = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {path}: {e}", source=str(path))

        if content is None:
            return {}
        if not isinstance(content, dict):
            raise ConfigurationError(f"{path} must contain a mapping", source=str(path))
        return content

    def load_alias_overrides(self) -> list[tuple[str, str]]:
        """
        Load extra alias pairs from aliases.yaml, in file order.

        Raises:
            ConfigurationError: If the pairs are malformed
        """
        pairs = self._read_yaml(ALIASES_FILE).get("aliases") or []

        errors = ConfigValidator.validate_alias_pairs(pairs)
        if errors:
            raise ConfigurationError(
                f"Invalid alias overrides in {self.config_dir / ALIASES_FILE}",
                source=str(self.config_dir / ALIASES_FILE),
                errors=errors,
            )

        return [(variant, canonical) for variant, canonical in pairs]

    def build_alias_table(self) -> AliasTable:
        """Built-in alias pairs followed by the configured overrides."""
        return AliasTable.builtin(self.load_alias_overrides())

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Call overrides (highest priority)
        2. settings.yaml
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        config = self._deep_merge(config, self._read_yaml(SETTINGS_FILE))

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load_config(self, overrides: Optional[dict[str, Any]] = None) -> DefaultConfig:
        """
        Merge and validate configuration into typed parameters.

        Raises:
            ConfigurationError: If the merged configuration is invalid
        """
        config = self.merge_config(overrides)

        errors = ConfigValidator.validate_config(config)
        for section, params_cls in (("match", MatchParams), ("ledger", LedgerParams),
                                    ("sources", SourceParams)):
            for key in config.get(section, {}):
                if key not in params_cls.__dataclass_fields__:
                    errors.append(ValidationError(
                        field=f"{section}.{key}",
                        message="Unknown parameter",
                        value=config[section][key]
                    ))

        if errors:
            raise ConfigurationError("Invalid configuration", source=str(self.config_dir),
                                     errors=errors)

        match = dict(config.get("match", {}))
        if "abbreviation_pairs" in match:
            match["abbreviation_pairs"] = tuple(tuple(pair) for pair in match["abbreviation_pairs"])

        return DefaultConfig(
            match=MatchParams(**match),
            ledger=LedgerParams(**config.get("ledger", {})),
            sources=SourceParams(**config.get("sources", {})),
        )

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name, _field in obj.__dataclass_fields__.items():
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
