"""Unit tests for configuration loading and validation."""

import pytest
from pathlib import Path

from tracker_app.config.aliases import BUILTIN_ALIAS_PAIRS
from tracker_app.config.defaults import DefaultConfig, LedgerParams, get_default_config
from tracker_app.config.loader import ConfigLoader
from tracker_app.config.validation import ConfigValidator
from tracker_app.errors import ConfigurationError


def write(path: Path, text: str) -> None:
    path.write_text(text, encoding="utf-8")


class TestConfigLoader:
    """Test suite for ConfigLoader precedence and file handling."""

    def test_missing_files_use_defaults(self, tmp_path: Path) -> None:
        """With no config files the built-in defaults apply."""
        loader = ConfigLoader.create(tmp_path)

        assert loader.load_config() == get_default_config()
        assert loader.load_alias_overrides() == []
        assert len(loader.build_alias_table()) == 40

    def test_repository_config(self) -> None:
        """The shipped config directory loads cleanly."""
        loader = ConfigLoader.create()

        assert loader.load_config().ledger == LedgerParams()
        assert len(loader.build_alias_table()) == 40

    def test_settings_file_overrides_defaults(self, tmp_path: Path) -> None:
        write(tmp_path / "settings.yaml", "ledger:\n  percent_places: 3\n")

        config = ConfigLoader.create(tmp_path).load_config()

        assert config.ledger.percent_places == 3
        assert config.ledger.date_format == "%d-%m-%Y"

    def test_call_overrides_win(self, tmp_path: Path) -> None:
        write(tmp_path / "settings.yaml", "ledger:\n  percent_places: 3\n")

        config = ConfigLoader.create(tmp_path).load_config({"ledger": {"percent_places": 4}})

        assert config.ledger.percent_places == 4

    def test_abbreviation_pairs_from_yaml(self, tmp_path: Path) -> None:
        """YAML lists become the tuple pairs the match engine expects."""
        write(tmp_path / "settings.yaml",
              "match:\n  abbreviation_pairs:\n    - [LIMITED, LTD]\n    - [CORPORATION, CORP]\n")

        config = ConfigLoader.create(tmp_path).load_config()

        assert config.match.abbreviation_pairs == (("LIMITED", "LTD"), ("CORPORATION", "CORP"))

    def test_source_field_override(self, tmp_path: Path) -> None:
        write(tmp_path / "settings.yaml", "sources:\n  broker_close_column: CLOSE\n")

        config = ConfigLoader.create(tmp_path).load_config()

        assert config.sources.broker_close_column == "CLOSE"
        assert config.sources.broker_name_column == "SECURITY"

    def test_unknown_parameter_rejected(self, tmp_path: Path) -> None:
        write(tmp_path / "settings.yaml", "ledger:\n  rounding: bankers\n")

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigLoader.create(tmp_path).load_config()

        fields = [error.field for error in exc_info.value.errors]
        assert fields == ["ledger.rounding"]

    def test_invalid_value_rejected(self) -> None:
        loader = ConfigLoader.create()

        with pytest.raises(ConfigurationError) as exc_info:
            loader.load_config({"ledger": {"percent_places": -1}})

        assert exc_info.value.recoverable is False
        assert exc_info.value.errors[0].field == "percent_places"

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        write(tmp_path / "settings.yaml", "ledger: [unclosed\n")

        with pytest.raises(ConfigurationError):
            ConfigLoader.create(tmp_path).load_config()

    def test_non_mapping_yaml(self, tmp_path: Path) -> None:
        write(tmp_path / "settings.yaml", "- just\n- a list\n")

        with pytest.raises(ConfigurationError):
            ConfigLoader.create(tmp_path).load_config()

    def test_empty_file(self, tmp_path: Path) -> None:
        write(tmp_path / "settings.yaml", "")

        assert ConfigLoader.create(tmp_path).load_config() == DefaultConfig()


class TestAliasOverrides:
    """Test suite for aliases.yaml handling."""

    def test_overrides_appended_after_builtins(self, tmp_path: Path) -> None:
        """File pairs replace built-ins for the same name and add new ones."""
        write(tmp_path / "aliases.yaml",
              'aliases:\n'
              '  - ["Cipla", "CIPLA LIMITED"]\n'
              '  - ["Zomato", "ZOMATO LIMITED"]\n')
        loader = ConfigLoader.create(tmp_path)

        assert loader.load_alias_overrides() == [
            ("Cipla", "CIPLA LIMITED"),
            ("Zomato", "ZOMATO LIMITED"),
        ]

        table = loader.build_alias_table()
        assert table.lookup("Cipla") == "CIPLA LIMITED"
        assert table.lookup("Zomato") == "ZOMATO LIMITED"
        assert len(table) == 41

    def test_later_override_wins(self, tmp_path: Path) -> None:
        write(tmp_path / "aliases.yaml",
              'aliases:\n  - ["SCI", "FIRST"]\n  - ["SCI", "SECOND"]\n')

        assert ConfigLoader.create(tmp_path).build_alias_table().lookup("SCI") == "SECOND"

    def test_malformed_pairs(self, tmp_path: Path) -> None:
        write(tmp_path / "aliases.yaml",
              'aliases:\n  - ["SCI"]\n  - ["", "BLANK VARIANT"]\n')

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigLoader.create(tmp_path).load_alias_overrides()

        fields = [error.field for error in exc_info.value.errors]
        assert fields == ["aliases[0]", "aliases[1].variant"]

    def test_aliases_not_a_list(self, tmp_path: Path) -> None:
        write(tmp_path / "aliases.yaml", "aliases:\n  SCI: SHIPPING CORP\n")

        with pytest.raises(ConfigurationError):
            ConfigLoader.create(tmp_path).load_alias_overrides()


class TestConfigValidator:
    """Test suite for ConfigValidator."""

    def test_builtin_pairs_valid(self) -> None:
        assert ConfigValidator.validate_alias_pairs(list(BUILTIN_ALIAS_PAIRS)) == []

    def test_defaults_valid(self) -> None:
        loader = ConfigLoader.create()
        assert ConfigValidator.validate_config(loader.merge_config()) == []

    @pytest.mark.parametrize("params,field", [
        ({"date_format": "DD-MM-YYYY"}, "date_format"),
        ({"date_format": 20240101}, "date_format"),
        ({"percent_places": -1}, "percent_places"),
        ({"percent_places": True}, "percent_places"),
        ({"percent_places": 2.5}, "percent_places"),
    ])
    def test_invalid_ledger_params(self, params: dict, field: str) -> None:
        errors = ConfigValidator.validate_ledger_params(params)
        assert [error.field for error in errors] == [field]

    def test_invalid_abbreviation_pairs(self) -> None:
        errors = ConfigValidator.validate_match_params({"abbreviation_pairs": [["LIMITED"]]})
        assert len(errors) == 1
        assert errors[0].field == "abbreviation_pairs"

    def test_blank_source_field(self) -> None:
        errors = ConfigValidator.validate_source_params({"web_name_field": " "})
        assert errors[0].field == "web_name_field"
