# ==============================================
# Tests for Configuration Management
# ==============================================

import pytest

from featrank.config import get_config, reset_config
from featrank.errors import ConfigError


ENV_VARS = [
    "SCHEMA_NUM_COLUMNS", "SCHEMA_NORMAL_LABEL", "SCORING_MAX_WORKERS",
    "SCORING_INITIAL_CAPACITY_WORDS", "INPUT_PATH", "OUTPUT_PATH",
    "SUMMARY_DIR", "CSV_DELIMITER", "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestConfig:
    """Loading from the environment."""

    def test_defaults(self):
        config = get_config()
        assert config.schema.num_columns == 42
        assert config.schema.num_attributes == 41
        assert config.schema.normal_label == "normal"
        assert config.scoring.max_workers == 4
        assert config.io.input_path == "KDDCup99.csv"
        assert config.io.output_path == "ranked_columns.csv"
        assert config.log_level == "INFO"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("SCHEMA_NUM_COLUMNS", "10")
        monkeypatch.setenv("SCHEMA_NORMAL_LABEL", "normal.")
        monkeypatch.setenv("SCORING_MAX_WORKERS", "1")
        monkeypatch.setenv("OUTPUT_PATH", "out.csv")
        config = get_config()
        assert config.schema.num_columns == 10
        assert config.schema.normal_label == "normal."
        assert config.scoring.max_workers == 1
        assert config.io.output_path == "out.csv"

    def test_singleton(self, monkeypatch):
        first = get_config()
        monkeypatch.setenv("SCORING_MAX_WORKERS", "9")
        assert get_config() is first
        reset_config()
        assert get_config().scoring.max_workers == 9

    @pytest.mark.parametrize("name,value", [
        ("SCHEMA_NUM_COLUMNS", "forty-two"),
        ("SCHEMA_NUM_COLUMNS", "1"),
        ("SCORING_MAX_WORKERS", "0"),
        ("SCORING_INITIAL_CAPACITY_WORDS", "-4"),
    ])
    def test_invalid_values(self, monkeypatch, name, value):
        monkeypatch.setenv(name, value)
        with pytest.raises(ConfigError):
            get_config()
