# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load and validate all configuration from environment
#   variables / .env file. Provides typed config objects
#   to all other modules.
#
# CLASSES:
# --------
# - SchemaConfig (dataclass)
#     num_columns: int       (default 42, 41 attributes + label)
#     normal_label: str      (default "normal")
#
# - ScoringConfig (dataclass)
#     max_workers: int               (default 4, 1 = sequential)
#     initial_capacity_words: int    (default 16)
#
# - IOConfig (dataclass)
#     input_path: str        (default "KDDCup99.csv")
#     output_path: str       (default "ranked_columns.csv")
#     summary_dir: str       (default "metadata/")
#     delimiter: str         (default ",")
#
# - AppConfig (dataclass)
#     schema: SchemaConfig
#     scoring: ScoringConfig
#     io: IOConfig
#     log_level: str         (default "INFO")
#
# FUNCTIONS:
# ----------
# - get_config() -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Returns the same singleton on repeated calls.
#
# - reset_config() -> None
#     Drop the singleton so the next get_config() re-reads the environment.
#
# USAGE:
# ------
#   from featrank.config import get_config
#   config = get_config()
#   print(config.schema.num_columns)
#   print(config.scoring.max_workers)
#
# ==============================================

import os
from dataclasses import dataclass, field
from typing import Optional
from pathlib import Path

from dotenv import load_dotenv

from featrank.errors import ConfigError


# Bits per storage word of a packed column
WORD_BITS = 64


@dataclass
class SchemaConfig:
    """Record layout shared with the CSV reader."""
    num_columns: int = 42
    normal_label: str = "normal"

    @property
    def num_attributes(self) -> int:
        """Number of non-label attributes."""
        return self.num_columns - 1


@dataclass
class ScoringConfig:
    """Column storage and scoring configuration."""
    max_workers: int = 4
    initial_capacity_words: int = 16


@dataclass
class IOConfig:
    """Input / output locations."""
    input_path: str = "KDDCup99.csv"
    output_path: str = "ranked_columns.csv"
    summary_dir: str = "metadata/"
    delimiter: str = ","


@dataclass
class AppConfig:
    """Main application configuration."""
    schema: SchemaConfig = field(default_factory=SchemaConfig)
    scoring: ScoringConfig = field(default_factory=ScoringConfig)
    io: IOConfig = field(default_factory=IOConfig)
    log_level: str = "INFO"


# Singleton instance
_config_instance: Optional[AppConfig] = None


def _int_env(name: str, default: int, minimum: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ConfigError(f"{name} must be >= {minimum}, got {value}")
    return value


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        AppConfig: Application configuration

    Raises:
        ConfigError: If a numeric variable is malformed or out of range
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    # Build schema configuration (label slot included in the width)
    schema_config = SchemaConfig(
        num_columns=_int_env("SCHEMA_NUM_COLUMNS", 42, minimum=2),
        normal_label=os.getenv("SCHEMA_NORMAL_LABEL", "normal")
    )

    # Build scoring configuration
    scoring_config = ScoringConfig(
        max_workers=_int_env("SCORING_MAX_WORKERS", 4, minimum=1),
        initial_capacity_words=_int_env("SCORING_INITIAL_CAPACITY_WORDS", 16, minimum=1)
    )

    # Build I/O configuration
    io_config = IOConfig(
        input_path=os.getenv("INPUT_PATH", "KDDCup99.csv"),
        output_path=os.getenv("OUTPUT_PATH", "ranked_columns.csv"),
        summary_dir=os.getenv("SUMMARY_DIR", "metadata/"),
        delimiter=os.getenv("CSV_DELIMITER", ",")
    )

    # Build main application configuration
    _config_instance = AppConfig(
        schema=schema_config,
        scoring=scoring_config,
        io=io_config,
        log_level=os.getenv("LOG_LEVEL", "INFO")
    )

    return _config_instance


def reset_config() -> None:
    """Forget the cached configuration (used by tests and the CLI)."""
    global _config_instance
    _config_instance = None
