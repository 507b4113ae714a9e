# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests.
#
# - small_config      → AppConfig for a 3-column schema (2 attributes + label)
# - engine            → IngestAndScore built from small_config
# - write_csv         → factory writing a header + rows CSV under tmp_path
# - reset_config      → autouse; drops the config singleton around each test
# ==============================================

import csv
import logging

import pytest

from featrank.config import AppConfig, SchemaConfig, ScoringConfig, IOConfig, reset_config
from featrank.ingest_and_score import IngestAndScore


@pytest.fixture(autouse=True)
def _reset_config():
    """Every test starts from a fresh configuration singleton."""
    reset_config()
    yield
    reset_config()
    # The CLI installs a console handler bound to the captured stderr
    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler.get_name() == "featrank-console":
            root.removeHandler(handler)


@pytest.fixture
def small_config(tmp_path) -> AppConfig:
    """Config for records of the form attr1,attr2,label."""
    return AppConfig(
        schema=SchemaConfig(num_columns=3, normal_label="normal"),
        scoring=ScoringConfig(max_workers=2, initial_capacity_words=1),
        io=IOConfig(
            input_path=str(tmp_path / "input.csv"),
            output_path=str(tmp_path / "ranked_columns.csv"),
            summary_dir=str(tmp_path / "metadata"),
        ),
    )


@pytest.fixture
def engine(small_config) -> IngestAndScore:
    return IngestAndScore(small_config)


@pytest.fixture
def write_csv(tmp_path):
    """Write a CSV file and return its path."""
    def _write(rows, header=("a", "b", "label"), name="input.csv"):
        path = tmp_path / name
        with open(path, "w", newline="") as f:
            writer = csv.writer(f, lineterminator="\n")
            if header is not None:
                writer.writerow(header)
            writer.writerows(rows)
        return path
    return _write
