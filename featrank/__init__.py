# ==============================================
# Binary Feature Ranker
# ==============================================
#
# Package Structure (5 Topics + Orchestrator):
#
# featrank/
# ├── encoding/         # Topic 1: Decode raw fields into ternary rows
# ├── storage/          # Topic 2: Bit-packed attribute + target columns
# ├── analysis/         # Topic 3: Binarity latch, chi-square, ranking
# ├── records/          # Topic 4: CSV record source and ranked sink
# ├── persistence/      # Topic 5: Run summary persistence
# ├── config.py         # Configuration management
# ├── errors.py         # Exception hierarchy
# ├── ingest_and_score.py  # Orchestrator class
# ├── pipeline.py       # File-to-file ranking run
# └── cli.py            # Command line entry point
#
# ==============================================

__version__ = "0.1.0"
