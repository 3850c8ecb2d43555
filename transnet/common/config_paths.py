import os

"""
Data locations for the transnet command-line runner.

  PROJECT_ROOT/
    data/
      raw/records.json          archive export read by analyze_network
      processed/                ranked nodes, relationships, stats and CSVs
    transnet/common/config_paths.py
"""

PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.abspath(os.path.join(PACKAGE_DIR, "..", ".."))

DATA_DIR = os.path.join(PROJECT_ROOT, "data")
DATA_RAW = os.path.join(DATA_DIR, "raw")
DATA_PROCESSED = os.path.join(DATA_DIR, "processed")
