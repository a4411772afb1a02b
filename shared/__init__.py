"""Shared data files (seed catalog and workout history)."""

import pathlib

SEED_DIR = pathlib.Path(__file__).resolve().parent / "seed"
