"""
Decay simulation configuration.
All settings via environment variables with sensible defaults.
"""

import os

from .types import DecayParams

# --- Caffeine elimination ---
# Typical adult non-smoker plasma half-life, ~5-6 h
HALF_LIFE_H: float = float(os.getenv("CAFFEINE_HALF_LIFE_H", "5.7"))

# --- Sampling grid ---
STEP_H: float = float(os.getenv("DECAY_STEP_H", "0.5"))
HORIZON_H: float = float(os.getenv("DECAY_HORIZON_H", "48"))

# --- Early stop: end the series once below FLOOR_MG after MIN_STOP_H hours ---
FLOOR_MG: float = float(os.getenv("DECAY_FLOOR_MG", "0.01"))
MIN_STOP_H: float = float(os.getenv("DECAY_MIN_STOP_H", "12"))

# --- Reporting threshold ("less than X mg after ...") ---
THRESHOLD_MG: float = float(os.getenv("DECAY_THRESHOLD_MG", "2"))

# --- Form defaults for a new dose row ---
DEFAULT_DOSE_MG: float = float(os.getenv("DEFAULT_DOSE_MG", "100"))
DEFAULT_DOSE_TIME: str = os.getenv("DEFAULT_DOSE_TIME", "14:00")

# --- Logging ---
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


def default_params() -> DecayParams:
    """DecayParams built from the environment-backed constants above."""
    return DecayParams(
        half_life_h=HALF_LIFE_H,
        step_h=STEP_H,
        horizon_h=HORIZON_H,
        floor_mg=FLOOR_MG,
        min_stop_h=MIN_STOP_H,
        threshold_mg=THRESHOLD_MG,
    )
