# src/decayengine/types.py
from dataclasses import dataclass
from typing import Sequence, Union

# Doses carry wall-clock MINUTES; the output series is in HOURS after the reference time.

@dataclass(frozen=True)
class DoseEntry:
    """
    One raw row from the input form, before any validation.

    dosage_text : dosage as typed (e.g. "100", " 80.5 "); numbers are accepted too
    time_text   : wall-clock time as typed, expected "HH:MM"
    """
    dosage_text: Union[str, float, int, None]
    time_text: Union[str, None]


@dataclass(frozen=True)
class Dose:
    """
    A validated intake.

    dosage_mg : amount taken in milligrams (> 0)
    time_min  : minutes since midnight (hours*60 + minutes), no day wraparound
    """
    dosage_mg: float
    time_min: int


@dataclass(frozen=True)
class SamplePoint:
    """Combined amount (mg) at `hour` hours after the reference time."""
    hour: float
    amount: float


@dataclass(frozen=True)
class DecayParams:
    """
    Fixed constants of the first-order decay simulation.

    half_life_h  : time for the amount to halve (h)
    step_h       : grid spacing (h)
    horizon_h    : last grid point considered (h)
    floor_mg     : early-stop floor; the series ends once below it ...
    min_stop_h   : ... but only after this much time has elapsed (h)
    threshold_mg : reporting threshold for the crossing time (mg)
    """
    half_life_h: float = 5.7
    step_h: float = 0.5
    horizon_h: float = 48.0
    floor_mg: float = 0.01
    min_stop_h: float = 12.0
    threshold_mg: float = 2.0

    def __post_init__(self):
        for name in ("half_life_h", "step_h", "horizon_h", "floor_mg", "threshold_mg"):
            value = getattr(self, name)
            if not (value > 0):
                raise ValueError(f"{name} must be > 0 (got {value}).")
        if not (self.min_stop_h >= 0):
            raise ValueError(f"min_stop_h must be >= 0 (got {self.min_stop_h}).")


@dataclass(frozen=True)
class Crossing:
    """
    Result of scanning a series for the threshold.

    hour    : hour of the first sample below the threshold, or of the last
              sample when the threshold was never reached
    reached : False when `hour` is only the end of the simulated window
    """
    hour: float
    reached: bool


@dataclass(frozen=True)
class DecayReport:
    """Everything one calculation produces, ready for a presentation layer."""
    doses: Sequence[Dose]
    reference_min: int
    series: Sequence[SamplePoint]
    crossing: Crossing
    exact_crossing_h: Union[float, None]
    peak_mg: float
    peak_h: float
    auc_mg_h: float
    params: DecayParams
