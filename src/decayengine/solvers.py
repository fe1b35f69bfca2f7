# src/decayengine/solvers.py
from typing import Optional, Sequence, Tuple

import numpy as np
from scipy.optimize import brentq

from .types import DecayParams, Dose, SamplePoint
from .models.exponential import first_order_decay
from .helpers import dose_offsets_h
from .metrics import find_crossing
from . import config


def time_grid(params: DecayParams) -> np.ndarray:
    """
    Sampling hours 0, step, 2*step, ... up to and including horizon.
    Built from integer multiples so that every point is an exact multiple of step.
    """
    n = int(np.floor(params.horizon_h / params.step_h + 1e-9)) + 1
    return np.arange(n, dtype=float) * params.step_h


def combined_amount(doses: Sequence[Dose], reference_min: int, t, params: DecayParams):
    """
    Total amount (mg) at hour(s) t after the reference time.

    Every dose decays independently; contributions are summed dose by dose
    in entry order. Doses not yet taken at t contribute nothing.
    """
    t_arr = np.asarray(t, dtype=float)
    total = np.zeros_like(t_arr)
    for d, offset_h in zip(doses, dose_offsets_h(doses, reference_min)):
        total = total + first_order_decay(d.dosage_mg, t_arr - offset_h, params.half_life_h)
    if total.ndim == 0:
        return float(total)
    return total


def simulate_series(doses: Sequence[Dose], reference_min: int,
                    params: DecayParams) -> Tuple[SamplePoint, ...]:
    """
    Combined amount on the fixed time grid.

    The series ends early, right after the first sample whose amount is
    below params.floor_mg once more than params.min_stop_h hours have passed.
    That sample is kept.
    """
    t = time_grid(params)
    amounts = combined_amount(doses, reference_min, t, params)

    # Early stop: first index past min_stop_h with the amount under the floor
    stop = (amounts < params.floor_mg) & (t > params.min_stop_h)
    if np.any(stop):
        end = int(np.argmax(stop)) + 1
        t, amounts = t[:end], amounts[:end]

    return tuple(SamplePoint(hour=float(h), amount=float(a)) for h, a in zip(t, amounts))


def aggregate(doses: Sequence[Dose], reference_min: int,
              params: Optional[DecayParams] = None) -> Tuple[Tuple[SamplePoint, ...], float]:
    """
    Simulate the combined decay and derive the threshold-crossing hour.
    Without params, the environment-backed config.default_params() are used.

    Returns:
      series        : tuple of SamplePoint (hour, amount)
      crossing_hour : hour of the first sample below params.threshold_mg;
                      the last sample's hour when none is (see metrics.find_crossing
                      to tell the two cases apart)
    """
    params = params or config.default_params()
    series = simulate_series(doses, reference_min, params)
    return series, find_crossing(series, params.threshold_mg).hour


def exact_crossing_hour(doses: Sequence[Dose], reference_min: int,
                        series: Sequence[SamplePoint], params: DecayParams) -> Optional[float]:
    """
    Continuous-time threshold crossing, refined between the two grid samples
    that bracket the first sub-threshold sample.

    Returns None when the series never drops below the threshold.
    """
    crossing = find_crossing(series, params.threshold_mg)
    if not crossing.reached:
        return None
    idx = next(i for i, p in enumerate(series) if p.hour == crossing.hour)
    if idx == 0:
        return series[0].hour

    lo, hi = series[idx - 1].hour, series[idx].hour

    def excess(t):
        return combined_amount(doses, reference_min, t, params) - params.threshold_mg

    return float(brentq(excess, lo, hi, xtol=1e-9))
