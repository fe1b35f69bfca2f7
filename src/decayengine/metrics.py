# src/decayengine/metrics.py
import numpy as np
from typing import Sequence, Tuple

from .types import Crossing, SamplePoint


def _arrays(series: Sequence[SamplePoint]) -> Tuple[np.ndarray, np.ndarray]:
    t = np.array([p.hour for p in series], dtype=float)
    A = np.array([p.amount for p in series], dtype=float)
    return t, A

def find_crossing(series: Sequence[SamplePoint], threshold_mg: float) -> Crossing:
    """
    First sample (in hour order) whose amount is below threshold_mg.
    When no sample qualifies, the last sample's hour is returned with reached=False.
    """
    for p in series:
        if p.amount < threshold_mg:
            return Crossing(hour=p.hour, reached=True)
    if not series:
        raise ValueError("series is empty.")
    return Crossing(hour=series[-1].hour, reached=False)

def peak(series: Sequence[SamplePoint]) -> Tuple[float, float]:
    """Return peak amount (mg) and the hour it occurs at (first one on ties)."""
    t, A = _arrays(series)
    idx = int(np.argmax(A))
    return float(A[idx]), float(t[idx])

def auc_trapz(series: Sequence[SamplePoint]) -> float:
    """Area under the amount-time curve via trapezoidal rule (mg*h)."""
    t, A = _arrays(series)
    if t.size < 2:
        return 0.0
    return float(np.trapezoid(A, t))
