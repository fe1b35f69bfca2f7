# src/decayengine/simulate.py
import logging
from typing import Iterable, Optional

from .types import DecayParams, DecayReport, DoseEntry
from . import config
from .dosing import normalize
from .solvers import simulate_series, exact_crossing_hour
from .metrics import find_crossing, peak, auc_trapz

logger = logging.getLogger(__name__)


def run(entries: Iterable[DoseEntry], params: Optional[DecayParams] = None) -> DecayReport:
    """
    High-level wrapper: raw form rows -> DecayReport.
    InvalidInput from normalize() propagates before anything is simulated.
    """
    params = params or config.default_params()
    doses, reference_min = normalize(entries)

    series = simulate_series(doses, reference_min, params)
    crossing = find_crossing(series, params.threshold_mg)
    peak_mg, peak_h = peak(series)

    report = DecayReport(
        doses=doses,
        reference_min=reference_min,
        series=series,
        crossing=crossing,
        exact_crossing_h=exact_crossing_hour(doses, reference_min, series, params),
        peak_mg=peak_mg,
        peak_h=peak_h,
        auc_mg_h=auc_trapz(series),
        params=params,
    )
    logger.info(
        "Simulated %d dose(s): %d samples, peak %.1f mg at %.1f h, below %.1f mg after %.1f h%s",
        len(doses), len(series), peak_mg, peak_h, params.threshold_mg, crossing.hour,
        "" if crossing.reached else " (not reached)",
    )
    return report
