# src/decayengine/dosing.py
from __future__ import annotations

import logging
import math
from typing import Iterable, Optional, Sequence, Tuple

from .helpers import parse_time
from .types import Dose, DoseEntry

logger = logging.getLogger(__name__)


class InvalidInput(ValueError):
    """Raised when no dose entry survives validation."""


def normalize(entries: Iterable[DoseEntry]) -> Tuple[Tuple[Dose, ...], int]:
    """
    Validate raw form rows and convert them to Doses.

    Rows with a non-positive / unparsable dosage or a malformed time are
    dropped without error; partial input is usable input.

    Returns:
      doses         : valid doses, in the order they were entered
      reference_min : earliest dose time (minutes since midnight), i.e. hour 0

    Raises InvalidInput when nothing valid remains.
    """
    doses: list[Dose] = []
    for idx, entry in enumerate(entries):
        dosage = _parse_dosage(entry.dosage_text)
        time_min = parse_time(entry.time_text)
        if dosage is None or time_min is None:
            logger.debug("Dropping dose entry #%d: dosage=%r time=%r", idx, entry.dosage_text, entry.time_text)
            continue
        doses.append(Dose(dosage_mg=dosage, time_min=time_min))

    if not doses:
        raise InvalidInput("Please enter at least one valid caffeine dose.")

    reference_min = min(d.time_min for d in doses)
    return tuple(doses), reference_min


def from_explicit_schedule(entries: Sequence[Tuple[float, str]]) -> Tuple[Tuple[Dose, ...], int]:
    """
    Build doses from (dosage_mg, "HH:MM") pairs.
    Example: entries=[(100, "08:00"), (100, "14:00")]
    """
    return normalize(DoseEntry(dosage_text=mg, time_text=t) for mg, t in entries)


# --------------------------
# Small input parsers
# --------------------------
def _parse_dosage(raw) -> Optional[float]:
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return None
    try:
        x = float(raw)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(x) or not (x > 0):
        return None
    return x
