import re
from typing import Optional, Sequence

import numpy as np

from .types import Dose

_TIME_RE = re.compile(r"^([0-9]{1,2}):([0-9]{2})$")


def time_to_minutes(text: str) -> int:
    """
    Convert an "HH:MM" wall-clock string (ASCII digits only) to minutes since midnight.
    Raises ValueError for anything that is not a well-formed time of day.
    """
    m = _TIME_RE.match(text.strip()) if isinstance(text, str) else None
    if m is None:
        raise ValueError(f"time must be HH:MM (got {text!r}).")
    hours, minutes = int(m.group(1)), int(m.group(2))
    if hours > 23 or minutes > 59:
        raise ValueError(f"time out of range (got {text!r}).")
    return hours * 60 + minutes


def parse_time(text) -> Optional[int]:
    """Lenient version of time_to_minutes: None instead of ValueError."""
    try:
        return time_to_minutes(text)
    except ValueError:
        return None


def minutes_to_label(minutes: float) -> str:
    """Minutes since the reference midnight -> "HH:MM", hours wrapped to 24."""
    hours = int(minutes // 60) % 24
    mins = int(minutes % 60)
    return f"{hours:02d}:{mins:02d}"


def dose_offsets_h(doses: Sequence[Dose], reference_min: int) -> np.ndarray:
    """Hours between each dose and the reference origin (>= 0 when reference is the earliest dose)."""
    return np.array([(d.time_min - reference_min) / 60.0 for d in doses], dtype=float)
