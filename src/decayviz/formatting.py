# src/decayviz/formatting.py
import math
from typing import Optional, Sequence

from decayengine.types import Crossing, SamplePoint
from decayengine.helpers import minutes_to_label


def _plural(n: int, word: str) -> str:
    return f"{n} {word}" if n == 1 else f"{n} {word}s"

def format_duration(hours: float) -> str:
    """
    "32.5 hours" under a day; "50.0 hours (2 days 2 hours)" from one day on.
    Days are floored, the remaining hours rounded half up.
    """
    days = int(math.floor(hours / 24))
    remaining = int(math.floor(hours % 24 + 0.5))
    text = f"{hours:.1f} hours"
    if days > 0:
        text += f" ({_plural(days, 'day')} {_plural(remaining, 'hour')})"
    return text

def format_result(crossing: Crossing, threshold_mg: float) -> str:
    if crossing.reached:
        return f"Caffeine less than {threshold_mg:g} mg after: {format_duration(crossing.hour)}"
    return (f"Caffeine stays at or above {threshold_mg:g} mg for the whole "
            f"simulated window ({format_duration(crossing.hour)})")

def series_labels(series: Sequence[SamplePoint], reference_min: int) -> list[str]:
    """Time-of-day label for every sample (reference time + hour, wrapped to 24 h)."""
    return [minutes_to_label(reference_min + p.hour * 60) for p in series]

def sample_at(series: Sequence[SamplePoint], hour: float) -> Optional[SamplePoint]:
    """Sample nearest to `hour` (None for an empty series)."""
    if not series:
        return None
    return min(series, key=lambda p: abs(p.hour - hour))

def format_hover(point: SamplePoint, reference_min: int) -> str:
    """Readout shown under the cursor, e.g. "15:30  Caffeine: 76.72 mg"."""
    return f"{minutes_to_label(reference_min + point.hour * 60)}  Caffeine: {point.amount:.2f} mg"
