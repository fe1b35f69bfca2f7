# src/decayengine/models/exponential.py
import numpy as np

def first_order_decay(dosage, elapsed_h, half_life_h):
    """
    Amount left from a single intake under first-order elimination.
      A(t) = dosage * 0.5 ** (t / t½)   for t >= 0
      A(t) = 0                          before the intake (t < 0)

    Parameters:
      dosage      : amount taken (mg)
      elapsed_h   : time since intake (h); scalar or array
      half_life_h : elimination half-life (h)
    """
    elapsed = np.asarray(elapsed_h, dtype=float)
    # clip keeps the power finite for not-yet-taken doses; they are zeroed below
    decayed = dosage * np.power(0.5, np.clip(elapsed, 0.0, None) / half_life_h)
    out = np.where(elapsed >= 0.0, decayed, 0.0)
    if out.ndim == 0:
        return float(out)
    return out
