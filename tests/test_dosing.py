import math
import pytest

from decayengine.types import Dose, DoseEntry
from decayengine.dosing import InvalidInput, normalize, from_explicit_schedule


def test_normalize_converts_and_picks_earliest_reference():
    doses, ref = normalize([
        DoseEntry("100", "14:00"),
        DoseEntry(" 80.5 ", "08:30"),
        DoseEntry(60, "9:05"),
    ])
    assert doses == (
        Dose(dosage_mg=100.0, time_min=840),
        Dose(dosage_mg=80.5, time_min=510),
        Dose(dosage_mg=60.0, time_min=545),
    )
    assert ref == 510


def test_invalid_rows_are_dropped_silently():
    doses, ref = normalize([
        DoseEntry("-5", "07:00"),
        DoseEntry("0", "07:00"),
        DoseEntry("", "07:00"),
        DoseEntry("abc", "07:00"),
        DoseEntry("nan", "07:00"),
        DoseEntry("inf", "07:00"),
        DoseEntry(None, "07:00"),
        DoseEntry("50", ""),
        DoseEntry("50", None),
        DoseEntry("50", "24:00"),
        DoseEntry("50", "12:60"),
        DoseEntry("50", "noon"),
        DoseEntry("120", "18:45"),
    ])
    assert doses == (Dose(dosage_mg=120.0, time_min=18 * 60 + 45),)
    assert ref == 18 * 60 + 45


def test_empty_input_fails():
    with pytest.raises(InvalidInput):
        normalize([])


def test_only_invalid_input_fails():
    with pytest.raises(InvalidInput):
        normalize([DoseEntry(-5, "09:00")])


def test_invalid_input_is_a_value_error():
    assert issubclass(InvalidInput, ValueError)


def test_equal_earliest_times():
    doses, ref = from_explicit_schedule([(50, "10:00"), (70, "10:00")])
    assert len(doses) == 2
    assert ref == 600
    assert math.isclose(sum(d.dosage_mg for d in doses), 120.0)


def test_non_ascii_digits_are_dropped():
    with pytest.raises(InvalidInput):
        normalize([DoseEntry("100", "١٤:٠٠")])
