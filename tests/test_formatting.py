from decayengine.types import Crossing, DoseEntry, SamplePoint
from decayengine.simulate import run
from decayengine.dosing import InvalidInput
from decayviz.formatting import format_duration, format_result, series_labels, sample_at, format_hover

import pytest


def test_format_duration_under_a_day():
    assert format_duration(18.5) == "18.5 hours"
    assert format_duration(0.0) == "0.0 hours"


def test_format_duration_with_days():
    assert format_duration(32.5) == "32.5 hours (1 day 9 hours)"
    assert format_duration(25.0) == "25.0 hours (1 day 1 hour)"
    assert format_duration(50.0) == "50.0 hours (2 days 2 hours)"
    assert format_duration(48.0) == "48.0 hours (2 days 0 hours)"


def test_format_result():
    assert format_result(Crossing(32.5, True), 2.0) == \
        "Caffeine less than 2 mg after: 32.5 hours (1 day 9 hours)"
    text = format_result(Crossing(48.0, False), 2.0)
    assert text.startswith("Caffeine stays at or above 2 mg")


def test_series_labels_wrap():
    series = [SamplePoint(0.0, 1.0), SamplePoint(0.5, 1.0), SamplePoint(3.0, 1.0)]
    assert series_labels(series, 22 * 60) == ["22:00", "22:30", "01:00"]


def test_run_pipeline_report():
    report = run([DoseEntry("100", "14:00"), DoseEntry("oops", "15:00")])
    assert len(report.doses) == 1
    assert report.reference_min == 840
    assert report.crossing.reached
    assert report.crossing.hour == 32.5
    assert report.peak_mg == 100.0 and report.peak_h == 0.0
    assert abs(report.exact_crossing_h - 32.17) < 0.01
    assert series_labels(report.series, report.reference_min)[0] == "14:00"


def test_run_pipeline_rejects_invalid_input():
    with pytest.raises(InvalidInput):
        run([DoseEntry("", "14:00")])


def test_hover_readout_uses_nearest_sample():
    series = [SamplePoint(0.0, 100.0), SamplePoint(0.5, 94.1), SamplePoint(1.0, 88.54321)]
    assert sample_at(series, 0.9) == series[2]
    assert sample_at(series, 0.2) == series[0]
    assert sample_at([], 3.0) is None
    assert format_hover(series[2], 14 * 60) == "15:00  Caffeine: 88.54 mg"
