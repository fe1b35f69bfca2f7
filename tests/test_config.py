import importlib

from decayengine import config
from decayengine.dosing import from_explicit_schedule
from decayengine.solvers import aggregate
from decayengine.simulate import run
from decayengine.types import DecayParams, DoseEntry


def test_env_half_life_reaches_aggregate_and_run(monkeypatch):
    """
    CAFFEINE_HALF_LIFE_H=1 makes 100 mg drop under 2 mg after log2(50) ≈ 5.64 h,
    i.e. at the 6.0 h grid sample, through both public entry points.
    """
    monkeypatch.setenv("CAFFEINE_HALF_LIFE_H", "1.0")
    importlib.reload(config)
    try:
        doses, ref = from_explicit_schedule([(100, "14:00")])
        _, crossing_hour = aggregate(doses, ref)
        report = run([DoseEntry("100", "14:00")])

        assert config.default_params().half_life_h == 1.0
        assert crossing_hour == 6.0
        assert report.crossing.hour == crossing_hour
        assert report.params == config.default_params()
    finally:
        monkeypatch.undo()
        importlib.reload(config)


def test_explicit_params_win_over_config():
    doses, ref = from_explicit_schedule([(100, "14:00")])
    _, crossing_hour = aggregate(doses, ref, DecayParams(half_life_h=1.0))
    assert crossing_hour == 6.0
