from datetime import date

import pytest

from skiweather.core.beaufort import clamp_beaufort, describe_wind
from skiweather.core.rng import RNG
from skiweather.core.timebase import TrailingWindow, is_winter, round_half_up


def test_round_half_up():
  assert round_half_up(2.5) == 3.0
  assert round_half_up(-2.5) == -2.0
  assert round_half_up(0.25, 1) == 0.3
  assert round_half_up(-9.72, 1) == -9.7


def test_window_ends_day_before_reference():
  days = list(TrailingWindow(days=365, reference=date(2025, 6, 1)))
  assert len(days) == 365
  assert days[0] == date(2024, 6, 1)
  assert days[-1] == date(2025, 5, 31)
  assert len(set(days)) == 365


def test_window_rejects_empty():
  with pytest.raises(ValueError):
    TrailingWindow(days=0)


def test_winter_months():
  winter = [m for m in range(1, 13) if is_winter(date(2025, m, 1))]
  assert winter == [1, 2, 3, 4, 11, 12]


def test_beaufort():
  assert describe_wind(0) == "Calm"
  assert describe_wind(12) == "Hurricane"
  assert describe_wind(13) == "Unknown"
  assert clamp_beaufort(15) == 12
  assert clamp_beaufort(-1) == 0


def test_seeded_rng_repeats():
  a, b = RNG(7), RNG(7)
  assert [a.uniform(0, 1) for _ in range(5)] == [b.uniform(0, 1) for _ in range(5)]
