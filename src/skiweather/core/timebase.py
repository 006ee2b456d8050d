from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from typing import Optional

import numpy as np


def utc_today() -> date:
  return datetime.now(timezone.utc).date()


def round_half_up(value: float, ndigits: int = 0) -> float:
  # Ties go towards +inf, so -2.5 -> -2.0 and 2.5 -> 3.0
  scale = 10 ** ndigits
  return float(np.floor(value * scale + 0.5)) / scale


@dataclass
class TrailingWindow:
  """Consecutive days ending the day before ``reference``."""
  days: int = 365
  reference: Optional[date] = None
  start: date = field(init=False)

  def __post_init__(self):
    if self.days <= 0:
      raise ValueError("days must be positive")
    if self.reference is None:
      self.reference = utc_today()
    self.start = self.reference - timedelta(days=self.days)

  def __iter__(self):
    for i in range(self.days):
      yield self.start + timedelta(days=i)

  def __len__(self):
    return self.days


WINTER_MONTHS = frozenset({11, 12, 1, 2, 3, 4})


def is_winter(d: date) -> bool:
  return d.month in WINTER_MONTHS
