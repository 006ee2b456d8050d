"""Invariant checks for a generated or re-imported record list."""

from collections import defaultdict
from datetime import timedelta
from typing import Dict, List, Sequence

from .core.beaufort import BEAUFORT_MAX, BEAUFORT_MIN
from .model.records import WeatherRecord, record_id


def validate_records(records: Sequence[WeatherRecord], days: int = 365) -> List[str]:
  """
  Return a list of problems; an empty list means the records satisfy every
  dataset invariant (value ranges, unique ids, newest-first order and one
  record per day per region over ``days`` consecutive days).
  """
  issues: List[str] = []
  seen_ids = set()
  by_region: Dict[str, list] = defaultdict(list)

  for i, r in enumerate(records):
    if not BEAUFORT_MIN <= r.wind_beaufort <= BEAUFORT_MAX:
      issues.append(f"{r.id}: wind {r.wind_beaufort} outside Beaufort range")
    if r.snow_depth_cm < 0:
      issues.append(f"{r.id}: negative snow depth {r.snow_depth_cm}")
    if r.precipitation_mm < 0:
      issues.append(f"{r.id}: negative precipitation {r.precipitation_mm}")
    if r.id != record_id(r.region, r.date):
      issues.append(f"{r.id}: id does not match region and date")
    if r.id in seen_ids:
      issues.append(f"{r.id}: duplicate id")
    seen_ids.add(r.id)
    if i and records[i - 1].date < r.date:
      issues.append(f"{r.id}: out of order after {records[i - 1].id}")
    by_region[r.region].append(r.date)

  for region, dates in by_region.items():
    if len(dates) != days:
      issues.append(f"{region}: {len(dates)} records, expected {days}")
    ordered = sorted(set(dates))
    gaps = sum(1 for a, b in zip(ordered, ordered[1:]) if b - a != timedelta(days=1))
    if gaps:
      issues.append(f"{region}: {gaps} gap(s) in daily coverage")

  return issues
