from datetime import date, timedelta
from typing import List, Optional, Sequence
import logging

from ..core.beaufort import clamp_beaufort
from ..core.rng import RNG
from ..core.timebase import TrailingWindow, is_winter, round_half_up
from ..model.records import WeatherRecord
from ..model.regions import Region, SKI_REGIONS, check_unique_names

logger = logging.getLogger(__name__)

LAPSE_RATE_C_PER_KM = 6.0
MELT_THRESHOLD_C = 2.0
MELT_FACTOR = 0.7
RESIDUAL_SNOW_MIN_ELEVATION_M = 1500


def synth_temperature(region: Region, winter: bool, rng) -> float:
  base = rng.uniform(-5, 5) if winter else rng.uniform(15, 30)
  base -= region.elevation_factor * LAPSE_RATE_C_PER_KM
  return round_half_up(base + rng.uniform(-5, 5), 1)


def synth_wind(region: Region, rng) -> int:
  base = 2 + region.elevation_factor + rng.uniform(0, 4)
  return clamp_beaufort(round_half_up(base))


def synth_precipitation(region: Region, winter: bool, rng) -> float:
  ef = region.elevation_factor
  p = 0.4 + ef * 0.2 if winter else 0.2 + ef * 0.1
  if not rng.chance(p):
    return 0.0
  return round_half_up(rng.uniform(0, 15 if winter else 25), 1)


def synth_snow_depth(region: Region, winter: bool, temperature: float, rng) -> int:
  ef = region.elevation_factor
  depth = 0.0
  if winter:
    depth = max(0.0, ef * 30 + rng.uniform(0, 50) - 10)
    if temperature > MELT_THRESHOLD_C:
      depth *= MELT_FACTOR
  elif region.elevation_meters > RESIDUAL_SNOW_MIN_ELEVATION_M:
    # summer residual snow on the high stations
    depth = max(0.0, ef * 10 + rng.uniform(0, 20) - 15)
  return int(round_half_up(depth))


def synth_day_record(region: Region, day: date, rng) -> WeatherRecord:
  """
  One day of weather for one region. Draw order: temperature, wind,
  precipitation, snow depth.
  """
  winter = is_winter(day)
  temperature = synth_temperature(region, winter, rng)
  wind = synth_wind(region, rng)
  precipitation = synth_precipitation(region, winter, rng)
  snow = synth_snow_depth(region, winter, temperature, rng)
  return WeatherRecord.for_region(
    region,
    day,
    wind_beaufort=wind,
    temperature_celsius=temperature,
    precipitation_mm=precipitation,
    snow_depth_cm=snow,
  )


def generate_dataset(
  regions: Sequence[Region] = SKI_REGIONS,
  reference_date: Optional[date] = None,
  rng: Optional[RNG] = None,
  days: int = 365,
) -> List[WeatherRecord]:
  """
  Synthesize one record per (region, day) over the trailing window that ends
  the day before ``reference_date`` (today in UTC by default). Records come
  back newest first; same-day records keep catalog order.
  """
  check_unique_names(regions)
  rng = rng or RNG()
  window = TrailingWindow(days=days, reference=reference_date)
  records = [synth_day_record(region, d, rng) for region in regions for d in window]
  records.sort(key=lambda r: r.date, reverse=True)
  logger.info(
    "Generated %d records for %d regions (%s .. %s)",
    len(records), len(regions), window.start, window.reference - timedelta(days=1),
  )
  return records
