"""Read-only dataset snapshot with derived filtered views and summaries."""

import datetime
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple
import logging

import numpy as np
from pydantic import BaseModel

from .core.rng import RNG
from .core.timebase import round_half_up
from .model.records import WeatherRecord
from .model.regions import Region, SKI_REGIONS
from .synth.weather import generate_dataset

logger = logging.getLogger(__name__)

ALL_COUNTRIES = "all"


class DatasetSummary(BaseModel):
    """Headline statistics for a dataset view."""
    total_records: int
    avg_temperature_celsius: float
    avg_snow_depth_cm: float
    avg_precipitation_mm: float


class SkiWeatherDataset:
    """Immutable snapshot of generated weather records.

    Filtering never touches the source records; every filter call returns a
    new dataset that shares the underlying record objects.
    """

    def __init__(self, records: Iterable[WeatherRecord]):
        """Wrap records in a read-only snapshot.

        Args:
            records: Records in the order they should be presented
        """
        self._records: Tuple[WeatherRecord, ...] = tuple(records)

    @classmethod
    def generate(
        cls,
        regions: Sequence[Region] = SKI_REGIONS,
        reference_date: Optional[datetime.date] = None,
        seed: Optional[int] = None,
        days: int = 365,
    ) -> "SkiWeatherDataset":
        """Generate a fresh snapshot.

        Args:
            regions: Region catalog to generate for
            reference_date: Day after the last generated day (default: today, UTC)
            seed: Random seed (default: OS entropy)
            days: Length of the trailing window

        Returns:
            New dataset snapshot
        """
        records = generate_dataset(
            regions=regions,
            reference_date=reference_date,
            rng=RNG(seed),
            days=days,
        )
        return cls(records)

    @property
    def records(self) -> Tuple[WeatherRecord, ...]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[WeatherRecord]:
        return iter(self._records)

    def filter(
        self,
        search: str = "",
        country: str = ALL_COUNTRIES,
        date: str = "",
    ) -> "SkiWeatherDataset":
        """Derive a filtered view.

        Args:
            search: Case-insensitive substring of the region name
            country: Exact country label, or "all"
            date: Substring of the ISO date, e.g. "2025-01" for a month

        Returns:
            New dataset holding the matching records in source order
        """
        needle = (search or "").lower()
        country = country or ALL_COUNTRIES

        def matches(r: WeatherRecord) -> bool:
            if needle and needle not in r.region.lower():
                return False
            if country != ALL_COUNTRIES and r.country != country:
                return False
            if date and date not in r.date.isoformat():
                return False
            return True

        return SkiWeatherDataset(r for r in self._records if matches(r))

    def page(self, limit: int = 100, offset: int = 0) -> List[WeatherRecord]:
        """Slice of records for display."""
        return list(self._records[offset:offset + limit])

    def countries(self) -> List[str]:
        """Distinct countries in first-seen order."""
        return list(dict.fromkeys(r.country for r in self._records))

    def regions(self) -> List[str]:
        """Distinct region names in first-seen order."""
        return list(dict.fromkeys(r.region for r in self._records))

    def summary(self) -> DatasetSummary:
        """Average temperature, snow depth and precipitation.

        An empty view summarises to zeros.
        """
        if not self._records:
            return DatasetSummary(
                total_records=0,
                avg_temperature_celsius=0.0,
                avg_snow_depth_cm=0.0,
                avg_precipitation_mm=0.0,
            )

        temps = np.fromiter((r.temperature_celsius for r in self._records), dtype=float)
        snow = np.fromiter((r.snow_depth_cm for r in self._records), dtype=float)
        precip = np.fromiter((r.precipitation_mm for r in self._records), dtype=float)
        return DatasetSummary(
            total_records=len(self._records),
            avg_temperature_celsius=round_half_up(float(temps.mean()), 1),
            avg_snow_depth_cm=round_half_up(float(snow.mean())),
            avg_precipitation_mm=round_half_up(float(precip.mean()), 1),
        )
