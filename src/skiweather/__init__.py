"""Synthetic daily weather dataset for alpine ski regions."""

from .dataset import DatasetSummary, SkiWeatherDataset
from .model.records import WeatherRecord
from .model.regions import Region, SKI_REGIONS
from .synth.weather import generate_dataset

__all__ = [
  "DatasetSummary",
  "Region",
  "SKI_REGIONS",
  "SkiWeatherDataset",
  "WeatherRecord",
  "generate_dataset",
]
