import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel

from .regions import Region


class WeatherRecord(BaseModel):
  model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

  id: str
  date: datetime.date
  region: str
  country: str
  elevation_meters: int = Field(gt=0)
  wind_beaufort: int = Field(ge=0, le=12)
  temperature_celsius: float
  precipitation_mm: float = Field(ge=0)
  snow_depth_cm: int = Field(ge=0)

  @classmethod
  def for_region(cls, region: Region, day: datetime.date, **measurements) -> "WeatherRecord":
    return cls(
      id=record_id(region.name, day),
      date=day,
      region=region.name,
      country=region.country,
      elevation_meters=region.elevation_meters,
      **measurements,
    )


RecordList = TypeAdapter(List[WeatherRecord])


def record_id(region_name: str, day: datetime.date) -> str:
  return f"{region_name}-{day.isoformat()}"
