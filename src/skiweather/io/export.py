import os
from pathlib import Path
from typing import Iterable, List, Sequence, Union

from ..model.records import RecordList, WeatherRecord

CSV_FILENAME = "ski-regions-data.csv"
JSON_FILENAME = "ski-regions-data.json"

CSV_HEADERS = (
  "Date",
  "Region",
  "Country",
  "Elevation (m)",
  "Wind (Beaufort)",
  "Temperature (°C)",
  "Precipitation (mm)",
  "Snow Depth (cm)",
)

PathLike = Union[str, Path]


def _fmt(value) -> str:
  # whole floats print without ".0": -3.0 -> "-3", 12.5 -> "12.5"
  if isinstance(value, float) and value.is_integer():
    return str(int(value))
  return str(value)


def _csv_row(r: WeatherRecord) -> List[str]:
  return [
    r.date.isoformat(),
    r.region,
    r.country,
    _fmt(r.elevation_meters),
    _fmt(r.wind_beaufort),
    _fmt(r.temperature_celsius),
    _fmt(r.precipitation_mm),
    _fmt(r.snow_depth_cm),
  ]


def records_to_csv(records: Iterable[WeatherRecord]) -> str:
  lines = [",".join(CSV_HEADERS)]
  lines.extend(",".join(_csv_row(r)) for r in records)
  return "\n".join(lines)


def records_to_json(records: Sequence[WeatherRecord]) -> str:
  return RecordList.dump_json(list(records), indent=2, by_alias=True).decode("utf-8")


def records_from_json(text: Union[str, bytes]) -> List[WeatherRecord]:
  return RecordList.validate_json(text)


def _prepare(path: PathLike) -> Path:
  path = Path(path)
  os.makedirs(path.parent, exist_ok=True)
  return path


def write_csv(records: Iterable[WeatherRecord], path: PathLike) -> Path:
  path = _prepare(path)
  path.write_text(records_to_csv(records), encoding="utf-8")
  return path


def write_json(records: Sequence[WeatherRecord], path: PathLike) -> Path:
  path = _prepare(path)
  path.write_text(records_to_json(records), encoding="utf-8")
  return path


def read_json(path: PathLike) -> List[WeatherRecord]:
  return records_from_json(Path(path).read_text(encoding="utf-8"))
