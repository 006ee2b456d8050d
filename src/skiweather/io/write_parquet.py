import os
from typing import Iterable

import pyarrow as pa
import pyarrow.parquet as pq

from ..model.records import WeatherRecord

RECORD_SCHEMA = pa.schema([
  ("id", pa.string()),
  ("date", pa.date32()),
  ("region", pa.string()),
  ("country", pa.string()),
  ("elevationMeters", pa.int32()),
  ("windBeaufort", pa.int8()),
  ("temperatureCelsius", pa.float64()),
  ("precipitationMm", pa.float64()),
  ("snowDepthCm", pa.int32()),
])


def write_records_parquet(records: Iterable[WeatherRecord], path: str):
  os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
  rows = [r.model_dump(by_alias=True) for r in records]
  table = pa.Table.from_pylist(rows, schema=RECORD_SCHEMA)
  pq.write_table(table, path, compression="snappy")
