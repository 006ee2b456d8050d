import json
import os
from typing import Iterable

from ..model.records import WeatherRecord


def write_jsonl(records: Iterable[WeatherRecord], path: str):
  os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
  with open(path, "w", encoding="utf-8") as f:
    for r in records:
      f.write(json.dumps(r.model_dump(mode="json", by_alias=True), ensure_ascii=False) + "\n")
