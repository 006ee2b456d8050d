import hashlib
import json
import os
from collections import Counter
from typing import Optional, Sequence

from ..model.records import WeatherRecord
from .export import records_to_json


def dataset_hash(records: Sequence[WeatherRecord]) -> str:
  s = records_to_json(records).encode("utf-8")
  return hashlib.sha256(s).hexdigest()[:16]


def build_manifest(records: Sequence[WeatherRecord], reference_date, seed: Optional[int], fmt: str, export_path: str) -> dict:
  per_region = Counter(r.region for r in records)
  return {
    "reference_date": reference_date.isoformat(),
    "seed": seed,
    "format": fmt,
    "export": export_path,
    "records": sum(per_region.values()),
    "regions": dict(per_region),
    "dataset_hash": dataset_hash(records),
  }


def write_manifest(path: str, meta: dict):
  os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
  with open(path, "w", encoding="utf-8") as f:
    json.dump(meta, f, indent=2, ensure_ascii=False)
