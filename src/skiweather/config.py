import datetime
from pathlib import Path
from typing import List, Literal, Optional, Tuple, Union

import yaml
from pydantic import BaseModel, Field, field_validator

from .model.regions import Region, SKI_REGIONS, check_unique_names

ExportFormat = Literal["csv", "json", "jsonl", "parquet"]


class OutputConfig(BaseModel):
  path: str = "out/"
  format: ExportFormat = "csv"


class FilterConfig(BaseModel):
  search: str = ""
  country: str = "all"
  date: str = ""


class GeneratorConfig(BaseModel):
  seed: Optional[int] = None
  reference_date: Optional[datetime.date] = None
  days: int = Field(default=365, gt=0)
  regions: Optional[List[Region]] = None
  output: OutputConfig = OutputConfig()
  filters: FilterConfig = FilterConfig()

  @field_validator("regions")
  @classmethod
  def _check_catalog(cls, regions):
    if regions is not None:
      if not regions:
        raise ValueError("region list must not be empty")
      check_unique_names(regions)
    return regions

  def catalog(self) -> Tuple[Region, ...]:
    return tuple(self.regions) if self.regions else SKI_REGIONS


def load_config(path: Union[str, Path, None]) -> GeneratorConfig:
  if path is None:
    return GeneratorConfig()
  try:
    raw = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
  except yaml.YAMLError as e:
    raise ValueError(f"{path}: not valid YAML ({e})") from e
  return GeneratorConfig.model_validate(raw if raw is not None else {})
