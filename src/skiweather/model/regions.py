from typing import List, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Region(BaseModel):
  model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

  name: str = Field(min_length=1)
  country: str = Field(min_length=1)
  elevation_meters: int = Field(gt=0)

  @property
  def elevation_factor(self) -> float:
    return self.elevation_meters / 1000


SKI_REGIONS: Tuple[Region, ...] = (
  # Germany
  Region(name="Garmisch-Partenkirchen", country="Germany", elevation_meters=750),
  Region(name="Oberstdorf", country="Germany", elevation_meters=813),
  Region(name="Berchtesgaden", country="Germany", elevation_meters=518),
  Region(name="Feldberg", country="Germany", elevation_meters=1493),
  # Austria
  Region(name="Innsbruck", country="Austria", elevation_meters=574),
  Region(name="St. Anton am Arlberg", country="Austria", elevation_meters=1304),
  Region(name="Kitzbühel", country="Austria", elevation_meters=762),
  Region(name="Salzburg", country="Austria", elevation_meters=424),
  Region(name="Bad Gastein", country="Austria", elevation_meters=1002),
  # Switzerland
  Region(name="Zermatt", country="Switzerland", elevation_meters=1620),
  Region(name="St. Moritz", country="Switzerland", elevation_meters=1856),
  Region(name="Verbier", country="Switzerland", elevation_meters=1500),
  Region(name="Davos", country="Switzerland", elevation_meters=1560),
  Region(name="Interlaken", country="Switzerland", elevation_meters=568),
)


def check_unique_names(regions: Sequence[Region]) -> Sequence[Region]:
  names = [r.name for r in regions]
  dupes = sorted({n for n in names if names.count(n) > 1})
  if dupes:
    raise ValueError(f"duplicate region names: {', '.join(dupes)}")
  return regions


def countries(regions: Sequence[Region] = SKI_REGIONS) -> List[str]:
  """Country labels in catalog order, without repeats."""
  return list(dict.fromkeys(r.country for r in regions))
