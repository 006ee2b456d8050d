import logging
from pathlib import Path

import click
from pydantic import ValidationError

from ..config import load_config
from ..core.timebase import utc_today
from ..dataset import SkiWeatherDataset
from ..io.export import CSV_FILENAME, JSON_FILENAME, write_csv, write_json
from ..io.manifest import build_manifest, write_manifest
from ..io.write_jsonl import write_jsonl
from ..io.write_parquet import write_records_parquet

logging.basicConfig(
  level=logging.INFO,
  format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

EXPORT_NAMES = {
  "csv": CSV_FILENAME,
  "json": JSON_FILENAME,
  "jsonl": "ski-regions-data.jsonl",
  "parquet": "ski-regions-data.parquet",
}


def write_export(records, fmt: str, out_dir: Path) -> Path:
  path = out_dir / EXPORT_NAMES[fmt]
  if fmt == "csv":
    write_csv(records, path)
  elif fmt == "json":
    write_json(records, path)
  elif fmt == "jsonl":
    write_jsonl(records, str(path))
  else:
    write_records_parquet(records, str(path))
  return path


@click.command()
@click.option("--config", type=click.Path(exists=True), help="YAML configuration file")
@click.option("--seed", type=int, help="Random seed (default: OS entropy)")
@click.option("--reference-date", type=click.DateTime(formats=["%Y-%m-%d"]), help="Day after the last generated day")
@click.option("--out", "out_dir", type=click.Path(file_okay=False), help="Output directory")
@click.option("--format", "fmt", type=click.Choice(list(EXPORT_NAMES)), help="Export format")
@click.option("--search", help="Region name substring")
@click.option("--country", help="Country label or 'all'")
@click.option("--date", "date_filter", help="ISO date substring, e.g. 2025-01")
def main(config, seed, reference_date, out_dir, fmt, search, country, date_filter):
  try:
    cfg = load_config(config)
  except (ValidationError, ValueError) as e:
    click.echo(f"ERROR: invalid configuration: {e}", err=True)
    raise SystemExit(1)
  seed = seed if seed is not None else cfg.seed
  ref = reference_date.date() if reference_date else (cfg.reference_date or utc_today())
  out = Path(out_dir or cfg.output.path)
  fmt = fmt or cfg.output.format
  filters = cfg.filters
  dataset = SkiWeatherDataset.generate(regions=cfg.catalog(), reference_date=ref, seed=seed, days=cfg.days)
  view = dataset.filter(
    search=search if search is not None else filters.search,
    country=country if country is not None else filters.country,
    date=date_filter if date_filter is not None else filters.date,
  )
  if not len(view):
    logger.warning("Filters matched no records; writing an empty export")
  path = write_export(view.records, fmt, out)
  write_manifest(str(out / "manifest.json"), build_manifest(view.records, ref, seed, fmt, path.name))
  click.echo(f"Done. Wrote {len(view):,} records to {path}")


if __name__ == "__main__":
  main()
