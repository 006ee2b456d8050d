import click

from ..core.beaufort import describe_wind
from ..core.timebase import round_half_up
from ..dataset import SkiWeatherDataset
from ..io.export import read_json


@click.command()
@click.option("--input", "input_path", required=True, type=click.Path(exists=True), help="JSON export")
def main(input_path):
  ds = SkiWeatherDataset(read_json(input_path))
  names = ds.regions()
  width = max([len(n) for n in names] + [len("Region")])
  click.echo("Region".ljust(width) + " | Records | Temp °C | Snow cm | Wind")
  click.echo("-" * width + "-|---------|---------|---------|-----")
  for name in sorted(names):
    view = SkiWeatherDataset(r for r in ds if r.region == name)
    s = view.summary()
    wind = int(round_half_up(sum(r.wind_beaufort for r in view) / len(view)))
    click.echo(
      name.ljust(width)
      + f" | {s.total_records:7,} | {s.avg_temperature_celsius:7.1f} | {s.avg_snow_depth_cm:7.0f} | {wind} ({describe_wind(wind)})"
    )
  total = ds.summary()
  click.echo(
    f"Total records: {total.total_records:,}, avg temperature {total.avg_temperature_celsius:.1f}°C, "
    f"avg snow depth {total.avg_snow_depth_cm:.0f}cm, avg precipitation {total.avg_precipitation_mm:.1f}mm"
  )


if __name__ == "__main__":
  main()
