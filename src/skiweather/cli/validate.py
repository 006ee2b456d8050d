import sys

import click
from pydantic import ValidationError

from ..io.export import read_json
from ..validation import validate_records


@click.command()
@click.option("--input", "input_path", required=True, type=click.Path(exists=True), help="JSON export")
@click.option("--days", default=365, type=int, help="Expected days per region")
def main(input_path, days):
  try:
    records = read_json(input_path)
  except ValidationError as e:
    click.echo(f"ERROR: malformed export: {e}", err=True)
    sys.exit(1)
  if not records:
    click.echo("WARNING: export contains no records")
  issues = validate_records(records, days=days)
  for issue in issues:
    click.echo(f"ERROR: {issue}", err=True)
  if issues:
    sys.exit(1)
  click.echo(f"Found {len(records):,} records across {len({r.region for r in records})} regions")
  click.echo("Validation OK")


if __name__ == "__main__":
  main()
