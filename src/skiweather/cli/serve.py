"""CLI command to start the ski region weather API server."""

import logging
import click
import uvicorn
from pydantic import ValidationError

from ..api import SkiWeatherAPI
from ..config import load_config

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@click.command()
@click.option(
    "--config",
    type=click.Path(exists=True),
    help="Configuration file path",
)
@click.option(
    "--host",
    default="0.0.0.0",
    help="Host to bind to (default: 0.0.0.0)",
)
@click.option(
    "--port",
    default=8000,
    type=int,
    help="Port to bind to (default: 8000)",
)
@click.option(
    "--seed",
    type=int,
    help="Random seed for the session dataset (default: OS entropy)",
)
@click.option(
    "--reference-date",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    help="Day after the last generated day (default: today, UTC)",
)
def main(config, host, port, seed, reference_date):
    """Start the ski region weather API server.

    The dataset is generated on the first request and served read-only
    until the process exits.

    Examples:
        # Start with default settings
        skiweather-serve

        # Reproducible dataset pinned to a date
        skiweather-serve --seed 7 --reference-date 2025-06-01
    """
    try:
        cfg = load_config(config)
    except (ValidationError, ValueError) as e:
        click.echo(f"❌ Error loading configuration: {e}", err=True)
        logger.exception("Configuration error")
        raise SystemExit(1)

    api = SkiWeatherAPI(
        regions=cfg.catalog(),
        reference_date=reference_date.date() if reference_date else cfg.reference_date,
        seed=seed if seed is not None else cfg.seed,
        days=cfg.days,
    )

    click.echo(f"🏔️  {len(api.regions)} regions, {cfg.days} days each")
    click.echo(f"🌐 Starting API server on http://{host}:{port}")
    click.echo(f"   • Records:       http://{host}:{port}/api/records")
    click.echo(f"   • Summary:       http://{host}:{port}/api/summary")
    click.echo(f"   • CSV export:    http://{host}:{port}/api/export.csv")
    click.echo(f"   • JSON export:   http://{host}:{port}/api/export.json")
    click.echo(f"   • API Docs:      http://{host}:{port}/docs")
    click.echo()

    try:
        uvicorn.run(api.app, host=host, port=port, log_level="info")
    except KeyboardInterrupt:
        click.echo("\n🛑 Shutting down...")


if __name__ == "__main__":
    main()
