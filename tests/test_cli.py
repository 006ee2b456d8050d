from datetime import date
import json

from click.testing import CliRunner

from skiweather.api import SkiWeatherAPI
from skiweather.cli import serve as serve_module
from skiweather.cli.generate import main as generate
from skiweather.cli.summarize import main as summarize
from skiweather.cli.validate import main as validate


def test_generate_validate_summarize(tmp_path):
  runner = CliRunner()
  out = tmp_path / "out"
  result = runner.invoke(generate, [
    "--seed", "5", "--reference-date", "2025-06-01", "--out", str(out), "--format", "json",
  ])
  assert result.exit_code == 0, result.output
  export = out / "ski-regions-data.json"
  assert len(json.loads(export.read_text(encoding="utf-8"))) == 14 * 365
  manifest = json.loads((out / "manifest.json").read_text(encoding="utf-8"))
  assert manifest["seed"] == 5

  result = runner.invoke(validate, ["--input", str(export)])
  assert result.exit_code == 0, result.output
  assert "Validation OK" in result.output

  result = runner.invoke(summarize, ["--input", str(export)])
  assert result.exit_code == 0, result.output
  assert "Zermatt" in result.output
  assert "Total records: 5,110" in result.output


def test_generate_from_config_with_filters(tmp_path):
  cfg = tmp_path / "config.yaml"
  cfg.write_text(
    "seed: 1\n"
    "reference_date: 2025-06-01\n"
    "days: 30\n"
    f"output: {{path: {tmp_path / 'cfg-out'}, format: csv}}\n"
    "filters: {country: Germany}\n",
    encoding="utf-8",
  )
  result = CliRunner().invoke(generate, ["--config", str(cfg)])
  assert result.exit_code == 0, result.output
  lines = (tmp_path / "cfg-out" / "ski-regions-data.csv").read_text(encoding="utf-8").split("\n")
  assert len(lines) == 1 + 4 * 30


def test_generate_rejects_duplicate_regions(tmp_path):
  cfg = tmp_path / "config.yaml"
  cfg.write_text(
    "regions:\n"
    "  - {name: A, country: X, elevation_meters: 100}\n"
    "  - {name: A, country: X, elevation_meters: 200}\n",
    encoding="utf-8",
  )
  result = CliRunner().invoke(generate, ["--config", str(cfg), "--out", str(tmp_path)])
  assert result.exit_code == 1


def test_validate_flags_short_export(tmp_path):
  export = tmp_path / "short.json"
  export.write_text(json.dumps([{
    "id": "Davos-2025-01-01", "date": "2025-01-01", "region": "Davos", "country": "Switzerland",
    "elevationMeters": 1560, "windBeaufort": 3, "temperatureCelsius": -2.5,
    "precipitationMm": 0.0, "snowDepthCm": 50,
  }]), encoding="utf-8")
  result = CliRunner().invoke(validate, ["--input", str(export)])
  assert result.exit_code == 1


def test_generate_reports_non_mapping_config(tmp_path):
  cfg = tmp_path / "config.yaml"
  cfg.write_text("- seed: 1\n", encoding="utf-8")
  result = CliRunner().invoke(generate, ["--config", str(cfg), "--out", str(tmp_path)])
  assert result.exit_code == 1
  assert not isinstance(result.exception, TypeError)
  assert "invalid configuration" in result.output


def test_generate_reports_broken_yaml(tmp_path):
  cfg = tmp_path / "config.yaml"
  cfg.write_text("seed: [1\n", encoding="utf-8")
  result = CliRunner().invoke(generate, ["--config", str(cfg), "--out", str(tmp_path)])
  assert result.exit_code == 1
  assert "not valid YAML" in result.output


def test_serve_reports_broken_yaml(tmp_path, monkeypatch):
  cfg = tmp_path / "config.yaml"
  cfg.write_text("seed: [1\n", encoding="utf-8")
  monkeypatch.setattr(serve_module.uvicorn, "run", lambda *a, **kw: None)
  result = CliRunner().invoke(serve_module.main, ["--config", str(cfg)])
  assert result.exit_code == 1
  assert "Error loading configuration" in result.output


def test_serve_passes_options_to_api(tmp_path, monkeypatch):
  cfg = tmp_path / "config.yaml"
  cfg.write_text(
    "seed: 3\n"
    "days: 10\n"
    "regions:\n"
    "  - {name: Zermatt, country: Switzerland, elevation_meters: 1620}\n",
    encoding="utf-8",
  )
  built, served = [], []

  def make_api(**kwargs):
    api = SkiWeatherAPI(**kwargs)
    built.append(api)
    return api

  monkeypatch.setattr(serve_module, "SkiWeatherAPI", make_api)
  monkeypatch.setattr(serve_module.uvicorn, "run", lambda app, **kw: served.append((app, kw)))
  result = CliRunner().invoke(serve_module.main, [
    "--config", str(cfg), "--seed", "8", "--reference-date", "2025-06-01", "--port", "9001",
  ])
  assert result.exit_code == 0, result.output
  api = built[0]
  assert api.seed == 8
  assert api.reference_date == date(2025, 6, 1)
  assert api.days == 10
  assert [r.name for r in api.regions] == ["Zermatt"]
  app, kw = served[0]
  assert app is api.app
  assert kw["port"] == 9001


def test_serve_falls_back_to_config_seed(tmp_path, monkeypatch):
  cfg = tmp_path / "config.yaml"
  cfg.write_text("seed: 3\nreference_date: 2025-01-10\n", encoding="utf-8")
  built = []

  def make_api(**kwargs):
    built.append(kwargs)
    return SkiWeatherAPI(**kwargs)

  monkeypatch.setattr(serve_module, "SkiWeatherAPI", make_api)
  monkeypatch.setattr(serve_module.uvicorn, "run", lambda *a, **kw: None)
  result = CliRunner().invoke(serve_module.main, ["--config", str(cfg)])
  assert result.exit_code == 0, result.output
  assert built[0]["seed"] == 3
  assert built[0]["reference_date"] == date(2025, 1, 10)
