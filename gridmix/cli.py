import json
import sys
from pathlib import Path

import click
import yaml

from gridmix.carbon_intensity import get_average_energy_mix, get_optimal_window
from gridmix.config import load_config

MIN_HOURS = 1
MAX_HOURS = 6


def save_json(payload: dict, output_path: Path) -> Path:
    """Write `payload` as indented JSON to output_path and return it."""
    output_path = Path(output_path).expanduser().resolve()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=4),
        encoding="utf-8"
    )
    click.echo(f"💾 Saved to {output_path}", err=True)
    return output_path


def _emit(payload: dict, output: Path | None):
    click.echo(json.dumps(payload, ensure_ascii=False, indent=4))
    if output:
        save_json(payload, output)


@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to YAML config file (overrides bundled one)"
)
@click.pass_context
def main(ctx: click.Context, config: Path | None):
    """Generation mix reports from the GB Carbon Intensity API."""
    try:
        ctx.obj = load_config(config)
    except (OSError, yaml.YAMLError, ValueError) as e:
        click.echo(f"❌ Failed to load config {config}: {e}", err=True)
        sys.exit(1)


@main.command("energy-mix")
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Also write the report to this JSON file"
)
@click.pass_obj
def energy_mix(cfg: dict, output: Path | None):
    """Average fuel mix and clean energy share for today and the next two days."""
    days = get_average_energy_mix(base_url=cfg["base_url"], timeout=cfg["timeout"])
    if days is None:
        click.echo("❌ No energy mix available", err=True)
        sys.exit(1)

    for day in days:
        click.echo(f"🌱 {day.date.isoformat()}: {day.clean_energy_percentage:.2f}% clean energy", err=True)
    _emit({"energyMixDays": [day.to_dict() for day in days]}, output)


@main.command("optimal-window")
@click.option(
    "--hours", "-H",
    required=True,
    type=click.IntRange(MIN_HOURS, MAX_HOURS),
    help=f"Charging window length in hours ({MIN_HOURS}-{MAX_HOURS})"
)
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Also write the window to this JSON file"
)
@click.pass_obj
def optimal_window(cfg: dict, hours: int, output: Path | None):
    """Cleanest charging window of the given length over the next two days."""
    window = get_optimal_window(hours, base_url=cfg["base_url"], timeout=cfg["timeout"])
    if window is None:
        click.echo(f"❌ No {hours}h charging window available", err=True)
        sys.exit(1)

    click.echo(
        f"⏳ Optimal {hours}h window: {window.start.isoformat()} → {window.end.isoformat()} "
        f"(avg clean energy {window.clean_energy_percentage:.2f}%)",
        err=True
    )
    _emit(window.to_dict(), output)


if __name__ == "__main__":
    main()
