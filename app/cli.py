"""
Ouderraad reserve forecast — command line
=========================================

  ouderraad-forecast forecast [SCENARIO_JSON] [--years N] [--preset NAME] [--json]
  ouderraad-forecast minimum  [SCENARIO_JSON]
  ouderraad-forecast validate SCENARIO_JSON

Without a scenario file the built-in default scenario is used.
"""

from __future__ import annotations

import json
from typing import Optional

import click
import pandas as pd
from pydantic import ValidationError

from core.defaults import PRESET_SCENARIOS, create_default_scenario, create_preset_scenario
from core.logging_config import setup_logging
from core.models import Scenario
from data_prep.loader import forecast_to_dict, load_scenario_json
from data_prep.validators import validate_scenario
from engine.runner import calculate_forecast
from engine.solver import solve_minimum_contribution
from reporting.summary import generate_forecast_summary


def _load(path: Optional[str], preset: Optional[str] = None) -> Scenario:
    if path is None:
        return create_preset_scenario(preset) if preset else create_default_scenario()
    try:
        return load_scenario_json(path)
    except (OSError, ValueError, ValidationError) as e:
        raise click.ClickException(f"Cannot read scenario from {path}: {e}") from e


@click.group()
@click.option("--log-level", default=None, help="Logging level (default from OUDERRAAD_LOG_LEVEL)")
def cli(log_level: Optional[str]) -> None:
    """Parent-council reserve forecast"""
    setup_logging(level=log_level)


@cli.command()
@click.argument("scenario_path", required=False, type=click.Path(dir_okay=False))
@click.option("--years", type=int, default=None, help="Override the forecast horizon")
@click.option(
    "--preset",
    type=click.Choice(sorted(PRESET_SCENARIOS)),
    default=None,
    help="Preset to use when no scenario file is given",
)
@click.option("--json", "as_json", is_flag=True, help="Print the full forecast as JSON")
def forecast(
    scenario_path: Optional[str],
    years: Optional[int],
    preset: Optional[str],
    as_json: bool,
) -> None:
    """Project income, expense and reserve year by year"""
    if scenario_path is not None and preset is not None:
        raise click.UsageError("--preset applies only when no scenario file is given")
    scenario = _load(scenario_path, preset)
    if years is not None:
        scenario = scenario.with_settings(years_ahead=years)

    check = validate_scenario(scenario)
    for w in check.warnings:
        click.echo(w, err=True)
    if not check.is_valid:
        raise click.ClickException(check.summary())

    result = calculate_forecast(scenario)

    if as_json:
        click.echo(json.dumps(forecast_to_dict(result), indent=2, ensure_ascii=False))
        return

    with pd.option_context("display.float_format", "{:,.2f}".format, "display.width", 160):
        click.echo(result.to_dataframe().to_string(index=False))
        click.echo("")
        click.echo(generate_forecast_summary(result).to_dataframe().to_string(index=False))


@cli.command()
@click.argument("scenario_path", required=False, type=click.Path(dir_okay=False))
def minimum(scenario_path: Optional[str]) -> None:
    """Print the minimum contribution that keeps the final reserve non-negative"""
    scenario = _load(scenario_path)
    solution = solve_minimum_contribution(scenario)
    click.echo(str(solution.contribution))
    if not solution.within_bound:
        click.echo("Warning: no contribution within the search bound sustains the reserve", err=True)


@cli.command()
@click.argument("scenario_path", type=click.Path(dir_okay=False))
def validate(scenario_path: str) -> None:
    """Check a scenario file; exits non-zero on blocking errors"""
    scenario = _load(scenario_path)
    result = validate_scenario(scenario)
    click.echo(result.summary())
    if not result.is_valid:
        raise SystemExit(1)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
