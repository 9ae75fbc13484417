"""Command-line interface for Waypoint."""

import logging
import sys

import click

from . import __version__
from .config import NetworkConfig, parse_config, parse_config_from_string
from .config.errors import ConfigLoadError, ConfigValidationError
from .graph import TravelMode, build_graph_from_config
from .graph.travel_graph import TravelGraph
from .output.formatter import format_graph, format_report, format_routes
from .routing import ROUTE_ORDER, plan_routes

FORMAT_OPTION = click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
CONFIG_OPTION = click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, allow_dash=True),
    default=None,
    help="YAML network config, or - to read it from stdin "
    "(defaults to the five built-in cities)",
)
SEED_OPTION = click.option(
    "--seed",
    type=int,
    envvar="WAYPOINT_SEED",
    default=None,
    help="Seed for graph generation (overrides the config seed; "
    "ignored when the config pins its edges)",
)


def _load_config(config_file: str | None) -> NetworkConfig:
    """Load the network config, exiting with code 2 on failure."""
    if config_file is None:
        return NetworkConfig()

    try:
        if config_file == "-":
            return parse_config_from_string(click.get_text_stream("stdin").read())
        return parse_config(config_file)
    except ConfigLoadError as e:
        click.echo(f"Error loading file: {e}", err=True)
        sys.exit(2)
    except ConfigValidationError as e:
        click.echo(f"Config validation error: {e}", err=True)
        for line in e.describe():
            click.echo(f"  - {line}", err=True)
        sys.exit(2)


def _build_graph(
    config_file: str | None, seed: int | None
) -> tuple[NetworkConfig, TravelGraph]:
    config = _load_config(config_file)
    return config, build_graph_from_config(config, seed=seed)


@click.group()
@click.version_option(version=__version__)
@click.option(
    "-v", "--verbose", is_flag=True, default=False, help="Enable debug logging"
)
def main(verbose: bool):
    """Waypoint: find greedy single-mode routes between places."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@main.command()
@CONFIG_OPTION
@SEED_OPTION
@FORMAT_OPTION
def run(config_file: str | None, seed: int | None, output_format: str):
    """Dump the graph, then route origin to destination by every mode.

    Origin and destination come from the config (New York to Miami by
    default).
    """
    config, graph = _build_graph(config_file, seed)
    routes = plan_routes(graph, config.origin, config.destination)

    output = format_report(graph, routes, output_format)  # type: ignore
    click.echo(output, nl=output_format == "json")


@main.command()
@CONFIG_OPTION
@SEED_OPTION
@FORMAT_OPTION
def dump(config_file: str | None, seed: int | None, output_format: str):
    """Print every edge of the travel graph."""
    _, graph = _build_graph(config_file, seed)
    click.echo(format_graph(graph, output_format))  # type: ignore


@main.command()
@click.argument("origin")
@click.argument("destination")
@click.option(
    "--mode",
    type=click.Choice(["road", "sky", "water", "all"], case_sensitive=False),
    default="all",
    help="Travel mode to route by",
)
@CONFIG_OPTION
@SEED_OPTION
@FORMAT_OPTION
def route(
    origin: str,
    destination: str,
    mode: str,
    config_file: str | None,
    seed: int | None,
    output_format: str,
):
    """Find a path from ORIGIN to DESTINATION.

    Exit codes:
      0 - Every requested route was found
      1 - At least one route is unreachable
      2 - Config error
    """
    _, graph = _build_graph(config_file, seed)

    modes = ROUTE_ORDER if mode.lower() == "all" else (TravelMode.parse(mode),)
    routes = plan_routes(graph, origin, destination, modes)

    output = format_routes(routes, output_format)  # type: ignore
    click.echo(output, nl=output_format == "json")

    if all(r.found for r in routes):
        sys.exit(0)
    else:
        sys.exit(1)


if __name__ == "__main__":
    main()
