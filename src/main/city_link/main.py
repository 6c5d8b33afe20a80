import logging
import os

import click

from . import config as configuration
from . import graph_store, instrumentation, rendering
from .closure import compute_closure
from .errors import CityLinkError
from .search import find_path

logger = logging.getLogger(__name__)


def parse_route(ctx, param, value):
    if value is None:
        return None
    try:
        source, destination = value.split(",")
        return int(source), int(destination)
    except ValueError:
        raise click.BadParameter(f"Invalid source and destination cities: {value}")


@click.command(no_args_is_help=True)
@click.option(
    "-i", "--input", "input_file",
    required=True,
    type=click.Path(dir_okay=False),
    help="text file holding the number of cities followed by the adjacency matrix",
)
@click.option(
    "-r", "--route",
    callback=parse_route,
    metavar="SOURCE,DESTINATION",
    help="look for a path between two cities",
)
@click.option(
    "-p", "--print-closure",
    is_flag=True,
    help="print the transitive closure",
)
@click.option(
    "-o", "--output-closure",
    is_flag=True,
    help="write the transitive closure to out-<input file>",
)
@click.option(
    "--config",
    default=lambda: os.getenv("CONFIG"),
    type=click.Path(exists=True, dir_okay=False),
    help="location of the YAML config",
)
@click.option(
    "--stats",
    is_flag=True,
    help="print counters collected while answering the queries",
)
def run(input_file: str, route, print_closure: bool, output_closure: bool, config: str, stats: bool):
    try:
        main_config = configuration.read_config(config)
    except (CityLinkError, OSError) as e:
        raise click.ClickException(str(e))
    configuration.configure_logging(main_config)
    tracker = instrumentation.setup()
    try:
        answer_queries(main_config, input_file, route, print_closure, output_closure, tracker)
    except (CityLinkError, OSError) as e:
        raise click.ClickException(str(e))
    if stats:
        for name, value in tracker.snapshot().items():
            click.echo(f"{name}: {value:g}")


def answer_queries(
        config: dict,
        input_file: str,
        route,
        print_closure: bool,
        output_closure: bool,
        tracker: instrumentation.Tracker,
):
    max_city_count = config["limits"]["max_city_count"]
    with graph_store.load_file(input_file, max_city_count=max_city_count) as matrix:
        for line in rendering.format_matrix(matrix.rows()):
            click.echo(line)
        if route is not None:
            source, destination = route
            path = find_path(matrix, source, destination, tracker)
            for line in rendering.format_path_result(path):
                click.echo(line)
        if print_closure:
            rendering.ConsoleWriter().write_closure(compute_closure(matrix, tracker))
        if output_closure:
            target = rendering.output_path(input_file, config["output"]["prefix"])
            with open(target, 'w') as file:
                count = rendering.FileWriter(file).write_closure(compute_closure(matrix, tracker))
            logger.info("wrote %d closure edges to %s", count, target)
            click.echo(f"Saving {target}...")


if __name__ == '__main__':
    run()
