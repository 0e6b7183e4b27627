"""Command line access to Gatherer pages.

Example:
    gatherer card 193871 --out akroma.html
    gatherer search --set Darksteel --output spoiler --method text
    gatherer --cache null homepage --json
"""

import json
from pathlib import Path
from typing import Optional

import click

from scapeshift.cache import STORES
from scapeshift.config import configure
from scapeshift.core.logging import log_operation, setup_logging
from scapeshift.errors import GathererError
from scapeshift.net import GathererAccess, GathererResponse


def resolve_output_path(path_value) -> Optional[Path]:
    if path_value is None:
        return None
    return Path(path_value).expanduser().resolve()


def emit(response: GathererResponse, out: Optional[str], as_json: bool) -> None:
    out_path = resolve_output_path(out)
    if out_path is not None:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_bytes(response.content)

    if as_json:
        click.echo(json.dumps(response.to_dict(), indent=2, ensure_ascii=False))
        return

    click.echo(f"{response.status_code} {response.uri} ({len(response.content)} bytes)")
    if out_path is not None:
        click.echo(f"Saved to {out_path}")


def run(operation: str, request, out: Optional[str], as_json: bool, **context) -> None:
    try:
        with log_operation(operation, **context):
            response = request(GathererAccess.instance())
    except GathererError as error:
        raise click.ClickException(str(error)) from error
    emit(response, out, as_json)


output_options = [
    click.option("--out", type=click.Path(dir_okay=False), help="Write the body to a file"),
    click.option("--json", "as_json", is_flag=True, help="Print response metadata as JSON"),
]


def with_output_options(func):
    for option in reversed(output_options):
        func = option(func)
    return func


@click.group()
@click.option(
    "--cache",
    type=click.Choice(sorted(STORES)),
    default=None,
    help="Cache store (defaults to GATHERER_CACHE_BACKEND)",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    default=None,
    help="Console log level",
)
def cli(cache, log_level):
    """Fetch pages from the Gatherer card database."""
    setup_logging(log_level)
    if cache is not None:
        configure(cache=cache)


@cli.command()
@click.argument("multiverse_id")
@with_output_options
def card(multiverse_id, out, as_json):
    """Fetch the details page of a card by multiverse ID."""
    run(
        "Fetching card",
        lambda access: access.card(multiverse_id),
        out,
        as_json,
        multiverse_id=multiverse_id,
    )


@cli.command()
@click.option("--name", help='Card name (eg. "Jace Beleren")')
@click.option("--format", "format_", help='Format or block (eg. "Legacy")')
@click.option("--set", "set_", help='Set name (eg. "Darksteel")')
@click.option(
    "--output",
    type=click.Choice(["standard", "compact", "checklist", "spoiler"]),
    help="Results page output",
)
@click.option(
    "--method", type=click.Choice(["text", "visual"]), help="Spoiler method"
)
@with_output_options
def search(name, format_, set_, output, method, out, as_json):
    """Search Gatherer by name, format and set."""
    options = {
        "name": name,
        "format": format_,
        "set": set_,
        "output": output,
        "method": method,
    }
    options = {k: v for k, v in options.items() if v is not None}
    if not options:
        raise click.UsageError("Give at least one search option")
    run("Searching", lambda access: access.search(options), out, as_json, **options)


@cli.command()
@with_output_options
def homepage(out, as_json):
    """Fetch the Gatherer homepage."""
    run("Fetching homepage", lambda access: access.homepage(), out, as_json)


def main():
    cli()


if __name__ == "__main__":
    main()
