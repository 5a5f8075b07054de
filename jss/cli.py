"""jss CLI entry point: Click group with subcommands."""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import replace

import click

from jss import __version__
from jss.config import settings
from jss.css.properties import resolve as resolve_name
from jss.css.render import Renderer, Rules
from jss.css.selector import selector_namespaced
from jss.errors import JssError


@click.group()
@click.version_option(version=__version__, prog_name="jss")
@click.option("-v", "--verbose", is_flag=True, help="Log debug messages to stderr.")
def cli(verbose: bool) -> None:
    """jss - build css from nested JSON style trees."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.option("--pretty", is_flag=True, help="Indent the output, one declaration per line.")
@click.option("-n", "--namespace", default=None, help="Prefix class selectors with NAMESPACE__.")
@click.option("--strict", is_flag=True, help="Fail on unknown property names.")
def render(source, pretty: bool, namespace: str | None, strict: bool) -> None:
    """Render the JSON style tree in SOURCE (or - for stdin) as css.

    Object order and repeated selectors are kept as written.
    """
    try:
        tree = json.load(source, object_pairs_hook=Rules)
    except json.JSONDecodeError as exc:
        click.echo(f"Error: {source.name} is not valid JSON: {exc}", err=True)
        sys.exit(1)
    except UnicodeDecodeError as exc:
        click.echo(f"Error: {source.name} is not valid UTF-8: {exc}", err=True)
        sys.exit(1)

    renderer = Renderer(
        namespace, pretty, settings=replace(settings, strict=settings.strict or strict)
    )
    try:
        css = renderer.render(tree)
    except JssError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(css, nl=not pretty)


@cli.command()
@click.argument("names", nargs=-1, required=True)
@click.option("--strict", is_flag=True, help="Fail on unknown property names.")
def resolve(names: tuple[str, ...], strict: bool) -> None:
    """Print the css name for each property NAME."""
    for name in names:
        try:
            click.echo(resolve_name(name, strict=settings.strict or strict))
        except JssError as exc:
            click.echo(f"Error: {exc}", err=True)
            sys.exit(1)


@cli.command()
@click.argument("namespace")
@click.argument("selector")
def namespace(namespace: str, selector: str) -> None:
    """Print SELECTOR with its classes prefixed by NAMESPACE."""
    click.echo(selector_namespaced(namespace, selector))
