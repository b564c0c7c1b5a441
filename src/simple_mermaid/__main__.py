"""CLI entry point for simple-mermaid."""

import logging
import sys

import click

from simple_mermaid.config import resolve
from simple_mermaid.errors import SimpleMermaidError
from simple_mermaid.loader import load_source
from simple_mermaid.template import render


@click.command()
@click.argument("input", type=click.Path())
@click.argument("modifiers", nargs=-1)
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.option("--verbose", "-v", is_flag=True, help="Log debug information to stderr")
def main(input: str, modifiers: tuple[str, ...], output: str | None, verbose: bool) -> None:
    """Embed a Mermaid diagram file as an HTML block for documentation.

    MODIFIERS are up to one of left/right/center and one of framed/transparent.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        config = resolve(modifiers)
        rendered = render(config, load_source(input))
    except SimpleMermaidError as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)

    if output:
        try:
            with open(output, "w", encoding="utf-8", newline="") as f:
                f.write(rendered)
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(rendered, nl=False)


if __name__ == "__main__":
    main()
