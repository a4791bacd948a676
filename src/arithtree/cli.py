"""
Command-line interface for arithtree.

Provides commands for:
- Evaluating infix expressions
- Printing the inline and indented tree views
- Serializing trees to the token format and loading them back
"""

import functools
import logging
import sys

import click

from arithtree import __version__
from arithtree.config import Settings, configure_logging
from arithtree.expression import (
    ExpressionError,
    ExpressionTree,
    format_number,
    load,
    loads,
)

logger = logging.getLogger("arithtree")


def _fail(message: object) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def fatal_errors(command):
    """Report expression errors on stderr and exit with status 1."""

    @functools.wraps(command)
    def wrapper(*args, **kwargs):
        try:
            return command(*args, **kwargs)
        except (ExpressionError, ValueError) as e:
            _fail(e)
        except RecursionError:
            _fail("expression nested too deeply")

    return wrapper


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def main(verbose: bool) -> None:
    """arithtree - Arithmetic expression trees."""
    try:
        settings = Settings.from_env()
    except ValueError as e:
        _fail(e)
    configure_logging(settings, verbose=verbose)


@main.command("eval")
@click.argument("expression")
@fatal_errors
def eval_(expression: str) -> None:
    """Evaluate an infix EXPRESSION (e.g. 1+2*3-4)."""
    tree = ExpressionTree.from_string(expression)
    click.echo(format_number(tree.evaluate()))


@main.command()
@click.argument("expression")
@click.option(
    "--inline/--tree",
    default=True,
    help="Print the parenthesized form (default) or the indented tree",
)
@fatal_errors
def show(expression: str, inline: bool) -> None:
    """Pretty-print an infix EXPRESSION."""
    tree = ExpressionTree.from_string(expression)
    if inline:
        click.echo(tree.formula)
    else:
        click.echo(tree.render_tree(), nl=False)


@main.command()
@click.argument("expression")
@click.option("--output", "-o", type=click.File("w"), default=None, help="Output file for the token stream")
@fatal_errors
def dump(expression: str, output) -> None:
    """Serialize an infix EXPRESSION to the token format."""
    tree = ExpressionTree.from_string(expression)
    serialized = tree.serialize()
    if output is None:
        click.echo(serialized)
    else:
        output.write(serialized + "\n")
        click.echo(f"Serialized {len(serialized.split()) // 2} nodes to {output.name}")


@main.command("load")
@click.argument("source", type=click.File("r"), default="-")
@fatal_errors
def load_(source) -> None:
    """Load a serialized tree from SOURCE (stdin if omitted) and print it."""
    root = loads(source.read())
    value = root.evaluate()
    click.echo(root.pretty_print_inline())
    click.echo(format_number(value))


@main.command()
@click.argument("expression")
@fatal_errors
def roundtrip(expression: str) -> None:
    """Parse, evaluate, serialize and reload an infix EXPRESSION."""
    tree = ExpressionTree.from_string(expression)
    click.echo(format_number(tree.evaluate()))
    click.echo(tree.formula)
    serialized = tree.serialize()
    click.echo(serialized)
    reloaded = load(serialized)
    logger.debug(f"Reloaded {expression!r} from {len(serialized.split())} tokens")
    click.echo(reloaded.pretty_print_inline())


if __name__ == "__main__":
    main()
