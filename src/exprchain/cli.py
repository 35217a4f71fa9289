"""
Command-line interface for exprchain.

Provides commands for:
- Building a chain from tokens and rendering it
- Loading a serialized chain
- Evaluating a chain as a row filter over a CSV file
"""

import logging
import sys
from pathlib import Path

import click

from exprchain import __version__
from exprchain.chain.errors import ExpressionChainError
from exprchain.chain.render import to_string
from exprchain.config import get_config

logger = logging.getLogger("exprchain")


def _render(tree) -> str:
    """Render with the operator symbols from the environment config."""
    config = get_config()
    return to_string(tree, and_symbol=config.and_symbol, or_symbol=config.or_symbol)


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def main(verbose: bool) -> None:
    """exprchain - fluent AND/OR condition trees."""
    logging.basicConfig(
        level=get_config().log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


@main.command()
@click.argument("tokens", nargs=-1, required=True)
@click.option("--json", "as_json", is_flag=True, help="Print the serialized tree")
@click.option("--output", "-o", default=None, help="Write the output to a file")
def render(tokens: tuple[str, ...], as_json: bool, output: str) -> None:
    """Build a chain from TOKENS (e.g. A and B or C) and render it."""
    from exprchain.chain.parse import from_tokens
    from exprchain.chain.schema import to_json

    try:
        tree = from_tokens(tokens)
    except ExpressionChainError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    text = to_json(tree, indent=2) if as_json else _render(tree)
    click.echo(text)

    if output:
        Path(output).write_text(text + "\n")
        logger.info(f"Saved chain to {output}")


@main.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
def load(path: str) -> None:
    """Load a serialized chain from PATH and render it."""
    from exprchain.chain.schema import from_json

    try:
        tree = from_json(Path(path).read_text())
    except ExpressionChainError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(_render(tree))


@main.command()
@click.argument("csv_path", type=click.Path(exists=True, dir_okay=False))
@click.argument("tokens", nargs=-1, required=True)
@click.option("--output", "-o", default=None, help="Write matching rows to a CSV file")
def evaluate(csv_path: str, tokens: tuple[str, ...], output: str) -> None:
    """Filter rows of CSV_PATH with the chain built from TOKENS.

    Each value token names a column; non-zero / true cells match.
    """
    import pandas as pd

    from exprchain.chain.compiler import evaluate_tree
    from exprchain.chain.parse import from_tokens

    data = pd.read_csv(csv_path)

    try:
        tree = from_tokens(tokens)
        mask = evaluate_tree(tree, data)
    except (ExpressionChainError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"{_render(tree)}: {int(mask.sum())}/{len(data)} rows matched")

    if output:
        data[mask].to_csv(output, index=False)
        click.echo(f"Matching rows saved to {output}")


if __name__ == "__main__":
    main()
