"""
Command-line front end for shuntyard.

    shuntyard convert "2+3*4"     # print infix and postfix tokens
    shuntyard eval "2+3*4"        # ...and the result
    shunt "2+3*4"                 # same as `shuntyard convert`
    shunteval "2+3*4"             # same as `shuntyard eval`

Errors are printed to stderr and the process exits with status 1.

Author: xwest
"""

import logging
from typing import List

import click
from rich.console import Console
from rich.markup import escape

from . import __version__
from .lexer import Token, tokenize
from .converter import convert
from .evaluator import evaluate
from .errors import ShuntingError
from .formatting import format_tokens

logger = logging.getLogger(__name__)

console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)

# Expressions such as "-3+5" start with '-' and must not be read as options
EXPRESSION_CONTEXT = {"ignore_unknown_options": True}


def _configure_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger("shuntyard").setLevel(level)


def _report(error: ShuntingError):
    logger.debug("pipeline failed with %s", type(error).__name__)
    err_console.print(f"[bold red]{escape(str(error))}[/bold red]")
    raise SystemExit(1)


def _shunt(expression: str, quiet: bool = False) -> List[Token]:
    """Lex and convert, printing both token sequences unless quiet."""
    infix = tokenize(expression)
    logger.debug("lexed %d tokens from %r", len(infix), expression)
    if not quiet:
        console.print(f"input:  {format_tokens(infix)}")

    postfix = convert(infix)
    logger.debug("converted to %d postfix tokens", len(postfix))
    if not quiet:
        console.print(f"output: {format_tokens(postfix)}")
    return postfix


def run_convert(expression: str):
    try:
        _shunt(expression)
    except ShuntingError as e:
        _report(e)


def run_eval(expression: str, quiet: bool = False):
    try:
        postfix = _shunt(expression, quiet=quiet)
        result = evaluate(postfix)
    except ShuntingError as e:
        _report(e)

    logger.debug("evaluated to %d", result)
    if quiet:
        console.print(str(result))
    else:
        console.print(f"result: {result}")


@click.group()
@click.version_option(__version__, prog_name="shuntyard")
@click.option("--verbose", "-v", is_flag=True, help="Log each pipeline stage.")
def cli(verbose: bool):
    """Convert infix arithmetic to postfix and evaluate it."""
    _configure_logging(verbose)


@cli.command("convert", context_settings=EXPRESSION_CONTEXT)
@click.argument("expression")
def convert_command(expression: str):
    """Print the infix and postfix token sequences of EXPRESSION."""
    run_convert(expression)


@cli.command("eval", context_settings=EXPRESSION_CONTEXT)
@click.option("--quiet", "-q", is_flag=True, help="Print only the result.")
@click.argument("expression")
def eval_command(expression: str, quiet: bool):
    """Convert EXPRESSION to postfix and evaluate it."""
    run_eval(expression, quiet=quiet)


@click.command("shunt", context_settings=EXPRESSION_CONTEXT)
@click.argument("expression")
def shunt_command(expression: str):
    """Print the infix and postfix token sequences of EXPRESSION."""
    _configure_logging(False)
    run_convert(expression)


@click.command("shunteval", context_settings=EXPRESSION_CONTEXT)
@click.argument("expression")
def shunteval_command(expression: str):
    """Convert EXPRESSION to postfix and evaluate it."""
    _configure_logging(False)
    run_eval(expression)


def main():
    cli()


def shunt_main():
    shunt_command()


def shunteval_main():
    shunteval_command()


if __name__ == "__main__":
    main()
