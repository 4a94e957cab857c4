"""Command-line interface for running and checking BlockScript files."""

import json
import logging
import sys

import click

from blockscript import __version__
from blockscript.config import InterpreterConfig
from blockscript.examples import DEFAULT_SCRIPT
from blockscript.exceptions.core import BlockScriptError
from blockscript.execution.renderers import TextRenderer
from blockscript.interpreter import Interpreter
from blockscript.parsing.parser import ParseErrorCommand
from blockscript.sources import TextSource

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Send package logs to stderr, DEBUG when verbose and WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )


@click.group()
@click.version_option(version=__version__, prog_name="blockscript")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="TOML file with interpreter settings.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: str | None) -> None:
    """blockscript: interpret block layout scripts."""
    configure_logging(verbose)
    try:
        config = (
            InterpreterConfig.from_toml(config_path)
            if config_path
            else InterpreterConfig()
        )
    except BlockScriptError as e:
        raise click.ClickException(str(e)) from e
    ctx.obj = Interpreter(config)


@cli.command()
@click.argument("script", type=click.File("r", encoding="utf-8-sig"))
@click.option("--json", "json_output", is_flag=True, help="Print events as JSON lines.")
@click.pass_obj
def run(interpreter: Interpreter, script, json_output: bool) -> None:
    """Interpret SCRIPT (use - for stdin) and print its draw events."""
    source = TextSource(script.read())
    if json_output:
        for event in interpreter.execute(source):
            click.echo(json.dumps(event.to_dict()))
    else:
        interpreter.run(source, TextRenderer(click.echo))


@cli.command()
@click.argument("script", type=click.File("r", encoding="utf-8-sig"))
@click.pass_context
def check(ctx: click.Context, script) -> None:
    """Report every diagnostic in SCRIPT with its line number."""
    problems = 0
    interpreter: Interpreter = ctx.obj
    for line in interpreter.lines(TextSource(script.read())):
        for command in line.commands:
            if isinstance(command, ParseErrorCommand):
                click.echo(f"{line.number}: {command.message}")
                problems += 1

    if problems:
        ctx.exit(1)
    click.echo("OK")


@cli.command()
def example() -> None:
    """Print the bundled example script."""
    click.echo(DEFAULT_SCRIPT, nl=False)
