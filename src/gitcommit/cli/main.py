"""Main CLI interface for gitcommit."""

import logging
import sys
from typing import Tuple

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from gitcommit import __version__
from gitcommit.cli.app import App
from gitcommit.cli.config import (
    DEFAULT_LOG_LEVEL,
    LOG_LEVEL_ENVVAR,
    LOG_LEVELS,
    Config,
)
from gitcommit.cli.errors import EXIT_ERROR, UserError
from gitcommit.cli.messages import HELP_TEXT, format_success_message

LOGGER_NAME = "gitcommit"

console = Console()
err_console = Console(stderr=True)


def configure_logging(level: str) -> logging.Logger:
    """Build the gitcommit logger, writing through rich to stderr.

    Only the named logger is configured; the root logger is left alone.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = RichHandler(
        console=err_console,
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def _show_help(ctx: click.Context, param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    click.echo(HELP_TEXT, nl=False)
    ctx.exit()


# Parsing stops at the first positional so messages may start with "-".
@click.command(
    add_help_option=False, context_settings={"allow_interspersed_args": False}
)
@click.option(
    "-h",
    "--help",
    is_flag=True,
    expose_value=False,
    is_eager=True,
    callback=_show_help,
    help="Show this help message",
)
@click.version_option(
    __version__,
    "-v",
    "--version",
    prog_name="gitcommit",
    message="%(prog)s version %(version)s",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=DEFAULT_LOG_LEVEL,
    envvar=LOG_LEVEL_ENVVAR,
    show_default=True,
    help="Logging verbosity",
)
@click.argument("args", nargs=-1)
def main(args: Tuple[str, ...], log_level: str):
    """Create a Git commit with a custom author and committer date."""
    config = Config(args=list(args), log_level=log_level.upper())
    logger = configure_logging(config.log_level)

    try:
        config.validate_args()
        request = App(config, logger).run()
    except UserError as e:
        err_console.print(Text(str(e), style="red"), soft_wrap=True)
        sys.exit(EXIT_ERROR)

    console.print(
        Text(format_success_message(request.git_formatted_date), style="green"),
        soft_wrap=True,
    )


if __name__ == "__main__":
    main()
