from __future__ import annotations

import sys

import click
import typer

from iplog.arguments import USAGE, parse_arguments
from iplog.errors import IplogError
from iplog.pipeline import run_analysis
from iplog.utils.logging import configure_logging, get_logger

app = typer.Typer(
    help="Count hits per IPv4 address in a plaintext access log.",
    add_completion=False,
)

log = get_logger(__name__)

PAUSE_PROMPT = "Press any key to exit..."
INTERRUPTED_EXIT_CODE = 130


def _pause() -> None:
    # no-op unless both stdin and stdout are terminals
    click.pause(PAUSE_PROMPT)


@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def analyze(ctx: typer.Context):
    """
    Filter a log by date range and subnet, then write per-address hit counts.

    Arguments are ``--flag value`` pairs:

        iplog --file-log access.log --file-output counts.txt
              --time-start 01.12.2023 --time-end 31.12.2023
              [--address-start 192.168.1.0 --address-mask 255.255.255.0]
              [--log-level INFO]
    """
    tokens = list(ctx.args)

    if not tokens:
        typer.echo(USAGE)
        _pause()
        return

    code = 0
    try:
        config = parse_arguments(tokens)
        configure_logging(config.log_level)
        run_analysis(config, echo=typer.echo)
    except IplogError as e:
        log.debug("Analysis failed", exc_info=True)
        typer.echo(f"Error: {e}", err=True)
        code = 1
    except KeyboardInterrupt:
        # click would turn this into "Aborted!" with exit code 1
        typer.echo("Interrupted by user.", err=True)
        raise typer.Exit(code=INTERRUPTED_EXIT_CODE)

    _pause()
    if code:
        raise typer.Exit(code=code)


def main() -> None:
    """Entry point for console_scripts."""
    configure_logging()
    try:
        app()
    except KeyboardInterrupt:
        # Graceful Ctrl+C handling
        typer.echo("Interrupted by user.", err=True)
        sys.exit(INTERRUPTED_EXIT_CODE)


if __name__ == "__main__":
    main()
