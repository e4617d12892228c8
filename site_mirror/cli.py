# === FILE: site_mirror/cli.py ===
#!/usr/bin/env python3
"""
Command-line entry point for SiteMirror.

Usage:
  site-mirror [OPTIONS] STARTING_URL DESTINATION_DIR

Options:
  --config PATH       YAML/JSON config (timeouts, redirects, concurrency cap)
  --log-level LEVEL   Logging level (DEBUG, INFO, ...)
  --log-file PATH     Log file (stdout only if omitted)
  --log-format FORMAT Logging format string
  --version, -v       Show the SiteMirror version

Every archived page is reported as ``Downloaded: <url>``. If the crawl ends
with an error, the error is printed and the exit status is 1.

Example:
  site-mirror https://example.com/ ./mirror --log-level INFO
"""
import asyncio
import sys
from pathlib import Path
from typing import Optional, Sequence

import click

from site_mirror import __version__
from site_mirror.config import load_config
from site_mirror.crawler.models import ArchivedPage
from site_mirror.engine import start_mirror
from site_mirror.logger import DEFAULT_FORMAT, configure

CONTEXT_SETTINGS = dict(help_option_names=["--help"])
PROG_NAME = "site-mirror"


def print_error(message: str):
    click.echo(message)
    sys.exit(1)


def report_download(page: ArchivedPage) -> None:
    click.echo(f"Downloaded: {page.url}")


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='SiteMirror, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Path to a YAML or JSON config file.'
)
@click.option(
    '--log-level', 'log_level',
    default='WARNING', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Log file path (stdout only if omitted)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Format string for log records'
)
@click.argument('starting_url')
@click.argument('dest_dir', metavar='DESTINATION_DIR', type=click.Path(file_okay=False, path_type=Path))
def cli(config_path, log_level, log_file, log_format, starting_url, dest_dir):
    """Mirror STARTING_URL and every same-host page it links to into DESTINATION_DIR."""
    configure(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Failed to load config: {e}')

    result = asyncio.run(start_mirror(starting_url, dest_dir, cfg, progress=report_download))

    if not result.ok:
        print_error(str(result.error))


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Process entry point: usage errors go to stdout and exit with status 1."""
    try:
        exit_code = cli.main(args=argv, prog_name=PROG_NAME, standalone_mode=False)
    except click.UsageError as exc:
        if exc.ctx is not None:
            click.echo(exc.ctx.get_usage())
        else:
            click.echo(f'Usage: {PROG_NAME} [OPTIONS] STARTING_URL DESTINATION_DIR')
        click.echo(f'Error: {exc.format_message()}')
        sys.exit(1)
    except click.Abort:
        click.echo('Aborted!')
        sys.exit(1)
    sys.exit(exit_code or 0)


if __name__ == "__main__":
    main()
