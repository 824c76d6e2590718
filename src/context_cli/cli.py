"""Command line entry point.

Usage::

    context notes.md docs/index.html
    context -v --json notes.md
"""

from __future__ import annotations

import json
import logging
import sys

import click

from context_cli.config import load_settings
from context_cli.dispatch import BatchResult, Dispatcher
from context_cli.fingerprint import fingerprint, warn_about_unknown

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int | str) -> logging.Logger:
    """Attach a single stderr handler to the package logger."""
    logger = logging.getLogger("context_cli")
    logger.setLevel(level)
    # Reset only this logger's handlers so repeated invocations don't stack
    logger.handlers = []

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    logger.addHandler(handler)
    return logger


def _echo_text(batch: BatchResult) -> None:
    for result in batch.results:
        document = result.document
        if document is None:
            click.echo(f"- {result.target.user_input}: {result.target.kind.value} (no content extracted)")
            continue
        title = document.frontmatter.title if document.frontmatter else None
        parts = [
            f"frontmatter: {'yes' if document.has_frontmatter else 'no'}",
            f"prose hash: {document.prose.hash:016x}",
        ]
        if title:
            parts.insert(0, f"title: {title}")
        click.echo(f"- {result.target.user_input}: {', '.join(parts)}")

    for failure in batch.failures:
        click.echo(f"! {failure.target.user_input}: {failure.error}", err=True)


@click.command(name="context")
@click.option("-v", "--verbose", is_flag=True, help="Show more verbose output")
@click.option("--json", "force_json", is_flag=True, help="Force output to JSON format")
@click.argument("targets", nargs=-1)
@click.version_option(package_name="context-cli")
def main(verbose: bool, force_json: bool, targets: tuple[str, ...]) -> None:
    """Give context on the TARGETS passed in (markdown and HTML files)."""
    settings = load_settings()
    setup_logging(logging.DEBUG if verbose else settings.log_level)

    if len(targets) > 1:
        click.echo(f"Context CLI: processing {len(targets)} targets", err=True)
    else:
        click.echo("Context CLI", err=True)
    click.echo("-----------------------------------", err=True)

    fingerprints = [fingerprint(t) for t in targets]
    warn_about_unknown(fingerprints)
    batch = Dispatcher().process(fingerprints)

    if force_json or settings.json_output:
        click.echo(json.dumps(batch.to_dict(), indent=2, default=str))
    else:
        _echo_text(batch)

    if not batch.ok:
        sys.exit(1)
