"""Logging setup for the command line entry point."""

from __future__ import annotations

import logging

import click

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


class ClickEchoHandler(logging.Handler):
    """Writes records through ``click.echo`` to whatever stderr is current."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def configure_logging(verbose: bool = False) -> None:
    """Send ``stockbook`` log records to stderr.

    WARNING and above by default, everything with ``verbose``. Calling
    it again only adjusts the level.
    """
    logger = logging.getLogger("stockbook")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, ClickEchoHandler) for h in logger.handlers):
        handler = ClickEchoHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
