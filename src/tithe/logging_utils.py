"""Logging helpers for tithe.

Modules create their own loggers with ``logging.getLogger(__name__)``. The CLI
calls ``configure_logging`` on every invocation; ``--verbose`` lowers the
package level to DEBUG so store and summary activity is echoed to stderr.
"""

import logging

import click

PACKAGE_LOGGER = "tithe"


class ClickEchoHandler(logging.Handler):
    """Write log records to the current stderr through click."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def configure_logging(verbose: bool = False) -> None:
    """Set the package log level and attach the stderr handler once."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if any(isinstance(handler, ClickEchoHandler) for handler in logger.handlers):
        return

    handler = ClickEchoHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(handler)
