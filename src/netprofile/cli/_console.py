"""Console output helpers shared by CLI commands."""

from __future__ import annotations

import logging

import click

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def info(message: str) -> None:
    click.echo(message)


def success(message: str) -> None:
    click.secho(message, fg="green")


def error(message: str) -> None:
    click.secho(message, fg="red", err=True)


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Attach a single stream handler to the ``netprofile`` logger."""

    logger = logging.getLogger("netprofile")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return logger


__all__ = ["error", "info", "setup_logging", "success"]
