"""Logging utilities for word search generation."""

import logging


def configure_logging(level: int = logging.WARNING) -> None:
    """
    Configure root logging with a compact formatter.

    Attempt failures are logged at WARNING, so the default level shows why a
    retry happened without the per-cell repair detail.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    ))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
