# mathdocx/utils/logger.py
"""Logging helpers.

The library never installs handlers; applications configure ``logging``
themselves and get the ``mathdocx.*`` records.
"""

import logging


def get_logger(name: str) -> logging.Logger:
    """Return a standard library logger namespaced under ``mathdocx``.

    Args:
        name (str): Logger name, usually ``__name__``.

    Returns:
        logging.Logger: ``mathdocx.<name>`` unless already prefixed.
    """
    if not (name == "mathdocx" or name.startswith("mathdocx.")):
        name = f"mathdocx.{name}"
    return logging.getLogger(name)
