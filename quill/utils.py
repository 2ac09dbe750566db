"""Shared helpers for the Quill toolbox."""
from __future__ import annotations

import logging
import os
import pathlib
from typing import Optional

LOGGER_NAME = "quill"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the ``quill`` namespace.

    The package logger owns the only handler, so module loggers created with
    ``get_logger(__name__)`` share its format and level.
    """
    package_logger = logging.getLogger(LOGGER_NAME)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "[%(levelname)s] %(name)s: %(message)s"
        )
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
        package_logger.setLevel(logging.INFO)

    if not name or name == LOGGER_NAME:
        return package_logger
    if not name.startswith(LOGGER_NAME + "."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def set_verbosity(verbose: bool) -> None:
    """Switch the package logger between INFO and DEBUG."""
    get_logger().setLevel(logging.DEBUG if verbose else logging.INFO)


def ensure_directory(path: str | os.PathLike[str]) -> pathlib.Path:
    """Create *path* if it does not already exist and return it as Path."""
    directory = pathlib.Path(path)
    directory.mkdir(parents=True, exist_ok=True)
    return directory


class QuillError(RuntimeError):
    """Base class for errors raised by the toolbox."""
