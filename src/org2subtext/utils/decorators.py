#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2subtext/utils/decorators.py
"""Utility decorators for org2subtext parsers and link resolvers.

This module provides reusable decorators that centralize dependency
checking and timing so each component does not repeat the same
try/except ImportError and stopwatch code.

"""

from __future__ import annotations

import importlib
import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Generator, List, Tuple

from org2subtext.exceptions import DependencyError


def requires_dependencies(converter_name: str, packages: List[Tuple[str, str]]) -> Callable:
    """Check required dependencies before method execution.

    Parameters
    ----------
    converter_name : str
        Name of the component (e.g., "org", "org-roam"). This appears in
        error messages to help users identify what needs the dependency.
    packages : list of tuple
        Required packages as (install_name, import_name) tuples.

    Returns
    -------
    Callable
        Decorated method that checks dependencies before execution

    Raises
    ------
    DependencyError
        If any required package cannot be imported

    Examples
    --------
        >>> @requires_dependencies("org", [("orgparse", "orgparse")])
        ... def parse(self, input_data):
        ...     import orgparse

    """

    def decorator(method: Callable) -> Callable:
        @wraps(method)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            missing = []
            original_error = None

            for install_name, import_name in packages:
                try:
                    importlib.import_module(import_name)
                except ImportError as e:
                    missing.append((install_name, ""))
                    if original_error is None:
                        original_error = e

            if missing:
                raise DependencyError(
                    converter_name=converter_name,
                    missing_packages=missing,
                    original_import_error=original_error,
                ) from original_error

            return method(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Time a block and log the elapsed time at DEBUG level.

    Parameters
    ----------
    logger : logging.Logger
        Logger instance to use for DEBUG messages
    operation : str
        Description of the operation being timed (e.g., "Parsing (org)")

    Examples
    --------
        >>> with debug_timer(logger, "Rendering (subtext)"):
        ...     text = renderer.render_to_string(doc)

    """
    if not logger.isEnabledFor(logging.DEBUG):
        yield
        return

    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start
        logger.debug("%s completed in %.2fs", operation, elapsed)
