#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2subtext/renderers/base.py
"""Base classes for AST renderers.

This module defines the abstract base class that AST renderers inherit
from. The BaseRenderer provides a consistent interface for converting the
org2subtext AST into an output format.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from org2subtext.ast import Document
from org2subtext.exceptions import InvalidOptionsError, OutputWriteError
from org2subtext.options.base import BaseRendererOptions


class BaseRenderer(ABC):
    """Abstract base class for all AST renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render(self, doc: Document, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the AST to the specified output.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        output : str, Path, IO[bytes] or IO[str]
            Output destination (file path or file-like object)

        Raises
        ------
        RenderingError
            If rendering fails
        OutputWriteError
            If output cannot be written

        """
        pass

    def render_to_string(self, doc: Document) -> str:
        """Render the AST to a string (if applicable).

        Parameters
        ----------
        doc : Document
            AST Document node to render

        Returns
        -------
        str
            Rendered document as a string

        Raises
        ------
        NotImplementedError
            If the renderer does not support string output

        """
        raise NotImplementedError(f"{self.__class__.__name__} does not support rendering to a string.")

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write text output to file or IO stream.

        Parameters
        ----------
        text : str
            Rendered text to write
        output : str, Path, IO[bytes], or IO[str]
            Output destination. Can be:
            - File path (str or Path), written as UTF-8
            - File-like object in binary mode (IO[bytes])
            - File-like object in text mode (IO[str])

        Raises
        ------
        OutputWriteError
            If output cannot be written

        Examples
        --------
            >>> from io import StringIO
            >>> buffer = StringIO()
            >>> BaseRenderer.write_text_output("# Hello\\n", buffer)
            >>> buffer.getvalue()
            '# Hello\\n'

        """
        if isinstance(output, (str, Path)):
            path = Path(output)
            try:
                path.write_text(text, encoding="utf-8")
            except OSError as e:
                raise OutputWriteError(str(path), original_error=e) from e
            return

        try:
            output.write(text)  # type: ignore[arg-type]
        except TypeError:
            output.write(text.encode("utf-8"))  # type: ignore[arg-type]
