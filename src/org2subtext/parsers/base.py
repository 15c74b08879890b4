#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2subtext/parsers/base.py
"""Base classes for document parsers.

This module defines the abstract base class that document parsers inherit
from. The BaseParser provides a consistent interface for turning source
text into the org2subtext AST (Abstract Syntax Tree).

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Any, Union

from org2subtext.ast import Document
from org2subtext.exceptions import FileAccessError, FileNotFoundError, InvalidOptionsError, ParsingError
from org2subtext.options.base import BaseParserOptions

logger = logging.getLogger(__name__)


class BaseParser(ABC):
    """Abstract base class for all document parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Parameters
        ----------
        options : BaseParserOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        parser_name : str
            Name of the parser (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: Union[str, Path, IO[bytes], bytes]) -> Document:
        """Parse the input document into an AST.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], or bytes
            The input document to parse. Can be:
            - File path (str or Path)
            - Document text (str)
            - File-like object
            - Raw document bytes

        Returns
        -------
        Document
            AST Document node representing the parsed document structure

        Raises
        ------
        ParsingError
            If parsing fails
        FileError
            If the input file cannot be read
        DependencyError
            If required dependencies are not installed

        """
        raise NotImplementedError

    @abstractmethod
    def extract_metadata(self, document: Any) -> dict[str, Any]:
        """Extract document-level metadata from the parsed source."""
        raise NotImplementedError

    @staticmethod
    def _decode(data: bytes) -> str:
        try:
            return data.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise ParsingError("Input is not valid UTF-8", parsing_stage="decode", original_error=e) from e

    @staticmethod
    def _read_file(path: Path) -> bytes:
        if not path.exists():
            raise FileNotFoundError(str(path))
        try:
            return path.read_bytes()
        except OSError as e:
            raise FileAccessError(str(path), original_error=e) from e

    @classmethod
    def _load_text_content(cls, input_data: Union[str, Path, IO[bytes], bytes]) -> str:
        """Load text from the supported input types.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], or bytes
            Input data to load. A ``str`` is treated as a file path when it
            names an existing file and as document text otherwise.

        Returns
        -------
        str
            Document text

        Raises
        ------
        FileNotFoundError
            If a Path is given that does not exist
        FileAccessError
            If the file cannot be read
        ParsingError
            If the bytes are not valid UTF-8

        """
        if isinstance(input_data, bytes):
            return cls._decode(input_data)
        elif isinstance(input_data, Path):
            return cls._decode(cls._read_file(input_data))
        elif isinstance(input_data, str):
            # Could be file path or content
            # Check length first - calling path.exists() on very long strings raises OSError
            if len(input_data) <= 260 and "\n" not in input_data:
                try:
                    path = Path(input_data)
                    if path.is_file():
                        return cls._decode(cls._read_file(path))
                except OSError:
                    # Path too long or invalid - treat as content
                    pass
            return input_data
        else:
            data = input_data.read()
            if isinstance(data, str):
                return data
            return cls._decode(data)
