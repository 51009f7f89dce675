"""Parser factory for Scholia."""

from pathlib import Path
from typing import Dict, Type, Optional, List, Union

from scholia.parsers.base import SourceParser
from scholia.parsers.clojure_parser import ClojureParser
from scholia.exceptions import UnsupportedFileTypeError


class ParserFactory:
    """Factory for creating source parsers based on file type."""

    _parsers: Dict[str, Type[SourceParser]] = {}
    _initialized: bool = False

    @classmethod
    def _ensure_initialized(cls) -> None:
        """Ensure default parsers are registered."""
        if not cls._initialized:
            cls._register_defaults()
            cls._initialized = True

    @classmethod
    def _register_defaults(cls) -> None:
        """Register default parsers."""
        for ext in ClojureParser().supported_extensions():
            cls._parsers[ext.lower()] = ClojureParser

    @classmethod
    def register(cls, extension: str, parser_class: Type[SourceParser]) -> None:
        """Register a parser class for a file extension.

        Args:
            extension: File extension (e.g., '.edn')
            parser_class: Parser class to use for this extension
        """
        cls._ensure_initialized()
        cls._parsers[extension.lower()] = parser_class

    @classmethod
    def unregister(cls, extension: str) -> None:
        """Unregister a parser for a file extension.

        Args:
            extension: File extension to unregister
        """
        cls._ensure_initialized()
        ext_lower = extension.lower()
        if ext_lower in cls._parsers:
            del cls._parsers[ext_lower]

    @classmethod
    def create(cls, file_path: Union[str, Path]) -> SourceParser:
        """Create a parser for the given file.

        Args:
            file_path: Path to the file to parse

        Returns:
            Appropriate SourceParser instance

        Raises:
            UnsupportedFileTypeError: If no parser is registered for the file type
        """
        cls._ensure_initialized()

        path = Path(file_path)
        extension = path.suffix.lower()

        if extension not in cls._parsers:
            raise UnsupportedFileTypeError(
                extension or path.name,
                supported_types=list(cls._parsers.keys()),
            )

        return cls._parsers[extension]()

    @classmethod
    def get_supported_extensions(cls) -> List[str]:
        """Get list of all supported file extensions."""
        cls._ensure_initialized()
        return list(cls._parsers.keys())

    @classmethod
    def is_supported(cls, file_path: Union[str, Path]) -> bool:
        """Check if a file type is supported."""
        cls._ensure_initialized()
        path = Path(file_path)
        return path.suffix.lower() in cls._parsers

    @classmethod
    def get_parser_class(cls, extension: str) -> Optional[Type[SourceParser]]:
        """Get the parser class for a file extension, or None if not found."""
        cls._ensure_initialized()
        return cls._parsers.get(extension.lower())

    @classmethod
    def reset(cls) -> None:
        """Reset factory to default state (useful for testing)."""
        cls._parsers.clear()
        cls._initialized = False
