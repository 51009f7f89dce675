"""Abstract base class for source parsers."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional

from scholia.config import ParseOptions
from scholia.exceptions import ScholiaParseError, ScholiaSyntaxError
from scholia.models import Document


class SourceParser(ABC):
    """Abstract base class for source parsers."""

    @abstractmethod
    def parse_text(
        self,
        text: str,
        options: Optional[ParseOptions] = None,
        filename: str = "<string>",
    ) -> Document:
        """Parse source text into a Document model.

        Args:
            text: Source text
            options: Parse flags
            filename: Name recorded on the document

        Returns:
            Parsed Document model

        Raises:
            ScholiaSyntaxError: If the text cannot be read
        """
        pass

    @abstractmethod
    def supported_extensions(self) -> List[str]:
        """Return list of supported file extensions.

        Returns:
            List of extensions like ['.clj', '.cljs']
        """
        pass

    def parse(self, file_path: Path, options: Optional[ParseOptions] = None) -> Document:
        """Parse a source file into a Document model.

        Args:
            file_path: Path to the source file
            options: Parse flags

        Returns:
            Parsed Document model

        Raises:
            ScholiaParseError: If the file cannot be read
            ScholiaSyntaxError: If the file cannot be parsed, naming the file
        """
        file_path = Path(file_path)

        try:
            content = file_path.read_text(encoding="utf-8-sig")
        except UnicodeDecodeError as e:
            raise ScholiaParseError(
                f"Source file is not valid UTF-8: {e}",
                file_path=str(file_path),
            )
        except OSError as e:
            raise ScholiaParseError(
                f"Failed to read source file: {e}",
                file_path=str(file_path),
            )

        try:
            return self.parse_text(content, options=options, filename=str(file_path))
        except ScholiaSyntaxError as e:
            raise e.with_file(str(file_path)) from e

    def supports(self, file_extension: str) -> bool:
        """Check if this parser supports the given file extension.

        Args:
            file_extension: File extension including the dot (e.g., '.clj')

        Returns:
            True if supported, False otherwise
        """
        return file_extension.lower() in [ext.lower() for ext in self.supported_extensions()]
