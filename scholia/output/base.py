"""Abstract base class for output formatters."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Sequence

from scholia.config import ScholiaConfig
from scholia.models import Document


class OutputFormatter(ABC):
    """Abstract base class for output formatters."""

    @property
    @abstractmethod
    def extension(self) -> str:
        """File extension of written files, including the dot."""
        pass

    @abstractmethod
    def format_document(self, document: Document) -> str:
        """Format a single document.

        Args:
            document: Document to format

        Returns:
            Formatted string representation of the document
        """
        pass

    @abstractmethod
    def write(
        self,
        documents: Sequence[Document],
        output_dir: str,
        config: ScholiaConfig,
    ) -> List[str]:
        """Format documents and write them under `output_dir`.

        Args:
            documents: Documents in output order
            output_dir: Directory to write to
            config: Configuration (output file name, multi-file mode, project)

        Returns:
            Paths of the written files
        """
        pass

    def output_name(self, config: ScholiaConfig) -> str:
        """Name of the combined output file, with this formatter's extension."""
        return Path(config.output_file).with_suffix(self.extension).name

    @staticmethod
    def document_stem(document: Document) -> str:
        """File stem for a document written on its own."""
        return document.namespace or Path(document.filename).stem

    def document_stems(self, documents: Sequence[Document]) -> List[str]:
        """File stems for documents written one per file.

        Repeated stems are numbered in input order (`a.core`, `a.core-2`) so
        that no document overwrites another.
        """
        seen: Dict[str, int] = {}
        stems = []
        for document in documents:
            stem = self.document_stem(document)
            seen[stem] = seen.get(stem, 0) + 1
            stems.append(stem if seen[stem] == 1 else f"{stem}-{seen[stem]}")
        return stems

    @staticmethod
    def _write_file(path: Path, content: str) -> str:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return str(path)
