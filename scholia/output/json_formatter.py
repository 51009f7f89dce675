"""JSON output formatter."""

import json
from pathlib import Path
from typing import List, Sequence

from scholia.config import ScholiaConfig
from scholia.models import Document
from scholia.output.base import OutputFormatter


class JsonFormatter(OutputFormatter):
    """Writes documents as JSON, for renderers outside this package."""

    def __init__(self, indent: int = 2) -> None:
        self._indent = indent

    @property
    def extension(self) -> str:
        return ".json"

    def format_document(self, document: Document) -> str:
        return json.dumps(document.to_dict(), indent=self._indent, ensure_ascii=False) + "\n"

    def write(
        self,
        documents: Sequence[Document],
        output_dir: str,
        config: ScholiaConfig,
    ) -> List[str]:
        out = Path(output_dir)

        if config.multi_file:
            return [
                self._write_file(out / f"{stem}{self.extension}", self.format_document(d))
                for d, stem in zip(documents, self.document_stems(documents))
            ]

        payload = {
            "project": config.project,
            "documents": [d.to_dict() for d in documents],
        }
        content = json.dumps(payload, indent=self._indent, ensure_ascii=False) + "\n"
        return [self._write_file(out / self.output_name(config), content)]
