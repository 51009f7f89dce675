"""Markdown output formatter."""

import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from scholia.config import ScholiaConfig
from scholia.models import Document, Section
from scholia.output.base import OutputFormatter

TOC_NAME = "toc"


def anchor(title: str) -> str:
    """GitHub-style heading anchor for `title`."""
    return re.sub(r"[^\w\- ]", "", title.lower()).replace(" ", "-")


class MarkdownFormatter(OutputFormatter):
    """Output formatter producing Markdown files with YAML frontmatter."""

    def __init__(self, language: str = "clojure") -> None:
        """Initialize the Markdown formatter.

        Args:
            language: Info string used on code fences
        """
        self._language = language

    @property
    def extension(self) -> str:
        return ".md"

    def format_section(self, section: Section) -> str:
        """Format one section: its doc text, then its code in a fence."""
        if section.is_comment:
            return section.raw

        parts = []
        doc = section.doc_text.strip()
        if doc:
            parts.append(doc)

        fence = "```"
        while fence in section.raw:
            fence += "`"
        parts.append(f"{fence}{self._language}\n{section.raw}\n{fence}")

        return "\n\n".join(parts)

    def format_document(self, document: Document) -> str:
        """Format a document as a level-one heading followed by its sections."""
        parts = [f"# {document.title}"]
        parts.extend(self.format_section(s) for s in document.sections)
        return "\n\n".join(parts) + "\n"

    def format_toc(
        self, documents: Sequence[Document], stems: Optional[Sequence[str]] = None
    ) -> str:
        """List of namespaces, linking to anchors or, given file stems, to files."""
        lines = ["## Namespaces", ""]
        for i, document in enumerate(documents):
            if stems is not None:
                target = f"{stems[i]}{self.extension}"
            else:
                target = f"#{anchor(document.title)}"
            lines.append(f"- [{document.title}]({target})")
        return "\n".join(lines) + "\n"

    def format_frontmatter(self, metadata: Dict[str, Any]) -> str:
        """YAML frontmatter block, skipping empty values."""
        values = {k: v for k, v in metadata.items() if v}
        if not values:
            return ""
        yaml_content = yaml.dump(
            values,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
        )
        return "\n".join(["---", yaml_content.rstrip(), "---", "", ""])

    def format_to_string(
        self, documents: Sequence[Document], config: ScholiaConfig
    ) -> str:
        """Format all documents as one Markdown text without writing it.

        Args:
            documents: Documents in output order
            config: Configuration carrying project metadata

        Returns:
            Formatted string
        """
        metadata = dict(config.project)
        metadata["namespaces"] = [d.title for d in documents]

        parts = [self.format_frontmatter(metadata) + self.format_toc(documents)]
        parts.extend(self.format_document(d) for d in documents)
        return "\n".join(parts)

    def write(
        self,
        documents: Sequence[Document],
        output_dir: str,
        config: ScholiaConfig,
    ) -> List[str]:
        """Write one combined file, or one file per namespace plus a TOC."""
        out = Path(output_dir)

        if not config.multi_file:
            path = out / self.output_name(config)
            return [self._write_file(path, self.format_to_string(documents, config))]

        stems = self.document_stems(documents)
        written = []
        for document, stem in zip(documents, stems):
            metadata = dict(config.project)
            metadata["namespace"] = document.title
            content = (
                self.format_frontmatter(metadata)
                + self.format_document(document)
                + f"\n[{TOC_NAME}]({TOC_NAME}{self.extension})\n"
            )
            path = out / f"{stem}{self.extension}"
            written.append(self._write_file(path, content))

        toc = self.format_frontmatter(dict(config.project)) + self.format_toc(documents, stems)
        written.append(self._write_file(out / f"{TOC_NAME}{self.extension}", toc))
        return written
