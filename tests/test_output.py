from __future__ import annotations

import json
from pathlib import Path

import yaml
from markdown_it import MarkdownIt

from scholia import ParseOptions, ScholiaConfig, parse
from scholia.models import Document, Section, SectionType
from scholia.output import JsonFormatter, MarkdownFormatter, create_formatter
from scholia.output.markdown_formatter import anchor

SOURCE = "\n".join(
    [
        '(ns demo.core "Demo namespace.")',
        "",
        ";; # Intro",
        "",
        ";; Adds things.",
        "(defn add",
        '  "Adds two numbers."',
        "  [a b]",
        "  ;; plain addition",
        "  (+ a b))",
        "",
    ]
)


def _document(source: str = SOURCE, filename: str = "demo/core.clj") -> Document:
    lifting = ParseOptions(lift_inline_comments=True, exclude_lifted_comments=True)
    doc = parse(source, lifting)
    return Document(
        filename=filename,
        sections=doc.sections,
        namespace=doc.namespace,
        raw_text=source,
    )


def _frontmatter(text: str) -> dict:
    assert text.startswith("---\n")
    block = text.split("---\n")[1]
    return yaml.safe_load(block)


def test_code_section_renders_doc_then_fence() -> None:
    section = Section(type=SectionType.CODE, raw="(def x 1)", docstring="The x.")
    rendered = MarkdownFormatter().format_section(section)
    assert rendered == "The x.\n\n```clojure\n(def x 1)\n```"


def test_comment_section_renders_as_prose() -> None:
    section = Section(type=SectionType.COMMENT, raw="# Heading", docstring="# Heading")
    assert MarkdownFormatter().format_section(section) == "# Heading"


def test_fence_grows_past_backticks_in_code() -> None:
    section = Section(type=SectionType.CODE, raw='(def s "```")')
    rendered = MarkdownFormatter().format_section(section)
    assert rendered.startswith("````clojure\n")
    assert rendered.endswith("\n````")


def test_markdown_code_blocks_match_code_sections() -> None:
    document = _document()
    text = MarkdownFormatter().format_to_string([document], ScholiaConfig())

    fences = [t for t in MarkdownIt().parse(text) if t.type == "fence"]
    assert [t.info for t in fences] == ["clojure"] * len(document.code_sections)
    assert [t.content for t in fences] == [s.raw + "\n" for s in document.code_sections]
    assert "Adds two numbers.\n\nAdds things.\n\nplain addition" in text


def test_uber_file_has_frontmatter_and_toc(tmp_path: Path) -> None:
    config = ScholiaConfig(project_name="demo", project_version="0.1.0")
    paths = MarkdownFormatter().write([_document()], str(tmp_path), config)

    assert paths == [str(tmp_path / "uberdoc.md")]
    text = (tmp_path / "uberdoc.md").read_text(encoding="utf-8")
    assert _frontmatter(text) == {
        "name": "demo",
        "version": "0.1.0",
        "namespaces": ["demo.core"],
    }
    assert "- [demo.core](#democore)" in text
    assert "# demo.core" in text


def test_uber_file_name_takes_formatter_extension(tmp_path: Path) -> None:
    config = ScholiaConfig(output_file="api.txt")
    paths = MarkdownFormatter().write([_document()], str(tmp_path), config)
    assert paths == [str(tmp_path / "api.md")]


def test_multi_file_output(tmp_path: Path) -> None:
    first = _document()
    second = _document("(ns demo.util)\n(def y 2)\n", "demo/util.clj")
    config = ScholiaConfig(multi_file=True, project_name="demo")

    paths = MarkdownFormatter().write([first, second], str(tmp_path), config)

    assert paths == [
        str(tmp_path / "demo.core.md"),
        str(tmp_path / "demo.util.md"),
        str(tmp_path / "toc.md"),
    ]
    toc = (tmp_path / "toc.md").read_text(encoding="utf-8")
    assert "- [demo.core](demo.core.md)" in toc
    assert "- [demo.util](demo.util.md)" in toc

    page = (tmp_path / "demo.util.md").read_text(encoding="utf-8")
    assert _frontmatter(page) == {"name": "demo", "namespace": "demo.util"}
    assert "[toc](toc.md)" in page


def test_multi_file_numbers_repeated_namespaces(tmp_path: Path) -> None:
    first = _document()
    second = _document("(ns demo.core)\n(def y 2)\n", "other/core.clj")
    config = ScholiaConfig(multi_file=True)

    paths = MarkdownFormatter().write([first, second], str(tmp_path), config)

    assert paths[:2] == [str(tmp_path / "demo.core.md"), str(tmp_path / "demo.core-2.md")]
    assert "(def y 2)" in (tmp_path / "demo.core-2.md").read_text(encoding="utf-8")
    assert "(def y 2)" not in (tmp_path / "demo.core.md").read_text(encoding="utf-8")
    assert "(demo.core-2.md)" in (tmp_path / "toc.md").read_text(encoding="utf-8")

    json_paths = JsonFormatter().write([first, second], str(tmp_path / "json"), config)
    assert [Path(p).name for p in json_paths] == ["demo.core.json", "demo.core-2.json"]


def test_document_without_namespace_uses_file_stem(tmp_path: Path) -> None:
    document = _document("(def x 1)\n", "scripts/build.clj")
    paths = MarkdownFormatter().write(
        [document], str(tmp_path), ScholiaConfig(multi_file=True)
    )
    assert str(tmp_path / "build.md") in paths


def test_json_output(tmp_path: Path) -> None:
    config = ScholiaConfig(output_format="json", project_name="demo")
    formatter = create_formatter(config.output_format)
    assert isinstance(formatter, JsonFormatter)

    paths = formatter.write([_document()], str(tmp_path), config)
    assert paths == [str(tmp_path / "uberdoc.json")]

    payload = json.loads((tmp_path / "uberdoc.json").read_text(encoding="utf-8"))
    assert payload["project"]["name"] == "demo"
    document = payload["documents"][0]
    assert document["namespace"] == "demo.core"
    assert [s["type"] for s in document["sections"]] == ["code", "comment", "code"]


def test_anchor() -> None:
    assert anchor("demo.core") == "democore"
    assert anchor("My Project") == "my-project"
