"""Parsing several source files at once."""

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional, Sequence, Union

from scholia.config import ParseOptions
from scholia.models import Document
from scholia.parsers.factory import ParserFactory

logger = logging.getLogger(__name__)


def parse_file(
    file_path: Union[str, Path], options: Optional[ParseOptions] = None
) -> Document:
    """Parse one source file with the parser registered for its extension."""
    parser = ParserFactory.create(file_path)
    return parser.parse(Path(file_path), options=options)


def parse_files(
    file_paths: Sequence[Union[str, Path]],
    options: Optional[ParseOptions] = None,
    max_workers: int = 1,
) -> List[Document]:
    """Parse source files, optionally on a thread pool.

    Each file is parsed independently with the same immutable options.
    Documents come back in input order. The first failure propagates.

    Args:
        file_paths: Source files
        options: Parse flags
        max_workers: Threads to use; 1 parses sequentially

    Returns:
        One document per file
    """
    if max_workers <= 1 or len(file_paths) <= 1:
        return [parse_file(path, options) for path in file_paths]

    logger.debug(f"Parsing {len(file_paths)} files on {max_workers} threads")
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        return list(pool.map(lambda path: parse_file(path, options), file_paths))
