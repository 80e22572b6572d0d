"""
Index builder: fills an in-memory inverted index from document files.
Supports .html/.htm (visible text), .json (with a "content" field) and .txt.
Documents get integer ids 0, 1, 2, ... in sorted path order.
"""

import json
import logging
from pathlib import Path
from urllib.parse import urlparse

from .posting import InvertedIndex
from .tokenizer import extract_text_from_html, read_text_file

logger = logging.getLogger(__name__)

DOCUMENT_SUFFIXES = (".html", ".htm", ".json", ".txt")


def _strip_fragment(url: str) -> str:
    """Remove URL fragment (#...) for doc mapping."""
    parsed = urlparse(url)
    if parsed.fragment:
        parsed = parsed._replace(fragment="")
    return parsed.geturl()


def _read_doc_content_and_url(filepath: Path) -> tuple[str, str | None]:
    """
    Read document text and URL from a file.
    - .json: returns (content, url with fragment stripped). url from "url" key.
    - .html/.htm: returns (visible text, None).
    - anything else: returns (raw text, None).
    """
    filepath = Path(filepath)
    suffix = filepath.suffix.lower()
    raw = read_text_file(filepath)
    if suffix == ".json":
        data = json.loads(raw)
        if not isinstance(data, dict) or not isinstance(data.get("content"), str):
            raise ValueError(f"JSON file has no 'content' field: {filepath}")
        url = data.get("url")
        if url is not None:
            if not isinstance(url, str):
                raise ValueError(f"JSON file has a non-string 'url' field: {filepath}")
            url = _strip_fragment(url)
        return data["content"], url
    if suffix in (".html", ".htm"):
        return extract_text_from_html(raw), None
    return raw, None


def read_document_file(filepath: Path) -> str:
    """Return the indexable text of a document file."""
    content, _url = _read_doc_content_and_url(filepath)
    return content


def build_index_from_directory(
    data_dir: Path,
    *,
    index: InvertedIndex | None = None,
) -> tuple[InvertedIndex, dict[int, str]]:
    """
    Build an inverted index from all document files in a directory (recursive).
    Files that cannot be read are logged and skipped.
    Returns (index, doc_id -> url or relative path).
    """
    data_dir = Path(data_dir)
    if not data_dir.is_dir():
        raise FileNotFoundError(f"Data directory not found: {data_dir}")
    if index is None:
        index = InvertedIndex()

    doc_files = sorted(
        (p for p in data_dir.rglob("*") if p.is_file() and p.suffix.lower() in DOCUMENT_SUFFIXES),
        key=lambda p: str(p),
    )

    doc_map: dict[int, str] = {}
    next_doc_id = 0
    for filepath in doc_files:
        try:
            content, url = _read_doc_content_and_url(filepath)
        except (OSError, ValueError) as e:
            logger.warning("Could not read %s: %s", filepath, e)
            continue

        doc_id = next_doc_id
        next_doc_id += 1
        doc_map[doc_id] = url if url is not None else filepath.relative_to(data_dir).as_posix()
        index.add(doc_id, content)

    logger.info("Indexed %d documents from %s (%d terms)", len(doc_map), data_dir, len(index))
    return index, doc_map
