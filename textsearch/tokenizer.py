"""
Tokenizer for the in-memory search index.
Splits text into maximal runs of alphanumeric characters.
Also extracts visible text from HTML documents (BeautifulSoup + lxml) so
HTML files can be indexed like plain text.
"""

import re
import warnings
from pathlib import Path
from typing import Iterator

from bs4 import BeautifulSoup, XMLParsedAsHTMLWarning, MarkupResemblesLocatorWarning
warnings.filterwarnings("ignore", category=XMLParsedAsHTMLWarning)
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)

# Letters and digits of any script; "_" counts as a separator.
_WORD_RE = re.compile(r"[^\W_]+")


def iter_tokens(text: str) -> Iterator[str]:
    """
    Lazily yield word tokens in left-to-right order.
    No case normalization is done here; callers lowercase first if needed.
    """
    for match in _WORD_RE.finditer(text):
        yield match.group(0)


def tokenize(text: str) -> list[str]:
    """
    Break a string into words.

    >>> tokenize("This is\\nhedon's tokenize function.")
    ['This', 'is', 'hedon', 's', 'tokenize', 'function']
    """
    return list(iter_tokens(text))


def extract_text_from_html(html_content: str) -> str:
    """
    Extract visible text from HTML content, stripping tags and scripts.
    """
    soup = BeautifulSoup(html_content, "lxml")
    for element in soup(["script", "style"]):
        element.decompose()
    return soup.get_text(separator=" ", strip=True)


def read_text_file(filepath: Path) -> str:
    """
    Read a text file, handling common encodings.
    Tries utf-8, then cp1252; latin-1 maps every byte and is the last resort.
    """
    data = Path(filepath).read_bytes()
    for encoding in ("utf-8", "cp1252"):
        try:
            return data.decode(encoding)
        except UnicodeDecodeError:
            continue
    return data.decode("latin-1")
