"""
Document and inverted index data structures.

The index maps each lowercased term to the ids of the documents containing it,
in the order the documents were added, and keeps the original text of every
document so query results can be shown with the term highlighted.
"""

import logging
from collections.abc import Hashable
from dataclasses import dataclass
from typing import Iterator

from .highlight import PURPLE, Marker, highlight
from .tokenizer import iter_tokens

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Document:
    """
    An indexed document.
    - doc_id: caller-supplied identifier (int in the demo, any hashable works)
    - content: original text, case preserved
    """

    doc_id: Hashable
    content: str


class InvertedIndex:
    """
    Inverted index: map from term -> list of document ids.
    Postings are append-only and never deduplicated, so a document added twice
    under the same id shows up twice in query results.
    Not thread-safe; share an instance across threads only behind one lock.
    """

    def __init__(self, marker: Marker = PURPLE) -> None:
        self.marker = marker
        self._index: dict[str, list[Hashable]] = {}
        self._documents: dict[Hashable, Document] = {}

    def add(self, doc_id: Hashable, content: str) -> None:
        """
        Tokenize the lowercased content, append doc_id to each term's postings,
        then store the original content under doc_id.
        """
        if doc_id in self._documents:
            # Old postings stay in place and now point at the new text.
            logger.warning(
                "Document %r re-added; stored text replaced, earlier postings kept",
                doc_id,
            )
        count = 0
        for token in iter_tokens(content.lower()):
            if token not in self._index:
                self._index[token] = []
            self._index[token].append(doc_id)
            count += 1
        self._documents[doc_id] = Document(doc_id=doc_id, content=content)
        logger.debug("Indexed document %r (%d tokens)", doc_id, count)

    def query(self, term: str) -> list[str]:
        """
        Return the highlighted text of every document containing term, in
        postings order. An unknown term gives an empty list.
        """
        term_lower = term.lower()
        doc_ids = self._index.get(term_lower)
        if doc_ids is None:
            logger.debug("No postings for %r", term_lower)
            return []
        results: list[str] = []
        for doc_id in doc_ids:
            doc = self._documents.get(doc_id)
            if doc is None:
                continue
            results.append(highlight(term_lower, doc.content, self.marker))
        logger.debug("Query %r matched %d documents", term_lower, len(results))
        return results

    def get_postings(self, term: str) -> list[Hashable]:
        """Return a copy of the postings for term (lowercased), or empty list."""
        return list(self._index.get(term.lower(), []))

    def get_document(self, doc_id: Hashable) -> Document | None:
        return self._documents.get(doc_id)

    @property
    def num_documents(self) -> int:
        return len(self._documents)

    def tokens(self) -> Iterator[str]:
        """Iterate over all terms in the index."""
        return iter(self._index)

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, term: str) -> bool:
        return term.lower() in self._index
