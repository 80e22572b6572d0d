"""
Highlighting of query-term occurrences in document text.

The term is matched as a literal, case-insensitive substring. Each match is
wrapped in a marker pair while keeping the original casing of the matched text.
"""

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class Marker:
    """
    Emphasis delimiters placed around each match.
    - start: sequence written before the matched text
    - end: sequence written after it
    """

    start: str
    end: str


# ANSI purple foreground, then reset.
PURPLE = Marker(start="\x1b[35m", end="\x1b[0m")


def highlight(term: str, content: str, marker: Marker = PURPLE) -> str:
    """
    Return a copy of content with every occurrence of term wrapped in marker.
    Metacharacters in term are escaped, so any string is a valid term.
    """
    if not term:
        return content
    pattern = re.compile(re.escape(term), re.IGNORECASE)
    return pattern.sub(lambda m: f"{marker.start}{m.group(0)}{marker.end}", content)
