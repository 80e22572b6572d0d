"""Shared test fixtures."""

from pathlib import Path
import sys

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from textsearch.highlight import Marker  # noqa: E402
from textsearch.posting import InvertedIndex  # noqa: E402
from textsearch.search_cli import build_sample_index  # noqa: E402


@pytest.fixture
def plain_marker() -> Marker:
    """Readable marker so assertions don't need escape codes."""
    return Marker(start="[[", end="]]")


@pytest.fixture
def sample_index() -> InvertedIndex:
    return build_sample_index()


@pytest.fixture
def plain_index(plain_marker) -> InvertedIndex:
    return build_sample_index(plain_marker)
