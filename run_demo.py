"""
Run the in-memory search demo.

Usage:
    python run_demo.py
    python run_demo.py --data docs/ Rust

Indexes three sample documents (or a directory given with --data) and prints
each query's matching documents with the query term highlighted.
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent))

from textsearch.search_cli import main


if __name__ == "__main__":
    main()
