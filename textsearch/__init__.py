"""In-memory keyword search package."""

from .highlight import Marker, PURPLE, highlight
from .posting import Document, InvertedIndex
from .index_builder import build_index_from_directory, read_document_file
from .tokenizer import tokenize, iter_tokens
