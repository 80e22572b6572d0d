import logging

from textsearch.posting import Document, InvertedIndex


def test_query_is_case_insensitive(sample_index):
    assert sample_index.query("RUST") == sample_index.query("rust")
    assert len(sample_index.query("Rust")) == 3


def test_unknown_term_returns_empty(sample_index):
    assert sample_index.query("python") == []
    assert sample_index.query("") == []


def test_multi_word_query_is_a_single_key(sample_index):
    assert sample_index.query("Rust is") == []


def test_end_to_end_rust(plain_index):
    assert plain_index.query("Rust") == [
        "[[Rust]] is safe and fast.",
        "[[Rust]] is a systems programming language.",
        "Programming in [[Rust]] is fun.",
    ]


def test_end_to_end_programming(plain_index):
    assert plain_index.query("Programming") == [
        "Rust is a systems [[programming]] language.",
        "[[Programming]] in Rust is fun.",
    ]


def test_end_to_end_default_marker(sample_index):
    assert sample_index.query("programming")[1] == "\x1b[35mProgramming\x1b[0m in Rust is fun."


def test_postings_follow_insertion_order(plain_marker):
    index = InvertedIndex(marker=plain_marker)
    index.add(2, "two shared")
    index.add(1, "one shared")
    index.add(3, "three shared")
    assert index.get_postings("shared") == [2, 1, 3]
    assert index.query("shared") == ["two [[shared]]", "one [[shared]]", "three [[shared]]"]


def test_query_is_idempotent(sample_index):
    first = sample_index.query("rust")
    assert sample_index.query("rust") == first
    assert sample_index.num_documents == 3


def test_repeated_term_in_one_document_duplicates_postings(plain_marker):
    index = InvertedIndex(marker=plain_marker)
    index.add(1, "rust rust")
    assert index.get_postings("rust") == [1, 1]
    assert index.query("rust") == ["[[rust]] [[rust]]", "[[rust]] [[rust]]"]


def test_readding_id_overwrites_text_and_keeps_postings(plain_marker, caplog):
    index = InvertedIndex(marker=plain_marker)
    index.add(7, "old rust text")
    with caplog.at_level(logging.WARNING, logger="textsearch.posting"):
        index.add(7, "new Python text")
    assert "re-added" in caplog.text
    assert index.get_document(7) == Document(doc_id=7, content="new Python text")
    # Stale posting for "rust" still points at id 7.
    assert index.get_postings("rust") == [7]
    assert index.query("rust") == ["new Python text"]
    assert index.query("text") == ["new Python [[text]]", "new Python [[text]]"]


def test_postings_without_document_are_skipped(plain_marker):
    index = InvertedIndex(marker=plain_marker)
    index.add(1, "rust")
    index.add(2, "rust again")
    del index._documents[1]
    assert index.query("rust") == ["[[rust]] again"]


def test_non_integer_ids(plain_marker):
    index = InvertedIndex(marker=plain_marker)
    index.add("a.md", "Alpha doc")
    index.add(("b", 2), "Beta doc")
    assert index.get_postings("doc") == ["a.md", ("b", 2)]
    assert index.query("ALPHA") == ["[[Alpha]] doc"]


def test_stored_content_keeps_original_case(sample_index):
    assert sample_index.get_document(3).content == "Programming in Rust is fun."
    assert sample_index.get_document(99) is None


def test_index_introspection(sample_index):
    assert "rust" in sample_index
    assert "RUST" in sample_index
    assert "python" not in sample_index
    terms = set(sample_index.tokens())
    assert {"rust", "is", "safe", "programming", "fun"} <= terms
    assert len(sample_index) == len(terms)


def test_get_postings_returns_copy(sample_index):
    postings = sample_index.get_postings("rust")
    postings.append(42)
    assert sample_index.get_postings("rust") == [1, 2, 3]


def test_empty_and_separator_only_documents(plain_marker):
    index = InvertedIndex(marker=plain_marker)
    index.add(1, "")
    index.add(2, "... !!!")
    assert len(index) == 0
    assert index.num_documents == 2
