import math

import pytest

from docseek.search.document import Document
from docseek.search.index import CorpusIndex
from docseek.search.ranker import inverse_document_frequency, search, term_frequency

# ---------- Helpers ----------


def make_index(**docs: str) -> CorpusIndex:
    index = CorpusIndex()
    for path, content in docs.items():
        index.add_or_replace(path, content)
    return index


# ---------- Tests ----------


def test_term_frequency_of_empty_document_is_zero() -> None:
    empty = Document.build("")
    assert term_frequency("cat", empty) == 0.0


def test_term_frequency_divides_by_total_terms() -> None:
    doc = Document.build("the cat sat")
    assert term_frequency("cat", doc) == pytest.approx(1 / 3)


def test_idf_of_unseen_term() -> None:
    assert math.isnan(inverse_document_frequency(CorpusIndex(), "cat"))
    index = make_index(A="cat")
    assert inverse_document_frequency(index, "dog") == math.inf
    assert inverse_document_frequency(index, "cat") == 0.0


def test_search_empty_corpus_returns_nothing() -> None:
    assert search(CorpusIndex(), "anything") == []


def test_common_term_scores_equal() -> None:
    index = make_index(A="the cat sat", B="the cat ran")
    ranks = search(index, "cat")
    assert [path for path, _ in ranks] == ["A", "B"]
    assert ranks[0][1] == ranks[1][1] == 0.0


def test_distinguishing_term_ranks_its_document_first() -> None:
    index = make_index(A="the cat sat", B="the cat ran")
    ranks = dict(search(index, "sat"))
    assert ranks["A"] == pytest.approx(math.log10(2) / 3)
    assert ranks["B"] == 0.0
    assert search(index, "sat")[0][0] == "A"


def test_query_goes_through_normalization() -> None:
    index = make_index(A="the cats sat", B="the dog ran")
    assert search(index, "CATS!")[0][0] == "A"
    assert search(index, "Cat")[0][0] == "A"


def test_unseen_query_term_excludes_nan_documents() -> None:
    index = make_index(A="the cat sat", B="the cat ran")
    assert search(index, "unicorn") == []
    # Mixed query: the unseen term still poisons every score with NaN
    assert search(index, "sat unicorn") == []


def test_empty_documents_are_dropped_for_unseen_terms_but_kept_otherwise() -> None:
    index = make_index(A="cat sat", E="")
    ranks = dict(search(index, "sat"))
    assert ranks["E"] == 0.0
    assert ranks["A"] > 0.0


def test_infinite_scores_sort_first() -> None:
    index = make_index(A="alpha", B="beta", C="alpha beta")
    # Simulate bookkeeping that lost track of "alpha" in the frequency table
    index._document_frequency.pop("alpha")  # noqa: SLF001
    ranks = search(index, "alpha")
    assert [path for path, _ in ranks] == ["A", "C"]
    assert all(score == math.inf for _, score in ranks)


def test_ties_are_ordered_by_path() -> None:
    index = make_index(zeta="common word", alpha="common word", mid="common word")
    assert [path for path, _ in search(index, "word")] == ["alpha", "mid", "zeta"]


def test_empty_query_scores_everything_zero() -> None:
    index = make_index(A="x", B="y")
    assert search(index, " ,. ") == [("A", 0.0), ("B", 0.0)]


def test_limit_truncates() -> None:
    index = make_index(**{f"d{i}": "shared" for i in range(30)})
    assert len(search(index, "shared", limit=20)) == 20
    assert search(index, "shared", limit=0) == []
