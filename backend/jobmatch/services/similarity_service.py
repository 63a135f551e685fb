"""
TF-IDF vectors and cosine similarity for a pair of documents.

IDF is computed from the two compared documents only (N = 2), not from a
persistent corpus. This keeps scoring stateless: the number answers "how
close are these two texts relative to each other", not "how rare is this
term in the job market". Moving to a global corpus changes every score and
needs a corpus-statistics store, so treat it as a deliberate trade-off.
"""
import math
from collections import Counter
from collections.abc import Sequence


def build_tfidf_vectors(tokens_a: Sequence[str], tokens_b: Sequence[str]) -> tuple[list[float], list[float]]:
    """Return TF-IDF vectors for both documents over their shared vocabulary."""
    docs = (tokens_a, tokens_b)
    n_docs = len(docs)

    vocab = list(dict.fromkeys([*tokens_a, *tokens_b]))

    doc_freq: Counter[str] = Counter()
    for tokens in docs:
        doc_freq.update(set(tokens))
    # Smoothed: stays positive for terms present in both documents
    idf = {term: math.log((n_docs + 1) / (doc_freq[term] + 1)) + 1 for term in vocab}

    vectors = []
    for tokens in docs:
        term_freq = Counter(tokens)
        vectors.append([term_freq[term] * idf[term] for term in vocab])
    return vectors[0], vectors[1]


def _dot(a: Sequence[float], b: Sequence[float]) -> float:
    return sum(x * y for x, y in zip(a, b))


def _magnitude(a: Sequence[float]) -> float:
    return math.sqrt(sum(x * x for x in a))


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Cosine of the angle between two vectors; 0.0 when either is all zeros."""
    if len(a) != len(b):
        raise ValueError(f"Vector length mismatch: {len(a)} != {len(b)}")
    denom = _magnitude(a) * _magnitude(b)
    if denom == 0:
        return 0.0
    return _dot(a, b) / denom
