# docindex/infrastructure/tfidf.py

import math
import string
import threading
from bisect import bisect_left
from collections import Counter
from typing import Dict, List, Mapping, Tuple

import numpy as np


def tokenize(text: str) -> List[str]:
    """
    Lowercase, split on whitespace, strip surrounding punctuation.
    Tokens made only of punctuation are dropped.
    """
    tokens = (token.strip(string.punctuation) for token in text.lower().split())
    return [token for token in tokens if token]


class CorpusSnapshot:
    """
    Read view of the corpus as it stood after `document_count` entries.

    Posting lists are shared with the live index and only ever grow at the
    tail, so counting postings below `document_count` ignores later appends.
    """

    def __init__(self, document_count: int, postings: Mapping[str, List[int]]):
        self._document_count = document_count
        self._postings = postings

    @property
    def document_count(self) -> int:
        return self._document_count

    def document_frequency(self, term: str) -> int:
        return bisect_left(self._postings.get(term, ()), self._document_count)

    def inverse_document_frequency(self, term: str) -> float:
        document_frequency = self.document_frequency(term)
        return math.log((1 + self._document_count) / (1 + document_frequency)) + 1.0


class CorpusIndex:
    """
    Append-only corpus used for IDF statistics.

    Each term keeps a posting list of the entry indices containing it.
    Writers are serialized by a lock, extend the posting lists of their own
    terms, then publish the new entry count. Readers never take the lock:
    they fix the count once and only see entries below it, so an entry is
    either fully visible or not visible at all.
    """

    def __init__(self):
        self._write_lock = threading.Lock()
        self._postings: Dict[str, List[int]] = {}
        self._document_count = 0

    def add_document_to_corpus(self, text: str) -> None:
        if text is None:
            raise TypeError("Corpus document text cannot be None.")

        terms = set(tokenize(text))

        with self._write_lock:
            entry_index = self._document_count
            for term in terms:
                self._postings.setdefault(term, []).append(entry_index)
            # Publish last
            self._document_count = entry_index + 1

    def snapshot(self) -> CorpusSnapshot:
        return CorpusSnapshot(self._document_count, self._postings)

    @property
    def document_count(self) -> int:
        return self._document_count

    def document_frequency(self, term: str) -> int:
        return self.snapshot().document_frequency(term)

    def inverse_document_frequency(self, term: str) -> float:
        """
        Smoothed IDF: ln((1 + N) / (1 + df)) + 1.
        Always >= 1, finite for unseen terms and for an empty corpus.
        """
        return self.snapshot().inverse_document_frequency(term)


class TfIdfScorer:
    """
    Scores arbitrary text against a CorpusIndex.

    TF is sublinear (1 + ln(count)) so repeating a term never lowers the
    score. The document score is the sum of tf * idf over distinct terms.
    """

    def __init__(self, corpus: CorpusIndex):
        self._corpus = corpus

    def calculate_document_tfidf(self, text: str) -> float:
        terms, weights = self._weigh(text)
        if not terms:
            return 0.0
        return float(weights.sum())

    def term_weights(self, text: str) -> Dict[str, float]:
        terms, weights = self._weigh(text)
        return {term: float(weight) for term, weight in zip(terms, weights)}

    def top_terms(self, text: str, limit: int = 5) -> List[Tuple[str, float]]:
        """Highest-weighted terms, descending; ties keep first-appearance order."""
        if limit < 1:
            raise ValueError("Limit must be at least 1.")

        terms, weights = self._weigh(text)
        if not terms:
            return []

        # Stable sort on the negated weights keeps ties in text order
        order = np.argsort(-weights, kind="stable")[:limit]
        return [(terms[i], float(weights[i])) for i in order]

    def _weigh(self, text: str) -> Tuple[List[str], np.ndarray]:
        if text is None:
            raise TypeError("Document text cannot be None.")

        counts = Counter(tokenize(text))
        if not counts:
            return [], np.zeros(0)

        # One snapshot per call: concurrent appends cannot skew a single score
        snapshot = self._corpus.snapshot()
        terms = list(counts)

        raw_counts = np.fromiter(counts.values(), dtype=float, count=len(terms))
        document_frequencies = np.fromiter(
            (snapshot.document_frequency(term) for term in terms),
            dtype=float,
            count=len(terms),
        )

        term_frequency = 1.0 + np.log(raw_counts)
        inverse_document_frequency = (
            np.log((1.0 + snapshot.document_count) / (1.0 + document_frequencies))
            + 1.0
        )
        return terms, term_frequency * inverse_document_frequency
