"""Term frequency x inverse sentence frequency.

For each sentence the score is the sum over its tokens of

    freq(lemma) * ln(N / sf(lemma))

where ``freq`` is the lemma's count over the whole filtered document, ``N``
the number of sentences and ``sf`` the number of sentences containing the
lemma. Scores are divided by the document maximum when it is positive.
"""

from __future__ import annotations

import math
from typing import Dict, List, Sequence

from summfeat.datatypes import FeatureVector, FrequencyTable, Sentence
from summfeat.errors import InternalConsistencyFault


def _same_lemma(a: str, b: str) -> bool:
    # case-insensitive per character, so "straße" never matches "strasse"
    if len(a) != len(b):
        return False
    return all(
        x == y or x.upper() == y.upper() or x.lower() == y.lower()
        for x, y in zip(a, b)
    )


class SentenceFrequencyCache:
    """Lazily counts, per lemma, the sentences that contain it.

    Lemmas are compared case-insensitively. One instance belongs to a single
    document; do not share it across documents.
    """

    def __init__(self, sentences: Sequence[Sentence]):
        self._sentences = sentences
        self._cache: Dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._cache)

    def count(self, lemma: str) -> int:
        if lemma in self._cache:
            return self._cache[lemma]
        n = 0
        for sent in self._sentences:
            for t in sent.tokens:
                if _same_lemma(t.lemma, lemma):
                    n += 1
                    break
        self._cache[lemma] = n
        return n


def raw_tf_isf_scores(sentences: Sequence[Sentence], frequencies: FrequencyTable) -> List[float]:
    n_sent = len(sentences)
    sf = SentenceFrequencyCache(sentences)
    out: List[float] = []
    for sent in sentences:
        w = 0.0
        for t in sent.tokens:
            try:
                tf = frequencies[t.lemma]
            except KeyError:
                raise InternalConsistencyFault(
                    f"Lemma {t.lemma!r} missing from frequency table"
                ) from None
            w += float(tf) * math.log(n_sent / sf.count(t.lemma))
        out.append(w)
    return out


def tf_isf_scores(sentences: Sequence[Sentence], frequencies: FrequencyTable) -> FeatureVector:
    raw = raw_tf_isf_scores(sentences, frequencies)
    largest = max(raw, default=0.0)
    if largest > 0.0:
        return [v / largest for v in raw]
    return raw
