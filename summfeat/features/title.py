from typing import List, Sequence

from summfeat.datatypes import FeatureVector, Sentence, Token
from summfeat.utils.numeric import safe_divide


def title_scores(sentences: Sequence[Sentence], title: Sequence[Token]) -> FeatureVector:
    """Share of title tokens matched by each sentence's lemmas.

    Every matching token counts, so repeated title lemmas can push a score
    above 1.0. An empty title gives 0.0 for every sentence.
    """
    lookup = {t.lemma for t in title}
    n_title = len(title)
    out: List[float] = []
    for sent in sentences:
        count = 0
        if n_title > 0:
            count = sum(1 for t in sent.tokens if t.lemma in lookup)
        out.append(safe_divide(count, n_title))
    return out
