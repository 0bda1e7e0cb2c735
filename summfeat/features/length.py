from typing import Sequence

from summfeat.datatypes import FeatureVector, Sentence
from summfeat.utils.numeric import safe_divide


def length_scores(sentences: Sequence[Sentence], longest_sentence: int) -> FeatureVector:
    # token count relative to the longest filtered sentence
    return [safe_divide(len(s), longest_sentence) for s in sentences]
