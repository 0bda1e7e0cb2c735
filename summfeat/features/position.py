import numbers
from typing import Sequence

from summfeat.datatypes import FeatureVector, Sentence
from summfeat.errors import InvalidConfiguration

DEFAULT_RANK_CUTOFF = 5


def check_rank_cutoff(rank_cutoff: int) -> int:
    if isinstance(rank_cutoff, bool) or not isinstance(rank_cutoff, numbers.Integral):
        raise InvalidConfiguration(f"rank_cutoff must be an integer, got {rank_cutoff!r}")
    if rank_cutoff <= 0:
        raise InvalidConfiguration(f"rank_cutoff must be positive, got {rank_cutoff}")
    return int(rank_cutoff)


def position_scores(sentences: Sequence[Sentence], rank_cutoff: int = DEFAULT_RANK_CUTOFF) -> FeatureVector:
    """Linear decay from 1.0 over the first ``rank_cutoff`` sentences, 0.0 after."""
    k = check_rank_cutoff(rank_cutoff)
    return [(k - i) / k if i < k else 0.0 for i in range(len(sentences))]
