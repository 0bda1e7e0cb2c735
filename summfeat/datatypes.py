from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Sequence, Tuple

import numpy as np

FrequencyTable = Mapping[str, int]  # lemma -> occurrences in filtered document
FeatureVector = List[float]  # one score per filtered sentence

FEATURE_NAMES: Tuple[str, ...] = ("title", "length", "tf_isf", "position")


@dataclass(frozen=True)
class Token:
    text: str
    lemma: str


@dataclass(frozen=True)
class Sentence:
    tokens: Tuple[Token, ...] = ()

    def __post_init__(self) -> None:
        # accept any sequence, store a tuple
        object.__setattr__(self, "tokens", tuple(self.tokens))

    def __len__(self) -> int:
        return len(self.tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    @property
    def lemmas(self) -> List[str]:
        return [t.lemma for t in self.tokens]

    @property
    def text(self) -> str:
        return " ".join(t.text for t in self.tokens)


@dataclass(frozen=True)
class PreprocessResult:
    """Filtered sentences plus the statistics every scorer reads."""

    sentences: Tuple[Sentence, ...]
    frequencies: FrequencyTable = field(default_factory=dict)
    longest_sentence: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "sentences", tuple(self.sentences))
        object.__setattr__(self, "frequencies", MappingProxyType(dict(self.frequencies)))

    def __len__(self) -> int:
        return len(self.sentences)


@dataclass(frozen=True)
class DocumentFeatures:
    sentences: Tuple[Sentence, ...]
    title: FeatureVector
    length: FeatureVector
    tf_isf: FeatureVector
    position: FeatureVector

    def __len__(self) -> int:
        return len(self.sentences)

    def as_dict(self) -> Dict[str, FeatureVector]:
        return {name: list(getattr(self, name)) for name in FEATURE_NAMES}

    def to_matrix(self) -> np.ndarray:
        """Stack the vectors column-wise (n_sentences x 4) for an external combiner."""
        if not self.sentences:
            return np.zeros((0, len(FEATURE_NAMES)), dtype=np.float64)
        cols: Sequence[FeatureVector] = [getattr(self, name) for name in FEATURE_NAMES]
        return np.column_stack([np.asarray(c, dtype=np.float64) for c in cols])
