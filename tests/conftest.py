from __future__ import annotations

from typing import List

import pytest

from summfeat.datatypes import Sentence, Token
from summfeat.utils.text import SetStopwords


class FakeParser:
    """Splits on '.', tokens on whitespace, lemma = lowercased token."""

    def __init__(self) -> None:
        self.calls = 0

    def parse(self, text: str) -> List[Sentence]:
        self.calls += 1
        out = []
        for chunk in text.split("."):
            words = chunk.split()
            if words:
                out.append(Sentence(tuple(Token(w, w.lower()) for w in words)))
        return out


def make_sentence(*lemmas: str) -> Sentence:
    return Sentence(tuple(Token(lem, lem) for lem in lemmas))


@pytest.fixture
def parser():
    return FakeParser()


@pytest.fixture
def stopwords():
    return SetStopwords({"the", "on", "a", "is", "of"})


@pytest.fixture
def cat_doc():
    return "The cat sat on the mat. The cat ran."
