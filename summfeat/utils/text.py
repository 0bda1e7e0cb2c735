from __future__ import annotations

import logging
import string
from typing import AbstractSet, Iterable, List, Optional, Protocol, Sequence

from nltk.corpus import stopwords
from nltk.stem import WordNetLemmatizer
from nltk.tokenize import sent_tokenize, word_tokenize

from summfeat.datatypes import Sentence, Token
from summfeat.errors import ParseFailure

logger = logging.getLogger(__name__)


class Parser(Protocol):
    def parse(self, text: str) -> List[Sentence]:
        ...


class StopwordSet(Protocol):
    def __contains__(self, lemma: object) -> bool:
        ...


def _safe_stopwords(lang: str = "english") -> set[str]:
    try:
        return set(stopwords.words(lang))
    except LookupError:
        # Fallback: empty set if stopwords not available
        logger.warning("NLTK stopwords corpus for %r not available; using an empty base list", lang)
        return set()
    except OSError:
        logger.warning("No NLTK stopword list for language %r; using an empty base list", lang)
        return set()


class SetStopwords:
    """Stopword lookup over a fixed set of lemmas."""

    def __init__(self, words: Iterable[str] = ()):
        self._words: AbstractSet[str] = frozenset(words)

    def __contains__(self, lemma: object) -> bool:
        return lemma in self._words

    def __len__(self) -> int:
        return len(self._words)

    def contains(self, lemma: str) -> bool:
        return lemma in self


class NltkStopwords(SetStopwords):
    """NLTK stopword corpus, optionally extended with punctuation and extra lemmas."""

    def __init__(
        self,
        language: str = "english",
        extra: Sequence[str] = (),
        punctuation: bool = True,
    ):
        words = _safe_stopwords(language)
        words.update(extra)
        if punctuation:
            words.update(string.punctuation)
            # treebank quote tokens emitted by word_tokenize
            words.update(["``", "''", "--", "..."])
        super().__init__(words)
        self.language = language


class NltkParser:
    """Sentence split, tokenize and lemmatize English text with NLTK.

    Requires the ``punkt`` and ``wordnet`` data packages; a missing package
    surfaces as :class:`ParseFailure`.
    """

    def __init__(self, language: str = "english", lowercase: bool = True):
        self.language = language
        self.lowercase = lowercase
        self._lemmatizer: Optional[WordNetLemmatizer] = None

    def _lemma(self, word: str) -> str:
        if self._lemmatizer is None:
            self._lemmatizer = WordNetLemmatizer()
        base = word.lower() if self.lowercase else word
        return self._lemmatizer.lemmatize(base)

    def parse(self, text: str) -> List[Sentence]:
        if not isinstance(text, str):
            raise ParseFailure(f"Expected text, got {type(text).__name__}")
        try:
            out: List[Sentence] = []
            for raw in sent_tokenize(text, language=self.language):
                words = word_tokenize(raw, language=self.language)
                out.append(Sentence(tuple(Token(w, self._lemma(w)) for w in words)))
        except LookupError as e:
            raise ParseFailure(f"NLTK data missing: {e}") from e
        logger.debug("Parsed %d sentences", len(out))
        return out
