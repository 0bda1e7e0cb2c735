"""Stopword filtering and corpus statistics for a parsed document."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List

from summfeat.datatypes import PreprocessResult, Sentence, Token
from summfeat.errors import ParseFailure
from summfeat.utils.text import Parser, StopwordSet

logger = logging.getLogger(__name__)


def preprocess_sentences(raw_sentences: Iterable[Sentence], stop: StopwordSet) -> PreprocessResult:
    """Drop stopword tokens, drop emptied sentences, count surviving lemmas.

    Sentence and token order are preserved.
    """
    kept: List[Sentence] = []
    freq: Dict[str, int] = {}
    longest = 0
    dropped = 0
    for sent in raw_sentences:
        toks = tuple(t for t in sent.tokens if t.lemma not in stop)
        if not toks:
            dropped += 1
            continue
        for t in toks:
            freq[t.lemma] = freq.get(t.lemma, 0) + 1
        kept.append(Sentence(toks))
        if len(toks) > longest:
            longest = len(toks)
    if dropped:
        logger.debug("Dropped %d sentences with no content tokens", dropped)
    return PreprocessResult(sentences=tuple(kept), frequencies=freq, longest_sentence=longest)


def parse_text(text: str, parser: Parser) -> List[Sentence]:
    """Run the parser, reporting any failure as :class:`ParseFailure`."""
    try:
        return list(parser.parse(text))
    except ParseFailure:
        raise
    except Exception as e:
        raise ParseFailure(f"Parser failed: {e}") from e


def parse_tokens(text: str, parser: Parser) -> List[Token]:
    """Parse ``text`` into one flat token list, e.g. for a title."""
    return [tok for sent in parse_text(text, parser) for tok in sent.tokens]


def preprocess(text: str, parser: Parser, stop: StopwordSet) -> PreprocessResult:
    return preprocess_sentences(parse_text(text, parser), stop)
