"""Per-document feature construction: preprocess once, run the four scorers."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Dict, List, Optional, Sequence

from summfeat.config import FeatureConfig
from summfeat.data.preprocess import parse_tokens, preprocess
from summfeat.datatypes import DocumentFeatures, FeatureVector, PreprocessResult, Token
from summfeat.features.length import length_scores
from summfeat.features.position import DEFAULT_RANK_CUTOFF, check_rank_cutoff, position_scores
from summfeat.features.tf_isf import tf_isf_scores
from summfeat.features.title import title_scores
from summfeat.utils.text import NltkParser, NltkStopwords, Parser, StopwordSet

logger = logging.getLogger(__name__)


def score_document(
    prep: PreprocessResult,
    title_tokens: Sequence[Token],
    rank_cutoff: int = DEFAULT_RANK_CUTOFF,
    parallel: bool = False,
) -> DocumentFeatures:
    """Run every scorer over an already preprocessed document."""
    check_rank_cutoff(rank_cutoff)
    sents = prep.sentences
    jobs: Dict[str, Callable[[], FeatureVector]] = {
        "title": lambda: title_scores(sents, title_tokens),
        "length": lambda: length_scores(sents, prep.longest_sentence),
        "tf_isf": lambda: tf_isf_scores(sents, prep.frequencies),
        "position": lambda: position_scores(sents, rank_cutoff),
    }
    if parallel and sents:
        with ThreadPoolExecutor(max_workers=len(jobs)) as pool:
            futures = {name: pool.submit(fn) for name, fn in jobs.items()}
            vectors = {name: fut.result() for name, fut in futures.items()}
    else:
        vectors = {name: fn() for name, fn in jobs.items()}
    return DocumentFeatures(sentences=sents, **vectors)


def compute_features(
    text: str,
    title_tokens: Sequence[Token],
    rank_cutoff: int = DEFAULT_RANK_CUTOFF,
    *,
    parser: Parser,
    stopwords: StopwordSet,
    parallel: bool = False,
) -> DocumentFeatures:
    # fail on bad configuration before doing any parsing work
    check_rank_cutoff(rank_cutoff)
    prep = preprocess(text, parser, stopwords)
    logger.debug(
        "Preprocessed %d sentences, %d distinct lemmas, longest=%d",
        len(prep), len(prep.frequencies), prep.longest_sentence,
    )
    return score_document(prep, title_tokens, rank_cutoff, parallel=parallel)


class FeatureExtractor:
    """
    Holds the parser and stopword collaborators for repeated documents.
    """

    def __init__(
        self,
        parser: Optional[Parser] = None,
        stopwords: Optional[StopwordSet] = None,
        config: Optional[FeatureConfig] = None,
    ) -> None:
        self.config = config or FeatureConfig()
        check_rank_cutoff(self.config.rank_cutoff)
        self.parser = parser or NltkParser(
            language=self.config.parser.language,
            lowercase=self.config.parser.lowercase,
        )
        self.stopwords = stopwords or NltkStopwords(
            language=self.config.stopwords.language,
            extra=self.config.stopwords.extra,
            punctuation=self.config.stopwords.punctuation,
        )

    def title_tokens(self, title: Optional[object]) -> List[Token]:
        """Parse a title into a flat token list (stopwords kept)."""
        if title is None:
            return []
        text = str(title)
        if not text.strip():
            return []
        return parse_tokens(text, self.parser)

    def compute(
        self,
        text: str,
        title: Sequence[Token] = (),
        rank_cutoff: Optional[int] = None,
    ) -> DocumentFeatures:
        return compute_features(
            text,
            title,
            self.config.rank_cutoff if rank_cutoff is None else rank_cutoff,
            parser=self.parser,
            stopwords=self.stopwords,
            parallel=self.config.parallel,
        )
