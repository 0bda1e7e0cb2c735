"""Integration tests for the full feature pipeline."""

import numpy as np
import pytest

from summfeat.datatypes import Token
from summfeat.errors import InvalidConfiguration, ParseFailure
from summfeat.pipeline.feature_builder import FeatureExtractor, compute_features
from summfeat.config import FeatureConfig


@pytest.fixture
def long_doc():
    return (
        "Solar power is growing fast. "
        "The cost of solar panels fell sharply. "
        "Wind power also grew. "
        "Storage remains a challenge for solar. "
        "Grid operators plan new lines. "
        "Policy support varies by country. "
        "Investors remain optimistic."
    )


class TestEndToEnd:
    def test_cat_example(self, parser, stopwords, cat_doc):
        feats = compute_features(cat_doc, [Token("cat", "cat")], 5, parser=parser, stopwords=stopwords)
        assert [s.lemmas for s in feats.sentences] == [["cat", "sat", "mat"], ["cat", "ran"]]
        assert feats.title == [1.0, 1.0]
        assert feats.length == pytest.approx([1.0, 2 / 3])
        assert feats.length[0] == 1.0
        assert feats.position == [1.0, 0.8]
        assert feats.tf_isf == pytest.approx([1.0, 0.5])

    def test_vectors_aligned(self, parser, stopwords, long_doc):
        feats = compute_features(long_doc, [Token("solar", "solar")], 3, parser=parser, stopwords=stopwords)
        n = len(feats.sentences)
        assert n == 7
        for vec in feats.as_dict().values():
            assert len(vec) == n
        assert feats.position[3:] == [0.0] * 4
        assert max(feats.tf_isf) == 1.0
        assert max(feats.length) == 1.0

    def test_empty_title(self, parser, stopwords, long_doc):
        feats = compute_features(long_doc, [], parser=parser, stopwords=stopwords)
        assert feats.title == [0.0] * len(feats)

    def test_empty_document(self, parser, stopwords):
        feats = compute_features("the. on a.", [Token("cat", "cat")], parser=parser, stopwords=stopwords)
        assert len(feats) == 0
        assert feats.as_dict() == {"title": [], "length": [], "tf_isf": [], "position": []}
        assert feats.to_matrix().shape == (0, 4)

    def test_idempotent(self, parser, stopwords, long_doc):
        title = [Token("solar", "solar"), Token("power", "power")]
        a = compute_features(long_doc, title, parser=parser, stopwords=stopwords)
        b = compute_features(long_doc, title, parser=parser, stopwords=stopwords)
        assert a == b

    def test_parallel_matches_sequential(self, parser, stopwords, long_doc):
        title = [Token("solar", "solar")]
        seq = compute_features(long_doc, title, parser=parser, stopwords=stopwords)
        par = compute_features(long_doc, title, parser=parser, stopwords=stopwords, parallel=True)
        assert seq == par

    def test_to_matrix_columns(self, parser, stopwords, cat_doc):
        feats = compute_features(cat_doc, [Token("cat", "cat")], parser=parser, stopwords=stopwords)
        mat = feats.to_matrix()
        assert mat.shape == (2, 4)
        np.testing.assert_allclose(mat[:, 3], [1.0, 0.8])


class TestErrors:
    def test_zero_cutoff_fails_before_parsing(self, parser, stopwords, cat_doc):
        with pytest.raises(InvalidConfiguration):
            compute_features(cat_doc, [], 0, parser=parser, stopwords=stopwords)
        assert parser.calls == 0

    def test_parse_failure_surfaces(self, stopwords):
        class Broken:
            def parse(self, text):
                raise ParseFailure("nope")

        with pytest.raises(ParseFailure):
            compute_features("x", [], parser=Broken(), stopwords=stopwords)


class TestExtractor:
    def test_title_tokens(self, parser, stopwords):
        ex = FeatureExtractor(parser=parser, stopwords=stopwords)
        toks = ex.title_tokens("The Cat")
        assert [t.lemma for t in toks] == ["the", "cat"]
        assert ex.title_tokens("   ") == []
        assert ex.title_tokens(None) == []

    def test_compute_uses_config_cutoff(self, parser, stopwords, long_doc):
        ex = FeatureExtractor(parser=parser, stopwords=stopwords, config=FeatureConfig(rank_cutoff=2))
        feats = ex.compute(long_doc)
        assert feats.position[:3] == [1.0, 0.5, 0.0]

    def test_compute_override_cutoff(self, parser, stopwords, long_doc):
        ex = FeatureExtractor(parser=parser, stopwords=stopwords)
        feats = ex.compute(long_doc, rank_cutoff=1)
        assert feats.position[:2] == [1.0, 0.0]

    def test_bad_config_cutoff(self, parser, stopwords):
        with pytest.raises(InvalidConfiguration):
            FeatureExtractor(parser=parser, stopwords=stopwords, config=FeatureConfig(rank_cutoff=0))


class TestTitleParsing:
    def test_non_string_title_is_coerced(self, parser, stopwords):
        ex = FeatureExtractor(parser=parser, stopwords=stopwords)
        assert [t.lemma for t in ex.title_tokens(42)] == ["42"]

    def test_title_parser_crash_is_parse_failure(self, stopwords):
        class Crashing:
            def parse(self, text):
                raise RuntimeError("tokenizer crashed")

        ex = FeatureExtractor(parser=Crashing(), stopwords=stopwords)
        with pytest.raises(ParseFailure):
            ex.title_tokens("a title")
