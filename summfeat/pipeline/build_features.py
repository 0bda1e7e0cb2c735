import argparse
import logging
import os
from typing import Any, Dict, Iterable, Iterator, Optional

from summfeat.config import load_config
from summfeat.errors import ParseFailure
from summfeat.pipeline.feature_builder import FeatureExtractor
from summfeat.utils.io import read_documents, write_jsonl
from summfeat.utils.logging import setup_logging

log = logging.getLogger(__name__)


def build_features_for_doc(doc: Dict[str, Any], extractor: FeatureExtractor) -> Dict[str, Any]:
    text = str(doc.get("text", doc.get("article", "")) or "")
    title = extractor.title_tokens(doc.get("title"))
    feats = extractor.compute(text, title)
    return {
        "id": doc.get("id"),
        "sentences": [s.text for s in feats.sentences],
        "features": feats.as_dict(),
        "n_sentences": len(feats),
    }


def build_features(docs: Iterable[Dict[str, Any]], extractor: FeatureExtractor) -> Iterator[Dict[str, Any]]:
    for doc in docs:
        try:
            yield build_features_for_doc(doc, extractor)
        except ParseFailure as e:
            log.warning("Skipping document %s: %s", doc.get("id"), e)


def main(argv: Optional[list] = None) -> None:
    ap = argparse.ArgumentParser(description="Compute per-sentence summarisation features")
    ap.add_argument("--input", required=True, help="documents as .jsonl or .csv (id, text, title)")
    ap.add_argument("--out", default=None, help="output JSONL path")
    ap.add_argument("--config", default=None, help="feature config YAML")
    ap.add_argument("--rank_cutoff", type=int, default=None, help="override position rank cutoff")
    ap.add_argument("--log_level", default="INFO")
    args = ap.parse_args(argv)

    setup_logging(args.log_level)
    cfg = load_config(args.config)
    if args.rank_cutoff is not None:
        cfg = cfg.model_copy(update={"rank_cutoff": args.rank_cutoff})
    extractor = FeatureExtractor(config=cfg)

    stem = os.path.splitext(os.path.basename(args.input))[0]
    out = args.out or os.path.join("runs", f"{stem}.features.jsonl")
    n = write_jsonl(out, build_features(read_documents(args.input), extractor))
    log.info("Wrote features for %d documents to %s", n, out)


if __name__ == "__main__":
    main()
