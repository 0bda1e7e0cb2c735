import argparse

import nltk

# tokenizers, lemmatizer and stopword list used by summfeat.utils.text
PACKAGES = {
    "punkt": "tokenizers/punkt",
    "punkt_tab": "tokenizers/punkt_tab",
    "wordnet": "corpora/wordnet",
    "omw-1.4": "corpora/omw-1.4",
    "stopwords": "corpora/stopwords",
}

if __name__ == "__main__":
    ap = argparse.ArgumentParser()
    ap.add_argument("--download_dir", default=None)
    args = ap.parse_args()
    for name, resource in PACKAGES.items():
        try:
            nltk.data.find(resource)
        except LookupError:
            nltk.download(name, download_dir=args.download_dir, quiet=True)
    print("NLTK data ready")
