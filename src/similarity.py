from collections import Counter
from typing import Sequence

from sklearn.feature_extraction.text import TfidfVectorizer
from sklearn.metrics.pairwise import linear_kernel

from normalization import normalize


def _bigrams(text: str) -> Counter:
    text = normalize(text)
    return Counter(text[i : i + 2] for i in range(len(text) - 1))


def bigram_dice(a: str, b: str) -> float:
    """Dice coefficient over character bigrams of the normalized strings."""
    left = _bigrams(a)
    right = _bigrams(b)
    total = sum(left.values()) + sum(right.values())
    if not left or not right:
        return 0.0
    shared = sum((left & right).values())
    return 2.0 * shared / total


def tfidf_scores(query: str, questions: Sequence[str]) -> list[float]:
    """Cosine similarity of the query against each question.

    Used for diagnostics only; a corpus with no usable vocabulary scores 0.
    """
    if not questions or not normalize(query):
        return [0.0] * len(questions)
    vectorizer = TfidfVectorizer(ngram_range=(1, 2), preprocessor=normalize)
    try:
        matrix = vectorizer.fit_transform(questions)
    except ValueError:
        # empty vocabulary
        return [0.0] * len(questions)
    query_vec = vectorizer.transform([query])
    scores = linear_kernel(query_vec, matrix).flatten()
    return [round(float(s), 4) for s in scores]
