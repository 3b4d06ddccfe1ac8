"""
Frequency Matcher (term frequency + cosine similarity)
------------------------------------------------------

Turns token lists into term -> weight vectors and compares two of them.

Weights are plain relative term frequency (count / total tokens). There is
no IDF part: only two documents are ever compared, so there is no corpus to
compute document frequencies over. Adding IDF would change every score.
"""

import math

import numpy as np
from nltk.probability import FreqDist
from sklearn.feature_extraction import DictVectorizer


def vectorize(tokens) -> dict[str, float]:
    """
    Relative frequency of each distinct token.

    Example:
        ["python", "flask", "python", "sql"]
        -> {"python": 0.5, "flask": 0.25, "sql": 0.25}

    Keys are ordered by count, most frequent first, ties in first-seen order.
    No tokens -> empty dict (a valid, empty document).
    """
    freq = FreqDist(tokens)
    if freq.N() == 0:
        return {}
    return {term: freq.freq(term) for term in freq}


def cosine_similarity(vector_a: dict, vector_b: dict) -> float:
    """
    Cosine similarity between two term -> weight dicts, between 0 and 1.

    Both vectors are laid out over the union of their terms (missing terms
    count as 0). Returns exactly 0.0 if either vector has zero length.
    """
    if not vector_a or not vector_b:
        return 0.0

    # DictVectorizer aligns both dicts onto the same (sorted) feature columns
    aligned = DictVectorizer(sparse=False).fit_transform([vector_a, vector_b])
    a, b = aligned[0], aligned[1]

    magnitude_a = np.linalg.norm(a)
    magnitude_b = np.linalg.norm(b)
    if magnitude_a == 0 or magnitude_b == 0:
        return 0.0

    similarity = float(np.dot(a, b) / (magnitude_a * magnitude_b))
    # float noise can push identical documents a hair past 1.0
    return float(np.clip(similarity, 0.0, 1.0))


def round_half_up(value: float, digits: int = 0) -> float:
    """
    Round halves up (49.5 -> 50, 50.5 -> 51), unlike Python's round() which
    rounds halves to even. Used for both the match percentage and keyword scores.
    """
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale
