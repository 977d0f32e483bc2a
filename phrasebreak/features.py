from __future__ import annotations
from typing import List

from .types import Feature


def boundary_features(sentence: str, i: int) -> List[Feature]:
    """
    Extracts the positional n-gram features for the boundary before `sentence[i]`.

    The window spans three code points to the left of the boundary and three
    to the right. Unigrams (UW1-UW6) cover offsets -3..+2, bigrams (BW1-BW3)
    and trigrams (TW1-TW4) cover the adjacent spans. Features whose span
    would leave the string are omitted rather than truncated, so a trigram key
    is never looked up with a shorter sequence.

    Python strings index by code point, so slicing `sentence` directly yields
    n-grams of whole characters regardless of their encoded width.

    Args:
        sentence: The text being segmented.
        i: The boundary index, with `1 <= i < len(sentence)`.

    Returns:
        A list of `(feature_key, ngram)` pairs in canonical feature order.

    Raises:
        IndexError: If `i` is not a valid interior boundary.
    """
    length = len(sentence)
    if not 1 <= i < length:
        raise IndexError(f"Boundary index {i} out of range for a sentence of length {length}.")

    has_next = i + 1 < length
    has_next2 = i + 2 < length

    feats: List[Feature] = []
    if i > 2:
        feats.append(("UW1", sentence[i - 3]))
    if i > 1:
        feats.append(("UW2", sentence[i - 2]))
    feats.append(("UW3", sentence[i - 1]))
    feats.append(("UW4", sentence[i]))
    if has_next:
        feats.append(("UW5", sentence[i + 1]))
    if has_next2:
        feats.append(("UW6", sentence[i + 2]))
    if i > 1:
        feats.append(("BW1", sentence[i - 2:i]))
    feats.append(("BW2", sentence[i - 1:i + 1]))
    if has_next:
        feats.append(("BW3", sentence[i:i + 2]))
    if i > 2:
        feats.append(("TW1", sentence[i - 3:i]))
    if i > 1:
        feats.append(("TW2", sentence[i - 2:i + 1]))
    if has_next:
        feats.append(("TW3", sentence[i - 1:i + 2]))
    if has_next2:
        feats.append(("TW4", sentence[i:i + 3]))
    return feats
