from __future__ import annotations
from typing import Literal, Mapping, Protocol, Tuple

__all__ = [
    "FeatureKey",
    "FEATURE_KEYS",
    "UNIGRAM_KEYS",
    "BIGRAM_KEYS",
    "TRIGRAM_KEYS",
    "MAX_NGRAM_LENGTH",
    "ModelData",
    "Feature",
    "WeightTable",
]

FeatureKey = Literal[
    "UW1", "UW2", "UW3", "UW4", "UW5", "UW6",
    "BW1", "BW2", "BW3",
    "TW1", "TW2", "TW3", "TW4",
]

UNIGRAM_KEYS: Tuple[str, ...] = ("UW1", "UW2", "UW3", "UW4", "UW5", "UW6")
BIGRAM_KEYS: Tuple[str, ...] = ("BW1", "BW2", "BW3")
TRIGRAM_KEYS: Tuple[str, ...] = ("TW1", "TW2", "TW3", "TW4")
FEATURE_KEYS: Tuple[str, ...] = UNIGRAM_KEYS + BIGRAM_KEYS + TRIGRAM_KEYS

MAX_NGRAM_LENGTH = 3

# Serialized model shape: feature key -> n-gram -> weight.
ModelData = Mapping[str, Mapping[str, int]]

# A single (feature key, n-gram) pair extracted at a boundary.
Feature = Tuple[str, str]


class WeightTable(Protocol):
    """
    The lookup capability the parser needs from a trained model.

    Any object answering these two calls can drive segmentation, regardless of
    whether its weights were parsed from JSON at runtime or embedded in
    generated source.
    """

    def score(self, feature_key: str, sequence: str) -> int:
        """Returns the weight for `sequence` under `feature_key`, or 0."""
        ...

    def total_weight(self) -> int:
        """Returns the sum of every weight stored in the table."""
        ...
