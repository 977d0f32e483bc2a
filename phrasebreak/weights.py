"""Immutable weight tables backing the phrase-break parser.

A trained model maps each of the 13 positional feature keys to a table of
n-grams and their integer weights. This module provides the two
interchangeable ways of holding that data:

-   `DictWeightTable` wraps a nested mapping loaded at runtime, typically from
    a JSON model file.
-   `EmbeddedWeightTable` wraps constants baked into a generated Python module
    (see `phrasebreak.codegen`), where the total weight is written out as a
    literal so it never has to be summed at load time.

Both validate their input with `validate_model`, copy it into read-only
mappings, and fix `total_weight()` at construction so that a table can be
shared freely between threads.
"""
from __future__ import annotations
from types import MappingProxyType
from typing import Any, Mapping

from .types import FEATURE_KEYS, MAX_NGRAM_LENGTH, ModelData

__all__ = [
    "DictWeightTable",
    "EmbeddedWeightTable",
    "compute_total_weight",
    "validate_model",
]


def validate_model(model: Any) -> None:
    """
    Checks that `model` has the `{feature_key: {ngram: int}}` shape.

    Args:
        model: The candidate model data.

    Raises:
        TypeError: If the root or a feature entry is not a mapping, or if a
                   weight is not an integer.
        ValueError: If a feature key is unknown or an n-gram is not a string
                    of 1 to 3 code points.
    """
    if not isinstance(model, Mapping):
        raise TypeError(
            f"Model must be a mapping of feature keys, got {type(model).__name__}."
        )

    for feature_key, entries in model.items():
        if feature_key not in FEATURE_KEYS:
            raise ValueError(
                f"Unknown feature key {feature_key!r}. Expected one of: {', '.join(FEATURE_KEYS)}."
            )
        if not isinstance(entries, Mapping):
            raise TypeError(
                f"Entries for feature key {feature_key!r} must be a mapping, got {type(entries).__name__}."
            )
        for ngram, weight in entries.items():
            if not isinstance(ngram, str) or not 1 <= len(ngram) <= MAX_NGRAM_LENGTH:
                raise ValueError(
                    f"Invalid n-gram {ngram!r} under {feature_key!r}: expected 1-{MAX_NGRAM_LENGTH} characters."
                )
            # bool is a subclass of int but never a valid weight.
            if isinstance(weight, bool) or not isinstance(weight, int):
                raise TypeError(
                    f"Weight for {ngram!r} under {feature_key!r} must be an int, got {type(weight).__name__}."
                )


def compute_total_weight(model: ModelData) -> int:
    """Sums every weight across all feature keys of a model."""
    return sum(sum(entries.values()) for entries in model.values())


def _freeze(model: ModelData) -> Mapping[str, Mapping[str, int]]:
    return MappingProxyType({
        key: MappingProxyType(dict(entries)) for key, entries in model.items()
    })


class DictWeightTable:
    """
    A weight table built from a nested mapping at runtime.

    The mapping is validated and copied, so later changes to the caller's
    dictionary do not leak into the table. The total weight is summed once
    here instead of on every parse.

    Attributes:
        model: A read-only view of the weights.
    """

    def __init__(self, model: ModelData):
        validate_model(model)
        self.model = _freeze(model)
        self._total = compute_total_weight(self.model)

    def score(self, feature_key: str, sequence: str) -> int:
        entries = self.model.get(feature_key)
        if entries is None:
            return 0
        return entries.get(sequence, 0)

    def total_weight(self) -> int:
        return self._total

    def __repr__(self) -> str:
        size = sum(len(entries) for entries in self.model.values())
        return f"DictWeightTable(entries={size}, total_weight={self._total})"


class EmbeddedWeightTable:
    """
    A weight table whose data and total were generated into source code.

    Generated modules pass the total as an integer literal. It is checked
    against the entries once, at construction, so a module edited by hand or
    produced by a faulty generator is rejected before it can skew any score.

    Attributes:
        model: A read-only view of the weights.
    """

    def __init__(self, model: ModelData, total_weight: int):
        validate_model(model)
        actual = compute_total_weight(model)
        if actual != total_weight:
            raise ValueError(
                f"Embedded total weight {total_weight} does not match the sum of the model entries ({actual})."
            )
        self.model = _freeze(model)
        self._total = total_weight

    def score(self, feature_key: str, sequence: str) -> int:
        entries = self.model.get(feature_key)
        if entries is None:
            return 0
        return entries.get(sequence, 0)

    def total_weight(self) -> int:
        return self._total

    def __repr__(self) -> str:
        size = sum(len(entries) for entries in self.model.values())
        return f"EmbeddedWeightTable(entries={size}, total_weight={self._total})"
