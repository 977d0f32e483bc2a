"""The phrase-break parser.

This module turns a sentence into a list of phrases by deciding, at every
boundary between two code points, whether a phrase should break there. The
decision is a single additive score over the boundary's window features (see
`phrasebreak.features`), looked up in a `WeightTable`:

    score = -total_weight + sum(2 * weight(feature) for each feature)

A break is placed when the score is strictly positive. The total weight acts
as a fixed bias taken from the table itself, so only boundaries backed by
enough matching n-grams are broken.

The module also provides loaders mirroring the model layout on disk: a parser
can be built from a JSON model file, from a module produced by
`phrasebreak.codegen`, or from the default model configured for a language.
"""
from __future__ import annotations
from pathlib import Path
from typing import List, Optional, Union

from .codegen import load_model_module
from .config import Config, load_config
from .features import boundary_features
from .io_utils import load_model
from .types import WeightTable
from .weights import DictWeightTable

__all__ = [
    "Parser",
    "load_default_parser",
    "load_default_japanese_parser",
    "load_default_simplified_chinese_parser",
    "load_default_traditional_chinese_parser",
    "load_default_thai_parser",
]


class Parser:
    """
    Splits sentences into phrases using a trained weight table.

    A `Parser` holds nothing but its table, which is read-only, so one
    instance can serve concurrent `parse` calls.

    Attributes:
        table: The weight table consulted for every boundary.
    """

    def __init__(self, table: WeightTable):
        self.table = table

    @classmethod
    def from_model(cls, model: dict) -> "Parser":
        """Builds a parser from an in-memory `{feature_key: {ngram: weight}}` model."""
        return cls(DictWeightTable(model))

    @classmethod
    def load_by_file_name(cls, path: Union[str, Path]) -> "Parser":
        """
        Loads a parser from a model file.

        JSON files are parsed into a `DictWeightTable`. Python files are
        treated as modules generated by `phrasebreak.codegen` and their
        embedded `TABLE` is used as is.

        Args:
            path: The model file path.

        Returns:
            A parser backed by the loaded table.

        Raises:
            FileNotFoundError: If the model file does not exist.
            ValueError: If the file suffix is not supported or the model is malformed.
            TypeError: If the model structure is malformed.
        """
        p = Path(path)
        suffix = p.suffix.lower()
        if suffix == ".json":
            return cls(DictWeightTable(load_model(p)))
        if suffix == ".py":
            return cls(load_model_module(p))
        raise ValueError(f"Unsupported model file type '{p.suffix}' for {p}. Expected .json or .py.")

    def boundary_score(self, sentence: str, i: int, bias: Optional[int] = None) -> int:
        """
        Scores the boundary before `sentence[i]`.

        Args:
            sentence: The text being segmented.
            i: The boundary index, with `1 <= i < len(sentence)`.
            bias: The total weight to subtract. Defaults to the table's total.

        Returns:
            The boundary score; a break is placed when it is greater than 0.
        """
        if bias is None:
            bias = self.table.total_weight()
        score = -bias
        for feature_key, ngram in boundary_features(sentence, i):
            score += 2 * self.table.score(feature_key, ngram)
        return score

    def parse(self, sentence: str) -> List[str]:
        """
        Parses a sentence into phrases.

        Args:
            sentence: The sentence to break by phrase.

        Returns:
            The list of phrases, whose concatenation equals `sentence`. An
            empty sentence yields an empty list.
        """
        if not sentence:
            return []

        bias = self.table.total_weight()
        result = [sentence[0]]
        for i in range(1, len(sentence)):
            if self.boundary_score(sentence, i, bias) > 0:
                result.append("")
            result[-1] += sentence[i]
        return result

    def __repr__(self) -> str:
        return f"Parser(table={self.table!r})"


def load_default_parser(language: str, cfg: Optional[Config] = None) -> Parser:
    """
    Loads the parser for a language from the configured model directory.

    Args:
        language: A language code listed under `models` in the configuration
                  (e.g. "ja", "zh-hans").
        cfg: The configuration to resolve the model path with. When omitted,
             `config.yaml` in the working directory is loaded.

    Returns:
        A parser backed by the language's model.

    Raises:
        KeyError: If no model is configured for the language.
        FileNotFoundError: If the configured model file does not exist.
    """
    if cfg is None:
        cfg = load_config()
    return Parser.load_by_file_name(cfg.model_path(language))


def load_default_japanese_parser(cfg: Optional[Config] = None) -> Parser:
    """Loads the default Japanese parser."""
    return load_default_parser("ja", cfg)


def load_default_simplified_chinese_parser(cfg: Optional[Config] = None) -> Parser:
    """Loads the default Simplified Chinese parser."""
    return load_default_parser("zh-hans", cfg)


def load_default_traditional_chinese_parser(cfg: Optional[Config] = None) -> Parser:
    """Loads the default Traditional Chinese parser."""
    return load_default_parser("zh-hant", cfg)


def load_default_thai_parser(cfg: Optional[Config] = None) -> Parser:
    """Loads the default Thai parser."""
    return load_default_parser("th", cfg)
