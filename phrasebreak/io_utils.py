"""Provides utility functions for loading and saving models and parse results.

Models are stored as JSON objects of the form `{feature_key: {ngram: weight}}`.
`load_model` validates the structure as it reads it and refuses empty models:
a loader that silently returned an empty table would change every
segmentation (the bias drops to zero) without telling the caller.
"""
import json
from pathlib import Path
from typing import Dict, List, Sequence, Tuple, Union

from .weights import compute_total_weight, validate_model


def load_model(path: Union[str, Path]) -> Dict[str, Dict[str, int]]:
    """
    Loads a model from a JSON file.

    Args:
        path: The path to the JSON model file.

    Returns:
        The model as a nested dictionary.

    Raises:
        FileNotFoundError: If the file at the specified path does not exist.
        ValueError: If the file is not valid JSON, names an unknown feature
                    key, or contains no weights at all.
        TypeError: If the JSON structure is not `{feature_key: {ngram: int}}`.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Model file not found at: {path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Error decoding JSON from {path}: {e}")

    try:
        validate_model(data)
    except (TypeError, ValueError) as e:
        raise type(e)(f"Invalid model in {path}: {e}") from e

    if not any(data.values()):
        raise ValueError(f"Model file {path} contains no weights.")

    return data


def save_model(path: Union[str, Path], model: Dict[str, Dict[str, int]]) -> None:
    """
    Saves a model to a JSON file.

    The output keeps non-ASCII n-grams readable and is indented so that model
    diffs stay reviewable.

    Args:
        path: The destination path for the JSON file.
        model: The model to save.
    """
    validate_model(model)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(model, f, ensure_ascii=False, indent=2)


def model_summary(model: Dict[str, Dict[str, int]]) -> Dict[str, int]:
    """Returns entry counts per feature key plus the total weight, for status output."""
    summary = {key: len(entries) for key, entries in model.items()}
    summary["total_weight"] = compute_total_weight(model)
    return summary


def save_phrases(path: Union[str, Path], results: Sequence[Tuple[str, List[str]]]) -> None:
    """
    Saves parse results to a JSON file.

    The root of the JSON is a dictionary with a single key, "sentences",
    holding one `{"input": ..., "phrases": [...]}` object per parsed sentence.

    Args:
        path: The destination path for the JSON file.
        results: Pairs of input sentence and its phrases.
    """
    data = {
        "sentences": [
            {"input": sentence, "phrases": list(phrases)} for sentence, phrases in results
        ]
    }
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
