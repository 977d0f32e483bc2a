"""Bakes trained models into importable Python modules.

Loading a JSON model means parsing the file and summing every weight before
the first sentence can be segmented. For deployments that ship a fixed set of
languages, `render_model_module` writes the model out as Python constants
instead: a `MODEL` dictionary literal, the precomputed `TOTAL_WEIGHT`, and a
ready-made `TABLE = EmbeddedWeightTable(MODEL, TOTAL_WEIGHT)`. The table
re-checks the literal total on import, so a stale or hand-edited module fails
loudly instead of skewing scores.

`load_model_module` imports such a generated file by path and returns its
table.
"""
from __future__ import annotations
import importlib.util
from pathlib import Path
from typing import List, Optional, Union

from .types import ModelData
from .weights import EmbeddedWeightTable, compute_total_weight, validate_model


def module_name_for(language: str) -> str:
    """Maps a language code such as "zh-hans" to a module name ("zh_hans")."""
    return language.replace("-", "_").lower()


def render_model_module(model: ModelData, language: Optional[str] = None) -> str:
    """
    Renders a model as the source code of a Python module.

    Feature keys and n-grams keep their insertion order, and every string is
    written with `repr` so that quotes, backslashes and non-printable code
    points survive as valid Python literals.

    Args:
        model: The model to embed.
        language: Optional language code mentioned in the module docstring.

    Returns:
        The module source code.

    Raises:
        TypeError: If the model structure is malformed.
        ValueError: If the model names an unknown feature key or bad n-gram.
    """
    validate_model(model)
    total = compute_total_weight(model)

    title = f"Embedded phrase-break model for {language}." if language else "Embedded phrase-break model."
    lines: List[str] = [
        f'"""{title}',
        "",
        "Generated by phrasebreak.codegen. Do not edit by hand; regenerate from the",
        "JSON model instead.",
        '"""',
        "from phrasebreak.weights import EmbeddedWeightTable",
        "",
        f"TOTAL_WEIGHT = {total}",
        "",
        "MODEL = {",
    ]
    for feature_key, entries in model.items():
        lines.append(f"    {feature_key!r}: {{")
        for ngram, weight in entries.items():
            lines.append(f"        {ngram!r}: {weight},")
        lines.append("    },")
    lines.append("}")
    lines.append("")
    lines.append("TABLE = EmbeddedWeightTable(MODEL, TOTAL_WEIGHT)")
    lines.append("")
    return "\n".join(lines)


def write_model_module(
    path: Union[str, Path], model: ModelData, language: Optional[str] = None
) -> Path:
    """
    Renders a model and writes it to `path`, creating parent directories.

    Returns:
        The path that was written.
    """
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(render_model_module(model, language), encoding="utf-8")
    return out


def load_model_module(path: Union[str, Path]) -> EmbeddedWeightTable:
    """
    Imports a generated model module by path and returns its `TABLE`.

    Args:
        path: The path to a module written by `write_model_module`.

    Returns:
        The module's embedded weight table.

    Raises:
        FileNotFoundError: If the module file does not exist.
        TypeError: If the module does not define an `EmbeddedWeightTable` named `TABLE`.
        ValueError: If the embedded total does not match the embedded weights.
    """
    p = Path(path)
    if not p.is_file():
        raise FileNotFoundError(f"Model module not found at: {p}")

    spec = importlib.util.spec_from_file_location(f"phrasebreak_generated_{module_name_for(p.stem)}", p)
    if spec is None or spec.loader is None:
        raise TypeError(f"Cannot import model module from {p}.")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    table = getattr(module, "TABLE", None)
    if not isinstance(table, EmbeddedWeightTable):
        raise TypeError(f"Model module {p} does not define an EmbeddedWeightTable named TABLE.")
    return table
