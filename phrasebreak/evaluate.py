"""Measures how closely a parser reproduces a hand-segmented quality corpus.

A quality corpus is a TSV file whose first line is the header
`# label<TAB>sentence`. Every following line holds a label and a sentence in
which the expected phrase breaks are marked with a separator (`▁` by
default), e.g. `greeting<TAB>今日は▁天気です。`.

The evaluation reports two views of the parser's output:

-   **Exact match accuracy**: the share of sentences whose phrase list equals
    the expected one.
-   **Boundary scores**: micro-averaged precision, recall and F1 over break
    positions, which credit partially correct segmentations.

Every mismatching sentence is listed as a disagreement for error analysis.
"""
from __future__ import annotations
import csv
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Sequence, Set, Union

import pandas as pd
from tqdm import tqdm

from .config import DEFAULT_SEPARATOR
from .parser import Parser

QUALITY_HEADER = "# label\tsentence"


@dataclass(frozen=True)
class QualityCase:
    """
    One labeled sentence from a quality corpus.

    Attributes:
        label: Free-form identifier of the case.
        sentence: The sentence with the break markers removed.
        expected: The expected phrases, in order.
    """
    label: str
    sentence: str
    expected: List[str]


def load_quality_cases(path: Union[str, Path], separator: str = DEFAULT_SEPARATOR) -> List[QualityCase]:
    """
    Loads the cases of a quality corpus.

    Args:
        path: The path to the TSV corpus.
        separator: The marker that separates expected phrases.

    Returns:
        The cases in file order. Blank lines are skipped.

    Raises:
        FileNotFoundError: If the corpus file does not exist.
        ValueError: If the header is missing or a line has no label column.
    """
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            header = f.readline().rstrip("\r\n")
            if header != QUALITY_HEADER:
                raise ValueError(
                    f"Quality corpus {path} must start with the header {QUALITY_HEADER!r}, got {header!r}."
                )
            cases = []
            reader = csv.reader(f, delimiter="\t", quoting=csv.QUOTE_NONE)
            for line_no, row in enumerate(reader, start=2):
                if not row or not any(cell.strip() for cell in row):
                    continue
                if len(row) < 2:
                    raise ValueError(f"Line {line_no} of {path} has no tab-separated sentence column.")
                label, data = row[0], row[1]
                cases.append(QualityCase(
                    label=label,
                    sentence=data.replace(separator, ""),
                    expected=data.split(separator),
                ))
    except FileNotFoundError:
        raise FileNotFoundError(f"Quality corpus not found at: {path}")
    return cases


def break_positions(phrases: Sequence[str]) -> Set[int]:
    """Returns the code-point offsets at which a phrase starts, excluding offset 0."""
    positions = set()
    offset = 0
    for phrase in phrases[:-1]:
        offset += len(phrase)
        positions.add(offset)
    return positions


def _prf(tp: int, fp: int, fn: int) -> Dict[str, float]:
    precision = tp / (tp + fp) if tp + fp else 0.0
    recall = tp / (tp + fn) if tp + fn else 0.0
    f1 = 2 * precision * recall / (precision + recall) if precision + recall else 0.0
    return {"precision": precision, "recall": recall, "f1": f1}


def compare_breaks(expected: Sequence[str], actual: Sequence[str]) -> Dict[str, Any]:
    """
    Compares the break positions of two segmentations of the same sentence.

    Args:
        expected: The reference phrases.
        actual: The phrases produced by the parser.

    Returns:
        A dictionary with the true-positive, false-positive and false-negative
        counts (`tp`, `fp`, `fn`) and the derived `precision`, `recall` and
        `f1`. Undefined ratios are reported as 0.0.
    """
    ref = break_positions(expected)
    gen = break_positions(actual)
    tp = len(ref & gen)
    fp = len(gen - ref)
    fn = len(ref - gen)
    return {"tp": tp, "fp": fp, "fn": fn, **_prf(tp, fp, fn)}


def evaluate_parser(
    parser: Parser, cases: Iterable[QualityCase], show_progress: bool = False
) -> Dict[str, Any]:
    """
    Runs the parser over a quality corpus and scores the results.

    Args:
        parser: The parser to evaluate.
        cases: The labeled cases, e.g. from `load_quality_cases`.
        show_progress: Display a tqdm progress bar while parsing.

    Returns:
        A report dictionary with `case_count`, `exact_match_accuracy`, the
        micro-averaged boundary `scores`, and the list of `disagreements`.

    Raises:
        ValueError: If there are no cases to evaluate.
    """
    cases = list(cases)
    if not cases:
        raise ValueError("No quality cases to evaluate.")

    records = []
    iterator = tqdm(cases, desc="Evaluating") if show_progress else cases
    for case in iterator:
        actual = parser.parse(case.sentence)
        cmp = compare_breaks(case.expected, actual)
        records.append({
            "label": case.label,
            "input": case.sentence,
            "expected": case.expected,
            "actual": actual,
            "exact_match": actual == case.expected,
            "tp": cmp["tp"],
            "fp": cmp["fp"],
            "fn": cmp["fn"],
        })

    df = pd.DataFrame(records)
    totals = df[["tp", "fp", "fn"]].sum()
    tp, fp, fn = int(totals["tp"]), int(totals["fp"]), int(totals["fn"])

    mismatches = df[~df["exact_match"]]
    disagreements = [
        {
            "label": row.label,
            "input": row.input,
            "expected": list(row.expected),
            "actual": list(row.actual),
        }
        for row in mismatches.itertuples(index=False)
    ]

    return {
        "case_count": len(df),
        "exact_match_accuracy": float(df["exact_match"].mean()),
        "scores": {"tp": tp, "fp": fp, "fn": fn, **_prf(tp, fp, fn)},
        "disagreements": disagreements,
    }
