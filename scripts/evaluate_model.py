"""Command-line script for evaluating a model against a quality corpus.

This script compares the parser's output with hand-segmented reference
sentences and prints exact-match accuracy together with boundary precision,
recall and F1 (see `phrasebreak.evaluate`). It can also write every
disagreeing sentence to a CSV file, which is the quickest way to see where a
model's breaks drift from the reference.
"""
import argparse
import csv
import json
import sys
from pathlib import Path

# Add project root to path to allow for package imports
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from phrasebreak.config import load_config
from phrasebreak.evaluate import evaluate_parser, load_quality_cases
from phrasebreak.parser import Parser


def write_disagreements(path: Path, disagreements: list, separator: str) -> None:
    """Writes disagreements as CSV, joining phrase lists with `separator`."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=["label", "input", "expected", "actual"])
        writer.writeheader()
        for d in disagreements:
            writer.writerow({
                "label": d["label"],
                "input": d["input"],
                "expected": separator.join(d["expected"]),
                "actual": separator.join(d["actual"]),
            })


def main():
    """
    Main entry point for the command-line model evaluation script.

    1.  Loads the configuration and the model for `--lang` (or `--model`).
    2.  Loads the quality corpus.
    3.  Parses every case and prints the comparison metrics.
    4.  Optionally writes the disagreements to CSV.
    """
    parser = argparse.ArgumentParser(
        description="Evaluate phrase segmentation against a quality corpus.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument("--corpus", required=True, help="Path to the quality corpus TSV file.")
    parser.add_argument("--config", default="config.yaml", help="Path to the configuration YAML file.")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--lang", help="Language whose configured model to evaluate.")
    group.add_argument("--model", help="Path to a model file (.json or generated .py).")
    parser.add_argument("--disagreements-out", help="Optional: Path to write a disagreements CSV file.")
    args = parser.parse_args()

    try:
        print("Loading files...")
        cfg = load_config(args.config)
        model_path = Path(args.model) if args.model else cfg.model_path(args.lang)
        segmenter = Parser.load_by_file_name(model_path)
        cases = load_quality_cases(args.corpus, cfg.quality_separator)
        print(f"Loaded {len(cases)} cases from {args.corpus}")

        report = evaluate_parser(segmenter, cases, show_progress=True)

        print("\n--- Comparison Metrics (vs. Reference) ---")
        print(f"Exact match accuracy: {report['exact_match_accuracy']:.2%}")
        print(json.dumps(report["scores"], indent=2))

        if args.disagreements_out and report["disagreements"]:
            out = Path(args.disagreements_out)
            print(f"\nWriting {len(report['disagreements'])} disagreements to {out}...")
            write_disagreements(out, report["disagreements"], cfg.quality_separator)

    except (FileNotFoundError, ValueError, TypeError, KeyError) as e:
        print(f"\nError: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
