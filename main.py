import argparse
import sys
from pathlib import Path

# Add project root to path for robust execution
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from phrasebreak.config import load_config
from phrasebreak.data_validation import validate_phrases
from phrasebreak.io_utils import save_phrases
from phrasebreak.parser import Parser

def main():
    """
    Main command-line interface for the phrasebreak segmenter.

    This script orchestrates phrase segmentation for one sentence or a file of
    sentences. It performs the following steps:
    1.  Loads the configuration file (`config.yaml`) unless an explicit model
        file is given together with a separator.
    2.  Loads the model, either the configured one for `--lang` or the file
        given with `--model` (JSON or a generated `.py` module).
    3.  Reads the input sentences from `--text` or, one per line, from `--input`.
    4.  Parses every sentence into phrases and sanity-checks the result.
    5.  Writes the phrases joined by the separator to `--output` or stdout, and
        optionally a structured JSON copy.
    """
    parser = argparse.ArgumentParser(
        description="Split text without spaces into phrases using a phrasebreak model.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--text",
        help="A sentence to segment."
    )
    source.add_argument(
        "--input",
        help="Path to a UTF-8 text file with one sentence per line."
    )
    parser.add_argument(
        "--lang",
        help="Language whose configured model to use (defaults to default_language in the config)."
    )
    parser.add_argument(
        "--model",
        help="Path to a model file (.json or generated .py). Overrides --lang."
    )
    parser.add_argument(
        "--config",
        default="config.yaml",
        help="Path to the configuration YAML file."
    )
    parser.add_argument(
        "--separator",
        help="String placed between phrases (defaults to the configured separator)."
    )
    parser.add_argument(
        "--output",
        help="Path to write the segmented text. Prints to stdout when omitted."
    )
    parser.add_argument(
        "--save-json",
        action="store_true",
        help="In addition to the text output, save the phrases as JSON next to --output."
    )
    args = parser.parse_args()

    if args.save_json and not args.output:
        parser.error("--save-json requires --output")

    try:
        # 1. Resolve configuration and model
        cfg = None
        if args.model is None or args.separator is None:
            print(f"Loading configuration from {args.config}...", file=sys.stderr)
            cfg = load_config(args.config)

        model_path = Path(args.model) if args.model else cfg.model_path(args.lang)
        separator = args.separator if args.separator is not None else cfg.separator

        print(f"Loading model from {model_path}...", file=sys.stderr)
        segmenter = Parser.load_by_file_name(model_path)

        # 2. Load input sentences
        if args.text is not None:
            sentences = [args.text]
        else:
            print(f"Loading sentences from {args.input}...", file=sys.stderr)
            try:
                with open(args.input, "r", encoding="utf-8") as f:
                    sentences = f.read().splitlines()
            except FileNotFoundError:
                raise FileNotFoundError(f"Input file not found at: {args.input}")

        # 3. Segment
        results = []
        for sentence in sentences:
            phrases = segmenter.parse(sentence)
            report = validate_phrases(sentence, phrases)
            for issue in report["issues"]:
                print(f"Warning: {issue['message']}", file=sys.stderr)
            results.append((sentence, phrases))

        content = "\n".join(separator.join(phrases) for _, phrases in results)

        # 4. Write output
        if args.output:
            output_path = Path(args.output)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, "w", encoding="utf-8") as f:
                f.write(content + "\n")
            print(f"\nSuccessfully wrote {len(results)} segmented sentence(s) to {args.output}", file=sys.stderr)

            if args.save_json:
                json_output_path = output_path.with_suffix(".json")
                save_phrases(json_output_path, results)
                print(f"Successfully wrote phrase JSON to {json_output_path}", file=sys.stderr)
        else:
            print(content)

    except (FileNotFoundError, ValueError, TypeError, KeyError) as e:
        print(f"\nError: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
