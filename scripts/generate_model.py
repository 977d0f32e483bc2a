"""Command-line script for baking JSON models into Python modules.

Each configured language's JSON model is rendered with
`phrasebreak.codegen.render_model_module` into `<generated_dir>/<module>.py`,
where the module name is the language code with dashes replaced by
underscores (`zh-hans` -> `zh_hans.py`). The generated modules can be passed
to `main.py --model` or loaded with `Parser.load_by_file_name`.
"""
import argparse
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from tqdm import tqdm

# Add project root to path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from phrasebreak.codegen import module_name_for, write_model_module
from phrasebreak.config import Config, load_config
from phrasebreak.io_utils import load_model, model_summary


def generate_modules(
    cfg: Config, languages: Optional[List[str]] = None, out_dir: Optional[Path] = None
) -> List[Tuple[str, Path]]:
    """
    Renders the JSON model of each requested language into a Python module.

    Args:
        cfg: The configuration naming the model files.
        languages: The languages to render. Defaults to every configured one.
        out_dir: Output directory. Defaults to `cfg.generated_dir`.

    Returns:
        `(language, written_path)` pairs in processing order.

    Raises:
        KeyError: If a requested language has no configured model.
        FileNotFoundError: If a model file is missing.
    """
    langs = languages or list(cfg.models)
    target_dir = Path(out_dir) if out_dir else cfg.generated_dir

    written = []
    for lang in tqdm(langs, desc="Generating models"):
        model_path = cfg.model_path(lang)
        model = load_model(model_path)
        summary = model_summary(model)
        dest = target_dir / f"{module_name_for(lang)}.py"
        write_model_module(dest, model, language=lang)
        print(f"\nwrote {dest} ({summary['total_weight']} total weight, from {model_path.name})")
        written.append((lang, dest))
    return written


def main():
    """
    Main entry point for the model generation script.

    Loads the configuration, then renders every configured language (or only
    those passed with `--lang`) into the generated-model directory.
    """
    parser = argparse.ArgumentParser(
        description="Embed phrasebreak JSON models as Python modules.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument("--config", default="config.yaml", help="Path to the configuration YAML file.")
    parser.add_argument("--lang", action="append", help="Language to generate. Repeat for several; defaults to all configured.")
    parser.add_argument("--out-dir", help="Output directory. Defaults to generated_dir from the config.")
    args = parser.parse_args()

    try:
        cfg = load_config(args.config)
        written = generate_modules(cfg, args.lang, Path(args.out_dir) if args.out_dir else None)
        print(f"\nGenerated {len(written)} model module(s).")
    except (FileNotFoundError, ValueError, TypeError, KeyError) as e:
        print(f"\nError: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
