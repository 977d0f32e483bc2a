"""Manages the loading and validation of application configuration.

This module defines the `Config` dataclass, a typed container for the settings
shared by the command-line tools: where the trained models live, which model
file belongs to which language, and how phrases are separated on output. The
`load_config` function reads these settings from a `config.yaml` file and
fills in defaults for anything left out.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Union

import yaml

DEFAULT_SEPARATOR = "▁"

DEFAULT_MODELS: Dict[str, str] = {
    "ja": "ja.json",
    "zh-hans": "zh-hans.json",
    "zh-hant": "zh-hant.json",
    "th": "th.json",
}


@dataclass
class Config:
    """
    A typed configuration object for the phrase-break tools.

    Attributes:
        model_dir: Directory holding the JSON model files.
        generated_dir: Directory where generated model modules are written.
        default_language: The language used when none is requested explicitly.
        models: Maps a language code to its model file name inside `model_dir`.
        separator: The string placed between phrases in CLI output.
        quality_separator: The break marker used by quality corpus files.
    """
    model_dir: Path
    generated_dir: Path
    default_language: str = "ja"
    models: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_MODELS))
    separator: str = DEFAULT_SEPARATOR
    quality_separator: str = DEFAULT_SEPARATOR

    def model_path(self, language: Optional[str] = None) -> Path:
        """
        Resolves the model file for a language.

        Args:
            language: The language code. Defaults to `default_language`.

        Returns:
            The path of the language's model file.

        Raises:
            KeyError: If no model is configured for the language.
        """
        lang = language or self.default_language
        if lang not in self.models:
            raise KeyError(
                f"No model configured for language '{lang}'. Available: {', '.join(sorted(self.models))}"
            )
        return self.model_dir / self.models[lang]


def default_config(base_dir: Union[str, Path] = ".") -> Config:
    """Builds the default configuration with directories relative to `base_dir`."""
    base = Path(base_dir)
    return Config(model_dir=base / "models", generated_dir=base / "generated")


def load_config(path: str = "config.yaml") -> Config:
    """
    Loads and validates the configuration file into a `Config` object.

    Relative directories in the file are resolved against the directory that
    contains the file, so the tools behave the same from any working
    directory.

    Args:
        path: The path to the `config.yaml` file.

    Returns:
        A fully populated `Config` object.

    Raises:
        FileNotFoundError: If the configuration file cannot be found.
        ValueError: If the YAML cannot be parsed or a value has the wrong shape.
        TypeError: If the root of the YAML file is not a dictionary.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            y = yaml.safe_load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Configuration file not found at: {path}")
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML file at {path}: {e}")

    # An empty file parses to None; treat it as "all defaults".
    if y is None:
        y = {}
    if not isinstance(y, dict):
        raise TypeError(f"Configuration file {path} must be a dictionary.")

    base_dir = Path(path).parent
    cfg = default_config(base_dir)

    models_yaml = y.get("models")
    if models_yaml is not None:
        if not isinstance(models_yaml, dict):
            raise ValueError(f"'models' in {path} must map language codes to file names.")
        cfg.models = {str(k): str(v) for k, v in models_yaml.items()}

    if "model_dir" in y:
        cfg.model_dir = base_dir / str(y["model_dir"])
    if "generated_dir" in y:
        cfg.generated_dir = base_dir / str(y["generated_dir"])

    cfg.default_language = str(y.get("default_language", cfg.default_language))
    cfg.separator = str(y.get("separator", cfg.separator))
    cfg.quality_separator = str(y.get("quality_separator", cfg.quality_separator))

    if not cfg.quality_separator:
        raise ValueError(f"'quality_separator' in {path} must not be empty.")
    if cfg.default_language not in cfg.models:
        print(
            f"[CONFIG] Warning: default_language '{cfg.default_language}' has no entry under 'models'."
        )

    return cfg
