"""Smoke tests for the CLI entrypoint in ``main.py``.

These tests keep the command-line surface wired up: argument handling, model
resolution through the configuration, and the text/JSON outputs.
"""
from __future__ import annotations

import importlib
import json
import sys
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def restore_argv():
    original = sys.argv[:]
    try:
        yield
    finally:
        sys.argv = original


@pytest.fixture
def main_module():
    return importlib.import_module("main")


@pytest.fixture
def config_path(tmp_path: Path, sample_model_path: Path) -> Path:
    config = tmp_path / "config.yaml"
    config.write_text(
        "model_dir: .\nseparator: \"/\"\n",
        encoding="utf-8",
    )
    return config


def test_main_requires_input_arguments(main_module):
    """Invoking ``main.main`` without a text source exits through argparse."""
    sys.argv = ["main"]
    with pytest.raises(SystemExit):
        main_module.main()


def test_main_segments_text_to_stdout(main_module, config_path: Path, capsys):
    sys.argv = ["main", "--text", "今日は天気です。", "--config", str(config_path)]

    main_module.main()

    assert capsys.readouterr().out.strip() == "今日は/天気です。"


def test_main_uses_explicit_model_and_separator(main_module, sample_model_path: Path, capsys):
    sys.argv = [
        "main",
        "--text",
        "今日は天気です。",
        "--model",
        str(sample_model_path),
        "--separator",
        " | ",
        "--config",
        "does-not-exist.yaml",
    ]

    main_module.main()

    assert capsys.readouterr().out.strip() == "今日は | 天気です。"


def test_main_writes_output_and_json(main_module, tmp_path: Path, config_path: Path):
    input_path = tmp_path / "input.txt"
    input_path.write_text("今日は天気です。\n本を読む。\n", encoding="utf-8")
    output = tmp_path / "out" / "phrases.txt"

    sys.argv = [
        "main",
        "--input",
        str(input_path),
        "--output",
        str(output),
        "--config",
        str(config_path),
        "--save-json",
    ]

    main_module.main()

    assert output.read_text(encoding="utf-8") == "今日は/天気です。\n本を読む。\n"
    data = json.loads(output.with_suffix(".json").read_text(encoding="utf-8"))
    assert data["sentences"][0]["phrases"] == ["今日は", "天気です。"]
    assert data["sentences"][1]["phrases"] == ["本を読む。"]


def test_main_reports_missing_files(main_module, tmp_path: Path, config_path: Path, capsys):
    """The CLI surfaces a helpful error when the input file is absent."""
    sys.argv = [
        "main",
        "--input",
        str(tmp_path / "missing.txt"),
        "--config",
        str(config_path),
    ]

    with pytest.raises(SystemExit) as exc:
        main_module.main()

    assert exc.value.code == 1
    assert "missing.txt" in capsys.readouterr().err


def test_main_reports_unknown_language(main_module, config_path: Path, capsys):
    sys.argv = ["main", "--text", "abc", "--lang", "ko", "--config", str(config_path)]

    with pytest.raises(SystemExit) as exc:
        main_module.main()

    assert exc.value.code == 1
    assert "No model configured for language 'ko'" in capsys.readouterr().err


def test_main_save_json_requires_output(main_module, sample_model_path: Path):
    sys.argv = ["main", "--text", "abc", "--model", str(sample_model_path), "--save-json"]

    with pytest.raises(SystemExit) as exc:
        main_module.main()

    assert exc.value.code == 2
