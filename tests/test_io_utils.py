import json
from pathlib import Path

import pytest

from phrasebreak.io_utils import load_model, model_summary, save_model, save_phrases


def test_load_model_returns_nested_dict(sample_model_path: Path, sample_model) -> None:
    model = load_model(sample_model_path)

    assert model == sample_model


def test_load_model_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="missing.json"):
        load_model(tmp_path / "missing.json")


def test_load_model_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ValueError, match="Error decoding JSON"):
        load_model(path)


def test_load_model_reports_structure_errors(tmp_path: Path) -> None:
    path = tmp_path / "list.json"
    path.write_text(json.dumps([1, 2, 3]), encoding="utf-8")
    with pytest.raises(TypeError, match="list.json"):
        load_model(path)

    path = tmp_path / "unknown_key.json"
    path.write_text(json.dumps({"ZW1": {"a": 1}}), encoding="utf-8")
    with pytest.raises(ValueError, match="Unknown feature key"):
        load_model(path)

    path = tmp_path / "float.json"
    path.write_text(json.dumps({"UW1": {"a": 0.5}}), encoding="utf-8")
    with pytest.raises(TypeError):
        load_model(path)


@pytest.mark.parametrize("content", [{}, {"UW1": {}, "BW2": {}}])
def test_load_model_rejects_empty_model(tmp_path: Path, content) -> None:
    path = tmp_path / "empty.json"
    path.write_text(json.dumps(content), encoding="utf-8")

    with pytest.raises(ValueError, match="contains no weights"):
        load_model(path)


def test_save_model_round_trips_non_ascii(tmp_path: Path, sample_model) -> None:
    out_path = tmp_path / "out.json"

    save_model(out_path, sample_model)

    text = out_path.read_text(encoding="utf-8")
    assert "日は天" in text
    assert load_model(out_path) == sample_model


def test_save_model_rejects_malformed(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        save_model(tmp_path / "out.json", {"QQ": {"a": 1}})
    assert not (tmp_path / "out.json").exists()


def test_model_summary_counts_entries(sample_model) -> None:
    summary = model_summary(sample_model)

    assert summary["UW3"] == 3
    assert summary["TW4"] == 1
    assert summary["total_weight"] == 174


def test_save_phrases_writes_expected_structure(tmp_path: Path) -> None:
    out_path = tmp_path / "phrases.json"

    save_phrases(out_path, [("今日は天気です。", ["今日は", "天気です。"]), ("", [])])

    data = json.loads(out_path.read_text(encoding="utf-8"))

    assert data["sentences"][0] == {"input": "今日は天気です。", "phrases": ["今日は", "天気です。"]}
    assert data["sentences"][1] == {"input": "", "phrases": []}
