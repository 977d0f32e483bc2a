import ast
from pathlib import Path

import pytest

from phrasebreak.codegen import (
    load_model_module,
    module_name_for,
    render_model_module,
    write_model_module,
)
from phrasebreak.types import FEATURE_KEYS
from phrasebreak.weights import DictWeightTable, EmbeddedWeightTable


def test_render_model_module_embeds_total_and_entries(sample_model):
    source = render_model_module(sample_model, language="ja")

    tree = ast.parse(source)
    assigned = {
        node.targets[0].id: node.value
        for node in tree.body
        if isinstance(node, ast.Assign)
    }

    assert ast.literal_eval(assigned["TOTAL_WEIGHT"]) == 174
    assert ast.literal_eval(assigned["MODEL"]) == sample_model
    assert "for ja" in ast.get_docstring(tree)


def test_render_preserves_key_order(sample_model):
    source = render_model_module(sample_model)

    positions = [source.index(f"'{key}'") for key in sample_model]

    assert positions == sorted(positions)


def test_render_escapes_awkward_ngrams(tmp_path: Path):
    model = {"UW1": {"'": 3, '"': 4, "\\": 5, "\n": 6}, "BW2": {"'\"": -2}}

    table = load_model_module(write_model_module(tmp_path / "quotes.py", model))

    assert table.score("UW1", "'") == 3
    assert table.score("UW1", '"') == 4
    assert table.score("UW1", "\\") == 5
    assert table.score("UW1", "\n") == 6
    assert table.score("BW2", "'\"") == -2
    assert table.total_weight() == 16


def test_generated_table_is_equivalent_to_dict_table(tmp_path: Path, sample_model):
    path = write_model_module(tmp_path / "nested" / "ja.py", sample_model, language="ja")
    embedded = load_model_module(path)
    runtime = DictWeightTable(sample_model)

    assert path.exists()
    assert isinstance(embedded, EmbeddedWeightTable)
    assert embedded.total_weight() == runtime.total_weight()
    for key in FEATURE_KEYS:
        for ngram in ("は", "を", "。", "天", "気", "は天", "を読", "です", "日は天", "本を読", "?"):
            assert embedded.score(key, ngram) == runtime.score(key, ngram)


def test_render_rejects_malformed_model():
    with pytest.raises(ValueError):
        render_model_module({"UW9": {"a": 1}})


def test_load_model_module_rejects_tampered_total(tmp_path: Path, sample_model):
    path = write_model_module(tmp_path / "ja.py", sample_model)
    source = path.read_text(encoding="utf-8").replace("TOTAL_WEIGHT = 174", "TOTAL_WEIGHT = 999")
    path.write_text(source, encoding="utf-8")

    with pytest.raises(ValueError, match="does not match"):
        load_model_module(path)


def test_load_model_module_requires_table(tmp_path: Path):
    path = tmp_path / "not_a_model.py"
    path.write_text("MODEL = {}\n", encoding="utf-8")

    with pytest.raises(TypeError, match="TABLE"):
        load_model_module(path)


def test_load_model_module_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_model_module(tmp_path / "absent.py")


@pytest.mark.parametrize(
    "language, expected",
    [("ja", "ja"), ("zh-hans", "zh_hans"), ("zh-Hant", "zh_hant")],
)
def test_module_name_for(language, expected):
    assert module_name_for(language) == expected
