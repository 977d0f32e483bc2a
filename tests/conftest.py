"""Test configuration helpers for ensuring local imports resolve."""
from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest


def _ensure_project_root_on_path() -> None:
    project_root = Path(__file__).resolve().parents[1]
    if str(project_root) not in sys.path:
        sys.path.insert(0, str(project_root))


_ensure_project_root_on_path()


# A hand-made model touching every feature family. The weights are arbitrary
# but chosen so that several boundaries in the sample sentences break.
SAMPLE_MODEL = {
    "UW3": {"は": 40, "を": 35, "。": 20},
    "UW4": {"天": 15, "本": 10},
    "UW5": {"気": 5},
    "BW2": {"は天": 30, "を読": 25},
    "BW3": {"です": -10},
    "TW2": {"日は天": 12},
    "TW4": {"本を読": -8},
}


@pytest.fixture
def sample_model() -> dict:
    return json.loads(json.dumps(SAMPLE_MODEL))


@pytest.fixture
def sample_model_path(tmp_path: Path, sample_model: dict) -> Path:
    path = tmp_path / "ja.json"
    path.write_text(json.dumps(sample_model, ensure_ascii=False), encoding="utf-8")
    return path
