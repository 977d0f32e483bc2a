"""phrasebreak: phrase segmentation for scripts written without spaces.

The package splits Japanese, Chinese, Thai and similar text into short
phrases that are safe places for soft line breaks. Each boundary between two
characters is scored independently from a small pretrained weight table; no
dictionary or grammar is involved.

Typical use:

    from phrasebreak import Parser
    parser = Parser.load_by_file_name("models/ja.json")
    parser.parse("今日は天気です。")
"""
from .parser import (
    Parser,
    load_default_parser,
    load_default_japanese_parser,
    load_default_simplified_chinese_parser,
    load_default_traditional_chinese_parser,
    load_default_thai_parser,
)
from .weights import DictWeightTable, EmbeddedWeightTable
from .types import FEATURE_KEYS, WeightTable

__version__ = "0.1.0"

__all__ = [
    "Parser",
    "DictWeightTable",
    "EmbeddedWeightTable",
    "WeightTable",
    "FEATURE_KEYS",
    "load_default_parser",
    "load_default_japanese_parser",
    "load_default_simplified_chinese_parser",
    "load_default_traditional_chinese_parser",
    "load_default_thai_parser",
]
