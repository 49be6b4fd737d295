import json

import pytest

from bothn_server.config import DATA_DIR
from bothn_server.engine.loader import (
    DataLoadError,
    load_abbreviations,
    load_intents,
    load_qa_pairs,
)


def _write(tmp_path, name, payload):
    path = tmp_path / name
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
    return path


def test_load_qa_pairs(tmp_path):
    path = _write(tmp_path, "kb.json", {"qa_pairs": [{"question": "Hỏi?", "answer": "Đáp."}]})
    pairs = load_qa_pairs(path)
    assert [(p.question, p.answer) for p in pairs] == [("Hỏi?", "Đáp.")]


def test_load_intents_without_tag(tmp_path):
    path = _write(
        tmp_path,
        "intents.json",
        {"intents": [{"patterns": ["chào"], "responses": ["Chào!"]}]},
    )
    [intent] = load_intents(path)
    assert intent.tag is None
    assert intent.patterns == ["chào"]


def test_intent_without_responses_is_rejected(tmp_path):
    path = _write(
        tmp_path,
        "intents.json",
        {"intents": [{"tag": "x", "patterns": ["chào"], "responses": []}]},
    )
    with pytest.raises(DataLoadError):
        load_intents(path)


def test_unknown_field_is_rejected(tmp_path):
    path = _write(
        tmp_path,
        "kb.json",
        {"qa_pairs": [{"question": "Hỏi?", "answer": "Đáp.", "extra": 1}]},
    )
    with pytest.raises(DataLoadError):
        load_qa_pairs(path)


def test_malformed_json(tmp_path):
    path = tmp_path / "abbr.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(DataLoadError):
        load_abbreviations(path)


def test_missing_file(tmp_path):
    with pytest.raises(DataLoadError):
        load_qa_pairs(tmp_path / "missing.json")


def test_packaged_data_loads():
    assert len(load_qa_pairs(DATA_DIR / "knowledge_base.json")) > 0
    assert len(load_intents(DATA_DIR / "intents.json")) > 0
    assert load_abbreviations(DATA_DIR / "abbreviations.json")["ko"] == "không"
