# tests/test_config_manager.py
import json
import logging

import pytest

from affinity_suggester.core.errors import InvalidArgumentError

from affinity_suggester.utils.config_manager import Config


def test_missing_file_writes_defaults(tmp_path):
    path = tmp_path / "suggester.json"
    cfg = Config(str(path))
    assert path.exists()
    assert json.loads(path.read_text(encoding="utf8"))["order"] == 2
    assert cfg.get("threshold") == 0.65


def test_no_autosave_leaves_disk_alone(tmp_path):
    path = tmp_path / "suggester.json"
    cfg = Config(str(path), autosave=False)
    cfg.set("order", 3)
    assert not path.exists()
    assert cfg.get("order") == 3


def test_values_loaded_from_file(tmp_path):
    path = tmp_path / "suggester.json"
    path.write_text(json.dumps({"order": 3, "base_suggestions": ["hi"]}), encoding="utf8")
    cfg = Config(str(path))
    assert cfg.get("order") == 3
    assert cfg.get("base_suggestions") == ["hi"]
    assert cfg.get("threshold") == 0.65


def test_set_coerces_types(tmp_path):
    cfg = Config(str(tmp_path / "c.json"))
    assert cfg.set("order", "4")
    assert cfg.set("threshold", "0.3")
    assert cfg.set("stop_words", "a, an ,the")
    assert cfg.get("order") == 4
    assert cfg.get("threshold") == 0.3
    assert cfg.get("stop_words") == ["a", "an", "the"]
    saved = json.loads((tmp_path / "c.json").read_text(encoding="utf8"))
    assert saved["order"] == 4


def test_unknown_key_rejected(tmp_path, caplog):
    cfg = Config(str(tmp_path / "c.json"))
    with caplog.at_level(logging.WARNING):
        assert cfg.set("colour", "blue") is False
    assert "colour" in caplog.text


def test_invalid_json_keeps_defaults(tmp_path, caplog):
    path = tmp_path / "c.json"
    path.write_text("{not json", encoding="utf8")
    with caplog.at_level(logging.WARNING):
        cfg = Config(str(path))
    assert cfg.get("order") == 2
    assert "unreadable" in caplog.text


def test_to_suggester_config(tmp_path):
    cfg = Config(str(tmp_path / "c.json"))
    cfg.set("order", 3)
    cfg.set("stop_words", ["um"])
    sc = cfg.to_suggester_config()
    assert sc.store.order == 3
    assert sc.store.stop_words == frozenset({"um"})
    assert sc.base_suggestions == ("the", "this", "of")


def test_set_uses_default_type_not_stored_type(tmp_path):
    path = tmp_path / "c.json"
    path.write_text(json.dumps({"threshold": 1}), encoding="utf8")
    cfg = Config(str(path), autosave=False)
    assert cfg.set("threshold", 0.4)
    assert cfg.get("threshold") == 0.4
    assert cfg.to_suggester_config().threshold == 0.4


def test_set_rejects_unconvertible_value(tmp_path, caplog):
    cfg = Config(str(tmp_path / "c.json"), autosave=False)
    with caplog.at_level(logging.WARNING):
        assert cfg.set("order", "three") is False
    assert cfg.get("order") == 2
    assert "bad value" in caplog.text


def test_bad_file_value_is_invalid_argument(tmp_path):
    path = tmp_path / "c.json"
    path.write_text(json.dumps({"threshold": "high"}), encoding="utf8")
    cfg = Config(str(path), autosave=False)
    with pytest.raises(InvalidArgumentError):
        cfg.to_suggester_config()
