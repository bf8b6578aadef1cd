from __future__ import annotations

import json
from pathlib import Path

import pytest

from jsonpo import io_utils


def test_read_json_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="input not found"):
        io_utils.read_json(tmp_path / "missing.json", "input")


def test_read_json_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{", encoding="utf-8")
    with pytest.raises(ValueError, match="not valid JSON"):
        io_utils.read_json(path, "input")


def test_read_json_requires_object(tmp_path: Path) -> None:
    path = tmp_path / "list.json"
    path.write_text("[]", encoding="utf-8")
    with pytest.raises(ValueError, match="must be a JSON object"):
        io_utils.read_json(path, "input")


def test_render_json_keeps_order_and_unicode() -> None:
    text = io_utils.render_json({"b": "金鑰", "a": 1})
    assert text == '{\n  "b": "金鑰",\n  "a": 1\n}\n'


def test_write_text_atomic_replaces_file(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "out.json"
    io_utils.write_text_atomic(path, "first\n")
    io_utils.write_text_atomic(path, json.dumps({"x": 1}))
    assert json.loads(path.read_text(encoding="utf-8")) == {"x": 1}
    assert sorted(p.name for p in path.parent.iterdir()) == ["out.json"]
